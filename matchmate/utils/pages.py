from html import escape


def render_verified_page(first_name: str, redirect_url: str, countdown: int = 10) -> str:
    """Landing page shown after a successful email verification.

    Counts down client-side, then redirects to the login screen.
    """
    name = escape(first_name)
    url = escape(redirect_url, quote=True)
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Email Verified - MatchMate</title>
    <style>
        body {{ font-family: 'Arial', sans-serif; background-color: #ffe6e6; text-align: center; padding: 50px; }}
        .container {{ background: white; padding: 20px; border-radius: 10px; box-shadow: 0 0 10px rgba(0, 0, 0, 0.1); display: inline-block; }}
        h2 {{ color: #e63946; }}
        p {{ font-size: 16px; color: #333; }}
        a {{ display: inline-block; padding: 12px 24px; background-color: #e63946; color: white; text-decoration: none; border-radius: 8px; margin-top: 20px; font-size: 16px; }}
    </style>
</head>
<body>
    <div class="container">
        <h2>Welcome to MatchMate, {name}!</h2>
        <p>Your email has been verified! You're now ready to explore meaningful connections.</p>
        <p>You will be redirected to the login page in <span id="countdown">{countdown}</span> seconds.</p>
        <a href="{url}">Go to Login</a>
    </div>
    <script>
        let countdown = {countdown};
        const countdownElement = document.getElementById('countdown');
        setInterval(() => {{
            if (countdown > 0) {{
                countdown--;
                countdownElement.textContent = countdown;
            }} else {{
                window.location.href = "{url}";
            }}
        }}, 1000);
    </script>
</body>
</html>"""
