import smtplib
from datetime import datetime
from email.mime.text import MIMEText
from email.mime.multipart import MIMEMultipart
from typing import Optional
import logging

from matchmate.core.config import settings
from matchmate.core.exceptions import EmailDeliveryError

logger = logging.getLogger(__name__)

class EmailService:
    def __init__(self):
        self.smtp_server = settings.smtp_server
        self.smtp_port = settings.smtp_port
        self.smtp_username = settings.smtp_username
        self.smtp_password = settings.smtp_password
        self.use_tls = settings.smtp_use_tls
        self.from_email = settings.from_email

    def send_email(self, to_email: str, subject: str, html_body: str, body: Optional[str] = None) -> None:
        """Send an HTML email, raising EmailDeliveryError if SMTP fails"""
        msg = MIMEMultipart('alternative')
        msg['Subject'] = subject
        msg['From'] = self.from_email
        msg['To'] = to_email
        if body:
            msg.attach(MIMEText(body, 'plain'))
        msg.attach(MIMEText(html_body, 'html'))

        try:
            with smtplib.SMTP(self.smtp_server, self.smtp_port) as server:
                if self.use_tls:
                    server.starttls()
                if self.smtp_username and self.smtp_password:
                    server.login(self.smtp_username, self.smtp_password)
                server.send_message(msg)
        except (smtplib.SMTPException, OSError) as e:
            logger.error(f"Failed to send email to {to_email}: {str(e)}")
            raise EmailDeliveryError(f"Could not deliver email to {to_email}") from e

        logger.info(f"Email sent successfully to {to_email}")

    def send_verification_email(self, to_email: str, first_name: str, verify_url: str) -> None:
        """Welcome email sent right after signup"""
        subject = "Kindly verify your email."
        text_body = f"""
Hi {first_name},

Welcome to MatchMate! Verify your email address to start matching:

{verify_url}

If you didn't sign up for MatchMate, you can safely ignore this email.
        """.strip()
        html_body = f"""
        <div style="font-family: Arial, sans-serif; background-color: #fff0f0; padding: 20px; text-align: center; border-radius: 10px;">
            <h2 style="color: #e63946;">Welcome to MatchMate, {first_name}!</h2>
            <p style="color: #333; font-size: 16px;">
                You've taken the first step toward finding meaningful connections.
                To unlock the full experience, verify your email by clicking the button below:
            </p>
            <a href="{verify_url}"
               style="display: inline-block; padding: 12px 24px; font-size: 18px;
                      background-color: #e63946; color: white; text-decoration: none; border-radius: 5px; font-weight: bold;">
                Verify Your Email
            </a>
            <p style="color: #555; font-size: 14px;">If you didn't sign up for MatchMate, you can safely ignore this email.</p>
            <hr style="border: none; border-top: 1px solid #ddd; margin: 20px 0;">
            <p style="color: #777; font-size: 14px;">&copy; {datetime.now().year} MatchMate. Where love begins.</p>
        </div>
        """
        self.send_email(to_email, subject, html_body, text_body)

    def send_renewed_link_email(self, to_email: str, first_name: str, verify_url: str) -> None:
        """Sent when a verification link is followed after it has expired"""
        subject = "Verify Your MatchMate Account"
        html_body = f"""
        <div style="text-align: center; padding: 20px; font-family: Arial, sans-serif;">
            <h2 style="color: #e63946;">Hello, {first_name}!</h2>
            <p>Your previous verification link has expired, so here is a new one.</p>
            <p>Click the button below to verify your email and start your journey.</p>
            <a href="{verify_url}"
               style="background-color: #e63946; color: white; padding: 12px 24px; text-decoration: none;
                      font-size: 16px; font-weight: bold; border-radius: 8px; display: inline-block;">
                Verify My Email
            </a>
        </div>
        """
        self.send_email(to_email, subject, html_body)

    def send_reverification_email(self, to_email: str, first_name: str, verify_url: str) -> None:
        """Sent on an explicit request for a new verification link"""
        subject = "Verify Your Email Again - MatchMate"
        html_body = f"""
        <html>
            <body style="font-family: Arial, sans-serif; background-color: #fff0f5; text-align: center; padding: 50px;">
                <h2 style="color: #e63946;">Verify Your MatchMate Account</h2>
                <p>Hello {first_name},</p>
                <p>Click the button below to verify your email and start your love journey!</p>
                <a href="{verify_url}"
                   style="display: inline-block; padding: 12px 25px; background-color: #e63946; color: white;
                          text-decoration: none; border-radius: 50px; font-weight: bold; font-size: 18px;">
                    Verify My Email
                </a>
                <p style="margin-top: 20px; font-size: 14px; color: #888;">&copy; {datetime.now().year} MatchMate. All rights reserved.</p>
            </body>
        </html>
        """
        self.send_email(to_email, subject, html_body)
