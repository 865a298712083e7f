from fastapi import APIRouter
from . import auth, users, love_requests

api_router = APIRouter()

api_router.include_router(auth.router, tags=["auth"])
api_router.include_router(users.router, tags=["users"])
api_router.include_router(love_requests.router, tags=["love requests"])
