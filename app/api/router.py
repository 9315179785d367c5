from fastapi import APIRouter
from app.core import settings
from app.api.endpoints import user_controller as user

api_router = APIRouter(prefix=settings.API_V1_STR)

api_router.include_router(user.router, prefix="/users", tags=["Users"])
