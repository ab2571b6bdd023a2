from fastapi import APIRouter

from .endpoints import getter

api_router = APIRouter()
api_router.include_router(getter.router, prefix="/getter")
