from fastapi import APIRouter

from app.api.v1.prompt_generator import router as prompt_generator_router

api_v1_router = APIRouter(prefix="/api/v1")
api_v1_router.include_router(prompt_generator_router)
