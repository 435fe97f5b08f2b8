from fastapi import APIRouter

from telegate.api.routes import webhook
from telegate.api.routes.system import router as system_router


def build_api_router(*, webhook_path: str) -> APIRouter:
    api_router = APIRouter()
    api_router.include_router(system_router)
    api_router.include_router(webhook.build_router(webhook_path))
    return api_router
