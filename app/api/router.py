from fastapi import APIRouter

from app.api.v1 import analytics, commits, webhooks

api_router = APIRouter(prefix="/api/v1")

api_router.include_router(webhooks.router)
api_router.include_router(commits.router)
api_router.include_router(analytics.router)
