from fastapi import APIRouter
from toolbridge.api.routes import commands, context, health, tools

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(tools.router, prefix="/tools", tags=["tools"])
api_router.include_router(context.router, prefix="/context", tags=["context"])
api_router.include_router(commands.router, prefix="/commands", tags=["commands"])
