"""Aggregate all v1 API routers."""

from fastapi import APIRouter
from file_converter.api.v1.health import router as health_router
from file_converter.api.v1.actions import router as actions_router

v1_router = APIRouter(prefix="/api/v1")
v1_router.include_router(health_router, tags=["health"])
v1_router.include_router(actions_router, tags=["actions"])
