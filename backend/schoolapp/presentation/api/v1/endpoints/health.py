"""Health check endpoint — reports app version and database reachability."""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from schoolapp.config import get_settings
from schoolapp.infrastructure.database.session import get_db_session

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(session: AsyncSession = Depends(get_db_session)) -> dict:
    """Returns the current application health status."""
    settings = get_settings()
    try:
        await session.execute(text("SELECT 1"))
        database = "up"
    except SQLAlchemyError as exc:
        logger.warning("Database health check failed: %s", exc)
        database = "down"
    return {
        "status": "healthy" if database == "up" else "degraded",
        "version": settings.app_version,
        "environment": settings.app_env,
        "database": database,
    }
