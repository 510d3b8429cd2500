"""Health check endpoint."""

from fastapi import APIRouter
from sqlalchemy import text

from storefront_logo import __version__
from storefront_logo.db.session import engine

router = APIRouter()


@router.get("/health")
async def health_check():
    """Check DB connectivity."""
    db_status = "ok"

    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception:
        db_status = "error"

    return {
        "status": "ok" if db_status == "ok" else "degraded",
        "db": db_status,
        "version": __version__,
    }
