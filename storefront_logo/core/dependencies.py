"""FastAPI dependency chain: DB session → locale → logo service."""

from collections.abc import AsyncGenerator

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from storefront_logo.core.messages import resolve_locale
from storefront_logo.db.session import async_session_factory
from storefront_logo.services.logo_service import LogoService, SqlLogoService


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield an async DB session. Commits on success, rolls back on error."""
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def get_locale(accept_language: str | None = Header(None)) -> str:
    """Resolve the response locale from the Accept-Language header."""
    return resolve_locale(accept_language)


async def get_logo_service(
    db: AsyncSession = Depends(get_db),
    locale: str = Depends(get_locale),
) -> LogoService:
    """Compose the logo service for this request. Override in tests."""
    return SqlLogoService(db, locale)
