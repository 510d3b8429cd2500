"""Logo service: the interface the endpoints depend on and its SQL implementation."""

import logging
from datetime import UTC, datetime
from typing import Protocol

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from storefront_logo.core.config import settings
from storefront_logo.core.messages import MessageKey, translate
from storefront_logo.models.logo import Logo
from storefront_logo.schemas.logo import FontInfo, LogoRequest, LogoSchema
from storefront_logo.services.results import LogoErrorKind, LogoResult

logger = logging.getLogger(__name__)

DEFAULT_LOGO_TEXT = "SheIn"


class LogoService(Protocol):
    async def get_current_logo(self) -> LogoResult: ...

    async def update_logo(self, request: LogoRequest) -> LogoResult: ...

    async def get_available_fonts(self) -> list[FontInfo]: ...

    async def get_logo_history(self) -> list[LogoSchema]: ...


def _font(name: str, display_name: str, category: str) -> FontInfo:
    return FontInfo(name=name, display_name=display_name, category=category)


DEFAULT_FONTS: tuple[FontInfo, ...] = (
    # Chinese
    _font("SimSun", "宋体", "chinese"),
    _font("SimHei", "黑体", "chinese"),
    _font("Microsoft YaHei", "微软雅黑", "chinese"),
    _font("KaiTi", "楷体", "chinese"),
    _font("FangSong", "仿宋", "chinese"),
    _font("LiSu", "隶书", "chinese"),
    _font("YouYuan", "幼圆", "chinese"),
    _font("STXihei", "华文细黑", "chinese"),
    # English
    _font("Arial", "Arial", "english"),
    _font("Helvetica", "Helvetica", "english"),
    _font("Times New Roman", "Times New Roman", "english"),
    _font("Georgia", "Georgia", "english"),
    _font("Verdana", "Verdana", "english"),
    _font("Trebuchet MS", "Trebuchet MS", "english"),
    _font("Courier New", "Courier New", "english"),
    _font("Impact", "Impact", "english"),
    _font("Comic Sans MS", "Comic Sans MS", "english"),
    _font("Tahoma", "Tahoma", "english"),
    # Artistic
    _font("Brush Script MT", "毛笔字体", "artistic"),
    _font("Lucida Handwriting", "手写体", "artistic"),
    _font("Chiller", "恐怖字体", "artistic"),
    _font("Jokerman", "小丑字体", "artistic"),
)


def default_logo() -> LogoSchema:
    """Built-in logo served when nothing has been configured yet."""
    return LogoSchema(
        id=1,
        type="text",
        text=DEFAULT_LOGO_TEXT,
        font_family="Arial",
        font_size=24,
        color="#007AFF",
        font_weight=700,
        width=150,
        height=50,
        is_active=True,
    )


class SqlLogoService:
    """LogoService backed by the ``logos`` table.

    Storage errors are logged and reported as ``rejected`` results; anything
    else propagates to the caller.
    """

    def __init__(self, db: AsyncSession, locale: str = "en"):
        self.db = db
        self.locale = locale

    def _msg(self, key: MessageKey) -> str:
        return translate(key, self.locale)

    async def get_current_logo(self) -> LogoResult:
        try:
            result = await self.db.execute(
                select(Logo).where(Logo.is_active.is_(True)).order_by(Logo.id.desc()).limit(1)
            )
            current = result.scalar_one_or_none()
        except SQLAlchemyError:
            logger.exception("Error getting current logo")
            await self.db.rollback()
            return LogoResult.fail(LogoErrorKind.REJECTED, self._msg(MessageKey.GET_LOGO_FAILED))

        if current is not None:
            logo = LogoSchema.model_validate(current)
        elif settings.LOGO_DEFAULT_FALLBACK:
            logo = default_logo()
        else:
            return LogoResult.fail(LogoErrorKind.NOT_FOUND, self._msg(MessageKey.LOGO_NOT_FOUND))

        return LogoResult.ok(self._msg(MessageKey.GET_LOGO_OK), logo)

    async def update_logo(self, request: LogoRequest) -> LogoResult:
        now = datetime.now(UTC)
        try:
            # Only one logo is active at a time
            await self.db.execute(
                update(Logo).where(Logo.is_active.is_(True)).values(is_active=False)
            )
            logo = Logo(
                type=request.type,
                text=request.text or "",
                image_url=request.image_url or "",
                font_family=request.font_family,
                font_size=request.font_size,
                color=request.color,
                font_weight=request.font_weight,
                text_effect=request.text_effect,
                layout=request.layout,
                spacing=request.spacing,
                alignment=request.alignment,
                width=request.width,
                height=request.height,
                name=request.name,
                is_active=True,
                created_time=now,
                updated_time=now,
            )
            self.db.add(logo)
            await self.db.flush()
            await self.db.refresh(logo)
            await self.db.commit()
        except SQLAlchemyError:
            logger.exception("Error updating logo")
            await self.db.rollback()
            return LogoResult.fail(
                LogoErrorKind.REJECTED, self._msg(MessageKey.UPDATE_LOGO_FAILED)
            )

        logger.info("Logo %s activated (type=%s)", logo.id, logo.type)
        return LogoResult.ok(self._msg(MessageKey.UPDATE_LOGO_OK), LogoSchema.model_validate(logo))

    async def get_available_fonts(self) -> list[FontInfo]:
        return [font for font in DEFAULT_FONTS if font.is_available]

    async def get_logo_history(self) -> list[LogoSchema]:
        try:
            result = await self.db.execute(
                select(Logo).order_by(Logo.updated_time.desc(), Logo.id.desc())
            )
        except SQLAlchemyError:
            logger.exception("Error getting logo history")
            await self.db.rollback()
            return []
        return [LogoSchema.model_validate(row) for row in result.scalars().all()]
