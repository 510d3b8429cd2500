"""Logo configuration endpoints (current / update / fonts / history / preview).

Service calls are wrapped so every failure leaves this module as a result
with an error kind; ``status_for`` turns that into the HTTP status. Unexpected
faults are logged and answered with a generic message only.
"""

import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse

from storefront_logo.core.dependencies import get_locale, get_logo_service
from storefront_logo.core.messages import MessageKey, translate
from storefront_logo.schemas.logo import (
    DEFAULT_COLOR,
    DEFAULT_FONT_FAMILY,
    DEFAULT_FONT_SIZE,
    DEFAULT_FONT_WEIGHT,
    DEFAULT_LAYOUT,
    FontInfo,
    LogoPreview,
    LogoRequest,
    LogoResponse,
    LogoSchema,
)
from storefront_logo.services.logo_service import LogoService
from storefront_logo.services.logo_validation import validate_logo_request
from storefront_logo.services.results import LogoErrorKind, LogoResult, status_for

logger = logging.getLogger(__name__)

router = APIRouter()

T = TypeVar("T")


def _request_id(request: Request) -> str | None:
    return getattr(request.state, "request_id", None)


def _internal_error(locale: str) -> LogoResult:
    return LogoResult.fail(LogoErrorKind.INTERNAL, translate(MessageKey.INTERNAL_ERROR, locale))


def _result_response(result: LogoResult) -> JSONResponse:
    return JSONResponse(
        status_code=status_for(result),
        content=result.to_response().model_dump(mode="json", by_alias=True),
    )


async def _call_service(
    request: Request,
    locale: str,
    action: str,
    call: Callable[[], Awaitable[LogoResult]],
) -> LogoResult:
    try:
        return await call()
    except Exception:
        logger.exception("Error %s (request_id=%s)", action, _request_id(request))
        return _internal_error(locale)


async def _list_or_error(
    request: Request,
    locale: str,
    action: str,
    call: Callable[[], Awaitable[list[T]]],
) -> list[T] | JSONResponse:
    try:
        return await call()
    except Exception:
        logger.exception("Error %s (request_id=%s)", action, _request_id(request))
        result = _internal_error(locale)
        return JSONResponse(status_code=status_for(result), content=result.message)


@router.get(
    "/current",
    response_model=LogoSchema,
    responses={400: {"model": LogoResponse}, 404: {"model": LogoResponse}},
)
async def get_current_logo(
    request: Request,
    service: LogoService = Depends(get_logo_service),
    locale: str = Depends(get_locale),
):
    """Return the active logo. Failures carry the full LogoResponse payload."""
    result = await _call_service(
        request, locale, "getting current logo", service.get_current_logo
    )
    if result.success and result.logo is not None:
        return JSONResponse(content=result.logo.model_dump(mode="json", by_alias=True))
    return _result_response(result)


@router.post(
    "/update",
    response_model=LogoResponse,
    responses={400: {"model": LogoResponse}},
)
async def update_logo(
    request: Request,
    body: LogoRequest,
    service: LogoService = Depends(get_logo_service),
    locale: str = Depends(get_locale),
):
    """Validate the logo configuration and make it the active logo."""
    rejected = validate_logo_request(body, locale)
    if rejected is not None:
        return _result_response(rejected)

    result = await _call_service(
        request, locale, "updating logo", lambda: service.update_logo(body)
    )
    return _result_response(result)


@router.get("/fonts", response_model=list[FontInfo])
async def get_available_fonts(
    request: Request,
    service: LogoService = Depends(get_logo_service),
    locale: str = Depends(get_locale),
):
    return await _list_or_error(
        request, locale, "getting available fonts", service.get_available_fonts
    )


@router.get("/history", response_model=list[LogoSchema])
async def get_logo_history(
    request: Request,
    service: LogoService = Depends(get_logo_service),
    locale: str = Depends(get_locale),
):
    """All saved logos, most recently updated first."""
    return await _list_or_error(
        request, locale, "getting logo history", service.get_logo_history
    )


@router.get("/preview", response_model=LogoPreview)
async def preview_logo(
    logo_type: str = Query(..., alias="type"),
    text: str | None = Query(None),
    image_url: str | None = Query(None, alias="imageUrl"),
    font_family: str = Query(DEFAULT_FONT_FAMILY, alias="fontFamily"),
    font_size: int = Query(DEFAULT_FONT_SIZE, alias="fontSize"),
    color: str = Query(DEFAULT_COLOR),
    font_weight: int = Query(DEFAULT_FONT_WEIGHT, alias="fontWeight"),
    layout: str = Query(DEFAULT_LAYOUT),
) -> LogoPreview:
    """Echo a hypothetical logo configuration back without saving it."""
    return LogoPreview(
        type=logo_type,
        text=text,
        image_url=image_url,
        font_family=font_family,
        font_size=font_size,
        color=color,
        font_weight=font_weight,
        layout=layout,
    )
