"""Shape and range checks for LogoRequest, first violation wins."""

from storefront_logo.core.messages import MessageKey, translate
from storefront_logo.schemas.logo import LogoRequest
from storefront_logo.services.results import LogoErrorKind, LogoResult

WIDTH_RANGE = (50, 300)
HEIGHT_RANGE = (20, 100)
FONT_SIZE_RANGE = (12, 48)
FONT_WEIGHT_RANGE = (100, 900)


def _in_range(value: int, bounds: tuple[int, int]) -> bool:
    low, high = bounds
    return low <= value <= high


def _first_violation(request: LogoRequest) -> MessageKey | None:
    if not request.type:
        return MessageKey.TYPE_REQUIRED
    if request.type == "text" and not request.text:
        return MessageKey.TEXT_REQUIRED
    if request.type == "image" and not request.image_url:
        return MessageKey.IMAGE_REQUIRED
    if request.type == "combined" and (not request.text or not request.image_url):
        return MessageKey.COMBINED_REQUIRED
    if not (_in_range(request.width, WIDTH_RANGE) and _in_range(request.height, HEIGHT_RANGE)):
        return MessageKey.SIZE_OUT_OF_RANGE
    if not _in_range(request.font_size, FONT_SIZE_RANGE):
        return MessageKey.FONT_SIZE_OUT_OF_RANGE
    if not _in_range(request.font_weight, FONT_WEIGHT_RANGE):
        return MessageKey.FONT_WEIGHT_OUT_OF_RANGE
    return None


def validate_logo_request(request: LogoRequest, locale: str) -> LogoResult | None:
    """Return a validation failure for the first violated rule, or None."""
    key = _first_violation(request)
    if key is None:
        return None
    return LogoResult.fail(LogoErrorKind.VALIDATION, translate(key, locale))
