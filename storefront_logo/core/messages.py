"""Localized client-facing messages.

Every message returned in a response body is looked up here. Unrecognized
Accept-Language tags fall back to ``settings.DEFAULT_LOCALE``.
"""

from enum import StrEnum

from storefront_logo.core.config import settings

SUPPORTED_LOCALES = ("en", "zh-CN")


class MessageKey(StrEnum):
    INTERNAL_ERROR = "internal_error"
    TYPE_REQUIRED = "type_required"
    TEXT_REQUIRED = "text_required"
    IMAGE_REQUIRED = "image_required"
    COMBINED_REQUIRED = "combined_required"
    SIZE_OUT_OF_RANGE = "size_out_of_range"
    FONT_SIZE_OUT_OF_RANGE = "font_size_out_of_range"
    FONT_WEIGHT_OUT_OF_RANGE = "font_weight_out_of_range"
    GET_LOGO_OK = "get_logo_ok"
    GET_LOGO_FAILED = "get_logo_failed"
    LOGO_NOT_FOUND = "logo_not_found"
    UPDATE_LOGO_OK = "update_logo_ok"
    UPDATE_LOGO_FAILED = "update_logo_failed"


_CATALOG: dict[str, dict[MessageKey, str]] = {
    "en": {
        MessageKey.INTERNAL_ERROR: "Internal server error",
        MessageKey.TYPE_REQUIRED: "LOGO type cannot be empty",
        MessageKey.TEXT_REQUIRED: "Text LOGO content cannot be empty",
        MessageKey.IMAGE_REQUIRED: "Image LOGO URL cannot be empty",
        MessageKey.COMBINED_REQUIRED: "Combined LOGO requires both text and image",
        MessageKey.SIZE_OUT_OF_RANGE: "LOGO size is out of the allowed range",
        MessageKey.FONT_SIZE_OUT_OF_RANGE: "Font size must be between 12-48px",
        MessageKey.FONT_WEIGHT_OUT_OF_RANGE: "Font weight must be between 100-900",
        MessageKey.GET_LOGO_OK: "LOGO retrieved successfully",
        MessageKey.GET_LOGO_FAILED: "Failed to get LOGO",
        MessageKey.LOGO_NOT_FOUND: "No active LOGO is configured",
        MessageKey.UPDATE_LOGO_OK: "LOGO updated successfully",
        MessageKey.UPDATE_LOGO_FAILED: "Failed to update LOGO",
    },
    "zh-CN": {
        MessageKey.INTERNAL_ERROR: "服务器内部错误",
        MessageKey.TYPE_REQUIRED: "LOGO类型不能为空",
        MessageKey.TEXT_REQUIRED: "文字LOGO的文本内容不能为空",
        MessageKey.IMAGE_REQUIRED: "图片LOGO的图片地址不能为空",
        MessageKey.COMBINED_REQUIRED: "组合LOGO的文本和图片都不能为空",
        MessageKey.SIZE_OUT_OF_RANGE: "LOGO尺寸超出允许范围",
        MessageKey.FONT_SIZE_OUT_OF_RANGE: "字体大小必须在12-48px之间",
        MessageKey.FONT_WEIGHT_OUT_OF_RANGE: "字体粗细必须在100-900之间",
        MessageKey.GET_LOGO_OK: "获取LOGO成功",
        MessageKey.GET_LOGO_FAILED: "获取LOGO失败",
        MessageKey.LOGO_NOT_FOUND: "当前没有启用的LOGO",
        MessageKey.UPDATE_LOGO_OK: "LOGO更新成功",
        MessageKey.UPDATE_LOGO_FAILED: "LOGO更新失败",
    },
}


def resolve_locale(accept_language: str | None) -> str:
    """Pick a supported locale from an Accept-Language header value.

    Only the primary language subtag of each entry is considered, in header
    order; q-weights are ignored.
    """
    if accept_language:
        for part in accept_language.split(","):
            tag = part.split(";", 1)[0].strip().lower()
            if tag.startswith("zh"):
                return "zh-CN"
            if tag.startswith("en"):
                return "en"
    return settings.DEFAULT_LOCALE if settings.DEFAULT_LOCALE in _CATALOG else "en"


def translate(key: MessageKey, locale: str) -> str:
    return _CATALOG.get(locale, _CATALOG["en"])[key]
