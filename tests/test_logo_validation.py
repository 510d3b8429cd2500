"""Unit tests for request validation, result mapping and locale resolution."""

import pytest

from storefront_logo.core.messages import MessageKey, resolve_locale, translate
from storefront_logo.schemas.logo import LogoRequest
from storefront_logo.services.logo_validation import validate_logo_request
from storefront_logo.services.results import LogoErrorKind, LogoResult, status_for


def test_defaults_with_text_are_valid():
    assert validate_logo_request(LogoRequest(text="Shop"), "en") is None


def test_default_request_needs_text():
    result = validate_logo_request(LogoRequest(), "en")
    assert result is not None
    assert result.error_kind is LogoErrorKind.VALIDATION
    assert result.message == "Text LOGO content cannot be empty"


def test_image_logo_needs_no_text():
    request = LogoRequest(type="image", image_url="https://cdn.example.com/a.png")
    assert validate_logo_request(request, "en") is None


def test_validation_message_is_localized():
    result = validate_logo_request(LogoRequest(text="Shop", font_weight=950), "zh-CN")
    assert result.message == "字体粗细必须在100-900之间"


@pytest.mark.parametrize(
    ("kind", "status"),
    [
        (LogoErrorKind.VALIDATION, 400),
        (LogoErrorKind.NOT_FOUND, 404),
        (LogoErrorKind.REJECTED, 400),
        (LogoErrorKind.INTERNAL, 500),
    ],
)
def test_status_for_error_kinds(kind, status):
    assert status_for(LogoResult.fail(kind, "x")) == status


def test_status_for_success():
    assert status_for(LogoResult.ok("fine")) == 200


def test_failure_without_kind_is_client_error():
    assert status_for(LogoResult(success=False, message="no")) == 400


def test_to_response_carries_payload():
    response = LogoResult.fail(LogoErrorKind.REJECTED, "nope").to_response()
    assert response.success is False
    assert response.message == "nope"
    assert response.logo is None


@pytest.mark.parametrize(
    ("header", "locale"),
    [
        ("zh-CN", "zh-CN"),
        ("zh-TW,zh;q=0.9", "zh-CN"),
        ("en-US,en;q=0.9", "en"),
        ("fr-FR, zh;q=0.5", "zh-CN"),
        ("de-DE", "en"),
        (None, "en"),
        ("", "en"),
    ],
)
def test_resolve_locale(header, locale):
    assert resolve_locale(header) == locale


def test_resolve_locale_uses_configured_default(override_setting):
    override_setting("DEFAULT_LOCALE", "zh-CN")
    assert resolve_locale("de-DE") == "zh-CN"
    assert resolve_locale("en") == "en"


def test_unknown_locale_falls_back_to_english():
    assert translate(MessageKey.INTERNAL_ERROR, "pt-BR") == "Internal server error"


def test_every_key_is_translated():
    for locale in ("en", "zh-CN"):
        for key in MessageKey:
            assert translate(key, locale)
