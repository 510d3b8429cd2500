"""CORS middleware configuration."""

from storefront_logo.core.config import settings


def get_cors_config() -> dict:
    """Return CORS middleware kwargs for FastAPI."""
    return {
        "allow_origins": settings.allowed_origins_list,
        "allow_credentials": False,
        "allow_methods": ["GET", "POST", "OPTIONS"],
        "allow_headers": [
            "Accept-Language",
            "Content-Type",
            "X-Request-Id",
        ],
    }
