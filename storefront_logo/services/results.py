"""Result type for the logo service boundary and its HTTP status mapping."""

from dataclasses import dataclass
from enum import StrEnum

from storefront_logo.schemas.logo import LogoResponse, LogoSchema


class LogoErrorKind(StrEnum):
    VALIDATION = "validation"  # request rejected before reaching the service
    NOT_FOUND = "not_found"
    REJECTED = "rejected"  # service refused or could not complete the operation
    INTERNAL = "internal"  # unexpected fault; message is always generic


_STATUS_BY_KIND = {
    LogoErrorKind.VALIDATION: 400,
    LogoErrorKind.NOT_FOUND: 404,
    LogoErrorKind.REJECTED: 400,
    LogoErrorKind.INTERNAL: 500,
}


@dataclass(frozen=True)
class LogoResult:
    success: bool
    message: str
    logo: LogoSchema | None = None
    error_kind: LogoErrorKind | None = None

    @classmethod
    def ok(cls, message: str, logo: LogoSchema | None = None) -> "LogoResult":
        return cls(success=True, message=message, logo=logo)

    @classmethod
    def fail(cls, kind: LogoErrorKind, message: str) -> "LogoResult":
        return cls(success=False, message=message, error_kind=kind)

    def to_response(self) -> LogoResponse:
        return LogoResponse(success=self.success, message=self.message, logo=self.logo)


def status_for(result: LogoResult) -> int:
    """Map a service result to its HTTP status code."""
    if result.success:
        return 200
    return _STATUS_BY_KIND[result.error_kind or LogoErrorKind.REJECTED]
