"""Exception hierarchy and verification outcomes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class VsxSignError(Exception):
    """Base class for vsxsign failures."""


class SigningError(VsxSignError):
    """Raised when key material is malformed or of an unsupported type."""


class PublicKeyDownloadError(VsxSignError):
    """Raised when the public key cannot be fetched."""

    def __init__(self, url: str, message: str, *, status_code: int | None = None) -> None:
        super().__init__(f"Failed to download public key from {url}: {message}")
        self.url = url
        self.status_code = status_code


class SignatureArchiveError(VsxSignError):
    """Raised when a signature archive cannot be decoded."""


class VerifyOutcome(str, Enum):
    """Terminal states of the verify workflow."""

    VALID = "valid"
    INVALID_SIGNATURE = "invalid_signature"
    PACKAGE_NOT_FOUND = "package_not_found"
    SIGNATURE_NOT_FOUND = "signature_not_found"
    INFRASTRUCTURE = "infrastructure"

    @property
    def exit_code(self) -> int:
        return _EXIT_CODES[self]


_EXIT_CODES: dict[VerifyOutcome, int] = {
    VerifyOutcome.VALID: 0,
    VerifyOutcome.INFRASTRUCTURE: 1,
    VerifyOutcome.PACKAGE_NOT_FOUND: 3,
    VerifyOutcome.SIGNATURE_NOT_FOUND: 6,
    VerifyOutcome.INVALID_SIGNATURE: 102,
}


@dataclass(frozen=True, slots=True)
class VerifyResult:
    """Result of verifying a package against a signature archive."""

    outcome: VerifyOutcome
    message: str
    cause: BaseException | None = None

    @property
    def valid(self) -> bool:
        return self.outcome is VerifyOutcome.VALID

    @property
    def exit_code(self) -> int:
        return self.outcome.exit_code
