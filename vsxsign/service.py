"""Sign and verify workflows for extension packages."""

from __future__ import annotations

import logging
from pathlib import Path

from vsxsign.archive import extract_signature
from vsxsign.config import get_settings
from vsxsign.errors import VerifyOutcome, VerifyResult, VsxSignError
from vsxsign.keys import (
    PublicKeyCache,
    download_public_key,
    load_private_key,
    load_public_key,
    registry_public_key_url,
)
from vsxsign.signing import sign_bytes, verify_bytes
from vsxsign.utils.files import atomic_write_bytes

logger = logging.getLogger(__name__)

SIGNED_ARCHIVE_NAME = "extension.sigzip"


def sign_extension(extension_package: Path, private_key: Path, output: Path | None = None) -> Path:
    """Sign ``extension_package`` and write the signature artifact.

    Args:
        extension_package: Path to the ``.vsix`` file
        private_key: Path to the PEM private key
        output: Destination of the signature (defaults to ``./extension.sigzip``)

    Returns:
        Path of the written signature file.

    Raises:
        OSError: If the package or key cannot be read, or the output cannot be written
        SigningError: If the private key is malformed
    """
    destination = output if output is not None else Path.cwd() / SIGNED_ARCHIVE_NAME

    package_bytes = Path(extension_package).read_bytes()
    key_pem = load_private_key(private_key)
    signature = sign_bytes(package_bytes, key_pem)

    atomic_write_bytes(destination, signature)
    logger.info("Signed %s -> %s", extension_package, destination)
    return destination


def resolve_public_key(
    public_key: Path | None = None,
    *,
    public_key_id: str | None = None,
    registry_url: str | None = None,
    cache: PublicKeyCache | None = None,
) -> Path:
    """Pick the public key file used for verification.

    An explicit path wins, then a registry key ID, then the default key URL.
    Downloaded keys are treated exactly like supplied ones.
    """
    if public_key is not None:
        return public_key

    if public_key_id is not None:
        base_url = registry_url or get_settings().registry_url
        return download_public_key(cache, registry_public_key_url(base_url, public_key_id))

    return download_public_key(cache)


def verify_extension(
    extension_package: Path,
    signature_archive: Path,
    public_key: Path | None = None,
    *,
    public_key_id: str | None = None,
    registry_url: str | None = None,
    cache: PublicKeyCache | None = None,
) -> VerifyResult:
    """Verify ``extension_package`` against ``signature_archive``.

    Input files are checked before any key is resolved or downloaded. Every
    failure is reported through the returned :class:`VerifyResult`.
    """
    package_path = Path(extension_package)
    signature_path = Path(signature_archive)

    if not package_path.is_file():
        return VerifyResult(
            VerifyOutcome.PACKAGE_NOT_FOUND,
            f"Extension package not found: {package_path}",
        )

    if not signature_path.is_file():
        return VerifyResult(
            VerifyOutcome.SIGNATURE_NOT_FOUND,
            f"Signature archive not found: {signature_path}",
        )

    try:
        key_path = resolve_public_key(
            public_key,
            public_key_id=public_key_id,
            registry_url=registry_url,
            cache=cache,
        )
        key_pem = load_public_key(key_path)
        package_bytes = package_path.read_bytes()
        signature = extract_signature(signature_path.read_bytes())
        valid = verify_bytes(package_bytes, key_pem, signature)
    except (OSError, VsxSignError) as exc:
        logger.debug("Verification of %s aborted", package_path, exc_info=True)
        return VerifyResult(VerifyOutcome.INFRASTRUCTURE, str(exc), cause=exc)

    if not valid:
        logger.info("Signature is not valid for %s", package_path)
        return VerifyResult(VerifyOutcome.INVALID_SIGNATURE, "Signature is not valid")

    logger.info("Signature is valid for %s", package_path)
    return VerifyResult(VerifyOutcome.VALID, "Signature is valid")
