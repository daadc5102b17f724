"""Detached signatures over extension package bytes.

The scheme follows the key type: Ed25519 and Ed448 keys (what the registry
issues) sign the package bytes directly, RSA keys use PKCS#1 v1.5 and EC keys
use ECDSA, both hashing with :data:`SIGNING_ALGORITHM`. The algorithm is fixed
on both sides and never written into the artifact.
"""

from __future__ import annotations

import logging

from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec, ed448, ed25519, padding, rsa

from vsxsign.errors import SigningError

logger = logging.getLogger(__name__)

SIGNING_ALGORITHM = "sha256"

_DIGESTS = {"sha256": hashes.SHA256}


def _digest() -> hashes.HashAlgorithm:
    return _DIGESTS[SIGNING_ALGORITHM]()


def _as_bytes(pem: str | bytes) -> bytes:
    return pem.encode("utf-8") if isinstance(pem, str) else pem


def _load_private_key(private_key_pem: str | bytes):
    try:
        return serialization.load_pem_private_key(_as_bytes(private_key_pem), password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
        raise SigningError(f"Invalid private key: {exc}") from exc


def _load_public_key(public_key_pem: str | bytes):
    try:
        return serialization.load_pem_public_key(_as_bytes(public_key_pem))
    except (ValueError, UnsupportedAlgorithm) as exc:
        raise SigningError(f"Invalid public key: {exc}") from exc


def sign_bytes(package_bytes: bytes, private_key_pem: str | bytes) -> bytes:
    """Compute a detached signature over ``package_bytes``.

    Args:
        package_bytes: Exact bytes of the extension package
        private_key_pem: PEM-encoded private key (unencrypted)

    Returns:
        Raw signature bytes as produced by the signing primitive.

    Raises:
        SigningError: If the key is malformed or of an unsupported type
    """
    key = _load_private_key(private_key_pem)

    if isinstance(key, (ed25519.Ed25519PrivateKey, ed448.Ed448PrivateKey)):
        signature = key.sign(package_bytes)
    elif isinstance(key, rsa.RSAPrivateKey):
        signature = key.sign(package_bytes, padding.PKCS1v15(), _digest())
    elif isinstance(key, ec.EllipticCurvePrivateKey):
        signature = key.sign(package_bytes, ec.ECDSA(_digest()))
    else:
        raise SigningError(f"Unsupported private key type: {type(key).__name__}")

    logger.debug(
        "Signed %d bytes with %s key (%d byte signature)",
        len(package_bytes),
        type(key).__name__,
        len(signature),
    )
    return signature


def verify_bytes(package_bytes: bytes, public_key_pem: str | bytes, signature: bytes) -> bool:
    """Check ``signature`` against ``package_bytes``.

    Tampered content, a signature made by another key and a malformed
    signature all yield ``False``; they are not told apart.

    Raises:
        SigningError: If the public key is malformed or of an unsupported type
    """
    key = _load_public_key(public_key_pem)

    try:
        if isinstance(key, (ed25519.Ed25519PublicKey, ed448.Ed448PublicKey)):
            key.verify(signature, package_bytes)
        elif isinstance(key, rsa.RSAPublicKey):
            key.verify(signature, package_bytes, padding.PKCS1v15(), _digest())
        elif isinstance(key, ec.EllipticCurvePublicKey):
            key.verify(signature, package_bytes, ec.ECDSA(_digest()))
        else:
            raise SigningError(f"Unsupported public key type: {type(key).__name__}")
    except InvalidSignature:
        return False

    return True
