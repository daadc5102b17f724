"""Key loading and public key distribution."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import requests

from vsxsign.config import Settings, get_settings
from vsxsign.errors import PublicKeyDownloadError, SigningError
from vsxsign.utils.files import atomic_write_bytes
from vsxsign.utils.hashing import compute_sha256_text

logger = logging.getLogger(__name__)


def _read_pem(path: Path) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise SigningError(f"Key file is not PEM text: {path}") from exc


def load_private_key(path: Path) -> str:
    """Read a PEM private key from ``path``.

    The content is not parsed here; malformed keys surface when signing.

    Raises:
        FileNotFoundError: If the key file does not exist
        PermissionError: If the key file cannot be read
        SigningError: If the file is not UTF-8 text (e.g. a DER key)
    """
    return _read_pem(path)


def load_public_key(path: Path) -> str:
    """Read a PEM public key from ``path`` (same contract as :func:`load_private_key`)."""
    return _read_pem(path)


def registry_public_key_url(registry_url: str, public_id: str) -> str:
    """Return the registry endpoint serving the public key ``public_id``."""
    return f"{registry_url.rstrip('/')}/api/-/public-key/{public_id}"


@dataclass(slots=True)
class PublicKeyCache:
    """On-disk cache of downloaded public keys, one file per source URL.

    Entries are named after the SHA-256 of the URL, so different sources never
    share a file, and are replaced atomically so a concurrent reader never
    sees a partially written key.
    """

    directory: Path

    @classmethod
    def from_settings(cls, settings: Settings) -> "PublicKeyCache":
        return cls(directory=settings.get_cache_dir())

    def path_for(self, url: str) -> Path:
        return self.directory / f"{compute_sha256_text(url)}.pem"

    def store(self, url: str, content: bytes) -> Path:
        destination = self.path_for(url)
        atomic_write_bytes(destination, content)
        return destination


def download_public_key(
    cache: PublicKeyCache | None = None,
    url: str | None = None,
    *,
    timeout: float | None = None,
) -> Path:
    """Fetch the public key at ``url`` and store it in ``cache``.

    Every call downloads again and overwrites the cache entry.

    Args:
        cache: Destination cache (defaults to the configured cache directory)
        url: Key location (defaults to ``Settings.public_key_url``)
        timeout: Request timeout in seconds (defaults to ``Settings.http_timeout``)

    Returns:
        Local path of the cached key.

    Raises:
        PublicKeyDownloadError: On connection failure or a non-2xx response
    """
    settings = get_settings()
    source = url or settings.public_key_url
    store = cache or PublicKeyCache.from_settings(settings)
    request_timeout = timeout if timeout is not None else settings.http_timeout

    logger.debug("Downloading public key from %s", source)
    try:
        response = requests.get(source, timeout=request_timeout)
    except requests.RequestException as exc:
        raise PublicKeyDownloadError(source, str(exc)) from exc

    if not response.ok:
        raise PublicKeyDownloadError(
            source,
            f"HTTP {response.status_code} {response.reason or ''}".rstrip(),
            status_code=response.status_code,
        )

    destination = store.store(source, response.content)
    logger.debug("Cached public key at %s", destination)
    return destination
