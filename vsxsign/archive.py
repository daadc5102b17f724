"""Signature artifact decoding.

``sign`` writes the raw signature bytes. Registries publish a ``.sigzip``
zip instead, holding the signature in ``.signature.sig`` next to a
``.signature.manifest`` and an empty ``.signature.p7s``. Both forms are
accepted when verifying.
"""

from __future__ import annotations

import io
import zipfile

from vsxsign.errors import SignatureArchiveError

SIGNATURE_ENTRY = ".signature.sig"
_ZIP_MAGIC = b"PK\x03\x04"


def is_signature_zip(data: bytes) -> bool:
    """Return True when ``data`` looks like a registry ``.sigzip`` archive."""
    return data.startswith(_ZIP_MAGIC) and zipfile.is_zipfile(io.BytesIO(data))


def extract_signature(data: bytes) -> bytes:
    """Return the raw signature contained in a signature artifact.

    Raises:
        SignatureArchiveError: If a zip archive has no ``.signature.sig`` entry
    """
    if not is_signature_zip(data):
        return data

    with zipfile.ZipFile(io.BytesIO(data)) as archive:
        try:
            return archive.read(SIGNATURE_ENTRY)
        except KeyError as exc:
            raise SignatureArchiveError(
                f"Signature archive has no {SIGNATURE_ENTRY} entry"
            ) from exc
