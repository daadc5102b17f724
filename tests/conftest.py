"""Pytest configuration and fixtures."""

from collections.abc import Generator
from pathlib import Path

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ed25519

from vsxsign.config import Settings


def _write_keypair(directory: Path, name: str) -> tuple[Path, Path]:
    private = ed25519.Ed25519PrivateKey.generate()
    private_path = directory / f"{name}.pem"
    public_path = directory / f"{name}.pub.pem"
    private_path.write_bytes(
        private.private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.NoEncryption(),
        )
    )
    public_path.write_bytes(
        private.public_key().public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )
    )
    return private_path, public_path


@pytest.fixture
def temp_dir(tmp_path: Path) -> Path:
    """Working directory for a single test."""
    return tmp_path


@pytest.fixture
def keypair(temp_dir: Path) -> tuple[Path, Path]:
    """Ed25519 test keypair as (private_key_path, public_key_path)."""
    return _write_keypair(temp_dir, "signing")


@pytest.fixture
def other_keypair(temp_dir: Path) -> tuple[Path, Path]:
    """A second, unrelated Ed25519 keypair."""
    return _write_keypair(temp_dir, "other")


@pytest.fixture
def sample_package(temp_dir: Path) -> Path:
    """A small stand-in for a .vsix package."""
    package = temp_dir / "sample-extension-1.0.0.vsix"
    package.write_bytes(b"PK\x03\x04sample extension payload \x00\x01\x02")
    return package


@pytest.fixture
def override_settings(temp_dir: Path) -> Generator[Settings, None, None]:
    """Provide isolated vsxsign settings scoped to tests."""

    import vsxsign.config as config_module

    original_settings = getattr(config_module, "_settings", None)

    settings = config_module.Settings(
        cache_dir=temp_dir / "key-cache",
        public_key_url="https://keys.example.test/public.pem",
        registry_url="https://registry.example.test",
    )

    config_module._settings = settings

    try:
        yield settings
    finally:
        config_module._settings = original_settings


class FakeResponse:
    """Minimal stand-in for :class:`requests.Response`."""

    def __init__(self, content: bytes, status_code: int = 200, reason: str = "OK") -> None:
        self.content = content
        self.status_code = status_code
        self.reason = reason

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400


@pytest.fixture
def fake_key_server(monkeypatch, keypair):
    """Serve the test public key to ``requests.get`` calls made by vsxsign.

    Returns a dict mapping URL to (status, body); URLs ending in
    ``/public.pem`` serve the test key, any other unknown URL returns 404.
    Requested URLs are appended to ``routes["calls"]``.
    """
    _, public_path = keypair
    routes: dict = {"calls": []}
    default_body = public_path.read_bytes()

    def fake_get(url, timeout=None):
        routes["calls"].append(url)
        status, body = routes.get(url, (None, None))
        if status is None:
            if url.endswith("/public.pem"):
                return FakeResponse(default_body)
            return FakeResponse(b"Not Found", status_code=404, reason="Not Found")
        return FakeResponse(body, status_code=status)

    monkeypatch.setattr("vsxsign.keys.requests.get", fake_get)
    return routes


@pytest.fixture
def fake_response() -> type[FakeResponse]:
    """The :class:`FakeResponse` type, for tests that stub ``requests.get`` themselves."""
    return FakeResponse
