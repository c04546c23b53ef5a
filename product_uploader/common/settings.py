"""
Uploader Settings

Resolves store credentials and API options from command-line values and
environment variables (populated from .env by the entry script).
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_API_VERSION = "2025-01"
DEFAULT_CSV_PATH = "products.csv"

STORE_ENV = "SHOPIFY_STORE"
TOKEN_ENV = "ACCESS_TOKEN"
API_VERSION_ENV = "API_VERSION"
TIMEOUT_ENV = "UPLOAD_TIMEOUT"


class MissingConfigError(ValueError):
    """Raised when a required setting is absent from both flags and environment."""

    def __init__(self, missing):
        self.missing = list(missing)
        super().__init__(f"Missing {' or '.join(self.missing)} in .env")


@dataclass(frozen=True)
class UploaderSettings:
    """Immutable configuration handed to the uploader at construction."""
    store: str
    access_token: str
    api_version: str = DEFAULT_API_VERSION
    csv_path: str = DEFAULT_CSV_PATH
    timeout: Optional[float] = None     # None = wait indefinitely
    dry_run: bool = False


def _parse_timeout(raw) -> Optional[float]:
    """Seconds as a float; blank, zero or negative means no timeout."""
    if raw is None or not str(raw).strip():
        return None
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{TIMEOUT_ENV} must be a number of seconds, got {raw!r}")
    return value if value > 0 else None


def load_settings(
    store: Optional[str] = None,
    access_token: Optional[str] = None,
    api_version: Optional[str] = None,
    csv_path: Optional[str] = None,
    timeout: Optional[float] = None,
    dry_run: bool = False,
    env: Optional[Mapping[str, str]] = None,
) -> UploaderSettings:
    """
    Build UploaderSettings, with explicit arguments taking precedence over env.

    Args:
        store: Store hostname (falls back to SHOPIFY_STORE)
        access_token: Admin API token (falls back to ACCESS_TOKEN)
        api_version: Admin API version (falls back to API_VERSION, then 2025-01)
        csv_path: Input CSV path (default: products.csv)
        timeout: Request timeout in seconds (falls back to UPLOAD_TIMEOUT)
        dry_run: Build payloads without sending them
        env: Environment mapping (default: os.environ)

    Returns:
        UploaderSettings

    Raises:
        MissingConfigError: If the store or the access token is missing
    """
    if env is None:
        env = os.environ

    store = store or env.get(STORE_ENV)
    access_token = access_token or env.get(TOKEN_ENV)

    missing = []
    if not store:
        missing.append(STORE_ENV)
    if not access_token:
        missing.append(TOKEN_ENV)
    if missing:
        raise MissingConfigError(missing)

    if timeout is None:
        timeout = _parse_timeout(env.get(TIMEOUT_ENV))
    else:
        timeout = _parse_timeout(timeout)

    return UploaderSettings(
        store=store,
        access_token=access_token,
        api_version=api_version or env.get(API_VERSION_ENV) or DEFAULT_API_VERSION,
        csv_path=csv_path or DEFAULT_CSV_PATH,
        timeout=timeout,
        dry_run=dry_run,
    )
