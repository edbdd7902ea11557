"""Module: codes."""

import logging
import secrets
import string
from urllib.parse import quote, urlencode

from app.core.config import settings

logger = logging.getLogger(__name__)

# URL-safe 64-symbol alphabet: A-Z, a-z, 0-9, "_" and "-".
CODE_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits + "_-"
CODE_LENGTH = 8


class CodeGenerationError(RuntimeError):
    """Raised when the operating system random source cannot be used."""


def generate_code() -> str:
    """
    Draw a short public prescription code.

    Every symbol is chosen independently with the OS CSPRNG, so 8 symbols
    give a 2^48 space. There is no fallback generator: if the random source
    is unavailable the failure propagates to the caller.
    """
    try:
        return "".join(secrets.choice(CODE_ALPHABET) for _ in range(CODE_LENGTH))
    except (NotImplementedError, OSError) as exc:
        logger.error("Secure random source unavailable: %s", exc)
        raise CodeGenerationError("Secure random source unavailable") from exc


def is_well_formed_code(value: str) -> bool:
    return len(value) == CODE_LENGTH and all(ch in CODE_ALPHABET for ch in value)


def build_scan_url(code: str, base_url: str | None = None) -> str:
    # Link printed alongside the QR code so a pharmacist can open the lookup page.
    base = (base_url if base_url is not None else settings.scan_base_url).rstrip("/")
    return f"{base}/scan?{urlencode({'code': code}, quote_via=quote)}"
