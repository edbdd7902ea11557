"""Module: qr_payload."""

import math
import re
from collections import defaultdict
from collections.abc import Iterable, Mapping
from typing import Any

from app.core.catalog import catalog_letters
from app.core.config import settings

# Plain ASCII decimal or exponent text only; underscores, non-ASCII digits and
# nan/inf spellings are not numbers here.
NUMBER_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def default_payload_letters() -> tuple[str, ...]:
    if settings.qr_payload_letters.strip():
        return tuple(ch.upper() for ch in settings.qr_payload_letters if not ch.isspace())
    return catalog_letters()


def _field(item: Any, name: str) -> Any:
    if isinstance(item, Mapping):
        return item.get(name)
    return getattr(item, name, None)


def _as_number(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    text = str(value).strip()
    if not NUMBER_PATTERN.fullmatch(text):
        return None
    number = float(text)
    if not math.isfinite(number):
        return None
    return number


def medication_weight(medication: Any) -> float:
    """frequency x duration, or 0 when either side is not a finite number."""
    frequency = _as_number(_field(medication, "frequency"))
    duration = _as_number(_field(medication, "duration"))
    if frequency is None or duration is None:
        return 0.0
    return frequency * duration


def letter_weights(medications: Iterable[Any]) -> dict[str, float]:
    totals: dict[str, float] = defaultdict(float)
    for medication in medications:
        name = (_field(medication, "name") or "").strip()
        if not name:
            continue
        totals[name[0].upper()] += medication_weight(medication)
    return dict(totals)


def _format_total(value: float) -> str:
    if value.is_integer():
        return str(int(value))
    return repr(value)


def encode_qr_payload(prescription: Any, letters: Iterable[str] | None = None) -> str:
    """
    Summarize a prescription's medications as ``"A:15,P:0,N:0,M:0,D:0"``.

    Each medication adds ``frequency * duration`` to the bucket of its name's
    first letter. Only ``letters`` are emitted, in the given order; buckets for
    any other letter are dropped. Non-numeric magnitudes count as 0.
    """
    medications = _field(prescription, "medications") or []
    keys = tuple(letters) if letters is not None else default_payload_letters()
    totals = letter_weights(medications)
    return ",".join(f"{key}:{_format_total(totals.get(key, 0.0))}" for key in keys)
