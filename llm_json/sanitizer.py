"""Repair JSON returned by a chat model.

Chat models are not guaranteed to return valid JSON: they wrap it in prose,
leave values unquoted, or add trailing commas. `sanitize` always returns a
string that json.loads accepts. When the text cannot be repaired, it returns
a fixed neutral document (a single "General" intent) and marks the result as
degraded, so callers can tell a repaired answer from a made-up default.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Optional

from .parser import ForgivingJsonParser, JsonRepairError

logger = logging.getLogger(__name__)

DEFAULT_INTENT = "General"
FALLBACK_DOCUMENT: dict[str, Any] = {
    "intents": [{"intent": DEFAULT_INTENT, "parameters": {}}],
}
FALLBACK_JSON = json.dumps(FALLBACK_DOCUMENT)


@dataclass(frozen=True)
class SanitizationResult:
    """
    Outcome of sanitizing a model response.

    Attributes:
        text: JSON text, always parseable
        repairs: Names of the repairs applied, in the order first applied
        used_fallback: True if the response was unusable and FALLBACK_JSON
            was returned instead
    """

    text: str
    repairs: tuple[str, ...] = ()
    used_fallback: bool = False

    @property
    def degraded(self) -> bool:
        return self.used_fallback

    @property
    def repaired(self) -> bool:
        return bool(self.repairs)

    def loads(self) -> Any:
        return json.loads(self.text)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {name}")


def _is_valid_json(text: str) -> bool:
    try:
        json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        # The C scanner raises RecursionError on deep nesting.
        return False
    return True


def sanitize(raw_text: Optional[str]) -> SanitizationResult:
    """Repair a model response into parseable JSON.

    Strategy:
    1) Valid JSON is returned unchanged.
    2) Otherwise parse the object starting at the first "{" forgivingly,
       dropping any text before it and after its closing "}".
    3) If that fails, return the fallback document.
    """
    text = raw_text if isinstance(raw_text, str) else ""

    try:
        if text.strip() and _is_valid_json(text):
            return SanitizationResult(text=text)

        start = text.find("{")
        if start < 0:
            raise JsonRepairError("No JSON object found", 0)

        parser = ForgivingJsonParser(text)
        value, end = parser.parse_object_at(start)

        repairs = list(parser.repairs)
        if text[:start].strip():
            repairs.insert(0, "discarded_prefix")
        if text[end:].strip():
            repairs.append("discarded_suffix")

        output = json.dumps(value, ensure_ascii=False, allow_nan=False)
    except (JsonRepairError, ValueError, RecursionError) as e:
        logger.warning(
            "Model response is not repairable JSON, using fallback: %s (response: %.200r)",
            e, text,
        )
        return SanitizationResult(text=FALLBACK_JSON, used_fallback=True)

    if repairs:
        logger.info("Repaired model JSON response: %s", ", ".join(repairs))
    return SanitizationResult(text=output, repairs=tuple(repairs))


def sanitize_json(raw_text: Optional[str]) -> str:
    """Return parseable JSON for any model response. See `sanitize`."""
    return sanitize(raw_text).text


def safe_parse_json(text: Optional[str]) -> dict[str, Any]:
    """Parse a model response into a dict.

    Returns {} when the response is unusable or not a JSON object, rather
    than the intent fallback document.
    """
    result = sanitize(text)
    if result.used_fallback:
        return {}
    data = result.loads()
    return data if isinstance(data, dict) else {}
