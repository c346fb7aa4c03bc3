"""Read the intents array out of a model's intent-analysis response."""

from __future__ import annotations

import logging
from typing import Any, Optional

from pydantic import ValidationError

from .models import IntentAnalysis, IntentRequest
from .sanitizer import DEFAULT_INTENT, sanitize

logger = logging.getLogger(__name__)


def _get(data: dict[str, Any], name: str) -> Any:
    """Case-insensitive key lookup; models are inconsistent about casing."""
    if name in data:
        return data[name]
    lowered = name.lower()
    for key, value in data.items():
        if isinstance(key, str) and key.lower() == lowered:
            return value
    return None


def _to_intent(item: Any) -> Optional[IntentRequest]:
    if not isinstance(item, dict):
        return None
    name = _get(item, "intent")
    if not isinstance(name, str) or not name.strip():
        return None
    parameters = _get(item, "parameters")
    try:
        return IntentRequest(
            intent=name.strip(),
            parameters=parameters if isinstance(parameters, dict) else {},
        )
    except ValidationError:
        return None


def _collect_intents(data: Any) -> list[IntentRequest]:
    if isinstance(data, dict):
        items = _get(data, "intents")
        if items is None and _get(data, "intent") is not None:
            items = [data]
    elif isinstance(data, list):
        items = data
    else:
        items = None

    if not isinstance(items, list):
        return []

    intents = []
    for item in items:
        intent = _to_intent(item)
        if intent is None:
            logger.debug("Skipping malformed intent entry: %r", item)
            continue
        intents.append(intent)
    return intents


def parse_intents(raw_text: Optional[str]) -> IntentAnalysis:
    """
    Parse a model response into an IntentAnalysis.

    Accepts {"intents": [...]}, a single {"intent": ..., "parameters": ...}
    object, or a bare list of intent objects. When nothing usable is found,
    a single General intent is returned and the analysis is marked degraded.
    """
    result = sanitize(raw_text)
    intents = _collect_intents(result.loads())
    degraded = result.used_fallback

    if not intents:
        logger.warning("No intents found in model response, defaulting to %s", DEFAULT_INTENT)
        intents = [IntentRequest(intent=DEFAULT_INTENT)]
        degraded = True

    analysis = IntentAnalysis(
        intents=intents,
        degraded=degraded,
        repairs=list(result.repairs),
    )
    logger.debug("Parsed intents: %s", ", ".join(analysis.intent_names))
    return analysis
