"""
LLM JSON - repair and parse JSON returned by chat models

Quick Start:
    from llm_json import sanitize, parse_intents

    result = sanitize('Sure! {"intent": CreateTeam, "parameters": {name: "Ops",},}')
    result.text          # '{"intent": "CreateTeam", "parameters": {"name": "Ops"}}'
    result.repairs       # ('discarded_prefix', 'quoted_value', 'quoted_key', ...)
    result.used_fallback # False

    analysis = parse_intents(model_output)
    for intent in analysis.intents:
        print(intent.intent, intent.parameters)
"""

__version__ = "1.0.0"

from .intents import parse_intents
from .models import IntentAnalysis, IntentRequest
from .parser import ForgivingJsonParser, JsonRepairError
from .sanitizer import (
    DEFAULT_INTENT,
    FALLBACK_JSON,
    SanitizationResult,
    safe_parse_json,
    sanitize,
    sanitize_json,
)

__all__ = [
    "__version__",
    "sanitize",
    "sanitize_json",
    "safe_parse_json",
    "parse_intents",
    "SanitizationResult",
    "IntentAnalysis",
    "IntentRequest",
    "ForgivingJsonParser",
    "JsonRepairError",
    "DEFAULT_INTENT",
    "FALLBACK_JSON",
]
