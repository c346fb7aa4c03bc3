"""Forgiving JSON parser for model output.

Parses the object-shaped JSON that chat models usually emit, tolerating the
mistakes they usually make, and records every repair it had to apply:

- quoted_key: unquoted object key (``{intent: "x"}``)
- single_quoted_string: ``'x'`` instead of ``"x"``
- quoted_value: unquoted enum-like value (``"intent": General``)
- python_literal: ``True``/``False``/``None``
- trailing_comma: ``[1, 2,]`` / ``{"a": 1,}``
- missing_comma: ``{"a": 1 "b": 2}``

Anything else (unbalanced brackets, missing colons, bad escapes) raises
JsonRepairError; the caller decides what to do then.
"""

from __future__ import annotations

import json
import re
from typing import Any, Optional

_WHITESPACE = re.compile(r"\s*")
_DQ_STRING = re.compile(r'"(?:[^"\\]|\\.)*"', re.DOTALL)
_SQ_STRING = re.compile(r"'(?:[^'\\]|\\.)*'", re.DOTALL)
_NUMBER = re.compile(r"-?(?:0|[1-9]\d*)(?:\.\d+)?(?:[eE][+-]?\d+)?(?![\w.])")
_BARE_KEY = re.compile(r"[\w$][\w$\-]*")
_BARE_VALUE = re.compile(r"[\w][\w.\-]*")

_LITERALS = {"true": True, "false": False, "null": None}
_PYTHON_LITERALS = {"True": True, "False": False, "None": None}

MAX_DEPTH = 200


class JsonRepairError(ValueError):
    """Raised when the text cannot be repaired into JSON."""

    def __init__(self, message: str, position: int):
        self.position = position
        super().__init__(f"{message} at position {position}")


class ForgivingJsonParser:
    """
    Recursive-descent parser over a text buffer.

    Usage:
        parser = ForgivingJsonParser(text)
        value, end = parser.parse_object_at(text.find("{"))
        print(parser.repairs)
    """

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.repairs: list[str] = []
        self._depth = 0

    def parse_object_at(self, start: int) -> tuple[dict[str, Any], int]:
        """Parse the object starting at text[start] == "{"; return it and its end offset."""
        self.pos = start
        value = self._parse_object()
        return value, self.pos

    # -------------------------------------------------------------------------
    # Grammar
    # -------------------------------------------------------------------------

    def _parse_value(self) -> Any:
        self._skip_ws()
        ch = self._peek()
        if ch is None:
            raise JsonRepairError("Unexpected end of input", self.pos)
        if ch == "{":
            return self._parse_object()
        if ch == "[":
            return self._parse_array()
        if ch == '"':
            return self._parse_dq_string()
        if ch == "'":
            return self._parse_sq_string()

        match = _NUMBER.match(self.text, self.pos)
        if match:
            self.pos = match.end()
            return json.loads(match.group())

        match = _BARE_VALUE.match(self.text, self.pos)
        if match:
            self.pos = match.end()
            word = match.group()
            if word in _LITERALS:
                return _LITERALS[word]
            if word in _PYTHON_LITERALS:
                self._record("python_literal")
                return _PYTHON_LITERALS[word]
            self._record("quoted_value")
            return word

        raise JsonRepairError(f"Unexpected character {ch!r}", self.pos)

    def _parse_object(self) -> dict[str, Any]:
        self._enter()
        self._expect("{")
        members: dict[str, Any] = {}

        self._skip_ws()
        if self._peek() == "}":
            self.pos += 1
            self._leave()
            return members

        while True:
            key = self._parse_key()
            self._skip_ws()
            self._expect(":")
            members[key] = self._parse_value()

            self._skip_ws()
            ch = self._peek()
            if ch == ",":
                self.pos += 1
                self._skip_ws()
                if self._peek() == "}":
                    self._record("trailing_comma")
                    self.pos += 1
                    break
                continue
            if ch == "}":
                self.pos += 1
                break
            if ch is not None and (ch in "\"'" or _BARE_KEY.match(ch)):
                self._record("missing_comma")
                continue
            raise JsonRepairError("Expected ',' or '}'", self.pos)

        self._leave()
        return members

    def _parse_array(self) -> list[Any]:
        self._enter()
        self._expect("[")
        items: list[Any] = []

        self._skip_ws()
        if self._peek() == "]":
            self.pos += 1
            self._leave()
            return items

        while True:
            items.append(self._parse_value())
            self._skip_ws()
            ch = self._peek()
            if ch == ",":
                self.pos += 1
                self._skip_ws()
                if self._peek() == "]":
                    self._record("trailing_comma")
                    self.pos += 1
                    break
                continue
            if ch == "]":
                self.pos += 1
                break
            if ch is not None and (ch in "{[\"'-" or _BARE_VALUE.match(ch)):
                self._record("missing_comma")
                continue
            raise JsonRepairError("Expected ',' or ']'", self.pos)

        self._leave()
        return items

    def _parse_key(self) -> str:
        self._skip_ws()
        ch = self._peek()
        if ch == '"':
            return self._parse_dq_string()
        if ch == "'":
            self._record("quoted_key")
            return self._parse_sq_string(record=False)
        match = _BARE_KEY.match(self.text, self.pos)
        if match:
            self.pos = match.end()
            self._record("quoted_key")
            return match.group()
        raise JsonRepairError("Expected an object key", self.pos)

    def _parse_dq_string(self) -> str:
        match = _DQ_STRING.match(self.text, self.pos)
        if not match:
            raise JsonRepairError("Unterminated string", self.pos)
        try:
            value = json.loads(match.group(), strict=False)
        except json.JSONDecodeError as e:
            raise JsonRepairError(f"Invalid string ({e.msg})", self.pos) from e
        self.pos = match.end()
        return value

    def _parse_sq_string(self, record: bool = True) -> str:
        match = _SQ_STRING.match(self.text, self.pos)
        if not match:
            raise JsonRepairError("Unterminated string", self.pos)
        inner = match.group()[1:-1].replace("\\'", "'")
        inner = re.sub(r'(?<!\\)"', lambda m: '\\"', inner)
        try:
            value = json.loads(f'"{inner}"', strict=False)
        except json.JSONDecodeError as e:
            raise JsonRepairError(f"Invalid string ({e.msg})", self.pos) from e
        if record:
            self._record("single_quoted_string")
        self.pos = match.end()
        return value

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _peek(self) -> Optional[str]:
        return self.text[self.pos] if self.pos < len(self.text) else None

    def _skip_ws(self) -> None:
        self.pos = _WHITESPACE.match(self.text, self.pos).end()

    def _expect(self, char: str) -> None:
        if self._peek() != char:
            raise JsonRepairError(f"Expected {char!r}", self.pos)
        self.pos += 1

    def _enter(self) -> None:
        self._depth += 1
        if self._depth > MAX_DEPTH:
            raise JsonRepairError("Nesting too deep", self.pos)

    def _leave(self) -> None:
        self._depth -= 1

    def _record(self, repair: str) -> None:
        if repair not in self.repairs:
            self.repairs.append(repair)
