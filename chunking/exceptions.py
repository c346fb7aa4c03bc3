"""
Exceptions for the chunking and budgeting helpers.

Usage:
    from chunking.exceptions import InvalidArgumentError

    try:
        chunks = chunk_content(text, 0)
    except InvalidArgumentError as e:
        print(f"Bad argument {e.argument}: {e.value}")
"""

from __future__ import annotations

from typing import Any, Optional


class InvalidArgumentError(ValueError):
    """
    Raised when a call parameter is malformed (e.g. a non-positive chunk size).

    Attributes:
        argument: Name of the offending parameter
        value: The rejected value
    """

    def __init__(
        self,
        argument: str,
        value: Any,
        message: Optional[str] = None,
    ):
        self.argument = argument
        self.value = value
        super().__init__(message or f"Invalid value for {argument}: {value!r}")
