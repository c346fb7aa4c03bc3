"""
Data Models for intent analysis responses

The chat handler asks the model to classify a user message into one or more
intents, each with free-form parameters:

    {"intents": [{"intent": "CreateObjective", "parameters": {"title": "..."}}]}
"""

from typing import Any

from pydantic import BaseModel, Field


class IntentRequest(BaseModel):
    """A single detected intent with the parameters extracted for it."""
    intent: str = Field(
        ...,
        description="Intent name (e.g. 'CreateTeam', 'GetObjectives', 'General')",
        min_length=1,
    )
    parameters: dict[str, Any] = Field(
        default_factory=dict,
        description="Parameters extracted from the user message",
    )


class IntentAnalysis(BaseModel):
    """
    Result of a multi-intent analysis.

    `degraded` is True when the model response could not be used as-is and a
    default intent was substituted.
    """
    intents: list[IntentRequest] = Field(
        default_factory=list,
        description="All detected intents, in the order the model listed them",
    )
    degraded: bool = Field(
        False,
        description="True if the fallback or default intent was used",
    )
    repairs: list[str] = Field(
        default_factory=list,
        description="JSON repairs applied to the model response",
    )

    @property
    def intent_names(self) -> list[str]:
        return [i.intent for i in self.intents]
