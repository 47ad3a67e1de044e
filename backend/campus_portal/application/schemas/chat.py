"""Pydantic v2 schemas (DTOs) for the chat widget."""

from pydantic import BaseModel, Field


class ChatbotRequest(BaseModel):
    """A visitor's message to the chat widget."""

    message: str = Field(..., max_length=2000, examples=["How do admissions work?"])
    language: str | None = Field(None, examples=["english", "hindi"])


class ChatbotResponse(BaseModel):
    """The canned reply and the language it was written in."""

    reply: str
    language: str
