"""Domain entity for chat widget replies."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ChatReply:
    """The canned answer selected for a visitor's message."""

    reply: str
    language: str
