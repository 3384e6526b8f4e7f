"""
Mattermost slash command response payloads.
"""

from enum import Enum

from pydantic import BaseModel


class ResponseType(str, Enum):
    """Who sees the command response."""
    IN_CHANNEL = "in_channel"
    EPHEMERAL = "ephemeral"


class MattermostCommandResponse(BaseModel):
    """Response body understood by Mattermost slash commands."""
    text: str
    response_type: ResponseType

    @classmethod
    def in_channel(cls, markdown: str) -> "MattermostCommandResponse":
        """Visible to everyone in the channel."""
        return cls(text=markdown, response_type=ResponseType.IN_CHANNEL)

    @classmethod
    def ephemeral(cls, markdown: str) -> "MattermostCommandResponse":
        """Visible only to the user who ran the command."""
        return cls(text=markdown, response_type=ResponseType.EPHEMERAL)

    @classmethod
    def for_type(cls, markdown: str, response_type: ResponseType) -> "MattermostCommandResponse":
        if response_type == ResponseType.EPHEMERAL:
            return cls.ephemeral(markdown)
        return cls.in_channel(markdown)
