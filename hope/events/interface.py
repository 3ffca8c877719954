from typing import Self

from pydantic import BaseModel, ConfigDict, ValidationError

from hope.errors import DecodeError
from hope.events.eventcmd import EventCmd
from hope.events.info import Info


class Event(BaseModel):
    """A pianobar eventcmd along with its info, sent as one JSON message."""

    model_config = ConfigDict(frozen=True, extra="forbid", strict=True)

    eventcmd: EventCmd
    info: Info

    def encode(self) -> bytes:
        return self.model_dump_json().encode("utf-8")

    @classmethod
    def decode(cls, data: bytes | str) -> Self:
        """:raises DecodeError: if data is not a valid encoded event."""
        try:
            return cls.model_validate_json(data)
        except (ValidationError, UnicodeDecodeError) as e:
            raise DecodeError(str(e)) from e
