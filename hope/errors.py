class HopeError(Exception):
    """Base class of errors raised while relaying pianobar events."""


class InvalidEventCmd(HopeError, ValueError):
    def __init__(self, token: str):
        super().__init__(f"Invalid eventcmd: {token}")
        self.token = token


class InvalidInfo(HopeError, ValueError):
    """Event info text could not be parsed."""

    def __init__(self, reason: str = "Invalid event info"):
        super().__init__(reason)


class MissingStationCount(InvalidInfo):
    def __init__(self):
        super().__init__("Invalid event info: no stationCount= marker")


class MalformedLine(InvalidInfo):
    def __init__(self, line: str):
        super().__init__(f"Invalid event info: malformed line {line!r}")
        self.line = line


class MissingKey(InvalidInfo):
    def __init__(self, key: str):
        super().__init__(f"Invalid event info: missing {key}")
        self.key = key


class InvalidNumber(InvalidInfo):
    def __init__(self, key: str, value: str):
        super().__init__(f"Invalid event info: {key}={value!r} is not an int32")
        self.key = key
        self.value = value


class DecodeError(HopeError, ValueError):
    """A wire message is not a valid encoded event."""


class TransportError(HopeError):
    """Socket level failure while sending or receiving an event."""
