"""Pianobar event info.

Pianobar writes the event info on the event command's stdin as ``key=value``
lines, followed by the station list::

    artist=Count Basie
    title=Splanky
    ...
    stationCount=2
    station0=Jazz Radio
    station1=Blues Radio
"""

import re
from typing import Annotated, Iterator, Self

from pydantic import BaseModel, ConfigDict, Field

from hope.errors import InvalidNumber, MalformedLine, MissingKey, MissingStationCount

_STATION_COUNT = "stationCount="
_RE_INT = re.compile(r"[+-]?[0-9]+")
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1

Int32 = Annotated[int, Field(ge=_INT32_MIN, le=_INT32_MAX)]


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid", strict=True)


class PianobarStatus(_Record):
    # Defined by pianobar's PianoReturn_t.
    code: Int32
    message: str


class CurlStatus(_Record):
    code: Int32
    message: str


class Song(_Record):
    duration: Int32
    played: Int32


class Info(_Record):
    artist: str | None = None
    title: str | None = None
    album: str | None = None
    cover_art: str | None = None
    station_name: str | None = None
    song_station_name: str | None = None
    pianobar_status: PianobarStatus
    curl_status: CurlStatus
    song: Song
    rating: Int32
    detail_url: str | None = None
    stations: tuple[str, ...] = ()

    @classmethod
    def parse(cls, text: str) -> Self:
        """Parse the event info text written by pianobar.

        :raises InvalidInfo: on any missing or malformed field, nothing is
            returned partially.
        """
        # Splitting at the station count treats the station array separately
        # from the other key-value pairs.
        head, marker, tail = text.partition(_STATION_COUNT)
        if not marker:
            raise MissingStationCount()

        # Last occurrence of a key wins, the order of lines is not trusted.
        fields = dict(_split(line) for line in _lines(head))

        stations = _lines(tail)
        # The first line holds the station count, which is not needed.
        next(stations, None)

        return cls(
            artist=_optional(fields, "artist"),
            title=_optional(fields, "title"),
            album=_optional(fields, "album"),
            cover_art=_optional(fields, "coverArt"),
            station_name=_optional(fields, "stationName"),
            song_station_name=_optional(fields, "songStationName"),
            pianobar_status=PianobarStatus(
                code=_int(fields, "pRet"),
                message=_required(fields, "pRetStr"),
            ),
            curl_status=CurlStatus(
                code=_int(fields, "wRet"),
                message=_required(fields, "wRetStr"),
            ),
            song=Song(
                duration=_int(fields, "songDuration"),
                played=_int(fields, "songPlayed"),
            ),
            rating=_int(fields, "rating"),
            detail_url=_optional(fields, "detailUrl"),
            stations=tuple(_split(line)[1] for line in stations),
        )


def parse(text: str) -> Info:
    return Info.parse(text)


def _lines(text: str) -> Iterator[str]:
    for line in text.split("\n"):
        if line := line.removesuffix("\r"):
            yield line


def _split(line: str) -> tuple[str, str]:
    key, sep, value = line.partition("=")
    if not sep:
        raise MalformedLine(line)
    return key, value


def _optional(fields: dict[str, str], key: str) -> str | None:
    return fields.get(key) or None


def _required(fields: dict[str, str], key: str) -> str:
    try:
        return fields[key]
    except KeyError:
        raise MissingKey(key) from None


def _int(fields: dict[str, str], key: str) -> int:
    value = _required(fields, key)
    if not _RE_INT.fullmatch(value):
        raise InvalidNumber(key, value)
    number = int(value)
    if not _INT32_MIN <= number <= _INT32_MAX:
        raise InvalidNumber(key, value)
    return number
