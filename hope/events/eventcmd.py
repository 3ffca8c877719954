"""Pianobar eventcmd names.

Pianobar runs its ``event_command`` with the event name as first argument,
see ``pianobar(1)``.
"""

from enum import StrEnum
from typing import Self

from hope.errors import InvalidEventCmd


class EventCmd(StrEnum):
    # The value is the token pianobar passes, and also the wire representation.
    ARTIST_BOOKMARK = "artistbookmark"
    SETTINGS_CHANGE = "settingschange"
    SETTINGS_GET = "settingsget"
    SONG_BAN = "songban"
    SONG_BOOKMARK = "songbookmark"
    SONG_EXPLAIN = "songexplain"
    SONG_FINISH = "songfinish"
    SONG_LOVE = "songlove"
    SONG_SHELF = "songshelf"
    SONG_START = "songstart"
    STATION_ADD_GENRE = "stationaddgenre"
    STATION_ADD_MUSIC = "stationaddmusic"
    STATION_ADD_SHARED = "stationaddshared"
    STATION_CREATE = "stationcreate"
    STATION_DELETE = "stationdelete"
    STATION_DELETE_ARTIST_SEED = "stationdeleteartistseed"
    STATION_DELETE_FEEDBACK = "stationdeletefeedback"
    STATION_DELETE_SONG_SEED = "stationdeletesongseed"
    STATION_DELETE_STATION_SEED = "stationdeletestationseed"
    STATION_FETCH_GENRE = "stationfetchgenre"
    STATION_FETCH_INFO = "stationfetchinfo"
    STATION_FETCH_PLAYLIST = "stationfetchplaylist"
    STATION_GET_MODES = "stationgetmodes"
    STATION_QUICK_MIX_TOGGLE = "stationquickmixtoggle"
    STATION_RENAME = "stationrename"
    STATION_SET_MODE = "stationsetmode"
    USER_GET_STATIONS = "usergetstations"
    USER_LOGIN = "userlogin"

    @classmethod
    def parse(cls, token: str) -> Self:
        """:raises InvalidEventCmd: if the token is not an exact match."""
        try:
            return cls(token)
        except ValueError:
            raise InvalidEventCmd(token) from None
