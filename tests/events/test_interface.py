import json

import pytest

from hope.errors import DecodeError
from hope.events import CurlStatus, Event, EventCmd, Info, PianobarStatus, Song


@pytest.fixture
def event():
    return Event(
        eventcmd=EventCmd.SONG_START,
        info=Info(
            artist="Count Basie",
            title="Splanky",
            album="The Complete Atomic Basie",
            station_name="Count Basie Radio",
            pianobar_status=PianobarStatus(code=1, message="OK"),
            curl_status=CurlStatus(code=0, message="OK"),
            song=Song(duration=245, played=12),
            rating=3,
            stations=("Jazz Radio", "Blues Radio"),
        ),
    )


def test_round_trip(event):
    assert Event.decode(event.encode()) == event
    assert Event.decode(event.encode().decode()) == event


def test_encode(event):
    assert json.loads(event.encode()) == {
        "eventcmd": "songstart",
        "info": {
            "artist": "Count Basie",
            "title": "Splanky",
            "album": "The Complete Atomic Basie",
            "cover_art": None,
            "station_name": "Count Basie Radio",
            "song_station_name": None,
            "pianobar_status": {"code": 1, "message": "OK"},
            "curl_status": {"code": 0, "message": "OK"},
            "song": {"duration": 245, "played": 12},
            "rating": 3,
            "detail_url": None,
            "stations": ["Jazz Radio", "Blues Radio"],
        },
    }


def test_immutable(event):
    with pytest.raises(ValueError):
        event.eventcmd = EventCmd.SONG_FINISH


def _payload(event, **changes) -> bytes:
    data = json.loads(event.encode())
    data.update(changes)
    return json.dumps(data).encode()


@pytest.mark.parametrize(
    "data",
    [
        b"",
        b"not json",
        b"\xff\xfe",
        b"[]",
        b'{"eventcmd": "songstart"}',
    ],
)
def test_decode_invalid(data):
    with pytest.raises(DecodeError):
        Event.decode(data)


def test_decode_unknown_eventcmd(event):
    with pytest.raises(DecodeError):
        Event.decode(_payload(event, eventcmd="lolwut"))
    with pytest.raises(DecodeError):
        Event.decode(_payload(event, eventcmd="SongStart"))


def test_decode_extra_field(event):
    with pytest.raises(DecodeError):
        Event.decode(_payload(event, extra=1))


def test_decode_out_of_range(event):
    data = json.loads(event.encode())
    data["info"]["rating"] = 2**31
    with pytest.raises(DecodeError):
        Event.decode(json.dumps(data))


@pytest.mark.parametrize(
    ("field", "value"),
    [
        (("rating",), "3"),
        (("rating",), True),
        (("rating",), 3.0),
        (("song", "duration"), "245"),
        (("pianobar_status", "message"), 1),
        (("stations",), "Jazz Radio"),
    ],
)
def test_decode_wrong_type(event, field, value):
    data = json.loads(event.encode())
    *parents, key = field
    target = data["info"]
    for parent in parents:
        target = target[parent]
    target[key] = value
    with pytest.raises(DecodeError):
        Event.decode(json.dumps(data))


def test_decode_missing_info_field(event):
    data = json.loads(event.encode())
    del data["info"]["song"]
    with pytest.raises(DecodeError):
        Event.decode(json.dumps(data))
