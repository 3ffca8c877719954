from hope.events.client import read_info, send_event
from hope.events.eventcmd import EventCmd
from hope.events.info import CurlStatus, Info, PianobarStatus, Song
from hope.events.interface import Event
from hope.events.server import EventsServer, SocketConfig

__all__ = [
    "CurlStatus",
    "Event",
    "EventCmd",
    "EventsServer",
    "Info",
    "PianobarStatus",
    "SocketConfig",
    "Song",
    "read_info",
    "send_event",
]
