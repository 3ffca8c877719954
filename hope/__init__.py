import argparse
import asyncio
import logging.config
import os
import signal
import sys
from pathlib import Path

import yaml
from concurrent_tasks import LoopExceptionHandler

from hope.config import HopeConfig
from hope.errors import HopeError, InvalidEventCmd
from hope.events import Event, EventCmd, EventsServer, read_info, send_event

__version__ = "0.1.0"

logger = logging.getLogger("hope")

LOG_LEVELS = {
    "off": logging.CRITICAL + 1,
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    # No finer level in logging, full events are logged at debug.
    "trace": logging.DEBUG,
}


def _eventcmd(token: str) -> EventCmd:
    try:
        return EventCmd.parse(token)
    except InvalidEventCmd as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="hope",
        description="A prettier CLI for pianobar, a console-based Pandora client.",
    )
    parser.add_argument(
        "eventcmd",
        nargs="?",
        type=_eventcmd,
        help="a pianobar eventcmd, the event info is read from stdin "
        "(runs the server when omitted)",
    )
    parser.add_argument(
        "--log-level",
        choices=list(LOG_LEVELS),
        default=os.environ.get("HOPE_LOG_LEVEL"),
        help="control logging verbosity (env: HOPE_LOG_LEVEL)",
    )
    parser.add_argument(
        "--socket",
        type=Path,
        default=os.environ.get("HOPE_SOCKET"),
        help="the path to the Unix socket used for IPC (env: HOPE_SOCKET)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--init-config",
        action="store_true",
        help="write the configuration file and exit",
    )
    args = parser.parse_args(argv)
    # Defaults taken from the environment are not checked against choices.
    if args.log_level and args.log_level not in LOG_LEVELS:
        parser.error(f"invalid log level: {args.log_level}")
    return args


def _configure_logging(cfg: HopeConfig, level: str | None) -> None:
    logging.config.dictConfig(cfg.logging)
    if level:
        logging.getLogger().setLevel(LOG_LEVELS[level])


async def _log_event(event: Event) -> None:
    logger.info("received %s eventcmd", event.eventcmd)
    logger.debug("%r", event.info)


async def serve(cfg: HopeConfig) -> None:
    """Log received events until SIGINT, SIGTERM or an unhandled loop error."""
    stop_event = asyncio.Event()

    async def stop() -> None:
        logger.debug("stopping...")
        stop_event.set()

    async with LoopExceptionHandler(stop_func=stop):
        async with EventsServer(cfg.socket, _log_event):
            loop = asyncio.get_running_loop()
            for sig in (signal.SIGINT, signal.SIGTERM):
                loop.add_signal_handler(sig, stop_event.set)
            logger.debug("started")
            await stop_event.wait()
    logger.debug("stopped")


def run(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    try:
        cfg = HopeConfig.load()
    except (ValueError, OSError, yaml.YAMLError) as e:
        logger.error("invalid configuration: %s", e)
        sys.exit(1)
    if args.socket:
        cfg.socket.path = args.socket
    if args.init_config:
        cfg.save()
        sys.exit(0)

    _configure_logging(cfg, args.log_level)

    try:
        if args.eventcmd is None:
            logger.debug("no eventcmd to handle, running server")
            asyncio.run(serve(cfg))
        else:
            logger.debug("handling %s eventcmd", args.eventcmd)
            event = Event(eventcmd=args.eventcmd, info=read_info())
            asyncio.run(send_event(cfg.socket.path, event))
    except HopeError as e:
        logger.error("%s", e)
        sys.exit(1)
