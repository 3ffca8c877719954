from typing import ClassVar

import zenconfig
from pydantic import BaseModel, Field

from hope.events import SocketConfig


class HopeConfig(BaseModel, zenconfig.Config):
    ENV_PATH: ClassVar[str] = "HOPE_CONFIG"
    PATH: ClassVar[str] = "~/.config/hope/config.yaml"

    socket: SocketConfig = Field(default_factory=SocketConfig)
    logging: dict = Field(
        default_factory=lambda: {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "formatter": {
                    "validate": True,
                    "format": "%(asctime)s %(levelname)-5.5s [%(name)s] %(message)s",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "formatter",
                    "stream": "ext://sys.stderr",
                },
            },
            "root": {
                "level": "WARNING",
                "handlers": ["console"],
            },
        }
    )
