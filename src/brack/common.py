#!/usr/bin/env python3
#
#  common.py
#  brack
#
#  Created by turannul on 19/10/2026.
#
#  This program is free software; you can redistribute it and/or modify
#  it under the terms of the GNU General Public License as published by
#  the Free Software Foundation; version 2 of the License.
#
#  See the LICENSE file for more details.

import logging
import os
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional

cRed = "\033[0;31m"
cReset = "\033[0m"

e_success = 0
e_failure = 1

# --- Configuration ---
backlight_dir = "/sys/class/backlight"
default_devices: List[str] = ["intel_backlight", "radeon_backlight"]


class BrackError(Exception):
    """Base class for errors that abort a brack invocation."""


class DeviceReadError(BrackError):
    """A device file is missing, unreadable or does not hold a valid count."""


class DeviceNameError(BrackError):
    """A device directory has no usable name component."""


class DeviceWriteError(BrackError):
    """Writing the brightness file failed."""


class ChangeParseError(BrackError):
    """A change token is not a number."""


@dataclass
class Config:
    backlight_dir: str = backlight_dir
    default_devices: List[str] = field(default_factory=lambda: list(default_devices))
    debug: bool = False


def load_config(environ: Optional[Mapping[str, str]] = None) -> Config:
    """Builds the runtime config from the module defaults and BRACK_* environment variables."""
    env = os.environ if environ is None else environ
    config = Config()
    if env.get("BRACK_BACKLIGHT_DIR"):
        config.backlight_dir = env["BRACK_BACKLIGHT_DIR"]
    if env.get("BRACK_DEFAULT_DEVICES"):
        names = [name.strip() for name in env["BRACK_DEFAULT_DEVICES"].split(",")]
        config.default_devices = [name for name in names if name]
    config.debug = env.get("BRACK_DEBUG", "") not in ("", "0")
    return config


def setup_logging(name: str = "brack", level: int = logging.WARNING) -> logging.Logger:
    """Sets up and returns a logger that writes to stderr, leaving stdout for device lines."""
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.handlers = []
    formatter = logging.Formatter("[%(levelname)s] %(message)s")
    sh = logging.StreamHandler()
    sh.setFormatter(formatter)
    logger.addHandler(sh)
    return logger


def log_event(logger: logging.Logger, level_char: str, message: str) -> None:
    """Maps level characters to logging levels and logs the message."""
    level_map: Dict[str, int] = {"-": logging.ERROR, "!": logging.WARNING, "*": logging.INFO, "+": logging.INFO, "#": logging.DEBUG}
    level = level_map.get(level_char, logging.INFO)
    if level == logging.ERROR:
        message = f"{cRed}{message}{cReset}"
    logger.log(level, message)
