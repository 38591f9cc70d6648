#!/usr/bin/env python3
#
#  device.py
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
import math
import os
from typing import List, Optional

from brack.change import Absolute, Change, Relative
from brack.common import DeviceNameError, DeviceReadError, DeviceWriteError, log_event

logger = logging.getLogger("brack")


class Device:
    """One backlight device: a sysfs directory holding brightness and max_brightness."""

    def __init__(self, path: str, name: str, max: int, current: int) -> None:
        self.path = path
        self.name = name
        self.max = max
        self.current = current

    def __repr__(self) -> str:
        return f"Device(name={self.name!r}, current={self.current}, max={self.max})"

    def __str__(self) -> str:
        return f"{self.name:15} {int(self.percent())}% ({self.current}/{self.max})"

    def percent(self) -> float:
        return self.current / self.max * 100.0

    def _clamp(self, counts: float) -> int:
        if math.isnan(counts) or counts < 0.0:
            return 0
        if counts >= self.max:
            return self.max
        return int(counts)

    def set(self, percent: float) -> None:
        """Sets brightness to an absolute percentage, capped at 100."""
        percent = min(percent, 100.0)
        self.current = self._clamp(percent / 100.0 * self.max)

    def change(self, percent: float) -> None:
        """Moves brightness by a signed percentage of max."""
        counts = percent / 100.0 * self.max
        self.current = self._clamp(counts + self.current)

    def apply(self, change: Change) -> None:
        if isinstance(change, Absolute):
            self.set(change.percent)
        elif isinstance(change, Relative):
            self.change(change.percent)
        else:
            raise TypeError(f"Unknown change: {change!r}")

    def write(self) -> None:
        """Writes the current count back to the brightness file."""
        brightness_file = os.path.join(self.path, "brightness")
        try:
            with open(brightness_file, "w") as f:
                f.write(str(self.current))
        except FileNotFoundError:
            raise DeviceWriteError(f"Brightness file not found in {self.path}.")
        except PermissionError:
            raise DeviceWriteError(f"Permission denied writing {brightness_file}. Please run with sudo.")
        except OSError as e:
            raise DeviceWriteError(f"Could not write brightness file: {e}")
        log_event(logger, "#", f"Wrote {self.current} to {brightness_file}")


def _read_count(path: str) -> int:
    """Reads a non-negative integer from a sysfs attribute file."""
    try:
        with open(path, "r") as f:
            raw = f.read()
    except UnicodeDecodeError:
        raise DeviceReadError(f"{path} is not a text file.")
    except OSError as e:
        raise DeviceReadError(f"Cannot read {path}: {e.strerror or e}")
    try:
        value = int(raw.strip())
    except ValueError:
        raise DeviceReadError(f"{path} does not contain an integer: {raw.strip()!r}")
    if value < 0:
        raise DeviceReadError(f"{path} holds a negative value: {value}")
    return value


def read_device(path: str) -> Device:
    """Reads max_brightness and brightness from a device directory."""
    name = os.path.basename(os.path.normpath(path))
    if not name or name in (os.sep, ".", ".."):
        raise DeviceNameError(f"No device name in path '{path}'.")

    max_value = _read_count(os.path.join(path, "max_brightness"))
    current = _read_count(os.path.join(path, "brightness"))
    if max_value == 0:
        raise DeviceReadError(f"Device '{name}' reports max_brightness of 0.")

    return Device(path, name, max_value, current)


def get_devices(path: str) -> List[Device]:
    """
    Reads every device directory directly under path.
    Entries that cannot be read are skipped so one broken device does not hide the rest.
    """
    try:
        entries = sorted(os.listdir(path))
    except (FileNotFoundError, NotADirectoryError):
        return []
    except OSError as e:
        raise DeviceReadError(f"Cannot list {path}: {e.strerror or e}")

    devices: List[Device] = []
    for entry in (os.path.join(path, name) for name in entries):
        if not os.path.isdir(entry):
            continue
        try:
            devices.append(read_device(entry))
        except (DeviceReadError, DeviceNameError) as err:
            log_event(logger, "#", f"Skipping {entry}: {err}")
    return devices


def find_device(devices: List[Device], name: str) -> Optional[Device]:
    """Returns the device called name, or None when there is none."""
    for device in devices:
        if device.name == name:
            return device
    return None


def find_default_device(devices: List[Device], names: List[str]) -> Optional[Device]:
    """Returns the first device matching names, in the order names are given."""
    for name in names:
        device = find_device(devices, name)
        if device is not None:
            return device
    return None


def read_named_device(base: str, name: str) -> Optional[Device]:
    """
    Reads the device called name under base, or returns None when there is no such directory.
    A directory that exists but cannot be read raises, unlike in get_devices.
    """
    if not name or os.sep in name or name in (".", ".."):
        return None
    path = os.path.join(base, name)
    if not os.path.isdir(path):
        return None
    return read_device(path)
