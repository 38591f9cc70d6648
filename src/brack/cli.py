#!/usr/bin/env python3
#
#  cli.py
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
import sys
from typing import List, Optional

from brack.change import looks_like_change, parse_change
from brack.common import BrackError, Config, e_failure, e_success, load_config, log_event, setup_logging
from brack.device import Device, find_default_device, get_devices, read_named_device

usage_text = """\
Change backlight brightness

brack [device] [change]

device (optional) the device to change backlight on (see /sys/class/backlight)
change (optional) absolute value in percent or change in percent prefixed with +/-.

no change will display current value.
no device will try to automatically determine device.

Examples:

brack +10 # increase brightness with 10%
brack -10 # decrease brightness with 10%
brack 50 # set brightness to 50%
brack intel_backlight +10 # increase brightness with 10% on the intel_backlight device"""


def usage() -> None:
    print(usage_text)


def apply_change(device: Device, token: str) -> None:
    """Parses token, applies it to device, persists and prints the result."""
    change = parse_change(token)
    device.apply(change)
    device.write()
    print(device)


def dispatch(args: List[str], config: Config, logger: logging.Logger) -> int:
    if len(args) == 0:
        device_name, change = None, None
    elif len(args) == 1:
        if looks_like_change(args[0]):
            device_name, change = None, args[0]
        else:
            device_name, change = args[0], None
    elif len(args) == 2:
        device_name, change = args[0], args[1]
    else:
        usage()
        return e_success

    # A missing device is a normal outcome, not an error: nothing is printed and the exit status stays 0.
    if device_name is None:
        devices = get_devices(config.backlight_dir)
        log_event(logger, "#", f"Found {len(devices)} device(s) in {config.backlight_dir}")
        if change is None:
            for device in devices:
                print(device)
            return e_success

        device = find_default_device(devices, config.default_devices)
        if device is None:
            log_event(logger, "#", f"None of the default devices {config.default_devices} exist.")
            return e_success
    else:
        # A named device that exists but cannot be read is an error, not a miss.
        device = read_named_device(config.backlight_dir, device_name)
        if device is None:
            log_event(logger, "#", f"Device {device_name} not found.")
            return e_success

    if change is None:
        print(device)
    else:
        apply_change(device, change)
    return e_success


def main(argv: Optional[List[str]] = None, config: Optional[Config] = None) -> int:
    """Runs brack with argv (program name excluded) and returns the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if config is None:
        config = load_config()
    logger = setup_logging("brack", logging.DEBUG if config.debug else logging.WARNING)

    if "-h" in args or "--help" in args:
        usage()
        return e_success

    try:
        return dispatch(args, config, logger)
    except BrackError as err:
        log_event(logger, "-", str(err))
        return e_failure


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
