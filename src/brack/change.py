#!/usr/bin/env python3
#
#  change.py
#  brack
#
#  Created by turannul on 19/10/2026.
#
#  This program is free software; you can redistribute it and/or modify
#  it under the terms of the GNU General Public License as published by
#  the Free Software Foundation; version 2 of the License.
#
#  See the LICENSE file for more details.

import math
from dataclasses import dataclass
from typing import Union

from brack.common import ChangeParseError


@dataclass(frozen=True)
class Absolute:
    """Target brightness in percent."""
    percent: float


@dataclass(frozen=True)
class Relative:
    """Signed brightness delta in percent of max."""
    percent: float


Change = Union[Absolute, Relative]


def _to_float(value: str) -> float:
    """float() without the surrounding whitespace and digit underscores it tolerates."""
    if value != value.strip() or "_" in value:
        raise ValueError(f"could not convert string to float: {value!r}")
    return float(value)


def _parse_percent(value: str, token: str) -> float:
    try:
        percent = _to_float(value)
    except ValueError:
        raise ChangeParseError(f"Invalid brightness change '{token}'. Please use a number (e.g., 50, +10 or -10).")
    if math.isnan(percent):
        raise ChangeParseError(f"Invalid brightness change '{token}'.")
    return percent


def parse_change(token: str) -> Change:
    """
    Classifies a command line token.
    "+N" and "-N" are relative, anything else is an absolute percentage.
    A leading "-" is always a decrease, so negative absolute targets cannot be written.
    """
    if token.startswith("+"):
        return Relative(_parse_percent(token[1:], token))
    elif token.startswith("-"):
        return Relative(-_parse_percent(token[1:], token))
    else:
        return Absolute(_parse_percent(token, token))


def looks_like_change(token: str) -> bool:
    """True if a lone argument should be read as a change rather than a device name."""
    if token.startswith("+") or token.startswith("-"):
        return True
    try:
        _to_float(token)
    except ValueError:
        return False
    return True
