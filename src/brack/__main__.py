#!/usr/bin/env python3
#
#  __main__.py
#  brack
#
#  Created by turannul on 19/10/2026.
#
#  This program is free software; you can redistribute it and/or modify
#  it under the terms of the GNU General Public License as published by
#  the Free Software Foundation; version 2 of the License.
#
#  See the LICENSE file for more details.

from brack.cli import run

run()
