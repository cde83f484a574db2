# Chess System
# Copyright (C) 2025  Chess System developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

# --- Constants ---
APP_NAME = "Chess System"
SCRIPT_COMMENT_PREFIX = "#"
REPORT_ENCODING = "utf-8"

# Tournament points (used to pick a tournament winner)
WIN_POINTS = 2
DRAW_POINTS = 1
LOSS_POINTS = 0

# Level weights (used for the players levels report)
LEVEL_WIN_WEIGHT = 6
LEVEL_LOSS_WEIGHT = -10
LEVEL_DRAW_WEIGHT = 2

# Reports
REPORT_FLOAT_PRECISION = 2
PLAYER_LEVEL_LINE = "{player_id} {level:.2f}\n"

# Location validation: one capital letter, then lower case letters or spaces
LOCATION_FIRST_CHARS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LOCATION_REST_CHARS = "abcdefghijklmnopqrstuvwxyz "

# Initial tournament statistics
NO_TIME = 0

# Logging
ROOT_LOGGER_NAME = "chesssystem"
LOG_LEVEL_ENV_VAR = "CHESSSYSTEM_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
