# -*- coding: utf-8 -*-

# Scripts to generate all the data and figures
# Copyright (C) 2020 Pietro Barbiero and Alberto Tonda
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
# along with this program.  If not, see <https://www.gnu.org/licenses/>.

# canonical order of the measure groups, also the order of the merged result
GROUPS = ("overlapping", "neighborhood", "linearity", "dimensionality",
          "balance", "network")

ALL = "all"

# separator between group and submeasure names, and between a measure and its summary
NAME_SEPARATOR = "."

# default summary functions applied to multi-valued measures
DEFAULT_SUMMARY = ("mean", "sd")

# minimum number of examples in every class
MIN_CLASS_SIZE = 2

# prefix added to column names that are not valid identifiers on their own
SANITIZE_PREFIX = "X"

# fraction of the largest pairwise distance under which two examples are connected
NETWORK_EPS = 0.15

# explained variance kept by PCA when estimating the intrinsic dimensionality
PCA_EXPLAINED_VARIANCE = 0.95
