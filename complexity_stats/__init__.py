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

__version__ = "0.1.0"

from .complexity import complexity, complexity_xy, complexity_formula, DirectInput, FormulaInput
from .errors import ComplexityError, InvalidInput, InvalidFormula, ShapeMismatch, \
    InsufficientClassSize, UnknownGroup, AmbiguousGroup, InvalidGroupResult
from .formula import Formula
from .normalize import normalize, sanitize_names
from .registry import Registry, DEFAULT_REGISTRY, list_groups
from .dataset_stats import dataset_complexity, openml_complexity_all
