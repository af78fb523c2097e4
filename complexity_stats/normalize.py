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

import keyword
import re
from typing import Dict, List, NamedTuple, Tuple

import numpy as np
import pandas as pd

from .config import MIN_CLASS_SIZE, SANITIZE_PREFIX
from .errors import InvalidInput, ShapeMismatch, InsufficientClassSize


class NormalizedInput(NamedTuple):
    features: pd.DataFrame
    labels: pd.Series
    # sanitized column name -> original column name
    names: Dict[str, object]


def sanitize_names(columns) -> Tuple[List[str], Dict[str, object]]:
    """
    Rewrite column identifiers into valid, unique Python identifiers.

    Returns the new names, in column order, and the map from each new name
    back to the original one.
    """
    names = []
    seen = set()
    for column in columns:
        name = re.sub(r"\W", "_", str(column))
        if not name or name[0].isdigit():
            name = SANITIZE_PREFIX + name
        if keyword.iskeyword(name):
            name = name + "_"
        unique, i = name, 0
        while unique in seen:
            i += 1
            unique = "%s_%d" % (name, i)
        seen.add(unique)
        names.append(unique)

    return names, dict(zip(names, columns))


def as_labels(y) -> pd.Series:
    """Squeeze a single-column table and coerce the labels to a categorical series."""
    if isinstance(y, pd.DataFrame):
        if y.shape[1] != 1:
            raise InvalidInput("labels must be a vector or a single-column data frame, "
                               "got %d columns" % y.shape[1])
        y = y.iloc[:, 0]

    if not isinstance(y, pd.Series):
        if np.ndim(y) > 2 or (np.ndim(y) == 2 and np.shape(y)[1] != 1):
            raise InvalidInput("labels must be a vector or a single-column array, got shape %r"
                               % (np.shape(y),))
        y = pd.Series(np.asarray(y).ravel())

    if y.isna().any():
        raise InvalidInput("labels contain %d missing values" % y.isna().sum())

    return y.astype("category").cat.remove_unused_categories()


def normalize(x, y) -> NormalizedInput:
    """
    Validate a (features, labels) pair and prepare it for the measure groups.

    Checks, in order: ``x`` is a data frame, ``x`` and ``y`` have the same
    number of rows, every class has at least two examples. A row-count
    mismatch is reported before a too-small class, so ``ShapeMismatch`` wins
    over ``InsufficientClassSize`` when both apply.
    """
    if not isinstance(x, pd.DataFrame):
        raise InvalidInput("data argument must be a data.frame, got %s" % type(x).__name__)

    y = as_labels(y)

    if x.shape[0] != len(y):
        raise ShapeMismatch("x and y must have same number of rows (%d != %d)"
                            % (x.shape[0], len(y)))

    counts = y.value_counts(sort=False)
    if len(counts) == 0:
        raise InvalidInput("labels are empty")
    if counts.min() < MIN_CLASS_SIZE:
        raise InsufficientClassSize(counts.to_dict())
    if len(counts) < 2:
        raise InvalidInput("labels must have at least two classes, got %r" % list(counts.index))

    names, mapping = sanitize_names(x.columns)
    features = x.copy()
    features.columns = names
    labels = pd.Series(y.values, index=features.index, name=y.name)

    return NormalizedInput(features, labels, mapping)
