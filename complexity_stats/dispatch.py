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

import copy
import logging
from collections import OrderedDict
from typing import Mapping, Sequence

import joblib
import pandas as pd

from .config import NAME_SEPARATOR
from .errors import InvalidGroupResult

logger = logging.getLogger(__name__)


def run_group(registry, group, x, y, options):
    logger.debug("Computing measure group: %s" % group)
    values = registry[group](x, y, **options)
    logger.debug("Measure group %s computed!" % group)
    return values


def dispatch(registry, groups: Sequence[str], x, y, options: Mapping, n_jobs=None):
    """
    Invoke every group on the same inputs, returning their outputs keyed by group.

    Groups run one after the other, or on a pool of ``n_jobs`` threads; any
    failure aborts the whole computation. Every group gets its own copy of
    the options, so a shared random state is never consumed by two groups.
    """
    if n_jobs is None or n_jobs == 1 or len(groups) < 2:
        values = [run_group(registry, group, x, y, copy.deepcopy(options)) for group in groups]
    else:
        parallel = joblib.Parallel(n_jobs=n_jobs, prefer="threads")
        values = parallel(
            joblib.delayed(run_group)(registry, group, x, y, copy.deepcopy(options))
            for group in groups)

    return OrderedDict(zip(groups, values))


def aggregate(outputs: Mapping[str, Mapping], order: Sequence[str]) -> pd.Series:
    """Merge per-group outputs into one series named ``<group>.<submeasure>``, in ``order``."""
    names, values = [], []
    for group in order:
        output = outputs[group]
        items = list(output.items())
        if not items:
            raise InvalidGroupResult("measure group %s returned no values" % group)
        for name, value in items:
            names.append("%s%s%s" % (group, NAME_SEPARATOR, name))
            try:
                values.append(float(value))
            except (TypeError, ValueError) as err:
                raise InvalidGroupResult("measure %s of group %s is not a number: %r"
                                         % (name, group, value)) from err

    duplicates = pd.Index(names)[pd.Index(names).duplicated()].unique()
    if len(duplicates):
        raise InvalidGroupResult("duplicated measure names: %s" % ", ".join(duplicates))

    return pd.Series(values, index=pd.Index(names, dtype=object), dtype=float, name="complexity")
