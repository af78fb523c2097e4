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

"""
Extract the complexity measures of a classification data set.

The measures take into account the overlap between classes imposed by
feature values, the separability and distribution of the examples, and
structural measures of the data set represented as a graph.

Example::

    from sklearn.datasets import load_iris
    import complexity_stats

    iris = load_iris(as_frame=True).frame
    complexity_stats.complexity_formula("target ~ .", iris)
    complexity_stats.complexity_formula("target ~ .", iris, groups="linearity")
"""

from typing import NamedTuple, Union

import pandas as pd

from .config import ALL
from .dispatch import dispatch, aggregate
from .errors import InvalidInput
from .formula import Formula, as_formula
from .normalize import normalize
from .registry import DEFAULT_REGISTRY


class DirectInput(NamedTuple):
    """Features table and labels (a vector or a single-column table)."""
    x: pd.DataFrame
    y: object


class FormulaInput(NamedTuple):
    """A ``response ~ predictors`` formula and the table holding all its columns."""
    formula: Union[str, Formula]
    data: pd.DataFrame


def as_direct(call) -> DirectInput:
    if isinstance(call, DirectInput):
        return call
    if isinstance(call, FormulaInput):
        x, y = as_formula(call.formula).resolve(call.data)
        return DirectInput(x, y)
    raise InvalidInput("expected a DirectInput or a FormulaInput, got %s" % type(call).__name__)


def complexity(call, groups=ALL, n_jobs=None, registry=DEFAULT_REGISTRY, **options) -> pd.Series:
    """
    Compute the complexity measures of a data set.

    Parameters
    ----------
    call : DirectInput or FormulaInput
        The data set, either as features and labels or as a formula and a table.
    groups : str or list of str
        ``"all"`` or the measure groups to compute; tokens may be
        abbreviated to any unambiguous prefix (e.g. ``"lin"``).
    n_jobs : int, optional
        Number of threads computing the groups concurrently.
    registry : Registry
        Measure groups available, in the order of the result.
    **options
        Forwarded unchanged to every measure group (e.g. ``summary``,
        ``random_state``).

    Returns
    -------
    pandas.Series
        One value per submeasure, named ``<group>.<submeasure>``.
    """
    direct = as_direct(call)
    data = normalize(direct.x, direct.y)
    resolved = registry.resolve(groups)
    outputs = dispatch(registry, resolved, data.features, data.labels, options, n_jobs=n_jobs)
    return aggregate(outputs, resolved)


def complexity_xy(x, y, groups=ALL, **kwargs) -> pd.Series:
    """Compute the complexity measures of features ``x`` and labels ``y``."""
    return complexity(DirectInput(x, y), groups, **kwargs)


def complexity_formula(formula, data, groups=ALL, **kwargs) -> pd.Series:
    """Compute the complexity measures of the columns of ``data`` selected by ``formula``."""
    return complexity(FormulaInput(formula, data), groups, **kwargs)
