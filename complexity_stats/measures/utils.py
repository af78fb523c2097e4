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

from collections import OrderedDict
from itertools import combinations

import numpy as np
import pandas as pd
from scipy.spatial.distance import pdist, squareform
from scipy.stats import kurtosis, skew
from sklearn.preprocessing import MinMaxScaler

from ..config import ALL, DEFAULT_SUMMARY, NAME_SEPARATOR


def _sd(values):
    return np.std(values, ddof=1) if len(values) > 1 else np.nan


def _var(values):
    return np.var(values, ddof=1) if len(values) > 1 else np.nan


def _skewness(values):
    return skew(values) if len(values) > 2 else np.nan


def _kurtosis(values):
    return kurtosis(values, fisher=True) if len(values) > 3 else np.nan


SUMMARIES = OrderedDict([
    ("mean", np.mean),
    ("sd", _sd),
    ("var", _var),
    ("min", np.min),
    ("max", np.max),
    ("median", np.median),
    ("skewness", _skewness),
    ("kurtosis", _kurtosis),
])


def binarize(X):
    """Numeric matrix of the features, categorical columns one-hot encoded."""
    if isinstance(X, pd.DataFrame):
        X = pd.get_dummies(X, drop_first=False, dtype=float)
    return np.asarray(X, dtype=float)


def rescale(X):
    """Rescale every feature into [0, 1]; constant features become 0."""
    return MinMaxScaler().fit_transform(X)


def encode(y):
    """Integer class codes and class names of a label vector."""
    classes, codes = np.unique(np.asarray(y), return_inverse=True)
    return codes, classes


def distances(X):
    return squareform(pdist(X))


def ovo(X, y):
    """Yield the (X, y) restriction to every pair of classes, y recoded to 0/1."""
    for a, b in combinations(np.unique(y), 2):
        mask = (y == a) | (y == b)
        yield X[mask], (y[mask] == b).astype(int)


def interpolate(X, y, random_state):
    """
    Random convex combinations of pairs of same-class examples.

    As many synthetic points as examples are drawn for each class.
    """
    X_new, y_new = [], []
    for label in np.unique(y):
        X_c = X[y == label]
        n = X_c.shape[0]
        first = random_state.randint(n, size=n)
        second = random_state.randint(n, size=n)
        alpha = random_state.uniform(size=(n, 1))
        X_new.append(X_c[first] + alpha * (X_c[second] - X_c[first]))
        y_new.append(np.full(n, label))
    return np.vstack(X_new), np.concatenate(y_new)


def check_measures(measures, available):
    """List of the requested measures, in canonical order."""
    if isinstance(measures, str):
        measures = [measures]
    measures = list(measures)
    if ALL in measures:
        return list(available)

    unknown = [m for m in measures if m not in available]
    if unknown:
        raise ValueError("unknown measures %s, should be among %s" % (unknown, list(available)))
    return [m for m in available if m in measures]


def check_summary(summary):
    if isinstance(summary, str):
        summary = [summary]
    summary = list(summary)
    unknown = [s for s in summary if s not in SUMMARIES]
    if unknown:
        raise ValueError("unknown summary functions %s, should be among %s" % (unknown, list(SUMMARIES)))
    return summary


def summarize(name, values, summary=DEFAULT_SUMMARY):
    """Named summary statistics of a multi-valued measure."""
    values = np.asarray(values, dtype=float).ravel()
    return OrderedDict(
        (name + NAME_SEPARATOR + s, float(SUMMARIES[s](values)) if len(values) else np.nan)
        for s in check_summary(summary))


def collect(results, multivalued, summary):
    """Flatten measure values into the ordered mapping a group returns."""
    out = OrderedDict()
    for name, value in results.items():
        if name in multivalued:
            out.update(summarize(name, value, summary))
        else:
            out[name] = float(value)
    return out
