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
Feature overlapping measures.

They evaluate how informative the available features are to separate the
classes: the lower the value, the more at least one feature (or a linear
combination of them) discriminates the classes.
"""

from collections import OrderedDict

import numpy as np

from ..config import DEFAULT_SUMMARY
from .utils import binarize, encode, ovo, check_measures, collect

MEASURES = ("F1", "F1v", "F2", "F3", "F4")


def fisher_ratio(X, y):
    """Maximum Fisher's discriminant ratio of every feature, as 1 / (1 + r)."""
    mu = X.mean(axis=0)
    between = np.zeros(X.shape[1])
    within = np.zeros(X.shape[1])
    for label in np.unique(y):
        X_c = X[y == label]
        mu_c = X_c.mean(axis=0)
        between += X_c.shape[0] * (mu_c - mu) ** 2
        within += ((X_c - mu_c) ** 2).sum(axis=0)

    with np.errstate(divide="ignore", invalid="ignore"):
        r = between / within
    return 1 / (1 + r)


def directional_fisher(X, y):
    X_0, X_1 = X[y == 0], X[y == 1]
    p_0, p_1 = X_0.shape[0] / X.shape[0], X_1.shape[0] / X.shape[0]
    delta = X_1.mean(axis=0) - X_0.mean(axis=0)

    W = p_0 * np.atleast_2d(np.cov(X_0, rowvar=False)) + \
        p_1 * np.atleast_2d(np.cov(X_1, rowvar=False))
    B = np.outer(delta, delta)
    d = np.linalg.pinv(W) @ delta

    with np.errstate(divide="ignore", invalid="ignore"):
        dF = (d @ B @ d) / (d @ W @ d)
    return 1 / (1 + dF)


def _overlap_bounds(X, y):
    X_0, X_1 = X[y == 0], X[y == 1]
    maxmin = np.maximum(X_0.min(axis=0), X_1.min(axis=0))
    minmax = np.minimum(X_0.max(axis=0), X_1.max(axis=0))
    return maxmin, minmax


def _overlap_counts(X, y):
    """Number of examples inside the overlapping region of each feature."""
    if len(np.unique(y)) < 2:
        return np.zeros(X.shape[1], dtype=int), None
    maxmin, minmax = _overlap_bounds(X, y)
    inside = (X >= maxmin) & (X <= minmax)
    return inside.sum(axis=0), inside


def overlap_volume(X, y):
    maxmin, minmax = _overlap_bounds(X, y)
    span = X.max(axis=0) - X.min(axis=0)
    overlap = np.maximum(0, minmax - maxmin)
    with np.errstate(divide="ignore", invalid="ignore"):
        ratio = np.where(span > 0, overlap / span, 1.0)
    return np.prod(ratio)


def feature_efficiency(X, y):
    counts, _ = _overlap_counts(X, y)
    return counts.min() / X.shape[0]


def collective_efficiency(X, y):
    n = X.shape[0]
    features = list(range(X.shape[1]))
    remaining = np.ones(n, dtype=bool)

    while features and remaining.any():
        X_r, y_r = X[remaining][:, features], y[remaining]
        counts, inside = _overlap_counts(X_r, y_r)
        if inside is None:
            break
        best = int(np.argmin(counts))
        keep = np.flatnonzero(remaining)[inside[:, best]]
        remaining[:] = False
        remaining[keep] = True
        del features[best]

    if remaining.any() and len(np.unique(y[remaining])) < 2:
        remaining[:] = False
    return remaining.sum() / n


PAIRWISE = OrderedDict([
    ("F1v", directional_fisher),
    ("F2", overlap_volume),
    ("F3", feature_efficiency),
    ("F4", collective_efficiency),
])


def overlapping(X, y, measures="all", summary=DEFAULT_SUMMARY, **kwargs):
    """
    Compute the feature overlapping measures.

    F1 is computed on every feature; F1v, F2, F3 and F4 on every
    one-versus-one pair of classes. All of them are summarized.
    """
    measures = check_measures(measures, MEASURES)
    X = binarize(X)
    y, _ = encode(y)

    results = OrderedDict()
    pairs = list(ovo(X, y))
    for name in measures:
        if name == "F1":
            results[name] = fisher_ratio(X, y)
        else:
            results[name] = [PAIRWISE[name](X_p, y_p) for X_p, y_p in pairs]

    return collect(results, MEASURES, summary)
