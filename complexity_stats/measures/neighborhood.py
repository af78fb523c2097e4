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
Neighborhood measures.

They characterize the presence and density of examples of the same or of
different classes in local neighborhoods, using the euclidean distance on
features rescaled into [0, 1].
"""

from collections import OrderedDict

import numpy as np
from scipy.sparse.csgraph import minimum_spanning_tree
from sklearn.neighbors import KNeighborsClassifier
from sklearn.utils import check_random_state

from ..config import DEFAULT_SUMMARY
from .utils import binarize, rescale, encode, distances, interpolate, check_measures, collect

MEASURES = ("N1", "N2", "N3", "N4", "T1", "LSC")
MULTIVALUED = ("N2", "N3", "N4", "T1")


def borderline_points(D, y):
    """Fraction of examples connected to another class in the minimum spanning tree."""
    W = D.copy()
    # zero weights are read as missing edges
    W[W == 0] = np.finfo(float).tiny
    np.fill_diagonal(W, 0)
    tree = minimum_spanning_tree(W).tocoo()

    cross = y[tree.row] != y[tree.col]
    vertices = np.union1d(tree.row[cross], tree.col[cross])
    return len(vertices) / D.shape[0]


def _nearest(D, y):
    """Distance to the nearest example of the same class (friend) and of another class (enemy)."""
    D = D.copy()
    np.fill_diagonal(D, np.inf)
    same = y[:, None] == y[None, :]
    friend = np.where(same, D, np.inf).min(axis=1)
    enemy = np.where(same, np.inf, D).min(axis=1)
    return friend, enemy


def intra_extra_ratio(D, y):
    friend, enemy = _nearest(D, y)
    with np.errstate(divide="ignore", invalid="ignore"):
        r = friend / enemy
        return r / (1 + r)


def nearest_neighbor_error(D, y):
    """Leave-one-out error of the 1-NN classifier, one value per example."""
    D = D.copy()
    np.fill_diagonal(D, np.inf)
    return (y[np.argmin(D, axis=1)] != y).astype(float)


def nearest_neighbor_nonlinearity(X, y, random_state):
    X_test, y_test = interpolate(X, y, random_state)
    knn = KNeighborsClassifier(n_neighbors=1)
    knn.fit(X, y)
    return (knn.predict(X_test) != y_test).astype(float)


def hypersphere_coverage(D, y):
    """
    Fraction of the examples covered by each hypersphere that is not absorbed.

    Every example is the center of a hypersphere reaching its nearest enemy;
    a hypersphere entirely contained in a larger one of the same class is
    absorbed.
    """
    _, radius = _nearest(D, y)
    n = D.shape[0]
    index = np.arange(n)

    same = (y[:, None] == y[None, :]) & (index[:, None] != index[None, :])
    larger = (radius[:, None] > radius[None, :]) | \
             ((radius[:, None] == radius[None, :]) & (index[:, None] < index[None, :]))
    contains = D + radius[None, :] <= radius[:, None]
    absorbed = (same & larger & contains).any(axis=0)

    covered = (D < radius[:, None]) & (y[:, None] == y[None, :])
    return covered[~absorbed].sum(axis=1) / n


def local_set_cardinality(D, y):
    _, enemy = _nearest(D, y)
    return 1 - (D < enemy[:, None]).sum() / D.shape[0] ** 2


def neighborhood(X, y, measures="all", summary=DEFAULT_SUMMARY, random_state=None, **kwargs):
    """
    Compute the neighborhood measures.

    N1 and LSC are single values, N2, N3, N4 and T1 are computed for every
    example (or synthetic example, for N4) and summarized.
    """
    measures = check_measures(measures, MEASURES)
    X = rescale(binarize(X))
    y, _ = encode(y)
    D = distances(X)

    results = OrderedDict()
    for name in measures:
        if name == "N1":
            results[name] = borderline_points(D, y)
        elif name == "N2":
            results[name] = intra_extra_ratio(D, y)
        elif name == "N3":
            results[name] = nearest_neighbor_error(D, y)
        elif name == "N4":
            results[name] = nearest_neighbor_nonlinearity(X, y, check_random_state(random_state))
        elif name == "T1":
            results[name] = hypersphere_coverage(D, y)
        elif name == "LSC":
            results[name] = local_set_cardinality(D, y)

    return collect(results, MULTIVALUED, summary)
