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
Network measures.

The data set is represented as a graph: every example is a vertex, two
examples of the same class are connected when their distance is below a
fraction ``eps`` of the largest pairwise distance.
"""

from collections import OrderedDict

import numpy as np
from scipy.linalg import eigh

from ..config import DEFAULT_SUMMARY, NETWORK_EPS
from .utils import binarize, rescale, encode, distances, check_measures, collect

MEASURES = ("Density", "ClsCoef", "Hubs")


def epsilon_graph(D, y, eps=NETWORK_EPS):
    """Adjacency matrix of the epsilon-NN graph, edges between classes pruned."""
    A = (D < eps * D.max()) & (y[:, None] == y[None, :])
    np.fill_diagonal(A, False)
    return A.astype(float)


def density(A):
    n = A.shape[0]
    return 1 - A.sum() / (n * (n - 1))


def clustering_coefficient(A):
    degree = A.sum(axis=1)
    triangles = np.diag(A @ A @ A) / 2
    possible = degree * (degree - 1) / 2
    with np.errstate(divide="ignore", invalid="ignore"):
        local = np.where(possible > 0, triangles / possible, 0.0)
    return 1 - local.mean()


def hub_scores(A):
    """One minus the hub score of every vertex, scores scaled to a maximum of 1."""
    if not A.any():
        return np.ones(A.shape[0])
    _, vectors = eigh(A)
    score = np.abs(vectors[:, -1])
    return 1 - score / score.max()


def network(X, y, measures="all", summary=DEFAULT_SUMMARY, eps=NETWORK_EPS, **kwargs):
    """
    Compute the network measures: Density and ClsCoef of the graph, and the
    summarized Hubs scores of its vertices.
    """
    measures = check_measures(measures, MEASURES)
    X = rescale(binarize(X))
    y, _ = encode(y)
    A = epsilon_graph(distances(X), y, eps)

    results = OrderedDict()
    for name in measures:
        if name == "Density":
            results[name] = density(A)
        elif name == "ClsCoef":
            results[name] = clustering_coefficient(A)
        elif name == "Hubs":
            results[name] = hub_scores(A)

    return collect(results, ("Hubs",), summary)
