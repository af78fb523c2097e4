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

from sklearn.decomposition import PCA

from ..config import DEFAULT_SUMMARY, PCA_EXPLAINED_VARIANCE
from .utils import binarize, check_measures, collect

MEASURES = ("T2", "T3", "T4")


def intrinsic_dimensionality(X, threshold=PCA_EXPLAINED_VARIANCE):
    """Number of principal components needed to explain ``threshold`` of the variance."""
    pca = PCA()
    pca.fit(X)
    exp_var = 0
    intrinsic_dim = 0
    for pc in pca.explained_variance_ratio_:
        if exp_var >= threshold:
            break
        exp_var = exp_var + pc
        intrinsic_dim = intrinsic_dim + 1

    return intrinsic_dim


def dimensionality(X, y, measures="all", summary=DEFAULT_SUMMARY,
                   threshold=PCA_EXPLAINED_VARIANCE, **kwargs):
    """
    Compute the dimensionality measures: T2 (features per example),
    T3 (principal components per example) and T4 (principal components per
    feature).
    """
    measures = check_measures(measures, MEASURES)
    X = binarize(X)
    n_samples, n_features = X.shape
    intrinsic_dim = intrinsic_dimensionality(X, threshold) if {"T3", "T4"} & set(measures) else 0

    results = OrderedDict()
    for name in measures:
        if name == "T2":
            results[name] = n_features / n_samples
        elif name == "T3":
            results[name] = intrinsic_dim / n_samples
        elif name == "T4":
            results[name] = intrinsic_dim / n_features

    return collect(results, (), summary)
