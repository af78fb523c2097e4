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

import numpy as np
from sklearn.svm import LinearSVC
from sklearn.utils import check_random_state

from ..config import DEFAULT_SUMMARY
from .utils import binarize, rescale, encode, ovo, interpolate, check_measures, collect

MEASURES = ("L1", "L2", "L3")


def fit_hyperplane(X, y, random_state):
    svm = LinearSVC(C=1.0, dual="auto", max_iter=10000, random_state=random_state)
    svm.fit(X, y)
    return svm


def error_distance(svm, X, y):
    wrong = svm.predict(X) != y
    distance = np.abs(svm.decision_function(X)) / np.linalg.norm(svm.coef_)
    total = distance[wrong].sum() / X.shape[0]
    return total / (1 + total)


def error_rate(svm, X, y):
    return np.mean(svm.predict(X) != y)


def nonlinearity(svm, X, y, random_state):
    X_test, y_test = interpolate(X, y, random_state)
    return error_rate(svm, X_test, y_test)


def linearity(X, y, measures="all", summary=DEFAULT_SUMMARY, random_state=None, **kwargs):
    """
    Compute the linearity measures.

    A linear SVM is fitted on every one-versus-one pair of classes; L1 is
    the sum of the distances of the misclassified examples to the
    hyperplane, L2 the training error and L3 the error on examples
    interpolated between pairs of the same class.
    """
    measures = check_measures(measures, MEASURES)
    random_state = check_random_state(random_state)
    X = rescale(binarize(X))
    y, _ = encode(y)

    results = OrderedDict((name, []) for name in measures)
    for X_p, y_p in ovo(X, y):
        svm = fit_hyperplane(X_p, y_p, random_state)
        for name in measures:
            if name == "L1":
                results[name].append(error_distance(svm, X_p, y_p))
            elif name == "L2":
                results[name].append(error_rate(svm, X_p, y_p))
            elif name == "L3":
                results[name].append(nonlinearity(svm, X_p, y_p, random_state))

    return collect(results, MEASURES, summary)
