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

from ..config import DEFAULT_SUMMARY
from .utils import check_measures, collect

MEASURES = ("C1", "C2")


def entropy_imbalance(counts):
    """One minus the normalized entropy of the class proportions."""
    p = counts / counts.sum()
    return 1 + np.sum(p * np.log(p)) / np.log(len(counts))


def imbalance_ratio(counts):
    n = counts.sum()
    n_classes = len(counts)
    ir = (n_classes - 1) / n_classes * np.sum(counts / (n - counts))
    return 1 - 1 / ir


def balance(X, y, measures="all", summary=DEFAULT_SUMMARY, **kwargs):
    """
    Compute the class balance measures, both 0 for balanced classes:
    C1 from the entropy of the class proportions, C2 from the multi-class
    imbalance ratio.
    """
    measures = check_measures(measures, MEASURES)
    _, counts = np.unique(np.asarray(y), return_counts=True)

    results = OrderedDict()
    for name in measures:
        if name == "C1":
            results[name] = entropy_imbalance(counts)
        elif name == "C2":
            results[name] = imbalance_ratio(counts)

    return collect(results, (), summary)
