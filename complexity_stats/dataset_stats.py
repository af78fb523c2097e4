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
import logging
import os
from typing import Mapping, Tuple

import numpy as np
import openml
import pandas as pd
from sklearn.impute import SimpleImputer
from tqdm import tqdm

from .complexity import complexity_xy
from .config import ALL

logger = logging.getLogger(__name__)


def dataset_complexity(datasets: Mapping[str, Tuple[pd.DataFrame, object]], groups=ALL,
                       progress: bool = False, **kwargs) -> pd.DataFrame:
    """
    Compute the complexity measures of several data sets.

    Returns one row per data set, indexed by name. A data set whose
    measures cannot be computed is logged and left out.
    """
    rows = dict()
    items = tqdm(datasets.items(), total=len(datasets), leave=False, position=0, disable=not progress)
    for dataset_name, data in items:
        items.set_description("Complexity of data set: %s" % dataset_name)

        try:
            X, y = data
            logger.info("%s has %d samples and %d features" % (dataset_name, X.shape[0], X.shape[1]))
            rows[dataset_name] = complexity_xy(X, y, groups, **kwargs)
        except Exception:
            logger.exception(": data set %s" % dataset_name)
            continue

        logger.info("Finished complexity of data set: %s" % dataset_name)

    table = pd.DataFrame.from_dict(rows, orient="index")
    table.index.name = "dataset"
    return table


def openml_datasets(benchmark_suite):
    """Yield (name, (X, y)) for every task of an OpenML benchmark suite."""
    for task_id in benchmark_suite.tasks:
        task = openml.tasks.get_task(task_id)
        dataset = task.get_dataset()
        X, y, _, _ = dataset.get_data(target=task.target_name)

        # some data sets of the suites have missing values
        numeric = X.select_dtypes(include="number").columns
        if len(numeric) and X[numeric].isna().any().any():
            si = SimpleImputer(missing_values=np.nan, strategy='mean')
            X[numeric] = si.fit_transform(X[numeric])
        complete = X.notna().all(axis=1).values & pd.Series(y).notna().values

        yield dataset.name, (X[complete], pd.Series(y)[complete])


def openml_complexity_all(benchmark_suite, groups=ALL, result_file: str = None, **kwargs) -> pd.DataFrame:
    """Compute the complexity measures of all the data sets of an OpenML suite, optionally saved as csv."""
    logger.info("Loading %d tasks of the benchmark suite..." % len(benchmark_suite.tasks))
    datasets = dict(openml_datasets(benchmark_suite))

    table = dataset_complexity(datasets, groups, progress=True, **kwargs)

    if result_file is not None:
        result_dir = os.path.dirname(result_file)
        if result_dir:
            os.makedirs(result_dir, exist_ok=True)
        table.to_csv(result_file)
        logger.info("Complexity measures saved in %s" % result_file)

    return table
