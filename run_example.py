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
import sys

import openml
from sklearn.datasets import load_iris

import complexity_stats


def main():

    log_file = "./log/complexity_stats.log"

    # initialize logging
    log_dir = os.path.dirname(log_file)
    if not os.path.isdir(log_dir):
        os.makedirs(log_dir)
    logging.basicConfig(filename=log_file,
                        filemode='w',
                        format='%(asctime)s,%(msecs)d %(name)s %(levelname)s %(message)s',
                        datefmt='%H:%M:%S',
                        level=logging.DEBUG)

    # a single data set, all the groups and only the linearity measures
    iris = load_iris(as_frame=True).frame
    print(complexity_stats.complexity_formula("target ~ .", iris, random_state=42))
    print(complexity_stats.complexity_formula("target ~ .", iris, groups="linearity", random_state=42))

    logging.info("Loading benchmark suite OpenML-CC18...")
    benchmark_suite = openml.study.get_suite('OpenML-CC18')
    complexity_stats.openml_complexity_all(benchmark_suite, result_file="./results/complexity.csv",
                                           random_state=42)


if __name__ == "__main__":
    sys.exit(main())
