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

import unittest

import numpy as np
import pandas as pd

from complexity_stats import Formula, InvalidFormula, InvalidInput
from complexity_stats.formula import as_formula


def make_table():
    return pd.DataFrame({
        "Sepal.Length": [5.1, 4.9, 6.3, 5.8],
        "Sepal.Width": [3.5, 3.0, 3.3, 2.7],
        "petal width (cm)": [0.2, 0.2, 2.5, 1.9],
        "Species": ["setosa", "setosa", "virginica", "virginica"],
    })


class TestFormula(unittest.TestCase):

    def test_all_others(self):
        formula = Formula("Species ~ .")
        self.assertEqual(formula.response, "Species")
        x, y = formula.resolve(make_table())
        self.assertEqual(list(x.columns), ["Sepal.Length", "Sepal.Width", "petal width (cm)"])
        self.assertEqual(y.name, "Species")
        self.assertEqual(list(y), ["setosa", "setosa", "virginica", "virginica"])

    def test_explicit_predictors(self):
        x, _ = Formula("Species ~ Sepal.Width + Sepal.Length").resolve(make_table())
        self.assertEqual(list(x.columns), ["Sepal.Width", "Sepal.Length"])

    def test_quoted_names_and_removal(self):
        x, _ = Formula("Species ~ . - `petal width (cm)`").resolve(make_table())
        self.assertEqual(list(x.columns), ["Sepal.Length", "Sepal.Width"])

        x, _ = Formula("Species ~ `petal width (cm)`").resolve(make_table())
        self.assertEqual(list(x.columns), ["petal width (cm)"])

    def test_response_is_never_a_predictor(self):
        x, _ = Formula("Species ~ Species + Sepal.Width").resolve(make_table())
        self.assertEqual(list(x.columns), ["Sepal.Width"])

    def test_rows_with_missing_values_are_dropped(self):
        table = make_table()
        table.loc[1, "Sepal.Width"] = np.nan
        x, y = Formula("Species ~ .").resolve(table)
        self.assertEqual(list(x.index), [0, 2, 3])
        self.assertEqual(list(y.index), [0, 2, 3])

        # unused columns do not drop rows
        x, _ = Formula("Species ~ Sepal.Length").resolve(table)
        self.assertEqual(len(x), 4)

    def test_malformed(self):
        for text in ["Species", "~ .", "Species ~", "a + b ~ c", "a ~ b c",
                     "a ~ 1", "a ~ b ~ c", ". ~ a", "a ~ b + + c", "a ~ b -"]:
            with self.assertRaises(InvalidFormula, msg=text):
                Formula(text)

    def test_not_a_formula(self):
        with self.assertRaises(InvalidFormula):
            as_formula(42)
        with self.assertRaises(InvalidFormula):
            Formula(["Species", "."])

    def test_unknown_columns(self):
        with self.assertRaises(InvalidFormula):
            Formula("Class ~ .").resolve(make_table())
        with self.assertRaises(InvalidFormula):
            Formula("Species ~ Petal.Length").resolve(make_table())

    def test_no_predictors(self):
        with self.assertRaises(InvalidFormula):
            Formula("Species ~ . - Sepal.Length - Sepal.Width - `petal width (cm)`").resolve(make_table())

    def test_data_must_be_a_data_frame(self):
        with self.assertRaises(InvalidInput):
            Formula("Species ~ .").resolve(make_table().values)

    def test_reusable(self):
        formula = as_formula("Species ~ .")
        self.assertIs(as_formula(formula), formula)
        self.assertEqual(formula, Formula("Species ~ ."))


if __name__ == "__main__":
    unittest.main(verbosity=2)
