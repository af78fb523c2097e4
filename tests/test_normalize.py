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

from complexity_stats import normalize, sanitize_names, InvalidInput, ShapeMismatch, \
    InsufficientClassSize


def make_data(labels, n_features=2):
    n = len(labels)
    x = pd.DataFrame(np.arange(n * n_features).reshape(n, n_features),
                     columns=["f%d" % j for j in range(n_features)])
    return x, labels


class TestSanitizeNames(unittest.TestCase):

    def test_rewrites_invalid_names(self):
        names, mapping = sanitize_names(["a b", "1x", "class", "ok", "", 0])
        self.assertEqual(names, ["a_b", "X1x", "class_", "ok", "X", "X0"])
        self.assertEqual(mapping["X0"], 0)
        self.assertEqual(mapping["a_b"], "a b")

    def test_names_are_unique(self):
        names, mapping = sanitize_names(["a b", "a_b", "a-b"])
        self.assertEqual(names, ["a_b", "a_b_1", "a_b_2"])
        self.assertEqual(mapping, {"a_b": "a b", "a_b_1": "a_b", "a_b_2": "a-b"})

    def test_every_name_is_an_identifier(self):
        names, _ = sanitize_names(["sepal length (cm)", "%", "for", "2nd.col"])
        for name in names:
            self.assertTrue(name.isidentifier(), name)


class TestNormalize(unittest.TestCase):

    def test_features_must_be_a_data_frame(self):
        with self.assertRaises(InvalidInput):
            normalize(np.zeros((4, 2)), ["a", "a", "b", "b"])

    def test_rows_must_match_labels(self):
        x, _ = make_data(["a"] * 6)
        with self.assertRaises(ShapeMismatch):
            normalize(x, ["a", "a", "b", "b"])

    def test_shape_is_checked_before_class_size(self):
        x, _ = make_data(["a"] * 6)
        with self.assertRaises(ShapeMismatch):
            normalize(x, ["a", "a", "b"])

    def test_singleton_class(self):
        x, y = make_data(["a", "a", "b", "b", "c"])
        with self.assertRaises(InsufficientClassSize) as cm:
            normalize(x, y)
        self.assertEqual(cm.exception.counts["c"], 1)

    def test_single_class(self):
        x, y = make_data(["a"] * 4)
        with self.assertRaises(InvalidInput):
            normalize(x, y)

    def test_missing_labels(self):
        x, y = make_data(["a", "a", None, "b", "b"])
        with self.assertRaises(InvalidInput):
            normalize(x, y)

    def test_labels_become_categorical(self):
        x, y = make_data([1, 1, 2, 2, 2])
        data = normalize(x, y)
        self.assertEqual(str(data.labels.dtype), "category")
        self.assertEqual(list(data.labels.cat.categories), [1, 2])

    def test_single_column_table_is_squeezed(self):
        x, y = make_data(["a", "a", "b", "b"])
        data = normalize(x, pd.DataFrame({"class": y}))
        self.assertIsInstance(data.labels, pd.Series)
        self.assertEqual(list(data.labels), y)

    def test_multi_column_labels(self):
        x, y = make_data(["a", "a", "b", "b"])
        with self.assertRaises(InvalidInput):
            normalize(x, pd.DataFrame({"c1": y, "c2": y}))

    def test_multi_column_label_array(self):
        x, y = make_data(["a", "a", "b", "b"])
        with self.assertRaises(InvalidInput):
            normalize(x, np.array([y, y]).T)
        with self.assertRaises(InvalidInput):
            normalize(x, np.array(y).reshape(2, 2, 1))

    def test_single_column_label_array_is_squeezed(self):
        x, y = make_data(["a", "a", "b", "b"])
        data = normalize(x, np.array(y).reshape(-1, 1))
        self.assertEqual(list(data.labels), y)

    def test_unused_categories_are_dropped(self):
        x, _ = make_data(["a"] * 4)
        y = pd.Series(pd.Categorical(["a", "a", "b", "b"], categories=["a", "b", "c"]))
        data = normalize(x, y)
        self.assertEqual(list(data.labels.cat.categories), ["a", "b"])

    def test_columns_are_sanitized(self):
        x = pd.DataFrame({"sepal length": [1, 2, 3, 4], "1st": [0, 1, 0, 1]})
        data = normalize(x, ["a", "a", "b", "b"])
        self.assertEqual(list(data.features.columns), ["sepal_length", "X1st"])
        self.assertEqual(data.names, {"sepal_length": "sepal length", "X1st": "1st"})
        # the caller's table is left untouched
        self.assertEqual(list(x.columns), ["sepal length", "1st"])

    def test_labels_follow_feature_index(self):
        x = pd.DataFrame({"f": [1, 2, 3, 4]}, index=[10, 11, 12, 13])
        data = normalize(x, pd.Series(["a", "a", "b", "b"]))
        self.assertEqual(list(data.labels.index), [10, 11, 12, 13])


if __name__ == "__main__":
    unittest.main(verbosity=2)
