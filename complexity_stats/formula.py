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
Symbolic ``response ~ predictors`` specifications.

The right-hand side is a sum of column names, where ``.`` stands for every
column but the response and ``- name`` drops a column::

    Formula("Species ~ .")
    Formula("Species ~ Sepal.Length + Sepal.Width")
    Formula("target ~ . - `petal width (cm)`")
"""

import re
from typing import Tuple

import pandas as pd

from .errors import InvalidFormula, InvalidInput

ALL_OTHERS = "."

_TOKEN = re.compile(r"\s*(?:`(?P<quoted>[^`]+)`|(?P<op>[+\-])|(?P<name>[A-Za-z_.][\w.]*))")


def _tokenize(text):
    tokens = []
    position = 0
    text = text.rstrip()
    while position < len(text):
        match = _TOKEN.match(text, position)
        if match is None:
            raise InvalidFormula("unexpected symbol %r in formula %r" % (text[position:].strip()[:1], text))
        if match.group("op"):
            tokens.append(("op", match.group("op")))
        else:
            tokens.append(("name", match.group("quoted") or match.group("name")))
        position = match.end()
    return tokens


class Formula:
    """A parsed ``response ~ terms`` specification."""

    def __init__(self, text: str):
        if not isinstance(text, str):
            raise InvalidFormula("formula must be a string, got %s" % type(text).__name__)
        self.text = text

        sides = text.split("~")
        if len(sides) != 2:
            raise InvalidFormula("formula %r must have the form 'response ~ predictors'" % text)
        lhs, rhs = _tokenize(sides[0]), _tokenize(sides[1])

        if len(lhs) != 1 or lhs[0][0] != "name" or lhs[0][1] == ALL_OTHERS:
            raise InvalidFormula("formula %r must have exactly one response" % text)
        self.response = lhs[0][1]

        self.terms = []
        self.dropped = []
        sign = "+"
        expect_term = True
        for kind, value in rhs:
            if kind == "op":
                if not expect_term:
                    sign, expect_term = value, True
                elif value == "-" and not self.terms and not self.dropped:
                    sign = "-"
                else:
                    raise InvalidFormula("misplaced %r in formula %r" % (value, text))
            else:
                if not expect_term:
                    raise InvalidFormula("missing operator before %r in formula %r" % (value, text))
                (self.terms if sign == "+" else self.dropped).append(value)
                expect_term = False
        if expect_term:
            raise InvalidFormula("formula %r is incomplete" % text)

    def __repr__(self):
        return "Formula(%r)" % self.text

    def __eq__(self, other):
        return isinstance(other, Formula) and other.text == self.text

    def __hash__(self):
        return hash(self.text)

    def predictors(self, columns):
        """Predictor names resolved against the columns of a table, in table order for ``.``."""
        predictors = []
        for term in self.terms:
            candidates = [c for c in columns if c != self.response] if term == ALL_OTHERS else [term]
            predictors.extend(c for c in candidates if c not in predictors)
        return [c for c in predictors if c not in self.dropped and c != self.response]

    def resolve(self, data: pd.DataFrame) -> Tuple[pd.DataFrame, pd.Series]:
        """
        Split a combined table into the predictor table and the response.

        Rows with missing values in any of the used columns are dropped.
        """
        if not isinstance(data, pd.DataFrame):
            raise InvalidInput("data argument must be a data.frame, got %s" % type(data).__name__)

        columns = {str(c): c for c in data.columns}
        used = [self.response] + self.predictors(list(columns))
        unknown = [name for name in used + self.dropped if name not in columns]
        if unknown:
            raise InvalidFormula("columns %s of formula %r are not in the data" % (unknown, self.text))
        if len(used) < 2:
            raise InvalidFormula("formula %r selects no predictors" % self.text)

        frame = data[[columns[name] for name in used]].dropna()
        return frame.iloc[:, 1:], frame.iloc[:, 0]


def as_formula(formula) -> Formula:
    if isinstance(formula, Formula):
        return formula
    if isinstance(formula, str):
        return Formula(formula)
    raise InvalidFormula("formula must be a string or a Formula, got %s" % type(formula).__name__)
