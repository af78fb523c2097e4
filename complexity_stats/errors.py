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


class ComplexityError(Exception):
    """Base class of every error raised while characterizing a data set."""


class InvalidInput(ComplexityError, ValueError):
    """Features (or the combined data) are not a data frame, or labels are unusable."""


class InvalidFormula(ComplexityError, ValueError):
    """The symbolic response ~ predictors specification cannot be parsed or resolved."""


class ShapeMismatch(ComplexityError, ValueError):
    """The number of feature rows differs from the number of labels."""


class InsufficientClassSize(ComplexityError):
    """At least one class has fewer than two examples."""

    def __init__(self, counts):
        self.counts = dict(counts)
        smallest = min(self.counts, key=self.counts.get)
        super().__init__(
            "number of examples in the minority class should be >= 2 "
            "(class %r has %d)" % (smallest, self.counts[smallest]))


class UnknownGroup(ComplexityError, KeyError):
    """A selector token does not match any registered measure group."""

    def __init__(self, token, choices):
        self.token = token
        self.choices = tuple(choices)
        super().__init__(token)

    def __str__(self):
        return "unknown measure group %r, should be one of %s" % (
            self.token, ", ".join(self.choices))


class AmbiguousGroup(UnknownGroup):
    """A selector token is a prefix of more than one measure group."""

    def __init__(self, token, choices, candidates):
        self.candidates = tuple(candidates)
        super().__init__(token, choices)

    def __str__(self):
        return "ambiguous measure group %r, matches %s" % (
            self.token, ", ".join(self.candidates))


class InvalidGroupResult(ComplexityError):
    """A measure group returned something that cannot be merged in the result."""
