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

from complexity_stats import DEFAULT_REGISTRY, list_groups, UnknownGroup, AmbiguousGroup, \
    InvalidInput

GROUPS = ("overlapping", "neighborhood", "linearity", "dimensionality", "balance", "network")


class TestRegistry(unittest.TestCase):

    def test_canonical_order(self):
        self.assertEqual(list_groups(), GROUPS)
        self.assertEqual(tuple(DEFAULT_REGISTRY), GROUPS)

    def test_all(self):
        self.assertEqual(DEFAULT_REGISTRY.resolve("all"), GROUPS)
        self.assertEqual(DEFAULT_REGISTRY.resolve(["linearity", "all"]), GROUPS)

    def test_canonical_order_whatever_the_token_order(self):
        self.assertEqual(DEFAULT_REGISTRY.resolve(["network", "overlapping", "balance"]),
                         ("overlapping", "balance", "network"))
        self.assertEqual(DEFAULT_REGISTRY.resolve(list(reversed(GROUPS))), GROUPS)

    def test_prefix(self):
        self.assertEqual(DEFAULT_REGISTRY.resolve("lin"), ("linearity",))
        self.assertEqual(DEFAULT_REGISTRY.resolve(["nei", "netw", "d"]),
                         ("neighborhood", "dimensionality", "network"))

    def test_repeated_tokens(self):
        self.assertEqual(DEFAULT_REGISTRY.resolve(["bal", "balance", "b"]), ("balance",))

    def test_unknown_token(self):
        with self.assertRaises(UnknownGroup) as cm:
            DEFAULT_REGISTRY.resolve(["linearity", "foo"])
        self.assertEqual(cm.exception.token, "foo")
        self.assertIn("foo", str(cm.exception))

    def test_ambiguous_prefix(self):
        with self.assertRaises(AmbiguousGroup) as cm:
            DEFAULT_REGISTRY.resolve("ne")
        self.assertIsInstance(cm.exception, UnknownGroup)
        self.assertEqual(cm.exception.candidates, ("neighborhood", "network"))

    def test_empty_selector(self):
        with self.assertRaises(InvalidInput):
            DEFAULT_REGISTRY.resolve([])

    def test_selector_must_be_iterable(self):
        for selector in (None, 5):
            with self.assertRaises(InvalidInput):
                DEFAULT_REGISTRY.resolve(selector)

    def test_with_group(self):
        def custom(x, y, **options):
            return {"value": 1.0}

        registry = DEFAULT_REGISTRY.with_group("custom", custom)
        self.assertEqual(registry.names, GROUPS + ("custom",))
        self.assertIs(registry["custom"], custom)
        self.assertEqual(registry.resolve("cus"), ("custom",))
        self.assertNotIn("custom", DEFAULT_REGISTRY)

    def test_with_group_keeps_position_when_overriding(self):
        def fake(x, y, **options):
            return {"value": 1.0}

        registry = DEFAULT_REGISTRY.with_group("linearity", fake)
        self.assertEqual(registry.names, GROUPS)
        self.assertIs(registry["linearity"], fake)
        self.assertIsNot(DEFAULT_REGISTRY["linearity"], fake)

    def test_lookup_unknown(self):
        with self.assertRaises(UnknownGroup):
            DEFAULT_REGISTRY["complexity"]


if __name__ == "__main__":
    unittest.main(verbosity=2)
