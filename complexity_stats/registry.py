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

from types import MappingProxyType
from typing import Callable, Iterable, Tuple, Union

from .config import ALL, GROUPS
from .errors import InvalidInput, UnknownGroup, AmbiguousGroup
from . import measures


class Registry:
    """
    Immutable, ordered collection of measure groups.

    Each group is an identifier bound to a computation with the signature
    ``compute(x, y, **options) -> mapping of submeasure name -> number``.
    The registration order is the canonical order of the merged results.
    """

    def __init__(self, groups: Iterable[Tuple[str, Callable]]):
        groups = dict(groups)
        self._names = tuple(groups)
        self._groups = MappingProxyType(groups)

    @property
    def names(self) -> Tuple[str, ...]:
        return self._names

    def __getitem__(self, name) -> Callable:
        try:
            return self._groups[name]
        except KeyError:
            raise UnknownGroup(name, self._names) from None

    def __contains__(self, name):
        return name in self._groups

    def __iter__(self):
        return iter(self._names)

    def __len__(self):
        return len(self._names)

    def __repr__(self):
        return "Registry(%s)" % ", ".join(self._names)

    def with_group(self, name: str, compute: Callable) -> "Registry":
        """Return a new registry with ``name`` bound to ``compute``, appended if new."""
        groups = dict(self._groups)
        groups[name] = compute
        return Registry(groups.items())

    def match(self, token: str) -> str:
        """Resolve one token by exact match first, then by unambiguous prefix."""
        if token in self._groups:
            return token

        candidates = [name for name in self._names if name.startswith(token)] if token else []
        if not candidates:
            raise UnknownGroup(token, self._names)
        if len(candidates) > 1:
            raise AmbiguousGroup(token, self._names, candidates)
        return candidates[0]

    def resolve(self, selector: Union[str, Iterable[str]] = ALL) -> Tuple[str, ...]:
        """
        Resolve a selector into group identifiers, in canonical order.

        ``"all"`` (alone or among the tokens) selects every group. Repeated
        tokens select their group once.
        """
        if isinstance(selector, str):
            tokens = [selector]
        else:
            try:
                tokens = list(selector)
            except TypeError:
                raise InvalidInput("selector must be a string or an iterable of strings, got %r"
                                   % (selector,)) from None
        if not tokens:
            raise InvalidInput("no measure group selected")
        if ALL in tokens:
            return self._names

        selected = {self.match(str(token)) for token in tokens}
        return tuple(name for name in self._names if name in selected)


DEFAULT_REGISTRY = Registry(
    (name, getattr(measures, name)) for name in GROUPS)


def list_groups() -> Tuple[str, ...]:
    """Canonical identifiers of the measure groups."""
    return DEFAULT_REGISTRY.names
