"""EnvMap — a set of environment variables.

An EnvMap is a plain ``dict[str, str]`` with byte-stable text forms:
- render/str/format: ``key=value`` entries joined by a separator
- encode: a list of ``key=value`` strings for subprocess APIs
- parse/merge: build maps from ``key=value`` strings or other maps
- diff: compare two maps (see models.EnvDiff)

Every textual form sorts entries by key, so output never depends on
insertion order.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Self

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

if TYPE_CHECKING:
    from .models import EnvDiff

logger = logging.getLogger(__name__)


class EnvMap(dict[str, str]):
    """Mapping from environment variable name to value."""

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_after_validator_function(
            cls, handler(dict[str, str])
        )

    @classmethod
    def parse(cls, *kvs: str) -> Self:
        """Parse environment variables in ``key=value`` format.

        Each string is split on its first ``=``. Strings with no ``=`` are
        ignored. Later duplicates of a key overwrite earlier ones.
        """
        env = cls()
        for kv in kvs:
            key, sep, value = kv.partition("=")
            if not sep:
                logger.debug("env_map: skipping malformed entry %r", kv)
                continue
            env[key] = value
        return env

    @classmethod
    def merge(cls, *maps: Mapping[str, str]) -> Self:
        """Merge environment maps. On key collisions, later maps take precedence."""
        merged = cls()
        for m in maps:
            merged.update(m)
        return merged

    def _entries(self) -> list[str]:
        return [f"{key}={self[key]}" for key in sorted(self)]

    def render(self, sep: str) -> str:
        """Join sorted ``key=value`` entries with *sep*."""
        return sep.join(self._entries())

    def encode(self) -> list[str]:
        """Encode as sorted ``key=value`` strings, suitable for ``os.execve``."""
        return self._entries()

    def diff(self, other: Mapping[str, str]) -> EnvDiff:
        """Compute differences between this map ("M") and *other* ("N")."""
        from .models import Change, EnvDiff  # models imports EnvMap

        only_in_m = EnvMap()
        only_in_n = EnvMap()
        changes: list[Change] = []
        for key in sorted(self):
            m_value = self[key]
            if key not in other:
                only_in_m[key] = m_value
            elif m_value != other[key]:
                changes.append(Change(key=key, m_value=m_value, n_value=other[key]))
        for key in sorted(other):
            if key not in self:
                only_in_n[key] = other[key]
        return EnvDiff(only_in_m=only_in_m, only_in_n=only_in_n, changes=changes)

    def copy(self) -> Self:
        return type(self)(self)

    def __or__(self, other: Any) -> Self:
        if not isinstance(other, Mapping):
            return NotImplemented
        return self.merge(self, other)

    def __ror__(self, other: Any) -> Self:
        if not isinstance(other, Mapping):
            return NotImplemented
        return self.merge(other, self)

    def __str__(self) -> str:
        return self.render(" ")

    def __format__(self, format_spec: str) -> str:
        """Format as ``key=value`` pairs.

        The default spec emits space-separated pairs and ``"+"`` emits
        newline-separated pairs. Any other spec produces no output.
        """
        if format_spec == "":
            return self.render(" ")
        if format_spec == "+":
            return self.render("\n")
        return ""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict.__repr__(self)})"


def parse(*kvs: str) -> EnvMap:
    """Parse ``key=value`` strings into an EnvMap (see EnvMap.parse)."""
    return EnvMap.parse(*kvs)


def merge(*maps: Mapping[str, str]) -> EnvMap:
    """Merge environment maps, later maps winning (see EnvMap.merge)."""
    return EnvMap.merge(*maps)


def variables() -> EnvMap:
    """Return a snapshot of the process environment."""
    env = parse(*(f"{key}={value}" for key, value in os.environ.items()))
    logger.debug("env_map: read %d process environment variables", len(env))
    return env
