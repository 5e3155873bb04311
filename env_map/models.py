"""Diff data models for environment maps.

- Change: one key whose value differs between two maps
- EnvDiff: the full comparison of two maps, "M" and "N"
"""

from pydantic import BaseModel, ConfigDict, Field

from .env_map import EnvMap


class Change(BaseModel):
    """A change in a value in the environment."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., description="Variable name")
    m_value: str = Field(..., description="Value in M")
    n_value: str = Field(..., description="Value in N")

    def __str__(self) -> str:
        return f"{self.key}: {self.m_value} -> {self.n_value}"


class EnvDiff(BaseModel):
    """Differences between two environments, "M" and "N".

    A key appears in at most one of the three components. Keys present in
    both maps with equal values appear in none. ``changes`` is sorted by key.

    Fields cannot be reassigned. The EnvMap components are fresh copies
    owned by the diff, so mutating them never touches the compared maps;
    hash and equality follow their contents.
    """

    model_config = ConfigDict(frozen=True)

    only_in_m: EnvMap = Field(
        default_factory=EnvMap, description="Variables set only in M"
    )
    only_in_n: EnvMap = Field(
        default_factory=EnvMap, description="Variables set only in N"
    )
    changes: list[Change] = Field(
        default_factory=list, description="Variables whose value differs"
    )

    def __hash__(self) -> int:
        return hash(
            (
                frozenset(self.only_in_m.items()),
                frozenset(self.only_in_n.items()),
                tuple(self.changes),
            )
        )

    def __bool__(self) -> bool:
        return bool(self.only_in_m or self.only_in_n or self.changes)

    def __str__(self) -> str:
        lines = [f"- {kv}" for kv in self.only_in_m.encode()]
        lines.extend(f"+ {kv}" for kv in self.only_in_n.encode())
        lines.extend(f"~ {change}" for change in self.changes)
        return "\n".join(lines)
