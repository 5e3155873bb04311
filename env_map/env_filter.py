"""Environment variable filtering for child processes.

Decides which variables of a base environment a child inherits: everything,
only core system vars, or nothing. Explicit overrides always apply.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import Enum

from .env_map import EnvMap, merge

logger = logging.getLogger(__name__)


class EnvVarPolicy(str, Enum):
    """Environment variable inheritance policy."""

    INHERIT_ALL = "inherit_all"
    CORE_ONLY = "core_only"
    INHERIT_NONE = "inherit_none"


# The only vars kept under core_only policy
CORE_VARS: frozenset[str] = frozenset(
    {
        "PATH",
        "HOME",
        "USER",
        "SHELL",
        "LANG",
        "TERM",
        "TMPDIR",
        "GOPATH",
        "CARGO_HOME",
        "NVM_DIR",
        "PYENV_ROOT",
        "JAVA_HOME",
        "RUSTUP_HOME",
    }
)


def filter_env(
    policy: EnvVarPolicy | str,
    base: Mapping[str, str],
    explicit: Mapping[str, str] | None = None,
) -> EnvMap:
    """Apply an inheritance policy to *base*, then merge explicit overrides.

    Args:
        policy: Which vars to inherit from base, as an enum member or its value.
        base: The base environment (typically ``variables()``).
        explicit: Caller-provided vars that always override.

    Returns:
        A new EnvMap; neither input is modified.

    Raises:
        ValueError: If *policy* is not a known policy value.
    """
    policy = EnvVarPolicy(policy)
    if policy == EnvVarPolicy.INHERIT_ALL:
        inherited = EnvMap(base)
    elif policy == EnvVarPolicy.CORE_ONLY:
        inherited = EnvMap({k: v for k, v in base.items() if k in CORE_VARS})
    else:
        inherited = EnvMap()

    logger.debug(
        "env_filter [%s]: inherited %d of %d vars",
        policy.value,
        len(inherited),
        len(base),
    )
    return merge(inherited, explicit or {})
