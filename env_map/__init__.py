"""Conveniences for working with environment variables.

Particularly in the context of executing external commands:
- env_map: EnvMap with render/encode/diff, plus parse, merge, variables
- models: Change, EnvDiff
- env_filter: EnvVarPolicy, filter_env
"""

from .env_filter import EnvVarPolicy, filter_env
from .env_map import EnvMap, merge, parse, variables
from .models import Change, EnvDiff

__all__ = [
    "EnvMap",
    "parse",
    "merge",
    "variables",
    "Change",
    "EnvDiff",
    "EnvVarPolicy",
    "filter_env",
]
