"""Allow-list compilation and stylesheet scope matching."""

from .compiler import compile_allow_rules, compile_search_regex, glob_to_regex
from .schema import validate_allow_entry
from .scope import scope_matches

__all__ = [
    "compile_allow_rules",
    "compile_search_regex",
    "glob_to_regex",
    "scope_matches",
    "validate_allow_entry",
]
