"""Path-based trigger rules deciding whether a request should be handled."""

from __future__ import annotations

import enum
import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional


class MatchType(enum.Enum):
    """How a StringMatch compares its value with a string."""

    EXACT = "exact"
    PREFIX = "prefix"
    SUFFIX = "suffix"
    REGEX = "regex"


@dataclass(frozen=True)
class StringMatch:
    """A single string matcher; with no match type it never matches."""

    match_type: Optional[MatchType] = None
    value: str = ""

    @classmethod
    def exact(cls, value: str) -> StringMatch:
        return cls(MatchType.EXACT, value)

    @classmethod
    def prefix(cls, value: str) -> StringMatch:
        return cls(MatchType.PREFIX, value)

    @classmethod
    def suffix(cls, value: str) -> StringMatch:
        return cls(MatchType.SUFFIX, value)

    @classmethod
    def regex(cls, value: str) -> StringMatch:
        return cls(MatchType.REGEX, value)


@dataclass(frozen=True)
class TriggerRule:
    """Paths to exclude and include; an empty include list includes everything."""

    excluded_paths: tuple[StringMatch, ...] = ()
    included_paths: tuple[StringMatch, ...] = ()


def match_string(text: str, match: StringMatch) -> bool:
    """Return whether text satisfies the given matcher."""
    match match.match_type:
        case MatchType.EXACT:
            return text == match.value
        case MatchType.PREFIX:
            return text.startswith(match.value)
        case MatchType.SUFFIX:
            return text.endswith(match.value)
        case MatchType.REGEX:
            return re.fullmatch(match.value, text) is not None
        case _:
            return False


def _rule_matches(path: str, rule: TriggerRule) -> bool:
    if any(match_string(path, excluded) for excluded in rule.excluded_paths):
        return False
    if rule.included_paths:
        return any(match_string(path, included) for included in rule.included_paths)
    return True


def trigger_rule_matches_path(path: str, trigger_rules: Sequence[TriggerRule]) -> bool:
    """Return whether any rule triggers on path.

    An empty path or an empty rule list always triggers.
    """
    if not path or not trigger_rules:
        return True
    return any(_rule_matches(path, rule) for rule in trigger_rules)