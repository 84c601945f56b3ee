import pytest

from authsvc.trigger_rules import (
    MatchType,
    StringMatch,
    TriggerRule,
    match_string,
    trigger_rule_matches_path,
)


@pytest.mark.parametrize(
    "path, expected",
    [
        ("/good-x", False),
        ("/allow-x", False),
        ("/good-1", True),
        ("/allow-1", True),
        ("/other", True),
    ],
)
def test_excluded(path, expected):
    rules = [
        TriggerRule(
            excluded_paths=(StringMatch.exact("/good-x"), StringMatch.exact("/allow-x"))
        )
    ]
    assert trigger_rule_matches_path(path, rules) is expected


@pytest.mark.parametrize(
    "path, expected",
    [
        ("/good-x", True),
        ("/allow-x", True),
        ("/good-2", True),
        ("/allow-1", True),
        ("/other", False),
    ],
)
def test_included(path, expected):
    rules = [
        TriggerRule(
            included_paths=(StringMatch.prefix("/good"), StringMatch.prefix("/allow"))
        )
    ]
    assert trigger_rule_matches_path(path, rules) is expected


@pytest.mark.parametrize(
    "path, expected",
    [
        ("/good-x", False),
        ("/allow-x", False),
        ("/good-1", True),
        ("/allow-1", True),
        ("/other", False),
    ],
)
def test_both_included_and_excluded(path, expected):
    rules = [
        TriggerRule(
            excluded_paths=(StringMatch.exact("/good-x"), StringMatch.exact("/allow-x")),
            included_paths=(StringMatch.prefix("/good"), StringMatch.prefix("/allow")),
        )
    ]
    assert trigger_rule_matches_path(path, rules) is expected


def test_always_trigger_when_path_is_empty():
    assert trigger_rule_matches_path("", []) is True


def test_empty_path_triggers_even_with_rules():
    rules = [TriggerRule(included_paths=(StringMatch.exact("/only"),))]
    assert trigger_rule_matches_path("", rules) is True


def test_always_trigger_when_no_rules():
    assert trigger_rule_matches_path("/test", []) is True


def test_trigger_when_any_rule_matches_with_multiple_rules():
    rules = [TriggerRule(excluded_paths=(StringMatch.exact("/hello"),))]
    assert trigger_rule_matches_path("/hello", rules) is False
    assert trigger_rule_matches_path("/other", rules) is True

    rules.append(TriggerRule(included_paths=(StringMatch.exact("/hello"),)))
    assert trigger_rule_matches_path("/hello", rules) is True
    assert trigger_rule_matches_path("/other", rules) is True


def test_unset_match_never_matches():
    assert match_string("", StringMatch()) is False
    assert StringMatch().match_type is None


@pytest.mark.parametrize(
    "text, expected", [("exact", True), ("exac", False), ("exacy", False)]
)
def test_match_exact(text, expected):
    assert match_string(text, StringMatch.exact("exact")) is expected


@pytest.mark.parametrize(
    "text, expected",
    [("prefix-1", True), ("prefix", True), ("prefi", False), ("prefiy", False)],
)
def test_match_prefix(text, expected):
    assert match_string(text, StringMatch.prefix("prefix")) is expected


@pytest.mark.parametrize(
    "text, expected",
    [("1-suffix", True), ("suffix", True), ("suffi", False), ("suffiy", False)],
)
def test_match_suffix(text, expected):
    assert match_string(text, StringMatch.suffix("suffix")) is expected


@pytest.mark.parametrize(
    "text, expected",
    [("1-abc-1", True), ("1-abc", False), ("abc-1", False), ("1-ac-1", False)],
)
def test_match_regex(text, expected):
    assert match_string(text, StringMatch.regex(".+abc.+")) is expected


def test_constructors_set_match_type():
    assert StringMatch.exact("a") == StringMatch(MatchType.EXACT, "a")
    assert StringMatch.prefix("a") == StringMatch(MatchType.PREFIX, "a")
    assert StringMatch.suffix("a") == StringMatch(MatchType.SUFFIX, "a")
    assert StringMatch.regex("a") == StringMatch(MatchType.REGEX, "a")