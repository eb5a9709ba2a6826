"""Tests for the yes/no reply classifier."""

import pytest

from hushbot.agent.decision import (
    DECISION_RULES,
    DecisionRule,
    MuteDecision,
    classify_response,
)


@pytest.mark.parametrize(
    "reply",
    ["YES", "true", "y", "  Yes.  ", "YES I think we should mute", "that is TRUE"],
)
def test_affirmative_replies_mute(reply):
    assert classify_response(reply) == MuteDecision.MUTE


@pytest.mark.parametrize(
    "reply",
    ["no", "false", "N", "no, let's keep talking", "NOPE", "definitely FALSE"],
)
def test_negative_replies_do_not_mute(reply):
    assert classify_response(reply) == MuteDecision.NO_MUTE


@pytest.mark.parametrize("reply", ["maybe?", "", "   ", "hmm, hard to say"])
def test_unmatched_replies_are_unclear(reply):
    assert classify_response(reply) == MuteDecision.UNCLEAR


def test_affirmative_wins_when_both_present():
    assert classify_response("yes and no") == MuteDecision.MUTE
    assert classify_response("no... well, yes") == MuteDecision.MUTE


def test_substring_match_is_coarse():
    # "know" contains "no"
    assert classify_response("I don't know") == MuteDecision.NO_MUTE


def test_rules_are_ordered_affirmative_first():
    assert [r.decision for r in DECISION_RULES] == [MuteDecision.MUTE, MuteDecision.NO_MUTE]


def test_custom_rule_table():
    rules = (DecisionRule(exact=frozenset({"shh"}), contains=(), decision=MuteDecision.MUTE),)
    assert classify_response("SHH", rules) == MuteDecision.MUTE
    assert classify_response("yes", rules) == MuteDecision.UNCLEAR


def test_unclear_reply_logs_warning(caplog):
    classify_response("maybe?")
    assert "Unclear boolean response" in caplog.text
