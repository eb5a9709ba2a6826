"""Classify a free-text yes/no model reply.

Rules are tried top to bottom and the first match wins, so a reply that
contains both an affirmative and a negative word (``"yes ... no"``) is read
as affirmative.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from loguru import logger


class MuteDecision(str, Enum):
    MUTE = "MUTE"
    NO_MUTE = "NO_MUTE"
    UNCLEAR = "UNCLEAR"


@dataclass(frozen=True)
class DecisionRule:
    """Match when the normalized reply equals one of ``exact`` or contains one of ``contains``."""

    exact: frozenset[str]
    contains: tuple[str, ...]
    decision: MuteDecision

    def matches(self, normalized: str) -> bool:
        return normalized in self.exact or any(s in normalized for s in self.contains)


DECISION_RULES: tuple[DecisionRule, ...] = (
    DecisionRule(
        exact=frozenset({"true", "yes", "y"}),
        contains=("true", "yes"),
        decision=MuteDecision.MUTE,
    ),
    DecisionRule(
        exact=frozenset({"false", "no", "n"}),
        contains=("false", "no"),
        decision=MuteDecision.NO_MUTE,
    ),
)


def normalize_response(text: str) -> str:
    return text.strip().lower()


def classify_response(
    text: str, rules: tuple[DecisionRule, ...] = DECISION_RULES
) -> MuteDecision:
    """Map a model reply to a :class:`MuteDecision`.

    Never raises; anything no rule matches is ``UNCLEAR``.
    """
    normalized = normalize_response(text or "")
    for rule in rules:
        if rule.matches(normalized):
            return rule.decision
    logger.warning(f"Unclear boolean response: {text!r}, defaulting to no")
    return MuteDecision.UNCLEAR
