"""Rule evaluation: resume text -> score and suggestions."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from skillens.models.analysis import AnalysisResult
from skillens.scoring.rules import (
    BONUS_CAP,
    MAX_SCORE,
    MIN_SCORE,
    RULES,
    Rule,
    RuleCategory,
)

logger = logging.getLogger(__name__)


class SuggestionList:
    """Ordered collection of unique suggestions (first occurrence wins)."""

    def __init__(self, items: Iterable[str] = ()):
        self._items: list[str] = []
        self._seen: set[str] = set()
        for item in items:
            self.add(item)

    def add(self, suggestion: str) -> bool:
        """Append ``suggestion`` unless already present. Returns True if added."""
        if suggestion in self._seen:
            return False
        self._seen.add(suggestion)
        self._items.append(suggestion)
        return True

    def __contains__(self, suggestion: object) -> bool:
        return suggestion in self._seen

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def to_tuple(self) -> tuple[str, ...]:
        return tuple(self._items)


@dataclass(frozen=True)
class RuleOutcome:
    """How one rule fared against a resume."""

    rule: Rule
    matched: bool

    @property
    def contribution(self) -> int:
        """Raw points this rule adds before the bonus cap is applied."""
        return self.rule.weight if self.matched else 0

    @property
    def suggestion(self) -> str | None:
        if self.rule.category is RuleCategory.ESSENTIAL_SECTION:
            return None if self.matched else self.rule.suggestion
        return self.rule.suggestion if self.matched else None


def score_breakdown(text: str | None, rules: tuple[Rule, ...] = RULES) -> list[RuleOutcome]:
    """Evaluate every rule against ``text`` in table order."""
    content = (text or "").lower()
    return [RuleOutcome(rule, rule.matches(content)) for rule in rules]


def analyze(text: str | None, rules: tuple[Rule, ...] = RULES) -> AnalysisResult:
    """Score resume text and collect improvement suggestions.

    Never raises for string input. Bonus keyword points are summed
    separately and capped at ``BONUS_CAP`` before joining the score.
    """
    score = 0
    bonus = 0
    suggestions = SuggestionList()

    for outcome in score_breakdown(text, rules):
        if outcome.rule.category is RuleCategory.BONUS_KEYWORD:
            bonus += outcome.contribution
        else:
            score += outcome.contribution
        if outcome.suggestion is not None:
            suggestions.add(outcome.suggestion)

    score += min(bonus, BONUS_CAP)
    final_score = max(MIN_SCORE, min(MAX_SCORE, round(score)))
    logger.debug("Scored resume: %d (bonus %d, %d suggestions)", final_score, bonus, len(suggestions))
    return AnalysisResult(score=final_score, suggestions=suggestions.to_tuple())
