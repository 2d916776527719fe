"""Fixed rule table for ATS-friendliness scoring."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class RuleCategory(str, Enum):
    ESSENTIAL_SECTION = "essential-section"
    FORMATTING_PENALTY = "formatting-penalty"
    BONUS_KEYWORD = "bonus-keyword"


@dataclass(frozen=True)
class Rule:
    """A single substring rule.

    Essential-section rules add ``weight`` when matched and emit
    ``suggestion`` when missing. Penalty and bonus rules emit ``suggestion``
    when matched.
    """

    keywords: tuple[str, ...]
    weight: int
    suggestion: str
    category: RuleCategory

    def matches(self, text: str) -> bool:
        """True if any keyword is contained in the already-lowercased text."""
        return any(k in text for k in self.keywords)

    @property
    def label(self) -> str:
        return " | ".join(self.keywords)


ACTION_VERB_SUGGESTION = "Use strong action verbs to start bullet points."
INDUSTRY_KEYWORD_SUGGESTION = "Incorporate more industry-specific keywords."
PHOTO_SUGGESTION = (
    "Remove your photo. Most ATS systems cannot process images "
    "and they take up valuable space."
)

BONUS_CAP = 10
MIN_SCORE = 0
MAX_SCORE = 100


def _section(keyword: str, weight: int, suggestion: str) -> Rule:
    return Rule((keyword,), weight, suggestion, RuleCategory.ESSENTIAL_SECTION)


def _bonus(keyword: str, weight: int, suggestion: str) -> Rule:
    return Rule((keyword,), weight, suggestion, RuleCategory.BONUS_KEYWORD)


# Suggestion texts quote the section names ('Contact Information', ...) and
# are returned verbatim.
ESSENTIAL_SECTION_RULES: tuple[Rule, ...] = (
    _section(
        "contact", 10,
        "Add a clear 'Contact Information' section at the top.",
    ),
    _section(
        "summary", 15,
        "Add a 'Professional Summary' or 'Objective' section to quickly "
        "state your goals and skills.",
    ),
    _section(
        "experience", 20,
        "A 'Work Experience' section is critical. Make sure it highlights "
        "your accomplishments, not just duties.",
    ),
    _section(
        "skills", 20,
        "Include a dedicated 'Skills' section to list your technical and soft skills.",
    ),
    _section(
        "education", 10,
        "Make sure you have an 'Education' section with your degree and institution.",
    ),
)

# Both image extensions share one rule so the penalty applies at most once.
FORMATTING_PENALTY_RULES: tuple[Rule, ...] = (
    Rule((".png", ".jpg"), -10, PHOTO_SUGGESTION, RuleCategory.FORMATTING_PENALTY),
)

BONUS_KEYWORD_RULES: tuple[Rule, ...] = (
    _bonus("developed", 2, ACTION_VERB_SUGGESTION),
    _bonus("managed", 2, ACTION_VERB_SUGGESTION),
    _bonus("created", 2, ACTION_VERB_SUGGESTION),
    _bonus("javascript", 3, INDUSTRY_KEYWORD_SUGGESTION),
    _bonus("python", 3, INDUSTRY_KEYWORD_SUGGESTION),
    _bonus("react", 3, INDUSTRY_KEYWORD_SUGGESTION),
    _bonus("java", 3, INDUSTRY_KEYWORD_SUGGESTION),
)

# Evaluation order: essential sections, formatting penalties, bonus keywords.
RULES: tuple[Rule, ...] = (
    ESSENTIAL_SECTION_RULES + FORMATTING_PENALTY_RULES + BONUS_KEYWORD_RULES
)
