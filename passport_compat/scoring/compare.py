"""
Pairwise passport answer comparison.

Compares two partners' passport answers question by question and aggregates
the per-question scores into four report buckets.

Per-question scores:
    scale:          100 - |user - partner| * scale_step
    multipleChoice: 100 if both chose the same option, else 0
    openEnded:      open_ended_score (no automatic judgement of free text)

Bucket scores:
    score = round_half_up(sum(scores) / count), 0 when count == 0

Every jointly answered question counts toward "overall"; questions whose
category maps to communication, boundaries or intimacy also count toward
that bucket.

This module is pure: no I/O and no logging, so the same inputs always give
the same report.
"""

import math
from dataclasses import dataclass, asdict
from typing import Dict, Any, Iterable, Optional, Union

from .categories import map_category, normalize_mapping
from .schema import (
    Answer,
    Question,
    QuestionType,
    ReportCategory,
    NAMED_CATEGORIES,
    CompatibilityInsights,
    CompatibilityReport,
    QuestionInsight,
)

AnswerLike = Union[Answer, Dict[str, Any]]
QuestionLike = Union[Question, Dict[str, Any]]


@dataclass
class ScoringConfig:
    """
    Tunable scoring constants.

    Attributes:
        scale_step: Points lost per step of difference on a scale question
        open_ended_score: Neutral score given to open-ended questions
        strength_threshold: Category score at or above which a strength is noted
        opportunity_threshold: Category score at or below which an opportunity is noted
        high_rating: Minimum shared scale rating reported as a strength
        large_gap: Minimum scale difference reported as an opportunity
        scale_min: Lowest valid scale answer
        scale_max: Highest valid scale answer
    """
    scale_step: int = 20
    open_ended_score: int = 50
    strength_threshold: int = 80
    opportunity_threshold: int = 40
    high_rating: int = 4
    large_gap: int = 3
    scale_min: int = 1
    scale_max: int = 5

    def validate(self) -> None:
        """Validate configuration values."""
        if self.scale_min >= self.scale_max:
            raise ValueError(f"scale_min must be below scale_max, got {self.scale_min} >= {self.scale_max}")
        if self.scale_step <= 0:
            raise ValueError(f"scale_step must be positive, got {self.scale_step}")
        if not 0 <= self.open_ended_score <= 100:
            raise ValueError(f"open_ended_score must be in [0, 100], got {self.open_ended_score}")
        if not 0 <= self.opportunity_threshold < self.strength_threshold <= 100:
            raise ValueError(
                f"Thresholds must satisfy 0 <= opportunity < strength <= 100, "
                f"got {self.opportunity_threshold} and {self.strength_threshold}"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "ScoringConfig":
        """Create from dictionary."""
        return cls(**d)

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "ScoringConfig":
        """Create from main config dictionary."""
        defaults = cls()
        scoring = config.get("scoring", {}) or {}
        return cls(**{key: scoring.get(key, value) for key, value in defaults.to_dict().items()})


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties away from zero (87.5 -> 88, 86.5 -> 87)."""
    if value < 0:
        return -int(math.floor(-value + 0.5))
    return int(math.floor(value + 0.5))


def parse_rating(value: Any) -> Optional[int]:
    """
    Parse an answer as an integer rating, without checking the scale range.

    Returns:
        The integer, or None if the answer is not an integer
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            return None
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def parse_scale_value(value: Any, config: ScoringConfig) -> Optional[int]:
    """
    Parse a scale answer.

    Returns:
        The integer rating, or None if it is not an integer within the scale
    """
    rating = parse_rating(value)
    if rating is None or not config.scale_min <= rating <= config.scale_max:
        return None
    return rating


def score_question(
    question: Question,
    user_value: Any,
    partner_value: Any,
    config: Optional[ScoringConfig] = None
) -> int:
    """
    Score one jointly answered question in [0, 100].

    Scale answers that are not integers within the scale score 0.
    """
    if config is None:
        config = ScoringConfig()

    if question.type == QuestionType.SCALE:
        user_rating = parse_scale_value(user_value, config)
        partner_rating = parse_scale_value(partner_value, config)
        if user_rating is None or partner_rating is None:
            return 0
        return max(0, 100 - abs(user_rating - partner_rating) * config.scale_step)
    if question.type == QuestionType.MULTIPLE_CHOICE:
        return 100 if str(user_value) == str(partner_value) else 0
    return config.open_ended_score


def _index_answers(answers: Iterable[AnswerLike]) -> Dict[int, Any]:
    # Later answers overwrite earlier ones; first position is kept
    indexed: Dict[int, Any] = {}
    for answer in answers:
        if not isinstance(answer, Answer):
            answer = Answer.from_dict(answer)
        indexed[answer.question_id] = answer.value
    return indexed


def _index_catalog(catalog: Iterable[QuestionLike]) -> Dict[int, Question]:
    indexed: Dict[int, Question] = {}
    for question in catalog:
        if not isinstance(question, Question):
            question = Question.from_dict(question)
        indexed[question.id] = question
    return indexed


def compare_passport_answers(
    user_answers: Iterable[AnswerLike],
    partner_answers: Iterable[AnswerLike],
    catalog: Iterable[QuestionLike],
    category_mapping: Optional[Dict[str, ReportCategory]] = None,
    config: Optional[ScoringConfig] = None
) -> Optional[CompatibilityReport]:
    """
    Compare two partners' passport answers.

    Args:
        user_answers: The user's answers (Answer instances or store rows)
        partner_answers: The partner's answers
        catalog: Questions (Question instances or catalog rows)
        category_mapping: Raw category -> ReportCategory (default mapping if None)
        config: ScoringConfig with scoring constants (defaults if None)

    Returns:
        CompatibilityReport, or None if either side has no answers
    """
    if config is None:
        config = ScoringConfig()

    user_by_question = _index_answers(user_answers)
    partner_by_question = _index_answers(partner_answers)
    if not user_by_question or not partner_by_question:
        return None

    questions = _index_catalog(catalog)
    if category_mapping is not None:
        category_mapping = normalize_mapping(category_mapping)

    totals = {category: 0 for category in ReportCategory}
    counts = {category: 0 for category in ReportCategory}
    insights = CompatibilityInsights()

    for question_id, user_value in user_by_question.items():
        if question_id not in partner_by_question:
            continue
        question = questions.get(question_id)
        if question is None:
            continue
        partner_value = partner_by_question[question_id]

        score = score_question(question, user_value, partner_value, config)

        totals[ReportCategory.OVERALL] += score
        counts[ReportCategory.OVERALL] += 1
        named = map_category(question.category, category_mapping)
        if named is not None:
            totals[named] += score
            counts[named] += 1

        if question.type == QuestionType.SCALE:
            # Out-of-range integers score 0 but still count as a gap
            user_rating = parse_rating(user_value)
            partner_rating = parse_rating(partner_value)
            if user_rating is None or partner_rating is None:
                continue
            diff = abs(user_rating - partner_rating)
            if diff == 0 and score > 0 and user_rating >= config.high_rating:
                insights.strengths.append(
                    f'You both rated "{question.text}" highly ({user_rating}/{config.scale_max}).'
                )
            elif diff >= config.large_gap:
                insights.opportunities.append(
                    f'You have different perspectives on "{question.text}". '
                    f"This could be a great conversation starter."
                )
                insights.question_specific.append(QuestionInsight(
                    question_id=question.id,
                    text=question.text,
                    insight=(
                        f"You rated this {user_rating}/{config.scale_max} while your partner "
                        f"rated it {partner_rating}/{config.scale_max}."
                    ),
                ))
        elif question.type == QuestionType.MULTIPLE_CHOICE:
            if score == 100:
                insights.strengths.append(f'You both chose "{user_value}" for "{question.text}".')
            else:
                insights.question_specific.append(QuestionInsight(
                    question_id=question.id,
                    text=question.text,
                    insight=f'You chose "{user_value}" while your partner chose "{partner_value}".',
                ))
        else:
            insights.question_specific.append(QuestionInsight(
                question_id=question.id,
                text=question.text,
                insight=f'You answered "{user_value}" and your partner answered "{partner_value}".',
            ))

    scores = {}
    for category in ReportCategory:
        if counts[category] > 0:
            scores[category] = round_half_up(totals[category] / counts[category])
        else:
            scores[category] = 0

    for category in NAMED_CATEGORIES:
        # Buckets without any jointly answered question get no sentence
        if counts[category] == 0:
            continue
        name = category.value
        if scores[category] >= config.strength_threshold:
            insights.strengths.append(f"You have strong alignment in {name}.")
        elif scores[category] <= config.opportunity_threshold:
            insights.opportunities.append(
                f"{name.capitalize()} is an area where you could grow closer together."
            )

    return CompatibilityReport(
        overall=scores[ReportCategory.OVERALL],
        communication=scores[ReportCategory.COMMUNICATION],
        boundaries=scores[ReportCategory.BOUNDARIES],
        intimacy=scores[ReportCategory.INTIMACY],
        insights=insights,
    )
