"""
Question ordering for passport presentation.

Standard questions follow communication -> physical -> boundaries.
Spicy questions flow from easier topics to more intimate ones.
"""

from typing import List, Optional

from ..scoring.schema import Question, QuestionMode

CATEGORY_ORDER = [
    "communication",
    "physical",
    "boundaries",
    "desires",
    "fantasies",
    "mood",
    "kinks",
    "exploration",
    "feedback",
]

STANDARD_QUESTION_ORDER = [
    101, 102, 103,  # communication
    104, 105, 106,  # physical
    107, 108, 109,  # boundaries
]

SPICY_QUESTION_ORDER = [
    1, 2, 3, 4,              # desires
    13, 14, 15, 16,          # mood
    5, 6, 7, 8,              # fantasies
    17, 18, 19, 20, 21, 22,  # exploration
    9, 10, 11, 12,           # kinks
    23, 24, 25, 26, 27, 28,  # feedback
]


def order_questions_by_category(questions: List[Question]) -> List[Question]:
    """
    Order questions by CATEGORY_ORDER, then by id.

    Categories not in CATEGORY_ORDER go last.
    """
    unlisted = len(CATEGORY_ORDER)

    def sort_key(q: Question):
        if q.category in CATEGORY_ORDER:
            return (CATEGORY_ORDER.index(q.category), q.id)
        return (unlisted, q.id)

    return sorted(questions, key=sort_key)


def order_questions_by_custom_order(questions: List[Question], custom_order: List[int]) -> List[Question]:
    """
    Order questions by an explicit id list.

    Listed ids come first in list order; the rest follow sorted by id.
    """
    positions = {qid: idx for idx, qid in enumerate(custom_order)}

    def sort_key(q: Question):
        if q.id in positions:
            return (0, positions[q.id], q.id)
        return (1, 0, q.id)

    return sorted(questions, key=sort_key)


def get_questions_in_recommended_order(
    questions: List[Question],
    mode: Optional[str] = None
) -> List[Question]:
    """
    Order questions the way the passport presents them.

    Args:
        questions: Questions to order
        mode: "standard", "spicy", or "all"/None for standard followed by spicy
    """
    standard = order_questions_by_custom_order(
        [q for q in questions if q.mode == QuestionMode.STANDARD],
        STANDARD_QUESTION_ORDER
    )
    if mode == "standard":
        return standard

    spicy = order_questions_by_custom_order(
        [q for q in questions if q.mode == QuestionMode.SPICY],
        SPICY_QUESTION_ORDER
    )
    if mode == "spicy":
        return spicy

    return standard + spicy
