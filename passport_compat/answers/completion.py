"""Passport completion tracking."""

from dataclasses import dataclass
from typing import Dict, Any, Iterable

from ..scoring.compare import round_half_up
from ..scoring.schema import Answer


@dataclass
class PassportCompletion:
    """
    How much of the passport a user has filled out.

    Attributes:
        completion_percentage: Answered share of the catalog, 0-100
        answered_questions: Number of distinct questions answered
        total_questions: Number of questions in the catalog
    """
    completion_percentage: int
    answered_questions: int
    total_questions: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "completionPercentage": self.completion_percentage,
            "answeredQuestions": self.answered_questions,
            "totalQuestions": self.total_questions,
        }


def calculate_passport_completion(answers: Iterable[Answer], total_questions: int) -> PassportCompletion:
    """
    Calculate a user's passport completion.

    Args:
        answers: The user's answers
        total_questions: Number of questions in the catalog

    Returns:
        PassportCompletion; 0% when the catalog is empty
    """
    answered = len({a.question_id for a in answers})
    if total_questions <= 0:
        percentage = 0
    else:
        percentage = round_half_up(answered / total_questions * 100)
    return PassportCompletion(
        completion_percentage=percentage,
        answered_questions=answered,
        total_questions=total_questions,
    )
