"""Answer module: passport answer stores and completion tracking."""

from .store import (
    AnswerStore,
    CsvAnswerStore,
    RestAnswerStore,
    build_answer_store,
    fetch_answers_safely,
)
from .completion import PassportCompletion, calculate_passport_completion

__all__ = [
    "AnswerStore",
    "CsvAnswerStore",
    "RestAnswerStore",
    "build_answer_store",
    "fetch_answers_safely",
    "PassportCompletion",
    "calculate_passport_completion",
]
