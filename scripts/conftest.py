"""Shared builders for the passport compatibility tests."""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest

from passport_compat.scoring import Answer, Question, QuestionType


def make_question(qid, qtype, category="values", text=None, options=None):
    """Create a catalog question."""
    return Question(
        id=qid,
        text=text or f"Question {qid}",
        type=qtype,
        category=category,
        options=options,
    )


def make_answers(pairs):
    """Create answers from (question_id, value) pairs."""
    return [Answer(question_id=qid, value=value) for qid, value in pairs]


@pytest.fixture
def project_dir() -> Path:
    return project_root


@pytest.fixture
def scenario_catalog():
    """One question per named report category."""
    return [
        make_question(1, QuestionType.SCALE, "communication",
                      text="How comfortable are you discussing your desires?"),
        make_question(2, QuestionType.SCALE, "boundaries",
                      text="How comfortable are you saying no?"),
        make_question(3, QuestionType.MULTIPLE_CHOICE, "physical",
                      text="What kind of touch do you prefer?",
                      options=["Cuddling", "Massage", "Holding hands"]),
    ]
