"""
Tests for answer stores and passport completion.
"""

from unittest import mock

import pandas as pd
import pytest
import requests

from passport_compat.answers import (
    CsvAnswerStore,
    RestAnswerStore,
    build_answer_store,
    fetch_answers_safely,
    calculate_passport_completion,
)
from passport_compat.scoring import Answer


# =============================================================================
# CSV store
# =============================================================================

def test_save_and_fetch(tmp_path):
    store = CsvAnswerStore(tmp_path / "answers.csv")
    store.save_answer("alex", 101, 5)
    store.save_answer("alex", 102, "Non-verbal cues")
    store.save_answer("sam", 101, 3)

    assert store.fetch_answers("alex") == [
        Answer(question_id=101, value="5"),
        Answer(question_id=102, value="Non-verbal cues"),
    ]
    assert store.fetch_answers("sam") == [Answer(question_id=101, value="3")]
    assert store.users() == ["alex", "sam"]


def test_save_overwrites_existing_answer(tmp_path):
    path = tmp_path / "answers.csv"
    store = CsvAnswerStore(path)
    store.save_answer("alex", 101, 2)
    store.save_answer("alex", 104, 4)
    store.save_answer("alex", 101, 5)

    df = pd.read_csv(path)
    assert len(df) == 2
    assert [a.value for a in store.fetch_answers("alex")] == ["5", "4"]


def test_missing_file_is_empty(tmp_path):
    store = CsvAnswerStore(tmp_path / "missing.csv")
    assert store.fetch_answers("alex") == []
    assert store.users() == []


def test_unknown_user_is_empty(project_dir):
    store = CsvAnswerStore(project_dir / "data" / "sample_answers.csv")
    assert store.fetch_answers("nobody") == []
    assert len(store.fetch_answers("alex")) == 7


def test_save_requires_user_id(tmp_path):
    store = CsvAnswerStore(tmp_path / "answers.csv")
    with pytest.raises(ValueError):
        store.save_answer("", 101, 3)


def test_missing_columns_raise(tmp_path):
    path = tmp_path / "answers.csv"
    path.write_text("user_id,answer\nalex,3\n")
    with pytest.raises(ValueError):
        CsvAnswerStore(path).fetch_answers("alex")


def test_answer_text_is_kept_verbatim(tmp_path):
    store = CsvAnswerStore(tmp_path / "answers.csv")
    store.save_answer("alex", 103, "NA, honestly, and \"quotes\"")
    assert store.fetch_answers("alex")[0].value == "NA, honestly, and \"quotes\""


# =============================================================================
# REST store
# =============================================================================

def test_rest_store_reads_rows():
    resp = mock.Mock()
    resp.raise_for_status.return_value = None
    resp.json.return_value = [
        {"id": "a1", "user_id": "u1", "question_id": 101, "answer": "4"},
        {"id": "a2", "user_id": "u1", "question_id": 103, "answer": "Time to talk"},
    ]
    store = RestAnswerStore("https://example.supabase.co", "key")

    with mock.patch("passport_compat.answers.store.requests.get", return_value=resp) as get:
        answers = store.fetch_answers("u1")

    assert answers == [Answer(101, "4"), Answer(103, "Time to talk")]
    _, kwargs = get.call_args
    assert kwargs["params"]["user_id"] == "eq.u1"


def test_rest_store_malformed_rows_raise():
    resp = mock.Mock()
    resp.raise_for_status.return_value = None
    resp.json.return_value = [{"user_id": "u1"}]
    store = RestAnswerStore("https://example.supabase.co", "key")

    with mock.patch("passport_compat.answers.store.requests.get", return_value=resp):
        with pytest.raises(ValueError):
            store.fetch_answers("u1")


def test_fetch_answers_safely_defaults_to_empty():
    store = RestAnswerStore("https://example.supabase.co", "key")

    with mock.patch(
        "passport_compat.answers.store.requests.get",
        side_effect=requests.Timeout("slow"),
    ):
        assert fetch_answers_safely(store, "u1") == []


def test_build_answer_store(tmp_path, monkeypatch):
    store = build_answer_store({"answers": {"source": "csv", "path": str(tmp_path / "a.csv")}})
    assert isinstance(store, CsvAnswerStore)

    store = build_answer_store({"answers": {"source": "rest"}}, path=str(tmp_path / "b.csv"))
    assert isinstance(store, CsvAnswerStore)

    monkeypatch.setenv("SUPABASE_URL", "https://example.supabase.co")
    monkeypatch.setenv("SUPABASE_ANON_KEY", "key")
    assert isinstance(build_answer_store({"answers": {"source": "rest"}}), RestAnswerStore)

    with pytest.raises(ValueError):
        build_answer_store({"answers": {"source": "ftp"}})


# =============================================================================
# Completion
# =============================================================================

def test_completion():
    answers = [Answer(1, "3"), Answer(2, "A"), Answer(2, "B")]
    completion = calculate_passport_completion(answers, 9)

    assert completion.answered_questions == 2
    assert completion.total_questions == 9
    assert completion.completion_percentage == 22
    assert completion.to_dict() == {
        "completionPercentage": 22,
        "answeredQuestions": 2,
        "totalQuestions": 9,
    }


def test_completion_rounds_half_up():
    answers = [Answer(i, "x") for i in range(1, 4)]
    # 3 / 8 = 37.5%
    assert calculate_passport_completion(answers, 8).completion_percentage == 38


def test_completion_with_empty_catalog():
    assert calculate_passport_completion([Answer(1, "3")], 0).completion_percentage == 0
