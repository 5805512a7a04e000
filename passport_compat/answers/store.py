"""
Passport answer stores.

Each store returns one user's answers as a list of Answer objects. There is
at most one answer per (user_id, question_id); saving again overwrites the
earlier answer.

Stores:
- CsvAnswerStore: local CSV table, read and written with pandas
- RestAnswerStore: hosted answers table read over its REST endpoint
"""

import logging
import os
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Any, List, Optional, Union

import pandas as pd
import requests

from ..scoring.schema import Answer

logger = logging.getLogger(__name__)

ANSWER_COLUMNS = ["user_id", "question_id", "answer", "updated_at"]


class AnswerStore(ABC):
    """Source of passport answers."""

    @abstractmethod
    def fetch_answers(self, user_id: str) -> List[Answer]:
        """Return the user's answers."""


class CsvAnswerStore(AnswerStore):
    """
    Answer table kept in a CSV file.

    A missing file is treated as an empty table and is created on first save.

    Attributes:
        path: Path to the CSV file
        delimiter: Field delimiter
    """

    def __init__(self, path: Union[str, Path], delimiter: str = ","):
        self.path = Path(path)
        self.delimiter = delimiter

    def _load(self) -> pd.DataFrame:
        if not self.path.exists():
            logger.warning(f"Answer file not found, starting empty: {self.path}")
            return pd.DataFrame(columns=ANSWER_COLUMNS)

        df = pd.read_csv(
            self.path,
            sep=self.delimiter,
            dtype={"user_id": str, "answer": str, "updated_at": str},
            keep_default_na=False,
        )
        missing = [c for c in ["user_id", "question_id", "answer"] if c not in df.columns]
        if missing:
            raise ValueError(f"Answer file {self.path} is missing columns: {missing}")
        if "updated_at" not in df.columns:
            df["updated_at"] = ""
        df["question_id"] = df["question_id"].astype(int)
        return df[ANSWER_COLUMNS]

    def _save(self, df: pd.DataFrame) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(self.path, sep=self.delimiter, index=False)

    def fetch_answers(self, user_id: str) -> List[Answer]:
        """
        Return the user's answers in file order.

        Unknown users get an empty list.
        """
        df = self._load()
        rows = df[df["user_id"] == str(user_id)]
        logger.debug(f"Loaded {len(rows)} answers for user {user_id}")
        return [
            Answer(question_id=int(row.question_id), value=row.answer)
            for row in rows.itertuples(index=False)
        ]

    def save_answer(self, user_id: str, question_id: int, answer: Union[str, int]) -> None:
        """
        Save or update a user's answer to a question.

        Raises:
            ValueError: If user_id is empty
        """
        if not user_id:
            raise ValueError("User ID is required")

        df = self._load()
        updated_at = datetime.now(timezone.utc).isoformat(timespec="seconds")
        mask = (df["user_id"] == str(user_id)) & (df["question_id"] == int(question_id))

        if mask.any():
            df.loc[mask, "answer"] = str(answer)
            df.loc[mask, "updated_at"] = updated_at
        else:
            row = pd.DataFrame([{
                "user_id": str(user_id),
                "question_id": int(question_id),
                "answer": str(answer),
                "updated_at": updated_at,
            }])
            df = row if df.empty else pd.concat([df, row], ignore_index=True)

        self._save(df)
        logger.info(f"Saved answer to question {question_id} for user {user_id}")

    def users(self) -> List[str]:
        """Return user ids that have at least one answer, in first-seen order."""
        df = self._load()
        return list(pd.unique(df["user_id"]))


class RestAnswerStore(AnswerStore):
    """
    Answers read from the hosted answers table over its REST endpoint.

    Attributes:
        base_url: Project URL
        api_key: API key sent with each request
        table: Answers table name
        timeout: Request timeout in seconds
    """

    def __init__(self, base_url: str, api_key: str, table: str = "passport_answers", timeout: float = 10):
        if not base_url:
            raise ValueError("Answer store base URL is not set")
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.table = table
        self.timeout = timeout

    @classmethod
    def from_env(cls, table: str = "passport_answers", timeout: float = 10) -> "RestAnswerStore":
        """Create from SUPABASE_URL and SUPABASE_ANON_KEY."""
        base_url = os.getenv("SUPABASE_URL")
        api_key = os.getenv("SUPABASE_ANON_KEY")
        if not base_url:
            raise ValueError("SUPABASE_URL is not set")
        if not api_key:
            raise ValueError("SUPABASE_ANON_KEY is not set")
        return cls(base_url, api_key, table=table, timeout=timeout)

    def fetch_answers(self, user_id: str) -> List[Answer]:
        """
        Fetch the user's answers.

        Raises:
            ValueError: If user_id is empty or the rows are malformed
            requests.RequestException: On network or HTTP errors
        """
        if not user_id:
            raise ValueError("User ID is required")

        resp = requests.get(
            f"{self.base_url}/rest/v1/{self.table}",
            params={"select": "*", "user_id": f"eq.{user_id}"},
            headers={
                "apikey": self.api_key,
                "Authorization": f"Bearer {self.api_key}",
            },
            timeout=self.timeout,
        )
        resp.raise_for_status()
        data = resp.json()
        if not isinstance(data, list):
            raise ValueError("Answer rows must be a list")

        try:
            return [Answer.from_dict(row) for row in data]
        except (KeyError, TypeError) as e:
            raise ValueError(f"Malformed answer row: {e}")


def fetch_answers_safely(store: AnswerStore, user_id: str) -> List[Answer]:
    """
    Fetch answers, defaulting to an empty list when the store fails.

    An empty list tells the scorer there is not enough data yet.
    """
    try:
        return store.fetch_answers(user_id)
    except (requests.RequestException, ValueError) as e:
        logger.error(f"Error fetching answers for user {user_id}: {e}")
        return []


def build_answer_store(config: Dict[str, Any], path: Optional[str] = None) -> AnswerStore:
    """
    Build the answer store described by the "answers" config section.

    Args:
        config: Main configuration dictionary
        path: CSV path overriding answers.path (forces the CSV store)

    Raises:
        ValueError: If the source is unknown, or REST settings are missing
    """
    answers_config = config.get("answers", {}) or {}
    source = "csv" if path else answers_config.get("source", "csv")

    if source == "csv":
        return CsvAnswerStore(
            path or answers_config.get("path", "data/answers.csv"),
            delimiter=answers_config.get("delimiter", ","),
        )
    if source == "rest":
        return RestAnswerStore.from_env(
            table=answers_config.get("table", "passport_answers"),
            timeout=answers_config.get("timeout", 10),
        )
    raise ValueError(f"Unknown answer source: {source}. Expected 'csv' or 'rest'")
