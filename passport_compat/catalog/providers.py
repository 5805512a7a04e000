"""
Question catalog providers.

The catalog is resolved in two tiers: a hosted table can override the
questions, and the static catalog shipped with the package is the fallback.
The caller picks the provider; the scorer only ever sees a list of questions.
"""

import logging
import os
from abc import ABC, abstractmethod
from typing import Dict, Any, List, Optional

import requests

from ..scoring.schema import Question
from .questions import get_passport_questions, get_default_passport_questions

logger = logging.getLogger(__name__)

VALID_SOURCES = ["static", "remote", "auto"]


class QuestionCatalogProvider(ABC):
    """Source of passport questions."""

    @abstractmethod
    def fetch_catalog(self) -> List[Question]:
        """Return the question catalog."""


class StaticCatalogProvider(QuestionCatalogProvider):
    """
    In-memory catalog.

    Attributes:
        mode: Question set to serve ("standard", "spicy" or "all")
        questions: Explicit questions overriding the built-in catalog
    """

    def __init__(self, mode: str = "all", questions: Optional[List[Question]] = None):
        self.mode = mode
        self.questions = questions

    def fetch_catalog(self) -> List[Question]:
        if self.questions is not None:
            return list(self.questions)
        return get_passport_questions(self.mode)


def validate_catalog_rows(data: Any) -> None:
    """
    Validate raw catalog rows.

    Raises:
        ValueError: If rows are not a list, lack an id or type, or repeat an id
    """
    if not isinstance(data, list):
        raise ValueError("Question catalog must be a list")

    seen = set()
    for row in data:
        if not isinstance(row, dict) or "id" not in row:
            raise ValueError("Each question must have an id")
        if "type" not in row:
            raise ValueError(f"Question {row['id']} has no type")
        if row["id"] in seen:
            raise ValueError(f"Duplicate question id: {row['id']}")
        seen.add(row["id"])


class RemoteCatalogProvider(QuestionCatalogProvider):
    """
    Catalog read from the hosted questions table over its REST endpoint.

    Attributes:
        base_url: Project URL (e.g. https://xyz.supabase.co)
        api_key: Anonymous API key
        table: Questions table name
        timeout: Request timeout in seconds
    """

    def __init__(self, base_url: str, api_key: str, table: str = "passport_questions", timeout: float = 10):
        if not base_url:
            raise ValueError("Catalog base URL is not set")
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.table = table
        self.timeout = timeout

    @classmethod
    def from_env(cls, table: str = "passport_questions", timeout: float = 10) -> "RemoteCatalogProvider":
        """Create from SUPABASE_URL and SUPABASE_ANON_KEY."""
        base_url = os.getenv("SUPABASE_URL")
        api_key = os.getenv("SUPABASE_ANON_KEY")
        if not base_url:
            raise ValueError("SUPABASE_URL is not set")
        if not api_key:
            raise ValueError("SUPABASE_ANON_KEY is not set")
        return cls(base_url, api_key, table=table, timeout=timeout)

    def fetch_catalog(self) -> List[Question]:
        """
        Fetch questions ordered by id.

        Raises:
            requests.RequestException: On network or HTTP errors
            ValueError: If the rows are malformed
        """
        url = f"{self.base_url}/rest/v1/{self.table}"
        logger.info(f"Fetching question catalog from {url}")
        resp = requests.get(
            url,
            params={"select": "*", "order": "id.asc"},
            headers={
                "apikey": self.api_key,
                "Authorization": f"Bearer {self.api_key}",
            },
            timeout=self.timeout,
        )
        resp.raise_for_status()
        data = resp.json()

        validate_catalog_rows(data)
        questions = [Question.from_dict(row) for row in data]
        logger.info(f"Fetched {len(questions)} questions")
        return questions


class FallbackCatalogProvider(QuestionCatalogProvider):
    """
    Primary catalog with a fallback.

    The primary result is used when it succeeds and is non-empty; otherwise
    the fallback provider is asked.
    """

    def __init__(self, primary: QuestionCatalogProvider, fallback: Optional[QuestionCatalogProvider] = None):
        self.primary = primary
        if fallback is None:
            fallback = StaticCatalogProvider(questions=get_default_passport_questions())
        self.fallback = fallback

    def fetch_catalog(self) -> List[Question]:
        try:
            questions = self.primary.fetch_catalog()
        except (requests.RequestException, ValueError) as e:
            logger.error(f"Error fetching question catalog: {e}")
            logger.info("Using fallback question catalog")
            return self.fallback.fetch_catalog()

        if not questions:
            logger.warning("Question catalog is empty, using fallback question catalog")
            return self.fallback.fetch_catalog()
        return questions


def build_catalog_provider(config: Dict[str, Any], source: Optional[str] = None) -> QuestionCatalogProvider:
    """
    Build the catalog provider described by the "catalog" config section.

    Args:
        config: Main configuration dictionary
        source: Overrides catalog.source ("static", "remote" or "auto")

    Returns:
        QuestionCatalogProvider instance

    Raises:
        ValueError: If the source is unknown, or remote settings are missing
            for the "remote" source
    """
    catalog_config = config.get("catalog", {}) or {}
    source = source or catalog_config.get("source", "static")
    mode = catalog_config.get("mode", "all")
    table = catalog_config.get("table", "passport_questions")
    timeout = catalog_config.get("timeout", 10)

    if source not in VALID_SOURCES:
        raise ValueError(f"Unknown catalog source: {source}. Expected one of {VALID_SOURCES}")

    static = StaticCatalogProvider(mode=mode)
    if source == "static":
        return static

    if source == "remote":
        return RemoteCatalogProvider.from_env(table=table, timeout=timeout)

    try:
        remote = RemoteCatalogProvider.from_env(table=table, timeout=timeout)
    except ValueError as e:
        logger.warning(f"Remote catalog unavailable ({e}), using static catalog")
        return static
    return FallbackCatalogProvider(remote, static)
