"""
Tests for the question catalog, its ordering and its providers.

Remote providers are exercised against a mocked requests.get.
"""

from unittest import mock

import pytest
import requests

from passport_compat.catalog import (
    get_passport_questions,
    get_default_passport_questions,
    get_category_label,
    get_questions_by_category,
    get_categories,
    order_questions_by_category,
    order_questions_by_custom_order,
    get_questions_in_recommended_order,
    StaticCatalogProvider,
    RemoteCatalogProvider,
    FallbackCatalogProvider,
    build_catalog_provider,
)
from passport_compat.scoring import QuestionMode, QuestionType


def _response(payload, status_error=None):
    resp = mock.Mock()
    resp.json.return_value = payload
    if status_error is not None:
        resp.raise_for_status.side_effect = status_error
    else:
        resp.raise_for_status.return_value = None
    return resp


# =============================================================================
# Static catalog
# =============================================================================

def test_question_modes():
    standard = get_passport_questions("standard")
    spicy = get_passport_questions("spicy")
    everything = get_passport_questions("all")

    assert len(standard) == 9
    assert len(spicy) == 28
    assert everything == standard + spicy
    assert all(q.mode == QuestionMode.STANDARD for q in standard)
    assert all(q.mode == QuestionMode.SPICY for q in spicy)


def test_question_ids_are_unique():
    ids = [q.id for q in get_passport_questions("all")]
    assert len(ids) == len(set(ids))


def test_unknown_mode_raises():
    with pytest.raises(ValueError):
        get_passport_questions("mild")


def test_multiple_choice_questions_have_options():
    for q in get_passport_questions("all"):
        if q.type == QuestionType.MULTIPLE_CHOICE:
            assert q.options
        else:
            assert q.options is None


def test_default_questions():
    defaults = get_default_passport_questions()
    assert [q.id for q in defaults] == [1, 2, 3, 4, 5]
    assert defaults[0].type == QuestionType.SCALE
    # fallback questions carry no category, so they only count toward overall
    assert all(q.category == "" for q in defaults)


def test_category_labels():
    assert get_category_label("physical") == "Physical Intimacy"
    assert get_category_label("kinks", mode="spicy") == "Kinks & Experiments"
    assert get_category_label("travel") == "Travel"


def test_categories_in_first_seen_order():
    questions = get_passport_questions("all")
    assert get_categories(questions, mode="standard") == ["communication", "physical", "boundaries"]
    assert get_categories(questions)[:4] == ["communication", "physical", "boundaries", "desires"]
    assert [q.id for q in get_questions_by_category(questions, "boundaries")] == [107, 108, 109]


# =============================================================================
# Ordering
# =============================================================================

def test_order_by_category():
    questions = get_passport_questions("spicy")
    ordered = order_questions_by_category(questions)

    assert [q.id for q in ordered[:4]] == [1, 2, 3, 4]
    # mood comes before kinks
    assert [q.id for q in ordered[8:12]] == [13, 14, 15, 16]
    assert [q.id for q in ordered[-6:]] == [23, 24, 25, 26, 27, 28]


def test_order_by_category_puts_unknown_last():
    questions = get_passport_questions("standard")
    questions[0].category = "unknown"
    ordered = order_questions_by_category(questions)
    assert ordered[-1].id == 101


def test_order_by_custom_order():
    questions = get_passport_questions("standard")
    ordered = order_questions_by_custom_order(questions, [109, 101])
    assert [q.id for q in ordered] == [109, 101, 102, 103, 104, 105, 106, 107, 108]


def test_recommended_order():
    questions = list(reversed(get_passport_questions("all")))

    standard = get_questions_in_recommended_order(questions, "standard")
    spicy = get_questions_in_recommended_order(questions, "spicy")
    everything = get_questions_in_recommended_order(questions)

    assert [q.id for q in standard] == list(range(101, 110))
    assert [q.id for q in spicy[:8]] == [1, 2, 3, 4, 13, 14, 15, 16]
    assert everything == standard + spicy


# =============================================================================
# Providers
# =============================================================================

def test_static_provider():
    assert len(StaticCatalogProvider(mode="standard").fetch_catalog()) == 9
    custom = get_default_passport_questions()
    assert StaticCatalogProvider(questions=custom).fetch_catalog() == custom


def test_remote_provider_parses_rows():
    rows = [
        {"id": 1, "text": "Q1", "type": "scale", "options": None, "category": "communication"},
        {"id": 2, "text": "Q2", "type": "multipleChoice", "options": ["A", "B"]},
    ]
    provider = RemoteCatalogProvider("https://example.supabase.co/", "anon-key")

    with mock.patch("passport_compat.catalog.providers.requests.get", return_value=_response(rows)) as get:
        questions = provider.fetch_catalog()

    assert [q.id for q in questions] == [1, 2]
    assert questions[1].type == QuestionType.MULTIPLE_CHOICE
    assert questions[1].category == ""
    args, kwargs = get.call_args
    assert args[0] == "https://example.supabase.co/rest/v1/passport_questions"
    assert kwargs["params"]["order"] == "id.asc"
    assert kwargs["headers"]["apikey"] == "anon-key"


def test_remote_provider_rejects_duplicate_ids():
    rows = [{"id": 1, "type": "scale"}, {"id": 1, "type": "scale"}]
    provider = RemoteCatalogProvider("https://example.supabase.co", "key")

    with mock.patch("passport_compat.catalog.providers.requests.get", return_value=_response(rows)):
        with pytest.raises(ValueError):
            provider.fetch_catalog()


def test_fallback_on_network_error():
    provider = FallbackCatalogProvider(RemoteCatalogProvider("https://example.supabase.co", "key"))

    with mock.patch(
        "passport_compat.catalog.providers.requests.get",
        side_effect=requests.ConnectionError("offline"),
    ):
        questions = provider.fetch_catalog()

    assert [q.id for q in questions] == [1, 2, 3, 4, 5]


def test_fallback_on_http_error():
    provider = FallbackCatalogProvider(
        RemoteCatalogProvider("https://example.supabase.co", "key"),
        StaticCatalogProvider(mode="standard"),
    )
    resp = _response(None, status_error=requests.HTTPError("401"))

    with mock.patch("passport_compat.catalog.providers.requests.get", return_value=resp):
        questions = provider.fetch_catalog()

    assert len(questions) == 9


def test_fallback_on_empty_catalog():
    provider = FallbackCatalogProvider(StaticCatalogProvider(questions=[]))
    assert len(provider.fetch_catalog()) == 5


def test_primary_used_when_available():
    primary = StaticCatalogProvider(mode="spicy")
    provider = FallbackCatalogProvider(primary, StaticCatalogProvider(mode="standard"))
    assert len(provider.fetch_catalog()) == 28


def test_build_static_provider():
    provider = build_catalog_provider({"catalog": {"source": "static", "mode": "standard"}})
    assert isinstance(provider, StaticCatalogProvider)
    assert len(provider.fetch_catalog()) == 9


def test_build_auto_provider_without_credentials(monkeypatch):
    monkeypatch.delenv("SUPABASE_URL", raising=False)
    monkeypatch.delenv("SUPABASE_ANON_KEY", raising=False)
    provider = build_catalog_provider({"catalog": {"source": "auto"}})
    assert isinstance(provider, StaticCatalogProvider)


def test_build_auto_provider_with_credentials(monkeypatch):
    monkeypatch.setenv("SUPABASE_URL", "https://example.supabase.co")
    monkeypatch.setenv("SUPABASE_ANON_KEY", "key")
    provider = build_catalog_provider({"catalog": {"source": "auto"}})
    assert isinstance(provider, FallbackCatalogProvider)
    assert isinstance(provider.primary, RemoteCatalogProvider)


def test_build_remote_provider_requires_credentials(monkeypatch):
    monkeypatch.delenv("SUPABASE_URL", raising=False)
    with pytest.raises(ValueError):
        build_catalog_provider({"catalog": {"source": "remote"}})


def test_build_unknown_source_raises():
    with pytest.raises(ValueError):
        build_catalog_provider({}, source="database")
