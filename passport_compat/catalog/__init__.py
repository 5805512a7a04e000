"""Question catalog module: static questions, providers and ordering."""

from .questions import (
    get_passport_questions,
    get_standard_passport_questions,
    get_spicy_passport_questions,
    get_default_passport_questions,
    get_category_label,
    get_questions_by_category,
    get_categories,
)
from .ordering import (
    order_questions_by_category,
    order_questions_by_custom_order,
    get_questions_in_recommended_order,
)
from .providers import (
    QuestionCatalogProvider,
    StaticCatalogProvider,
    RemoteCatalogProvider,
    FallbackCatalogProvider,
    build_catalog_provider,
)

__all__ = [
    "get_passport_questions",
    "get_standard_passport_questions",
    "get_spicy_passport_questions",
    "get_default_passport_questions",
    "get_category_label",
    "get_questions_by_category",
    "get_categories",
    "order_questions_by_category",
    "order_questions_by_custom_order",
    "get_questions_in_recommended_order",
    "QuestionCatalogProvider",
    "StaticCatalogProvider",
    "RemoteCatalogProvider",
    "FallbackCatalogProvider",
    "build_catalog_provider",
]
