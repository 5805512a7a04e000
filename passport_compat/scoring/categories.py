"""
Mapping from free-form question categories to report categories.

Catalog categories are free-form strings ("communication", "physical",
"desires", ...). Only three of the report buckets are named; a category
that maps to none of them is unclassified and contributes to the overall
score only.
"""

from typing import Dict, Any, Optional

from .schema import ReportCategory

DEFAULT_CATEGORY_MAPPING: Dict[str, ReportCategory] = {
    "communication": ReportCategory.COMMUNICATION,
    "boundaries": ReportCategory.BOUNDARIES,
    "physical": ReportCategory.INTIMACY,
    "intimacy": ReportCategory.INTIMACY,
}


def _normalize(category: Optional[str]) -> str:
    return (category or "").strip().lower()


def normalize_mapping(mapping: Dict[str, ReportCategory]) -> Dict[str, ReportCategory]:
    """Lowercase and strip the raw-category keys of a caller-supplied mapping."""
    return {_normalize(raw): target for raw, target in mapping.items()}


def map_category(
    category: Optional[str],
    mapping: Optional[Dict[str, ReportCategory]] = None
) -> Optional[ReportCategory]:
    """
    Map a raw question category to a named report category.

    Args:
        category: Raw category string from the catalog
        mapping: Raw category -> ReportCategory (default: DEFAULT_CATEGORY_MAPPING)

    Returns:
        COMMUNICATION, BOUNDARIES or INTIMACY, or None when unclassified
    """
    if mapping is None:
        mapping = DEFAULT_CATEGORY_MAPPING

    target = mapping.get(_normalize(category))
    # OVERALL is not a named bucket
    if target is None or target == ReportCategory.OVERALL:
        return None
    return target


def mapping_from_config(config: Dict[str, Any]) -> Dict[str, ReportCategory]:
    """
    Build a category mapping from the "categories" config section.

    Example section:
        categories:
          communication: communication
          physical: intimacy

    Args:
        config: Main configuration dictionary

    Returns:
        Mapping of normalized raw category -> ReportCategory

    Raises:
        ValueError: If a target is not communication, boundaries or intimacy
    """
    section = config.get("categories")
    if not section:
        return dict(DEFAULT_CATEGORY_MAPPING)

    mapping = {}
    for raw, target in section.items():
        try:
            report_category = ReportCategory(_normalize(target))
        except ValueError:
            raise ValueError(f"Unknown report category for '{raw}': {target}")
        if report_category == ReportCategory.OVERALL:
            raise ValueError(f"Category '{raw}' cannot map to overall")
        mapping[_normalize(raw)] = report_category
    return mapping
