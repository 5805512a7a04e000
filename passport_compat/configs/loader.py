"""
Configuration loading and validation.

This module handles loading of YAML configuration files and
validates that all required fields are present.
"""

import logging
from pathlib import Path
from typing import Dict, Any, List

import yaml

logger = logging.getLogger(__name__)

REQUIRED_SECTIONS = ["global", "catalog", "answers", "categories", "scoring"]
REPORT_CATEGORIES = ["communication", "boundaries", "intimacy"]


def load_config(filepath: str) -> Dict[str, Any]:
    """
    Load configuration from YAML file.

    Args:
        filepath: Path to the YAML configuration file

    Returns:
        Configuration dictionary

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config file is empty
        yaml.YAMLError: If YAML is invalid
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {filepath}")

    logger.info(f"Loading configuration from {filepath}")
    with open(filepath, "r") as f:
        config = yaml.safe_load(f)

    if config is None:
        raise ValueError(f"Configuration file is empty: {filepath}")

    return config


def validate_config(config: Dict[str, Any]) -> List[str]:
    """
    Validate configuration and return list of warnings/errors.

    Args:
        config: Configuration dictionary

    Returns:
        List of warning/error messages (empty if valid)
    """
    issues = []

    for section in REQUIRED_SECTIONS:
        if section not in config:
            issues.append(f"Missing required section: {section}")

    # Catalog source and mode
    if "catalog" in config:
        catalog = config["catalog"] or {}
        source = catalog.get("source", "static")
        if source not in ["static", "remote", "auto"]:
            issues.append(f"Unknown catalog.source: {source}")
        mode = catalog.get("mode", "all")
        if mode not in ["standard", "spicy", "all"]:
            issues.append(f"Unknown catalog.mode: {mode}")

    # Answer source
    if "answers" in config:
        answers = config["answers"] or {}
        source = answers.get("source", "csv")
        if source not in ["csv", "rest"]:
            issues.append(f"Unknown answers.source: {source}")
        if source == "csv" and "path" not in answers:
            issues.append("Missing answers.path for csv answer source")

    # Category targets must be named report categories
    if "categories" in config:
        for raw, target in (config["categories"] or {}).items():
            if str(target).strip().lower() not in REPORT_CATEGORIES:
                issues.append(f"Category '{raw}' maps to unknown report category: {target}")

    # Insight thresholds
    if "scoring" in config:
        scoring = config["scoring"] or {}
        strength = scoring.get("strength_threshold", 80)
        opportunity = scoring.get("opportunity_threshold", 40)
        if not 0 <= opportunity < strength <= 100:
            issues.append(
                f"Thresholds must satisfy 0 <= opportunity < strength <= 100: {opportunity}, {strength}"
            )
        if scoring.get("scale_step", 20) <= 0:
            issues.append(f"scoring.scale_step must be positive: {scoring.get('scale_step')}")

    return issues


def get_config_value(config: Dict[str, Any], path: str, default: Any = None) -> Any:
    """
    Get a nested configuration value using dot notation.

    Args:
        config: Configuration dictionary
        path: Dot-separated path (e.g., "scoring.strength_threshold")
        default: Default value if path doesn't exist

    Returns:
        Configuration value or default
    """
    keys = path.split(".")
    value = config
    for key in keys:
        if isinstance(value, dict) and key in value:
            value = value[key]
        else:
            return default
    return value
