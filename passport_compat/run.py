"""
Command-line entrypoint for comparing two partners' passports.

Usage:
    python -m passport_compat.run --config configs/config.yaml --user-id alex --partner-id sam

The run performs the following steps:
1. Load configuration (and .env secrets)
2. Resolve the question catalog
3. Fetch both partners' answers
4. Report passport completion
5. Compare answers and write the compatibility report
"""

import argparse
import copy
import json
import logging
import sys
from pathlib import Path
from typing import Dict, Any, Optional

from dotenv import load_dotenv

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def setup_logging(log_level: str) -> None:
    """Configure logging level from config."""
    level = getattr(logging, log_level.upper(), logging.INFO)
    logging.getLogger().setLevel(level)


def compare_partners(
    config: Dict[str, Any],
    user_id: str,
    partner_id: str,
    answers_path: Optional[str] = None,
    catalog_source: Optional[str] = None,
    mode: Optional[str] = None
) -> Dict[str, Any]:
    """
    Compare two partners' passports.

    Args:
        config: Configuration dictionary
        user_id: The user whose perspective the insights are written from
        partner_id: The user's partner
        answers_path: CSV answer file overriding answers.path
        catalog_source: Overrides catalog.source ("static", "remote" or "auto")
        mode: Overrides catalog.mode ("standard", "spicy" or "all")

    Returns:
        Dictionary with the report (None when there is not enough data)
        and both partners' passport completion
    """
    from .answers import build_answer_store, fetch_answers_safely, calculate_passport_completion
    from .catalog import build_catalog_provider
    from .scoring import ScoringConfig, compare_passport_answers, mapping_from_config

    if mode is not None:
        config = copy.deepcopy(config)
        config["catalog"] = dict(config.get("catalog") or {}, mode=mode)

    # =========================================================================
    # 1. Question catalog
    # =========================================================================
    provider = build_catalog_provider(config, source=catalog_source)
    catalog = provider.fetch_catalog()
    logger.info(f"Question catalog: {len(catalog)} questions ({type(provider).__name__})")

    # =========================================================================
    # 2. Answers
    # =========================================================================
    store = build_answer_store(config, path=answers_path)
    user_answers = fetch_answers_safely(store, user_id)
    partner_answers = fetch_answers_safely(store, partner_id)
    logger.info(f"Answers: {user_id}={len(user_answers)}, {partner_id}={len(partner_answers)}")

    completion = {
        user_id: calculate_passport_completion(user_answers, len(catalog)).to_dict(),
        partner_id: calculate_passport_completion(partner_answers, len(catalog)).to_dict(),
    }
    for uid, stats in completion.items():
        logger.info(
            f"  {uid}: {stats['completionPercentage']}% complete "
            f"({stats['answeredQuestions']}/{stats['totalQuestions']})"
        )

    # =========================================================================
    # 3. Compare
    # =========================================================================
    scoring_config = ScoringConfig.from_config(config)
    scoring_config.validate()
    report = compare_passport_answers(
        user_answers,
        partner_answers,
        catalog,
        category_mapping=mapping_from_config(config),
        config=scoring_config,
    )

    return {
        "success": True,
        "user_id": user_id,
        "partner_id": partner_id,
        "catalog_size": len(catalog),
        "completion": completion,
        "report": report.to_dict() if report is not None else None,
    }


def log_report(report: Optional[Dict[str, Any]]) -> None:
    """Log a human-readable summary of a report dictionary."""
    if report is None:
        logger.warning("Not enough data yet: both partners need to complete their passports")
        return

    logger.info(f"  Overall:       {report['overall']}%")
    logger.info(f"  Communication: {report['communication']}%")
    logger.info(f"  Boundaries:    {report['boundaries']}%")
    logger.info(f"  Intimacy:      {report['intimacy']}%")

    insights = report["insights"]
    logger.info("\nStrengths:")
    for s in insights["strengths"]:
        logger.info(f"  + {s}")
    logger.info("\nOpportunities:")
    for o in insights["opportunities"]:
        logger.info(f"  - {o}")
    logger.info("\nQuestion insights:")
    for q in insights["questionSpecific"]:
        logger.info(f"  [{q['questionId']}] {q['text']}")
        logger.info(f"      {q['insight']}")


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Compare two partners' passport answers"
    )
    parser.add_argument(
        "--config",
        type=str,
        default="configs/config.yaml",
        help="Path to configuration file"
    )
    parser.add_argument("--user-id", type=str, required=True, help="User id")
    parser.add_argument("--partner-id", type=str, required=True, help="Partner user id")
    parser.add_argument(
        "--answers",
        type=str,
        default=None,
        help="CSV answer file (overrides config)"
    )
    parser.add_argument(
        "--catalog-source",
        type=str,
        choices=["static", "remote", "auto"],
        default=None,
        help="Question catalog source (overrides config)"
    )
    parser.add_argument(
        "--mode",
        type=str,
        choices=["standard", "spicy", "all"],
        default=None,
        help="Question set (overrides config)"
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Write the report JSON to this path"
    )

    args = parser.parse_args(argv)

    try:
        from .configs import load_config, validate_config

        load_dotenv()

        logger.info("=" * 60)
        logger.info("PASSPORT COMPATIBILITY")
        logger.info("=" * 60)

        config = load_config(args.config)
        for issue in validate_config(config):
            logger.warning(f"Config issue: {issue}")
        setup_logging((config.get("global") or {}).get("log_level", "INFO"))

        result = compare_partners(
            config,
            args.user_id,
            args.partner_id,
            answers_path=args.answers,
            catalog_source=args.catalog_source,
            mode=args.mode,
        )

        logger.info("\n" + "=" * 60)
        logger.info(f"REPORT: {args.user_id} & {args.partner_id}")
        logger.info("=" * 60)
        log_report(result["report"])

        if args.output:
            output_path = Path(args.output)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(output_path, "w") as f:
                json.dump(result["report"], f, indent=2)
            logger.info(f"\nSaved report to {output_path}")

        return 0
    except Exception as e:
        logger.exception(f"Comparison failed with error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
