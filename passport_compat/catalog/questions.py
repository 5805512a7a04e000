"""
Static passport question catalog.

Two question sets are shipped:
- Standard (ids 101-109): communication, physical intimacy, boundaries
- Spicy (ids 1-28): desires, fantasies, kinks, mood, exploration, feedback

A smaller default set is used when the hosted catalog is unavailable.
"""

import logging
from typing import List, Optional

from ..scoring.schema import Question, QuestionMode, QuestionType

logger = logging.getLogger(__name__)

EXPLORATION_OPTIONS = ["Not into it", "Into it", "Would be into it if my partner is"]

VALID_MODES = ["standard", "spicy", "all"]

_STANDARD_QUESTIONS = [
    # Communication
    (101, "How comfortable are you discussing your desires and boundaries with your partner?",
     QuestionType.SCALE, None, "communication"),
    (102, "How do you prefer to give feedback during intimate moments?",
     QuestionType.MULTIPLE_CHOICE,
     ["Direct verbal guidance", "Non-verbal cues", "Showing what I like",
      "Discussing afterward", "A mix of approaches"],
     "communication"),
    (103, "What helps you feel safe expressing your intimate needs?",
     QuestionType.OPEN_ENDED, None, "communication"),

    # Physical intimacy
    (104, "How important is physical intimacy to you in your relationship?",
     QuestionType.SCALE, None, "physical"),
    (105, "What forms of non-sexual touch help you feel connected?",
     QuestionType.MULTIPLE_CHOICE,
     ["Holding hands", "Cuddling", "Massage", "Playful touches", "Embracing"],
     "physical"),
    (106, "How often would your ideal frequency of sexual intimacy be?",
     QuestionType.MULTIPLE_CHOICE,
     ["Multiple times daily", "Daily", "Several times weekly", "Once a week", "A few times monthly"],
     "physical"),

    # Boundaries & consent
    (107, "How comfortable are you expressing when something doesn't feel right?",
     QuestionType.SCALE, None, "boundaries"),
    (108, "What's your preferred way to check in about consent during intimate moments?",
     QuestionType.MULTIPLE_CHOICE,
     ["Verbal check-ins", "Established safe words", "Non-verbal signals",
      "Paying attention to body language", "Prior discussion of boundaries"],
     "boundaries"),
    (109, "What boundaries are absolute must-respects for you?",
     QuestionType.OPEN_ENDED, None, "boundaries"),
]

_SPICY_QUESTIONS = [
    # Desires & turn-ons
    (1, "What's the hottest thing your partner could whisper in your ear to turn you on?",
     QuestionType.OPEN_ENDED, None, "desires"),
    (2, "How much do you enjoy teasing or being teased before things heat up?",
     QuestionType.SCALE, None, "desires"),
    (3, "What kind of touch drives you wild?",
     QuestionType.MULTIPLE_CHOICE,
     ["Slow and sensual", "Rough and passionate", "Light and teasing",
      "Firm and commanding", "Surprise me"],
     "desires"),
    (4, "What's a secret turn-on you've never shared?",
     QuestionType.OPEN_ENDED, None, "desires"),

    # Fantasies & role-play
    (5, "What fantasy scenario would you love to act out with your partner?",
     QuestionType.OPEN_ENDED, None, "fantasies"),
    (6, "Which role-play idea excites you most?",
     QuestionType.MULTIPLE_CHOICE,
     ["Strangers meeting at a bar", "Boss and employee", "Teacher and student",
      "Superhero and villain", "A wild, slutty hookup"],
     "fantasies"),
    (7, "How comfortable are you with dressing up or using props for a fantasy?",
     QuestionType.SCALE, None, "fantasies"),
    (8, "What's a risky or forbidden place you'd fantasize about getting it on?",
     QuestionType.OPEN_ENDED, None, "fantasies"),

    # Kinks & experiments
    (9, "How open are you to trying a new kink or toy in the bedroom?",
     QuestionType.SCALE, None, "kinks"),
    (10, "Which spicy experiment sounds most tempting?",
     QuestionType.MULTIPLE_CHOICE,
     ["Blindfolds or restraints", "Temperature play (ice/hot wax)",
      "Spanking or light dominance", "A daring new position",
      "Enthusiastic finishing moves (e.g., facial)"],
     "kinks"),
    (11, "What's a boundary you're curious to push, even just a little?",
     QuestionType.OPEN_ENDED, None, "kinks"),
    (12, "How much do you enjoy taking control vs. letting your partner lead?",
     QuestionType.SCALE, None, "kinks"),

    # Mood & atmosphere
    (13, "What kind of vibe gets you in the mood for a wild night?",
     QuestionType.MULTIPLE_CHOICE,
     ["Dark and sultry", "Playful and flirty", "Romantic and slow-burn",
      "Adventurous and spontaneous", "Kinky and intense"],
     "mood"),
    (14, "What scent or sound would make the bedroom feel irresistible?",
     QuestionType.OPEN_ENDED, None, "mood"),
    (15, "How much does lingerie, costumes, or special outfits heat things up for you?",
     QuestionType.SCALE, None, "mood"),
    (16, "What's the perfect way to start a steamy encounter?",
     QuestionType.MULTIPLE_CHOICE,
     ["A seductive massage", "A slow striptease", "A flirty game",
      "A bold command", "A surprise pounce"],
     "mood"),

    # Exploration
    (17, "Trying blindfolds or light bondage:",
     QuestionType.MULTIPLE_CHOICE, EXPLORATION_OPTIONS, "exploration"),
    (18, "Acting out a 'slutty' fantasy with lots of enthusiasm and bold outfits:",
     QuestionType.MULTIPLE_CHOICE, EXPLORATION_OPTIONS, "exploration"),
    (19, "Incorporating a vibrator or sex toy:",
     QuestionType.MULTIPLE_CHOICE, EXPLORATION_OPTIONS, "exploration"),
    (20, "Experimenting with a spanking paddle:",
     QuestionType.MULTIPLE_CHOICE, EXPLORATION_OPTIONS, "exploration"),
    (21, "Role-playing a naughty scenario (e.g., strangers or power dynamics):",
     QuestionType.MULTIPLE_CHOICE, EXPLORATION_OPTIONS, "exploration"),
    (22, "Getting frisky in a semi-public place (e.g., car, secluded park):",
     QuestionType.MULTIPLE_CHOICE, EXPLORATION_OPTIONS, "exploration"),

    # Feedback & refinement
    (23, "What was the sexiest moment from our last time together?",
     QuestionType.OPEN_ENDED, None, "feedback"),
    (24, "How spicy do you want our next encounter to be?",
     QuestionType.SCALE, None, "feedback"),
    (25, "What could we tweak to make things even hotter next time?",
     QuestionType.OPEN_ENDED, None, "feedback"),
    (26, "Which past suggestion did you enjoy most?",
     QuestionType.OPEN_ENDED, None, "feedback"),
    (27, "What would you like more of in our sex life?",
     QuestionType.OPEN_ENDED, None, "feedback"),
    (28, "What would you like less of in our sex life?",
     QuestionType.OPEN_ENDED, None, "feedback"),
]

_DEFAULT_QUESTIONS = [
    (1, "How comfortable are you discussing your feelings with your partner?",
     QuestionType.SCALE, None, ""),
    (2, "What are your preferred ways to receive affection?",
     QuestionType.MULTIPLE_CHOICE,
     ["Physical touch", "Words of affirmation", "Quality time", "Gifts", "Acts of service"],
     ""),
    (3, "What boundaries are important for you to maintain in a relationship?",
     QuestionType.OPEN_ENDED, None, ""),
    (4, "How important is physical intimacy to you in a relationship?",
     QuestionType.SCALE, None, ""),
    (5, "What activities help you feel most connected to your partner?",
     QuestionType.OPEN_ENDED, None, ""),
]

STANDARD_CATEGORY_LABELS = {
    "communication": "Communication",
    "physical": "Physical Intimacy",
    "emotional": "Emotional Connection",
    "boundaries": "Boundaries & Consent",
    "values": "Relationship Values",
}

SPICY_CATEGORY_LABELS = {
    "desires": "Desires & Turn-Ons",
    "fantasies": "Fantasies & Role-Play",
    "kinks": "Kinks & Experiments",
    "mood": "Mood & Atmosphere",
    "exploration": "Sexual Exploration",
    "feedback": "Feedback & Refinement",
}


def _build(rows, mode: QuestionMode) -> List[Question]:
    return [
        Question(
            id=qid,
            text=text,
            type=qtype,
            options=list(options) if options is not None else None,
            category=category,
            mode=mode,
        )
        for qid, text, qtype, options, category in rows
    ]


def get_standard_passport_questions() -> List[Question]:
    """Return the standard relationship-focused questions."""
    return _build(_STANDARD_QUESTIONS, QuestionMode.STANDARD)


def get_spicy_passport_questions() -> List[Question]:
    """Return the spicy questions."""
    return _build(_SPICY_QUESTIONS, QuestionMode.SPICY)


def get_default_passport_questions() -> List[Question]:
    """Return the fallback question set used when the hosted catalog is unavailable."""
    return _build(_DEFAULT_QUESTIONS, QuestionMode.STANDARD)


def get_passport_questions(mode: str = "all") -> List[Question]:
    """
    Get passport questions filtered by mode.

    Args:
        mode: "standard", "spicy" or "all"

    Returns:
        Standard questions first, then spicy ones

    Raises:
        ValueError: If mode is unknown
    """
    mode = mode or "all"
    if mode not in VALID_MODES:
        raise ValueError(f"Unknown question mode: {mode}. Expected one of {VALID_MODES}")

    logger.debug(f"Getting passport questions with mode: {mode}")
    if mode == "standard":
        return get_standard_passport_questions()
    if mode == "spicy":
        return get_spicy_passport_questions()
    return get_standard_passport_questions() + get_spicy_passport_questions()


def get_category_label(category: str, mode: str = "standard") -> str:
    """
    Get the display label for a category.

    Unknown categories are returned capitalized.
    """
    labels = SPICY_CATEGORY_LABELS if mode == "spicy" else STANDARD_CATEGORY_LABELS
    if category in labels:
        return labels[category]
    return category[:1].upper() + category[1:]


def get_questions_by_category(questions: List[Question], category: str) -> List[Question]:
    """Filter questions to one category."""
    return [q for q in questions if q.category == category]


def get_categories(questions: List[Question], mode: Optional[str] = None) -> List[str]:
    """
    Get the distinct categories of a question list, in first-seen order.

    Args:
        questions: Questions to inspect
        mode: Optional "standard" or "spicy" filter
    """
    if mode:
        questions = [q for q in questions if q.mode.value == mode]

    categories = []
    for q in questions:
        if q.category not in categories:
            categories.append(q.category)
    return categories
