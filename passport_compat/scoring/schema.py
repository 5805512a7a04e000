"""
Data structures for passport answers, questions and compatibility reports.

A passport is the questionnaire each partner fills out. Questions come from
a catalog (static or remote), answers come from an answer store, and the
compatibility report is the value produced by comparing two partners.

Question types:
- scale: integer rating 1-5
- multipleChoice: one option string
- openEnded: free text
"""

from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List, Union
from enum import Enum


class QuestionType(Enum):
    """Passport question types."""
    SCALE = "scale"
    MULTIPLE_CHOICE = "multipleChoice"
    OPEN_ENDED = "openEnded"


class QuestionMode(Enum):
    """Question set a question belongs to."""
    STANDARD = "standard"
    SPICY = "spicy"


class ReportCategory(Enum):
    """Score buckets of a compatibility report."""
    OVERALL = "overall"
    COMMUNICATION = "communication"
    BOUNDARIES = "boundaries"
    INTIMACY = "intimacy"


# Named buckets, in the order category insights are emitted
NAMED_CATEGORIES = [
    ReportCategory.COMMUNICATION,
    ReportCategory.BOUNDARIES,
    ReportCategory.INTIMACY,
]


@dataclass
class Question:
    """
    Static catalog entry.

    Attributes:
        id: Unique question identifier
        text: Display text, quoted in insight strings
        type: QuestionType of the question
        category: Free-form category (communication, physical, desires, ...)
        options: Choices for multipleChoice questions
        mode: Question set (standard or spicy)
    """
    id: int
    text: str
    type: QuestionType
    category: str = ""
    options: Optional[List[str]] = None
    mode: QuestionMode = QuestionMode.STANDARD

    def __post_init__(self):
        """Convert string inputs to enums if needed."""
        if isinstance(self.type, str):
            self.type = QuestionType(self.type)
        if isinstance(self.mode, str):
            self.mode = QuestionMode(self.mode)
        self.id = int(self.id)
        if self.category is None:
            self.category = ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary in catalog row format."""
        return {
            "id": self.id,
            "text": self.text,
            "type": self.type.value,
            "options": list(self.options) if self.options is not None else None,
            "category": self.category,
            "questionMode": self.mode.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Question":
        """Create from a catalog row."""
        return cls(
            id=data["id"],
            text=data.get("text", ""),
            type=data["type"],
            category=data.get("category") or "",
            options=data.get("options"),
            mode=data.get("questionMode") or data.get("mode") or QuestionMode.STANDARD,
        )


@dataclass
class Answer:
    """
    One user's response to one question.

    Attributes:
        question_id: References Question.id
        value: Integer 1-5 for scale questions, a string otherwise
    """
    question_id: int
    value: Union[int, str]

    def __post_init__(self):
        self.question_id = int(self.question_id)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {"question_id": self.question_id, "answer": self.value}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Answer":
        """
        Create from a store row or API payload.

        Accepts both snake_case and camelCase question id keys, and either
        "answer" (store rows) or "value" for the answer itself.
        """
        if "question_id" in data:
            question_id = data["question_id"]
        else:
            question_id = data["questionId"]
        value = data["answer"] if "answer" in data else data["value"]
        return cls(question_id=question_id, value=value)


@dataclass
class QuestionInsight:
    """Insight attached to a single question."""
    question_id: int
    text: str
    insight: str

    def to_dict(self) -> Dict[str, Any]:
        return {"questionId": self.question_id, "text": self.text, "insight": self.insight}


@dataclass
class CompatibilityInsights:
    """Qualitative insights, in generation order."""
    strengths: List[str] = field(default_factory=list)
    opportunities: List[str] = field(default_factory=list)
    question_specific: List[QuestionInsight] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "strengths": list(self.strengths),
            "opportunities": list(self.opportunities),
            "questionSpecific": [q.to_dict() for q in self.question_specific],
        }


@dataclass
class CompatibilityReport:
    """
    Result of comparing two partners' passports.

    Attributes:
        overall: Average of all jointly answered question scores [0, 100]
        communication: Average over communication questions [0, 100]
        boundaries: Average over boundaries questions [0, 100]
        intimacy: Average over intimacy questions [0, 100]
        insights: Strengths, opportunities and per-question insights
    """
    overall: int = 0
    communication: int = 0
    boundaries: int = 0
    intimacy: int = 0
    insights: CompatibilityInsights = field(default_factory=CompatibilityInsights)

    def get_score(self, category: ReportCategory) -> int:
        """Return the score for a report category."""
        return getattr(self, category.value)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the API response shape."""
        return {
            "overall": self.overall,
            "communication": self.communication,
            "boundaries": self.boundaries,
            "intimacy": self.intimacy,
            "insights": self.insights.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CompatibilityReport":
        """Create from the API response shape."""
        insights = data.get("insights", {})
        return cls(
            overall=data["overall"],
            communication=data["communication"],
            boundaries=data["boundaries"],
            intimacy=data["intimacy"],
            insights=CompatibilityInsights(
                strengths=list(insights.get("strengths", [])),
                opportunities=list(insights.get("opportunities", [])),
                question_specific=[
                    QuestionInsight(
                        question_id=q["questionId"],
                        text=q["text"],
                        insight=q["insight"],
                    )
                    for q in insights.get("questionSpecific", [])
                ],
            ),
        )
