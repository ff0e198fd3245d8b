"""Practice domain models."""

from app.models.practice.entities import (
    EvaluationStep,
    Practice,
    PracticeDetail,
    QuestionItem,
    RoundParticipation,
    StageStepView,
    StrategicView,
    VotingContext,
)
from app.models.practice.practice import PRACTICE_DDL, PRACTICE_INDEXES

__all__ = [
    "PRACTICE_DDL",
    "PRACTICE_INDEXES",
    "EvaluationStep",
    "Practice",
    "PracticeDetail",
    "QuestionItem",
    "RoundParticipation",
    "StageStepView",
    "StrategicView",
    "VotingContext",
]
