"""Weighted scoring of the fixed five-question ballot."""

from enum import Enum
from typing import Any

from app.errors import InvalidAnswerError


class Level(str, Enum):
    """Ordinal answer levels."""

    INSUFFICIENT = "insufficient"
    SATISFACTORY = "satisfactory"
    GOOD = "good"
    VERY_GOOD = "very good"
    EXCELLENT = "excellent"

    @property
    def points(self) -> int:
        return LEVEL_POINTS[self]


LEVEL_POINTS: dict[Level, int] = {
    Level.INSUFFICIENT: 1,
    Level.SATISFACTORY: 2,
    Level.GOOD: 3,
    Level.VERY_GOOD: 4,
    Level.EXCELLENT: 5,
}

QUESTIONS = ("q1", "q2", "q3", "q4", "q5")

WEIGHTS: dict[str, int] = {
    "q1": 1,
    "q2": 3,
    "q3": 2,
    "q4": 5,
    "q5": 4,
}

MIN_SCORE = sum(WEIGHTS.values()) * LEVEL_POINTS[Level.INSUFFICIENT]
MAX_SCORE = sum(WEIGHTS.values()) * LEVEL_POINTS[Level.EXCELLENT]


def question_id(key: Any) -> str | None:
    """Canonical question id for 'q3', '3' or 3; None if not a known question."""
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        key = f"q{key}"
    if not isinstance(key, str):
        return None
    key = key.strip().lower()
    if key.isdigit():
        key = f"q{key}"
    return key if key in WEIGHTS else None


def parse_level(value: Any) -> Level | None:
    """Level for an answer value, tolerant to case and surrounding spaces."""
    if isinstance(value, Level):
        return value
    if not isinstance(value, str):
        return None
    try:
        return Level(" ".join(value.split()).casefold())
    except ValueError:
        return None


def normalize_answers(answers: Any) -> dict[str, Level]:
    """Validate a ballot and return {question: level} for all five questions.

    Raises InvalidAnswerError listing every missing, unknown or invalid entry.
    """
    if not isinstance(answers, dict):
        raise InvalidAnswerError("Answers must be a mapping of question to level")

    problems: dict[str, str] = {}
    result: dict[str, Level] = {}

    for key, value in answers.items():
        qid = question_id(key)
        if qid is None:
            problems[str(key)] = "unknown question"
            continue
        level = parse_level(value)
        if level is None:
            problems[qid] = "invalid level"
            continue
        result[qid] = level

    for qid in QUESTIONS:
        if qid not in result and qid not in problems:
            problems[qid] = "missing"

    if problems:
        raise InvalidAnswerError(details=problems)

    return {qid: result[qid] for qid in QUESTIONS}


def score(answers: Any) -> int:
    """Sum of level points times question weight. Always within [15, 75]."""
    levels = normalize_answers(answers)
    return sum(levels[qid].points * WEIGHTS[qid] for qid in QUESTIONS)


def raw_answers(answers: Any) -> dict[str, str]:
    """Canonical, JSON-ready form of a valid ballot."""
    return {qid: level.value for qid, level in normalize_answers(answers).items()}
