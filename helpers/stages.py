"""Pipeline stages derived from free-text practice status."""

from dataclasses import dataclass
from enum import IntEnum


class Stage(IntEnum):
    """Ordered governance pipeline positions."""

    SESMT = 0
    MANAGEMENT = 1
    VALIDATION = 2
    QUARTERLY_VOTE = 3
    ANNUAL_VOTE = 4
    COMPLETED = 5

    @property
    def key(self) -> str:
        return self.name.lower()

    @property
    def label(self) -> str:
        return STAGE_LABELS[self]

    @classmethod
    def from_key(cls, key: str) -> "Stage":
        try:
            return cls[key.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown stage key: {key}") from None


STAGE_LABELS: dict[Stage, str] = {
    Stage.SESMT: "SESMT",
    Stage.MANAGEMENT: "Management",
    Stage.VALIDATION: "Validation",
    Stage.QUARTERLY_VOTE: "Quarterly Vote",
    Stage.ANNUAL_VOTE: "Annual Vote",
    Stage.COMPLETED: "Completed",
}

# Canonical status text written by the workflow for each open stage.
CANONICAL_STATUS: dict[Stage, str] = {
    Stage.SESMT: "Awaiting SESMT Evaluation",
    Stage.MANAGEMENT: "Awaiting Management Evaluation",
    Stage.VALIDATION: "Awaiting Validation",
    Stage.QUARTERLY_VOTE: "Awaiting Quarterly Vote",
    Stage.ANNUAL_VOTE: "Awaiting Annual Vote",
    Stage.COMPLETED: "Completed",
}

# Legacy records carry the Portuguese phrases.
STATUS_ALIASES: dict[Stage, tuple[str, ...]] = {
    Stage.SESMT: ("aguardando avaliacao do sesmt",),
    Stage.MANAGEMENT: ("aguardando avaliacao da gestao",),
    Stage.VALIDATION: ("aguardando validacao",),
    Stage.QUARTERLY_VOTE: ("aguardando votacao trimestral",),
    Stage.ANNUAL_VOTE: ("aguardando votacao anual",),
    Stage.COMPLETED: ("concluida",),
}

_PHRASES: dict[str, Stage] = {}
for _stage, _text in CANONICAL_STATUS.items():
    _PHRASES[_text.casefold()] = _stage
for _stage, _aliases in STATUS_ALIASES.items():
    for _alias in _aliases:
        _PHRASES[_alias] = _stage


@dataclass(frozen=True)
class ResolvedStatus:
    """Stage for a status text, and whether the text was a known phrase."""

    stage: Stage
    recognized: bool


@dataclass(frozen=True)
class StageStep:
    """One entry of the stage-progress view."""

    key: str
    name: str
    active: bool
    completed: bool


def normalize_status(status: str | None) -> str:
    return (status or "").strip().casefold()


def resolve_status(status: str | None, fallback: Stage = Stage.COMPLETED) -> ResolvedStatus:
    """Map status text to a stage; unknown text resolves to `fallback`, flagged."""
    stage = _PHRASES.get(normalize_status(status))
    if stage is None:
        return ResolvedStatus(stage=fallback, recognized=False)
    return ResolvedStatus(stage=stage, recognized=True)


def stage_index(status: str | None, fallback: Stage = Stage.COMPLETED) -> int:
    return int(resolve_status(status, fallback).stage)


def build_stages(status: str | None, fallback: Stage = Stage.COMPLETED) -> list[StageStep]:
    """Six ordered steps; positions before the current stage are completed."""
    current = stage_index(status, fallback)
    return [
        StageStep(
            key=stage.key,
            name=stage.label,
            active=stage == current,
            completed=stage < current,
        )
        for stage in Stage
    ]


def status_for(stage: Stage) -> str:
    return CANONICAL_STATUS[stage]


def status_phrases(stage: Stage) -> list[str]:
    """Every normalized phrase that resolves to `stage`."""
    return sorted(text for text, s in _PHRASES.items() if s == stage)
