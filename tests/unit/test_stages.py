"""Tests for status to stage resolution."""

import pytest

from helpers import stages
from helpers.stages import Stage


class TestResolveStatus:
    @pytest.mark.parametrize("stage", list(Stage))
    def test_canonical_phrases(self, stage):
        resolved = stages.resolve_status(stages.status_for(stage))
        assert resolved.stage is stage
        assert resolved.recognized

    def test_case_and_whitespace(self):
        resolved = stages.resolve_status("  awaiting QUARTERLY vote ")
        assert resolved.stage is Stage.QUARTERLY_VOTE
        assert resolved.recognized

    def test_legacy_alias(self):
        assert stages.resolve_status("Aguardando votacao anual").stage is Stage.ANNUAL_VOTE

    def test_unknown_defaults_to_completed_flagged(self):
        resolved = stages.resolve_status("Rejected by board")
        assert resolved.stage is Stage.COMPLETED
        assert not resolved.recognized

    def test_empty_is_unrecognized(self):
        assert not stages.resolve_status(None).recognized
        assert not stages.resolve_status("").recognized

    def test_configurable_fallback(self):
        resolved = stages.resolve_status("???", fallback=Stage.SESMT)
        assert resolved.stage is Stage.SESMT

    def test_stage_index(self):
        assert stages.stage_index("Awaiting Validation") == 2


class TestBuildStages:
    def test_six_ordered_steps(self):
        steps = stages.build_stages("Awaiting SESMT Evaluation")
        assert [s.key for s in steps] == [
            "sesmt",
            "management",
            "validation",
            "quarterly_vote",
            "annual_vote",
            "completed",
        ]

    def test_flags_at_quarterly(self):
        steps = stages.build_stages("Awaiting Quarterly Vote")
        assert [s.completed for s in steps] == [True, True, True, False, False, False]
        assert [s.active for s in steps] == [False, False, False, True, False, False]

    def test_completed_is_active_last(self):
        steps = stages.build_stages("Completed")
        assert steps[-1].active
        assert all(s.completed for s in steps[:-1])


class TestStageHelpers:
    def test_from_key(self):
        assert Stage.from_key(" Annual_Vote ") is Stage.ANNUAL_VOTE

    def test_from_key_unknown(self):
        with pytest.raises(ValueError):
            Stage.from_key("archived")

    def test_status_phrases_include_alias(self):
        phrases = stages.status_phrases(Stage.QUARTERLY_VOTE)
        assert "awaiting quarterly vote" in phrases
        assert "aguardando votacao trimestral" in phrases
