"""
Unit tests for the pipeline result data models.
"""

import pytest
from pydantic import ValidationError

from srcedit.errors import StageFailure
from srcedit.models.results import StageName, StageResult, PipelineResult


def _stage(stage, returncode):
    return StageResult(stage=stage, command=[stage.value], returncode=returncode)


class TestStageResult:
    """Test cases for StageResult."""

    def test_success(self):
        result = _stage(StageName.EDIT, 0)

        assert result.succeeded
        assert result.exit_status == 0
        assert result.duration_seconds == 0.0

    def test_failure(self):
        result = _stage(StageName.CHECK, 101)

        assert not result.succeeded
        assert result.exit_status == 101

    def test_signal_exit_status(self):
        """Negative return codes map to 128 + signal."""
        result = _stage(StageName.EDIT, -9)

        assert not result.succeeded
        assert result.exit_status == 137

    def test_empty_command_rejected(self):
        with pytest.raises(ValidationError):
            StageResult(stage=StageName.EDIT, command=[], returncode=0)

    def test_to_dict(self):
        data = _stage(StageName.FORMAT, 1).to_dict()

        assert data['stage'] == "format"
        assert data['returncode'] == 1
        assert data['succeeded'] is False


class TestPipelineResult:
    """Test cases for PipelineResult."""

    def test_empty(self):
        """A result with no stages has exit status 0 but is not a success."""
        result = PipelineResult()

        assert result.exit_status == 0
        assert not result.succeeded
        assert result.failed_stage is None

    def test_all_succeeded(self):
        result = PipelineResult(
            matches=["src/a.rs"],
            stages=[_stage(StageName.EDIT, 0), _stage(StageName.FORMAT, 0), _stage(StageName.CHECK, 0)]
        )

        assert result.succeeded
        assert result.exit_status == 0
        assert result.stages_run == [StageName.EDIT, StageName.FORMAT, StageName.CHECK]
        result.raise_for_status()

    def test_exit_status_is_last_stage(self):
        result = PipelineResult(stages=[_stage(StageName.EDIT, 0), _stage(StageName.FORMAT, 5)])

        assert result.exit_status == 5
        assert result.failed_stage.stage is StageName.FORMAT

        with pytest.raises(StageFailure) as exc_info:
            result.raise_for_status()
        assert exc_info.value.stage == "format"

    def test_to_dict(self):
        result = PipelineResult(matches=["src/a.rs"], stages=[_stage(StageName.EDIT, 1)])
        data = result.to_dict()

        assert data['matches'] == ["src/a.rs"]
        assert data['exit_status'] == 1
        assert data['succeeded'] is False
        assert data['stages'][0]['stage'] == "edit"
