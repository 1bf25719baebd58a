"""
Pipeline result data models for srcedit.

This module defines the records produced by the pipeline runner: one
StageResult per external tool that ran, and a PipelineResult that derives
the overall exit status from them.
"""

from typing import Dict, List, Optional, Any
from enum import Enum
from pydantic import BaseModel, Field

from ..errors import StageFailure


class StageName(Enum):
    """Pipeline stages, in execution order."""
    EDIT = "edit"
    FORMAT = "format"
    CHECK = "check"


class StageResult(BaseModel):
    """
    Outcome of one external tool run.

    Attributes:
        stage: Which pipeline stage ran
        command: The argv that was executed
        returncode: Process exit status; negative when killed by a signal
        duration_seconds: Wall-clock time spent waiting for the process
    """

    stage: StageName = Field(..., description="Pipeline stage")
    command: List[str] = Field(..., min_length=1, description="Executed argv")
    returncode: int = Field(..., description="Process exit status")
    duration_seconds: float = Field(0.0, ge=0, description="Time spent in the stage")

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0

    @property
    def exit_status(self) -> int:
        """Exit status in shell convention (128 + N for signal N)."""
        if self.returncode < 0:
            return 128 - self.returncode
        return self.returncode

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        data = self.model_dump()
        data['stage'] = self.stage.value
        data['succeeded'] = self.succeeded
        return data


class PipelineResult(BaseModel):
    """
    Outcome of a full edit, format and check run.

    Only stages that actually ran appear in ``stages``; a failing stage is
    always the last entry.

    Attributes:
        matches: Paths handed to the editor
        stages: Results of the stages that ran, in order
    """

    matches: List[str] = Field(default_factory=list, description="Paths handed to the editor")
    stages: List[StageResult] = Field(default_factory=list, description="Results of stages that ran")

    @property
    def stages_run(self) -> List[StageName]:
        return [result.stage for result in self.stages]

    @property
    def failed_stage(self) -> Optional[StageResult]:
        """The first stage that failed, if any."""
        for result in self.stages:
            if not result.succeeded:
                return result
        return None

    @property
    def succeeded(self) -> bool:
        return len(self.stages) == len(StageName) and self.failed_stage is None

    @property
    def exit_status(self) -> int:
        """Exit status of the last stage that ran."""
        if not self.stages:
            return 0
        return self.stages[-1].exit_status

    def raise_for_status(self) -> None:
        """Raise StageFailure if a stage exited non-zero."""
        failed = self.failed_stage
        if failed is not None:
            raise StageFailure(failed.stage.value, failed.returncode)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            'matches': list(self.matches),
            'stages': [result.to_dict() for result in self.stages],
            'exit_status': self.exit_status,
            'succeeded': self.succeeded,
        }
