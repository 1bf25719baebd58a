"""
Edit, format and check pipeline for srcedit.

This module runs the three external tools in order: the interactive editor
on the located files, then the formatter over the whole project, then the
static checker. Each tool inherits the terminal and is waited on without a
timeout. The pipeline stops at the first stage that exits non-zero.
"""

import subprocess
import time
from typing import Iterable, List, Sequence
import logging

from ..errors import StageLaunchFailure
from ..models.config import SrceditConfig
from ..models.results import PipelineResult, StageName, StageResult


logger = logging.getLogger(__name__)


class PipelineRunner:
    """
    Runs the editor, formatter and checker with short-circuit semantics.

    Stage N+1 runs only if stage N exited 0. The returned PipelineResult
    lists the stages that ran, so its exit status is the status of the
    first failing stage, or 0 when all three succeeded.
    """

    STAGE_ORDER = (StageName.EDIT, StageName.FORMAT, StageName.CHECK)

    def __init__(self, config: SrceditConfig):
        """
        Initialize the pipeline runner.

        Args:
            config: Configuration holding the project directory and tool commands
        """
        self.config = config

    def run(self, matches: Sequence[str]) -> PipelineResult:
        """
        Run the full pipeline.

        An empty ``matches`` still opens the editor, with no file arguments.

        Args:
            matches: Paths to open in the editor

        Returns:
            PipelineResult with one StageResult per stage that ran

        Raises:
            StageLaunchFailure: If a tool cannot be started
        """
        result = PipelineResult(matches=list(matches))

        for stage in self.STAGE_ORDER:
            args = result.matches if stage is StageName.EDIT else ()
            stage_result = self.run_stage(stage, args)
            result.stages.append(stage_result)

            if not stage_result.succeeded:
                logger.info(f"Stopping after {stage.value} stage (exit status {stage_result.returncode})")
                break

        return result

    def run_stage(self, stage: StageName, args: Iterable[str] = ()) -> StageResult:
        """
        Run a single stage and wait for it to finish.

        Args:
            stage: Stage to run
            args: Extra arguments appended to the configured command

        Returns:
            StageResult holding the tool's return code

        Raises:
            StageLaunchFailure: If the tool cannot be started
        """
        command = self.config.command_for(stage) + list(args)
        logger.info(f"Running {stage.value} stage: {command[0]} ({len(command) - 1} args)")

        started = time.monotonic()
        returncode = self._execute(stage, command)
        duration = time.monotonic() - started

        logger.info(f"{stage.value} stage exited with status {returncode} after {duration:.2f}s")
        return StageResult(
            stage=stage,
            command=command,
            returncode=returncode,
            duration_seconds=duration
        )

    def _execute(self, stage: StageName, command: List[str]) -> int:
        """
        Start the tool and wait for it, whatever signals reach this process.

        A terminal Ctrl-C goes to the whole process group. The child decides
        what SIGINT means (vim ignores it, cargo exits), so the interrupt is
        never turned into a kill here; its effect shows up in the child's
        return code.
        """
        try:
            process = subprocess.Popen(command, cwd=self.config.project_dir)
        except OSError as e:
            raise StageLaunchFailure(stage.value, command, e) from e

        while True:
            try:
                return process.wait()
            except KeyboardInterrupt:
                logger.info(f"Interrupt received; waiting for {stage.value} stage to exit")


def run_pipeline(matches: Sequence[str], config: SrceditConfig) -> PipelineResult:
    """
    Convenience function to run the pipeline with a fresh runner.

    Args:
        matches: Paths to open in the editor
        config: Configuration holding the tool commands

    Returns:
        PipelineResult for the run
    """
    return PipelineRunner(config).run(matches)
