"""
Sample program runner.

This module runs the asset inventory samples as child processes, the same
way a user would from a shell, and hands back their captured stdout.

Usage:
    from src.verification.sample_runner import SampleRunner

    runner = SampleRunner()
    stdout = runner.run_sample("quickstart", "//storage.googleapis.com/my-bucket")
"""

import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Mapping, Optional, Sequence

import src.constants as CONSTANTS
from src.core.exceptions import SampleInvocationError
from src.logger import logger


@dataclass(frozen=True)
class SampleResult:
    """Outcome of one finished child process."""

    command: list[str]
    exit_code: int
    stdout: str
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.exit_code == 0

    @property
    def combined_output(self) -> str:
        output = self.stdout or ""
        if self.stderr:
            output += "\n" + self.stderr if output else self.stderr
        return output or "No output captured"


class SampleRunner:
    """
    Runs sample programs synchronously and captures their output.

    Output is buffered until the process exits; nothing is streamed.
    Arguments are passed as an argv list, never through a shell, so values
    such as '' or 'policy:roles/owner' need no quoting.

    Attributes:
        project_root: Working directory for the child processes
        python: Interpreter used to launch "python -m src.samples.<name>"
    """

    def __init__(
        self,
        project_root: Optional[Path] = None,
        python: str = sys.executable,
        env: Optional[Mapping[str, str]] = None,
        process_runner: Callable[..., subprocess.CompletedProcess] = subprocess.run,
    ):
        """
        Initialize the runner.

        Args:
            project_root: Directory containing the src/ package (defaults to repo root)
            python: Interpreter path
            env: Environment for child processes (inherits os.environ when None)
            process_runner: subprocess.run compatible callable (injectable for tests)
        """
        if project_root is None:
            project_root = Path(__file__).resolve().parent.parent.parent
        self.project_root = Path(project_root)
        self.python = python
        self.env = dict(env) if env is not None else None
        self._process_runner = process_runner

    def run_external(self, command: Sequence[str], args: Sequence[str] = ()) -> SampleResult:
        """
        Run a command and wait for it to finish.

        Args:
            command: Program and any fixed leading arguments
            args: Caller-supplied positional arguments

        Returns:
            SampleResult; a non-zero exit is reported, not raised
        """
        cmd = list(command) + [str(a) for a in args]
        logger.info(f"Running: {' '.join(cmd)}")

        completed = self._process_runner(
            cmd,
            capture_output=True,
            text=True,
            check=False,
            cwd=str(self.project_root),
            env=self.env,
        )

        return SampleResult(
            command=cmd,
            exit_code=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )

    def sample_command(self, sample: str) -> list[str]:
        """
        Build the launch command for a registered sample.

        Raises:
            ValueError: If the sample name is not registered
        """
        if sample not in CONSTANTS.SAMPLE_MODULES:
            raise ValueError(
                f"Unknown sample '{sample}'. Available: {sorted(CONSTANTS.SAMPLE_MODULES)}"
            )
        return [self.python, "-m", CONSTANTS.SAMPLE_MODULES[sample]]

    def run_sample(self, sample: str, *args: str) -> str:
        """
        Run a sample and return its stdout.

        Raises:
            ValueError: If the sample name is not registered
            SampleInvocationError: If the sample exits non-zero
        """
        result = self.run_external(self.sample_command(sample), args)
        if not result.ok:
            logger.error(f"✗ {sample} exited with {result.exit_code}")
            raise SampleInvocationError(result.command, result.exit_code, result.combined_output)
        return result.stdout
