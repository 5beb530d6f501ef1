"""
Poll-until-visible loop for eventually-consistent side effects.

Cloud side effects (an exported object in a bucket, a freshly created
BigQuery table, a newly indexed asset) are not visible right away. The loop
here re-checks a predicate with exponential backoff and reports whether the
effect showed up inside a fixed attempt budget.

The loop never raises on non-convergence. Callers assert on the returned
bool, so an exhausted budget surfaces as an ordinary assertion failure.

Usage:
    from src.verification.polling import poll_with_budget, FILE_POLL_BUDGET

    visible = poll_with_budget(lambda: bucket.blob(name).exists(), FILE_POLL_BUDGET)
    assert visible
"""

import time
from dataclasses import dataclass
from typing import Callable

import src.constants as CONSTANTS
from src.logger import logger


@dataclass(frozen=True)
class PollBudget:
    """
    Immutable wait budget for one poll call.

    Attributes:
        initial_wait: Seconds slept before the first check
        max_attempts: Number of checks before giving up
    """

    initial_wait: float
    max_attempts: int = CONSTANTS.POLL_MAX_ATTEMPTS

    def waits(self) -> list[float]:
        """Every sleep the loop would take if the predicate never passes."""
        return [self.initial_wait * (2 ** i) for i in range(self.max_attempts)]

    @property
    def total_wait(self) -> float:
        return sum(self.waits())


FILE_POLL_BUDGET = PollBudget(CONSTANTS.FILE_POLL_INITIAL_WAIT)
HISTORY_POLL_BUDGET = PollBudget(CONSTANTS.HISTORY_POLL_INITIAL_WAIT)


def poll_until_visible(
    predicate: Callable[[], bool],
    initial_wait: float,
    max_attempts: int = CONSTANTS.POLL_MAX_ATTEMPTS,
    sleep: Callable[[float], None] = time.sleep,
) -> bool:
    """
    Sleep, check, double the wait, repeat.

    Args:
        predicate: Zero-argument check, True once the effect is visible
        initial_wait: Seconds to sleep before the first check
        max_attempts: Maximum number of checks
        sleep: Sleep function (injectable for tests)

    Returns:
        True as soon as the predicate passes, False once the budget is spent

    Raises:
        ValueError: If max_attempts < 1 or initial_wait < 0
    """
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be >= 1, got {max_attempts}")
    if initial_wait < 0:
        raise ValueError(f"initial_wait must be >= 0, got {initial_wait}")

    wait = initial_wait
    for attempt in range(1, max_attempts + 1):
        logger.debug(f"  Waiting {wait}s before check (attempt {attempt}/{max_attempts})...")
        sleep(wait)
        if predicate():
            logger.info(f"  ✓ Visible after attempt {attempt}/{max_attempts}")
            return True
        wait *= 2

    logger.warning(f"  ✗ Not visible after {max_attempts} attempts")
    return False


def poll_with_budget(
    predicate: Callable[[], bool],
    budget: PollBudget,
    sleep: Callable[[float], None] = time.sleep,
) -> bool:
    """Run poll_until_visible() with the values from a PollBudget."""
    return poll_until_visible(
        predicate,
        initial_wait=budget.initial_wait,
        max_attempts=budget.max_attempts,
        sleep=sleep,
    )
