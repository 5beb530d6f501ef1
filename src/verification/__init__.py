"""
Eventual-consistency verifier.

Fixture lifecycle, sample invocation and poll-until-visible helpers used by
the live asset samples suite.
"""

from .polling import FILE_POLL_BUDGET, HISTORY_POLL_BUDGET, PollBudget, poll_until_visible, poll_with_budget
from .sample_runner import SampleResult, SampleRunner

__all__ = [
    "FILE_POLL_BUDGET",
    "HISTORY_POLL_BUDGET",
    "PollBudget",
    "poll_until_visible",
    "poll_with_budget",
    "SampleResult",
    "SampleRunner",
]
