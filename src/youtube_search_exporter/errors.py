"""Error types and per-call-site failure policies."""

from enum import Enum
from typing import Optional


class YouTubeExportError(Exception):
    """Base exception for all youtube_search_exporter errors."""

    pass


class RemoteError(YouTubeExportError):
    """A remote endpoint returned a non-success status or could not be reached.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code, or None for network failures
        url: Endpoint that was called
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        url: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.url = url


class TransientAbsence(YouTubeExportError):
    """Expected "no data" outcome, e.g. a video without a retrievable transcript."""

    pass


class FailurePolicy(Enum):
    """What a failed remote call means for the rest of the run."""

    ABORT_RUN = "abort_run"
    SKIP_UNIT = "skip_unit"
    TREAT_AS_ABSENT = "treat_as_absent"


SEARCH_FAILURE_POLICY = FailurePolicy.ABORT_RUN
DETAILS_FAILURE_POLICY = FailurePolicy.SKIP_UNIT
TRANSCRIPT_FAILURE_POLICY = FailurePolicy.TREAT_AS_ABSENT


def apply_failure_policy(policy: FailurePolicy, error: Exception) -> None:
    """
    Resolve a failed call according to its policy.

    Args:
        policy: The policy attached to the failing call site
        error: The exception raised by the call

    Returns:
        None when the failure is tolerated (SKIP_UNIT, TREAT_AS_ABSENT)

    Raises:
        The original error when the policy is ABORT_RUN
    """
    if policy is FailurePolicy.ABORT_RUN:
        raise error
    return None
