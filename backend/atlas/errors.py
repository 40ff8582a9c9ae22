"""Domain errors raised by the contribution pipeline.

Services raise these; routers translate them to HTTP responses.
"""
from typing import Any


class ContributionError(Exception):
    """Base contribution pipeline error."""


class SubmissionInvalid(ContributionError):
    """Raised when a submission fails shape/type validation."""

    def __init__(self, errors: list[dict[str, Any]]):
        self.errors = errors
        super().__init__(f"{len(errors)} invalid field(s)")


class Unauthorized(ContributionError):
    """Raised when a moderation action arrives without a valid admin session."""


class InvalidAction(ContributionError):
    """Raised when a moderation action is not 'approve' or 'reject'."""


class ContributionNotFound(ContributionError):
    """Raised when the requested contribution does not exist."""


class InvalidTransition(ContributionError):
    """Raised when a status change is not allowed from the current status."""


class UnknownContributionType(ContributionError):
    """Raised when a contribution type has no merge target."""


class MergeFailure(ContributionError):
    """Raised after the entity-table write failed and the status was rolled back."""

    def __init__(self, contribution_id: str, cause: str):
        self.contribution_id = contribution_id
        self.cause = cause
        super().__init__(f"merge of contribution {contribution_id} failed: {cause}")


class StoreError(ContributionError):
    """Raised when the store fails for reasons other than a missing row."""
