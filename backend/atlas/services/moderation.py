"""Moderation orchestrator: approve or reject a pending contribution.

Sequence for one action:
1. admin gate
2. action must be approve or reject
3. contribution must exist and still be pending
4. status flip (committed)
5. reject stops here
6. approve merges the payload; if the merge fails the status is put back to
   pending and the failure is reported with its cause

The status flip and the merge are separate commits. The compensating
set_status(pending) is what keeps an unmerged contribution from staying
approved.
"""
import enum
import logging
from typing import Any, Callable, Optional

from sqlalchemy.orm import Session

from atlas.errors import (
    InvalidAction,
    InvalidTransition,
    MergeFailure,
    StoreError,
    Unauthorized,
)
from atlas.models.contribution import Contribution, ContributionStatus
from atlas.services import merge as merge_module
from atlas.services.contribution_store import ContributionStore

logger = logging.getLogger(__name__)

MergeFn = Callable[[Session, Contribution], int]


class ModerationAction(str, enum.Enum):
    approve = "approve"
    reject = "reject"


_TARGET_STATUS = {
    ModerationAction.approve: ContributionStatus.approved,
    ModerationAction.reject: ContributionStatus.rejected,
}


class ModerationService:
    def __init__(
        self,
        db: Session,
        store: Optional[ContributionStore] = None,
        merge: Optional[MergeFn] = None,
    ):
        self.db = db
        self.store = store or ContributionStore(db)
        self.merge = merge or merge_module.merge_contribution

    def moderate(
        self,
        contribution_id: str,
        action: Any,
        moderator_notes: Optional[str] = None,
        *,
        authenticated: bool,
    ) -> Contribution:
        """Apply one moderation action and return the resulting contribution."""
        if not authenticated:
            raise Unauthorized("Unauthorized")

        try:
            action = ModerationAction(action)
        except (ValueError, TypeError):
            raise InvalidAction("Invalid action. Must be 'approve' or 'reject'")

        contribution = self.store.get(contribution_id)
        if contribution.status != ContributionStatus.pending:
            raise InvalidTransition(f"Contribution is already {contribution.status.value}")

        contribution = self.store.set_status(contribution_id, _TARGET_STATUS[action], moderator_notes)
        if action == ModerationAction.reject:
            return contribution

        try:
            self.merge(self.db, contribution)
        except Exception as exc:
            self.db.rollback()
            logger.exception("Merge of contribution %s failed, reverting to pending", contribution_id)
            cause = str(exc)
            try:
                self.store.set_status(contribution_id, ContributionStatus.pending)
            except StoreError as revert_exc:
                logger.exception("Could not revert contribution %s to pending, it stays approved", contribution_id)
                cause = f"{cause} (revert to pending failed: {revert_exc})"
            raise MergeFailure(contribution_id, cause) from exc

        logger.info("Contribution %s approved and merged", contribution_id)
        return contribution
