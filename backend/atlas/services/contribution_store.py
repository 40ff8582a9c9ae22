"""Contribution store adapter. Owns the pending queue and its status field."""
import logging
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from atlas.errors import ContributionNotFound, StoreError
from atlas.models.contribution import Contribution, ContributionStatus
from atlas.schemas.contribution import ContributionCreate

logger = logging.getLogger(__name__)


class ContributionStore:
    """Single-record reads and writes against the contributions table."""

    def __init__(self, db: Session):
        self.db = db

    def _commit(self, action: str) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Store failure while trying to %s", action)
            raise StoreError(f"failed to {action}") from exc

    def insert_pending(self, submission: ContributionCreate) -> Contribution:
        """Persist a validated submission with status pending."""
        contribution = Contribution(
            type=submission.type.value,
            proposed_payload=submission.proposed_payload,
            contributor_email=submission.contributor_email,
            contributor_name=submission.contributor_name,
            notes=submission.notes,
            status=ContributionStatus.pending,
        )
        self.db.add(contribution)
        self._commit("create contribution")
        self.db.refresh(contribution)
        logger.info("Contribution %s created (%s)", contribution.id, contribution.type)
        return contribution

    def get(self, contribution_id: str) -> Contribution:
        try:
            contribution = self.db.query(Contribution).filter(Contribution.id == contribution_id).first()
        except SQLAlchemyError as exc:
            logger.exception("Store failure while fetching contribution %s", contribution_id)
            raise StoreError("failed to fetch contribution") from exc
        if not contribution:
            raise ContributionNotFound(f"Contribution {contribution_id} not found")
        return contribution

    def list_pending(self) -> list[Contribution]:
        """All pending contributions, newest first."""
        return self.list_by_status(ContributionStatus.pending)

    def list_by_status(self, status: Optional[ContributionStatus] = None) -> list[Contribution]:
        query = self.db.query(Contribution)
        if status is not None:
            query = query.filter(Contribution.status == status)
        try:
            return query.order_by(Contribution.created_at.desc()).all()
        except SQLAlchemyError as exc:
            logger.exception("Store failure while listing contributions")
            raise StoreError("failed to list contributions") from exc

    def set_status(
        self,
        contribution_id: str,
        status: ContributionStatus,
        moderator_notes: Optional[str] = None,
    ) -> Contribution:
        """Move a contribution to `status` and return the updated record.

        Leaving pending stamps reviewed_at and records the moderator notes.
        Returning to pending clears reviewed_at and keeps the notes.
        """
        contribution = self.get(contribution_id)
        previous = contribution.status
        contribution.status = status
        if status == ContributionStatus.pending:
            contribution.reviewed_at = None
        else:
            contribution.reviewed_at = datetime.now(timezone.utc)
            contribution.moderator_notes = moderator_notes
        self._commit(f"set contribution {contribution_id} to {status.value}")
        self.db.refresh(contribution)
        logger.info("Contribution %s: %s -> %s", contribution_id, previous.value, status.value)
        return contribution
