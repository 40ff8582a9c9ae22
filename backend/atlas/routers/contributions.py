"""Public contribution submission route."""
import logging
from typing import Any
from fastapi import APIRouter, Body, Depends, HTTPException, status
from sqlalchemy.orm import Session

from atlas.database import get_db
from atlas.errors import StoreError, SubmissionInvalid
from atlas.schemas.contribution import SubmissionAck
from atlas.services import validation
from atlas.services.contribution_store import ContributionStore

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("", response_model=SubmissionAck, response_model_exclude_none=True, status_code=status.HTTP_201_CREATED)
def submit_contribution(payload: Any = Body(...), db: Session = Depends(get_db)):
    """Queue a proposed change for moderation.

    Honeypot submissions get the same 201 as real ones but are never stored.
    """
    if validation.is_honeypot_triggered(payload):
        logger.warning("Honeypot field filled, discarding contribution")
        return SubmissionAck(message="Contribution received")

    try:
        submission = validation.validate_submission(payload)
    except SubmissionInvalid as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"message": "Invalid input", "errors": exc.errors},
        )

    try:
        contribution = ContributionStore(db).insert_pending(submission)
    except StoreError:
        raise HTTPException(status_code=500, detail="Failed to create contribution")

    return SubmissionAck(message="Contribution submitted successfully", id=contribution.id)
