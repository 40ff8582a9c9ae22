"""Admin API routes: session login/logout and contribution moderation."""
import logging
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from atlas.database import get_db
from atlas.errors import (
    ContributionNotFound,
    InvalidAction,
    InvalidTransition,
    MergeFailure,
    StoreError,
    Unauthorized,
)
from atlas.models.contribution import ContributionStatus
from atlas.schemas.admin import LoginRequest, SessionStatus
from atlas.schemas.contribution import ContributionOut, ModerationRequest, ModerationResult
from atlas.security import (
    SESSION_COOKIE_NAME,
    admin_authenticated,
    create_session_token,
    session_cookie_options,
    verify_credentials,
)
from atlas.services.contribution_store import ContributionStore
from atlas.services.moderation import ModerationService

logger = logging.getLogger(__name__)
router = APIRouter()


def _require_admin(authenticated: bool) -> None:
    if not authenticated:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")


@router.post("/login", response_model=SessionStatus)
def login(payload: LoginRequest, response: Response):
    """Check admin credentials and set the session cookie."""
    if not payload.username or not payload.password:
        raise HTTPException(status_code=400, detail="Username and password are required")

    if not verify_credentials(payload.username, payload.password):
        logger.warning("Failed admin login for username %r", payload.username)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

    response.set_cookie(value=create_session_token(), **session_cookie_options())
    logger.info("Admin %s logged in", payload.username)
    return SessionStatus(success=True, message="Login successful")


@router.post("/logout", response_model=SessionStatus)
def logout(response: Response):
    response.delete_cookie(SESSION_COOKIE_NAME, path="/")
    return SessionStatus(success=True, message="Logout successful")


@router.get("/contributions", response_model=list[ContributionOut])
def list_contributions(
    status_filter: Optional[ContributionStatus] = Query(ContributionStatus.pending, alias="status"),
    authenticated: bool = Depends(admin_authenticated),
    db: Session = Depends(get_db),
):
    """List contributions for review, pending ones by default."""
    _require_admin(authenticated)
    store = ContributionStore(db)
    try:
        if status_filter == ContributionStatus.pending:
            return store.list_pending()
        return store.list_by_status(status_filter)
    except StoreError:
        raise HTTPException(status_code=500, detail="Failed to fetch contributions")


@router.get("/contributions/{contribution_id}", response_model=ContributionOut)
def get_contribution(
    contribution_id: str,
    authenticated: bool = Depends(admin_authenticated),
    db: Session = Depends(get_db),
):
    _require_admin(authenticated)
    try:
        return ContributionStore(db).get(contribution_id)
    except ContributionNotFound:
        raise HTTPException(status_code=404, detail="Contribution not found")
    except StoreError:
        raise HTTPException(status_code=500, detail="Failed to fetch contribution")


@router.patch("/contributions/{contribution_id}", response_model=ModerationResult)
def moderate_contribution(
    contribution_id: str,
    payload: ModerationRequest,
    authenticated: bool = Depends(admin_authenticated),
    db: Session = Depends(get_db),
):
    """Approve or reject a pending contribution.

    Approval merges the proposed payload into its entity table; if that write
    fails the contribution is returned to pending and the cause is reported.
    """
    try:
        contribution = ModerationService(db).moderate(
            contribution_id,
            payload.action,
            payload.moderator_notes,
            authenticated=authenticated,
        )
    except Unauthorized:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    except InvalidAction as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    except ContributionNotFound:
        raise HTTPException(status_code=404, detail="Contribution not found")
    except InvalidTransition as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))
    except MergeFailure as exc:
        raise HTTPException(
            status_code=500,
            detail={"message": "Failed to merge contribution", "error": exc.cause},
        )
    except StoreError:
        raise HTTPException(status_code=500, detail="Failed to update contribution")

    return ModerationResult(
        success=True,
        message=f"Contribution {contribution.status.value} successfully",
        contribution=ContributionOut.model_validate(contribution),
    )
