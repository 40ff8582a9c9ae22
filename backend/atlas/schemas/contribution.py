"""Pydantic schemas for Contributions."""
from datetime import datetime
from typing import Optional, Any
from pydantic import BaseModel, EmailStr, Field, field_validator

from atlas.models.contribution import ContributionType, ContributionStatus


class ContributionCreate(BaseModel):
    """Public submission body. Unknown keys are dropped."""

    type: ContributionType
    proposed_payload: dict[str, Any]
    contributor_email: Optional[EmailStr] = None
    contributor_name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    notes: Optional[str] = Field(default=None, max_length=2000)
    honeypot: Optional[str] = None

    model_config = {"extra": "ignore"}

    @field_validator("contributor_email", "contributor_name", "notes", mode="before")
    @classmethod
    def blank_to_none(cls, value: Any) -> Any:
        # Forms post "" for untouched inputs
        if value == "":
            return None
        return value


class ContributionOut(BaseModel):
    id: str
    type: str
    status: ContributionStatus
    proposed_payload: dict[str, Any]
    contributor_email: Optional[str] = None
    contributor_name: Optional[str] = None
    notes: Optional[str] = None
    moderator_notes: Optional[str] = None
    reviewed_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class SubmissionAck(BaseModel):
    success: bool = True
    message: str
    id: Optional[str] = None


class ModerationRequest(BaseModel):
    action: Any = None  # approve | reject, checked by the moderation service
    moderator_notes: Optional[str] = None


class ModerationResult(BaseModel):
    success: bool
    message: str
    contribution: ContributionOut
