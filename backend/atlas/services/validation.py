"""Submission validation for the public contribution endpoint.

The validator is the only place a proposal's shape is checked. Merges trust
whatever passed here.
"""
import logging
from typing import Any

from pydantic import ValidationError

from atlas.errors import SubmissionInvalid
from atlas.schemas.contribution import ContributionCreate

logger = logging.getLogger(__name__)


def is_honeypot_triggered(raw: Any) -> bool:
    """True when the hidden anti-spam field was filled in (bots fill every input)."""
    if not isinstance(raw, dict):
        return False
    honeypot = raw.get("honeypot")
    return bool(honeypot)


def _field_errors(exc: ValidationError) -> list[dict[str, Any]]:
    errors = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"]) or "body"
        errors.append({"field": field, "message": error["msg"]})
    return errors


def validate_submission(raw: Any) -> ContributionCreate:
    """Validate a raw submission body, raising SubmissionInvalid with field-level errors."""
    try:
        return ContributionCreate.model_validate(raw)
    except ValidationError as exc:
        errors = _field_errors(exc)
        logger.info("Rejected contribution submission: %s", ", ".join(e["field"] for e in errors))
        raise SubmissionInvalid(errors) from exc
