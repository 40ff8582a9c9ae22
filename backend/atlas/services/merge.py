"""Merge dispatcher: applies an approved contribution to its entity table.

Each ContributionType maps to one MergeTarget. plan_merge() is pure: it turns
(type, payload) into a MergePlan naming the table, the write mode and, for
updates, the natural key. apply_merge() issues exactly one statement for a
plan. Payload shape is not re-checked here; a payload key that names no
column makes the statement fail.
"""
import enum
import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from sqlalchemy import Table
from sqlalchemy.orm import Session

from atlas.errors import UnknownContributionType
from atlas.models.contribution import Contribution, ContributionType
from atlas.models.country import Country
from atlas.models.ethnic_group import EthnicGroup, EthnicGroupPresence
from atlas.models.region import Region

logger = logging.getLogger(__name__)


class WriteMode(str, enum.Enum):
    insert = "insert"
    update = "update"


@dataclass(frozen=True)
class MergeTarget:
    entity: type
    mode: WriteMode
    key_field: Optional[str] = None  # natural key, updates only


MERGE_TARGETS: dict[ContributionType, MergeTarget] = {
    ContributionType.new_region: MergeTarget(Region, WriteMode.insert),
    ContributionType.update_region: MergeTarget(Region, WriteMode.update, "code"),
    ContributionType.new_country: MergeTarget(Country, WriteMode.insert),
    ContributionType.update_country: MergeTarget(Country, WriteMode.update, "slug"),
    ContributionType.new_ethnicity: MergeTarget(EthnicGroup, WriteMode.insert),
    ContributionType.update_ethnicity: MergeTarget(EthnicGroup, WriteMode.update, "slug"),
    ContributionType.new_presence: MergeTarget(EthnicGroupPresence, WriteMode.insert),
    ContributionType.update_presence: MergeTarget(EthnicGroupPresence, WriteMode.update, "id"),
}

_unmapped = set(ContributionType) - set(MERGE_TARGETS)
if _unmapped:
    raise RuntimeError(f"Contribution types without a merge target: {sorted(t.value for t in _unmapped)}")


@dataclass(frozen=True)
class MergePlan:
    table: Table
    mode: WriteMode
    values: dict[str, Any] = field(default_factory=dict)
    key_field: Optional[str] = None
    key_value: Any = None


def plan_merge(contribution_type: str, payload: dict[str, Any]) -> MergePlan:
    """Resolve the single write implied by a contribution type and its payload."""
    try:
        target = MERGE_TARGETS[ContributionType(contribution_type)]
    except ValueError:
        raise UnknownContributionType(f"Unknown contribution type: {contribution_type}")

    table = target.entity.__table__
    if target.mode == WriteMode.insert:
        return MergePlan(table=table, mode=WriteMode.insert, values=dict(payload))
    return MergePlan(
        table=table,
        mode=WriteMode.update,
        values=dict(payload),
        key_field=target.key_field,
        key_value=payload.get(target.key_field),
    )


def apply_merge(db: Session, plan: MergePlan) -> int:
    """Execute a plan as one statement and commit. Returns the affected row count."""
    table = plan.table
    if plan.mode == WriteMode.insert:
        stmt = table.insert().values(**plan.values)
    else:
        stmt = table.update().where(table.c[plan.key_field] == plan.key_value).values(**plan.values)

    result = db.execute(stmt)
    db.commit()
    rowcount = result.rowcount

    if plan.mode == WriteMode.update and rowcount == 0:
        # Not treated as a failure: the update simply had nothing to touch.
        logger.warning(
            "Merge update on %s matched no rows for %s=%r", table.name, plan.key_field, plan.key_value
        )
    else:
        logger.info("Merged %s into %s (%d row(s))", plan.mode.value, table.name, rowcount)
    return rowcount


def merge_contribution(db: Session, contribution: Contribution) -> int:
    """Apply an approved contribution's payload to its entity table."""
    plan = plan_merge(contribution.type, contribution.proposed_payload or {})
    return apply_merge(db, plan)
