"""Read helpers for the entities a contribution can target."""
from typing import Optional

from sqlalchemy.orm import Session

from atlas.models.country import Country
from atlas.models.ethnic_group import EthnicGroup, EthnicGroupPresence
from atlas.models.region import Region


def list_regions(db: Session) -> list[Region]:
    return db.query(Region).order_by(Region.name_fr).all()


def get_region_by_code(db: Session, code: str) -> Optional[Region]:
    return db.query(Region).filter(Region.code == code).first()


def list_countries(db: Session) -> list[Country]:
    return db.query(Country).order_by(Country.name_fr).all()


def get_country_by_slug(db: Session, slug: str) -> Optional[Country]:
    return db.query(Country).filter(Country.slug == slug).first()


def list_ethnicities(db: Session) -> list[EthnicGroup]:
    return db.query(EthnicGroup).order_by(EthnicGroup.name_fr).all()


def get_ethnicity_by_slug(db: Session, slug: str) -> Optional[EthnicGroup]:
    return db.query(EthnicGroup).filter(EthnicGroup.slug == slug).first()


def get_presence(db: Session, ethnic_group_id: str, country_id: str) -> Optional[EthnicGroupPresence]:
    """Presence of one ethnic group in one country (the pair is unique)."""
    return (
        db.query(EthnicGroupPresence)
        .filter(
            EthnicGroupPresence.ethnic_group_id == ethnic_group_id,
            EthnicGroupPresence.country_id == country_id,
        )
        .first()
    )
