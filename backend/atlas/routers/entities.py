"""Entity lookups used by the contribution form to pick and prefill targets."""
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from atlas.database import get_db
from atlas.schemas.entities import (
    CountryDetail,
    CountryList,
    EthnicityDetail,
    EthnicityList,
    PresenceDetail,
    RegionDetail,
    RegionList,
)
from atlas.services import entity_queries

router = APIRouter()


@router.get("/regions", response_model=RegionList)
def list_regions(db: Session = Depends(get_db)):
    return {"regions": entity_queries.list_regions(db)}


@router.get("/region/{code}", response_model=RegionDetail)
def get_region(code: str, db: Session = Depends(get_db)):
    region = entity_queries.get_region_by_code(db, code)
    if not region:
        raise HTTPException(status_code=404, detail="Region not found")
    return region


@router.get("/countries", response_model=CountryList)
def list_countries(db: Session = Depends(get_db)):
    return {"countries": entity_queries.list_countries(db)}


@router.get("/country/{slug}", response_model=CountryDetail)
def get_country(slug: str, db: Session = Depends(get_db)):
    country = entity_queries.get_country_by_slug(db, slug)
    if not country:
        raise HTTPException(status_code=404, detail="Country not found")
    return country


@router.get("/ethnicities", response_model=EthnicityList)
def list_ethnicities(db: Session = Depends(get_db)):
    return {"ethnicities": entity_queries.list_ethnicities(db)}


@router.get("/ethnicity/{slug}", response_model=EthnicityDetail)
def get_ethnicity(slug: str, db: Session = Depends(get_db)):
    ethnicity = entity_queries.get_ethnicity_by_slug(db, slug)
    if not ethnicity:
        raise HTTPException(status_code=404, detail="Ethnicity not found")
    return ethnicity


@router.get("/presence", response_model=PresenceDetail)
def get_presence(
    ethnic_group_id: str = Query(...),
    country_id: str = Query(...),
    db: Session = Depends(get_db),
):
    """Presence of an ethnic group in a country, keyed by the (group, country) pair."""
    presence = entity_queries.get_presence(db, ethnic_group_id, country_id)
    if not presence:
        raise HTTPException(status_code=404, detail="Presence not found")
    return presence
