"""Pydantic schemas for entity lookups used to prefill contribution forms."""
from typing import Optional
from pydantic import BaseModel


class RegionSummary(BaseModel):
    id: str
    code: str
    name_fr: str

    model_config = {"from_attributes": True}


class RegionDetail(RegionSummary):
    name_en: Optional[str] = None
    name_es: Optional[str] = None
    name_pt: Optional[str] = None
    total_population: Optional[int] = None


class CountrySummary(BaseModel):
    id: str
    slug: str
    name_fr: str
    region_id: Optional[str] = None

    model_config = {"from_attributes": True}


class CountryDetail(CountrySummary):
    name_en: Optional[str] = None
    name_es: Optional[str] = None
    name_pt: Optional[str] = None
    iso_code_2: Optional[str] = None
    iso_code_3: Optional[str] = None
    population_2025: Optional[int] = None
    percentage_in_region: Optional[float] = None
    percentage_in_africa: Optional[float] = None


class EthnicitySummary(BaseModel):
    id: str
    slug: str
    name_fr: str
    parent_id: Optional[str] = None

    model_config = {"from_attributes": True}


class EthnicityDetail(EthnicitySummary):
    name_en: Optional[str] = None
    name_es: Optional[str] = None
    name_pt: Optional[str] = None
    total_population: Optional[int] = None
    percentage_in_africa: Optional[float] = None


class PresenceDetail(BaseModel):
    id: str
    ethnic_group_id: str
    country_id: str
    population: Optional[int] = None
    percentage_in_country: Optional[float] = None
    percentage_in_region: Optional[float] = None
    percentage_in_africa: Optional[float] = None

    model_config = {"from_attributes": True}


class RegionList(BaseModel):
    regions: list[RegionSummary]


class CountryList(BaseModel):
    countries: list[CountrySummary]


class EthnicityList(BaseModel):
    ethnicities: list[EthnicitySummary]
