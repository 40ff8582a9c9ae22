"""Tests for the merge dispatcher — type → table mapping and the single write."""
import pytest
from sqlalchemy.exc import SQLAlchemyError

from atlas.errors import UnknownContributionType
from atlas.models.contribution import Contribution, ContributionType
from atlas.models.country import Country
from atlas.models.ethnic_group import EthnicGroup, EthnicGroupPresence
from atlas.models.region import Region
from atlas.services.merge import (
    MERGE_TARGETS,
    WriteMode,
    apply_merge,
    merge_contribution,
    plan_merge,
)
from tests.conftest import seed_country, seed_ethnicity, seed_region


class TestMergePlan:
    """plan_merge is pure: (type, payload) → table, mode, key."""

    def test_every_type_has_a_target(self):
        assert set(MERGE_TARGETS) == set(ContributionType)

    @pytest.mark.parametrize("contribution_type,table,mode,key_field,payload", [
        ("new_region", "african_regions", WriteMode.insert, None, {"code": "sahel"}),
        ("update_region", "african_regions", WriteMode.update, "code", {"code": "sahel"}),
        ("new_country", "countries", WriteMode.insert, None, {"slug": "xy"}),
        ("update_country", "countries", WriteMode.update, "slug", {"slug": "xy"}),
        ("new_ethnicity", "ethnic_groups", WriteMode.insert, None, {"slug": "peul"}),
        ("update_ethnicity", "ethnic_groups", WriteMode.update, "slug", {"slug": "peul"}),
        ("new_presence", "ethnic_group_presence", WriteMode.insert, None, {"population": 10}),
        ("update_presence", "ethnic_group_presence", WriteMode.update, "id", {"id": "p1"}),
    ])
    def test_mapping(self, contribution_type, table, mode, key_field, payload):
        plan = plan_merge(contribution_type, payload)
        assert plan.table.name == table
        assert plan.mode == mode
        assert plan.key_field == key_field
        assert plan.values == payload
        if key_field:
            assert plan.key_value == payload[key_field]

    def test_update_without_key_plans_null_key(self):
        plan = plan_merge("update_country", {"population_2025": 5})
        assert plan.key_field == "slug"
        assert plan.key_value is None

    def test_plan_copies_payload(self):
        payload = {"code": "sahel"}
        plan = plan_merge("new_region", payload)
        payload["code"] = "changed"
        assert plan.values == {"code": "sahel"}

    def test_unknown_type(self):
        with pytest.raises(UnknownContributionType, match="delete_region"):
            plan_merge("delete_region", {"code": "sahel"})


class TestApplyMerge:
    """apply_merge issues exactly one write against the mapped table."""

    def test_insert_region(self, db):
        rowcount = apply_merge(db, plan_merge("new_region", {
            "code": "afrique_centrale",
            "name_fr": "Afrique centrale",
            "total_population": 200_000_000,
        }))
        assert rowcount == 1
        region = db.query(Region).filter(Region.code == "afrique_centrale").one()
        assert region.name_fr == "Afrique centrale"
        assert region.id  # generated

    def test_update_region_by_code(self, db):
        seed_region(db, code="afrique_du_nord", total_population=100)
        rowcount = apply_merge(db, plan_merge("update_region", {"code": "afrique_du_nord", "total_population": 999}))
        assert rowcount == 1
        db.expire_all()
        assert db.query(Region).filter(Region.code == "afrique_du_nord").one().total_population == 999

    def test_update_country_by_slug_leaves_others(self, db):
        region = seed_region(db)
        seed_country(db, slug="maroc", region_id=region.id, population_2025=1)
        seed_country(db, slug="tunisie", region_id=region.id, population_2025=2)
        apply_merge(db, plan_merge("update_country", {"slug": "maroc", "population_2025": 38_000_000}))
        db.expire_all()
        assert db.query(Country).filter(Country.slug == "maroc").one().population_2025 == 38_000_000
        assert db.query(Country).filter(Country.slug == "tunisie").one().population_2025 == 2

    def test_update_ethnicity_by_slug(self, db):
        seed_ethnicity(db, slug="peul", name_fr="Peul")
        apply_merge(db, plan_merge("update_ethnicity", {"slug": "peul", "name_en": "Fula"}))
        db.expire_all()
        assert db.query(EthnicGroup).filter(EthnicGroup.slug == "peul").one().name_en == "Fula"

    def test_insert_and_update_presence(self, db):
        region = seed_region(db)
        country = seed_country(db, slug="senegal", region_id=region.id)
        group = seed_ethnicity(db, slug="wolof")
        apply_merge(db, plan_merge("new_presence", {
            "ethnic_group_id": group.id,
            "country_id": country.id,
            "population": 6_000_000,
        }))
        presence = db.query(EthnicGroupPresence).one()

        apply_merge(db, plan_merge("update_presence", {"id": presence.id, "percentage_in_country": 39.7}))
        db.expire_all()
        presence = db.query(EthnicGroupPresence).one()
        assert presence.population == 6_000_000
        assert presence.percentage_in_country == 39.7

    def test_update_matching_nothing_is_not_an_error(self, db):
        rowcount = apply_merge(db, plan_merge("update_region", {"code": "atlantide", "total_population": 1}))
        assert rowcount == 0
        assert db.query(Region).count() == 0

    def test_update_without_key_matches_nothing(self, db):
        seed_region(db, code="sahel", total_population=5)
        assert apply_merge(db, plan_merge("update_region", {"total_population": 1})) == 0
        db.expire_all()
        assert db.query(Region).one().total_population == 5

    def test_unknown_column_fails(self, db):
        with pytest.raises(SQLAlchemyError):
            apply_merge(db, plan_merge("new_region", {"code": "sahel", "name_fr": "Sahel", "capital": "?"}))

    def test_duplicate_natural_key_fails(self, db):
        seed_region(db, code="sahel")
        with pytest.raises(SQLAlchemyError):
            apply_merge(db, plan_merge("new_region", {"code": "sahel", "name_fr": "Sahel bis"}))


class TestMergeContribution:

    def test_routes_by_contribution_type(self, db):
        contribution = Contribution(type="new_ethnicity", proposed_payload={"slug": "haoussa", "name_fr": "Haoussa"})
        assert merge_contribution(db, contribution) == 1
        assert db.query(EthnicGroup).filter(EthnicGroup.slug == "haoussa").count() == 1

    def test_stored_unknown_type(self, db):
        contribution = Contribution(type="merge_regions", proposed_payload={})
        with pytest.raises(UnknownContributionType):
            merge_contribution(db, contribution)
