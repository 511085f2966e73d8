"""
Projects service tests.

Tests verify:
- rows map to ProjectDTO with parsed content fields
- malformed JSON items are dropped one by one, wrong-shaped columns are absent
- rows with invalid enums are skipped, or not found by id
- store failures surface as ProjectFetchError
- catalog reads (public, featured, category, search, stats)
- increment_lead_count is id-keyed and atomic at the store
"""

from decimal import Decimal
from unittest.mock import patch
from uuid import uuid4

import pytest
from django.db import DatabaseError

from showroom.core.enums import ContentShape, ProjectCategory, ProjectStatus
from showroom.core.models import Project
from showroom.projects.engines.classifier import classify
from showroom.projects.services import projects_service
from showroom.projects.services.projects_service import (
    ProjectFetchError,
    ProjectNotFoundError,
)


@pytest.mark.django_db
class TestProjectMapping:
    """Tests for row -> DTO mapping."""

    def test_maps_scalar_and_content_fields(self, make_project):
        project = make_project(
            name="Mapped",
            price=Decimal("1500.00"),
            route="/mapped",
            content={"overview": "Hi", "highlights": [{"title": "Speed", "value": 10}]},
            key_features=[{"title": "A"}],
            purchase_info={"license_type": "Annual", "unknown_key": "ignored"},
        )

        dto = projects_service.get_project(project.id)

        assert dto.id == project.id
        assert dto.price == 1500.0
        assert dto.route == "/mapped"
        assert dto.content.overview == "Hi"
        assert dto.content.highlights[0].value == "10"
        assert dto.key_features[0].title == "A"
        assert dto.key_features[0].description == ""
        assert dto.purchase_info.license_type == "Annual"
        assert dto.stats is None
        assert dto.use_cases is None

    def test_blank_route_maps_to_none(self, make_project):
        project = make_project(route="")
        assert projects_service.get_project(project.id).route is None

    def test_wrong_shaped_columns_are_absent(self, make_project):
        """A column of the wrong shape altogether is dropped, the row survives."""
        project = make_project(
            content="not an object",
            key_features={"title": "not a list"},
            stats={"label": "not a list"},
        )

        dto = projects_service.get_project(project.id)

        assert dto.content is None
        assert dto.key_features is None
        assert dto.stats is None

    def test_feature_without_title_keeps_rich_shape(self, make_project):
        """Item members are optional; a partial feature still counts."""
        project = make_project(key_features=[{"icon": "zap", "description": "Fast"}])

        dto = projects_service.get_project(project.id)

        assert len(dto.key_features) == 1
        assert dto.key_features[0].title == ""
        assert dto.key_features[0].description == "Fast"
        assert classify(dto) == ContentShape.RICH

    def test_partial_highlight_keeps_overview(self, make_project):
        project = make_project(
            content={"overview": "Real overview", "highlights": [{"title": "Users"}]},
        )

        dto = projects_service.get_project(project.id)

        assert dto.content.overview == "Real overview"
        assert dto.content.highlights[0].title == "Users"
        assert dto.content.highlights[0].value == ""
        assert classify(dto) == ContentShape.RICH

    def test_bad_items_are_dropped_individually(self, make_project):
        project = make_project(
            content={"overview": "Kept", "highlights": "not a list"},
            key_features=["just a string", {"title": "Kept feature"}],
            stats=[{"label": "Users", "value": 1200}, 42],
            use_cases=[{"title": "Retail", "examples": ["Shops", {"bad": 1}, 3]}],
            purchase_info={"license_type": "Annual", "includes": ["Support", None]},
        )

        dto = projects_service.get_project(project.id)

        assert dto.content.overview == "Kept"
        assert dto.content.highlights == []
        assert [f.title for f in dto.key_features] == ["Kept feature"]
        assert [(s.label, s.value) for s in dto.stats] == [("Users", "1200")]
        assert dto.use_cases[0].examples == ["Shops", "3"]
        assert dto.purchase_info.includes == ["Support"]

    def test_invalid_enum_rows_are_skipped(self, make_project):
        good = make_project(name="Good")
        bad = make_project(name="Bad")
        Project.objects.filter(id=bad.id).update(status="Retired")

        projects = projects_service.get_all_projects()

        assert [p.id for p in projects] == [good.id]

    def test_get_project_with_invalid_enum_is_not_found(self, make_project):
        project = make_project()
        Project.objects.filter(id=project.id).update(category="Archived")

        with pytest.raises(ProjectNotFoundError):
            projects_service.get_project(project.id)

    def test_get_project_not_found(self, db):
        with pytest.raises(ProjectNotFoundError):
            projects_service.get_project(uuid4())


@pytest.mark.django_db
class TestProjectReads:
    """Tests for the catalog reads."""

    def test_get_all_projects_newest_first(self, make_project):
        older = make_project(name="Older")
        newer = make_project(name="Newer")

        assert [p.id for p in projects_service.get_all_projects()] == [newer.id, older.id]

    def test_get_all_projects_includes_private(self, make_project):
        make_project(is_public=False)
        assert len(projects_service.get_all_projects()) == 1

    def test_fetch_failure_raises_project_fetch_error(self, db):
        with patch.object(Project.objects, "order_by", side_effect=DatabaseError("down")):
            with pytest.raises(ProjectFetchError):
                projects_service.get_all_projects()

    def test_public_and_featured(self, make_project):
        public = make_project(name="Public")
        featured = make_project(name="Featured", is_featured=True)
        make_project(name="Hidden", is_public=False, is_featured=True)

        assert {p.id for p in projects_service.get_public_projects()} == {public.id, featured.id}
        assert [p.id for p in projects_service.get_featured_projects()] == [featured.id]

    def test_featured_limit(self, make_project):
        for _ in range(3):
            make_project(is_featured=True)
        assert len(projects_service.get_featured_projects(limit=2)) == 2

    def test_by_category_ordered_by_priority(self, make_project):
        low = make_project(category=ProjectCategory.INVESTMENT, priority_order=1)
        high = make_project(category=ProjectCategory.INVESTMENT, priority_order=5)
        make_project(category=ProjectCategory.FOR_SALE)

        projects = projects_service.get_projects_by_category(ProjectCategory.INVESTMENT)

        assert [p.id for p in projects] == [high.id, low.id]

    def test_search(self, make_project):
        by_name = make_project(name="Inventory Tracker")
        by_description = make_project(name="Other", description="tracks INVENTORY levels")
        make_project(name="Unrelated")
        make_project(name="Hidden inventory", is_public=False)

        found = {p.id for p in projects_service.search_projects("inventory")}

        assert found == {by_name.id, by_description.id}

    def test_stats(self, make_project):
        make_project(category=ProjectCategory.INVESTMENT, is_featured=True)
        make_project(category=ProjectCategory.INVESTMENT, is_public=False)
        make_project(category=ProjectCategory.FOR_SALE, status=ProjectStatus.FOR_SALE)

        stats = projects_service.get_project_stats()

        assert stats.total_projects == 3
        assert stats.public_projects == 2
        assert stats.private_projects == 1
        assert stats.featured_projects == 1
        assert stats.by_category == {"Investment": 2, "For Sale": 1}
        assert stats.recent_projects == 3


@pytest.mark.django_db
class TestIncrementLeadCount:
    """Tests for the lead counter."""

    def test_increments_by_id(self, make_project):
        project = make_project()

        projects_service.increment_lead_count(project.id)
        projects_service.increment_lead_count(project.id)

        project.refresh_from_db()
        assert project.lead_count == 2

    def test_same_name_projects_counted_separately(self, make_project):
        """Two projects sharing a display name keep independent counters."""
        first = make_project(name="Twin")
        second = make_project(name="Twin")

        projects_service.increment_lead_count(second.id)

        first.refresh_from_db()
        second.refresh_from_db()
        assert first.lead_count == 0
        assert second.lead_count == 1

    def test_unknown_id_raises(self, db):
        with pytest.raises(ProjectNotFoundError):
            projects_service.increment_lead_count(uuid4())
