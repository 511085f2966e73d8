"""
Leads service tests.

Tests verify:
- project inquiries are stored with source/status defaults and a form_data
  envelope
- store failures surface as LeadSaveError
- priority inference
- CRM reads (list, stats)
"""

from unittest.mock import patch

import pytest
from django.db import DatabaseError

from showroom.core.enums import InquiryType, LeadPriority, LeadSource, LeadStatus
from showroom.core.models import Lead
from showroom.projects.dto import ProjectLeadCreateDTO
from showroom.projects.services import leads_service
from showroom.projects.services.leads_service import LeadSaveError, infer_priority


def make_record(project, **fields) -> ProjectLeadCreateDTO:
    defaults = {
        "project_id": project.id,
        "name": "Demo Request",
        "email": "demo@placeholder.com",
        "inquiry_type": InquiryType.DEMO,
        "message": "Demo requested",
    }
    defaults.update(fields)
    return ProjectLeadCreateDTO(**defaults)


class TestInferPriority:
    """Tests for lead priority inference."""

    @pytest.mark.parametrize(
        "inquiry_type,amount,expected",
        [
            (InquiryType.INVESTMENT, 2_000_000, LeadPriority.URGENT),
            (InquiryType.INVESTMENT, 1_000_000, LeadPriority.HIGH),
            (InquiryType.INVESTMENT, None, LeadPriority.HIGH),
            (InquiryType.PURCHASE, None, LeadPriority.MEDIUM),
            (InquiryType.DEMO, None, LeadPriority.LOW),
            (InquiryType.CONTACT, 5_000_000, LeadPriority.LOW),
            (None, None, LeadPriority.LOW),
        ],
    )
    def test_infer_priority(self, inquiry_type, amount, expected):
        assert infer_priority(inquiry_type, amount) == expected


@pytest.mark.django_db
class TestSaveProjectLead:
    """Tests for save_project_lead()."""

    def test_saves_lead(self, make_project):
        project = make_project(name="Lead Target")

        lead = leads_service.save_project_lead(
            make_record(project, form_data={"project_name": "Lead Target"})
        )

        row = Lead.objects.get(id=lead.id)
        assert row.project_id == project.id
        assert row.inquiry_type == InquiryType.DEMO
        assert row.source == LeadSource.CONTACT
        assert row.status == LeadStatus.NEW
        assert row.form_data == {
            "project_name": "Lead Target",
            "type": "project_inquiry",
            "inquiry_type": "demo",
            "message": "Demo requested",
        }
        assert lead.priority == LeadPriority.LOW

    def test_investment_amount_kept_in_form_data(self, make_project):
        project = make_project()

        lead = leads_service.save_project_lead(
            make_record(project, inquiry_type=InquiryType.INVESTMENT, investment_amount=1_500_000)
        )

        assert lead.form_data["investment_amount"] == 1_500_000
        assert lead.priority == LeadPriority.URGENT

    def test_store_failure_raises_lead_save_error(self, make_project):
        project = make_project()

        with patch.object(Lead.objects, "create", side_effect=DatabaseError("insert failed")):
            with pytest.raises(LeadSaveError):
                leads_service.save_project_lead(make_record(project))

        assert Lead.objects.count() == 0


@pytest.mark.django_db
class TestLeadReads:
    """Tests for CRM reads."""

    def test_list_project_leads_only_project_inquiries(self, make_project):
        project = make_project()
        saved = leads_service.save_project_lead(make_record(project))
        Lead.objects.create(
            name="Newsletter",
            email="someone@example.com",
            source=LeadSource.WEBSITE,
            form_data={"type": "newsletter"},
        )

        leads = leads_service.list_project_leads()

        assert [lead.id for lead in leads] == [saved.id]

    def test_lead_stats(self, make_project):
        project = make_project()
        leads_service.save_project_lead(make_record(project))
        leads_service.save_project_lead(make_record(project))
        leads_service.save_project_lead(make_record(project, inquiry_type=InquiryType.PURCHASE))
        Lead.objects.create(name="Manual", email="m@example.com", status=LeadStatus.CONTACTED)

        stats = leads_service.get_lead_stats()

        assert stats.total_leads == 4
        assert stats.by_status == {"new": 3, "contacted": 1}
        assert stats.by_inquiry_type == {"demo": 2, "purchase": 1}
