"""
Showroom canonical domain models.

- Project: a sellable/showcased software product. Drives the public project
  pages and the admin catalog.
- Lead: a captured inquiry. Project leads carry a nullable project FK.

Rich content fields (content, key_features, stats, use_cases, purchase_info)
are loosely typed JSON at rest. They are parsed into typed DTOs
(showroom.projects.dto) before any rendering decision is taken.
"""

import uuid

from django.db import models

from .enums import (
    InquiryType,
    LeadSource,
    LeadStatus,
    ProjectCategory,
    ProjectStatus,
)


# =============================================================================
# ABSTRACT BASE CLASSES
# =============================================================================


class TimestampedModel(models.Model):
    """
    Abstract base class with created_at and updated_at timestamps.
    """

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


# =============================================================================
# PROJECT
# =============================================================================


class Project(TimestampedModel):
    """
    Showcased software product.

    route is an optional explicit path ("/my-project"). When blank the public
    route is derived from the name (see showroom.projects.routing). Writers
    store routes already normalised; the resolver compares them verbatim.

    lead_count is only ever incremented, as a side effect of inquiry capture.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    category = models.CharField(
        max_length=32,
        choices=ProjectCategory.choices,
        default=ProjectCategory.FEATURED,
    )
    status = models.CharField(
        max_length=32,
        choices=ProjectStatus.choices,
        default=ProjectStatus.CONCEPT,
    )
    hero_image_url = models.URLField(max_length=500, blank=True, null=True)
    demo_url = models.URLField(max_length=500, blank=True, null=True)
    route = models.CharField(max_length=255, blank=True, null=True)

    # Commercial
    price = models.DecimalField(max_digits=14, decimal_places=2, null=True, blank=True)
    investment_amount = models.DecimalField(
        max_digits=14, decimal_places=2, null=True, blank=True
    )
    investment_received = models.DecimalField(
        max_digits=14, decimal_places=2, null=True, blank=True
    )

    # Rich content (each independently optional)
    content = models.JSONField(null=True, blank=True)
    key_features = models.JSONField(null=True, blank=True)
    stats = models.JSONField(null=True, blank=True)
    use_cases = models.JSONField(null=True, blank=True)
    purchase_info = models.JSONField(null=True, blank=True)

    # Catalog flags
    is_public = models.BooleanField(default=True)
    is_featured = models.BooleanField(default=False)
    priority_order = models.IntegerField(default=0)

    lead_count = models.PositiveIntegerField(default=0)

    class Meta:
        db_table = "project"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["category", "is_public"], name="project_categor_3f5a1e_idx"),
            models.Index(fields=["is_public", "is_featured"], name="project_is_publ_8c2d4b_idx"),
        ]

    def __str__(self):
        return self.name


# =============================================================================
# LEAD
# =============================================================================


class Lead(TimestampedModel):
    """
    Captured inquiry.

    Project inquiries keep inquiry_type and message in dedicated columns and
    mirror them into form_data (type="project_inquiry") for the CRM views.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    project = models.ForeignKey(
        Project,
        on_delete=models.SET_NULL,
        related_name="leads",
        null=True,
        blank=True,
    )
    name = models.CharField(max_length=255)
    email = models.EmailField()
    company = models.CharField(max_length=255, blank=True, null=True)
    phone = models.CharField(max_length=64, blank=True, null=True)
    inquiry_type = models.CharField(
        max_length=32,
        choices=InquiryType.choices,
        blank=True,
        null=True,
    )
    message = models.TextField(blank=True, null=True)
    source = models.CharField(
        max_length=32,
        choices=LeadSource.choices,
        default=LeadSource.CONTACT,
    )
    status = models.CharField(
        max_length=32,
        choices=LeadStatus.choices,
        default=LeadStatus.NEW,
    )
    form_data = models.JSONField(default=dict, blank=True)

    class Meta:
        db_table = "lead"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["project", "created_at"], name="lead_project_6b1f0c_idx"),
            models.Index(fields=["status", "created_at"], name="lead_status_2e9a7d_idx"),
        ]

    def __str__(self):
        return f"{self.name} <{self.email}>"
