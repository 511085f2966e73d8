"""
Showroom domain enums.

All enums are defined as Django TextChoices. Project category and status are
stored with their display values ("For Sale", "MVP") because the frontend and
the admin console compare against those literals. Lead enums are stored as
lowercase strings.
"""

from django.db import models


class ProjectCategory(models.TextChoices):
    """Presentational category of a showcased project."""
    FEATURED = "Featured", "Featured"
    INVESTMENT = "Investment", "Investment"
    FOR_SALE = "For Sale", "For Sale"
    INTERNAL = "Internal", "Internal"


class ProjectStatus(models.TextChoices):
    """Lifecycle badge of a showcased project."""
    MVP = "MVP", "MVP"
    LIVE = "Live", "Live"
    BETA = "Beta", "Beta"
    PRIVATE = "Private", "Private"
    FOR_SALE = "For Sale", "For Sale"
    CONCEPT = "Concept", "Concept"


class InquiryType(models.TextChoices):
    """Kind of interest captured when a call-to-action is used."""
    DEMO = "demo", "Demo"
    INVESTMENT = "investment", "Investment"
    PURCHASE = "purchase", "Purchase"
    CONTACT = "contact", "Contact"
    PARTNERSHIP = "partnership", "Partnership"


class LeadStatus(models.TextChoices):
    """CRM pipeline status of a lead."""
    NEW = "new", "New"
    CONTACTED = "contacted", "Contacted"
    QUALIFIED = "qualified", "Qualified"
    CONVERTED = "converted", "Converted"
    CLOSED = "closed", "Closed"
    ARCHIVED = "archived", "Archived"


class LeadPriority(models.TextChoices):
    """
    Follow-up priority of a lead.

    Not stored; inferred from inquiry type and amount when a lead is read.
    """
    LOW = "low", "Low"
    MEDIUM = "medium", "Medium"
    HIGH = "high", "High"
    URGENT = "urgent", "Urgent"


class LeadSource(models.TextChoices):
    """Where a lead entered the CRM."""
    CONTACT = "contact", "Contact"
    CUSTOM_BUILD = "custom-build", "Custom Build"
    INVESTOR = "investor", "Investor"
    AI_AGENT = "ai-agent", "AI Agent"
    WEBSITE = "website", "Website"


class ContentShape(models.TextChoices):
    """
    Which page template a project renders with.

    rich: key_features non-empty or content.overview non-empty.
    fallback: everything else.
    """
    RICH = "rich", "Rich"
    FALLBACK = "fallback", "Fallback"


class PageState(models.TextChoices):
    """
    Project page state machine states.

    State transitions (one navigation = one run):
    - loading -> found (route resolved, plan composed)
    - loading -> not_found (no matching route, or the project fetch failed)

    found and not_found are terminal until the path segment changes, which
    starts a new run in loading. Nothing is cached across runs.
    """
    LOADING = "loading", "Loading"
    FOUND = "found", "Found"
    NOT_FOUND = "not_found", "Not Found"
