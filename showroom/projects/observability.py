"""
Observability utilities for the project page pipeline.

Provides structured logging for page loads and lead captures. Every pipeline
entry point logs a "start" event and exactly one terminal event carrying
request_id, path_segment, operation and status.

PageContext is an in-memory context object. It is NOT persisted.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Literal, Mapping
from uuid import UUID, uuid4

logger = logging.getLogger("showroom.pages")

Status = Literal["start", "success", "not_found", "partial", "failure"]
TriggerSource = Literal["page", "api"]


@dataclass(frozen=True)
class PageContext:
    """
    Identity of one navigation (or one CTA activation).

    Attributes:
        path_segment: Raw segment the router handed to the catch-all
        trigger_source: HTML page request or JSON API request
        request_id: Unique UUID for this run (auto-generated if not provided)
    """

    path_segment: str
    trigger_source: TriggerSource = "page"
    request_id: UUID = field(default_factory=uuid4)


def create_page_context(
    path_segment: str,
    trigger_source: TriggerSource = "page",
    request_id: UUID | None = None,
) -> PageContext:
    """
    Factory function to create a PageContext.

    Generates a request_id if not provided.
    """
    return PageContext(
        path_segment=path_segment,
        trigger_source=trigger_source,
        request_id=request_id or uuid4(),
    )


def log_page_event(
    ctx: PageContext,
    operation: str,
    status: Status,
    extra: Mapping[str, Any] | None = None,
    error_summary: str | None = None,
) -> None:
    """
    Log a structured page pipeline event.

    The log payload always includes request_id, path_segment, trigger_source,
    operation and status. failure events are logged at ERROR, the rest at
    INFO.

    Args:
        ctx: PageContext for this run
        operation: Name of the operation (e.g., "load_project_page")
        status: Current status
        extra: Optional additional fields to include in the log
        error_summary: Short error description for failure status
    """
    payload: dict[str, Any] = {
        "request_id": str(ctx.request_id),
        "path_segment": ctx.path_segment,
        "trigger_source": ctx.trigger_source,
        "operation": operation,
        "status": status,
    }

    if error_summary:
        payload["error_summary"] = error_summary

    if extra:
        payload.update(extra)

    level = logging.ERROR if status == "failure" else logging.INFO
    logger.log(level, "page_event", extra=payload)
