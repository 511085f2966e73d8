"""
Project Page Service.

Runs the page pipeline for one navigation:

    fetch projects -> resolve route -> classify content -> compose plan

State machine (see PageState):
- Every load starts in LOADING.
- LOADING -> FOUND when the segment resolves.
- LOADING -> NOT_FOUND when it does not, or when the fetch fails.

Nothing is cached between loads. A fetch failure is logged as a failure
event but is shown to the visitor exactly like a miss.
"""

from dataclasses import dataclass

from showroom.core.enums import ContentShape, PageState
from showroom.projects.dto import ProjectDTO, ProjectPageResponseDTO, RenderPlanDTO
from showroom.projects.engines import classify, compose
from showroom.projects.observability import (
    PageContext,
    TriggerSource,
    create_page_context,
    log_page_event,
)
from showroom.projects.routing import NOT_FOUND, resolve_route

from . import projects_service

REASON_NOT_FOUND = "not_found"
REASON_FETCH_FAILED = "fetch_failed"


class InvalidTransitionError(Exception):
    """Raised when a loader is driven out of LOADING twice."""

    pass


@dataclass
class ProjectPageResult:
    """Terminal outcome of one page load."""

    state: PageState
    reason: str | None = None
    project: ProjectDTO | None = None
    shape: ContentShape | None = None
    plan: RenderPlanDTO | None = None

    @property
    def found(self) -> bool:
        return self.state == PageState.FOUND

    def to_dto(self) -> ProjectPageResponseDTO:
        return ProjectPageResponseDTO(
            state=self.state,
            reason=self.reason,
            project=self.project,
            plan=self.plan,
        )


class ProjectPageLoader:
    """
    One navigation through the page pipeline.

    A loader is single-use: a new path segment means a new loader.
    """

    def __init__(self, path_segment: str, ctx: PageContext | None = None):
        self.path_segment = path_segment
        self.ctx = ctx or create_page_context(path_segment)
        self.state = PageState.LOADING
        self.result: ProjectPageResult | None = None

    def _finish(self, result: ProjectPageResult) -> ProjectPageResult:
        if self.state != PageState.LOADING:
            raise InvalidTransitionError(
                f"Page load for {self.path_segment!r} already {self.state.value}"
            )
        self.state = result.state
        self.result = result
        return result

    def load(self) -> ProjectPageResult:
        """
        Run the pipeline once.

        Returns:
            ProjectPageResult in FOUND or NOT_FOUND. Never raises for fetch
            or resolution failures.
        """
        log_page_event(self.ctx, "load_project_page", "start")

        try:
            projects = projects_service.get_all_projects()
        except projects_service.ProjectFetchError as e:
            log_page_event(
                self.ctx,
                "load_project_page",
                "failure",
                extra={"reason": REASON_FETCH_FAILED},
                error_summary=type(e.__cause__ or e).__name__,
            )
            return self._finish(
                ProjectPageResult(state=PageState.NOT_FOUND, reason=REASON_FETCH_FAILED)
            )

        project = resolve_route(self.path_segment, projects)
        if project is NOT_FOUND:
            log_page_event(
                self.ctx,
                "load_project_page",
                "not_found",
                extra={"candidates": len(projects)},
            )
            return self._finish(
                ProjectPageResult(state=PageState.NOT_FOUND, reason=REASON_NOT_FOUND)
            )

        shape = classify(project)
        plan = compose(project, shape)

        log_page_event(
            self.ctx,
            "load_project_page",
            "success",
            extra={
                "project_id": str(project.id),
                "template": shape.value,
                "sections": plan.section_kinds(),
            },
        )
        return self._finish(
            ProjectPageResult(
                state=PageState.FOUND,
                project=project,
                shape=shape,
                plan=plan,
            )
        )


def load_project_page(
    path_segment: str, trigger_source: TriggerSource = "page"
) -> ProjectPageResult:
    """
    Load the project page for a catch-all path segment.

    Args:
        path_segment: Raw segment from the URL
        trigger_source: "page" for HTML views, "api" for the JSON endpoint

    Returns:
        ProjectPageResult
    """
    ctx = create_page_context(path_segment, trigger_source=trigger_source)
    return ProjectPageLoader(path_segment, ctx=ctx).load()
