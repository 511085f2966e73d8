"""
Project route derivation and resolution.

derive_route is the one normalisation shared by the resolver and the admin
writers (Django admin, admin API). Both sides must agree byte for byte:
lower-case the name, then replace every maximal run of characters outside
[a-z0-9] with a single hyphen.

resolve_route maps a catch-all path segment to a project. A miss is the
NOT_FOUND sentinel, not an exception.
"""

from __future__ import annotations

import re
from typing import Final, Iterable

from .dto import ProjectDTO

_NON_ALNUM_RUN = re.compile(r"[^a-z0-9]+")

# Top-level segments the URLconf routes before the project catch-all.
# A stored route must never use one of these or the page is unreachable.
RESERVED_SEGMENTS: Final = frozenset(
    {
        "admin",
        "api",
        "contact",
        "health",
        "static",
    }
)


class _NotFound:
    """Resolution outcome for a path segment that matches no project."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOT_FOUND"


NOT_FOUND: Final = _NotFound()


def derive_route(name: str) -> str:
    """
    Derive the public route of a project from its display name.

    >>> derive_route("My Cool App!")
    '/my-cool-app-'
    """
    return "/" + _NON_ALNUM_RUN.sub("-", name.lower())


def normalize_route(value: str) -> str:
    """
    Normalise an explicit route typed into the admin console.

    Leading slashes and surrounding whitespace are dropped, then the same
    derivation as derive_route is applied ("/My Project" -> "/my-project").
    """
    return derive_route(value.strip().lstrip("/"))


def is_reserved(route: str) -> bool:
    """True if the first segment of route is routed before the catch-all."""
    segment = route.strip("/").split("/", 1)[0]
    return segment in RESERVED_SEGMENTS


def route_for(project: ProjectDTO) -> str:
    """Public route of a project: explicit route if stored, else derived."""
    if project.route:
        return project.route
    return derive_route(project.name)


def matches(project: ProjectDTO, path_segment: str) -> bool:
    """
    True if path_segment addresses project.

    The explicit route is compared verbatim; only the derived route is
    normalised.
    """
    target = "/" + path_segment
    if project.route is not None and project.route == target:
        return True
    return derive_route(project.name) == target


def resolve_route(
    path_segment: str, projects: Iterable[ProjectDTO]
) -> ProjectDTO | _NotFound:
    """
    Resolve a path segment to the first matching project.

    Args:
        path_segment: Raw segment from the catch-all URL (no slashes)
        projects: Candidates in resolver order (newest first)

    Returns:
        The first matching ProjectDTO, or NOT_FOUND. Never raises.
    """
    if not path_segment:
        return NOT_FOUND

    for project in projects:
        if matches(project, path_segment):
            return project

    return NOT_FOUND
