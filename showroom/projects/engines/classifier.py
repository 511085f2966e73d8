"""
Content Shape Classifier.

Decides whether a project renders with the rich, section-based template or
the minimal fallback template.

The only switch is: key_features non-empty, or content.overview non-empty.
stats and use_cases never make a project rich; they only add sections to a
project that already is.
"""

from showroom.core.enums import ContentShape
from showroom.projects.dto import ProjectDTO


def has_key_features(project: ProjectDTO) -> bool:
    return project.key_features is not None and len(project.key_features) > 0


def has_overview(project: ProjectDTO) -> bool:
    if project.content is None or project.content.overview is None:
        return False
    return project.content.overview != ""


def has_use_cases(project: ProjectDTO) -> bool:
    return project.use_cases is not None and len(project.use_cases) > 0


def has_stats(project: ProjectDTO) -> bool:
    return project.stats is not None and len(project.stats) > 0


def classify(project: ProjectDTO) -> ContentShape:
    """
    Classify a project's content shape.

    Args:
        project: ProjectDTO with parsed content fields

    Returns:
        ContentShape.RICH or ContentShape.FALLBACK
    """
    if has_key_features(project) or has_overview(project):
        return ContentShape.RICH
    return ContentShape.FALLBACK
