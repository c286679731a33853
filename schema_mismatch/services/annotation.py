"""
Mismatch annotation.

Builds a copy of the validated data where each failing location is
overwritten by a marker string: which icon, what value was found, and the
engine's message. The original data is only ever read.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from pydantic_core import to_json

from schema_mismatch.schemas.result import Issue, IssuesStyles
from schema_mismatch.services.paths import MISSING, clone_tree, get_path, set_path

logger = logging.getLogger(__name__)


def render_value(value: Any) -> str:
    """Compact JSON literal with single quotes, or ``undefined`` when absent."""
    if value is MISSING:
        return "undefined"
    return to_json(value, fallback=str).decode().replace('"', "'")


def build_marker(issue: Issue, value: Any, styles: IssuesStyles) -> str:
    if issue.is_missing:
        return f"{styles.icon_property_missing} Missing property"
    return f" {styles.icon_property_error} {render_value(value)} {issue.message}"


def annotate(data: Any, issues: Sequence[Issue], styles: IssuesStyles) -> Any:
    """
    Return a deep copy of ``data`` with a marker written at each issue path.
    Issues are applied in the given order, so a later issue on the same
    path overwrites the earlier marker.
    """
    mismatches = clone_tree(data)

    for issue in issues:
        if not issue.path:
            logger.warning("Skipping issue without a path: %s", issue.message)
            continue
        if isinstance(mismatches, tuple):
            mismatches = list(mismatches)
        if not isinstance(mismatches, (dict, list)):
            logger.warning(
                "Skipping issue at %s: data root is a %s",
                issue.accessor,
                type(mismatches).__name__,
            )
            continue

        # Value comes from the original: earlier markers may already sit
        # on an overlapping path in the copy.
        value = get_path(data, issue.path)
        marker = build_marker(issue, value, styles)
        try:
            set_path(mismatches, issue.path, marker)
        except TypeError:
            logger.warning("Skipping issue at %s: path does not fit the data", issue.accessor)
            continue
        logger.debug("Flagged %s: %s", issue.accessor, marker)

    return mismatches
