"""Completion progress of a project derived from its work items.

The project list computes the sums in SQL, the project detail sums the loaded
work items in Python. Both go through :func:`completion_percentage` so the two
figures agree for the same rows.
"""
import math
from typing import Iterable

from sitetrack.db.models.work_item import WorkItem


def round_half_up(value: float, places: int = 2) -> float:
    factor = 10 ** places
    return math.floor(value * factor + 0.5) / factor


def completion_percentage(total_completed: float | None, total_design: float | None) -> float:
    if not total_design or total_design <= 0:
        return 0.0
    return round_half_up((total_completed or 0.0) / total_design * 100)


def sum_quantities(work_items: Iterable[WorkItem]) -> tuple[float, float]:
    """Return ``(total_design, total_completed)`` over ``work_items``."""
    total_design = 0.0
    total_completed = 0.0
    for wi in work_items:
        total_design += wi.design_quantity or 0.0
        total_completed += wi.completed_quantity or 0.0
    return total_design, total_completed


def project_completion(work_items: Iterable[WorkItem]) -> float:
    total_design, total_completed = sum_quantities(work_items)
    return completion_percentage(total_completed, total_design)
