"""Presentation helpers shared by the landing page and the dashboard."""
import math
from enum import Enum
from typing import Optional

from pydantic import BaseModel


class ButtonVariant(str, Enum):
    """Button styles a client knows how to draw."""

    DEFAULT = "default"
    HERO = "hero"
    SECONDARY = "secondary"


class CallToAction(BaseModel):
    """A labelled link rendered as a button."""

    label: str
    href: str
    variant: ButtonVariant = ButtonVariant.DEFAULT


def hero_button(label: str, href: str) -> CallToAction:
    """Primary, attention-grabbing call to action."""
    return CallToAction(label=label, href=href, variant=ButtonVariant.HERO)


def secondary_button(label: str, href: str) -> CallToAction:
    return CallToAction(label=label, href=href, variant=ButtonVariant.SECONDARY)


def progress_percentage(completed: int, total: int) -> float:
    """
    Share of completed tasks, 0-100.

    Args:
        completed: Number of completed tasks
        total: Total number of tasks

    Returns:
        completed / total * 100, or 0 when there are no tasks

    Examples:
        >>> progress_percentage(1, 4)
        25.0
        >>> progress_percentage(0, 0)
        0.0
    """
    if total <= 0:
        return 0.0
    return completed / total * 100


def format_progress(percentage: float) -> Optional[str]:
    """
    Label drawn inside the progress bar.

    The bar is too narrow for text at low values, so no label is returned
    at or below 20%.

    Examples:
        >>> format_progress(66.666)
        '67%'
        >>> format_progress(20) is None
        True
    """
    if percentage <= 20:
        return None
    return f"{math.floor(percentage + 0.5)}%"
