"""Landing page content models."""
from pydantic import BaseModel

from app.utils.presentation import CallToAction


class Feature(BaseModel):
    """One marketing feature blurb."""

    title: str
    description: str


class LandingPage(BaseModel):
    """Marketing page shown to visitors without a session."""

    headline: str
    tagline: str
    features: list[Feature]
    calls_to_action: list[CallToAction]
    closing_headline: str
    closing_tagline: str
    closing_call_to_action: CallToAction
