"""Onboarding wizard state definitions.

The wizard is a tagged union of three step states discriminated on ``step``.
Each state carries the full answer draft so going back never loses input.
"""
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class OnboardingAnswers(BaseModel):
    """Questionnaire answers as typed by the user (raw text)."""

    future_aspiration: str = ""
    average_free_time: str = ""  # hours per day, parsed on submit
    future_goals: str = ""
    current_actions: str = ""
    address: str = ""


class Step1State(BaseModel):
    """Future vision: aspiration and available free time."""

    step: Literal[1] = 1
    answers: OnboardingAnswers = Field(default_factory=OnboardingAnswers)


class Step2State(BaseModel):
    """Goals and what the user is currently doing about them."""

    step: Literal[2] = 2
    answers: OnboardingAnswers = Field(default_factory=OnboardingAnswers)


class Step3State(BaseModel):
    """Final details: the address."""

    step: Literal[3] = 3
    answers: OnboardingAnswers = Field(default_factory=OnboardingAnswers)


WizardState = Annotated[
    Union[Step1State, Step2State, Step3State],
    Field(discriminator="step"),
]


class WizardRequest(BaseModel):
    """Request body for wizard transitions and submit."""

    state: WizardState


class StepView(BaseModel):
    """Wizard state plus what a page needs to render the step."""

    state: WizardState
    step_number: int
    total_steps: int
    progress: float
    title: str
    description: str
