"""Onboarding wizard transitions.

Pure functions over ``WizardState``; nothing here touches the database.
"""
from app.models.goal import GoalCreate
from app.models.onboarding import (
    OnboardingAnswers,
    Step1State,
    Step2State,
    Step3State,
    StepView,
    WizardState,
)

TOTAL_STEPS = 3

MISSING_FIELDS_MESSAGE = "Please fill in all fields before continuing."
MISSING_ADDRESS_MESSAGE = "Please enter your address."
INVALID_FREE_TIME_MESSAGE = "Average free time must be a non-negative number."

STEP_COPY = {
    1: ("Your Future Vision", "Tell us about your dreams and available time"),
    2: ("Your Goals & Actions", "Share your goals and current efforts"),
    3: ("Final Details", "Just one more thing to get started"),
}


class WizardError(ValueError):
    """A transition or submit was refused; the message is shown to the user."""


def _is_blank(value: str) -> bool:
    return value == ""


def _check_step1(answers: OnboardingAnswers) -> None:
    if _is_blank(answers.future_aspiration) or _is_blank(answers.average_free_time):
        raise WizardError(MISSING_FIELDS_MESSAGE)


def _check_step2(answers: OnboardingAnswers) -> None:
    if _is_blank(answers.future_goals) or _is_blank(answers.current_actions):
        raise WizardError(MISSING_FIELDS_MESSAGE)


def start() -> Step1State:
    """Fresh wizard with empty answers."""
    return Step1State()


def next_step(state: WizardState) -> WizardState:
    """
    Advance to the following step.

    Args:
        state: Current wizard state

    Returns:
        State for the next step, carrying the same answers

    Raises:
        WizardError: If the current step has blank required fields,
            or the wizard is already on the last step
    """
    if isinstance(state, Step1State):
        _check_step1(state.answers)
        return Step2State(answers=state.answers)
    if isinstance(state, Step2State):
        _check_step2(state.answers)
        return Step3State(answers=state.answers)
    raise WizardError("Already on the last step")


def previous_step(state: WizardState) -> WizardState:
    """Go back one step. Answers are kept; nothing is validated."""
    if isinstance(state, Step3State):
        return Step2State(answers=state.answers)
    if isinstance(state, Step2State):
        return Step1State(answers=state.answers)
    raise WizardError("Already on the first step")


def parse_free_time(text: str) -> float:
    """
    Parse the free-time answer as hours per day.

    Raises:
        WizardError: If the text is not a non-negative number
    """
    try:
        hours = float(text.strip())
    except ValueError:
        raise WizardError(INVALID_FREE_TIME_MESSAGE) from None
    # float() accepts "nan" and "inf"
    if not 0 <= hours < float("inf"):
        raise WizardError(INVALID_FREE_TIME_MESSAGE)
    return hours


def prepare_submission(state: WizardState) -> tuple[str, GoalCreate]:
    """
    Validate a submit request and build what gets persisted.

    All checks run before anything is written, so a refused submit
    never leaves partial records behind.

    Args:
        state: Wizard state; must be on the last step

    Returns:
        Tuple of (address, goal to create)

    Raises:
        WizardError: If not on the last step, a field is blank,
            or the free time is not a number
    """
    if not isinstance(state, Step3State):
        raise WizardError("Onboarding can only be submitted from the last step")

    answers = state.answers
    if _is_blank(answers.address):
        raise WizardError(MISSING_ADDRESS_MESSAGE)
    _check_step1(answers)
    _check_step2(answers)

    goal = GoalCreate(
        future_aspiration=answers.future_aspiration,
        average_free_time_hours=parse_free_time(answers.average_free_time),
        future_goals=answers.future_goals,
        current_actions=answers.current_actions,
    )
    return answers.address, goal


def describe(state: WizardState) -> StepView:
    """Attach step number, progress and copy to a state."""
    title, description = STEP_COPY[state.step]
    return StepView(
        state=state,
        step_number=state.step,
        total_steps=TOTAL_STEPS,
        progress=state.step / TOTAL_STEPS * 100,
        title=title,
        description=description,
    )
