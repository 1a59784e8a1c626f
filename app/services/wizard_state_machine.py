"""
Wizard Step State Machine

This module is the SINGLE SOURCE OF TRUTH for wizard navigation.
It is pure: no database access. Step completion is evaluated elsewhere and
passed in, so every transition here can be tested without I/O.

Flow:
    1. INVENTORY_GROUPS  ->  2. TASK_SEQUENCES  ->  3. PICK_STRATEGIES
    ->  4. WORK_ORDER_MANAGEMENT  ->  5. STOCK_ALLOCATION  ->  6. REVIEW_CONFIRM

Rules:
- go_next() only moves forward when the current step is complete; a blocked
  move is reported in the result, it never raises.
- go_previous() is never blocked.
- jump_to() skips ahead without checks, but only inside [1, N].
"""

from dataclasses import dataclass, field, replace
from typing import Dict, FrozenSet, List, Optional, Sequence

from app.core.exceptions import InvalidStepError, ValidationError


# =============================================================================
# STEP DEFINITIONS (Single Source of Truth)
# =============================================================================

class WizardStep:
    """Step keys - use these instead of strings."""
    INVENTORY_GROUPS = "INVENTORY_GROUPS"
    TASK_SEQUENCES = "TASK_SEQUENCES"
    PICK_STRATEGIES = "PICK_STRATEGIES"
    WORK_ORDER_MANAGEMENT = "WORK_ORDER_MANAGEMENT"
    STOCK_ALLOCATION = "STOCK_ALLOCATION"
    REVIEW_CONFIRM = "REVIEW_CONFIRM"

    @classmethod
    def all(cls) -> List[str]:
        return [
            cls.INVENTORY_GROUPS, cls.TASK_SEQUENCES, cls.PICK_STRATEGIES,
            cls.WORK_ORDER_MANAGEMENT, cls.STOCK_ALLOCATION, cls.REVIEW_CONFIRM,
        ]


STEP_TITLES: Dict[str, str] = {
    WizardStep.INVENTORY_GROUPS: "Inventory Groups",
    WizardStep.TASK_SEQUENCES: "Task Sequences",
    WizardStep.PICK_STRATEGIES: "Pick Strategies & HU Formation",
    WizardStep.WORK_ORDER_MANAGEMENT: "Work Order Management",
    WizardStep.STOCK_ALLOCATION: "Stock Allocation",
    WizardStep.REVIEW_CONFIRM: "Review & Confirm",
}

# Warning shown when go_next() is refused on a step
BLOCKED_MESSAGES: Dict[str, str] = {
    WizardStep.INVENTORY_GROUPS: "Please create at least one inventory group before proceeding.",
    WizardStep.TASK_SEQUENCES: "Please configure at least one task sequence before proceeding.",
    WizardStep.PICK_STRATEGIES: (
        "Please configure HU formation for at least one pick strategy before proceeding."
    ),
    WizardStep.WORK_ORDER_MANAGEMENT: (
        "Please configure work order management for at least one pick strategy before proceeding."
    ),
    WizardStep.STOCK_ALLOCATION: (
        "Please create and configure at least one inventory group with PICK and PUT "
        "strategies before proceeding."
    ),
    WizardStep.REVIEW_CONFIRM: "Please confirm the configuration to finish the wizard.",
}


def validate_steps(steps: Sequence[str]) -> List[str]:
    """
    Validate a configured step list.

    Raises:
        ValidationError: unknown key, repeated key or empty list
    """
    steps = [s.upper() for s in steps]
    if not steps:
        raise ValidationError("The wizard needs at least one step")
    unknown = [s for s in steps if s not in WizardStep.all()]
    if unknown:
        raise ValidationError(
            f"Unknown wizard steps: {', '.join(unknown)}",
            allowed=WizardStep.all(),
        )
    if len(set(steps)) != len(steps):
        raise ValidationError("Wizard steps must not repeat")
    return steps


# =============================================================================
# STATE
# =============================================================================

@dataclass(frozen=True)
class WizardState:
    """Immutable navigation state; steps are numbered from 1."""
    steps: tuple
    current_step: int = 1
    completed_steps: FrozenSet[int] = field(default_factory=frozenset)
    confirmed: bool = False

    @property
    def step_count(self) -> int:
        return len(self.steps)

    @property
    def current_key(self) -> str:
        return self.steps[self.current_step - 1]

    def number_of(self, key: str) -> Optional[int]:
        """Step number of a key, or None when the key is not in this flow."""
        try:
            return self.steps.index(key) + 1
        except ValueError:
            return None


@dataclass(frozen=True)
class TransitionResult:
    """Outcome of a navigation action."""
    state: WizardState
    advanced: bool
    message: Optional[str] = None


def initial_state(steps: Sequence[str]) -> WizardState:
    """Fresh state at step 1 with nothing completed."""
    return WizardState(steps=tuple(validate_steps(steps)))


def restore_state(
    steps: Sequence[str],
    current_step: int,
    completed_steps: Sequence[int],
    confirmed: bool = False
) -> WizardState:
    """
    Rebuild a state from stored values.

    Values that fall outside the step list (e.g. after WIZARD_STEPS was
    shortened) are clamped or dropped.
    """
    steps = tuple(validate_steps(steps))
    count = len(steps)
    current = min(max(int(current_step or 1), 1), count)
    completed = frozenset(s for s in completed_steps if 1 <= s <= count)
    return WizardState(steps=steps, current_step=current, completed_steps=completed, confirmed=confirmed)


# =============================================================================
# TRANSITIONS
# =============================================================================

def go_next(state: WizardState, current_step_complete: bool) -> TransitionResult:
    """
    Advance one step when the current step is complete.

    The current step is recorded as completed; on the last step the pointer
    stays where it is. When the step is not complete the state is returned
    unchanged with the step's warning message.
    """
    if not current_step_complete:
        return TransitionResult(
            state=state,
            advanced=False,
            message=BLOCKED_MESSAGES.get(state.current_key),
        )

    completed = state.completed_steps | {state.current_step}
    next_step = min(state.current_step + 1, state.step_count)
    return TransitionResult(
        state=replace(state, current_step=next_step, completed_steps=completed),
        advanced=next_step != state.current_step,
    )


def go_previous(state: WizardState) -> TransitionResult:
    """Move back one step, never below step 1. Completion is untouched."""
    previous_step = max(state.current_step - 1, 1)
    return TransitionResult(
        state=replace(state, current_step=previous_step),
        advanced=previous_step != state.current_step,
    )


def jump_to(state: WizardState, step: int) -> TransitionResult:
    """
    Go directly to a step, without checking earlier steps.

    Raises:
        InvalidStepError: step outside [1, N]; the state is not changed
    """
    if not isinstance(step, int) or step < 1 or step > state.step_count:
        raise InvalidStepError(step, state.step_count)
    return TransitionResult(
        state=replace(state, current_step=step),
        advanced=step != state.current_step,
    )


def reset(state: WizardState) -> TransitionResult:
    """Back to step 1 with nothing completed and nothing confirmed."""
    return TransitionResult(state=initial_state(state.steps), advanced=state.current_step != 1)


def confirm(state: WizardState) -> TransitionResult:
    """
    Confirm the configuration from the review step.

    Raises:
        ValidationError: the current step is not the review step
    """
    if state.current_key != WizardStep.REVIEW_CONFIRM:
        raise ValidationError(
            "The configuration can only be confirmed from the review step",
            current_step=state.current_step,
        )
    completed = state.completed_steps | {state.current_step}
    return TransitionResult(
        state=replace(state, completed_steps=completed, confirmed=True),
        advanced=False,
    )
