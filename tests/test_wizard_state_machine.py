import pytest
from hypothesis import given
from hypothesis import strategies as st

from app.core.exceptions import InvalidStepError, ValidationError
from app.services import wizard_state_machine as machine
from app.services.wizard_state_machine import WizardStep


STEPS = WizardStep.all()


def test_initial_state_starts_at_step_one():
    state = machine.initial_state(STEPS)
    assert state.current_step == 1
    assert state.step_count == 6
    assert state.completed_steps == frozenset()
    assert not state.confirmed


def test_next_blocked_when_step_incomplete():
    state = machine.initial_state(STEPS)
    result = machine.go_next(state, current_step_complete=False)
    assert not result.advanced
    assert result.state == state
    assert "inventory group" in result.message


def test_next_advances_and_records_completion():
    result = machine.go_next(machine.initial_state(STEPS), current_step_complete=True)
    assert result.advanced
    assert result.state.current_step == 2
    assert result.state.completed_steps == {1}
    assert result.message is None


def test_next_on_last_step_stays_put():
    state = machine.jump_to(machine.initial_state(STEPS), 6).state
    result = machine.go_next(state, current_step_complete=True)
    assert not result.advanced
    assert result.state.current_step == 6
    assert 6 in result.state.completed_steps


def test_previous_never_goes_below_one():
    state = machine.initial_state(STEPS)
    result = machine.go_previous(state)
    assert not result.advanced
    assert result.state.current_step == 1

    state = machine.jump_to(state, 4).state
    assert machine.go_previous(state).state.current_step == 3


@pytest.mark.parametrize("step", [0, 7, -1])
def test_jump_outside_range_raises(step):
    state = machine.initial_state(STEPS)
    with pytest.raises(InvalidStepError):
        machine.jump_to(state, step)


def test_jump_skips_checks():
    result = machine.jump_to(machine.initial_state(STEPS), 5)
    assert result.state.current_step == 5
    assert result.state.completed_steps == frozenset()


def test_reset_clears_everything():
    state = machine.initial_state(STEPS)
    state = machine.go_next(state, True).state
    state = machine.jump_to(state, 6).state
    state = machine.confirm(state).state

    result = machine.reset(state)
    assert result.state.current_step == 1
    assert result.state.completed_steps == frozenset()
    assert not result.state.confirmed


def test_confirm_only_from_review_step():
    state = machine.initial_state(STEPS)
    with pytest.raises(ValidationError):
        machine.confirm(state)

    state = machine.jump_to(state, 6).state
    result = machine.confirm(state)
    assert result.state.confirmed
    assert 6 in result.state.completed_steps


actions = st.lists(
    st.one_of(
        st.tuples(st.just("next"), st.booleans()),
        st.tuples(st.just("previous"), st.none()),
        st.tuples(st.just("jump"), st.integers(min_value=-2, max_value=9)),
        st.tuples(st.just("reset"), st.none()),
    ),
    max_size=40,
)


@given(step_count=st.integers(min_value=1, max_value=len(STEPS)), sequence=actions)
def test_pointer_stays_in_bounds_for_any_action_sequence(step_count, sequence):
    state = machine.initial_state(STEPS[:step_count])
    for name, arg in sequence:
        if name == "next":
            result = machine.go_next(state, current_step_complete=arg)
            if not arg:
                assert not result.advanced
                assert result.state == state
        elif name == "previous":
            result = machine.go_previous(state)
        elif name == "jump":
            if 1 <= arg <= step_count:
                result = machine.jump_to(state, arg)
                assert result.state.current_step == arg
            else:
                with pytest.raises(InvalidStepError):
                    machine.jump_to(state, arg)
                continue
        else:
            result = machine.reset(state)
        state = result.state
        assert 1 <= state.current_step <= state.step_count == step_count
        assert all(1 <= n <= step_count for n in state.completed_steps)


def test_restore_state_clamps_stored_values():
    state = machine.restore_state(STEPS[:3], current_step=5, completed_steps=[1, 2, 4, 6])
    assert state.current_step == 3
    assert state.completed_steps == {1, 2}


def test_validate_steps_rejects_unknown_and_repeated_keys():
    with pytest.raises(ValidationError):
        machine.validate_steps(["INVENTORY_GROUPS", "SHIPPING"])
    with pytest.raises(ValidationError):
        machine.validate_steps(["INVENTORY_GROUPS", "inventory_groups"])
    with pytest.raises(ValidationError):
        machine.validate_steps([])
