"""
Wizard service: step completion predicates and per-user session persistence.

Navigation rules live in wizard_state_machine; this service loads the
user's session, evaluates the predicate of the step being left, applies the
transition and stores the result.
"""
import logging
from dataclasses import replace
from typing import Awaitable, Callable, Dict, List, Optional

from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.core.exceptions import InvalidStepError
from app.models.wizard import WizardSession, WizardStepConfiguration
from app.services import wizard_state_machine as machine
from app.services.dependency_rules import DependencyRules, EntityType
from app.services.wizard_state_machine import WizardState, WizardStep, TransitionResult, STEP_TITLES


logger = logging.getLogger(__name__)


class WizardService:
    """Wizard navigation for one user."""

    def __init__(self, db: AsyncSession, user_id: int, steps: Optional[List[str]] = None):
        self.db = db
        self.user_id = user_id
        self.steps = machine.validate_steps(steps or settings.WIZARD_STEPS)
        self.rules = DependencyRules(db, user_id)

    # ==================== PREDICATES ====================

    async def _has_any(self, entity_type: EntityType) -> bool:
        return await self.rules.count(entity_type) > 0

    async def _confirmed(self) -> bool:
        session = await self._find_session()
        return bool(session and session.confirmed)

    def _predicates(self) -> Dict[str, Callable[[], Awaitable[bool]]]:
        return {
            WizardStep.INVENTORY_GROUPS: lambda: self._has_any(EntityType.INVENTORY_GROUP),
            WizardStep.TASK_SEQUENCES: lambda: self._has_any(EntityType.TASK_SEQUENCE),
            WizardStep.PICK_STRATEGIES: lambda: self._has_any(EntityType.HU_FORMATION),
            WizardStep.WORK_ORDER_MANAGEMENT: lambda: self._has_any(EntityType.WORK_ORDER_MANAGEMENT),
            WizardStep.STOCK_ALLOCATION: self.rules.any_group_fully_allocated,
            WizardStep.REVIEW_CONFIRM: self._confirmed,
        }

    async def is_step_complete(self, step: int) -> bool:
        """Evaluate the completion predicate of a step number."""
        key = self.steps[step - 1]
        return await self._predicates()[key]()

    async def status(self) -> dict:
        """Predicate result of every step."""
        rows = []
        for number, key in enumerate(self.steps, start=1):
            complete = await self.is_step_complete(number)
            rows.append({
                "number": number,
                "key": key,
                "title": STEP_TITLES[key],
                "complete": complete,
                "message": None if complete else machine.BLOCKED_MESSAGES[key],
            })
        return {"steps": rows, "all_complete": all(r["complete"] for r in rows)}

    # ==================== SESSION ====================

    async def _find_session(self) -> Optional[WizardSession]:
        result = await self.db.execute(
            select(WizardSession).where(WizardSession.user_id == self.user_id)
        )
        return result.scalar_one_or_none()

    async def _load(self) -> WizardState:
        session = await self._find_session()
        if session is None:
            return machine.initial_state(self.steps)
        return machine.restore_state(
            self.steps, session.current_step, session.completed_steps, session.confirmed
        )

    async def _save(self, state: WizardState) -> None:
        session = await self._find_session()
        if session is None:
            session = WizardSession(user_id=self.user_id)
            self.db.add(session)
        session.current_step = state.current_step
        session.completed_steps = sorted(state.completed_steps)
        session.confirmed = state.confirmed
        await self.db.flush()

    async def get_state(self) -> WizardState:
        return await self._load()

    # ==================== TRANSITIONS ====================

    async def go_next(self) -> TransitionResult:
        state = await self._load()
        complete = await self.is_step_complete(state.current_step)
        result = machine.go_next(state, complete)
        if complete:
            await self._save(result.state)
        else:
            logger.warning(
                "Wizard next blocked for user %s on step %s (%s)",
                self.user_id, state.current_step, state.current_key,
            )
        return result

    async def go_previous(self) -> TransitionResult:
        result = machine.go_previous(await self._load())
        await self._save(result.state)
        return result

    async def jump_to(self, step: int) -> TransitionResult:
        result = machine.jump_to(await self._load(), step)
        await self._save(result.state)
        return result

    async def reset(self) -> TransitionResult:
        """Back to step 1; saved per-step draft data is cleared too."""
        result = machine.reset(await self._load())
        await self.db.execute(
            delete(WizardStepConfiguration).where(WizardStepConfiguration.user_id == self.user_id)
        )
        await self._save(result.state)
        logger.info("Wizard reset for user %s", self.user_id)
        return result

    async def confirm(self) -> TransitionResult:
        result = machine.confirm(await self._load())
        await self._save(result.state)
        logger.info("Configuration confirmed by user %s", self.user_id)
        return result

    async def mark_steps_complete(self, keys: List[str]) -> WizardState:
        """Record steps as completed without moving the pointer (after a template)."""
        state = await self._load()
        numbers = {state.number_of(k) for k in keys} - {None}
        state = replace(state, completed_steps=state.completed_steps | numbers)
        await self._save(state)
        return state

    async def revoke_confirmation(self) -> WizardState:
        """Clear the confirmation once the reviewed configuration has been replaced."""
        state = await self._load()
        review = state.number_of(WizardStep.REVIEW_CONFIRM)
        state = replace(state, confirmed=False, completed_steps=state.completed_steps - {review})
        await self._save(state)
        return state

    # ==================== STEP DATA ====================

    async def list_step_configurations(self) -> List[WizardStepConfiguration]:
        result = await self.db.execute(
            select(WizardStepConfiguration)
            .where(WizardStepConfiguration.user_id == self.user_id)
            .order_by(WizardStepConfiguration.step)
        )
        return list(result.scalars().all())

    async def get_step_configuration(self, step: int) -> Optional[WizardStepConfiguration]:
        result = await self.db.execute(
            select(WizardStepConfiguration).where(
                WizardStepConfiguration.user_id == self.user_id,
                WizardStepConfiguration.step == step,
            )
        )
        return result.scalar_one_or_none()

    async def save_step_configuration(self, step: int, data: dict, is_complete: bool = False) -> WizardStepConfiguration:
        """Upsert the draft data of a step."""
        if step < 1 or step > len(self.steps):
            raise InvalidStepError(step, len(self.steps))
        config = await self.get_step_configuration(step)
        if config is None:
            config = WizardStepConfiguration(user_id=self.user_id, step=step)
            self.db.add(config)
        config.data = dict(data)
        config.is_complete = is_complete
        await self.db.flush()
        return config

    # ==================== SERIALIZATION ====================

    def describe(self, state: WizardState) -> dict:
        """State as returned by the API."""
        return {
            "current_step": state.current_step,
            "current_step_key": state.current_key,
            "step_count": state.step_count,
            "completed_steps": sorted(state.completed_steps),
            "confirmed": state.confirmed,
            "steps": [
                {
                    "number": number,
                    "key": key,
                    "title": STEP_TITLES[key],
                    "completed": number in state.completed_steps,
                    "current": number == state.current_step,
                }
                for number, key in enumerate(state.steps, start=1)
            ],
        }

    def describe_transition(self, result: TransitionResult) -> dict:
        return {
            "advanced": result.advanced,
            "message": result.message,
            "state": self.describe(result.state),
        }
