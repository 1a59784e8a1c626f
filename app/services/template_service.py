"""
One-click templates, quick setup and configuration export.

A bundle is applied in a fixed order inside the request transaction:

    groups -> task sequences -> pick strategies -> HU formation / work order
    management per strategy -> stock allocation pairs per group -> task
    planning per group -> task execution per planning

Any failure rolls back everything the bundle created, including the removal
of the previous configuration when replace_existing is set.
"""
import logging
from collections import Counter
from datetime import datetime, timezone
from typing import Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.core.default_configurations import DEFAULT_BUNDLE, DISTRIBUTION_CENTER_TEMPLATE
from app.core.exceptions import ConfigurationError, NotFoundError, ValidationError
from app.models.template import OneClickTemplate
from app.schemas.export import (
    ExportedInventoryGroup,
    ExportedPickStrategy,
    ExportedTaskPlanning,
    OutboundConfigurationExport,
)
from app.schemas.inventory_group import InventoryGroupResponse
from app.schemas.pick_strategy import PickStrategyResponse, HUFormationResponse, WorkOrderManagementResponse
from app.schemas.stock_allocation import StockAllocationResponse
from app.schemas.task_planning import TaskPlanningResponse, TaskExecutionResponse
from app.schemas.task_sequence import TaskSequenceResponse
from app.schemas.template import ConfigurationBundle, SetupSummary, TemplateCreate
from app.services.config_gateway import parse_payload
from app.services.dependency_rules import DependencyRules, EntityType
from app.services.inventory_group_service import InventoryGroupService, default_allocation_payloads
from app.services.wizard_service import WizardService
from app.services.wizard_state_machine import WizardStep


logger = logging.getLogger(__name__)

# Steps whose records a bundle can create
BUNDLE_STEPS = [
    WizardStep.INVENTORY_GROUPS,
    WizardStep.TASK_SEQUENCES,
    WizardStep.PICK_STRATEGIES,
    WizardStep.WORK_ORDER_MANAGEMENT,
    WizardStep.STOCK_ALLOCATION,
]


class TemplateService:
    """Template CRUD, bundle application and export for one user."""

    def __init__(self, db: AsyncSession, user_id: int):
        self.db = db
        self.user_id = user_id
        self.rules = DependencyRules(db, user_id)
        self.groups = InventoryGroupService(db, user_id)

    # ==================== TEMPLATES ====================

    async def list_templates(self, active_only: bool = False) -> List[OneClickTemplate]:
        stmt = select(OneClickTemplate).order_by(OneClickTemplate.id)
        if active_only:
            stmt = stmt.where(OneClickTemplate.is_active.is_(True))
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get_template(self, template_id: int) -> OneClickTemplate:
        result = await self.db.execute(
            select(OneClickTemplate).where(OneClickTemplate.id == template_id)
        )
        template = result.scalar_one_or_none()
        if template is None:
            raise NotFoundError("Template", template_id)
        return template

    async def create_template(self, payload: TemplateCreate) -> OneClickTemplate:
        """Store a template; its bundle is validated before it is saved."""
        existing = await self.db.execute(
            select(OneClickTemplate.id).where(OneClickTemplate.name == payload.name)
        )
        if existing.scalar_one_or_none() is not None:
            raise ValidationError(f"Template '{payload.name}' already exists", name=payload.name)

        template = OneClickTemplate(
            name=payload.name,
            description=payload.description,
            industry=payload.industry,
            complexity=payload.complexity,
            is_active=payload.is_active,
            template_data=payload.template_data.model_dump(mode="json", by_alias=True, exclude_none=True),
        )
        self.db.add(template)
        await self.db.flush()
        logger.info("Created template %s '%s'", template.id, template.name)
        return template

    # ==================== APPLY ====================

    async def clear_configuration(self) -> Dict[str, int]:
        """Delete every inventory group of the user, with all dependents."""
        removed: Counter = Counter()
        for group in await self.groups.list_groups():
            removed.update(await self.rules.delete_with_dependents(EntityType.INVENTORY_GROUP, group.id))
        return dict(removed)

    async def apply_bundle(self, bundle: ConfigurationBundle, replace_existing: bool = True) -> SetupSummary:
        """Create every record of a bundle. Returns the created counts."""
        if replace_existing:
            removed = await self.clear_configuration()
            if removed:
                logger.info("Cleared existing configuration of user %s: %s", self.user_id, removed)

        created: Counter = Counter()
        group_ids: Dict[str, int] = {}

        for entry in bundle.inventory_groups:
            group = await self.groups.create_group(entry)
            group_ids[entry.name] = group.id
            created[EntityType.INVENTORY_GROUP.value] += 1

        for entry in bundle.task_sequences:
            targets = [entry.inventory_group] if entry.inventory_group else list(group_ids)
            for name in targets:
                await self.rules.create_child(EntityType.TASK_SEQUENCE, group_ids[name], {
                    "task_sequences": entry.task_sequences,
                    "shipment_acknowledgment": entry.shipment_acknowledgment,
                })
                created[EntityType.TASK_SEQUENCE.value] += 1

        first_group = bundle.inventory_groups[0].name
        for entry in bundle.pick_strategies:
            group_id = group_ids[entry.inventory_group or first_group]
            strategy = await self.rules.create_child(
                EntityType.PICK_STRATEGY, group_id, entry.to_record()
            )
            created[EntityType.PICK_STRATEGY.value] += 1
            if entry.hu_formation is not None:
                await self.rules.upsert_child(EntityType.HU_FORMATION, strategy.id, entry.hu_formation)
                created[EntityType.HU_FORMATION.value] += 1
            if entry.work_order_management is not None:
                await self.rules.upsert_child(
                    EntityType.WORK_ORDER_MANAGEMENT, strategy.id, entry.work_order_management
                )
                created[EntityType.WORK_ORDER_MANAGEMENT.value] += 1

        for entry in bundle.inventory_groups:
            strategies = entry.stock_allocation_strategies or default_allocation_payloads()
            for strategy in strategies:
                await self.rules.create_child(EntityType.STOCK_ALLOCATION, group_ids[entry.name], strategy)
                created[EntityType.STOCK_ALLOCATION.value] += 1

        if bundle.task_planning is not None:
            for group_id in group_ids.values():
                planning = await self.rules.create_child(
                    EntityType.TASK_PLANNING, group_id, bundle.task_planning
                )
                created[EntityType.TASK_PLANNING.value] += 1
                if bundle.task_execution is not None:
                    await self.rules.upsert_child(EntityType.TASK_EXECUTION, planning.id, bundle.task_execution)
                    created[EntityType.TASK_EXECUTION.value] += 1

        return SetupSummary(**created)

    async def _apply(self, bundle: ConfigurationBundle, replace_existing: bool, label: str) -> SetupSummary:
        try:
            summary = await self.apply_bundle(bundle, replace_existing)
            wizard = WizardService(self.db, self.user_id)
            complete = [key for key in BUNDLE_STEPS if key in wizard.steps]
            done = [key for key in complete if await wizard.is_step_complete(wizard.steps.index(key) + 1)]
            await wizard.mark_steps_complete(done)
            if replace_existing:
                await wizard.revoke_confirmation()
        except ConfigurationError:
            await self.db.rollback()
            logger.exception("Applying %s failed for user %s; rolled back", label, self.user_id)
            raise
        logger.info("Applied %s for user %s: %s", label, self.user_id, summary.model_dump())
        return summary

    async def apply_template(self, template_id: int, replace_existing: bool = True) -> tuple:
        """
        Apply a stored template in one transaction.

        Returns (template, summary).

        Raises:
            NotFoundError: unknown template
            ValidationError: the stored bundle is invalid or inactive
        """
        template = await self.get_template(template_id)
        if not template.is_active:
            raise ValidationError(f"Template '{template.name}' is not active", template_id=template_id)
        bundle = parse_payload(ConfigurationBundle, template.template_data)
        summary = await self._apply(bundle, replace_existing, f"template '{template.name}'")
        return template, summary

    async def quick_setup(self, replace_existing: bool = True) -> SetupSummary:
        """Apply the built-in default bundle."""
        bundle = parse_payload(ConfigurationBundle, DEFAULT_BUNDLE)
        return await self._apply(bundle, replace_existing, "quick setup")

    # ==================== EXPORT ====================

    async def export_configuration(self) -> OutboundConfigurationExport:
        """The user's configuration as one nested document."""
        def by_parent(records, key: str) -> Dict[int, list]:
            grouped: Dict[int, list] = {}
            for record in records:
                grouped.setdefault(getattr(record, key), []).append(record)
            return grouped

        async def all_of(entity_type: EntityType) -> list:
            return await self.rules.gateway(entity_type).list(self.user_id)

        groups = await all_of(EntityType.INVENTORY_GROUP)
        sequences = by_parent(await all_of(EntityType.TASK_SEQUENCE), "inventory_group_id")
        strategies = by_parent(await all_of(EntityType.PICK_STRATEGY), "inventory_group_id")
        hu_formations = {r.pick_strategy_id: r for r in await all_of(EntityType.HU_FORMATION)}
        work_orders = {r.pick_strategy_id: r for r in await all_of(EntityType.WORK_ORDER_MANAGEMENT)}
        allocations = by_parent(await all_of(EntityType.STOCK_ALLOCATION), "inventory_group_id")
        plannings = by_parent(await all_of(EntityType.TASK_PLANNING), "inventory_group_id")
        executions = {r.task_planning_id: r for r in await all_of(EntityType.TASK_EXECUTION)}
        status = await self.rules.allocation_status()
        allocated = {row["id"]: row["fully_allocated"] for row in status["groups"]}

        def optional(schema, record):
            return schema.model_validate(record) if record is not None else None

        exported = []
        for group in groups:
            exported.append(ExportedInventoryGroup(
                **InventoryGroupResponse.model_validate(group).model_dump(),
                fully_allocated=allocated.get(group.id, False),
                task_sequences=[TaskSequenceResponse.model_validate(r) for r in sequences.get(group.id, [])],
                pick_strategies=[
                    ExportedPickStrategy(
                        **PickStrategyResponse.model_validate(s).model_dump(),
                        hu_formation=optional(HUFormationResponse, hu_formations.get(s.id)),
                        work_order_management=optional(WorkOrderManagementResponse, work_orders.get(s.id)),
                    )
                    for s in strategies.get(group.id, [])
                ],
                stock_allocation_strategies=[
                    StockAllocationResponse.model_validate(r) for r in allocations.get(group.id, [])
                ],
                task_planning=[
                    ExportedTaskPlanning(
                        **TaskPlanningResponse.model_validate(p).model_dump(),
                        task_execution=optional(TaskExecutionResponse, executions.get(p.id)),
                    )
                    for p in plannings.get(group.id, [])
                ],
            ))

        wizard_state = await WizardService(self.db, self.user_id).get_state()
        return OutboundConfigurationExport(
            exported_at=datetime.now(timezone.utc),
            app_version=settings.APP_VERSION,
            user_id=self.user_id,
            confirmed=wizard_state.confirmed,
            inventory_groups=exported,
        )


async def seed_default_templates(db: AsyncSession) -> Optional[OneClickTemplate]:
    """Insert the built-in template unless a template with its name exists."""
    name = DISTRIBUTION_CENTER_TEMPLATE["name"]
    result = await db.execute(select(OneClickTemplate).where(OneClickTemplate.name == name))
    if result.scalar_one_or_none() is not None:
        return None
    payload = TemplateCreate.model_validate(DISTRIBUTION_CENTER_TEMPLATE)
    template = await TemplateService(db, user_id=settings.MOCK_USER_ID).create_template(payload)
    logger.info("Seeded template '%s'", name)
    return template
