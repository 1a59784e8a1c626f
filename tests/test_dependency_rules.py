import pytest

from app.core.exceptions import (
    ChildAlreadyExistsError,
    ConflictError,
    DuplicateInventoryGroupError,
    NotFoundError,
    ValidationError,
)
from app.services.dependency_rules import DependencyRules, EntityType
from app.services.inventory_group_service import InventoryGroupService

from conftest import group_payload, pick_strategy_payload, hu_formation_payload


USER_ID = 1


async def make_strategy(db, group_name="L0 Group"):
    group = await InventoryGroupService(db, USER_ID).create_group(group_payload(group_name))
    rules = DependencyRules(db, USER_ID)
    strategy = await rules.create_child(
        EntityType.PICK_STRATEGY, group.id, pick_strategy_payload(group.id)
    )
    return group, strategy


async def test_child_requires_existing_parent(db):
    rules = DependencyRules(db, USER_ID)
    assert not await rules.can_create_child(EntityType.PICK_STRATEGY, 999)
    with pytest.raises(NotFoundError):
        await rules.create_child(EntityType.PICK_STRATEGY, 999, pick_strategy_payload(999))


async def test_upsert_twice_keeps_one_child(db):
    _, strategy = await make_strategy(db)
    rules = DependencyRules(db, USER_ID)

    first, created = await rules.upsert_child(
        EntityType.HU_FORMATION, strategy.id, hu_formation_payload(tripType="A")
    )
    assert created
    second, created = await rules.upsert_child(
        EntityType.HU_FORMATION, strategy.id, hu_formation_payload(tripType="B")
    )
    assert not created
    assert second.id == first.id
    assert second.trip_type == "B"
    assert await rules.count(EntityType.HU_FORMATION) == 1
    assert not await rules.can_create_child(EntityType.HU_FORMATION, strategy.id)


async def test_create_second_one_to_one_child_is_rejected(db):
    _, strategy = await make_strategy(db)
    rules = DependencyRules(db, USER_ID)
    await rules.create_child(EntityType.WORK_ORDER_MANAGEMENT, strategy.id, {})
    with pytest.raises(ChildAlreadyExistsError):
        await rules.create_child(EntityType.WORK_ORDER_MANAGEMENT, strategy.id, {})


async def test_upsert_not_allowed_for_one_to_many_child(db):
    group = await InventoryGroupService(db, USER_ID).create_group(group_payload())
    with pytest.raises(ValidationError):
        await DependencyRules(db, USER_ID).upsert_child(
            EntityType.STOCK_ALLOCATION, group.id, {"mode": "PICK"}
        )


async def test_fully_allocated_needs_exactly_one_pick_and_one_put(db):
    service = InventoryGroupService(db, USER_ID)
    rules = DependencyRules(db, USER_ID)
    group = await service.create_group(group_payload())

    await rules.create_child(EntityType.STOCK_ALLOCATION, group.id, {"mode": "PICK"})
    assert not await rules.is_group_fully_allocated(group.id)
    assert not await rules.any_group_fully_allocated()

    await rules.create_child(EntityType.STOCK_ALLOCATION, group.id, {"mode": "put"})
    assert await rules.is_group_fully_allocated(group.id)

    await rules.create_child(EntityType.STOCK_ALLOCATION, group.id, {"mode": "PICK"})
    assert not await rules.is_group_fully_allocated(group.id)


async def test_seeded_group_is_fully_allocated(db):
    group = await InventoryGroupService(db, USER_ID).create_group(group_payload(), seed_strategies=True)
    status = await DependencyRules(db, USER_ID).allocation_status()
    assert status["total_groups"] == 1
    assert status["configured_groups"] == 1
    assert status["groups"][0]["id"] == group.id


async def test_duplicate_identifier_combination_rejected(db):
    service = InventoryGroupService(db, USER_ID)
    await service.create_group(group_payload("First"))
    with pytest.raises(DuplicateInventoryGroupError):
        await service.create_group(group_payload("Second"))

    other = await service.create_group(group_payload("Second", locationInstruction="AREA"))
    with pytest.raises(DuplicateInventoryGroupError):
        await service.update_group(other.id, {"locationInstruction": "BIN"})


async def test_instruction_pair_alone_identifies_a_group(db):
    service = InventoryGroupService(db, USER_ID)
    await service.create_group(group_payload("First", storageIdentifiers={"uom": "L0"}))
    with pytest.raises(DuplicateInventoryGroupError):
        await service.create_group(group_payload("Second", storageIdentifiers={"uom": "L2"}))


async def test_groups_without_instructions_compare_identifiers(db):
    service = InventoryGroupService(db, USER_ID)
    plain = {"storageInstruction": None, "locationInstruction": None}
    await service.create_group(group_payload("L0", storageIdentifiers={"uom": "L0"}, **plain))
    await service.create_group(group_payload("L2", storageIdentifiers={"uom": "L2"}, **plain))
    with pytest.raises(DuplicateInventoryGroupError):
        await service.create_group(group_payload("L0 again", storageIdentifiers={"uom": " L0 "}, **plain))


async def test_delete_group_cascades_to_all_dependents(db):
    group, strategy = await make_strategy(db)
    rules = DependencyRules(db, USER_ID)
    await rules.upsert_child(EntityType.HU_FORMATION, strategy.id, hu_formation_payload())
    await rules.create_child(EntityType.STOCK_ALLOCATION, group.id, {"mode": "PICK"})
    planning = await rules.create_child(
        EntityType.TASK_PLANNING, group.id, {"configurationName": "Planning"}
    )
    await rules.upsert_child(EntityType.TASK_EXECUTION, planning.id, {"configurationName": "Execution"})

    deleted = await rules.delete_with_dependents(EntityType.INVENTORY_GROUP, group.id)

    assert deleted == {
        "inventory_groups": 1,
        "pick_strategies": 1,
        "hu_formations": 1,
        "stock_allocation_strategies": 1,
        "task_planning": 1,
        "task_execution": 1,
    }
    for entity_type in EntityType:
        assert await rules.count(entity_type) == 0


async def test_stale_expected_version_raises_conflict(db):
    group = await InventoryGroupService(db, USER_ID).create_group(group_payload())
    gateway = DependencyRules(db, USER_ID).gateway(EntityType.INVENTORY_GROUP)

    updated = await gateway.update(group.id, {"description": "v2"}, USER_ID, expected_version=1)
    assert updated.version == 2
    with pytest.raises(ConflictError):
        await gateway.update(group.id, {"description": "v3"}, USER_ID, expected_version=1)


async def test_required_field_cannot_be_nulled(db):
    _, strategy = await make_strategy(db)
    gateway = DependencyRules(db, USER_ID).gateway(EntityType.PICK_STRATEGY)
    with pytest.raises(ValidationError):
        await gateway.update(strategy.id, {"taskLabel": None}, USER_ID)


async def test_child_payload_cannot_move_to_another_parent(db):
    group, strategy = await make_strategy(db)
    rules = DependencyRules(db, USER_ID)
    planning = await rules.create_child(
        EntityType.TASK_PLANNING, group.id, {"configurationName": "Planning", "inventoryGroupId": 999}
    )
    assert planning.inventory_group_id == group.id

    execution, _ = await rules.upsert_child(
        EntityType.TASK_EXECUTION, planning.id, {"configurationName": "Execution", "taskPlanningId": 999}
    )
    assert execution.task_planning_id == planning.id


async def test_foreign_keys_are_enforced(db):
    gateway = DependencyRules(db, USER_ID).gateway(EntityType.HU_FORMATION)
    with pytest.raises(ValidationError):
        await gateway.create({**hu_formation_payload(), "pickStrategyId": 999}, USER_ID)
