"""Service for inventory groups: uniqueness of the identifier combination and default strategies."""
import logging
from typing import List, Optional, Union

from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import DuplicateInventoryGroupError
from app.models.inventory_group import InventoryGroup, group_identity_key
from app.models.stock_allocation import AllocationMode, StockAllocationStrategy
from app.schemas.inventory_group import InventoryGroupCreate, InventoryGroupUpdate
from app.schemas.stock_allocation import StockAllocationFields
from app.services.config_gateway import parse_payload
from app.services.dependency_rules import DependencyRules, EntityType


logger = logging.getLogger(__name__)


def default_allocation_payloads() -> List[StockAllocationFields]:
    """PICK and PUT strategies seeded for a new group."""
    return [
        StockAllocationFields(mode=AllocationMode.PICK),
        StockAllocationFields(mode=AllocationMode.PUT),
    ]


class InventoryGroupService:
    """Create, update and delete inventory groups for one user."""

    def __init__(self, db: AsyncSession, user_id: int):
        self.db = db
        self.user_id = user_id
        self.rules = DependencyRules(db, user_id)
        self.gateway = self.rules.gateway(EntityType.INVENTORY_GROUP)

    async def list_groups(self) -> List[InventoryGroup]:
        return await self.gateway.list(self.user_id)

    async def get_group(self, group_id: int) -> InventoryGroup:
        return await self.gateway.get(group_id, self.user_id)

    async def find_duplicate(self, identity: tuple, exclude_id: Optional[int] = None) -> Optional[InventoryGroup]:
        """Existing group with the same identifier combination."""
        result = await self.db.execute(
            select(InventoryGroup).where(InventoryGroup.user_id == self.user_id)
        )
        for group in result.scalars().all():
            if group.id != exclude_id and group.identity_key == identity:
                return group
        return None

    # ==================== WRITE ====================

    async def create_group(
        self,
        payload: Union[dict, BaseModel],
        seed_strategies: bool = False,
        allocation_strategies: Optional[List[StockAllocationFields]] = None,
    ) -> InventoryGroup:
        """
        Create a group after the duplicate check.

        With seed_strategies the group gets the default PICK + PUT pair, unless
        explicit allocation_strategies are given.

        Raises:
            DuplicateInventoryGroupError: identifier combination already used
        """
        data = parse_payload(InventoryGroupCreate, payload)
        record = data.to_record()
        identity = group_identity_key(
            record["storage_instruction"],
            record["location_instruction"],
            record["storage_identifiers"],
            record["line_identifiers"],
        )
        duplicate = await self.find_duplicate(identity)
        if duplicate is not None:
            logger.warning(
                "Rejected inventory group '%s': duplicates group %s", data.name, duplicate.id
            )
            raise DuplicateInventoryGroupError(duplicate.id, duplicate.name)

        group = await self.gateway.create(data, self.user_id)

        strategies = allocation_strategies
        if strategies is None and seed_strategies:
            strategies = default_allocation_payloads()
        for strategy in strategies or []:
            await self.rules.create_child(EntityType.STOCK_ALLOCATION, group.id, strategy)
        return group

    async def update_group(
        self,
        group_id: int,
        payload: Union[dict, BaseModel],
        expected_version: Optional[int] = None,
    ) -> InventoryGroup:
        """
        Update a group; the new identifier combination must stay unique.

        Raises:
            NotFoundError, ConflictError, DuplicateInventoryGroupError
        """
        group = await self.gateway.get(group_id, self.user_id)
        changes = parse_payload(InventoryGroupUpdate, payload).to_record()
        identity = group_identity_key(
            changes.get("storage_instruction", group.storage_instruction),
            changes.get("location_instruction", group.location_instruction),
            changes.get("storage_identifiers", group.storage_identifiers),
            changes.get("line_identifiers", group.line_identifiers),
        )
        duplicate = await self.find_duplicate(identity, exclude_id=group_id)
        if duplicate is not None:
            logger.warning("Rejected update of group %s: duplicates group %s", group_id, duplicate.id)
            raise DuplicateInventoryGroupError(duplicate.id, duplicate.name)

        return await self.gateway.update(group_id, payload, self.user_id, expected_version=expected_version)

    async def delete_group(self, group_id: int) -> dict:
        """Delete a group with all of its dependents."""
        return await self.rules.delete_with_dependents(EntityType.INVENTORY_GROUP, group_id)

    async def allocation_strategies(self, group_id: int) -> List[StockAllocationStrategy]:
        await self.gateway.get(group_id, self.user_id)
        return await self.rules.gateway(EntityType.STOCK_ALLOCATION).list(
            self.user_id, inventory_group_id=group_id
        )
