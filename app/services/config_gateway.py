"""
Generic CRUD gateway for configuration records.

One gateway instance per entity type. It validates payloads with the
entity's pydantic schemas, scopes queries by user and checks the optimistic
version counter on update. No business rule lives here; dependency checks
and wizard gating are layered on top in dependency_rules and wizard_service.
"""
import json
import logging
from typing import Any, Generic, List, Optional, Type, TypeVar, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

from app.core.exceptions import ConflictError, NotFoundError, StorageError, ValidationError
from app.database import Base
from app.schemas.base import BaseCreateSchema, BaseUpdateSchema


logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


def parse_payload(schema: Type[BaseModel], payload: Union[dict, BaseModel]) -> BaseModel:
    """
    Validate a raw payload against a schema.

    Raises:
        ValidationError: missing or malformed fields, with pydantic's error list
    """
    if isinstance(payload, schema):
        return payload
    if isinstance(payload, BaseModel):
        payload = payload.model_dump(exclude_unset=True)
    try:
        return schema.model_validate(payload)
    except PydanticValidationError as e:
        raise ValidationError(
            f"Invalid {schema.__name__} payload",
            errors=json.loads(e.json(include_url=False)),
        ) from e


class ConfigRecordGateway(Generic[ModelT]):
    """list / get / create / update / delete for one configuration entity."""

    def __init__(
        self,
        db: AsyncSession,
        model: Type[ModelT],
        create_schema: Type[BaseCreateSchema],
        update_schema: Type[BaseUpdateSchema],
        entity_name: Optional[str] = None,
    ):
        self.db = db
        self.model = model
        self.create_schema = create_schema
        self.update_schema = update_schema
        self.entity_name = entity_name or model.__name__

    # ==================== READ ====================

    async def list(self, user_id: int, **filters: Any) -> List[ModelT]:
        """All records of the user, oldest first. Filters are column equality checks."""
        stmt = select(self.model).where(self.model.user_id == user_id)
        for column, value in filters.items():
            if value is not None:
                stmt = stmt.where(getattr(self.model, column) == value)
        stmt = stmt.order_by(self.model.id)
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def find(self, record_id: int, user_id: Optional[int] = None) -> Optional[ModelT]:
        """Record by id, or None."""
        stmt = select(self.model).where(self.model.id == record_id)
        if user_id is not None:
            stmt = stmt.where(self.model.user_id == user_id)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def get(self, record_id: int, user_id: Optional[int] = None) -> ModelT:
        """
        Record by id.

        Raises:
            NotFoundError: unknown id (or owned by another user)
        """
        record = await self.find(record_id, user_id)
        if record is None:
            raise NotFoundError(self.entity_name, record_id)
        return record

    # ==================== WRITE ====================

    async def create(self, payload: Union[dict, BaseModel], user_id: int) -> ModelT:
        """
        Create a record and assign its id.

        Raises:
            ValidationError: payload does not satisfy the create schema
        """
        data = parse_payload(self.create_schema, payload)
        record = self.model(**data.to_record(), user_id=user_id)
        self.db.add(record)
        await self._flush()
        logger.info("Created %s %s for user %s", self.entity_name, record.id, user_id)
        return record

    async def update(
        self,
        record_id: int,
        payload: Union[dict, BaseModel],
        user_id: Optional[int] = None,
        expected_version: Optional[int] = None,
    ) -> ModelT:
        """
        Apply a partial update.

        Raises:
            NotFoundError: unknown id
            ConflictError: expected_version differs from the stored version
            ValidationError: malformed payload, or null for a required field
        """
        record = await self.get(record_id, user_id)
        if expected_version is not None and expected_version != record.version:
            raise ConflictError(self.entity_name, record_id, expected_version, record.version)

        data = parse_payload(self.update_schema, payload)
        self.apply_changes(record, data.to_record())
        await self._flush(record_id)
        return record

    def apply_changes(self, record: ModelT, changes: dict) -> None:
        """Copy column values onto a record, refusing nulls for required columns."""
        columns = self.model.__table__.columns
        for key, value in changes.items():
            if key not in columns or key in ("id", "user_id", "version", "created_at", "updated_at"):
                continue
            if value is None and not columns[key].nullable:
                raise ValidationError(f"{key} cannot be null", field=key)
            setattr(record, key, value)

    async def delete(self, record_id: int, user_id: Optional[int] = None) -> bool:
        """Delete a record. Returns False when it did not exist."""
        record = await self.find(record_id, user_id)
        if record is None:
            return False
        await self.db.delete(record)
        await self._flush(record_id)
        logger.info("Deleted %s %s", self.entity_name, record_id)
        return True

    async def _flush(self, record_id: Optional[int] = None) -> None:
        try:
            await self.db.flush()
        except StaleDataError as e:
            raise ConflictError(self.entity_name, record_id) from e
        except IntegrityError as e:
            raise ValidationError(
                f"{self.entity_name} violates a database constraint",
                reason=str(e.orig),
            ) from e
        except SQLAlchemyError as e:
            logger.exception("Storage failure on %s", self.entity_name)
            raise StorageError(f"Could not save {self.entity_name}") from e
