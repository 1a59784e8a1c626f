"""
Typed exception hierarchy for the outbound configuration service.

Every error carries a machine-readable ``code`` and the HTTP status it maps
to, so endpoints never have to parse messages:

    ConfigurationError (base, 500)
    |
    +-- ValidationError (400)
    |   +-- DuplicateInventoryGroupError
    |   +-- ChildAlreadyExistsError
    |   +-- InvalidStepError
    |
    +-- NotFoundError (404)
    |
    +-- ConflictError (409)
    |
    +-- StorageError (500)

Blocked wizard transitions are NOT errors; they are reported as a
``TransitionResult`` with ``advanced=False``.
"""

from typing import Any, Optional


class ConfigurationError(Exception):
    """Base class for all service errors."""

    code: str = "CONFIGURATION_ERROR"
    status_code: int = 500

    def __init__(self, message: str, **details: Any):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict:
        payload = {"error": self.message, "code": self.code}
        if self.details:
            payload["details"] = self.details
        return payload


class ValidationError(ConfigurationError):
    """Malformed payload or a rule violation caused by the request."""

    code = "VALIDATION_ERROR"
    status_code = 400


class DuplicateInventoryGroupError(ValidationError):
    """An inventory group with the same identifier combination already exists."""

    code = "DUPLICATE_INVENTORY_GROUP"

    def __init__(self, existing_id: int, name: Optional[str] = None):
        super().__init__(
            "An inventory group with the same storage/location instruction or "
            "identifier combination already exists",
            existing_id=existing_id,
            existing_name=name,
        )
        self.existing_id = existing_id


class ChildAlreadyExistsError(ValidationError):
    """A one-to-one child already exists for the parent."""

    code = "CHILD_ALREADY_EXISTS"

    def __init__(self, child_type: str, parent_id: int, existing_id: int):
        super().__init__(
            f"{child_type} already exists for parent {parent_id}",
            child_type=child_type,
            parent_id=parent_id,
            existing_id=existing_id,
        )
        self.existing_id = existing_id


class InvalidStepError(ValidationError):
    """Step number outside the configured wizard range."""

    code = "INVALID_STEP"

    def __init__(self, step: int, step_count: int):
        super().__init__(
            f"Step {step} is outside the wizard range 1..{step_count}",
            step=step,
            step_count=step_count,
        )


class NotFoundError(ConfigurationError):
    """Unknown record id."""

    code = "NOT_FOUND"
    status_code = 404

    def __init__(self, entity: str, entity_id: Any):
        super().__init__(f"{entity} not found", entity=entity, id=entity_id)
        self.entity = entity
        self.entity_id = entity_id


class ConflictError(ConfigurationError):
    """The record changed since the caller last read it."""

    code = "VERSION_CONFLICT"
    status_code = 409

    def __init__(self, entity: str, entity_id: Any, expected: Optional[int] = None, actual: Optional[int] = None):
        if expected is None:
            message = f"{entity} {entity_id} was modified by another request"
        else:
            message = f"{entity} {entity_id} was modified (expected version {expected}, found {actual})"
        super().__init__(
            message,
            entity=entity,
            id=entity_id,
            expected_version=expected,
            actual_version=actual,
        )


class StorageError(ConfigurationError):
    """Unexpected failure in the storage layer."""

    code = "STORAGE_ERROR"
    status_code = 500
