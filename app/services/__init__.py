# Services module
from app.services.config_gateway import ConfigRecordGateway
from app.services.dependency_rules import DependencyRules, EntityType
from app.services.inventory_group_service import InventoryGroupService

# Wizard / one-click setup
from app.services.wizard_service import WizardService
from app.services.template_service import TemplateService

__all__ = [
    "ConfigRecordGateway",
    "DependencyRules",
    "EntityType",
    "InventoryGroupService",
    # Wizard / setup
    "WizardService",
    "TemplateService",
]
