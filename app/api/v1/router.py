from fastapi import APIRouter

from app.api.v1.endpoints import (
    # Wizard steps
    inventory_groups,
    task_sequences,
    pick_strategies,
    hu_formations,
    work_order_management,
    stock_allocation,
    # Planning / execution
    task_planning,
    task_execution,
    # One-click setup
    templates,
    setup,
    # Navigation
    wizard,
)


# Create main API router
api_router = APIRouter(prefix="/api")

# ==================== Inventory Groups ====================
api_router.include_router(
    inventory_groups.router,
    prefix="/inventory-groups",
    tags=["Inventory Groups"]
)

# ==================== Task Sequences ====================
api_router.include_router(
    task_sequences.router,
    prefix="/task-sequences",
    tags=["Task Sequences"]
)

# ==================== Pick Strategies / HU Formation / Work Orders ====================
api_router.include_router(
    pick_strategies.router,
    prefix="/pick-strategies",
    tags=["Pick Strategies"]
)
api_router.include_router(
    hu_formations.router,
    prefix="/hu-formations",
    tags=["HU Formation"]
)
api_router.include_router(
    work_order_management.router,
    prefix="/work-order-management",
    tags=["Work Order Management"]
)

# ==================== Stock Allocation ====================
api_router.include_router(
    stock_allocation.router,
    prefix="/stock-allocation-strategies",
    tags=["Stock Allocation"]
)

# ==================== Task Planning / Execution ====================
api_router.include_router(
    task_planning.router,
    prefix="/task-planning",
    tags=["Task Planning"]
)
api_router.include_router(
    task_execution.router,
    prefix="/task-execution",
    tags=["Task Execution"]
)

# ==================== Templates / Quick Setup / Export ====================
api_router.include_router(
    templates.router,
    prefix="/templates",
    tags=["Templates"]
)
api_router.include_router(
    setup.router,
    tags=["Setup & Export"]
)

# ==================== Wizard ====================
api_router.include_router(
    wizard.router,
    prefix="/wizard",
    tags=["Wizard"]
)
