MANAGER = "manager"
STAFF = "staff"


class Permission:
    VIEW_PRODUCTS = "view_products"
    MANAGE_PRODUCTS = "manage_products"
    VIEW_WAREHOUSES = "view_warehouses"
    MANAGE_WAREHOUSES = "manage_warehouses"
    VIEW_OPERATIONS = "view_operations"
    CREATE_OPERATION = "create_operation"
    CREATE_TRANSFER = "create_transfer"
    PROCESS_OPERATION = "process_operation"
    DELETE_OPERATION = "delete_operation"
    VIEW_ADJUSTMENTS = "view_adjustments"
    CREATE_ADJUSTMENT = "create_adjustment"
    DELETE_ADJUSTMENT = "delete_adjustment"
    VIEW_HISTORY = "view_history"
    VIEW_DASHBOARD = "view_dashboard"


ROLE_PERMISSIONS = {
    MANAGER: frozenset(
        value for name, value in vars(Permission).items() if not name.startswith("_")
    ),
    STAFF: frozenset(
        {
            Permission.VIEW_PRODUCTS,
            Permission.VIEW_WAREHOUSES,
            Permission.VIEW_OPERATIONS,
            Permission.CREATE_TRANSFER,
            Permission.PROCESS_OPERATION,
            Permission.VIEW_ADJUSTMENTS,
            Permission.VIEW_HISTORY,
            Permission.VIEW_DASHBOARD,
        }
    ),
}


def role_has_permission(role: str | None, permission: str) -> bool:
    return permission in ROLE_PERMISSIONS.get(role or "", frozenset())
