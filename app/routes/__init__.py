from .auth import auth_bp
from .dashboard import dashboard_bp
from .items import item_bp
from .categories import category_bp
from .orders import order_bp


__all__ = [
    'auth_bp',
    'dashboard_bp',
    'item_bp',
    'category_bp',
    'order_bp',
]
