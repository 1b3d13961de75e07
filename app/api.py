from app.routes import (
    auth_bp,
    dashboard_bp,
    item_bp,
    category_bp,
    order_bp,
)


def register_routes(app):
    """Register the resource blueprints."""
    app.register_blueprint(auth_bp)
    app.register_blueprint(dashboard_bp)
    app.register_blueprint(item_bp)
    app.register_blueprint(category_bp)
    app.register_blueprint(order_bp)
