# petsphere/routes/__init__.py
from .auth_routes import bp as auth_bp
from .product_routes import bp as product_bp
from .cart_routes import bp as cart_bp
from .order_routes import bp as order_bp
from .appointment_routes import bp as appointment_bp
from .wishlist_routes import bp as wishlist_bp


def register_routes(app):
    app.register_blueprint(auth_bp)
    app.register_blueprint(product_bp)
    app.register_blueprint(cart_bp)
    app.register_blueprint(order_bp)
    app.register_blueprint(appointment_bp)
    app.register_blueprint(wishlist_bp)
