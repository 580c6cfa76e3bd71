import logging

from flask import Flask
from flask_cors import CORS

from .config import Config
from .services.auth_service import AuthService
from .storage import MemStorage, seed_products
from .utils.session_interface import MemorySessionInterface

logger = logging.getLogger(__name__)


def create_app(config_class=Config, storage=None):
    """Build the application around one ``MemStorage``.

    Pass ``storage`` to share or pre-fill a store (tests build a fresh one per
    app); otherwise a new store is created, seeded with the demo catalog when
    ``SEED_DEMO_PRODUCTS`` is set.
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    if storage is None:
        initial = seed_products() if app.config.get('SEED_DEMO_PRODUCTS') else None
        storage = MemStorage(initial_products=initial)
    app.extensions['storage'] = storage
    app.extensions['auth_service'] = AuthService(storage)

    # Server-side sessions kept in the store's session store
    app.session_interface = MemorySessionInterface(storage.session_store)
    prune_interval = app.config.get('SESSION_PRUNE_INTERVAL')
    if prune_interval:
        storage.session_store.start_pruning(prune_interval)

    # Enable CORS
    CORS(app, resources={r"/api/*": {"origins": app.config.get('CORS_ORIGINS', '*')}},
         supports_credentials=app.config.get('CORS_SUPPORTS_CREDENTIALS', True),
         allow_headers=app.config.get('CORS_ALLOW_HEADERS', ["Content-Type", "Authorization"]),
         methods=app.config.get('CORS_METHODS', ["GET", "POST", "PUT", "DELETE", "OPTIONS"]))

    # Session-based authentication
    from .utils.auth_middleware import setup_auth_middleware
    setup_auth_middleware(app)

    from .utils.error_handlers import register_error_handlers
    register_error_handlers(app)

    from .routes import register_routes
    register_routes(app)

    logger.debug(f"App created with {len(storage.products)} products")
    return app
