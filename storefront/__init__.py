import logging

from flask import Flask, jsonify

from .config import Config
from .errors import register_error_handlers
from .extensions import cors
from .services.store import Store


def create_app(config=None, store=None):
    """
    Build the API. ``config`` overrides keys of ``Config``; pass ``store``
    to run against an existing Store instead of one built from config.
    """
    app = Flask(__name__)
    app.config.from_object(Config)
    if config:
        app.config.update(config)

    app.json.sort_keys = False
    logging.getLogger("storefront").setLevel(app.config["LOG_LEVEL"])

    # a bad catalog or discount setting stops startup here
    app.extensions["store"] = store if store is not None else Store.from_config(app.config)

    cors.init_app(app, resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}})
    register_error_handlers(app)

    # Register blueprints
    from .product import bp as product_bp; app.register_blueprint(product_bp)
    from .cart import bp as cart_bp; app.register_blueprint(cart_bp)
    from .discount import bp as discount_bp; app.register_blueprint(discount_bp)
    from .checkout import bp as checkout_bp; app.register_blueprint(checkout_bp)
    from .admin import bp as admin_bp; app.register_blueprint(admin_bp)

    from .cli import register_cli; register_cli(app)

    @app.get("/")
    def health():
        return jsonify(ok=True, msg="API running")

    return app
