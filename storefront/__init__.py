import logging

from flask import Flask, jsonify

from .config import Config
from .extensions import db, jwt, cors, migrate
from .utils.api import api_error


def _configure_logging(app):
    level = getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO)
    app.logger.setLevel(level)


def _register_jwt_callbacks():
    def unauthorized(message, status=401):
        r = jsonify(api_error(message)); r.status_code = status; return r

    @jwt.unauthorized_loader
    def missing_token(reason):
        return unauthorized("No token provided")

    @jwt.invalid_token_loader
    def invalid_token(reason):
        return unauthorized("Invalid token")

    @jwt.expired_token_loader
    def expired_token(jwt_header, jwt_payload):
        return unauthorized("Token has expired")


def create_app(config_object=Config):
    app = Flask(__name__, instance_relative_config=True)
    app.config.from_object(config_object)
    config_object.init_app(app)
    _configure_logging(app)

    # Init extensions
    db.init_app(app)
    jwt.init_app(app)
    cors.init_app(app, resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}}, supports_credentials=True)
    migrate.init_app(app, db)
    _register_jwt_callbacks()

    from .errors import register_error_handlers; register_error_handlers(app)

    # Register blueprints
    from .auth import bp as auth_bp; app.register_blueprint(auth_bp)
    from .user import bp as user_bp; app.register_blueprint(user_bp)
    from .product import bp as product_bp; app.register_blueprint(product_bp)
    from .order import bp as order_bp; app.register_blueprint(order_bp)
    from .coupon import bp as coupon_bp; app.register_blueprint(coupon_bp)
    from .checkout import bp as checkout_bp; app.register_blueprint(checkout_bp)

    from .cli import register_cli; register_cli(app)

    @app.get("/")
    def health():
        return jsonify(ok=True, msg="API running")

    with app.app_context():
        from . import model  # noqa: F401
        db.create_all()

    app.logger.debug("blueprints: %s", sorted(app.blueprints.keys()))
    return app
