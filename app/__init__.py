from flask import Flask
from flask_cors import CORS
from dotenv import load_dotenv
import os
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from app.extensions import db
from app.services import DirectoryStore
from app.seed import seed_directory
import logging

# Load environment variables
load_dotenv()


def _env_flag(name, default):
    return os.getenv(name, default).lower() in ["true", "1", "t", "yes"]


def create_app(test_config=None, clock=None):
    app = Flask(__name__)

    # Configure logging
    logging.basicConfig(level=logging.INFO)
    app.logger.setLevel(logging.INFO)

    # Configure database
    app.config["SQLALCHEMY_DATABASE_URI"] = os.getenv(
        "DATABASE_URL", "sqlite:///:memory:"
    )
    app.config["SQLALCHEMY_TRACK_MODIFICATIONS"] = False

    # Directory behaviour
    app.config["DIRECTORY_SEED"] = _env_flag("DIRECTORY_SEED", "true")
    app.config["DIRECTORY_VALIDATE_PARENTS"] = _env_flag(
        "DIRECTORY_VALIDATE_PARENTS", "false"
    )

    # Rate limiting
    app.config["RATELIMIT_DEFAULT"] = os.getenv(
        "RATELIMIT_DEFAULT", "150 per minute, 10000 per hour, 100000 per day"
    )
    app.config["RATELIMIT_STORAGE_URI"] = os.getenv("LIMITER_STORAGE_URL", "memory://")

    if test_config:
        app.config.update(test_config)

    # Implement rate limiting using flask-limiter
    Limiter(
        get_remote_address,
        app=app,
        default_limits=[app.config["RATELIMIT_DEFAULT"]],
        storage_uri=app.config["RATELIMIT_STORAGE_URI"],
        strategy="fixed-window",
    )

    # Initialize Flask extensions
    db.init_app(app)

    # One store per application, handed to the routes through app.extensions
    store = DirectoryStore(
        validate_parents=app.config["DIRECTORY_VALIDATE_PARENTS"], clock=clock
    )
    app.extensions["directory_store"] = store

    with app.app_context():
        db.create_all()
        if app.config["DIRECTORY_SEED"]:
            seed_directory(store)

    # Register blueprints
    from app.routes.directory_routes import directory_bp
    from app.routes.map_routes import map_bp

    app.register_blueprint(directory_bp, url_prefix="/api")
    app.register_blueprint(map_bp, url_prefix="/api")

    # Set up CORS
    cors_origins = os.getenv(
        "CORS_ORIGINS",
        "http://localhost:3000,http://127.0.0.1:3000,*",
    ).split(",")
    app.logger.info(f"Initializing CORS with origins: {cors_origins}")

    CORS(
        app,
        resources={
            r"/api/*": {"origins": cors_origins},
        },
        methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept"],
        expose_headers=["Content-Type"],
    )

    @app.route("/health")
    def health_check():
        return {"status": "healthy"}

    return app
