from collections.abc import Mapping

from flask import Flask
from flask_cors import CORS

from .config import Config
from .extensions import studio
from .routes import register_routes


def create_app(config_object=None):
    app = Flask(__name__, instance_relative_config=True)
    app.config.from_object(Config)

    if isinstance(config_object, Mapping):
        app.config.update(config_object)
    elif config_object:
        app.config.from_object(config_object)
    else:
        app.config.from_envvar("APP_SETTINGS", silent=True)

    studio.init_app(app)

    # Allow the dashboard frontend to talk to backend
    CORS(app,
         origins=app.config["CORS_ORIGINS"],
         allow_headers=["Content-Type"],
         methods=["GET", "POST", "PATCH", "OPTIONS"]
    )

    register_routes(app)

    return app
