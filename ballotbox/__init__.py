from flask import Flask

from ballotbox.commands import register_commands
from ballotbox.config import Config
from ballotbox.extensions import db, login_manager, migrate
from ballotbox.routes import register_routes
from ballotbox.services.audit import record_election_event
from ballotbox.services.election import Election
from ballotbox.services.identity import load_caller_from_request


def create_app(test_config=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)

    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)

    @login_manager.request_loader
    def load_caller(request):
        return load_caller_from_request(request)

    @login_manager.unauthorized_handler
    def unauthenticated():
        return {
            "ok": False,
            "error": "A valid bearer token is required.",
            "code": "unauthenticated",
        }, 401

    app.extensions["election"] = Election(
        app.config["ELECTION_ADMIN_IDENTITY"],
        event_sink=record_election_event,
    )

    register_routes(app)
    register_commands(app)
    return app


__all__ = ["create_app", "db", "migrate"]
