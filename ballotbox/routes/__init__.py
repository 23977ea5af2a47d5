from flask import current_app

from ballotbox.routes.admin import register_admin_routes
from ballotbox.routes.public import register_public_routes
from ballotbox.routes.voter import register_voter_routes
from ballotbox.services.election import ElectionError


def register_error_handlers(app):
    @app.errorhandler(ElectionError)
    def handle_election_error(error):
        current_app.logger.info("Rejected election call: %s", error)
        return {"ok": False, "error": str(error), "code": error.code}, error.status_code


def register_routes(app):
    register_public_routes(app)
    register_voter_routes(app)
    register_admin_routes(app)
    register_error_handlers(app)
