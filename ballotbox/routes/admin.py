from flask_login import current_user, login_required

from ballotbox.extensions import get_election
from ballotbox.routes.payload import invalid_request, request_data


def register_admin_routes(app):
    @app.route("/election/voters", methods=["POST"])
    @login_required
    def register_voter():
        data = request_data()
        if data is None:
            return invalid_request("A JSON object or form body is required.")
        identity = data.get("identity") or ""
        if not isinstance(identity, str) or not identity.strip():
            return invalid_request("Voter identity is required.")
        identity = identity.strip()

        election = get_election()
        election.register_voter(current_user.identity, identity)
        voter = election.get_voter(identity).as_dict()
        return {"ok": True, "voter": dict(voter, identity=identity)}

    @app.route("/election/proposal-registration/start", methods=["POST"])
    @login_required
    def start_proposal_registration():
        election = get_election()
        election.start_proposal_registration(current_user.identity)
        return {"ok": True, "phase": election.current_phase}

    @app.route("/election/proposal-registration/end", methods=["POST"])
    @login_required
    def end_proposal_registration():
        election = get_election()
        election.end_proposal_registration(current_user.identity)
        return {"ok": True, "phase": election.current_phase}

    @app.route("/election/voting-session/start", methods=["POST"])
    @login_required
    def start_voting_session():
        election = get_election()
        election.start_voting_session(current_user.identity)
        return {"ok": True, "phase": election.current_phase}

    @app.route("/election/voting-session/end", methods=["POST"])
    @login_required
    def end_voting_session():
        election = get_election()
        election.end_voting_session(current_user.identity)
        return {"ok": True, "phase": election.current_phase}

    @app.route("/election/tally", methods=["POST"])
    @login_required
    def tally_votes():
        election = get_election()
        winner = election.tally(current_user.identity)
        return {
            "ok": True,
            "phase": election.current_phase,
            "winner": winner.as_dict() if winner is not None else None,
        }

    @app.route("/election/reset", methods=["POST"])
    @login_required
    def reset_election():
        election = get_election()
        election.reset(current_user.identity)
        return {"ok": True, "phase": election.current_phase}
