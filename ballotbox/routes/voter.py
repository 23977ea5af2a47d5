from flask_login import current_user, login_required

from ballotbox.extensions import get_election
from ballotbox.routes.payload import invalid_request, parse_proposal_id, request_data


def register_voter_routes(app):
    @app.route("/election/proposals", methods=["POST"])
    @login_required
    def add_proposal():
        data = request_data()
        if data is None:
            return invalid_request("A JSON object or form body is required.")
        description = data.get("description") or ""
        if not isinstance(description, str):
            return invalid_request("Proposal description must be text.")
        description = description.strip()

        proposal_id = get_election().add_proposal(current_user.identity, description)
        return {"ok": True, "proposal": {"id": proposal_id, "description": description}}

    @app.route("/election/votes", methods=["POST"])
    @login_required
    def cast_vote():
        data = request_data()
        if data is None:
            return invalid_request("A JSON object or form body is required.")

        proposal_id = parse_proposal_id(data.get("proposal_id"))
        if proposal_id is None:
            return invalid_request(
                "An integer proposal_id is required.", code="invalid_reference"
            )

        election = get_election()
        election.vote(current_user.identity, proposal_id)
        return {
            "ok": True,
            "voter": election.get_voter(current_user.identity).as_dict(),
        }
