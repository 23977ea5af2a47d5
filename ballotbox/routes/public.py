from ballotbox.extensions import get_election
from ballotbox.services.audit import list_election_events
from ballotbox.services.election.records import serialize_proposals


def _serialize_winner(winner):
    return winner.as_dict() if winner is not None else None


def register_public_routes(app):
    @app.route("/election")
    def election_overview():
        return {"ok": True, **get_election().snapshot()}

    @app.route("/election/proposals")
    def list_proposals():
        proposals = serialize_proposals(get_election().list_proposals())
        return {"ok": True, "proposals": proposals}

    @app.route("/election/winner")
    def election_winner():
        return {"ok": True, "winner": _serialize_winner(get_election().get_winner())}

    @app.route("/election/results")
    def election_results():
        result = get_election().get_results()
        result["winner"] = _serialize_winner(result["winner"])
        return {"ok": True, "results": result}

    @app.route("/election/voters/<identity>")
    def voter_status(identity):
        voter = get_election().get_voter(identity).as_dict()
        return {"ok": True, "voter": dict(voter, identity=identity)}

    @app.route("/election/events")
    def election_events():
        return {"ok": True, "events": list_election_events()}
