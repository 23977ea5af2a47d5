from ballotbox.models import ElectionEvent
from ballotbox.services.audit import list_election_events, record_election_event
from ballotbox.services.election.events import PhaseChanged, Voted, VoterRegistered


def test_record_election_event_persists_payload(db_session):
    record_election_event(Voted(identity="alice", proposal_id=2))

    stored = ElectionEvent.query.one()
    assert stored.name == "Voted"
    assert stored.payload == {"identity": "alice", "proposal_id": 2}
    assert stored.created_at is not None


def test_list_election_events_keeps_emission_order(db_session):
    record_election_event(VoterRegistered(identity="alice"))
    record_election_event(PhaseChanged("REGISTERING_VOTERS", "PROPOSALS_REGISTRATION_STARTED"))

    events = list_election_events()

    assert [event["name"] for event in events] == ["VoterRegistered", "PhaseChanged"]
    assert events[1]["payload"] == {
        "previous_phase": "REGISTERING_VOTERS",
        "new_phase": "PROPOSALS_REGISTRATION_STARTED",
    }
