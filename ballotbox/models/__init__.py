from ballotbox.models.election_event import ElectionEvent

__all__ = ["ElectionEvent"]
