"""Notifications emitted by the election after each committed change.

An event sink is any callable taking a single event. Sinks are called
synchronously, after the mutation and before the operation returns, so the
sequence they observe is the ordered log of state transitions.
"""

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class VoterRegistered:
    identity: str

    name = "VoterRegistered"

    def as_dict(self):
        return asdict(self)


@dataclass(frozen=True)
class PhaseChanged:
    previous_phase: str
    new_phase: str

    name = "PhaseChanged"

    def as_dict(self):
        return asdict(self)


@dataclass(frozen=True)
class ProposalRegistered:
    proposal_id: int

    name = "ProposalRegistered"

    def as_dict(self):
        return asdict(self)


@dataclass(frozen=True)
class Voted:
    identity: str
    proposal_id: int

    name = "Voted"

    def as_dict(self):
        return asdict(self)


def discard_event(event):
    pass
