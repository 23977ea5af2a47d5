from ballotbox.services.election.errors import (
    AlreadyRegisteredError,
    AlreadyVotedError,
    ElectionError,
    EmptyProposalError,
    InsufficientProposalsError,
    InvalidPhaseError,
    InvalidReferenceError,
    UnauthorizedError,
)
from ballotbox.services.election.records import Proposal, VoterRecord
from ballotbox.services.election.state_machine import Election
from ballotbox.services.election.tally import NO_WINNER_DESCRIPTION, tally_proposals

__all__ = [
    "AlreadyRegisteredError",
    "AlreadyVotedError",
    "Election",
    "ElectionError",
    "EmptyProposalError",
    "InsufficientProposalsError",
    "InvalidPhaseError",
    "InvalidReferenceError",
    "NO_WINNER_DESCRIPTION",
    "Proposal",
    "UnauthorizedError",
    "VoterRecord",
    "tally_proposals",
]
