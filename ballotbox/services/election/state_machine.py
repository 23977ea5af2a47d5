import copy
import logging
import threading
from dataclasses import replace

from ballotbox.services.election import phases
from ballotbox.services.election.errors import (
    AlreadyRegisteredError,
    AlreadyVotedError,
    EmptyProposalError,
    InsufficientProposalsError,
    InvalidPhaseError,
    InvalidReferenceError,
    UnauthorizedError,
)
from ballotbox.services.election.events import (
    PhaseChanged,
    ProposalRegistered,
    Voted,
    VoterRegistered,
    discard_event,
)
from ballotbox.services.election.records import (
    Proposal,
    VoterRecord,
    serialize_proposals,
)
from ballotbox.services.election.tally import tally_proposals

logger = logging.getLogger(__name__)

MIN_PROPOSALS_FOR_VOTING = 2


class Election:
    """Single-election workflow owned by one administrator identity.

    Every public method runs under one lock: role and phase checks, the
    mutation and the event sink call form a single critical section, so
    calls are linearizable. Preconditions are all checked before anything
    is mutated; a rejected call changes nothing and emits nothing.

    The voter registry survives ``reset``. A voter who voted in a previous
    cycle keeps ``has_voted`` and ``voted_proposal_id`` and cannot vote
    again until the registry is rebuilt with a fresh ``Election``.
    """

    def __init__(self, admin_identity, event_sink=None):
        if not admin_identity:
            raise ValueError("admin_identity is required")
        self.admin_identity = admin_identity
        self._event_sink = event_sink or discard_event
        self._lock = threading.Lock()
        self._phase = phases.REGISTERING_VOTERS
        self._voters = {}
        self._proposals = []
        self._winner = None
        self._tally_result = None

    # -- reads -------------------------------------------------------------

    @property
    def current_phase(self):
        with self._lock:
            return self._phase

    def get_voter(self, identity):
        with self._lock:
            record = self._voters.get(identity)
            return replace(record) if record is not None else VoterRecord()

    def list_proposals(self):
        with self._lock:
            return [replace(proposal) for proposal in self._proposals]

    def get_winner(self):
        with self._lock:
            self._require_phase("get_winner", phases.VOTES_TALLIED)
            return replace(self._winner) if self._winner is not None else None

    def get_results(self):
        with self._lock:
            self._require_phase("get_results", phases.VOTES_TALLIED)
            return copy.deepcopy(self._tally_result)

    def snapshot(self):
        with self._lock:
            winner = None
            if self._phase == phases.VOTES_TALLIED and self._winner is not None:
                winner = self._winner.as_dict()
            return {
                "phase": self._phase,
                "proposals": serialize_proposals(self._proposals),
                "winner": winner,
            }

    # -- administrator operations -----------------------------------------

    def register_voter(self, caller, identity):
        with self._lock:
            self._require_admin(caller, "register_voter")
            self._require_phase("register_voter", phases.REGISTERING_VOTERS)
            record = self._voters.get(identity)
            if record is not None and record.is_registered:
                raise self._rejected(
                    AlreadyRegisteredError(f"{identity} is already registered")
                )

            self._voters.setdefault(identity, VoterRecord()).is_registered = True
            logger.info("Registered voter %s", identity)
            self._event_sink(VoterRegistered(identity=identity))

    def start_proposal_registration(self, caller):
        with self._lock:
            self._require_admin(caller, "start_proposal_registration")
            self._advance("start_proposal_registration", phases.REGISTERING_VOTERS)

    def end_proposal_registration(self, caller):
        with self._lock:
            self._require_admin(caller, "end_proposal_registration")
            self._advance(
                "end_proposal_registration", phases.PROPOSALS_REGISTRATION_STARTED
            )

    def start_voting_session(self, caller):
        with self._lock:
            self._require_admin(caller, "start_voting_session")
            self._require_phase(
                "start_voting_session", phases.PROPOSALS_REGISTRATION_ENDED
            )
            if len(self._proposals) < MIN_PROPOSALS_FOR_VOTING:
                raise self._rejected(
                    InsufficientProposalsError(
                        f"At least {MIN_PROPOSALS_FOR_VOTING} proposals are required, "
                        f"got {len(self._proposals)}"
                    )
                )
            self._advance("start_voting_session", phases.PROPOSALS_REGISTRATION_ENDED)

    def end_voting_session(self, caller):
        with self._lock:
            self._require_admin(caller, "end_voting_session")
            self._advance("end_voting_session", phases.VOTING_SESSION_STARTED)

    def tally(self, caller):
        with self._lock:
            self._require_admin(caller, "tally")
            self._require_phase("tally", phases.VOTING_SESSION_ENDED)

            result = tally_proposals(self._proposals)
            self._tally_result = result
            self._winner = result["winner"]
            logger.info(
                "Tallied %s votes, winner=%s tie=%s",
                result["total_votes"],
                result["winner_id"],
                result["is_tie"],
            )
            self._advance("tally", phases.VOTING_SESSION_ENDED)
            return replace(self._winner) if self._winner is not None else None

    def reset(self, caller):
        with self._lock:
            self._require_admin(caller, "reset")
            previous = self._phase
            self._proposals = []
            self._winner = None
            self._tally_result = None
            self._phase = phases.REGISTERING_VOTERS
            logger.info("Election reset from %s", previous)

    # -- voter operations --------------------------------------------------

    def add_proposal(self, caller, description):
        with self._lock:
            self._require_registered(caller, "add_proposal")
            self._require_phase("add_proposal", phases.PROPOSALS_REGISTRATION_STARTED)
            description = (description or "").strip()
            if not description:
                raise self._rejected(EmptyProposalError("Proposal description is required."))

            self._proposals.append(Proposal(description=description))
            proposal_id = len(self._proposals) - 1
            logger.info("Voter %s registered proposal %s", caller, proposal_id)
            self._event_sink(ProposalRegistered(proposal_id=proposal_id))
            return proposal_id

    def vote(self, caller, proposal_id):
        with self._lock:
            self._require_registered(caller, "vote")
            self._require_phase("vote", phases.VOTING_SESSION_STARTED)
            record = self._voters[caller]
            if record.has_voted:
                raise self._rejected(AlreadyVotedError(f"{caller} has already voted"))
            in_bounds = (
                isinstance(proposal_id, int)
                and not isinstance(proposal_id, bool)
                and 0 <= proposal_id < len(self._proposals)
            )
            if not in_bounds:
                raise self._rejected(
                    InvalidReferenceError(f"Proposal {proposal_id} does not exist")
                )

            record.has_voted = True
            record.voted_proposal_id = proposal_id
            self._proposals[proposal_id].vote_count += 1
            logger.info("Voter %s voted for proposal %s", caller, proposal_id)
            self._event_sink(Voted(identity=caller, proposal_id=proposal_id))

    # -- helpers (lock must be held) ---------------------------------------

    def _advance(self, operation, required_phase):
        self._require_phase(operation, required_phase)
        previous = self._phase
        self._phase = phases.next_phase(previous)
        logger.info("Phase changed %s -> %s", previous, self._phase)
        self._event_sink(PhaseChanged(previous_phase=previous, new_phase=self._phase))

    def _require_admin(self, caller, operation):
        if caller != self.admin_identity:
            raise self._rejected(
                UnauthorizedError(f"{operation} is restricted to the administrator")
            )

    def _require_registered(self, caller, operation):
        record = self._voters.get(caller)
        if record is None or not record.is_registered:
            raise self._rejected(
                UnauthorizedError(f"{operation} is restricted to registered voters")
            )

    def _require_phase(self, operation, required_phase):
        if self._phase != required_phase:
            raise self._rejected(
                InvalidPhaseError(operation, required_phase, self._phase)
            )

    def _rejected(self, error):
        logger.debug("Rejected call: %s (%s)", error, error.code)
        return error
