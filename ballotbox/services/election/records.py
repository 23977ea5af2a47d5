from dataclasses import dataclass
from typing import Optional


@dataclass
class VoterRecord:
    is_registered: bool = False
    has_voted: bool = False
    voted_proposal_id: Optional[int] = None

    def as_dict(self):
        return {
            "is_registered": self.is_registered,
            "has_voted": self.has_voted,
            "voted_proposal_id": self.voted_proposal_id,
        }


@dataclass
class Proposal:
    description: str
    vote_count: int = 0

    def as_dict(self):
        return {"description": self.description, "vote_count": self.vote_count}


def serialize_proposals(proposals):
    return [
        dict(proposal.as_dict(), id=proposal_id)
        for proposal_id, proposal in enumerate(proposals)
    ]
