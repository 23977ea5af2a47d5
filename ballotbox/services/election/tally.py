from dataclasses import replace

from ballotbox.services.election.records import Proposal

NO_WINNER_DESCRIPTION = "No Winner !"


def no_winner():
    return Proposal(description=NO_WINNER_DESCRIPTION, vote_count=0)


def tally_proposals(proposals):
    """Scan proposals in index order and pick the one with the most votes.

    A strictly higher count takes the lead and clears the tie flag; an equal
    count only raises the flag. The flag is global, so a tie below the final
    maximum is forgotten once a higher count appears, and an all-zero field
    ends tied. A tied scan yields the "No Winner !" sentinel, an empty one
    yields no winner at all.
    """
    top_vote_count = 0
    best_id = None
    is_tie = False

    for proposal_id, proposal in enumerate(proposals):
        if proposal.vote_count > top_vote_count:
            top_vote_count = proposal.vote_count
            best_id = proposal_id
            is_tie = False
        elif proposal.vote_count == top_vote_count:
            is_tie = True

    if is_tie:
        winner = no_winner()
        winner_id = None
    elif best_id is not None:
        winner = replace(proposals[best_id])
        winner_id = best_id
    else:
        winner = None
        winner_id = None

    total_votes = sum(proposal.vote_count for proposal in proposals)

    option_results = []
    for proposal_id, proposal in enumerate(proposals):
        count = proposal.vote_count
        percent = (count / total_votes * 100) if total_votes > 0 else 0
        option_results.append(
            {
                "id": proposal_id,
                "description": proposal.description,
                "count": count,
                "percent": percent,
            }
        )

    return {
        "total_votes": total_votes,
        "option_results": option_results,
        "winner": winner,
        "winner_id": winner_id,
        "is_tie": is_tie,
        "top_vote_count": top_vote_count,
    }
