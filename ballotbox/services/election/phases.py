REGISTERING_VOTERS = "REGISTERING_VOTERS"
PROPOSALS_REGISTRATION_STARTED = "PROPOSALS_REGISTRATION_STARTED"
PROPOSALS_REGISTRATION_ENDED = "PROPOSALS_REGISTRATION_ENDED"
VOTING_SESSION_STARTED = "VOTING_SESSION_STARTED"
VOTING_SESSION_ENDED = "VOTING_SESSION_ENDED"
VOTES_TALLIED = "VOTES_TALLIED"

PHASES = (
    REGISTERING_VOTERS,
    PROPOSALS_REGISTRATION_STARTED,
    PROPOSALS_REGISTRATION_ENDED,
    VOTING_SESSION_STARTED,
    VOTING_SESSION_ENDED,
    VOTES_TALLIED,
)


def next_phase(phase):
    position = PHASES.index(phase)
    if position + 1 >= len(PHASES):
        raise ValueError(f"{phase} is the final phase")
    return PHASES[position + 1]
