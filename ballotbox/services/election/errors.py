class ElectionError(Exception):
    code = "election_error"
    status_code = 400


class UnauthorizedError(ElectionError):
    code = "unauthorized"
    status_code = 403


class InvalidPhaseError(ElectionError):
    code = "invalid_phase"
    status_code = 409

    def __init__(self, operation, required_phase, current_phase):
        super().__init__(
            f"{operation} requires phase {required_phase}, current phase is {current_phase}"
        )
        self.operation = operation
        self.required_phase = required_phase
        self.current_phase = current_phase


class AlreadyRegisteredError(ElectionError):
    code = "already_registered"
    status_code = 409


class AlreadyVotedError(ElectionError):
    code = "already_voted"
    status_code = 409


class InvalidReferenceError(ElectionError):
    code = "invalid_reference"
    status_code = 400


class InsufficientProposalsError(ElectionError):
    code = "insufficient_proposals"
    status_code = 409


class EmptyProposalError(ElectionError):
    code = "empty_proposal"
    status_code = 400
