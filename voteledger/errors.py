"""Failure kinds raised by the voting ledger.

Every domain failure rejects a single operation with no partial effect.
``LedgerUnavailable`` is kept outside the domain hierarchy: it reports a
broken event journal, not a bad request.
"""


class LedgerError(Exception):
    """Base class for deterministic, caller-input-driven ledger failures."""

    kind = "LedgerError"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class Unauthorized(LedgerError):
    kind = "Unauthorized"

    def __init__(self, caller_identity: str):
        super().__init__(f"Identity {caller_identity!r} is not allowed to add candidates")
        self.caller_identity = caller_identity


class InvalidInput(LedgerError):
    kind = "InvalidInput"


class InvalidCandidateIndex(LedgerError):
    kind = "InvalidCandidateIndex"

    def __init__(self, candidate_index, candidate_count: int):
        super().__init__(
            f"Invalid candidate index {candidate_index!r}; "
            f"expected 0 <= index < {candidate_count}"
        )
        self.candidate_index = candidate_index
        self.candidate_count = candidate_count


class AlreadyVoted(LedgerError):
    kind = "AlreadyVoted"

    def __init__(self, voter_identity: str):
        super().__init__(f"Voter {voter_identity!r} has already voted")
        self.voter_identity = voter_identity


class NoCandidates(LedgerError):
    kind = "NoCandidates"

    def __init__(self):
        super().__init__("No candidates available")


class LedgerUnavailable(Exception):
    """The event journal could not record a mutation."""

    kind = "LedgerUnavailable"
