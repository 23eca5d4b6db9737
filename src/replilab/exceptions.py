"""replilab exceptions."""


class ReplicationError(Exception):
    """Base exception for replilab."""


class InvalidArgumentError(ReplicationError, ValueError):
    """Raised when an enzyme or fork operation receives an out-of-range argument."""


class InvalidSequenceError(ReplicationError, ValueError):
    """Raised when a nucleotide sequence contains symbols outside its alphabet."""


class UnknownOrganismError(ReplicationError, KeyError):
    """Raised when an organism preset name is not registered."""

    def __str__(self) -> str:
        # KeyError would quote the message
        return str(self.args[0]) if self.args else ""


class EnzymeConstructionError(ReplicationError):
    """Raised by EnzymeFactory when an enzyme cannot be built."""


class PrimerError(ReplicationError, ValueError):
    """Raised when an RNA primer cannot be created."""


class FragmentError(ReplicationError, ValueError):
    """Raised when an Okazaki fragment is malformed or biologically implausible."""


class FragmentStateError(ReplicationError):
    """Raised when a fragment or primer lifecycle transition is repeated or out of order."""


class ForkError(ReplicationError, ValueError):
    """Raised when a replication fork is constructed or advanced inconsistently."""


class ReplisomeInitializationError(ReplicationError):
    """Raised when a replisome cannot assemble its enzymes."""


class CoordinatorError(ReplicationError):
    """Raised when the fork coordinator is driven incorrectly."""


class StepBudgetExceededError(CoordinatorError):
    """Raised when replication does not finish within the step budget.

    The coordinator keeps its state, so calling ``complete_replication``
    again with a larger budget resumes the run.
    """

    def __init__(self, steps: int, max_steps: int) -> None:
        self.steps = steps
        self.max_steps = max_steps
        super().__init__(f"Replication did not complete within {max_steps} steps")


class ReplicationFailedError(ReplicationError):
    """Raised by replicate_dna; the message names the phase that failed."""
