# -*- coding: utf-8 -*-
"""Error handling for network decomposition.

Every failure of a decomposition pass is fatal: a malformed graph makes
any partial partition meaningless to the solver, so these exceptions are
raised immediately and never recovered from inside the library.
"""


class DecompositionError(Exception):
    """Base exception for decomposition failures.

    Attributes:
        message: Error message
        station: Name of the offending station (optional)
    """

    def __init__(self, message: str, station: str | None = None):
        self.message = message
        self.station = station
        super().__init__(str(self))

    def __str__(self) -> str:
        """Format as human-readable exception string."""
        if self.station is not None:
            return f"{self.message} (at station `{self.station}`)"
        return self.message


class NoFixedPointError(DecompositionError):
    """Raised when a network has no fixed station to solve into."""

    def __init__(self, message: str = "No fixed points in the network"):
        super().__init__(message)


class NetworkConsistencyError(DecompositionError):
    """Raised when the station graph violates a shape precondition.

    This is a defect of the graph builder, not bad survey data: a station
    with too many or no legs, a leg whose reverse lookup fails, or
    stations left over after the decomposition finished.
    """
