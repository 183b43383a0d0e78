"""Errors raised by the dispatch core"""


class DispatchError(Exception):
    """Base class for every error the dispatch core raises"""


class InvalidFloor(DispatchError, ValueError):
    """Floor index outside [0, num_floors)"""


class InvalidElevator(DispatchError, ValueError):
    """Elevator index outside [0, num_elevators)"""


class NoSuchButton(DispatchError, ValueError):
    """UP call on the top floor or DOWN call on the bottom floor"""


class InvalidDirection(DispatchError, ValueError):
    """A hall call registered with a direction that has no button"""


class InvalidState(DispatchError, RuntimeError):
    """
    State machine invariant violation (e.g. opening while NEUTRAL)

    Signals a programming defect, not bad input. Callers should not try
    to recover from it.
    """
