"""
Exceptions raised by the poker round core.

Every error is raised before any state is changed, so a caller can surface
the message and carry on with the same round.
"""


class PokerError(Exception):
    """Base class for all round errors."""

    @property
    def kind(self) -> str:
        """Error kind without the ``Error`` suffix, e.g. ``InvalidRaise``."""
        name = type(self).__name__
        return name[:-len("Error")] if name.endswith("Error") else name


class EmptyDeckError(PokerError):
    """Not enough cards remain in the deck."""


class InsufficientChipsError(PokerError, ValueError):
    """A participant tried to commit more chips than they hold."""


class InactiveParticipantError(PokerError, ValueError):
    """A folded participant tried to act."""


class InvalidActionError(PokerError, ValueError):
    """Unknown action tag."""


class InvalidRaiseError(PokerError, ValueError):
    """Raise target missing or not above the current table bet."""


class InvalidStreetTransitionError(PokerError, ValueError):
    """Street change that is not the immediate successor."""


class PrematureShowdownError(PokerError):
    """Showdown requested before the river."""


class InvalidVariantError(PokerError, ValueError):
    """Game variant other than Holdem or Omaha."""


class InvalidOpponentCountError(PokerError, ValueError):
    """Opponent count outside the supported range."""


class UnknownSeatError(PokerError, IndexError):
    """Seat index does not exist at the table."""


class RoundNotStartedError(PokerError):
    """Play requested on a table whose first round has not been started."""
