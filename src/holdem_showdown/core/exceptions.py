"""Exceptions raised for invalid showdown input."""


class ShowdownError(ValueError):
    """Base class for all showdown input errors."""
    pass


class InvalidCardError(ShowdownError):
    """A card code that is neither blank nor a valid rank and suit."""
    pass


class DuplicateCardError(ShowdownError):
    """A card that is already assigned to a player or the board."""

    def __init__(self, card):
        self.card = card
        super().__init__(f"Card {card} has already been selected")


class IncompleteHandError(ShowdownError):
    """A hand that is missing cards and cannot be evaluated."""
    pass


class InvalidPlayerNameError(ShowdownError):
    """A player name that is empty after trimming."""
    pass


class InvalidSettingsError(ShowdownError):
    """A settings value outside of its allowed range."""
    pass
