"""Errors raised by the conjugation engine."""


class ConjugadorError(Exception):
    """Base class for every error raised by this package."""


class InvalidVerbError(ConjugadorError, ValueError):
    """The candidate infinitive is not a valid Portuguese infinitive."""

    def __init__(self, raw: str, cleaned: str):
        self.raw = raw
        self.cleaned = cleaned
        super().__init__(f"Invalid infinitive: {raw!r}")


class InvalidRequestError(ConjugadorError, ValueError):
    """A conjugation request has an unknown mood or an invalid pronoun combination."""


class AuxiliaryTablesMissingError(ConjugadorError, RuntimeError):
    """A compound or periphrastic form was requested without auxiliary tables."""


class UnclassifiedVerbError(ConjugadorError, RuntimeError):
    """No pattern in a tense family matched the verb.

    Every pattern table ends in catch-all rules, so this signals a broken
    table rather than bad input.
    """
