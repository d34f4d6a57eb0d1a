"""Conjugador services module."""

from .conjugation import (
    conjugate_verb,
    describe_verb,
    list_tenses,
    parse_tenses,
)

__all__ = [
    "conjugate_verb",
    "describe_verb",
    "list_tenses",
    "parse_tenses",
]
