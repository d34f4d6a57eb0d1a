"""Conjugador - Portuguese verb conjugation engine."""

from .grammar import Mood, Person, Tense, Variant
from .verb import Defect, Verb
from .table import Cell, ConjugationTable, Row, VariantTable, join_forms
from .exceptions import (
    AuxiliaryTablesMissingError,
    ConjugadorError,
    InvalidRequestError,
    InvalidVerbError,
    UnclassifiedVerbError,
)
from .conjugator import Conjugator, VerbOptions, conjugate_request
from .auxiliary import AuxiliaryTables, build_auxiliary_tables
from .pronouns import contract_pronouns

__all__ = [
    # Grammar
    "Mood",
    "Person",
    "Tense",
    "Variant",
    # Verbs and tables
    "Defect",
    "Verb",
    "Cell",
    "Row",
    "ConjugationTable",
    "VariantTable",
    "join_forms",
    # Errors
    "ConjugadorError",
    "InvalidVerbError",
    "InvalidRequestError",
    "AuxiliaryTablesMissingError",
    "UnclassifiedVerbError",
    # Conjugation
    "Conjugator",
    "VerbOptions",
    "conjugate_request",
    "AuxiliaryTables",
    "build_auxiliary_tables",
    "contract_pronouns",
]
