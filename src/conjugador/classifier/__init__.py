"""Verb classification by irregularity pattern, one table per tense family."""

from conjugador.classifier.matcher import classify, compiled_table, family_of
from conjugador.classifier.patterns import RULES, MatchKind, Rule, TenseFamily

__all__ = [
    "RULES",
    "MatchKind",
    "Rule",
    "TenseFamily",
    "classify",
    "compiled_table",
    "family_of",
]
