"""Conjugation tables of the auxiliary verbs ter, haver, estar and ser.

Compound tenses need the simple tenses of ter and haver; progressive and
passive forms need every tense of estar and ser, compound ones included.
The tables are built once per process, ter/haver first, then estar/ser.
"""

import logging
import threading
import time
from dataclasses import dataclass
from functools import lru_cache
from typing import Self

from conjugador.conjugator import Conjugator
from conjugador.exceptions import AuxiliaryTablesMissingError
from conjugador.grammar import Person, Tense, Variant
from conjugador.table import Cell, ConjugationTable
from conjugador.verb import Verb

logger = logging.getLogger(__name__)

AUXILIARY_VERBS = ("ter", "haver", "estar", "ser")

_build_lock = threading.Lock()


@dataclass(frozen=True, slots=True)
class AuxiliaryTables:
    """Read-only tables of the four auxiliary verbs.

    ``estar`` and ``ser`` are ``None`` only while they are themselves being
    built from ``ter`` and ``haver``.
    """

    ter: ConjugationTable
    haver: ConjugationTable
    estar: ConjugationTable | None = None
    ser: ConjugationTable | None = None

    @classmethod
    def get_instance(cls) -> Self:
        """Get or build the process-wide tables."""
        with _build_lock:
            return build_auxiliary_tables()

    def table(self, verb: str) -> ConjugationTable:
        match verb:
            case "ter" | "haver" | "estar" | "ser":
                table = getattr(self, verb)
            case _:
                raise ValueError(f"Unhandled auxiliary verb: {verb!r}")
        if table is None:
            raise AuxiliaryTablesMissingError(f"The {verb!r} table has not been built")
        return table

    def form(self, verb: str, tense: Tense, variant: Variant, person: Person | int = 0) -> Cell:
        """Every accepted form of an auxiliary verb in one slot.

        Examples:
            >>> tables = AuxiliaryTables.get_instance()
            >>> tables.form("haver", Tense.PRESENT_INDICATIVE, Variant.BP_POST_REFORM, 3)
            ('havemos', 'hemos')
        """
        table = self.table(verb)
        if not table.has(tense):
            raise AuxiliaryTablesMissingError(
                f"{tense.name} of {verb!r} is not part of the auxiliary tables"
            )
        return table.cell(tense, variant, person)


@lru_cache(maxsize=1)
def build_auxiliary_tables() -> AuxiliaryTables:
    """Conjugate ter and haver up to the past participle, then estar and ser fully."""
    start = time.perf_counter()

    ter = Conjugator(Verb.parse("ter")).conjugate_simple()
    haver = Conjugator(Verb.parse("haver")).conjugate_simple()
    partial = AuxiliaryTables(ter=ter, haver=haver)

    estar = Conjugator(Verb.parse("estar"), partial).conjugate_all()
    ser = Conjugator(Verb.parse("ser"), partial).conjugate_all()
    tables = AuxiliaryTables(ter=ter, haver=haver, estar=estar, ser=ser)

    elapsed = (time.perf_counter() - start) * 1000
    logger.info(f"Built auxiliary tables for {', '.join(AUXILIARY_VERBS)} in {elapsed:.1f}ms")
    return tables
