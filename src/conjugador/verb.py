"""Portuguese verb normalization and irregularity flags.

A ``Verb`` is built from a raw candidate infinitive:
- Characters outside the Portuguese alphabet are dropped
- Runs of hyphen-like characters collapse into one ``-``
- The result must end in -ar, -er, -ir, -por, or be ``pôr``

Each verb carries its spelling in the four orthographic variants, the stem
of each spelling, and flags that tell the composer which closed families of
irregular or defective verbs it belongs to.
"""

import logging
from dataclasses import dataclass
from enum import StrEnum, auto

from conjugador.exceptions import InvalidVerbError
from conjugador.grammar import Person, Tense, Variant
from conjugador.spelling import spell_for

logger = logging.getLogger(__name__)


# ============================================================================
# Alphabet
# ============================================================================

PORTUGUESE_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzáàãçéêíóõôúü")

# Keyboard hyphen, hyphen, non-breaking hyphen, figure dash, en dash, em dash
HYPHENS = frozenset("-‐‑‒–—")

VALID_ENDINGS = ("ar", "er", "ir", "por")


# ============================================================================
# Closed verb families
# ============================================================================

# Verbs conjugated like a short irregular root, keyed by that root
DERIVATIVES: dict[str, frozenset[str]] = {
    "dar": frozenset({"desdar", "redar"}),
    "estar": frozenset({"sobestar", "sobre-estar", "sobreestar", "sobrestar"}),
    "ler": frozenset({"reler", "treler", "tresler"}),
    "ter": frozenset({
        "abster", "ater", "conter", "deter", "entreter", "manter", "obter",
        "reter", "suster",
    }),
    "ver": frozenset({
        "antever", "circunver", "entrever", "interver", "prever", "prover",
        "rever", "telever",
    }),
    "vir": frozenset({
        "advir", "avir", "contravir", "convir", "desavir", "desconvir",
        "devir", "entrevir", "intervir", "obvir", "provir", "reavir",
        "reconvir", "revir", "sobrevir", "subvir",
    }),
}


class Defect(StrEnum):
    """Closed families of defective verbs."""

    THIRD_SINGULAR_ONLY = auto()   # weather verbs: only "ele" forms
    THIRD_PERSON_ONLY = auto()     # only "ele" and "eles" forms
    ARRHIZOTONIC_ONLY = auto()     # present indicative only stressed on the ending
    NO_FIRST_SINGULAR = auto()     # present indicative lacks "eu"

    def missing_persons(self, tense: Tense) -> frozenset[Person]:
        """Persons with no written form in ``tense`` for verbs of this family.

        Impersonal tenses are never affected.
        """
        if tense.is_impersonal:
            return frozenset()
        match self:
            case Defect.THIRD_SINGULAR_ONLY | Defect.THIRD_PERSON_ONLY if tense.is_imperative:
                return frozenset(Person)
            case Defect.THIRD_SINGULAR_ONLY:
                return frozenset(Person) - {Person.THIRD_SINGULAR}
            case Defect.THIRD_PERSON_ONLY:
                return frozenset(Person) - {Person.THIRD_SINGULAR, Person.THIRD_PLURAL}
            case Defect.ARRHIZOTONIC_ONLY if tense == Tense.PRESENT_INDICATIVE:
                return frozenset({
                    Person.FIRST_SINGULAR,
                    Person.SECOND_SINGULAR,
                    Person.THIRD_SINGULAR,
                    Person.THIRD_PLURAL,
                })
            case Defect.NO_FIRST_SINGULAR if tense == Tense.PRESENT_INDICATIVE:
                return frozenset({Person.FIRST_SINGULAR})
            case _:
                return frozenset()


DEFECTIVE_VERBS: dict[Defect, frozenset[str]] = {
    Defect.THIRD_SINGULAR_ONLY: frozenset({
        "borraçar", "carujar", "chuvinhar", "merujar", "relampar", "trovejar",
    }),
    Defect.THIRD_PERSON_ONLY: frozenset({
        "aprazer", "aulir", "concernir", "condoer", "desaprazer", "doer",
        "grassitar", "later", "prazer", "precludir", "precluir", "reaprazer",
        "zinir", "zornar",
    }),
    Defect.ARRHIZOTONIC_ONLY: frozenset({
        "adir", "aducir", "aguerrir", "combalir", "condir", "desempedernir",
        "desflorir", "desgornir", "despavorir", "desprecaver", "embair",
        "empedernir", "enfortir", "entalir", "esbaforir", "escarnir",
        "espavorir", "estransir", "estresir", "exinanir", "exir", "falir",
        "florir", "fornir", "fretenir", "garnir", "garrir", "gornir",
        "gualdir", "guarnir", "inanir", "lenir", "manutenir", "moquir",
        "pertransir", "precaver", "reaver", "reflorir", "remir", "renhir",
        "ressequir", "retransir", "suquir", "susquir", "transir",
    }),
    Defect.NO_FIRST_SINGULAR: frozenset({
        "abolir", "aborrir", "acupremir", "adurir", "apodrir", "balir",
        "banir", "barrir", "bramir", "brandir", "branquir", "buir", "carpir",
        "cernir", "colorir", "comburir", "comedir", "delir", "demolir",
        "demulcir", "descolorir", "descomedir", "emolir", "enganir",
        "esmarrir", "excelir", "extorquir", "fremir", "ganir", "guarir",
        "languir", "monir", "multicolorir", "parturir", "premir", "pruir",
        "prurir", "puir", "raer", "rebolir", "recolorir", "relinquir",
        "relinqüir", "reprurir", "retorquir", "retorqüir", "ruir", "soer",
    }),
}


# ============================================================================
# Normalization
# ============================================================================


def normalize(raw: str) -> str:
    """Strip a raw candidate infinitive down to Portuguese letters and hyphens.

    Args:
        raw: Candidate infinitive, assumed lowercase

    Returns:
        The cleaned string (possibly empty)

    Examples:
        >>> normalize("  fa lar! ")
        'falar'
        >>> normalize("sobre—–estar")
        'sobre-estar'
    """
    output: list[str] = []
    last_was_hyphen = False
    for char in raw:
        if char in PORTUGUESE_LETTERS:
            output.append(char)
            last_was_hyphen = False
        elif char in HYPHENS:
            if not last_was_hyphen:
                output.append("-")
                last_was_hyphen = True
        else:
            last_was_hyphen = False
    return "".join(output)


def has_valid_ending(word: str) -> bool:
    """Check that a cleaned word has the shape of a Portuguese infinitive."""
    if len(word) < 2:
        return False
    return word == "pôr" or word.endswith(VALID_ENDINGS)


# ============================================================================
# Verb
# ============================================================================


@dataclass(frozen=True, slots=True)
class Verb:
    """A validated infinitive with its spelling and stem in every variant.

    ``infinitives`` and ``stems`` are ordered like ``Variant``. Use
    ``Verb.parse`` to build one from raw input.
    """

    infinitive: str
    ending: str
    infinitives: tuple[str, str, str, str]
    stems: tuple[str, str, str, str]

    @classmethod
    def parse(cls, raw: str) -> "Verb":
        """Validate and canonicalize a raw candidate infinitive.

        Raises:
            InvalidVerbError: If the cleaned input is not an infinitive
        """
        infinitive = normalize(raw)
        if not has_valid_ending(infinitive):
            raise InvalidVerbError(raw, infinitive)

        infinitives = tuple(spell_for(infinitive, variant) for variant in Variant)
        stems = tuple(spelling[:-2] for spelling in infinitives)
        logger.debug(f"Parsed verb {infinitive!r} with variants {infinitives}")
        return cls(
            infinitive=infinitive,
            ending=infinitive[-2:],
            infinitives=infinitives,
            stems=stems,
        )

    def infinitive_for(self, variant: Variant) -> str:
        return self.infinitives[variant_index(variant)]

    def stem_for(self, variant: Variant) -> str:
        return self.stems[variant_index(variant)]

    @property
    def derivative_of(self) -> str | None:
        """The irregular root this verb conjugates like (``conter`` -> ``ter``)."""
        for root, members in DERIVATIVES.items():
            if self.infinitive in members:
                return root
        return None

    @property
    def defect(self) -> Defect | None:
        for kind, members in DEFECTIVE_VERBS.items():
            if self.infinitive in members:
                return kind
        return None

    @property
    def is_third_person_only(self) -> bool:
        return self.defect in (Defect.THIRD_SINGULAR_ONLY, Defect.THIRD_PERSON_ONLY)

    def missing_persons(self, tense: Tense) -> frozenset[Person]:
        defect = self.defect
        return defect.missing_persons(tense) if defect else frozenset()


_VARIANT_INDEX = {variant: index for index, variant in enumerate(Variant)}


def variant_index(variant: Variant) -> int:
    """Position of ``variant`` in per-variant tuples."""
    return _VARIANT_INDEX[variant]
