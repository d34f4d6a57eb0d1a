"""Stem slots, combination strategies and row composition.

A recipe names up to four stems, six endings and, per person, a strategy
deciding which stems a variant uses:

- ``SingleStem(slot)``: one form, the same in every variant
- ``FreeVariation(a, b)``: several accepted forms, the same in every variant
- ``ReformSplit(post, pre)``: spelling differs before/after the 1990 agreement
- ``DialectSplit(brazil, europe)``: Brazil and Portugal differ

Split strategies nest, so e.g. "Brazil accepts both stems, Portugal keeps the
first before the reform and the third after it" is

    DialectSplit(brazil=FreeVariation(STEM, STEM2), europe=ReformSplit(STEM, STEM3))
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import StrEnum, auto

from conjugador.grammar import Person, Variant
from conjugador.table import LITERAL_SEPARATOR, Cell, Row, cell_of, split_forms


class Slot(StrEnum):
    STEM = auto()
    STEM2 = auto()
    STEM3 = auto()
    STEM4 = auto()


# ============================================================================
# Stem transformations
# ============================================================================


def replace_from_end(word: str, n: int, text: str) -> str:
    """Replace the nth-from-last character of ``word`` with ``text``.

    ``text`` may be empty (deletion) or longer than one character (insertion).

    Examples:
        >>> replace_from_end("conhec", 1, "ç")
        'conheç'
        >>> replace_from_end("sa", 2, "ú")
        'úa'
        >>> replace_from_end("odi", 1, "ei")
        'odei'
    """
    if not 1 <= n <= len(word):
        raise ValueError(f"Cannot replace character {n} from the end of {word!r}")
    index = len(word) - n
    return word[:index] + text + word[index + 1:]


def drop_last(word: str, n: int) -> str:
    """Remove the last ``n`` characters of ``word``."""
    return word[:-n] if n else word


# ============================================================================
# Strategies
# ============================================================================


@dataclass(frozen=True, slots=True)
class Absent:
    """No written form."""

    def slots_for(self, variant: Variant) -> tuple[Slot, ...]:
        return ()


@dataclass(frozen=True, slots=True)
class SingleStem:
    slot: Slot

    def slots_for(self, variant: Variant) -> tuple[Slot, ...]:
        return (self.slot,)


@dataclass(frozen=True, slots=True)
class FreeVariation:
    slots: tuple[Slot, ...]

    def slots_for(self, variant: Variant) -> tuple[Slot, ...]:
        return self.slots


@dataclass(frozen=True, slots=True)
class ReformSplit:
    post: "Strategy"
    pre: "Strategy"

    def slots_for(self, variant: Variant) -> tuple[Slot, ...]:
        chosen = self.post if variant.is_post_reform else self.pre
        return chosen.slots_for(variant)


@dataclass(frozen=True, slots=True)
class DialectSplit:
    brazil: "Strategy"
    europe: "Strategy"

    def slots_for(self, variant: Variant) -> tuple[Slot, ...]:
        chosen = self.brazil if variant.is_brazilian else self.europe
        return chosen.slots_for(variant)


Strategy = Absent | SingleStem | FreeVariation | ReformSplit | DialectSplit

ABSENT = Absent()
STEM = SingleStem(Slot.STEM)
STEM2 = SingleStem(Slot.STEM2)
STEM3 = SingleStem(Slot.STEM3)
STEM4 = SingleStem(Slot.STEM4)
BOTH = FreeVariation((Slot.STEM, Slot.STEM2))
BOTH_2_3 = FreeVariation((Slot.STEM2, Slot.STEM3))
BOTH_2_1 = FreeVariation((Slot.STEM2, Slot.STEM))

# Named combinations shared by several tags
PRE_REFORM_STEM2 = ReformSplit(post=STEM, pre=STEM2)
REFORM_STEM2_STEM3 = ReformSplit(post=STEM2, pre=STEM3)
BRAZIL_STEM2 = DialectSplit(brazil=STEM2, europe=STEM)
BRAZIL_BOTH = DialectSplit(brazil=BOTH, europe=STEM)
BRAZIL_PRE_REFORM_STEM2 = DialectSplit(brazil=PRE_REFORM_STEM2, europe=STEM)
EUROPE_PRE_REFORM_STEM3 = DialectSplit(brazil=STEM, europe=ReformSplit(post=STEM, pre=STEM3))
BRAZIL_PRE_REFORM_STEM3 = DialectSplit(brazil=ReformSplit(post=STEM, pre=STEM3), europe=STEM)
BRAZIL_PRE_REFORM_STEM4 = DialectSplit(brazil=ReformSplit(post=STEM, pre=STEM4), europe=STEM)
ALL_BUT_BRAZIL_POST_REFORM_STEM2 = DialectSplit(brazil=PRE_REFORM_STEM2, europe=STEM2)


def every_person(strategy: Strategy) -> list[Strategy]:
    return [strategy] * len(Person)


def rhizotonic(strategy: Strategy, default: Strategy = STEM) -> list[Strategy]:
    """``strategy`` for the persons stressed on the stem (eu, tu, ele, eles)."""
    return [strategy, strategy, strategy, default, default, strategy]


# ============================================================================
# Recipes
# ============================================================================


@dataclass
class Recipe:
    """How one variant of one tense is composed.

    ``override`` replaces composition entirely for fully irregular rows.
    """

    stems: dict[Slot, str]
    endings: Sequence[str]
    strategies: list[Strategy] = field(default_factory=lambda: every_person(STEM))
    override: Row | None = None

    @property
    def stem(self) -> str:
        return self.stems[Slot.STEM]

    def set(self, slot: Slot, value: str) -> None:
        self.stems[slot] = value

    def use(self, persons: Sequence[int], strategy: Strategy) -> None:
        for person in persons:
            self.strategies[person] = strategy

    def compose(self, variant: Variant) -> Row:
        if self.override is not None:
            return list(self.override)
        return [
            self.compose_person(person, variant)
            for person in range(len(self.endings))
        ]

    def compose_person(self, person: int, variant: Variant) -> Cell:
        slots = self.strategies[person].slots_for(variant)
        ending = self.endings[person]
        try:
            return cell_of(*(self.stems[slot] + ending for slot in slots))
        except KeyError as e:
            raise ValueError(f"Unhandled stem slot {e.args[0]} for person {person}") from None


def recipe(stem: str, endings: Sequence[str]) -> Recipe:
    return Recipe(stems={Slot.STEM: stem}, endings=list(endings))


def rows_from_text(*forms: str | None) -> Row:
    """Build a row from slash-joined literals, ``None`` marking an absent person."""
    return [split_forms(form, LITERAL_SEPARATOR) for form in forms]


def merge_rows(*rows: Row) -> Row:
    """Join the alternatives of several rows person by person."""
    merged: Row = []
    for cells in zip(*rows):
        forms = [form for cell in cells if cell is not None for form in cell]
        merged.append(cell_of(*forms))
    return merged


def mask_row(row: Row, persons) -> Row:
    """Blank out the given persons of a row."""
    return [None if index in persons else cell for index, cell in enumerate(row)]
