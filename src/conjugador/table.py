"""Conjugation tables.

A cell holds every accepted written form of one (tense, variant, person)
slot as an ordered, non-empty tuple, or ``None`` when the verb has no
written form there. Rendering joins alternatives with ``FORM_SEPARATOR``;
literal form data in the composers always uses ``LITERAL_SEPARATOR``.
"""

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field

from conjugador.grammar import Person, Tense, Variant
from conjugador.settings import FORM_SEPARATOR

Cell = tuple[str, ...] | None
Row = list[Cell]

# Joins alternatives inside hard-coded composer literals ("inquo/ínquo"), whatever FORM_SEPARATOR is
LITERAL_SEPARATOR = "/"


def cell_of(*forms: str) -> Cell:
    """Build a cell from alternatives, dropping duplicates in order."""
    unique = tuple(dict.fromkeys(forms))
    return unique or None


def join_forms(cell: Cell, separator: str = FORM_SEPARATOR) -> str | None:
    """Render a cell as text.

    Examples:
        >>> join_forms(("aceitado", "aceito"))
        'aceitado/aceito'
        >>> join_forms(None) is None
        True
    """
    if cell is None:
        return None
    return separator.join(cell)


def split_forms(text: str | None, separator: str = FORM_SEPARATOR) -> Cell:
    """Parse a rendered cell back into its alternatives."""
    if text is None or text == "":
        return None
    return cell_of(*text.split(separator))


def map_cell(cell: Cell, transform) -> Cell:
    """Apply ``transform`` to every alternative of a cell independently."""
    if cell is None:
        return None
    return cell_of(*(transform(form) for form in cell))


def first_form(cell: Cell) -> str | None:
    return cell[0] if cell else None


# ============================================================================
# Tables
# ============================================================================


@dataclass
class VariantTable:
    """One variant's conjugation: tense -> cells (six, or one if impersonal)."""

    variant: Variant
    rows: dict[Tense, Row] = field(default_factory=dict)

    def __getitem__(self, tense: Tense) -> Row:
        return self.rows[tense]

    def __contains__(self, tense: Tense) -> bool:
        return tense in self.rows

    def __iter__(self) -> Iterator[Tense]:
        return iter(self.rows)

    def cell(self, tense: Tense, person: Person | int = 0) -> Cell:
        row = self.rows[tense]
        return row[0] if tense.is_impersonal else row[person]

    def render(self, tenses: Iterable[Tense] | None = None) -> dict[str, list[str | None]]:
        """Rows keyed by tense name with alternatives joined."""
        selected = self.rows if tenses is None else [t for t in tenses if t in self.rows]
        return {
            tense.name.lower(): [join_forms(cell) for cell in self.rows[tense]]
            for tense in selected
        }


@dataclass
class ConjugationTable:
    """Tense -> variant -> cells for every variant of a verb."""

    rows: dict[Tense, dict[Variant, Row]] = field(default_factory=dict)

    def set_row(self, tense: Tense, variant: Variant, row: Sequence[Cell]) -> None:
        if len(row) != tense.size:
            raise ValueError(
                f"{tense.name} expects {tense.size} cells, got {len(row)}"
            )
        self.rows.setdefault(tense, {})[variant] = list(row)

    def row(self, tense: Tense, variant: Variant) -> Row:
        return self.rows[tense][variant]

    def has(self, tense: Tense) -> bool:
        return tense in self.rows

    @property
    def tenses(self) -> list[Tense]:
        return sorted(self.rows)

    def cell(self, tense: Tense, variant: Variant, person: Person | int = 0) -> Cell:
        row = self.rows[tense][variant]
        return row[0] if tense.is_impersonal else row[person]

    def first(self, tense: Tense, variant: Variant, person: Person | int = 0) -> str | None:
        """First alternative of a cell, or ``None`` for a defective slot."""
        return first_form(self.cell(tense, variant, person))

    def for_variant(self, variant: Variant) -> VariantTable:
        return VariantTable(
            variant=variant,
            rows={tense: list(by_variant[variant]) for tense, by_variant in sorted(self.rows.items())},
        )

    def render(self, variant: Variant, tenses: Iterable[Tense] | None = None) -> dict[str, list[str | None]]:
        return self.for_variant(variant).render(tenses)
