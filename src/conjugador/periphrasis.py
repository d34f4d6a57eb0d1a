"""Compound, progressive and passive forms built on auxiliary verbs.

- Compound tenses: ter or haver + past participle (tenho falado, hei falado)
- Progressive: estar + gerund in Brazil (estou falando), estar + "a" +
  infinitive in Portugal (estou a falar)
- Passive: ser + past participle, plural persons in the plural (são falados)

Only the first alternative of a participle with two forms is used.
"""

from typing import TYPE_CHECKING

from conjugador.exceptions import AuxiliaryTablesMissingError
from conjugador.grammar import Person, Tense, Variant
from conjugador.table import Cell, Row, cell_of, first_form

if TYPE_CHECKING:
    from conjugador.auxiliary import AuxiliaryTables


def require(auxiliaries: "AuxiliaryTables | None", what: str) -> "AuxiliaryTables":
    if auxiliaries is None:
        raise AuxiliaryTablesMissingError(
            f"Auxiliary tables are required for {what}; build them with build_auxiliary_tables()"
        )
    return auxiliaries


def attach(cell: Cell, tail: str) -> Cell:
    """Follow every alternative of an auxiliary cell with ``tail``."""
    if cell is None:
        return None
    return cell_of(*(f"{form} {tail}" for form in cell))


# ============================================================================
# Compound tenses
# ============================================================================


def compound_row(
    tense: Tense,
    variant: Variant,
    participle: Cell,
    auxiliaries: "AuxiliaryTables | None",
) -> Row:
    """One variant of a compound tense.

    Each cell lists the ter form then the haver form, each followed by the
    participle: ``("tenho falado", "hei falado")``.

    Raises:
        AuxiliaryTablesMissingError: If ``auxiliaries`` is ``None``
        ValueError: If ``tense`` is not compound
    """
    auxiliaries = require(auxiliaries, tense.name.lower())
    aux_tense = tense.auxiliary_tense
    main = first_form(participle)
    row: Row = []
    for person in range(tense.size):
        forms = []
        for name in ("ter", "haver"):
            cell = auxiliaries.form(name, aux_tense, variant, person)
            if cell is not None:
                forms.extend(f"{form} {main}" for form in cell)
        row.append(cell_of(*forms))
    return row


# ============================================================================
# Progressive
# ============================================================================


def progressive_tail(variant: Variant, gerund: str, infinitive: str) -> str:
    return gerund if variant.is_brazilian else f"a {infinitive}"


def progressive_row(
    tense: Tense,
    variant: Variant,
    gerund: str,
    infinitive: str,
    auxiliaries: "AuxiliaryTables | None",
) -> Row:
    """One variant of a progressive tense: the matching form of estar + gerund/infinitive.

    The gerund itself has no progressive form.

    Examples:
        estou falando (Brazil), estou a falar (Portugal)
    """
    auxiliaries = require(auxiliaries, "progressive forms")
    if tense == Tense.GERUND:
        return [None]
    tail = progressive_tail(variant, gerund, infinitive)
    return [
        attach(auxiliaries.form("estar", tense, variant, person), tail)
        for person in range(tense.size)
    ]


# ============================================================================
# Passive
# ============================================================================


def passive_row(
    tense: Tense,
    variant: Variant,
    participle: Cell,
    auxiliaries: "AuxiliaryTables | None",
) -> Row:
    """One variant of a passive tense: the matching form of ser + agreeing participle."""
    auxiliaries = require(auxiliaries, "passive forms")
    main = first_form(participle)
    row: Row = []
    for person in range(tense.size):
        agreeing = main
        if not tense.is_impersonal and Person(person).is_plural:
            agreeing = main + "s"
        row.append(attach(auxiliaries.form("ser", tense, variant, person), agreeing))
    return row
