"""Clitic pronoun placement.

Portuguese attaches unstressed object pronouns in three ways:

- Proclisis, before the verb: "me diga"
- Mesoclisis, inside the future and conditional: "dir-me-á"
- Enclisis, after the verb with a hyphen: "diga-me", "fá-lo"

Which one applies depends on the tense, on Brazilian vs. European usage and
on the voice. Compound forms ("tenho falado") take the pronoun on or after
the auxiliary, never on the participle. Every alternative of a cell is
transformed on its own.
"""

import logging
from collections.abc import Callable
from enum import StrEnum, auto

from conjugador.exceptions import InvalidRequestError
from conjugador.grammar import Mood, Person, Tense, Variant
from conjugador.table import Cell, ConjugationTable, map_cell

logger = logging.getLogger(__name__)


# ============================================================================
# Pronouns
# ============================================================================

DIRECT_OBJECT_PRONOUNS = frozenset({"me", "te", "o", "a", "nos", "vos", "os", "as"})
INDIRECT_OBJECT_PRONOUNS = frozenset({"me", "te", "lhe", "nos", "vos", "lhes"})
REFLEXIVE_PRONOUN = "se"

# Reflexive pronoun of each person, in table order
REFLEXIVE_PRONOUNS = ("me", "te", "se", "nos", "vos", "se")

# Third person direct objects, which become lo/no after some endings
THIRD_PERSON_DIRECT = frozenset({"o", "a", "os", "as"})

# Pronouns before which a final "-mos" loses its "s": falamo-nos
NOS_PRONOUNS = frozenset({"nos", "no-lo", "no-la", "no-los", "no-las"})

# Indirect + direct object contractions, keyed by the direct object
CONTRACTIONS: dict[str, dict[str, str]] = {
    direct: {
        "me": f"m{direct}",
        "te": f"t{direct}",
        "lhe": f"lh{direct}",
        "lhes": f"lh{direct}",
        "nos": f"no-l{direct}",
        "vos": f"vo-l{direct}",
    }
    for direct in ("o", "a", "os", "as")
}


def contract_pronouns(indirect: str, direct: str | None = None) -> str:
    """Fuse an indirect and a direct object pronoun into one clitic.

    Examples:
        >>> contract_pronouns("me", "o")
        'mo'
        >>> contract_pronouns("nos", "as")
        'no-las'
        >>> contract_pronouns("me", "te")
        'me-te'
        >>> contract_pronouns("lhe")
        'lhe'
    """
    if direct is None:
        return indirect
    fused = CONTRACTIONS.get(direct, {}).get(indirect)
    if fused is None:
        return f"{indirect}-{direct}"
    return fused


def pronouns_for(pronoun: str) -> tuple[str, ...]:
    """The pronoun each person takes: the reflexive varies, others repeat."""
    if pronoun == REFLEXIVE_PRONOUN:
        return REFLEXIVE_PRONOUNS
    return (pronoun,) * len(Person)


# ============================================================================
# Single-form transformations
# ============================================================================


class Placement(StrEnum):
    UNCHANGED = auto()     # the past participle takes no pronoun
    PROCLISIS = auto()     # "me diga"
    MESOCLISIS = auto()    # "dir-me-á", "ter-me-á dito"
    ENCLISIS = auto()      # "diga-me", "tenho-me dito"
    INTERPOSED = auto()    # "tenho me dito", simple forms as enclisis
    BEFORE_LAST = auto()   # "tenho estado te falando", simple forms as enclisis
    TRAILING = auto()      # on the last word: "estou a dizer-me"


# Characters counted from the end of a future/conditional form to the split point
MESOCLISIS_OFFSETS = {
    Tense.FUTURE_INDICATIVE: (2, 2, 1, 4, 3, 2),
    Tense.COMPOUND_FUTURE_INDICATIVE: (2, 2, 1, 4, 3, 2),
    Tense.CONDITIONAL: (2, 3, 2, 5, 4, 3),
    Tense.COMPOUND_CONDITIONAL: (2, 3, 2, 5, 4, 3),
}

# Infinitives whose "u" is a spelling device, so the "i" stays unstressed
SILENT_U_SUFFIXES = ("guir", "güir", "quir", "qüir")


def stressed_i(word: str) -> str:
    """Accent of the "i" of an -ir ending when a "lo" pronoun follows it."""
    if word.endswith(SILENT_U_SUFFIXES):
        return "i"
    if word.endswith(("air", "uir")):
        return "í"
    return "i"


def proclitic(form: str, pronoun: str) -> str:
    return f"{pronoun} {form}"


def enclitic(form: str, pronoun: str) -> str:
    """Attach a pronoun after a verb form, adjusting its final syllable.

    Examples:
        >>> enclitic("falar", "o")
        'falá-lo'
        >>> enclitic("falamos", "o")
        'falamo-lo'
        >>> enclitic("falamos", "nos")
        'falamo-nos'
        >>> enclitic("dão", "o")
        'dão-no'
        >>> enclitic("diga", "me")
        'diga-me'
    """
    if pronoun in NOS_PRONOUNS and len(form) > 2 and form.endswith("mos"):
        return f"{form[:-1]}-{pronoun}"

    if pronoun in THIRD_PERSON_DIRECT:
        match form[-2:]:
            case "ar" | "ás" | "az":
                return f"{form[:-2]}á-l{pronoun}"
            case "er" | "ês" | "ez":
                return f"{form[:-2]}ê-l{pronoun}"
            case "as" | "es" | "és" | "is" | "ís" | "os":
                return f"{form[:-1]}-l{pronoun}"
            case "ir":
                return f"{form[:-2]}{stressed_i(form)}-l{pronoun}"
            case "or" | "ôr" | "ôs":
                return f"{form[:-2]}ô-l{pronoun}"
            case "uz":
                return f"{form[:-1]}-l{pronoun}"
            case "ão" | "õe":
                return f"{form}-n{pronoun}"
            case "ns":
                return f"{form[:-2]}m-l{pronoun}"
            case _:
                pass
        if form.endswith(("m", "n")):
            return f"{form}-n{pronoun}"

    return f"{form}-{pronoun}"


def mesoclitic(form: str, pronoun: str, offset: int, infinitive: str) -> str:
    """Insert a pronoun into a future or conditional form.

    The form splits ``offset`` characters from its end, after the two
    letters of the infinitive ending: falar|ei -> falar-te-ei. Before
    o/a/os/as the infinitive loses its "r" and the pronoun gains an "l":
    falá-lo-ei.

    Args:
        form: A simple future or conditional form
        pronoun: The clitic to insert
        offset: Length of the person ending
        infinitive: The main verb's infinitive, which decides the accent
            on an -ir ending

    Examples:
        >>> mesoclitic("falarei", "te", 2, "falar")
        'falar-te-ei'
        >>> mesoclitic("dirá", "o", 1, "dizer")
        'di-lo-á'
        >>> mesoclitic("faríamos", "as", 5, "fazer")
        'fá-las-íamos'
    """
    split = len(form) - offset
    start, middle, end = form[:split - 2], form[split - 2:split], form[split:]

    if pronoun in THIRD_PERSON_DIRECT:
        match middle:
            case "ar":
                middle = "á"
            case "er":
                middle = "ê"
            case "ir":
                middle = stressed_i(infinitive)
            case _:
                middle = "ô"
        pronoun = f"l{pronoun}"

    return f"{start}{middle}-{pronoun}-{end}"


def split_auxiliary(form: str) -> tuple[str, str]:
    """Split a periphrastic form after its first word: ("tenho", " falado")."""
    head, space, tail = form.partition(" ")
    return head, space + tail


def place(
    form: str,
    pronoun: str,
    placement: Placement,
    tense: Tense,
    person: int,
    infinitive: str,
) -> str:
    """Place ``pronoun`` in one written form."""
    match placement:
        case Placement.UNCHANGED:
            return form
        case Placement.PROCLISIS:
            return proclitic(form, pronoun)
        case Placement.MESOCLISIS:
            head, tail = split_auxiliary(form)
            offset = MESOCLISIS_OFFSETS[tense][person]
            return mesoclitic(head, pronoun, offset, infinitive) + tail
        case Placement.ENCLISIS:
            head, tail = split_auxiliary(form)
            return enclitic(head, pronoun) + tail
        case Placement.INTERPOSED:
            head, tail = split_auxiliary(form)
            if not tail:
                return enclitic(head, pronoun)
            return f"{head} {pronoun}{tail}"
        case Placement.BEFORE_LAST:
            head, space, last = form.rpartition(" ")
            if not space:
                return enclitic(form, pronoun)
            return f"{head} {pronoun} {last}"
        case Placement.TRAILING:
            return enclitic(form, pronoun)
        case _:
            raise ValueError(f"Unhandled placement: {placement}")


# ============================================================================
# Placement policies
# ============================================================================


def regular_placement(tense: Tense, variant: Variant, pronoun: str) -> Placement:
    """Where a pronoun goes in the active voice."""
    match tense:
        case Tense.PAST_PARTICIPLE:
            return Placement.UNCHANGED
        case Tense.GERUND | Tense.IMPERSONAL_INFINITIVE | Tense.COMPOUND_IMPERSONAL_INFINITIVE:
            return Placement.INTERPOSED if variant.is_brazilian else Placement.ENCLISIS
        case Tense.IMPERATIVE_AFFIRMATIVE:
            return Placement.ENCLISIS
        case _ if tense.is_compound and tense.is_subjunctive:
            return Placement.PROCLISIS
        case _ if tense.is_future_or_conditional:
            return Placement.MESOCLISIS
        case _ if variant.is_brazilian or tense.is_subjunctive or tense == Tense.IMPERATIVE_NEGATIVE:
            if not tense.is_compound:
                return Placement.PROCLISIS
            if pronoun in THIRD_PERSON_DIRECT:
                return Placement.INTERPOSED
            return Placement.ENCLISIS
        case _:
            return Placement.ENCLISIS


def progressive_placement(tense: Tense, variant: Variant, pronoun: str) -> Placement:
    """Brazil puts the pronoun before the gerund, Portugal after the infinitive."""
    if tense.is_subjunctive or tense == Tense.IMPERATIVE_NEGATIVE:
        return Placement.PROCLISIS
    if variant.is_brazilian:
        return Placement.BEFORE_LAST
    return Placement.TRAILING


def passive_placement(tense: Tense, variant: Variant, pronoun: str) -> Placement:
    if tense.is_subjunctive or tense == Tense.IMPERATIVE_NEGATIVE:
        return Placement.PROCLISIS
    if tense.is_impersonal or tense.is_compound:
        return Placement.INTERPOSED if variant.is_brazilian else Placement.ENCLISIS
    if variant.is_brazilian:
        return Placement.PROCLISIS
    return Placement.ENCLISIS


PlacementPolicy = Callable[[Tense, Variant, str], Placement]

POLICIES: dict[Mood, PlacementPolicy] = {
    Mood.REGULAR: regular_placement,
    Mood.PROGRESSIVE: progressive_placement,
    Mood.PASSIVE: passive_placement,
}


# ============================================================================
# Tables
# ============================================================================


def place_in_cell(
    cell: Cell,
    pronoun: str,
    placement: Placement,
    tense: Tense,
    person: int,
    infinitive: str,
) -> Cell:
    return map_cell(cell, lambda form: place(form, pronoun, placement, tense, person, infinitive))


def apply_pronoun(
    table: ConjugationTable,
    pronoun: str,
    mood: Mood,
    infinitive: str,
) -> ConjugationTable:
    """Place a clitic in every cell of a table.

    Args:
        table: A table of the given mood, without pronouns
        pronoun: A single or contracted clitic, or "se" for the reflexive
            (me, te, se, nos, vos, se by person)
        mood: Voice the table was built in; selects the placement policy
        infinitive: The main verb's infinitive

    Returns:
        A new table; absent cells stay absent

    Raises:
        InvalidRequestError: If ``mood`` has no placement policy
    """
    policy = POLICIES.get(mood)
    if policy is None:
        raise InvalidRequestError(f"Unknown mood: {mood!r}")

    per_person = pronouns_for(pronoun)
    logger.debug(f"Placing {pronoun!r} in the {mood} table of {infinitive!r}")

    result = ConjugationTable()
    for tense in table.tenses:
        for variant in Variant:
            row = table.row(tense, variant)
            placed = []
            for person, cell in enumerate(row):
                # Impersonal tenses take the third person pronoun
                current = per_person[Person.THIRD_SINGULAR if tense.is_impersonal else person]
                placement = policy(tense, variant, current)
                placed.append(place_in_cell(cell, current, placement, tense, person, infinitive))
            result.set_row(tense, variant, placed)
    return result


def validate_pronouns(pronoun1: str | None, pronoun2: str | None, mood: Mood) -> None:
    """Check that a pronoun combination can be placed.

    A single pronoun may be any object pronoun or the reflexive "se"; a pair
    must be an indirect then a direct object pronoun. Passive tables accept
    only a single indirect object pronoun.

    Raises:
        InvalidRequestError: If the combination is not allowed
    """
    if pronoun1 is None:
        if pronoun2 is not None:
            raise InvalidRequestError("A second pronoun requires a first pronoun")
        return

    if mood == Mood.PASSIVE:
        if pronoun2 is not None or pronoun1 not in INDIRECT_OBJECT_PRONOUNS:
            raise InvalidRequestError(
                f"Passive forms take a single indirect object pronoun, got {pronoun1!r}"
                + (f" and {pronoun2!r}" if pronoun2 is not None else "")
            )
        return

    if pronoun2 is None:
        valid = (
            pronoun1 in DIRECT_OBJECT_PRONOUNS
            or pronoun1 in INDIRECT_OBJECT_PRONOUNS
            or pronoun1 == REFLEXIVE_PRONOUN
        )
        if not valid:
            raise InvalidRequestError(f"Unknown pronoun: {pronoun1!r}")
        return

    if pronoun1 not in INDIRECT_OBJECT_PRONOUNS or pronoun2 not in DIRECT_OBJECT_PRONOUNS:
        raise InvalidRequestError(
            f"A pronoun pair must be indirect then direct object, got {pronoun1!r} and {pronoun2!r}"
        )
