"""Conjugation of a verb into full tables, and conjugation requests.

Simple tenses are composed in build order so that derived tenses can read
the rows they come from. Each tense is classified once; its four variants
are then composed and blanked out where the verb is defective.
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Self

from conjugador.classifier import classify, family_of
from conjugador.composer import compose_simple_tense
from conjugador.composer.stems import mask_row
from conjugador.exceptions import InvalidRequestError
from conjugador.grammar import Mood, Tense, Variant
from conjugador.periphrasis import compound_row, passive_row, progressive_row, require
from conjugador.pronouns import apply_pronoun, contract_pronouns, validate_pronouns
from conjugador.table import ConjugationTable, Row, VariantTable
from conjugador.verb import Verb

if TYPE_CHECKING:
    from conjugador.auxiliary import AuxiliaryTables

logger = logging.getLogger(__name__)

SIMPLE_TENSES = tuple(tense for tense in Tense if not tense.is_compound)
COMPOUND_TENSES = tuple(tense for tense in Tense if tense.is_compound)


class Conjugator:
    """Builds the conjugation tables of one verb.

    Args:
        verb: The verb to conjugate
        auxiliaries: Tables of ter, haver, estar and ser. Only needed for
            compound tenses and the progressive and passive voices.
    """

    def __init__(self, verb: Verb, auxiliaries: "AuxiliaryTables | None" = None):
        self.verb = verb
        self.auxiliaries = auxiliaries

    def conjugate_simple(self) -> ConjugationTable:
        """Compose the fifteen simple tenses for every variant."""
        table = ConjugationTable()
        raw: dict[Variant, dict[Tense, Row]] = {variant: {} for variant in Variant}
        masked: dict[Variant, dict[Tense, Row]] = {variant: {} for variant in Variant}

        for tense in SIMPLE_TENSES:
            family = family_of(tense)
            tag = classify(self.verb, family) if family is not None else None
            missing = self.verb.missing_persons(tense)
            for variant in Variant:
                row = compose_simple_tense(self.verb, tense, variant, tag, raw[variant], masked[variant])
                raw[variant][tense] = row
                masked[variant][tense] = mask_row(row, missing)
                table.set_row(tense, variant, masked[variant][tense])

        logger.debug(f"Composed simple tenses of {self.verb.infinitive!r}")
        return table

    def conjugate_all(self) -> ConjugationTable:
        """Compose all 25 tenses for every variant.

        Raises:
            AuxiliaryTablesMissingError: If no auxiliary tables were given
        """
        auxiliaries = require(self.auxiliaries, "compound tenses")
        table = self.conjugate_simple()
        for tense in COMPOUND_TENSES:
            missing = self.verb.missing_persons(tense)
            for variant in Variant:
                participle = table.cell(Tense.PAST_PARTICIPLE, variant)
                row = compound_row(tense, variant, participle, auxiliaries)
                table.set_row(tense, variant, mask_row(row, missing))
        return table

    def conjugate_variant(self, variant: Variant) -> VariantTable:
        return self.conjugate_all().for_variant(variant)

    def conjugate_progressive(self) -> ConjugationTable:
        """estar + gerund (Brazil) or estar a + infinitive (Portugal), all tenses.

        Raises:
            AuxiliaryTablesMissingError: If no auxiliary tables were given
        """
        auxiliaries = require(self.auxiliaries, "progressive forms")
        simple = self.conjugate_simple()
        table = ConjugationTable()
        for tense in Tense:
            missing = self.verb.missing_persons(tense)
            for variant in Variant:
                row = progressive_row(
                    tense,
                    variant,
                    simple.first(Tense.GERUND, variant),
                    simple.first(Tense.IMPERSONAL_INFINITIVE, variant),
                    auxiliaries,
                )
                table.set_row(tense, variant, mask_row(row, missing))
        return table

    def conjugate_passive(self) -> ConjugationTable:
        """ser + past participle, all tenses.

        Raises:
            AuxiliaryTablesMissingError: If no auxiliary tables were given
        """
        auxiliaries = require(self.auxiliaries, "passive forms")
        simple = self.conjugate_simple()
        table = ConjugationTable()
        for tense in Tense:
            missing = self.verb.missing_persons(tense)
            for variant in Variant:
                participle = simple.cell(Tense.PAST_PARTICIPLE, variant)
                row = passive_row(tense, variant, participle, auxiliaries)
                table.set_row(tense, variant, mask_row(row, missing))
        return table

    def conjugate_mood(self, mood: Mood) -> ConjugationTable:
        match mood:
            case Mood.REGULAR:
                return self.conjugate_all()
            case Mood.PROGRESSIVE:
                return self.conjugate_progressive()
            case Mood.PASSIVE:
                return self.conjugate_passive()
            case _:
                raise ValueError(f"Unhandled mood: {mood}")


# ============================================================================
# Requests
# ============================================================================


@dataclass(frozen=True, slots=True)
class VerbOptions:
    """A validated conjugation request."""

    verb: Verb
    variant: Variant
    mood: Mood
    pronoun1: str | None = None
    pronoun2: str | None = None

    @classmethod
    def create(
        cls,
        infinitive: str,
        variant: Variant | str,
        mood: Mood | str = Mood.REGULAR,
        pronoun1: str | None = None,
        pronoun2: str | None = None,
    ) -> Self:
        """Validate a raw request.

        Args:
            infinitive: Raw candidate infinitive
            variant: Variant or its name, e.g. ``"ep_post_reform"``
            mood: ``"regular"``, ``"passive"`` or ``"progressive"``
            pronoun1: Single pronoun, or the indirect object of a pair
            pronoun2: Direct object of a pair

        Raises:
            InvalidVerbError: If ``infinitive`` is not an infinitive
            InvalidRequestError: If the variant, mood or pronouns are invalid
        """
        try:
            variant = Variant(variant)
        except ValueError:
            raise InvalidRequestError(f"Unknown variant: {variant!r}") from None
        try:
            mood = Mood(mood)
        except ValueError:
            raise InvalidRequestError(f"Unknown mood: {mood!r}") from None

        # Empty strings mean no pronoun
        pronoun1 = pronoun1 or None
        pronoun2 = pronoun2 or None
        validate_pronouns(pronoun1, pronoun2, mood)

        return cls(
            verb=Verb.parse(infinitive),
            variant=variant,
            mood=mood,
            pronoun1=pronoun1,
            pronoun2=pronoun2,
        )

    @property
    def pronoun(self) -> str | None:
        """The clitic to place: a contracted pair, a single pronoun or ``None``."""
        if self.pronoun1 is None:
            return None
        return contract_pronouns(self.pronoun1, self.pronoun2)


def conjugate_request(options: VerbOptions, auxiliaries: "AuxiliaryTables | None") -> VariantTable:
    """Conjugate a request into the table of its variant.

    Regular requests get all 25 tenses of the verb, progressive and passive
    requests the matching periphrasis. The pronoun, if any, is then placed
    in every cell; "se" is conjugated as a reflexive.

    Raises:
        AuxiliaryTablesMissingError: If ``auxiliaries`` is ``None``
    """
    conjugator = Conjugator(options.verb, auxiliaries)
    table = conjugator.conjugate_mood(options.mood)

    pronoun = options.pronoun
    if pronoun is not None:
        infinitive = options.verb.infinitive_for(options.variant)
        table = apply_pronoun(table, pronoun, options.mood, infinitive)

    logger.debug(
        f"Conjugated {options.verb.infinitive!r} ({options.variant}, {options.mood}, "
        f"pronoun={pronoun!r})"
    )
    return table.for_variant(options.variant)
