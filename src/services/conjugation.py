"""Conjugation service - turns API requests into conjugation tables.

- describe_verb: Normalized spelling, stems and irregularity flags
- conjugate_verb: One variant's table with mood and pronouns applied
- list_tenses: Tense names in build order
"""

import logging

from conjugador.auxiliary import AuxiliaryTables
from conjugador.conjugator import VerbOptions, conjugate_request
from conjugador.exceptions import InvalidRequestError
from conjugador.grammar import Tense, Variant
from conjugador.verb import Verb
from models import ConjugateResponse, TensesResponse, VerbResponse, VerbVariant

logger = logging.getLogger(__name__)


def describe_verb(infinitive: str) -> VerbResponse:
    """Validate an infinitive and describe it."""
    verb = Verb.parse(infinitive.lower())
    defect = verb.defect
    return VerbResponse(
        infinitive=verb.infinitive,
        ending=verb.ending,
        variants=[
            VerbVariant(
                variant=variant.value,
                infinitive=verb.infinitive_for(variant),
                stem=verb.stem_for(variant),
            )
            for variant in Variant
        ],
        derivative_of=verb.derivative_of,
        defect=defect.value if defect else None,
    )


def parse_tenses(names: list[str] | None) -> list[Tense] | None:
    """Resolve tense names like "present_indicative" or "PRESENT-INDICATIVE"."""
    if not names:
        return None
    tenses = []
    for name in names:
        key = name.strip().upper().replace("-", "_").replace(" ", "_")
        try:
            tenses.append(Tense[key])
        except KeyError:
            raise InvalidRequestError(f"Unknown tense: {name!r}") from None
    return tenses


def conjugate_verb(
    infinitive: str,
    variant: str,
    mood: str = "regular",
    pronoun1: str | None = None,
    pronoun2: str | None = None,
    tenses: list[str] | None = None,
) -> ConjugateResponse:
    """Conjugate a verb for one variant.

    Raises:
        ValueError: If the infinitive, variant, mood, pronouns or tense
            names are invalid
    """
    options = VerbOptions.create(infinitive.lower(), variant, mood, pronoun1, pronoun2)
    selected = parse_tenses(tenses)
    table = conjugate_request(options, AuxiliaryTables.get_instance())
    logger.debug(f"Rendering {len(selected) if selected else len(table.rows)} tenses of {options.verb.infinitive!r}")
    return ConjugateResponse(
        infinitive=options.verb.infinitive,
        variant=options.variant.value,
        mood=options.mood.value,
        pronoun=options.pronoun,
        conjugations=table.render(selected),
    )


def list_tenses() -> TensesResponse:
    names = [tense.name.lower() for tense in Tense]
    return TensesResponse(tenses=names, count=len(names))
