"""Composition of simple tenses from stems and endings.

Each tense module returns one variant's row before defective persons are
blanked out. ``compose_simple_tense`` routes a tense to its composer and
feeds it the earlier rows it is derived from.
"""

from collections.abc import Mapping

from conjugador.composer.imperative import imperative_affirmative, imperative_negative
from conjugador.composer.indicative import (
    conditional,
    future_indicative,
    imperfect_indicative,
    pluperfect_indicative,
    present_indicative,
    preterite_indicative,
)
from conjugador.composer.nominal import (
    gerund,
    impersonal_infinitive,
    past_participle,
    personal_infinitive,
)
from conjugador.composer.subjunctive import (
    future_subjunctive,
    imperfect_subjunctive,
    present_subjunctive,
)
from conjugador.grammar import Tense, Variant
from conjugador.table import Row
from conjugador.verb import Verb

__all__ = [
    "compose_simple_tense",
    "present_indicative",
    "imperfect_indicative",
    "preterite_indicative",
    "pluperfect_indicative",
    "future_indicative",
    "conditional",
    "present_subjunctive",
    "imperfect_subjunctive",
    "future_subjunctive",
    "personal_infinitive",
    "impersonal_infinitive",
    "imperative_affirmative",
    "imperative_negative",
    "gerund",
    "past_participle",
]


def compose_simple_tense(
    verb: Verb,
    tense: Tense,
    variant: Variant,
    tag: str | None,
    raw: Mapping[Tense, Row],
    masked: Mapping[Tense, Row],
) -> Row:
    """Compose one variant of a simple tense.

    Args:
        verb: The verb being conjugated
        tense: A simple tense
        variant: Orthographic variant
        tag: The verb's pattern tag in the tense's family, or ``None`` for
            tenses that are not classified
        raw: This variant's earlier rows as composed
        masked: This variant's earlier rows with defective persons blanked

    Raises:
        ValueError: If ``tense`` is compound
    """
    match tense:
        case Tense.PRESENT_INDICATIVE:
            return present_indicative(verb, tag, variant)
        case Tense.IMPERFECT_INDICATIVE:
            return imperfect_indicative(verb, tag, variant)
        case Tense.PRETERITE_INDICATIVE:
            return preterite_indicative(verb, tag, variant)
        case Tense.PLUPERFECT_INDICATIVE:
            return pluperfect_indicative(verb, tag, variant, raw[Tense.PRETERITE_INDICATIVE])
        case Tense.FUTURE_INDICATIVE:
            return future_indicative(verb, tag, variant)
        case Tense.CONDITIONAL:
            return conditional(verb, tag, variant)
        case Tense.PRESENT_SUBJUNCTIVE:
            return present_subjunctive(verb, tag, variant, masked[Tense.PRESENT_INDICATIVE])
        case Tense.IMPERFECT_SUBJUNCTIVE:
            return imperfect_subjunctive(verb, tag, variant, raw[Tense.PRETERITE_INDICATIVE])
        case Tense.FUTURE_SUBJUNCTIVE:
            return future_subjunctive(verb, tag, variant, raw[Tense.PRETERITE_INDICATIVE])
        case Tense.PERSONAL_INFINITIVE:
            return personal_infinitive(verb, variant)
        case Tense.IMPERSONAL_INFINITIVE:
            return impersonal_infinitive(verb, variant)
        case Tense.IMPERATIVE_AFFIRMATIVE:
            return imperative_affirmative(
                verb,
                masked[Tense.PRESENT_INDICATIVE],
                masked[Tense.PRESENT_SUBJUNCTIVE],
            )
        case Tense.IMPERATIVE_NEGATIVE:
            return imperative_negative(masked[Tense.PRESENT_SUBJUNCTIVE])
        case Tense.GERUND:
            return gerund(verb, variant)
        case Tense.PAST_PARTICIPLE:
            return past_participle(verb, tag, variant)
        case _:
            raise ValueError(f"Unhandled simple tense: {tense.name}")
