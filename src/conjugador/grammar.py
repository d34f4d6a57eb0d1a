"""Grammatical vocabulary shared by every part of the conjugation engine.

Persons, orthographic variants, tenses and moods. The ordinal of each
``Tense`` is its build order: a tense only ever depends on tenses with a
lower ordinal (compound tenses on the simple tenses of ter/haver, the
pluperfect and the past subjunctives on the preterite).
"""

from enum import IntEnum, StrEnum, auto


class Person(IntEnum):
    """The six grammatical persons, in table order."""

    FIRST_SINGULAR = 0     # eu
    SECOND_SINGULAR = 1    # tu
    THIRD_SINGULAR = 2     # ele/ela/você
    FIRST_PLURAL = 3       # nós
    SECOND_PLURAL = 4      # vós
    THIRD_PLURAL = 5       # eles/elas/vocês

    @property
    def is_plural(self) -> bool:
        return self >= Person.FIRST_PLURAL


class Variant(StrEnum):
    """Brazilian/European Portuguese, before/after the 1990 spelling agreement."""

    BP_POST_REFORM = auto()
    BP_PRE_REFORM = auto()
    EP_POST_REFORM = auto()
    EP_PRE_REFORM = auto()

    @property
    def is_brazilian(self) -> bool:
        return self in (Variant.BP_POST_REFORM, Variant.BP_PRE_REFORM)

    @property
    def is_post_reform(self) -> bool:
        return self in (Variant.BP_POST_REFORM, Variant.EP_POST_REFORM)


class Mood(StrEnum):
    """Voice of a conjugation request."""

    REGULAR = auto()
    PASSIVE = auto()
    PROGRESSIVE = auto()


class Tense(IntEnum):
    """The 25 conjugation categories, in build order."""

    # Simple tenses
    PRESENT_INDICATIVE = 0
    IMPERFECT_INDICATIVE = 1
    PRETERITE_INDICATIVE = 2
    PLUPERFECT_INDICATIVE = 3
    FUTURE_INDICATIVE = 4
    CONDITIONAL = 5
    PRESENT_SUBJUNCTIVE = 6
    IMPERFECT_SUBJUNCTIVE = 7
    FUTURE_SUBJUNCTIVE = 8
    PERSONAL_INFINITIVE = 9
    IMPERSONAL_INFINITIVE = 10
    IMPERATIVE_AFFIRMATIVE = 11
    IMPERATIVE_NEGATIVE = 12
    GERUND = 13
    PAST_PARTICIPLE = 14

    # Compound tenses (ter/haver + past participle)
    COMPOUND_PRESENT_INDICATIVE = 15
    COMPOUND_IMPERFECT_INDICATIVE = 16
    COMPOUND_PLUPERFECT_INDICATIVE = 17
    COMPOUND_FUTURE_INDICATIVE = 18
    COMPOUND_CONDITIONAL = 19
    COMPOUND_PRESENT_SUBJUNCTIVE = 20
    COMPOUND_IMPERFECT_SUBJUNCTIVE = 21
    COMPOUND_FUTURE_SUBJUNCTIVE = 22
    COMPOUND_PERSONAL_INFINITIVE = 23
    COMPOUND_IMPERSONAL_INFINITIVE = 24

    @property
    def is_compound(self) -> bool:
        return self > Tense.PAST_PARTICIPLE

    @property
    def is_impersonal(self) -> bool:
        """True for tenses with a single form instead of one per person."""
        return self in _IMPERSONAL

    @property
    def is_imperative(self) -> bool:
        return self in (Tense.IMPERATIVE_AFFIRMATIVE, Tense.IMPERATIVE_NEGATIVE)

    @property
    def is_subjunctive(self) -> bool:
        return self in _SUBJUNCTIVE

    @property
    def is_future_or_conditional(self) -> bool:
        return self in _FUTURE_OR_CONDITIONAL

    @property
    def auxiliary_tense(self) -> "Tense":
        """The simple tense of ter/haver that builds this compound tense.

        Raises:
            ValueError: If the tense is not compound
        """
        try:
            return _AUXILIARY_TENSES[self]
        except KeyError:
            raise ValueError(f"Unhandled compound tense: {self.name}") from None

    @property
    def size(self) -> int:
        """Number of cells this tense holds per variant."""
        return 1 if self.is_impersonal else len(Person)


_IMPERSONAL = frozenset({
    Tense.IMPERSONAL_INFINITIVE,
    Tense.GERUND,
    Tense.PAST_PARTICIPLE,
    Tense.COMPOUND_IMPERSONAL_INFINITIVE,
})

_SUBJUNCTIVE = frozenset({
    Tense.PRESENT_SUBJUNCTIVE,
    Tense.IMPERFECT_SUBJUNCTIVE,
    Tense.FUTURE_SUBJUNCTIVE,
    Tense.COMPOUND_PRESENT_SUBJUNCTIVE,
    Tense.COMPOUND_IMPERFECT_SUBJUNCTIVE,
    Tense.COMPOUND_FUTURE_SUBJUNCTIVE,
})

_FUTURE_OR_CONDITIONAL = frozenset({
    Tense.FUTURE_INDICATIVE,
    Tense.CONDITIONAL,
    Tense.COMPOUND_FUTURE_INDICATIVE,
    Tense.COMPOUND_CONDITIONAL,
})

_AUXILIARY_TENSES = {
    Tense.COMPOUND_PRESENT_INDICATIVE: Tense.PRESENT_INDICATIVE,
    Tense.COMPOUND_IMPERFECT_INDICATIVE: Tense.IMPERFECT_INDICATIVE,
    Tense.COMPOUND_PLUPERFECT_INDICATIVE: Tense.PLUPERFECT_INDICATIVE,
    Tense.COMPOUND_FUTURE_INDICATIVE: Tense.FUTURE_INDICATIVE,
    Tense.COMPOUND_CONDITIONAL: Tense.CONDITIONAL,
    Tense.COMPOUND_PRESENT_SUBJUNCTIVE: Tense.PRESENT_SUBJUNCTIVE,
    Tense.COMPOUND_IMPERFECT_SUBJUNCTIVE: Tense.IMPERFECT_SUBJUNCTIVE,
    Tense.COMPOUND_FUTURE_SUBJUNCTIVE: Tense.FUTURE_SUBJUNCTIVE,
    Tense.COMPOUND_PERSONAL_INFINITIVE: Tense.PERSONAL_INFINITIVE,
    Tense.COMPOUND_IMPERSONAL_INFINITIVE: Tense.IMPERSONAL_INFINITIVE,
}
