"""Matching verbs against irregularity pattern tables."""

import logging
from dataclasses import dataclass
from functools import lru_cache

from conjugador.classifier.patterns import RULES, MatchKind, Rule, TenseFamily
from conjugador.exceptions import UnclassifiedVerbError
from conjugador.grammar import Tense
from conjugador.verb import Verb

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CompiledTable:
    """A pattern table indexed for lookup.

    Suffix lengths are kept longest first so the most specific suffix wins.
    """

    derivatives: dict[str, str]
    exact: dict[str, str]
    suffixes: dict[str, str]
    suffix_lengths: tuple[int, ...]

    @classmethod
    def compile(cls, rules: tuple[Rule, ...]) -> "CompiledTable":
        derivatives: dict[str, str] = {}
        exact: dict[str, str] = {}
        suffixes: dict[str, str] = {}
        for rule in rules:
            match rule.kind:
                case MatchKind.DERIVATIVE:
                    target = derivatives
                case MatchKind.EXACT:
                    target = exact
                case MatchKind.SUFFIX:
                    target = suffixes
                case _:
                    raise ValueError(f"Unhandled match kind: {rule.kind}")
            # First rule for a value wins, like the first branch of a cascade
            target.setdefault(rule.value, rule.tag)

        lengths = sorted({len(value) for value in suffixes}, reverse=True)
        return cls(derivatives, exact, suffixes, tuple(lengths))

    def lookup(self, verb: Verb) -> str | None:
        root = verb.derivative_of
        if root is not None and root in self.derivatives:
            return self.derivatives[root]

        if verb.infinitive in self.exact:
            return self.exact[verb.infinitive]

        for length in self.suffix_lengths:
            if length > len(verb.infinitive):
                continue
            tag = self.suffixes.get(verb.infinitive[-length:])
            if tag is not None:
                return tag
        return None


@lru_cache(maxsize=None)
def compiled_table(family: TenseFamily) -> CompiledTable:
    return CompiledTable.compile(RULES[family])


def classify(verb: Verb, family: TenseFamily) -> str:
    """Return the irregularity pattern tag of ``verb`` in a tense family.

    Args:
        verb: A validated verb
        family: The tense family to classify for

    Returns:
        The pattern tag, e.g. ``"-cer"`` for "conhecer" in the present

    Raises:
        UnclassifiedVerbError: If no rule matches. Every table ends in
            catch-all suffix rules, so this only happens with a broken table.

    Examples:
        >>> classify(Verb.parse("falar"), TenseFamily.PRESENT_INDICATIVE)
        '-ar'
        >>> classify(Verb.parse("conter"), TenseFamily.PRESENT_INDICATIVE)
        '-ter'
    """
    tag = compiled_table(family).lookup(verb)
    if tag is None:
        logger.error(f"No {family} pattern matches {verb.infinitive!r}")
        raise UnclassifiedVerbError(f"No {family} pattern matches {verb.infinitive!r}")
    logger.debug(f"Classified {verb.infinitive!r} as {tag!r} for {family}")
    return tag


def family_of(tense: Tense) -> TenseFamily | None:
    """The tense family whose classification drives a simple tense."""
    return _FAMILIES.get(tense)


_FAMILIES = {
    Tense.PRESENT_INDICATIVE: TenseFamily.PRESENT_INDICATIVE,
    Tense.IMPERFECT_INDICATIVE: TenseFamily.IMPERFECT_INDICATIVE,
    Tense.PRETERITE_INDICATIVE: TenseFamily.PRETERITE_INDICATIVE,
    Tense.PLUPERFECT_INDICATIVE: TenseFamily.PRETERITE_INDICATIVE,
    Tense.FUTURE_INDICATIVE: TenseFamily.FUTURE_INDICATIVE,
    Tense.CONDITIONAL: TenseFamily.FUTURE_INDICATIVE,
    Tense.PRESENT_SUBJUNCTIVE: TenseFamily.PRESENT_SUBJUNCTIVE,
    Tense.IMPERFECT_SUBJUNCTIVE: TenseFamily.IMPERFECT_SUBJUNCTIVE,
    Tense.FUTURE_SUBJUNCTIVE: TenseFamily.IMPERFECT_SUBJUNCTIVE,
    Tense.PAST_PARTICIPLE: TenseFamily.PAST_PARTICIPLE,
}
