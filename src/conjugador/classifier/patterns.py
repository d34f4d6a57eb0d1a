"""Irregularity pattern tables, one per tense family.

Each table is an ordered tuple of ``Rule(kind, value, tag)`` triples. Tags
are lowercase: a verb matched exactly tags as itself, a suffix family tags
as ``-suffix``. The matcher tries derivative rules, then exact rules, then
suffix rules from the longest suffix down, so the order of suffix rules
inside a table only matters between suffixes of the same length.

Tables are pure data. Everything about how a tag conjugates lives in
``conjugador.composer``.
"""

from dataclasses import dataclass
from enum import StrEnum, auto


class MatchKind(StrEnum):
    """How a rule's value is compared with a verb."""

    DERIVATIVE = auto()  # value is the irregular root the verb conjugates like
    EXACT = auto()       # value is the whole infinitive
    SUFFIX = auto()      # value is an infinitive suffix


@dataclass(frozen=True, slots=True)
class Rule:
    kind: MatchKind
    value: str
    tag: str


class TenseFamily(StrEnum):
    """Tenses sharing one classification."""

    PRESENT_INDICATIVE = auto()
    IMPERFECT_INDICATIVE = auto()
    PRETERITE_INDICATIVE = auto()      # also the pluperfect
    FUTURE_INDICATIVE = auto()         # also the conditional
    PRESENT_SUBJUNCTIVE = auto()
    IMPERFECT_SUBJUNCTIVE = auto()     # also the future subjunctive
    PAST_PARTICIPLE = auto()


# ============================================================================
# Rule builders
# ============================================================================


def derivatives(*roots: str) -> tuple[Rule, ...]:
    return tuple(Rule(MatchKind.DERIVATIVE, root, f"-{root}") for root in roots)


def exact(*verbs: str) -> tuple[Rule, ...]:
    return tuple(Rule(MatchKind.EXACT, verb, verb) for verb in verbs)


def suffixes(*endings: str) -> tuple[Rule, ...]:
    return tuple(Rule(MatchKind.SUFFIX, ending, f"-{ending}") for ending in endings)


def exact_as(tag: str, *verbs: str) -> tuple[Rule, ...]:
    """Exact rules for spellings sharing another verb's tag."""
    return tuple(Rule(MatchKind.EXACT, verb, tag) for verb in verbs)


def suffix_as(tag: str, *endings: str) -> tuple[Rule, ...]:
    """Suffix rules for spellings sharing another suffix family's tag."""
    return tuple(Rule(MatchKind.SUFFIX, ending, tag) for ending in endings)


REGULAR = suffixes("ar", "er", "ir")


# ============================================================================
# Present indicative
# ============================================================================

PRESENT_INDICATIVE_RULES: tuple[Rule, ...] = (
    *derivatives("dar", "estar", "ler", "ter", "ver", "vir"),
    *exact(
        "abaiucar", "afiuzar", "ajesuitar", "agenciar", "ansiar", "apaular",
        "aprazer", "apresenciar", "arremediar", "aspergir", "ateizar", "aunar",
        "aviusar", "aziumar", "cadenciar", "cerzir", "comerciar", "consumir",
        "convergir", "crer", "dar", "denegrir", "desaprazer", "desarremediar",
        "descrer", "desembaular", "desmilinguir", "desnegociar", "despremiar",
        "desremediar", "destruir", "diligenciar", "divergir", "embaular",
        "embaucar", "ensimesmar", "enviusar", "esmiuçar", "estar", "explodir",
        "faiscar", "faular", "frigir", "fugir", "haver", "incendiar",
        "intermediar", "ir", "ler", "licenciar", "mediar", "obsequiar",
        "odiar", "parar", "pôr", "prazer", "premiar", "presenciar",
        "promediar", "puitar", "reaprazer", "requerer", "rer", "retorquir",
        "retorqüir", "reunir", "rir", "ruidar", "saudar", "ser", "sobreir",
        "sobresser", "sortir", "subir", "sumir", "ter", "tossir", "ver", "vir",
    ),
    *exact_as("desmilinguir", "desmilingüir"),
    *suffixes("balaustrar"),
    *suffixes("construir", "delinquir"),
    *suffix_as("-delinquir", "delinqüir"),
    *suffixes("negociar", "mobiliar"),
    *suffixes("engolir", "entupir", "gauchar"),
    *suffixes(
        "acudir", "anquir", "arguir", "baular", "ciumar", "cobrir", "cuspir",
        "dormir", "embair", "erguer", "gredir", "guizar", "guspir", "inguar",
        "inguir", "inquar", "perder", "prazer", "querer", "quizar", "ruinar",
        "sorrir", "trazer", "viuvar",
    ),
    *suffix_as("-arguir", "argüir"),
    *suffix_as("-inguir", "ingüir"),
    *suffixes(
        "aguar", "aizar", "caber", "dizer", "ectir", "eizar", "ertir",
        "eguar", "eguir", "enhir", "entir", "equar", "ergir", "ernir",
        "ervir", "erzir", "fazer", "iguar", "iquar", "jazer", "medir",
        "pedir", "oibir", "oizar", "ouvir", "parir", "poder", "polir",
        "saber", "uizar", "valer", "egüir",
    ),
    *suffixes(
        "agir", "edir", "eger", "elir", "emir", "enir", "erir", "etir",
        "guir", "oiar", "quir", "ulir", "uzir", "güer", "güir", "qüir",
    ),
    *suffixes("aer", "air", "cer", "cir", "ear", "ger", "gir", "oar", "oer", "por", "uir"),
    *REGULAR,
)


# ============================================================================
# Imperfect indicative
# ============================================================================

IMPERFECT_INDICATIVE_RULES: tuple[Rule, ...] = (
    *derivatives("ter", "vir"),
    *exact("ensimesmar", "ser", "sobresser", "ter", "vir"),
    *exact_as("-por", "pôr"),
    *suffixes("guer", "guir", "quir"),
    *suffix_as("-guir", "güir"),
    *suffix_as("-quir", "qüir"),
    *suffixes("aer", "air", "oer", "oir", "por", "uer", "uir"),
    *REGULAR,
)


# ============================================================================
# Preterite and pluperfect indicative
# ============================================================================

PRETERITE_INDICATIVE_RULES: tuple[Rule, ...] = (
    *derivatives("dar", "estar", "ter", "ver", "vir"),
    *exact(
        "dar", "ensimesmar", "estar", "haver", "ir", "poder", "reaver",
        "requerer", "ser", "sobreir", "sobresser", "ter", "ver", "vir",
    ),
    *exact_as("-por", "pôr"),
    *suffixes("prazer", "querer", "trazer"),
    *suffixes("fazer", "dizer"),
    *suffixes("aber", "guar", "guir", "quar", "quir"),
    *suffix_as("-guir", "güir"),
    *suffix_as("-quir", "qüir"),
    *suffixes("aer", "air", "car", "çar", "gar", "oer", "por", "uir"),
    *REGULAR,
)


# ============================================================================
# Future indicative and conditional
# ============================================================================

FUTURE_INDICATIVE_RULES: tuple[Rule, ...] = (
    *exact("ensimesmar", "pôr"),
    *suffixes("trazer", "fazer", "dizer"),
    *suffix_as("regular", "ar", "er", "ir", "por"),
)


# ============================================================================
# Present subjunctive
# ============================================================================

PRESENT_SUBJUNCTIVE_RULES: tuple[Rule, ...] = (
    *derivatives("dar", "estar"),
    *exact(
        "abaiucar", "afiuzar", "ajesuitar", "ansiar", "apaular", "arremediar",
        "ateizar", "aunar", "aviusar", "aziumar", "dar", "desarremediar",
        "desembaular", "desmilinguir", "desremediar", "embaular", "embaucar",
        "ensimesmar", "enviusar", "esmiuçar", "estar", "explodir", "faiscar",
        "faular", "haver", "incendiar", "intermediar", "ir", "mediar",
        "odiar", "promediar", "puitar", "requerer", "reunir", "ruidar",
        "saudar", "ser", "sobreir", "sobresser",
    ),
    *exact_as("desmilinguir", "desmilingüir"),
    *exact_as("-por", "pôr"),
    *suffixes("balaustrar"),
    *suffixes("delinquir"),
    *suffix_as("-delinquir", "delinqüir"),
    *suffixes("mobiliar", "gauchar"),
    *suffixes("baular", "ciumar", "inguar", "inquar", "prazer", "querer", "ruinar", "viuvar"),
    *suffixes(
        "aguar", "aizar", "eizar", "eguar", "iguar", "iquar", "oibir",
        "oizar", "ouvir", "parir", "saber", "uizar",
    ),
    *suffixes("quir", "qüir"),
    *suffixes("guar", "oiar", "quar"),
    *suffixes("car", "çar", "gar", "oar", "oer", "por"),
    *REGULAR,
)


# ============================================================================
# Imperfect and future subjunctive
# ============================================================================

IMPERFECT_SUBJUNCTIVE_RULES: tuple[Rule, ...] = (
    *derivatives("dar", "estar", "ter", "ver", "vir"),
    *exact(
        "dar", "ensimesmar", "estar", "haver", "ir", "poder", "ser",
        "sobreir", "sobresser", "ter", "ver", "vir",
    ),
    *exact_as("-por", "pôr"),
    *suffixes("querer", "trazer"),
    *suffixes("caber", "dizer", "fazer", "saber"),
    *suffixes("guir", "quir"),
    *suffix_as("-guir", "güir"),
    *suffix_as("-quir", "qüir"),
    *suffixes("aer", "air", "oer", "oir", "por", "uer", "uir"),
    *REGULAR,
)


# ============================================================================
# Past participle
# ============================================================================

PAST_PARTICIPLE_RULES: tuple[Rule, ...] = (
    *derivatives("ver", "vir"),
    *exact(
        "absolver", "aceitar", "acender", "anexar", "assentar", "benzer",
        "despertar", "dispersar", "distender", "distinguir", "eleger",
        "encher", "entregar", "envolver", "enxugar", "expressar", "exprimir",
        "expulsar", "extinguir", "fartar", "findar", "frigir", "ganhar",
        "gastar", "isentar", "juntar", "libertar", "limpar", "manifestar",
        "matar", "malquerer", "morrer", "murchar", "ocultar", "pagar",
        "pegar", "prender", "romper", "salvar", "secar", "segurar", "soltar",
        "sujeitar", "suspender", "vagar", "ver", "vir",
    ),
    *exact_as("-por", "pôr"),
    *suffixes("imprimir"),
    *suffixes("screver"),
    *suffixes("abrir", "argir", "cobrir", "dizer", "ergir", "fazer"),
    *suffixes("guer", "guir", "quer", "quir"),
    *suffix_as("-guer", "güer"),
    *suffix_as("-guir", "güir"),
    *suffix_as("-quer", "qüer"),
    *suffix_as("-quir", "qüir"),
    *suffixes("aer", "air", "oer", "oir", "uir", "por"),
    *REGULAR,
)


RULES: dict[TenseFamily, tuple[Rule, ...]] = {
    TenseFamily.PRESENT_INDICATIVE: PRESENT_INDICATIVE_RULES,
    TenseFamily.IMPERFECT_INDICATIVE: IMPERFECT_INDICATIVE_RULES,
    TenseFamily.PRETERITE_INDICATIVE: PRETERITE_INDICATIVE_RULES,
    TenseFamily.FUTURE_INDICATIVE: FUTURE_INDICATIVE_RULES,
    TenseFamily.PRESENT_SUBJUNCTIVE: PRESENT_SUBJUNCTIVE_RULES,
    TenseFamily.IMPERFECT_SUBJUNCTIVE: IMPERFECT_SUBJUNCTIVE_RULES,
    TenseFamily.PAST_PARTICIPLE: PAST_PARTICIPLE_RULES,
}
