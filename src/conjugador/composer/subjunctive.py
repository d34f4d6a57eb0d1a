"""Subjunctive tenses.

The present subjunctive is built on the first person singular of the
present indicative, so it inherits that form's irregularities (faço ->
faça, ponho -> ponha). The imperfect and future subjunctive are built on the
preterite third person plural (fizeram -> fizesse, fizer).
"""

from conjugador.composer.indicative import derived_row
from conjugador.composer.stems import (
    BOTH,
    BRAZIL_PRE_REFORM_STEM3,
    BRAZIL_PRE_REFORM_STEM4,
    PRE_REFORM_STEM2,
    STEM,
    STEM2,
    STEM3,
    STEM4,
    DialectSplit,
    ReformSplit,
    Slot,
    drop_last,
    every_person,
    recipe,
    replace_from_end,
    rhizotonic,
    rows_from_text,
)
from conjugador.grammar import Variant
from conjugador.table import Row
from conjugador.verb import Defect, Verb

__all__ = [
    "present_subjunctive",
    "imperfect_subjunctive",
    "future_subjunctive",
]


PRESENT_SUBJUNCTIVE_ENDINGS = {
    "ar": ("e", "es", "e", "emos", "eis", "em"),
    "er": ("a", "as", "a", "amos", "ais", "am"),
    "ir": ("a", "as", "a", "amos", "ais", "am"),
}

IMPERFECT_SUBJUNCTIVE_ENDINGS = {
    "ar": ("asse", "asses", "asse", "ássemos", "ásseis", "assem"),
    "er": ("esse", "esses", "esse", "êssemos", "êsseis", "essem"),
    "ir": ("isse", "isses", "isse", "íssemos", "ísseis", "issem"),
}

FUTURE_SUBJUNCTIVE_ENDINGS = {
    "ar": ("ar", "ares", "ar", "armos", "ardes", "arem"),
    "er": ("er", "eres", "er", "ermos", "erdes", "erem"),
    "ir": ("ir", "ires", "ir", "irmos", "irdes", "irem"),
}

# Verbs whose strong preterite (fizeram, souberam) takes open-e endings
STRONG_PAST_TAGS = frozenset({
    "-caber", "dar", "-dar", "-dizer", "estar", "-estar", "-fazer", "haver",
    "poder", "-por", "-querer", "-saber", "ter", "-ter", "-trazer", "vir", "-vir",
})

# Verbs with no present subjunctive when the present lacks "eu"
NO_SUBJUNCTIVE_WITHOUT_FIRST_SINGULAR = frozenset({"-quir", "-qüir", "-delinquir"})

ENSIMESMAR_PRESENT_SUBJUNCTIVE = rows_from_text(
    "ensimesme/enmimmesme", "ensimesmes/entimesmes", "ensimesme",
    "ensimesmemos/ennosmesmemos", "ensimesmeis/envosmesmeis", "ensimesmem",
)
ENSIMESMAR_IMPERFECT_SUBJUNCTIVE = rows_from_text(
    "ensimesmasse/enmimmesmasse", "ensimesmasses/entimesmasses", "ensimesmasse",
    "ensimesmássemos/ennosmesmássemos", "ensimesmásseis/envosmesmásseis", "ensimesmassem",
)
ENSIMESMAR_FUTURE_SUBJUNCTIVE = rows_from_text(
    "ensimesmar/enmimmesmar", "ensimesmares/entimesmares", "ensimesmar",
    "ensimesmarmos/ennosmesmarmos", "ensimesmardes/envosmesmardes", "ensimesmarem",
)

# Stressed u in the stem of the rhizotonic persons only
STRESSED_U = frozenset({
    "afiuzar", "apaular", "aunar", "aviusar", "aziumar", "-baular", "-ciumar",
    "desembaular", "embaular", "enviusar", "faular", "saudar", "-viuvar",
})

STRESSED_I = frozenset({
    "-aizar", "-eizar", "-oizar", "-uizar", "ajesuitar", "ateizar", "ruidar", "-ruinar",
})

IRREGULAR_IAR = frozenset({
    "ansiar", "arremediar", "desarremediar", "desremediar", "incendiar",
    "intermediar", "mediar", "odiar", "promediar",
})


def present_subjunctive(verb: Verb, tag: str, variant: Variant, present: Row) -> Row:
    """Present subjunctive of one variant.

    Args:
        verb: The verb being conjugated
        tag: Present subjunctive family tag of the verb
        variant: Orthographic variant
        present: This variant's present indicative row with defective
            persons already blanked out

    Returns:
        Six cells, before defective persons are blanked out
    """
    if tag == "ensimesmar":
        return list(ENSIMESMAR_PRESENT_SUBJUNCTIVE)

    endings = PRESENT_SUBJUNCTIVE_ENDINGS.get(verb.ending, PRESENT_SUBJUNCTIVE_ENDINGS["er"])
    first_singular = present[0]

    if first_singular is None:
        if verb.defect in (Defect.ARRHIZOTONIC_ONLY, Defect.NO_FIRST_SINGULAR) \
                or tag in NO_SUBJUNCTIVE_WITHOUT_FIRST_SINGULAR:
            return [None] * len(endings)
        r = recipe(verb.stem_for(variant), endings)
    else:
        r = recipe(drop_last(first_singular[0], 1), endings)
        if len(first_singular) > 1:
            # Two accepted forms of "eu" give two stems, except where stress
            # falls on the ending
            r.set(Slot.STEM2, drop_last(first_singular[1], 1))
            r.strategies = rhizotonic(BOTH)

    stem = r.stem
    if variant == Variant.BP_PRE_REFORM and verb.infinitive.endswith(("guar", "quar")):
        stem = replace_from_end(stem, 1, "ü")
        r.set(Slot.STEM, stem)

    match tag:
        case "abaiucar" | "embaucar":
            r.set(Slot.STEM, replace_from_end(stem, 1, "qu"))
            r.set(Slot.STEM2, replace_from_end(r.stem, 3, "u"))
            r.use((3, 4), STEM2)
        case "esmiuçar":
            r.set(Slot.STEM, replace_from_end(stem, 1, "c"))
            r.set(Slot.STEM2, replace_from_end(r.stem, 2, "u"))
            r.use((3, 4), STEM2)
        case _ if tag in STRESSED_U:
            r.set(Slot.STEM2, replace_from_end(stem, 2, "u"))
            r.use((3, 4), STEM2)
        case _ if tag in STRESSED_I:
            r.set(Slot.STEM2, replace_from_end(stem, 2, "i"))
            r.use((3, 4), STEM2)
        case _ if tag in IRREGULAR_IAR:
            r.set(Slot.STEM2, replace_from_end(stem, 2, ""))
            r.use((3, 4), STEM2)
        case "-aguar":
            r.set(Slot.STEM2, replace_from_end(stem, 1, "ú"))
            r.set(Slot.STEM3, replace_from_end(stem, 1, "ü"))
            r.set(Slot.STEM4, replace_from_end(r.stems[Slot.STEM3], 3, "a"))
            r.use((3, 4), BRAZIL_PRE_REFORM_STEM4)
        case "-balaustrar":
            r.set(Slot.STEM2, replace_from_end(stem, 4, "u"))
            r.use((3, 4), STEM2)
        case "-car":
            r.set(Slot.STEM, replace_from_end(stem, 1, "qu"))
        case "-çar":
            r.set(Slot.STEM, replace_from_end(stem, 1, "c"))
        case "dar" | "-dar":
            r.endings = ("", "s", "", "mos", "is", "em")
            base = drop_last(stem, 1)
            r.set(Slot.STEM, base + "e")
            r.set(Slot.STEM2, base + "ê")
            r.strategies = [STEM2, STEM2, STEM2, BOTH, STEM, PRE_REFORM_STEM2]
        case "-delinquir":
            r.use((3, 4), STEM)
        case "desmilinguir":
            r.set(Slot.STEM, replace_from_end(stem, 4, "i"))
        case "-eguar":
            r.set(Slot.STEM3, replace_from_end(stem, 3, "e"))
            r.set(Slot.STEM4, replace_from_end(r.stems[Slot.STEM3], 1, "ú"))
            r.strategies = rhizotonic(
                DialectSplit(brazil=ReformSplit(post=BOTH, pre=STEM4), europe=STEM),
                BRAZIL_PRE_REFORM_STEM3,
            )
        case "-equar":
            r.set(Slot.STEM3, replace_from_end(stem, 3, "é"))
            r.strategies = rhizotonic(
                DialectSplit(brazil=BOTH, europe=ReformSplit(post=STEM, pre=STEM3)),
            )
        case "estar" | "-estar" | "ser" | "sobresser":
            r.endings = PRESENT_SUBJUNCTIVE_ENDINGS["er"]
            r.set(Slot.STEM, drop_last(stem, 1) + "ej")
        case "explodir" | "-ouvir" | "-parir":
            r.strategies = every_person(BOTH)
        case "faiscar":
            r.set(Slot.STEM2, replace_from_end(stem, 1, "qu"))
            r.set(Slot.STEM, replace_from_end(r.stems[Slot.STEM2], 4, "i"))
            r.use((0, 1, 2, 5), STEM2)
        case "-gar":
            r.set(Slot.STEM, stem + "u")
        case "-gauchar":
            r.set(Slot.STEM2, replace_from_end(stem, 3, "u"))
            r.use((3, 4), STEM2)
        case "-guar" | "-quar":
            r.set(Slot.STEM2, replace_from_end(stem, 1, "ú"))
            r.set(Slot.STEM3, replace_from_end(stem, 1, "ü"))
            r.strategies = rhizotonic(
                ReformSplit(post=STEM, pre=DialectSplit(brazil=STEM3, europe=STEM2)),
                BRAZIL_PRE_REFORM_STEM3,
            )
        case "haver":
            r.set(Slot.STEM, "haj")
        case "-iguar":
            r.set(Slot.STEM2, replace_from_end(stem, 3, "í"))
            r.set(Slot.STEM3, replace_from_end(stem, 1, "ú"))
            r.set(Slot.STEM4, replace_from_end(stem, 1, "ü"))
            r.strategies = rhizotonic(
                ReformSplit(post=BOTH, pre=STEM3),
                BRAZIL_PRE_REFORM_STEM4,
            )
        case "-inguar" | "-inquar" | "-iquar":
            if variant == Variant.BP_PRE_REFORM and Slot.STEM2 in r.stems:
                r.set(Slot.STEM2, replace_from_end(r.stems[Slot.STEM2], 1, "ü"))
        case "ir" | "sobreir":
            r.endings = ("á", "ás", "á", "amos", "ades", "ão")
            r.set(Slot.STEM, drop_last(stem, 1))
        case "-mobiliar":
            r.set(Slot.STEM2, replace_from_end(stem, 3, "i"))
            r.use((3, 4), STEM2)
        case "-oar" | "-oer":
            r.set(Slot.STEM, replace_from_end(stem, 1, "o"))
        case "-oiar":
            r.set(Slot.STEM2, replace_from_end(stem, 2, "o"))
            r.use((3, 4), STEM2)
        case "-oibir" | "puitar":
            r.set(Slot.STEM2, replace_from_end(stem, 2, "i"))
            r.use((3, 4), STEM2)
        case "-por":
            r.endings = PRESENT_SUBJUNCTIVE_ENDINGS["er"]
        case "-querer":
            r.set(Slot.STEM, drop_last(stem, 1) + "ir")
        case "reunir":
            r.set(Slot.STEM2, replace_from_end(stem, 2, "u"))
            r.use((3, 4), STEM2)
        case "-saber":
            r.set(Slot.STEM, drop_last(stem, 1) + "aib")
        case _:
            pass

    return r.compose(variant)




# ============================================================================
# Imperfect and future subjunctive
# ============================================================================


def past_subjunctive_endings(
    verb: Verb,
    tag: str,
    regular: dict[str, tuple[str, ...]],
    stressed_i: tuple[str, ...],
    strong: tuple[str, ...],
    suppletive: tuple[str, ...],
) -> tuple[str, ...]:
    """Pick the endings of a subjunctive built on the preterite."""
    if tag in ("-air", "-uir"):
        return stressed_i
    if tag in STRONG_PAST_TAGS:
        return strong
    if tag in ("ir", "ser", "sobreir", "sobresser"):
        return suppletive
    if tag in ("ver", "-ver"):
        return regular["ir"]
    return regular.get(verb.ending, regular["er"])


def imperfect_subjunctive(verb: Verb, tag: str, variant: Variant, preterite: Row) -> Row:
    """Imperfect subjunctive: preterite "-ram" form minus 4 letters, plus -sse endings.

    Examples:
        >>> from conjugador.verb import Verb
        >>> imperfect_subjunctive(Verb.parse("falar"), "-ar", Variant.BP_POST_REFORM,
        ...                       [None] * 5 + [("falaram",)])[3]
        ('falássemos',)
    """
    if tag == "ensimesmar":
        return list(ENSIMESMAR_IMPERFECT_SUBJUNCTIVE)
    endings = past_subjunctive_endings(
        verb,
        tag,
        IMPERFECT_SUBJUNCTIVE_ENDINGS,
        stressed_i=("ísse", "ísses", "ísse", "íssemos", "ísseis", "íssem"),
        strong=("esse", "esses", "esse", "éssemos", "ésseis", "essem"),
        suppletive=("osse", "osses", "osse", "ôssemos", "ôsseis", "ossem"),
    )
    return derived_row(preterite[5], endings)


def future_subjunctive(verb: Verb, tag: str, variant: Variant, preterite: Row) -> Row:
    if tag == "ensimesmar":
        return list(ENSIMESMAR_FUTURE_SUBJUNCTIVE)
    endings = past_subjunctive_endings(
        verb,
        tag,
        FUTURE_SUBJUNCTIVE_ENDINGS,
        stressed_i=("ir", "íres", "ir", "irmos", "irdes", "írem"),
        strong=FUTURE_SUBJUNCTIVE_ENDINGS["er"],
        suppletive=("or", "ores", "or", "ormos", "ordes", "orem"),
    )
    return derived_row(preterite[5], endings)
