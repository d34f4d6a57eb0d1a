"""Indicative tenses: present, imperfect, preterite, pluperfect, future, conditional.

Every function returns the six cells of one variant, before defective
persons are blanked out.
"""

from conjugador.composer.stems import (
    ABSENT,
    ALL_BUT_BRAZIL_POST_REFORM_STEM2,
    BOTH,
    BOTH_2_1,
    BOTH_2_3,
    BRAZIL_BOTH,
    BRAZIL_PRE_REFORM_STEM2,
    BRAZIL_STEM2,
    EUROPE_PRE_REFORM_STEM3,
    PRE_REFORM_STEM2,
    REFORM_STEM2_STEM3,
    STEM,
    STEM2,
    STEM3,
    STEM4,
    DialectSplit,
    ReformSplit,
    Slot,
    drop_last,
    merge_rows,
    recipe,
    replace_from_end,
    rhizotonic,
    rows_from_text,
)
from conjugador.grammar import Variant
from conjugador.table import Row, cell_of, map_cell
from conjugador.verb import Verb


# ============================================================================
# Endings
# ============================================================================

PRESENT_ENDINGS = {
    "ar": ("o", "as", "a", "amos", "ais", "am"),
    "er": ("o", "es", "e", "emos", "eis", "em"),
    "ir": ("o", "es", "e", "imos", "is", "em"),
}

IMPERFECT_ENDINGS = {
    "ar": ("ava", "avas", "ava", "ávamos", "áveis", "avam"),
    "er": ("ia", "ias", "ia", "íamos", "íeis", "iam"),
    "ir": ("ia", "ias", "ia", "íamos", "íeis", "iam"),
}

PRETERITE_ENDINGS = {
    "ar": ("ei", "aste", "ou", "amos", "astes", "aram"),
    "er": ("i", "este", "eu", "emos", "estes", "eram"),
    "ir": ("i", "iste", "iu", "imos", "istes", "iram"),
}

PLUPERFECT_ENDINGS = {
    "ar": ("ara", "aras", "ara", "áramos", "áreis", "aram"),
    "er": ("era", "eras", "era", "êramos", "êreis", "eram"),
    "ir": ("ira", "iras", "ira", "íramos", "íreis", "iram"),
}

FUTURE_ENDINGS = ("ei", "ás", "á", "emos", "eis", "ão")
CONDITIONAL_ENDINGS = ("ia", "ias", "ia", "íamos", "íeis", "iam")

# Strong preterite endings (disse, estive, houve, soube, trouxe)
STRONG_PRETERITE = ("e", "este", "e", "emos", "estes", "eram")
STRONG_PLUPERFECT = ("era", "eras", "era", "éramos", "éreis", "eram")

STRESSED_I_IMPERFECT = ("ía", "ías", "ía", "íamos", "íeis", "íam")
SHORT_THIRD_SINGULAR = ("o", "es", "", "emos", "eis", "em")
DAR_PRESENT = ("ou", "ás", "á", "amos", "ais", "ão")
UIR_PRESENT = ("o", "is", "i", "ímos", "ís", "em")
CRER_PRESENT = ("io", "s", "", "mos", "des", "em")
VER_PRESENT = ("jo", "s", "", "mos", "des", "em")


def regular_endings(table: dict[str, tuple[str, ...]], verb: Verb) -> tuple[str, ...]:
    """Regular endings for the verb's class; -por verbs inflect as -er."""
    return table.get(verb.ending, table["er"])


# ============================================================================
# Fully irregular rows
# ============================================================================

ENSIMESMAR_PRESENT = rows_from_text(
    "ensimesmo/enmimmesmo", "ensimesmas/entimesmas", "ensimesma",
    "ensimesmamos/ennosmesmamos", "ensimesmais/envosmesmais", "ensimesmam",
)
ENSIMESMAR_IMPERFECT = rows_from_text(
    "ensimesmava/enmimmesmava", "ensimesmavas/entimesmavas", "ensimesmava",
    "ensimesmávamos/ennosmesmávamos", "ensimesmáveis/envosmesmáveis", "ensimesmavam",
)
ENSIMESMAR_PRETERITE_BRAZIL = rows_from_text(
    "ensimesmei/enmimmesmei", "ensimesmaste/entimesmaste", "ensimesmou",
    "ensimesmamos/ennosmesmamos", "ensimesmastes/envosmesmastes", "ensimesmaram",
)
ENSIMESMAR_PRETERITE_EUROPE_POST = rows_from_text(
    "ensimesmei/enmimmesmei", "ensimesmaste/entimesmaste", "ensimesmou",
    "ensimesmámos/ensimesmamos/ennosmesmámos/ennosmesmamos",
    "ensimesmastes/envosmesmastes", "ensimesmaram",
)
ENSIMESMAR_PRETERITE_EUROPE_PRE = rows_from_text(
    "ensimesmei/enmimmesmei", "ensimesmaste/entimesmaste", "ensimesmou",
    "ensimesmámos/ennosmesmámos", "ensimesmastes/envosmesmastes", "ensimesmaram",
)
ENSIMESMAR_PLUPERFECT = rows_from_text(
    "ensimesmara/enmimmesmara", "ensimesmaras/entimesmaras", "ensimesmara",
    "ensimesmáramos/ennosmesmáramos", "ensimesmáreis/envosmesmáreis", "ensimesmaram",
)
ENSIMESMAR_FUTURE = rows_from_text(
    "ensimesmarei/enmimmesmarei", "ensimesmarás/entimesmarás", "ensimesmará",
    "ensimesmaremos/ennosmesmaremos", "ensimesmareis/envosmesmareis", "ensimesmarão",
)
ENSIMESMAR_CONDITIONAL = rows_from_text(
    "ensimesmaria/enmimmesmaria", "ensimesmarias/entimesmarias", "ensimesmaria",
    "ensimesmaríamos/ennosmesmaríamos", "ensimesmaríeis/envosmesmaríeis", "ensimesmariam",
)

DESMILINGUIR_PRESENT = {
    Variant.BP_POST_REFORM: rows_from_text(
        "desmilínguo", "desmilíngues", "desmilíngue",
        "desmilínguimos", "desmilínguis", "desmilínguem",
    ),
    Variant.BP_PRE_REFORM: rows_from_text(
        "desmilínguo", "desmilíngües", "desmilíngüe",
        "desmilíngüimos", "desmilíngüis", "desmilíngüem",
    ),
    Variant.EP_POST_REFORM: rows_from_text(
        "desmilinguo", "desmilingúis", "desmilingúi",
        "desmilinguimos", "desmilinguis", "desmilingúem",
    ),
    Variant.EP_PRE_REFORM: rows_from_text(
        "desmilinguo", "desmilingúis", "desmilingúi",
        "desmilinguimos", "desmilinguis", "desmilingúem",
    ),
}


def delinquir_present(prefix: str, variant: Variant) -> Row:
    """Present of delinquir and its compounds, stressed either on the root or the ending."""
    match variant:
        case Variant.BP_POST_REFORM | Variant.EP_POST_REFORM:
            forms = ["inquo/ínquo", "inquis/ínques", "inqui/ínque", "inquimos", "inquis", "inquem/ínquem"]
        case Variant.BP_PRE_REFORM:
            forms = [None, "ínqües", "ínqüe", "inqüimos", "inqüis", "ínqüem"]
        case Variant.EP_PRE_REFORM:
            forms = ["inquo/ínquo", "inqüis/ínques", "inqüi/ínque", "inquimos", "inquis", "inqüem/ínquem"]
        case _:
            raise ValueError(f"Unhandled variant: {variant}")
    return [map_cell(cell, lambda part: prefix + part) for cell in rows_from_text(*forms)]


# ============================================================================
# Present
# ============================================================================

# -iar verbs conjugated either regularly or like odiar
TWO_FORM_IAR = frozenset({
    "agenciar", "apresenciar", "cadenciar", "comerciar", "desnegociar",
    "despremiar", "diligenciar", "licenciar", "obsequiar", "-negociar",
    "premiar", "presenciar",
})

# -iar verbs conjugated like odiar: odeio, odeias...
IRREGULAR_IAR = frozenset({
    "ansiar", "arremediar", "desarremediar", "desremediar", "incendiar",
    "intermediar", "mediar", "odiar", "promediar",
})

# Stressed u in the stem: saúdo, reúno, esmiúço
STRESSED_U = frozenset({
    "afiuzar", "apaular", "aunar", "aviusar", "aziumar", "-baular", "-ciumar",
    "desembaular", "embaular", "enviusar", "faular", "saudar", "-viuvar",
    "embaucar", "esmiuçar", "reunir",
})

# Stressed i in the stem: enraízo, proíbo
STRESSED_I = frozenset({
    "-aizar", "-eizar", "-oizar", "-uizar", "ajesuitar", "ruidar", "-ruinar",
    "-oibir", "puitar",
})


def present_indicative(verb: Verb, tag: str, variant: Variant) -> Row:
    """Present indicative of one variant.

    Examples:
        >>> from conjugador.verb import Verb
        >>> v = Verb.parse("falar")
        >>> present_indicative(v, "-ar", Variant.BP_POST_REFORM)[0]
        ('falo',)
    """
    stem = verb.stem_for(variant)
    r = recipe(stem, regular_endings(PRESENT_ENDINGS, verb))

    match tag:
        case "abaiucar":
            r.set(Slot.STEM2, replace_from_end(stem, 2, "ú"))
            r.strategies = rhizotonic(ALL_BUT_BRAZIL_POST_REFORM_STEM2)
        case "-acudir" | "consumir" | "subir" | "sumir" | "-ulir":
            r.set(Slot.STEM2, replace_from_end(stem, 2, "o"))
            r.use((1, 2, 5), STEM2)
        case "-aer":
            r.endings = ("io", "is", "i", "emos", "eis", "em")
        case _ if tag in STRESSED_U:
            r.set(Slot.STEM2, replace_from_end(stem, 2, "ú"))
            r.strategies = rhizotonic(STEM2)
        case _ if tag in STRESSED_I:
            r.set(Slot.STEM2, replace_from_end(stem, 2, "í"))
            r.strategies = rhizotonic(STEM2)
        case _ if tag in TWO_FORM_IAR:
            r.set(Slot.STEM2, replace_from_end(stem, 1, "ei"))
            r.strategies = rhizotonic(BOTH)
        case _ if tag in IRREGULAR_IAR:
            r.set(Slot.STEM2, replace_from_end(stem, 1, "ei"))
            r.strategies = rhizotonic(STEM2)
        case "-agir" | "-eger" | "-ger" | "-gir":
            r.set(Slot.STEM2, replace_from_end(stem, 1, "j"))
            r.use((0,), STEM2)
        case "-aguar":
            r.set(Slot.STEM2, replace_from_end(stem, 3, "á"))
            r.strategies = rhizotonic(DialectSplit(
                brazil=ReformSplit(post=BOTH, pre=STEM2),
                europe=ReformSplit(post=BOTH, pre=STEM),
            ))
        case "-air":
            r.endings = UIR_PRESENT
        case "-anquir":
            r.set(Slot.STEM2, drop_last(stem, 2) + "c")
            r.use((0,), STEM2)
        case "aprazer" | "desaprazer" | "prazer" | "reaprazer" | "-prazer" | "-jazer":
            r.endings = SHORT_THIRD_SINGULAR
        case "-arguir":
            r.endings = ("o", "is", "i", "imos", "is", "em")
            r.set(Slot.STEM2, replace_from_end(stem, 1, "ü"))
            r.set(Slot.STEM3, replace_from_end(stem, 1, "ú"))
            r.set(Slot.STEM4, replace_from_end(stem, 1, "u"))
            r.strategies = [
                STEM4,
                EUROPE_PRE_REFORM_STEM3,
                EUROPE_PRE_REFORM_STEM3,
                BRAZIL_PRE_REFORM_STEM2,
                BRAZIL_PRE_REFORM_STEM2,
                EUROPE_PRE_REFORM_STEM3,
            ]
        case "aspergir" | "convergir" | "divergir":
            r.set(Slot.STEM2, drop_last(stem, 3) + "irj")
            r.use((0,), STEM2)
        case "ateizar":
            r.set(Slot.STEM2, replace_from_end(stem, 2, "í"))
            r.strategies = rhizotonic(BRAZIL_STEM2)
        case "-balaustrar":
            r.set(Slot.STEM2, replace_from_end(stem, 4, "ú"))
            r.strategies = rhizotonic(STEM2)
        case "-caber":
            r.set(Slot.STEM2, replace_from_end(stem, 2, "ai"))
            r.use((0,), STEM2)
        case "-cer" | "-cir" | "-medir" | "-pedir":
            r.set(Slot.STEM2, replace_from_end(stem, 1, "ç"))
            r.use((0,), STEM2)
        case "cerzir":
            r.set(Slot.STEM2, replace_from_end(stem, 3, "i"))
            r.use((1, 2, 5), BOTH)
        case "-cobrir" | "-dormir" | "tossir":
            r.set(Slot.STEM2, replace_from_end(stem, 3, "u"))
            r.use((0,), STEM2)
        case "-construir" | "destruir":
            r.endings = UIR_PRESENT
            r.set(Slot.STEM2, replace_from_end(stem, 1, "ó"))
            r.use((1, 2, 5), BOTH)
        case "crer" | "descrer" | "ler" | "-ler" | "rer" | "ver" | "-ver":
            r.endings = VER_PRESENT if tag in ("ver", "-ver") else CRER_PRESENT
            r.set(Slot.STEM2, stem + "e")
            r.set(Slot.STEM3, stem + "ê")
            r.strategies = [STEM2, STEM3, STEM3, STEM2, STEM2, REFORM_STEM2_STEM3]
        case "-cuspir" | "-guspir":
            r.set(Slot.STEM2, replace_from_end(stem, 3, "o"))
            r.use((1, 2, 5), STEM2)
        case "dar" | "-dar" | "estar" | "-estar":
            r.endings = DAR_PRESENT
        case "-delinquir":
            r.override = delinquir_present(drop_last(stem, 4), variant)
        case "denegrir":
            r.set(Slot.STEM2, replace_from_end(stem, 3, "i"))
            r.strategies = rhizotonic(STEM2)
        case "desmilinguir":
            r.override = DESMILINGUIR_PRESENT[variant]
        case "-dizer" | "-trazer":
            r.endings = SHORT_THIRD_SINGULAR
            r.set(Slot.STEM2, replace_from_end(stem, 1, "g"))
            r.use((0,), STEM2)
        case "-fazer":
            r.endings = SHORT_THIRD_SINGULAR
            r.set(Slot.STEM2, replace_from_end(stem, 1, "ç"))
            r.use((0,), STEM2)
        case "-ear":
            r.set(Slot.STEM2, stem + "i")
            r.strategies = rhizotonic(STEM2)
        case "-ectir" | "-ertir" | "-enhir" | "-entir" | "-ervir" | "-erzir" | "-ernir":
            r.set(Slot.STEM2, replace_from_end(stem, 3, "i"))
            r.use((0,), STEM2)
        case "-edir" | "-elir" | "-emir" | "-enir" | "-erir" | "-etir":
            r.set(Slot.STEM2, replace_from_end(stem, 2, "i"))
            r.use((0,), STEM2)
        case "-eguar":
            r.set(Slot.STEM2, replace_from_end(stem, 3, "é"))
            r.strategies = rhizotonic(DialectSplit(
                brazil=ReformSplit(post=BOTH, pre=STEM), europe=STEM,
            ))
        case "-eguir":
            r.set(Slot.STEM2, drop_last(stem, 3) + "ig")
            r.use((0,), STEM2)
        case "-egüir":
            r.set(Slot.STEM2, replace_from_end(replace_from_end(stem, 1, "u"), 3, "i"))
            r.use((0,), STEM2)
        case "-embair":
            r.endings = ("io", "es", "e", "ímos", "ís", "em")
        case "-engolir":
            r.set(Slot.STEM2, replace_from_end(stem, 2, "u"))
            r.use((0,), STEM2)
        case "ensimesmar":
            r.override = ENSIMESMAR_PRESENT
        case "-entupir":
            r.set(Slot.STEM2, replace_from_end(stem, 2, "o"))
            r.use((1, 2, 5), BOTH)
        case "-equar":
            r.set(Slot.STEM2, replace_from_end(stem, 3, "é"))
            r.strategies = rhizotonic(BRAZIL_BOTH)
        case "-iguar" | "-iquar":
            r.set(Slot.STEM2, replace_from_end(stem, 3, "í"))
            r.strategies = rhizotonic(BRAZIL_BOTH)
        case "-ergir":
            r.set(Slot.STEM2, drop_last(stem, 3) + "irj")
            r.set(Slot.STEM3, replace_from_end(stem, 1, "j"))
            r.use((0,), BOTH_2_3)
        case "-erguer":
            r.set(Slot.STEM2, replace_from_end(stem, 1, ""))
            r.use((0,), STEM2)
        case "explodir":
            r.set(Slot.STEM2, replace_from_end(stem, 2, "u"))
            r.use((0,), BOTH)
        case "faiscar":
            r.set(Slot.STEM2, replace_from_end(stem, 3, "í"))
            r.strategies = rhizotonic(STEM2)
        case "frigir" | "fugir":
            r.set(Slot.STEM2, replace_from_end(stem, 1, "j"))
            r.set(Slot.STEM3, replace_from_end(stem, 2, "e" if tag == "frigir" else "o"))
            r.use((0,), STEM2)
            r.use((1, 2, 5), STEM3)
        case "-gauchar":
            r.set(Slot.STEM2, replace_from_end(stem, 3, "ú"))
            r.strategies = rhizotonic(STEM2)
        case "-gredir":
            r.set(Slot.STEM2, replace_from_end(stem, 2, "i"))
            r.strategies = rhizotonic(STEM2)
        case "-güer" | "-güir":
            r.set(Slot.STEM2, replace_from_end(stem, 1, "u"))
            r.use((0,), STEM2)
        case "-guir":
            # The u of "gü" is pronounced and stays before -o
            if verb.infinitive[-4:-2] == "gü":
                r.set(Slot.STEM2, stem)
            else:
                r.set(Slot.STEM2, replace_from_end(stem, 1, ""))
            r.use((0,), STEM2)
        case "haver":
            r.endings = ("ei", "ás", "á", "emos", "eis", "ão")
            r.set(Slot.STEM2, drop_last(stem, 2))
            r.strategies = [STEM2, STEM2, STEM2, BOTH, BOTH, STEM2]
        case "-inguar" | "-inquar":
            r.set(Slot.STEM2, replace_from_end(stem, 4, "í"))
            r.strategies = rhizotonic(BOTH)
        case "ir" | "sobreir":
            r.endings = ("vou", "vás", "vá", "vamos", "ides", "vão")
        case "-mobiliar":
            r.set(Slot.STEM2, replace_from_end(stem, 3, "í"))
            r.strategies = rhizotonic(STEM2)
        case "-oar":
            r.set(Slot.STEM2, replace_from_end(stem, 1, "ô"))
            r.use((0,), BRAZIL_PRE_REFORM_STEM2)
        case "-oer":
            r.endings = ("o", "is", "i", "emos", "eis", "em")
            r.set(Slot.STEM2, replace_from_end(stem, 1, "ô"))
            r.set(Slot.STEM3, replace_from_end(stem, 1, "ó"))
            r.use((0,), BRAZIL_PRE_REFORM_STEM2)
            r.use((1, 2), STEM3)
        case "-oiar":
            r.set(Slot.STEM2, replace_from_end(stem, 2, "ó"))
            r.strategies = rhizotonic(PRE_REFORM_STEM2)
        case "-ouvir":
            r.set(Slot.STEM2, replace_from_end(stem, 1, "ç"))
            r.set(Slot.STEM3, replace_from_end(r.stems[Slot.STEM2], 2, "i"))
            r.use((0,), BOTH_2_3)
        case "parar":
            r.set(Slot.STEM2, replace_from_end(stem, 2, "á"))
            r.use((2,), PRE_REFORM_STEM2)
        case "-parir":
            r.set(Slot.STEM2, replace_from_end(stem, 1, "ir"))
            r.use((0,), BOTH_2_1)
        case "-perder":
            r.set(Slot.STEM2, replace_from_end(stem, 1, "c"))
            r.use((0,), STEM2)
        case "-poder":
            r.set(Slot.STEM2, replace_from_end(stem, 1, "ss"))
            r.use((0,), STEM2)
        case "-polir":
            r.set(Slot.STEM2, replace_from_end(stem, 2, "u"))
            r.strategies = rhizotonic(STEM2)
        case "pôr" | "-por":
            r.endings = ("onho", "ões", "õe", "omos", "ondes", "õem")
        case "-querer" | "requerer":
            r.endings = ("o", "es", "", "emos", "eis", "em")
            r.set(Slot.STEM2, stem + "e")
            r.use((2,), BOTH)
            if tag == "requerer":
                r.set(Slot.STEM3, replace_from_end(stem, 2, "ei"))
                r.use((0,), STEM3)
        case "-quir" | "-qüir" | "retorquir":
            r.use((0,), ABSENT)
        case "retorqüir":
            r.set(Slot.STEM2, replace_from_end(stem, 4, "ó"))
            r.strategies = rhizotonic(STEM2)
            r.use((0,), ABSENT)
        case "rir" | "-sorrir":
            r.endings = ("io", "is", "i", "imos", "ides", "iem")
        case "-saber":
            r.endings = ("ei", "es", "e", "emos", "eis", "em")
            r.set(Slot.STEM2, drop_last(stem, 2))
            r.use((0,), STEM2)
        case "ser" | "sobresser":
            r.endings = ("ou", "és", "é", "omos", "ois", "ão")
            r.set(Slot.STEM2, drop_last(stem, 1 if tag == "ser" else 2))
            r.use((1, 2), STEM2)
        case "sortir":
            r.set(Slot.STEM2, replace_from_end(stem, 3, "u"))
            r.strategies = rhizotonic(STEM2)
        case "ter":
            r.endings = ("enho", "ens", "em", "emos", "endes", "êm")
        case "-ter":
            r.endings = ("enho", "éns", "ém", "emos", "endes", "êm")
        case "vir":
            r.endings = ("enho", "ens", "em", "imos", "indes", "êm")
        case "-vir":
            r.endings = ("enho", "éns", "ém", "imos", "indes", "êm")
        case "-uir":
            r.endings = UIR_PRESENT
        case "-uzir":
            r.endings = ("o", "es", "", "imos", "is", "em")
        case "-valer":
            r.set(Slot.STEM2, stem + "h")
            r.use((0,), STEM2)
        case _:
            pass

    return r.compose(variant)


# ============================================================================
# Imperfect
# ============================================================================


def imperfect_indicative(verb: Verb, tag: str, variant: Variant) -> Row:
    stem = verb.stem_for(variant)
    r = recipe(stem, regular_endings(IMPERFECT_ENDINGS, verb))

    match tag:
        case "-aer" | "-air" | "-oer" | "-oir" | "-uer" | "-uir":
            r.endings = STRESSED_I_IMPERFECT
        case "ensimesmar":
            r.override = ENSIMESMAR_IMPERFECT
        case "-por":
            r.endings = ("unha", "unhas", "unha", "únhamos", "únheis", "unham")
        case "ser" | "sobresser":
            r.set(Slot.STEM, "" if tag == "ser" else "sobre")
            r.endings = ("era", "eras", "era", "éramos", "éreis", "eram")
        case "ter" | "-ter" | "vir" | "-vir":
            r.endings = ("inha", "inhas", "inha", "ínhamos", "ínheis", "inham")
        case _:
            pass

    return r.compose(variant)


# ============================================================================
# Preterite
# ============================================================================


def preterite_indicative(verb: Verb, tag: str, variant: Variant) -> Row:
    """Preterite perfect of one variant.

    European Portuguese writes the first person plural of -ar verbs with an
    accent (falámos) to tell it from the present; after the reform the
    unaccented spelling is accepted too.
    """
    stem = verb.stem_for(variant)
    r = recipe(stem, regular_endings(PRETERITE_ENDINGS, verb))

    match tag:
        case "-aer" | "-oer":
            r.endings = ("í", "este", "eu", "emos", "estes", "eram")
        case "-air" | "-uir":
            r.endings = ("í", "íste", "iu", "ímos", "ístes", "íram")
        case "-aber":
            r.endings = STRONG_PRETERITE
            r.set(Slot.STEM, drop_last(stem, 2) + "oub")
        case "-car":
            r.set(Slot.STEM2, replace_from_end(stem, 1, "qu"))
            r.use((0,), STEM2)
        case "-çar":
            r.set(Slot.STEM2, replace_from_end(stem, 1, "c"))
            r.use((0,), STEM2)
        case "dar" | "-dar":
            r.endings = ("ei", "este", "eu", "emos", "estes", "eram")
        case "-dizer":
            r.endings = STRONG_PRETERITE
            r.set(Slot.STEM, replace_from_end(stem, 1, "ss"))
        case "ensimesmar":
            if variant.is_brazilian:
                return list(ENSIMESMAR_PRETERITE_BRAZIL)
            if variant.is_post_reform:
                return list(ENSIMESMAR_PRETERITE_EUROPE_POST)
            return list(ENSIMESMAR_PRETERITE_EUROPE_PRE)
        case "estar" | "-estar":
            r.endings = STRONG_PRETERITE
            r.set(Slot.STEM, stem + "iv")
        case "-fazer":
            r.endings = ("iz", "izeste", "ez", "izemos", "izestes", "izeram")
            r.set(Slot.STEM, drop_last(stem, 2))
        case "-gar":
            r.set(Slot.STEM2, stem + "u")
            r.use((0,), STEM2)
        case "-guar" | "-quar":
            r.set(Slot.STEM2, replace_from_end(stem, 1, "ü"))
            r.use((0,), BRAZIL_PRE_REFORM_STEM2)
        case "haver" | "reaver":
            r.endings = STRONG_PRETERITE
            r.set(Slot.STEM, drop_last(stem, 2) + "ouv")
        case "ir" | "sobreir" | "ser" | "sobresser":
            r.endings = ("fui", "foste", "foi", "fomos", "fostes", "foram")
            if tag == "ser":
                r.set(Slot.STEM, "")
            elif tag == "sobresser":
                r.set(Slot.STEM, drop_last(stem, 2))
        case "-querer":
            r.endings = ("", "este", "", "emos", "estes", "eram")
            r.set(Slot.STEM, drop_last(stem, 2) + "is")
        case "poder":
            r.endings = ("ude", "udeste", "ôde", "udemos", "udestes", "uderam")
            r.set(Slot.STEM, drop_last(stem, 2))
        case "-por":
            r.endings = ("us", "useste", "ôs", "usemos", "usestes", "useram")
        case "-prazer":
            strong = recipe(drop_last(stem, 2) + "ouv", STRONG_PRETERITE).compose(variant)
            weak = recipe(stem, PRETERITE_ENDINGS["er"]).compose(variant)
            return merge_rows(strong, weak)
        case "ter" | "-ter":
            r.endings = ("ive", "iveste", "eve", "ivemos", "ivestes", "iveram")
        case "-trazer":
            r.endings = STRONG_PRETERITE
            r.set(Slot.STEM, drop_last(stem, 2) + "oux")
        case "ver" | "-ver":
            r.endings = PRETERITE_ENDINGS["ir"]
        case "vir" | "-vir":
            r.endings = ("im", "ieste", "eio", "iemos", "iestes", "ieram")
        case _:
            pass

    if not variant.is_brazilian and r.endings[3] == "amos":
        endings = list(r.endings)
        endings[3] = "ámos"
        r.endings = endings

    row = r.compose(variant)
    if variant == Variant.EP_POST_REFORM and row[3] is not None:
        forms = []
        for form in row[3]:
            forms.append(form)
            if form.endswith("ámos"):
                forms.append(replace_from_end(form, 4, "a"))
        row[3] = cell_of(*forms)
    return row


# ============================================================================
# Pluperfect
# ============================================================================

STRONG_PLUPERFECT_TAGS = frozenset({
    "-aber", "dar", "-dar", "-dizer", "estar", "-estar", "-fazer", "haver",
    "reaver", "poder", "-por", "-prazer", "-querer", "ter", "-ter", "-trazer",
    "vir", "-vir",
})


def pluperfect_indicative(verb: Verb, tag: str, variant: Variant, preterite: Row) -> Row:
    """Pluperfect built on the preterite third person plural minus "-ram" and its vowel.

    Args:
        verb: The verb being conjugated
        tag: Preterite family tag of the verb
        variant: Orthographic variant
        preterite: This variant's preterite row, before defective persons
            are blanked out
    """
    if tag == "ensimesmar":
        return list(ENSIMESMAR_PLUPERFECT)

    if tag in STRONG_PLUPERFECT_TAGS:
        endings = STRONG_PLUPERFECT
    elif tag in ("-air", "-uir"):
        endings = ("íra", "íras", "íra", "íramos", "íreis", "íram")
    elif tag in ("ir", "ser", "sobreir", "sobresser"):
        endings = ("ora", "oras", "ora", "ôramos", "ôreis", "oram")
    elif tag in ("ver", "-ver"):
        endings = PLUPERFECT_ENDINGS["ir"]
    else:
        endings = regular_endings(PLUPERFECT_ENDINGS, verb)

    return derived_row(preterite[5], endings)


def derived_row(source, endings) -> Row:
    """Attach ``endings`` to every alternative of a preterite "-ram" form, minus 4 letters."""
    if source is None:
        return [None] * len(endings)
    stems = [drop_last(form, 4) for form in source]
    return [cell_of(*(stem + ending for stem in stems)) for ending in endings]


# ============================================================================
# Future and conditional
# ============================================================================


def future_stem(verb: Verb, tag: str, variant: Variant) -> str:
    infinitive = verb.infinitive_for(variant)
    match tag:
        case "-dizer" | "-fazer" | "-trazer":
            return drop_last(infinitive, 3) + "r"
        case "pôr":
            return "por"
        case _:
            return infinitive


def future_indicative(verb: Verb, tag: str, variant: Variant) -> Row:
    if tag == "ensimesmar":
        return list(ENSIMESMAR_FUTURE)
    return recipe(future_stem(verb, tag, variant), FUTURE_ENDINGS).compose(variant)


def conditional(verb: Verb, tag: str, variant: Variant) -> Row:
    if tag == "ensimesmar":
        return list(ENSIMESMAR_CONDITIONAL)
    return recipe(future_stem(verb, tag, variant), CONDITIONAL_ENDINGS).compose(variant)
