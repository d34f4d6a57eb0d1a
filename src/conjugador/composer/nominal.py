"""Non-finite forms: infinitives, gerund and past participle."""

from conjugador.composer.stems import drop_last, rows_from_text
from conjugador.grammar import Variant
from conjugador.table import Row, cell_of
from conjugador.verb import Verb

PERSONAL_INFINITIVE_ENDINGS = ("", "es", "", "mos", "des", "em")

ENSIMESMAR_PERSONAL_INFINITIVE = rows_from_text(
    "ensimesmar/enmimmesmar", "ensimesmares/entimesmares", "ensimesmar",
    "ensimesmarmos/ennosmesmarmos", "ensimesmardes/envosmesmardes", "ensimesmarem",
)


def personal_infinitive(verb: Verb, variant: Variant) -> Row:
    if verb.infinitive == "ensimesmar":
        return list(ENSIMESMAR_PERSONAL_INFINITIVE)
    infinitive = verb.infinitive_for(variant)
    # pôr loses its accent before an ending: pores, pormos
    inflected = "por" if infinitive == "pôr" else infinitive
    return [
        cell_of((inflected if ending else infinitive) + ending)
        for ending in PERSONAL_INFINITIVE_ENDINGS
    ]


def impersonal_infinitive(verb: Verb, variant: Variant) -> Row:
    return [cell_of(verb.infinitive_for(variant))]


def gerund(verb: Verb, variant: Variant) -> Row:
    """Gerund: the infinitive's final "r" becomes "ndo".

    Examples:
        >>> gerund(Verb.parse("falar"), Variant.BP_POST_REFORM)
        [('falando',)]
        >>> gerund(Verb.parse("pôr"), Variant.EP_PRE_REFORM)
        [('pondo',)]
    """
    infinitive = verb.infinitive_for(variant)
    if infinitive == "pôr":
        return [cell_of("pondo")]
    return [cell_of(drop_last(infinitive, 1) + "ndo")]


# ============================================================================
# Past participle
# ============================================================================

# Verbs with a regular participle and a short one formed by adding "o" to the stem
SHORT_O_PARTICIPLES = frozenset({
    "anexar", "despertar", "dispersar", "expressar", "expulsar", "fartar",
    "findar", "ganhar", "gastar", "isentar", "juntar", "libertar", "limpar",
    "manifestar", "murchar", "ocultar", "pagar", "pegar", "salvar", "secar",
    "segurar", "soltar", "sujeitar", "vagar",
})


def past_participle(verb: Verb, tag: str, variant: Variant) -> Row:
    """Past participle of one variant, as a single cell.

    Verbs with two standard participles list the regular one first; that
    first form is the one periphrastic tenses use.

    Args:
        verb: The verb being conjugated
        tag: Past participle family tag of the verb
        variant: Orthographic variant

    Returns:
        A one-cell row

    Examples:
        >>> past_participle(Verb.parse("comer"), "-er", Variant.BP_POST_REFORM)
        [('comido',)]
        >>> past_participle(Verb.parse("aceitar"), "aceitar", Variant.EP_POST_REFORM)
        [('aceitado', 'aceite')]
    """
    stem = verb.stem_for(variant)
    ending = "ado" if verb.ending == "ar" else "ido"
    regular = stem + ending

    match tag:
        case "-aer" | "-air" | "-oer" | "-oir" | "-uir":
            forms = [stem + "ído"]
        case "-abrir" | "-cobrir":
            forms = [drop_last(stem, 1) + "erto"]
        case "absolver" | "benzer" | "morrer":
            forms = [regular, drop_last(stem, 1) + "to"]
        case "aceitar":
            forms = [regular, stem + ("o" if variant.is_brazilian else "e")]
        case "acender" | "distender" | "prender" | "suspender":
            forms = [regular, drop_last(stem, 2) + "so"]
        case "-argir":
            forms = [drop_last(stem, 1) + "so"]
        case "assentar":
            forms = [regular, stem + "e"]
        case "distinguir" | "extinguir" | "romper":
            forms = [regular, drop_last(stem, 2) + "to"]
        case "-dizer":
            forms = [drop_last(stem, 1) + "to"]
        case "eleger":
            forms = [regular, drop_last(stem, 1) + "ito"]
        case "encher":
            forms = [regular, "cheio"]
        case "entregar":
            forms = [regular, stem + "ue"]
        case "envolver" | "enxugar" | "frigir":
            forms = [regular, drop_last(stem, 1) + "to"]
        case "-ergir":
            forms = [regular, drop_last(stem, 1) + "so"]
        case "exprimir" | "-imprimir":
            forms = [regular, drop_last(stem, 2) + "esso"]
        case _ if tag in SHORT_O_PARTICIPLES:
            forms = [regular, stem + "o"]
        case "-fazer":
            forms = [drop_last(stem, 2) + "eito"]
        case "matar":
            forms = [regular, drop_last(stem, 2) + "orto"]
        case "malquerer":
            forms = [regular, drop_last(stem, 2) + "isto"]
        case "-screver":
            forms = [drop_last(stem, 2) + "ito"]
        case "-por":
            forms = [stem + "osto"]
        case "ver" | "-ver":
            forms = [stem + "isto"]
        case "vir" | "-vir":
            forms = [stem + "indo"]
        case _:
            forms = [regular]

    return [cell_of(*forms)]
