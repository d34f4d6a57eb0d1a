"""Imperative moods, assembled from present indicative and subjunctive forms.

There is no first person singular imperative. The affirmative takes "tu"
and "vós" from the present indicative (fala, falai) and the remaining persons
from the present subjunctive; the negative is the present subjunctive.
"""

from conjugador.composer.stems import drop_last
from conjugador.table import Row, cell_of, map_cell
from conjugador.verb import Verb

# Verbs whose "tu" imperative also keeps the archaic final -e (conduz/conduze)
FINAL_E_SUFFIXES = ("uzir", "trazer")


def imperative_affirmative(verb: Verb, present: Row, present_subjunctive: Row) -> Row:
    """Affirmative imperative of one variant.

    Args:
        verb: The verb being conjugated
        present: Present indicative row, defective persons blanked out
        present_subjunctive: Present subjunctive row, defective persons
            blanked out

    Examples:
        >>> from conjugador.verb import Verb
        >>> imperative_affirmative(
        ...     Verb.parse("falar"),
        ...     [("falo",), ("falas",), ("fala",), ("falamos",), ("falais",), ("falam",)],
        ...     [("fale",), ("fales",), ("fale",), ("falemos",), ("faleis",), ("falem",)],
        ... )[1:]
        [('fala',), ('fale',), ('falemos',), ('falai',), ('falem',)]
    """
    tu = present[2]
    vos = map_cell(present[4], lambda form: drop_last(form, 1))

    match verb.infinitive:
        case "ser":
            tu, vos = cell_of("sê"), cell_of("sede")
        case "sobresser":
            tu, vos = cell_of("sobressê"), cell_of("sobressede")
        case _ if verb.infinitive.endswith(FINAL_E_SUFFIXES) and tu is not None:
            tu = cell_of(*(alternative for form in tu for alternative in (form, form + "e")))
        case _:
            pass

    return [
        None,
        tu,
        present_subjunctive[2],
        present_subjunctive[3],
        vos,
        present_subjunctive[5],
    ]


def imperative_negative(present_subjunctive: Row) -> Row:
    return [None, *present_subjunctive[1:]]
