"""
Tests for simple tense composition.

Tables are built with Conjugator.conjugate_simple(), which needs no
auxiliary verbs.
"""

import pytest

from conjugador.composer import compose_simple_tense
from conjugador.composer.indicative import delinquir_present, derived_row
from conjugador.composer.nominal import gerund, past_participle
from conjugador.composer.stems import mask_row, replace_from_end, rows_from_text
from conjugador.conjugator import Conjugator
from conjugador.grammar import Person, Tense, Variant
from conjugador.verb import Verb


def simple(infinitive: str):
    return Conjugator(Verb.parse(infinitive)).conjugate_simple()


def forms(table, tense: Tense, variant: Variant = Variant.BP_POST_REFORM) -> list[str | None]:
    """First alternative of every person."""
    return [cell[0] if cell else None for cell in table.row(tense, variant)]


# =============================================================================
# Helpers
# =============================================================================


class TestStemHelpers:
    """String helpers used by the tense recipes."""

    def test_replace_from_end(self):
        assert replace_from_end("odi", 1, "ei") == "odei"

    def test_rows_from_text(self):
        assert rows_from_text("a/b", None) == [("a", "b"), None]

    def test_delinquir_prefixes_every_alternative(self):
        row = delinquir_present("del", Variant.EP_POST_REFORM)
        assert row[0] == ("delinquo", "delínquo")
        assert row[3] == ("delinquimos",)
        assert delinquir_present("del", Variant.BP_PRE_REFORM)[0] is None

    def test_mask_row(self):
        row = [("a",), ("b",), ("c",)]
        assert mask_row(row, {0, 2}) == [None, ("b",), None]

    def test_derived_row_keeps_alternatives(self):
        row = derived_row(("fizeram", "fazeram"), ("esse",))
        assert row == [("fizesse", "fazesse")]

    def test_derived_row_absent_source(self):
        assert derived_row(None, ("a", "b")) == [None, None]


# =============================================================================
# Regular verbs
# =============================================================================


class TestRegularVerbs:
    """The three regular classes."""

    def test_falar_present(self):
        assert forms(simple("falar"), Tense.PRESENT_INDICATIVE) == [
            "falo", "falas", "fala", "falamos", "falais", "falam",
        ]

    def test_comer_participle_single_form(self):
        table = simple("comer")
        for variant in Variant:
            assert table.cell(Tense.PAST_PARTICIPLE, variant) == ("comido",)

    def test_partir_preterite(self):
        assert forms(simple("partir"), Tense.PRETERITE_INDICATIVE) == [
            "parti", "partiste", "partiu", "partimos", "partistes", "partiram",
        ]

    def test_falar_derived_tenses(self):
        table = simple("falar")
        assert table.first(Tense.PLUPERFECT_INDICATIVE, Variant.BP_POST_REFORM) == "falara"
        assert table.first(Tense.IMPERFECT_SUBJUNCTIVE, Variant.BP_POST_REFORM, Person.FIRST_PLURAL) == "falássemos"
        assert table.first(Tense.FUTURE_SUBJUNCTIVE, Variant.BP_POST_REFORM, Person.THIRD_PLURAL) == "falarem"
        assert forms(table, Tense.PRESENT_SUBJUNCTIVE) == [
            "fale", "fales", "fale", "falemos", "faleis", "falem",
        ]

    def test_falar_future_and_conditional(self):
        table = simple("falar")
        assert forms(table, Tense.FUTURE_INDICATIVE) == [
            "falarei", "falarás", "falará", "falaremos", "falareis", "falarão",
        ]
        assert table.first(Tense.CONDITIONAL, Variant.EP_PRE_REFORM, Person.FIRST_PLURAL) == "falaríamos"

    def test_personal_infinitive(self):
        assert forms(simple("falar"), Tense.PERSONAL_INFINITIVE) == [
            "falar", "falares", "falar", "falarmos", "falardes", "falarem",
        ]

    def test_imperatives(self):
        table = simple("falar")
        assert forms(table, Tense.IMPERATIVE_AFFIRMATIVE) == [
            None, "fala", "fale", "falemos", "falai", "falem",
        ]
        assert forms(table, Tense.IMPERATIVE_NEGATIVE) == [
            None, "fales", "fale", "falemos", "faleis", "falem",
        ]

    def test_impersonal_tenses_have_one_cell(self):
        table = simple("falar")
        for tense in (Tense.IMPERSONAL_INFINITIVE, Tense.GERUND, Tense.PAST_PARTICIPLE):
            assert len(table.row(tense, Variant.BP_POST_REFORM)) == 1
        assert table.cell(Tense.GERUND, Variant.EP_POST_REFORM) == ("falando",)


class TestEuropeanPreterite:
    """European -ar first person plural preterite takes an accent."""

    def test_brazil_unaccented(self):
        assert simple("falar").cell(Tense.PRETERITE_INDICATIVE, Variant.BP_POST_REFORM, 3) == ("falamos",)

    def test_europe_pre_reform_accented(self):
        assert simple("falar").cell(Tense.PRETERITE_INDICATIVE, Variant.EP_PRE_REFORM, 3) == ("falámos",)

    def test_europe_post_reform_accepts_both(self):
        assert simple("falar").cell(Tense.PRETERITE_INDICATIVE, Variant.EP_POST_REFORM, 3) == ("falámos", "falamos")


# =============================================================================
# Irregular verbs
# =============================================================================


class TestIrregularVerbs:
    """Closed irregular families."""

    def test_dar(self):
        table = simple("dar")
        for variant in Variant:
            assert table.first(Tense.PRESENT_INDICATIVE, variant, Person.FIRST_SINGULAR) == "dou"
            assert table.first(Tense.PRETERITE_INDICATIVE, variant, Person.FIRST_SINGULAR) == "dei"

    def test_ser(self):
        table = simple("ser")
        assert forms(table, Tense.PRESENT_INDICATIVE) == ["sou", "és", "é", "somos", "sois", "são"]
        assert forms(table, Tense.PRETERITE_INDICATIVE) == ["fui", "foste", "foi", "fomos", "fostes", "foram"]
        assert table.first(Tense.IMPERFECT_INDICATIVE, Variant.BP_POST_REFORM) == "era"
        assert table.first(Tense.PRESENT_SUBJUNCTIVE, Variant.BP_POST_REFORM) == "seja"
        assert table.first(Tense.PLUPERFECT_INDICATIVE, Variant.BP_POST_REFORM) == "fora"

    def test_ser_imperative(self):
        table = simple("ser")
        assert table.first(Tense.IMPERATIVE_AFFIRMATIVE, Variant.BP_POST_REFORM, Person.SECOND_SINGULAR) == "sê"
        assert table.first(Tense.IMPERATIVE_AFFIRMATIVE, Variant.BP_POST_REFORM, Person.SECOND_PLURAL) == "sede"

    def test_ter(self):
        table = simple("ter")
        assert forms(table, Tense.PRESENT_INDICATIVE) == ["tenho", "tens", "tem", "temos", "tendes", "têm"]
        assert table.first(Tense.PRETERITE_INDICATIVE, Variant.BP_POST_REFORM, Person.THIRD_SINGULAR) == "teve"
        assert table.first(Tense.PLUPERFECT_INDICATIVE, Variant.BP_POST_REFORM) == "tivera"

    def test_derivative_of_ter_takes_accent(self):
        table = simple("conter")
        assert table.first(Tense.PRESENT_INDICATIVE, Variant.BP_POST_REFORM, Person.THIRD_SINGULAR) == "contém"

    def test_haver_has_two_plural_forms(self):
        table = simple("haver")
        assert table.cell(Tense.PRESENT_INDICATIVE, Variant.BP_POST_REFORM, Person.FIRST_SINGULAR) == ("hei",)
        assert table.cell(Tense.PRESENT_INDICATIVE, Variant.BP_POST_REFORM, Person.FIRST_PLURAL) == ("havemos", "hemos")
        assert table.first(Tense.PRESENT_SUBJUNCTIVE, Variant.BP_POST_REFORM) == "haja"

    def test_fazer(self):
        table = simple("fazer")
        assert forms(table, Tense.PRESENT_INDICATIVE) == ["faço", "fazes", "faz", "fazemos", "fazeis", "fazem"]
        assert table.first(Tense.PRETERITE_INDICATIVE, Variant.BP_POST_REFORM) == "fiz"
        assert table.first(Tense.PRETERITE_INDICATIVE, Variant.BP_POST_REFORM, Person.THIRD_SINGULAR) == "fez"
        assert table.first(Tense.FUTURE_INDICATIVE, Variant.BP_POST_REFORM) == "farei"
        assert table.first(Tense.PRESENT_SUBJUNCTIVE, Variant.BP_POST_REFORM) == "faça"
        assert table.cell(Tense.PAST_PARTICIPLE, Variant.BP_POST_REFORM) == ("feito",)

    def test_dizer_future(self):
        assert simple("dizer").first(Tense.CONDITIONAL, Variant.BP_POST_REFORM) == "diria"

    def test_estar(self):
        table = simple("estar")
        assert forms(table, Tense.PRESENT_INDICATIVE) == ["estou", "estás", "está", "estamos", "estais", "estão"]
        assert table.first(Tense.PRETERITE_INDICATIVE, Variant.BP_POST_REFORM) == "estive"
        assert table.first(Tense.PRESENT_SUBJUNCTIVE, Variant.BP_POST_REFORM) == "esteja"

    def test_por(self):
        table = simple("pôr")
        assert table.first(Tense.PRESENT_INDICATIVE, Variant.BP_POST_REFORM) == "ponho"
        assert table.first(Tense.PERSONAL_INFINITIVE, Variant.BP_POST_REFORM, Person.SECOND_SINGULAR) == "pores"
        assert table.first(Tense.PERSONAL_INFINITIVE, Variant.BP_POST_REFORM, Person.THIRD_SINGULAR) == "pôr"


class TestNominalForms:
    """Gerund and participles."""

    def test_gerund_of_por(self):
        assert gerund(Verb.parse("pôr"), Variant.BP_POST_REFORM) == [("pondo",)]

    @pytest.mark.parametrize("infinitive,tag,expected", [
        ("comer", "-er", ("comido",)),
        ("cair", "-air", ("caído",)),
        ("abrir", "-abrir", ("aberto",)),
        ("escrever", "-screver", ("escrito",)),
        ("ver", "ver", ("visto",)),
        ("pagar", "pagar", ("pagado", "pago")),
    ])
    def test_participles(self, infinitive, tag, expected):
        assert past_participle(Verb.parse(infinitive), tag, Variant.BP_POST_REFORM) == [expected]

    def test_aceitar_participle_differs_by_dialect(self):
        verb = Verb.parse("aceitar")
        assert past_participle(verb, "aceitar", Variant.BP_POST_REFORM) == [("aceitado", "aceito")]
        assert past_participle(verb, "aceitar", Variant.EP_POST_REFORM) == [("aceitado", "aceite")]


# =============================================================================
# Defective verbs
# =============================================================================


class TestDefectiveVerbs:
    """Missing persons are absent cells, never errors."""

    def test_weather_verb_only_third_singular(self):
        table = simple("trovejar")
        for tense in table.tenses:
            if tense.is_impersonal:
                continue
            for variant in Variant:
                row = table.row(tense, variant)
                for person, cell in enumerate(row):
                    if tense.is_imperative or person != Person.THIRD_SINGULAR:
                        assert cell is None, (tense, variant, person)
                    else:
                        assert cell is not None, (tense, variant, person)

    def test_weather_verb_keeps_nominal_forms(self):
        table = simple("trovejar")
        assert table.cell(Tense.GERUND, Variant.BP_POST_REFORM) == ("trovejando",)

    def test_no_first_singular(self):
        table = simple("abolir")
        assert table.cell(Tense.PRESENT_INDICATIVE, Variant.BP_POST_REFORM, Person.FIRST_SINGULAR) is None
        assert table.first(Tense.PRESENT_INDICATIVE, Variant.BP_POST_REFORM, Person.SECOND_SINGULAR) == "aboles"
        # The present subjunctive is built on the missing "eu" form
        assert table.row(Tense.PRESENT_SUBJUNCTIVE, Variant.BP_POST_REFORM) == [None] * 6
        assert table.first(Tense.PRETERITE_INDICATIVE, Variant.BP_POST_REFORM) == "aboli"

    def test_arrhizotonic_present(self):
        row = simple("falir").row(Tense.PRESENT_INDICATIVE, Variant.BP_POST_REFORM)
        assert row == [None, None, None, ("falimos",), ("falis",), None]


# =============================================================================
# Dispatch
# =============================================================================


class TestComposeSimpleTense:
    """compose_simple_tense only handles simple tenses."""

    def test_rejects_compound_tense(self):
        with pytest.raises(ValueError, match="Unhandled simple tense"):
            compose_simple_tense(
                Verb.parse("falar"),
                Tense.COMPOUND_PRESENT_INDICATIVE,
                Variant.BP_POST_REFORM,
                None,
                {},
                {},
            )

    def test_variant_projection_matches_full_table(self):
        table = simple("fazer")
        for variant in Variant:
            projected = table.for_variant(variant)
            for tense in table.tenses:
                assert projected[tense] == table.row(tense, variant)
