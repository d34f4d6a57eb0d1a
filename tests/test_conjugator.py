"""
Tests for full conjugation tables and conjugation requests.
"""

import pytest

from conjugador.conjugator import Conjugator, VerbOptions, conjugate_request
from conjugador.exceptions import AuxiliaryTablesMissingError, InvalidRequestError, InvalidVerbError
from conjugador.grammar import Mood, Person, Tense, Variant
from conjugador.verb import Verb

BP = Variant.BP_POST_REFORM
EP = Variant.EP_POST_REFORM


def request(infinitive, variant=BP, mood=Mood.REGULAR, pronoun1=None, pronoun2=None, *, auxiliaries):
    return conjugate_request(VerbOptions.create(infinitive, variant, mood, pronoun1, pronoun2), auxiliaries)


# =============================================================================
# Conjugator
# =============================================================================


class TestConjugator:
    """Tables over all tenses and variants."""

    def test_all_tenses(self, conjugate):
        table = conjugate("falar")
        assert table.tenses == list(Tense)
        assert table.cell(Tense.COMPOUND_PRESENT_INDICATIVE, BP, 0) == ("tenho falado", "hei falado")
        assert table.cell(Tense.COMPOUND_IMPERSONAL_INFINITIVE, EP) == ("ter falado", "haver falado")

    def test_compound_requires_auxiliaries(self):
        conjugator = Conjugator(Verb.parse("falar"))
        with pytest.raises(AuxiliaryTablesMissingError):
            conjugator.conjugate_all()
        with pytest.raises(AuxiliaryTablesMissingError):
            conjugator.conjugate_progressive()
        with pytest.raises(AuxiliaryTablesMissingError):
            conjugator.conjugate_passive()

    def test_simple_needs_no_auxiliaries(self):
        table = Conjugator(Verb.parse("falar")).conjugate_simple()
        assert table.tenses == [tense for tense in Tense if not tense.is_compound]

    def test_variant_projection(self, auxiliaries, conjugate):
        full = conjugate("fazer")
        for variant in Variant:
            single = Conjugator(Verb.parse("fazer"), auxiliaries).conjugate_variant(variant)
            assert single.variant == variant
            for tense in Tense:
                assert single[tense] == full.row(tense, variant)

    def test_defective_compound(self, conjugate):
        table = conjugate("trovejar")
        row = table.row(Tense.COMPOUND_PRESENT_INDICATIVE, BP)
        assert row[Person.THIRD_SINGULAR] == ("tem trovejado", "há trovejado")
        assert row[Person.FIRST_SINGULAR] is None

    def test_progressive(self, auxiliaries):
        table = Conjugator(Verb.parse("falar"), auxiliaries).conjugate_progressive()
        assert table.cell(Tense.PRESENT_INDICATIVE, BP, 0) == ("estou falando",)
        assert table.cell(Tense.PRESENT_INDICATIVE, EP, 0) == ("estou a falar",)
        assert table.cell(Tense.GERUND, BP) is None

    def test_passive(self, auxiliaries):
        table = Conjugator(Verb.parse("amar"), auxiliaries).conjugate_passive()
        assert table.cell(Tense.PRESENT_INDICATIVE, BP, 3) == ("somos amados",)
        assert table.cell(Tense.PRETERITE_INDICATIVE, BP, 0) == ("fui amado",)

    def test_passive_imperative_of_weather_verb(self, auxiliaries):
        table = Conjugator(Verb.parse("trovejar"), auxiliaries).conjugate_passive()
        assert table.row(Tense.IMPERATIVE_AFFIRMATIVE, BP) == [None] * 6


# =============================================================================
# Requests
# =============================================================================


class TestVerbOptions:
    """Request validation."""

    def test_create(self):
        options = VerbOptions.create("falar", "ep_post_reform", "progressive", "te")
        assert options.verb.infinitive == "falar"
        assert options.variant == EP
        assert options.mood == Mood.PROGRESSIVE
        assert options.pronoun == "te"

    def test_contracted_pronoun(self):
        assert VerbOptions.create("dar", BP, Mood.REGULAR, "nos", "as").pronoun == "no-las"

    def test_no_pronoun(self):
        options = VerbOptions.create("dar", BP, Mood.REGULAR, "", "")
        assert options.pronoun is None

    @pytest.mark.parametrize("variant,mood,pronoun1,pronoun2", [
        ("pt_pt", "regular", None, None),
        ("bp_post_reform", "imperative", None, None),
        ("bp_post_reform", "regular", "o", "lhe"),
        ("bp_post_reform", "passive", "o", None),
        ("bp_post_reform", "regular", None, "o"),
    ])
    def test_invalid(self, variant, mood, pronoun1, pronoun2):
        with pytest.raises(InvalidRequestError):
            VerbOptions.create("falar", variant, mood, pronoun1, pronoun2)

    def test_invalid_request_is_value_error(self):
        with pytest.raises(ValueError):
            VerbOptions.create("falar", BP, "imperative")

    def test_invalid_infinitive(self):
        with pytest.raises(InvalidVerbError):
            VerbOptions.create("casa", BP)


class TestConjugateRequest:
    """Mood, pronoun placement and variant projection."""

    def test_regular_without_pronoun(self, auxiliaries):
        table = request("falar", auxiliaries=auxiliaries)
        assert table.variant == BP
        assert [cell[0] for cell in table[Tense.PRESENT_INDICATIVE]] == [
            "falo", "falas", "fala", "falamos", "falais", "falam",
        ]

    def test_requires_auxiliaries(self):
        with pytest.raises(AuxiliaryTablesMissingError):
            conjugate_request(VerbOptions.create("falar", BP), None)

    def test_mesoclisis_in_future(self, auxiliaries):
        table = request("falar", EP, pronoun1="te", auxiliaries=auxiliaries)
        assert [cell[0] for cell in table[Tense.FUTURE_INDICATIVE]] == [
            "falar-te-ei", "falar-te-ás", "falar-te-á", "falar-te-emos", "falar-te-eis", "falar-te-ão",
        ]
        assert table.cell(Tense.COMPOUND_FUTURE_INDICATIVE, 0) == ("ter-te-ei falado", "haver-te-ei falado")

    def test_enclisis_europe_proclisis_brazil(self, auxiliaries):
        europe = request("falar", EP, pronoun1="lhe", auxiliaries=auxiliaries)
        brazil = request("falar", BP, pronoun1="lhe", auxiliaries=auxiliaries)
        assert europe.cell(Tense.PRESENT_INDICATIVE, 0) == ("falo-lhe",)
        assert brazil.cell(Tense.PRESENT_INDICATIVE, 0) == ("lhe falo",)

    def test_direct_object_enclisis(self, auxiliaries):
        table = request("falar", EP, pronoun1="o", auxiliaries=auxiliaries)
        assert table.cell(Tense.PRESENT_INDICATIVE, Person.FIRST_PLURAL) == ("falamo-lo",)
        assert table.cell(Tense.IMPERSONAL_INFINITIVE) == ("falá-lo",)
        assert table.cell(Tense.PAST_PARTICIPLE) == ("falado",)

    def test_participle_and_subjunctive(self, auxiliaries):
        table = request("fazer", EP, pronoun1="me", auxiliaries=auxiliaries)
        assert table.cell(Tense.PRESENT_SUBJUNCTIVE, 0) == ("me faça",)
        assert table.cell(Tense.COMPOUND_PRESENT_SUBJUNCTIVE, 0) == ("me tenha feito", "me haja feito")
        assert table.cell(Tense.IMPERATIVE_AFFIRMATIVE, Person.THIRD_SINGULAR) == ("faça-me",)

    def test_contracted_pair(self, auxiliaries):
        table = request("dar", EP, pronoun1="lhe", pronoun2="o", auxiliaries=auxiliaries)
        assert table.cell(Tense.PRESENT_INDICATIVE, 0) == ("dou-lho",)

    def test_reflexive(self, auxiliaries):
        table = request("lavar", EP, pronoun1="se", auxiliaries=auxiliaries)
        assert [cell[0] for cell in table[Tense.PRESENT_INDICATIVE]] == [
            "lavo-me", "lavas-te", "lava-se", "lavamo-nos", "lavais-vos", "lavam-se",
        ]
        assert table.cell(Tense.GERUND) == ("lavando-se",)

    def test_progressive_reflexive(self, auxiliaries):
        table = request("lavar", BP, Mood.PROGRESSIVE, "se", auxiliaries=auxiliaries)
        assert table.cell(Tense.PRESENT_INDICATIVE, 0) == ("estou me lavando",)
        assert table.cell(Tense.PRESENT_INDICATIVE, 2) == ("está se lavando",)

    def test_progressive_compound_brazil(self, auxiliaries):
        table = request("falar", BP, Mood.PROGRESSIVE, "te", auxiliaries=auxiliaries)
        assert table.cell(Tense.COMPOUND_PRESENT_INDICATIVE, 0) == ("tenho estado te falando", "hei estado te falando")
        assert table.cell(Tense.COMPOUND_IMPERSONAL_INFINITIVE) == ("ter estado te falando", "haver estado te falando")

    def test_progressive_europe(self, auxiliaries):
        table = request("fazer", EP, Mood.PROGRESSIVE, "o", auxiliaries=auxiliaries)
        assert table.cell(Tense.PRESENT_INDICATIVE, 0) == ("estou a fazê-lo",)
        assert table.cell(Tense.PRESENT_SUBJUNCTIVE, 0) == ("o esteja a fazer",)

    def test_passive(self, auxiliaries):
        europe = request("dar", EP, Mood.PASSIVE, "lhe", auxiliaries=auxiliaries)
        brazil = request("dar", BP, Mood.PASSIVE, "lhe", auxiliaries=auxiliaries)
        assert europe.cell(Tense.PRESENT_INDICATIVE, 0) == ("sou-lhe dado",)
        assert brazil.cell(Tense.PRESENT_INDICATIVE, 0) == ("lhe sou dado",)

    def test_defective_cells_stay_absent(self, auxiliaries):
        table = request("trovejar", EP, pronoun1="te", auxiliaries=auxiliaries)
        assert table.cell(Tense.PRESENT_INDICATIVE, 0) is None
        assert table.cell(Tense.PRESENT_INDICATIVE, 2) == ("troveja-te",)

    def test_render(self, auxiliaries):
        rendered = request("aceitar", EP, auxiliaries=auxiliaries).render([Tense.PAST_PARTICIPLE])
        assert rendered == {"past_participle": ["aceitado/aceite"]}
