"""
Tests for clitic pronoun placement.
"""

import pytest

from conjugador.exceptions import InvalidRequestError
from conjugador.grammar import Mood, Tense, Variant
from conjugador.pronouns import (
    Placement,
    apply_pronoun,
    contract_pronouns,
    enclitic,
    mesoclitic,
    passive_placement,
    place,
    progressive_placement,
    pronouns_for,
    regular_placement,
    validate_pronouns,
)
from conjugador.table import ConjugationTable

BP = Variant.BP_POST_REFORM
EP = Variant.EP_POST_REFORM


# =============================================================================
# Contraction
# =============================================================================


class TestContractPronouns:
    """Indirect + direct object pairs fuse into one clitic."""

    @pytest.mark.parametrize("indirect,direct,expected", [
        ("me", "o", "mo"),
        ("te", "a", "ta"),
        ("lhe", "os", "lhos"),
        ("lhes", "as", "lhas"),
        ("nos", "o", "no-lo"),
        ("vos", "as", "vo-las"),
    ])
    def test_contractions(self, indirect, direct, expected):
        assert contract_pronouns(indirect, direct) == expected

    def test_uncovered_pair_is_hyphenated(self):
        assert contract_pronouns("me", "te") == "me-te"

    def test_single_pronoun(self):
        assert contract_pronouns("lhe") == "lhe"


class TestPronounsFor:
    def test_reflexive_varies_by_person(self):
        assert pronouns_for("se") == ("me", "te", "se", "nos", "vos", "se")

    def test_other_pronouns_repeat(self):
        assert pronouns_for("lhe") == ("lhe",) * 6


# =============================================================================
# Single forms
# =============================================================================


class TestEnclitic:
    """Pronouns after the verb, with the final syllable adjusted."""

    @pytest.mark.parametrize("form,pronoun,expected", [
        ("falar", "o", "falá-lo"),
        ("faz", "o", "fá-lo"),
        ("fazer", "a", "fazê-la"),
        ("fazes", "o", "faze-lo"),
        ("partir", "os", "parti-los"),
        ("atrair", "o", "atraí-lo"),
        ("seguir", "o", "segui-lo"),
        ("pôr", "o", "pô-lo"),
        ("falamos", "o", "falamo-lo"),
        ("conduz", "o", "condu-lo"),
        ("dão", "o", "dão-no"),
        ("põe", "a", "põe-na"),
        ("tens", "o", "tem-lo"),
        ("falam", "as", "falam-nas"),
    ])
    def test_third_person_direct(self, form, pronoun, expected):
        assert enclitic(form, pronoun) == expected

    def test_mos_drops_s_before_nos(self):
        assert enclitic("falamos", "nos") == "falamo-nos"
        assert enclitic("demos", "no-lo") == "demo-no-lo"

    @pytest.mark.parametrize("form,pronoun,expected", [
        ("diga", "me", "diga-me"),
        ("falo", "lhe", "falo-lhe"),
        ("falar", "te", "falar-te"),
        ("falam", "se", "falam-se"),
    ])
    def test_plain_hyphen(self, form, pronoun, expected):
        assert enclitic(form, pronoun) == expected


class TestMesoclitic:
    """Pronouns inside future and conditional forms."""

    @pytest.mark.parametrize("form,pronoun,offset,infinitive,expected", [
        ("falarei", "te", 2, "falar", "falar-te-ei"),
        ("falará", "me", 1, "falar", "falar-me-á"),
        ("dirá", "o", 1, "dizer", "di-lo-á"),
        ("faríamos", "as", 5, "fazer", "fá-las-íamos"),
        ("venderei", "o", 2, "vender", "vendê-lo-ei"),
        ("partirá", "o", 1, "partir", "parti-lo-á"),
        ("atrairei", "o", 2, "atrair", "atraí-lo-ei"),
        ("seguirei", "a", 2, "seguir", "segui-la-ei"),
        ("porei", "a", 2, "pôr", "pô-la-ei"),
        ("falarei", "lho", 2, "falar", "falar-lho-ei"),
    ])
    def test_mesoclisis(self, form, pronoun, offset, infinitive, expected):
        assert mesoclitic(form, pronoun, offset, infinitive) == expected


class TestPlace:
    """Placement of one pronoun in one written form."""

    def test_unchanged(self):
        assert place("falado", "o", Placement.UNCHANGED, Tense.PAST_PARTICIPLE, 0, "falar") == "falado"

    def test_proclisis(self):
        assert place("tenha falado", "me", Placement.PROCLISIS, Tense.COMPOUND_PRESENT_SUBJUNCTIVE, 0, "falar") \
            == "me tenha falado"

    def test_mesoclisis_on_auxiliary(self):
        assert place("terei falado", "te", Placement.MESOCLISIS, Tense.COMPOUND_FUTURE_INDICATIVE, 0, "falar") \
            == "ter-te-ei falado"

    def test_conditional_offsets(self):
        assert place("falarias", "te", Placement.MESOCLISIS, Tense.CONDITIONAL, 1, "falar") == "falar-te-ias"

    def test_enclisis_on_auxiliary(self):
        assert place("tenho falado", "o", Placement.ENCLISIS, Tense.COMPOUND_PRESENT_INDICATIVE, 0, "falar") \
            == "tenho-o falado"

    def test_interposed(self):
        assert place("estou falando", "te", Placement.INTERPOSED, Tense.PRESENT_INDICATIVE, 0, "falar") \
            == "estou te falando"

    def test_interposed_simple_form_is_enclitic(self):
        assert place("falar", "o", Placement.INTERPOSED, Tense.IMPERSONAL_INFINITIVE, 0, "falar") == "falá-lo"

    def test_before_last_word(self):
        assert place("tenho estado falando", "te", Placement.BEFORE_LAST, Tense.COMPOUND_PRESENT_INDICATIVE, 0, "falar") \
            == "tenho estado te falando"

    def test_before_last_simple_form_is_enclitic(self):
        assert place("falar", "o", Placement.BEFORE_LAST, Tense.IMPERSONAL_INFINITIVE, 0, "falar") == "falá-lo"

    def test_trailing(self):
        assert place("estou a fazer", "o", Placement.TRAILING, Tense.PRESENT_INDICATIVE, 0, "fazer") \
            == "estou a fazê-lo"


# =============================================================================
# Policies
# =============================================================================


class TestRegularPlacement:
    """Active voice placement by tense and variant."""

    @pytest.mark.parametrize("tense,variant,pronoun,expected", [
        (Tense.PAST_PARTICIPLE, EP, "o", Placement.UNCHANGED),
        (Tense.GERUND, BP, "o", Placement.INTERPOSED),
        (Tense.GERUND, EP, "o", Placement.ENCLISIS),
        (Tense.IMPERATIVE_AFFIRMATIVE, BP, "me", Placement.ENCLISIS),
        (Tense.COMPOUND_PRESENT_SUBJUNCTIVE, EP, "me", Placement.PROCLISIS),
        (Tense.FUTURE_INDICATIVE, BP, "te", Placement.MESOCLISIS),
        (Tense.COMPOUND_CONDITIONAL, EP, "te", Placement.MESOCLISIS),
        (Tense.PRESENT_INDICATIVE, BP, "te", Placement.PROCLISIS),
        (Tense.PRESENT_SUBJUNCTIVE, EP, "te", Placement.PROCLISIS),
        (Tense.IMPERATIVE_NEGATIVE, EP, "te", Placement.PROCLISIS),
        (Tense.COMPOUND_PRESENT_INDICATIVE, BP, "o", Placement.INTERPOSED),
        (Tense.COMPOUND_PRESENT_INDICATIVE, BP, "te", Placement.ENCLISIS),
        (Tense.PRESENT_INDICATIVE, EP, "te", Placement.ENCLISIS),
        (Tense.COMPOUND_PRESENT_INDICATIVE, EP, "o", Placement.ENCLISIS),
    ])
    def test_policy(self, tense, variant, pronoun, expected):
        assert regular_placement(tense, variant, pronoun) == expected


class TestProgressivePlacement:
    @pytest.mark.parametrize("tense,variant,expected", [
        (Tense.PRESENT_SUBJUNCTIVE, BP, Placement.PROCLISIS),
        (Tense.IMPERATIVE_NEGATIVE, EP, Placement.PROCLISIS),
        (Tense.PRESENT_INDICATIVE, BP, Placement.BEFORE_LAST),
        (Tense.COMPOUND_PRESENT_INDICATIVE, BP, Placement.BEFORE_LAST),
        (Tense.PRESENT_INDICATIVE, EP, Placement.TRAILING),
        (Tense.IMPERSONAL_INFINITIVE, EP, Placement.TRAILING),
    ])
    def test_policy(self, tense, variant, expected):
        assert progressive_placement(tense, variant, "o") == expected


class TestPassivePlacement:
    @pytest.mark.parametrize("tense,variant,expected", [
        (Tense.PRESENT_SUBJUNCTIVE, EP, Placement.PROCLISIS),
        (Tense.COMPOUND_PRESENT_INDICATIVE, BP, Placement.INTERPOSED),
        (Tense.COMPOUND_PRESENT_INDICATIVE, EP, Placement.ENCLISIS),
        (Tense.GERUND, BP, Placement.INTERPOSED),
        (Tense.PRESENT_INDICATIVE, BP, Placement.PROCLISIS),
        (Tense.PRESENT_INDICATIVE, EP, Placement.ENCLISIS),
    ])
    def test_policy(self, tense, variant, expected):
        assert passive_placement(tense, variant, "lhe") == expected


# =============================================================================
# Validation and tables
# =============================================================================


class TestValidatePronouns:
    """Accepted single pronouns and pairs."""

    @pytest.mark.parametrize("pronoun1,pronoun2,mood", [
        (None, None, Mood.REGULAR),
        ("o", None, Mood.REGULAR),
        ("lhes", None, Mood.PROGRESSIVE),
        ("se", None, Mood.REGULAR),
        ("lhe", "o", Mood.REGULAR),
        ("me", "te", Mood.REGULAR),
        ("lhe", None, Mood.PASSIVE),
    ])
    def test_valid(self, pronoun1, pronoun2, mood):
        validate_pronouns(pronoun1, pronoun2, mood)

    @pytest.mark.parametrize("pronoun1,pronoun2,mood", [
        ("ele", None, Mood.REGULAR),
        ("o", "me", Mood.REGULAR),
        ("me", "lhe", Mood.REGULAR),
        (None, "o", Mood.REGULAR),
        ("o", None, Mood.PASSIVE),
        ("se", None, Mood.PASSIVE),
        ("lhe", "o", Mood.PASSIVE),
    ])
    def test_invalid(self, pronoun1, pronoun2, mood):
        with pytest.raises(InvalidRequestError):
            validate_pronouns(pronoun1, pronoun2, mood)


class TestApplyPronoun:
    """Pronouns are placed in every alternative of every cell."""

    @staticmethod
    def table() -> ConjugationTable:
        table = ConjugationTable()
        for variant in Variant:
            table.set_row(Tense.PRESENT_INDICATIVE, variant, [
                ("lavo",), ("lavas",), ("lava",), ("lavamos",), ("lavais",), None,
            ])
            table.set_row(Tense.GERUND, variant, [("lavando",)])
            table.set_row(Tense.COMPOUND_PRESENT_INDICATIVE, variant, [
                ("tenho lavado", "hei lavado"), None, None, None, None, None,
            ])
        return table

    def test_reflexive_europe(self):
        result = apply_pronoun(self.table(), "se", Mood.REGULAR, "lavar")
        assert result.row(Tense.PRESENT_INDICATIVE, EP) == [
            ("lavo-me",), ("lavas-te",), ("lava-se",), ("lavamo-nos",), ("lavais-vos",), None,
        ]
        assert result.cell(Tense.GERUND, EP) == ("lavando-se",)

    def test_reflexive_brazil(self):
        result = apply_pronoun(self.table(), "se", Mood.REGULAR, "lavar")
        assert result.row(Tense.PRESENT_INDICATIVE, BP)[:3] == [("me lavo",), ("te lavas",), ("se lava",)]

    def test_alternatives_transformed_independently(self):
        result = apply_pronoun(self.table(), "o", Mood.REGULAR, "lavar")
        assert result.cell(Tense.COMPOUND_PRESENT_INDICATIVE, EP) == ("tenho-o lavado", "hei-o lavado")

    def test_source_table_untouched(self):
        table = self.table()
        apply_pronoun(table, "o", Mood.REGULAR, "lavar")
        assert table.cell(Tense.GERUND, EP) == ("lavando",)

    def test_unknown_mood(self):
        with pytest.raises(InvalidRequestError):
            apply_pronoun(self.table(), "o", "imperative", "lavar")
