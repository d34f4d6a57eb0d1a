"""
Tests for compound tenses, progressive and passive forms, and the
auxiliary tables they are built on.
"""

import pytest

from conjugador.auxiliary import AuxiliaryTables, build_auxiliary_tables
from conjugador.exceptions import AuxiliaryTablesMissingError
from conjugador.grammar import Tense, Variant
from conjugador.periphrasis import (
    compound_row,
    passive_row,
    progressive_row,
    progressive_tail,
    require,
)

BP = Variant.BP_POST_REFORM
EP = Variant.EP_POST_REFORM


class TestAuxiliaryTables:
    """ter/haver hold simple tenses, estar/ser hold all 25."""

    def test_singleton(self, auxiliaries):
        assert AuxiliaryTables.get_instance() is auxiliaries
        assert build_auxiliary_tables() is auxiliaries

    def test_ter_and_haver_are_simple_only(self, auxiliaries):
        assert auxiliaries.ter.has(Tense.PAST_PARTICIPLE)
        assert not auxiliaries.ter.has(Tense.COMPOUND_PRESENT_INDICATIVE)
        with pytest.raises(AuxiliaryTablesMissingError):
            auxiliaries.form("haver", Tense.COMPOUND_PRESENT_INDICATIVE, BP, 0)

    def test_estar_and_ser_are_complete(self, auxiliaries):
        assert auxiliaries.estar.tenses == list(Tense)
        assert auxiliaries.ser.tenses == list(Tense)

    def test_form(self, auxiliaries):
        assert auxiliaries.form("haver", Tense.PRESENT_INDICATIVE, BP, 3) == ("havemos", "hemos")
        assert auxiliaries.form("ser", Tense.GERUND, BP) == ("sendo",)

    def test_unknown_auxiliary(self, auxiliaries):
        with pytest.raises(ValueError, match="Unhandled auxiliary verb"):
            auxiliaries.table("ir")

    def test_partial_tables_lack_estar(self, auxiliaries):
        partial = AuxiliaryTables(ter=auxiliaries.ter, haver=auxiliaries.haver)
        with pytest.raises(AuxiliaryTablesMissingError):
            partial.form("estar", Tense.PRESENT_INDICATIVE, BP, 0)


class TestRequire:
    """Periphrastic rows need auxiliary tables."""

    def test_missing(self):
        with pytest.raises(AuxiliaryTablesMissingError):
            require(None, "compound tenses")

    def test_missing_is_runtime_error(self):
        with pytest.raises(RuntimeError):
            compound_row(Tense.COMPOUND_PRESENT_INDICATIVE, BP, ("falado",), None)

    def test_present(self, auxiliaries):
        assert require(auxiliaries, "compound tenses") is auxiliaries


class TestCompoundRow:
    """ter forms, then haver forms, each followed by the participle."""

    def test_present(self, auxiliaries):
        row = compound_row(Tense.COMPOUND_PRESENT_INDICATIVE, BP, ("falado",), auxiliaries)
        assert row[0] == ("tenho falado", "hei falado")
        assert row[3] == ("temos falado", "havemos falado", "hemos falado")

    def test_uses_first_participle(self, auxiliaries):
        row = compound_row(Tense.COMPOUND_PRESENT_INDICATIVE, EP, ("aceitado", "aceite"), auxiliaries)
        assert row[2] == ("tem aceitado", "há aceitado")

    def test_future(self, auxiliaries):
        row = compound_row(Tense.COMPOUND_FUTURE_INDICATIVE, BP, ("falado",), auxiliaries)
        assert row[0] == ("terei falado", "haverei falado")

    def test_impersonal(self, auxiliaries):
        row = compound_row(Tense.COMPOUND_IMPERSONAL_INFINITIVE, BP, ("falado",), auxiliaries)
        assert row == [("ter falado", "haver falado")]

    def test_simple_tense_rejected(self, auxiliaries):
        with pytest.raises(ValueError):
            compound_row(Tense.PRESENT_INDICATIVE, BP, ("falado",), auxiliaries)


class TestProgressiveRow:
    """estar + gerund in Brazil, estar a + infinitive in Portugal."""

    def test_tail(self):
        assert progressive_tail(BP, "falando", "falar") == "falando"
        assert progressive_tail(EP, "falando", "falar") == "a falar"

    def test_brazil(self, auxiliaries):
        row = progressive_row(Tense.PRESENT_INDICATIVE, BP, "falando", "falar", auxiliaries)
        assert row[0] == ("estou falando",)
        assert row[5] == ("estão falando",)

    def test_europe(self, auxiliaries):
        row = progressive_row(Tense.PRESENT_INDICATIVE, EP, "falando", "falar", auxiliaries)
        assert row[0] == ("estou a falar",)

    def test_gerund_has_no_progressive(self, auxiliaries):
        assert progressive_row(Tense.GERUND, BP, "falando", "falar", auxiliaries) == [None]

    def test_compound(self, auxiliaries):
        row = progressive_row(Tense.COMPOUND_PRESENT_INDICATIVE, BP, "falando", "falar", auxiliaries)
        assert row[0] == ("tenho estado falando", "hei estado falando")


class TestPassiveRow:
    """ser + participle agreeing in number."""

    def test_present(self, auxiliaries):
        row = passive_row(Tense.PRESENT_INDICATIVE, BP, ("amado",), auxiliaries)
        assert row[0] == ("sou amado",)
        assert row[3] == ("somos amados",)
        assert row[5] == ("são amados",)

    def test_impersonal_stays_singular(self, auxiliaries):
        assert passive_row(Tense.GERUND, BP, ("amado",), auxiliaries) == [("sendo amado",)]
        assert passive_row(Tense.PAST_PARTICIPLE, BP, ("amado",), auxiliaries) == [("sido amado",)]
