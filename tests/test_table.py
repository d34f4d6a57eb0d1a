"""
Tests for cells and conjugation tables.
"""

import pytest

from conjugador.grammar import Tense, Variant
from conjugador.table import (
    LITERAL_SEPARATOR,
    ConjugationTable,
    VariantTable,
    cell_of,
    first_form,
    join_forms,
    map_cell,
    split_forms,
)


class TestCells:
    """Cells are tuples of alternatives, or None when absent."""

    def test_cell_of_drops_duplicates(self):
        assert cell_of("a", "b", "a") == ("a", "b")

    def test_empty_cell_is_absent(self):
        assert cell_of() is None

    def test_join_and_split(self):
        assert join_forms(("aceitado", "aceite")) == "aceitado/aceite"
        assert split_forms("aceitado/aceite") == ("aceitado", "aceite")

    def test_split_literal_drops_duplicates(self):
        assert split_forms("inquo/ínquo/inquo", LITERAL_SEPARATOR) == ("inquo", "ínquo")

    @pytest.mark.parametrize("text", [None, ""])
    def test_split_absent(self, text):
        assert split_forms(text) is None

    def test_map_cell(self):
        assert map_cell(("a", "b"), str.upper) == ("A", "B")
        assert map_cell(None, str.upper) is None

    def test_first_form(self):
        assert first_form(("a", "b")) == "a"
        assert first_form(None) is None


class TestConjugationTable:
    """Rows are stored per tense and variant."""

    def test_rejects_wrong_row_size(self):
        table = ConjugationTable()
        with pytest.raises(ValueError, match="expects 1 cells"):
            table.set_row(Tense.GERUND, Variant.BP_POST_REFORM, [("a",), ("b",)])

    def test_impersonal_cell_ignores_person(self):
        table = ConjugationTable()
        table.set_row(Tense.GERUND, Variant.BP_POST_REFORM, [("falando",)])
        assert table.cell(Tense.GERUND, Variant.BP_POST_REFORM, 4) == ("falando",)

    def test_tenses_sorted_in_build_order(self):
        table = ConjugationTable()
        table.set_row(Tense.GERUND, Variant.BP_POST_REFORM, [("falando",)])
        table.set_row(Tense.PRESENT_INDICATIVE, Variant.BP_POST_REFORM, [None] * 6)
        assert table.tenses == [Tense.PRESENT_INDICATIVE, Tense.GERUND]

    def test_render(self):
        table = ConjugationTable()
        for variant in Variant:
            table.set_row(Tense.PAST_PARTICIPLE, variant, [("aceitado", variant.value)])
        assert table.render(Variant.EP_PRE_REFORM) == {"past_participle": ["aceitado/ep_pre_reform"]}


class TestVariantTable:
    def test_render_subset(self):
        table = VariantTable(Variant.BP_POST_REFORM, {
            Tense.PRESENT_INDICATIVE: [("falo",), None, None, None, None, None],
            Tense.GERUND: [("falando",)],
        })
        assert table.render([Tense.GERUND]) == {"gerund": ["falando"]}
        assert table.render()["present_indicative"][1] is None
        assert Tense.GERUND in table
        assert list(table) == [Tense.PRESENT_INDICATIVE, Tense.GERUND]
