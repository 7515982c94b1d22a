import pytest
from svinfer.breakpoint import Locus
from svinfer.complication import (
    InterChromosomeComplications,
    IntraChrStrandSwitchComplications,
    SimpleInsDelOrReplacementComplications,
    SmallDuplicationWithImpreciseDupRangeComplications,
    SmallDuplicationWithPreciseDupRangeComplications,
)


class TestSimpleComplications:
    def test_defaults(self):
        comp = SimpleInsDelOrReplacementComplications()
        assert comp.homology == ''
        assert comp.inserted_sequence == ''
        assert not comp.has_duplication_annotation()

    def test_none_sequences(self):
        comp = SimpleInsDelOrReplacementComplications(homology=None, inserted_sequence=None)
        assert comp.inserted_sequence == ''

    def test___eq__(self):
        assert SimpleInsDelOrReplacementComplications('AC', 'GG') == (
            SimpleInsDelOrReplacementComplications('AC', 'GG')
        )
        assert SimpleInsDelOrReplacementComplications('AC', 'GG') != (
            SimpleInsDelOrReplacementComplications('AC', 'GT')
        )

    def test_kinds_are_not_equal(self):
        assert SimpleInsDelOrReplacementComplications() != InterChromosomeComplications()
        assert SimpleInsDelOrReplacementComplications() != None  # noqa: E711

    def test___hash__(self):
        temp = {
            SimpleInsDelOrReplacementComplications('A', ''),
            SimpleInsDelOrReplacementComplications('A', ''),
            InterChromosomeComplications('A', ''),
        }
        assert len(temp) == 2

    def test_to_dict(self):
        row = InterChromosomeComplications('A', 'TT').to_dict()
        assert row == {
            'type': 'InterChromosomeComplications',
            'homology': 'A',
            'inserted_sequence': 'TT',
        }


class TestSmallDuplicationComplications:
    def test_precise(self):
        comp = SmallDuplicationWithPreciseDupRangeComplications(Locus('chr1', 101, 140), 1, 3)
        assert comp.has_duplication_annotation()
        assert not comp.imprecise
        assert not comp.is_dup_contraction()
        assert len(comp.dup_repeat_unit_ref_span) == 40

    def test_contraction(self):
        comp = SmallDuplicationWithPreciseDupRangeComplications(Locus('chr1', 101, 110), 3, 2)
        assert comp.is_dup_contraction()

    def test_imprecise(self):
        comp = SmallDuplicationWithImpreciseDupRangeComplications(
            Locus('chr1', 101, 110), 2, 4, Locus('chr1', 101, 130)
        )
        assert comp.imprecise
        assert comp.has_duplication_annotation()
        assert comp.imprecise_dup_affected_ref_range == Locus('chr1', 101, 130)

    def test_negative_counts_error(self):
        with pytest.raises(ValueError):
            SmallDuplicationWithPreciseDupRangeComplications(Locus('chr1', 101, 110), -1, 2)
        with pytest.raises(ValueError):
            SmallDuplicationWithPreciseDupRangeComplications(Locus('chr1', 101, 110), 1, -2)

    def test_missing_span_error(self):
        with pytest.raises(ValueError):
            SmallDuplicationWithPreciseDupRangeComplications(None, 1, 2)
        with pytest.raises(ValueError):
            SmallDuplicationWithImpreciseDupRangeComplications(Locus('chr1', 1, 10), 1, 2, None)

    def test___eq__includes_counts(self):
        span = Locus('chr1', 101, 110)
        assert SmallDuplicationWithPreciseDupRangeComplications(span, 1, 2) == (
            SmallDuplicationWithPreciseDupRangeComplications(span, 1, 2)
        )
        assert SmallDuplicationWithPreciseDupRangeComplications(span, 1, 2) != (
            SmallDuplicationWithPreciseDupRangeComplications(span, 1, 3)
        )

    def test_to_dict(self):
        row = SmallDuplicationWithPreciseDupRangeComplications(
            Locus('chr1', 101, 110), 1, 2, inserted_sequence='A'
        ).to_dict()
        assert row['dup_repeat_unit_ref_span'] == 'chr1:101-110'
        assert row['dup_repeat_num_on_ctg'] == 2
        assert row['imprecise'] is False


class TestIntraChrStrandSwitchComplications:
    def test_no_duplication(self):
        comp = IntraChrStrandSwitchComplications(homology='AC')
        assert not comp.has_duplication_annotation()
        assert comp.dup_repeat_unit_ref_span is None

    def test_inverted_duplication(self):
        comp = IntraChrStrandSwitchComplications(
            dup_repeat_unit_ref_span=Locus('chr1', 500, 619),
            dup_repeat_num_on_ref=1,
            dup_repeat_num_on_ctg=2,
        )
        assert comp.has_duplication_annotation()

    def test_counts_without_span_error(self):
        with pytest.raises(ValueError):
            IntraChrStrandSwitchComplications(dup_repeat_num_on_ctg=2)

    def test_to_dict(self):
        row = IntraChrStrandSwitchComplications(
            inverted_transposition_ref_span=Locus('chr1', 10, 20)
        ).to_dict()
        assert row['dup_repeat_unit_ref_span'] is None
        assert row['inverted_transposition_ref_span'] == 'chr1:10-20'
