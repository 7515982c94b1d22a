import pytest
from svinfer.constants import (
    SIMPLE_CHIMERA_TYPE,
    STRAND_SWITCH,
    SVTYPE,
    from_ordinal,
    ordinal,
    reverse_complement,
)


class TestReverseComplement:
    def test_reverse_complement(self):
        assert reverse_complement('ATCCGGT') == 'ACCGGAT'
        assert reverse_complement('') == ''

    def test_bad_input(self):
        with pytest.raises(ValueError):
            reverse_complement('ACG T')


class TestOrdinal:
    def test_ordinal(self):
        assert ordinal(STRAND_SWITCH.NO_SWITCH) == 0
        assert ordinal(STRAND_SWITCH.REVERSE_TO_FORWARD) == 2
        assert ordinal(SIMPLE_CHIMERA_TYPE.SIMPLE_DEL) == 0
        assert ordinal(SIMPLE_CHIMERA_TYPE.INTER_CHR_NO_SS_WITH_LEFT_MATE_SECOND_IN_PARTNER) == 12

    def test_from_ordinal(self):
        assert from_ordinal(SIMPLE_CHIMERA_TYPE, 1) == SIMPLE_CHIMERA_TYPE.RPL
        for member in STRAND_SWITCH:
            assert from_ordinal(STRAND_SWITCH, ordinal(member)) == member

    def test_from_ordinal_error(self):
        with pytest.raises(ValueError):
            from_ordinal(STRAND_SWITCH, 3)
        with pytest.raises(ValueError):
            from_ordinal(STRAND_SWITCH, -1)


class TestSvType:
    def test_values(self):
        assert SVTYPE.DUP_TANDEM.value == 'DUP:TANDEM'
        assert SVTYPE.DUP_INV.value == 'DUP:INV'

    def test_inter_chromosomal(self):
        assert len(SIMPLE_CHIMERA_TYPE.inter_chromosomal()) == 4
        assert SIMPLE_CHIMERA_TYPE.INTRA_CHR_REF_ORDER_SWAP not in SIMPLE_CHIMERA_TYPE.inter_chromosomal()
