from unittest.mock import Mock

import pytest
from svinfer.adjacency import NovelAdjacency
from svinfer.breakpoint import Locus
from svinfer.complication import (
    SimpleInsDelOrReplacementComplications,
    SmallDuplicationWithPreciseDupRangeComplications,
)
from svinfer.constants import SIMPLE_CHIMERA_TYPE, STRAND_SWITCH
from svinfer.error import BreakpointInferenceError

from .mock import make_adjacency


class TestNovelAdjacency:
    def test_fields(self):
        narl = make_adjacency(alt_haplotype_sequence=bytearray(b'ACGT'))
        assert narl.left_locus == Locus('chr1', 100, 200)
        assert narl.right_locus == Locus('chr1', 250, 300)
        assert narl.strand_switch == STRAND_SWITCH.NO_SWITCH
        assert narl.type == SIMPLE_CHIMERA_TYPE.SIMPLE_DEL
        assert narl.alt_haplotype_sequence == b'ACGT'
        assert isinstance(narl.alt_haplotype_sequence, bytes)

    def test_read_only(self):
        narl = make_adjacency()
        with pytest.raises(AttributeError):
            narl.left_locus = Locus('chr1', 1)

    def test_has_inserted_sequence(self):
        assert not make_adjacency().has_inserted_sequence()
        narl = make_adjacency(
            complications=SimpleInsDelOrReplacementComplications(inserted_sequence='TTAG')
        )
        assert narl.has_inserted_sequence()

    def test_has_duplication_annotation(self):
        assert not make_adjacency().has_duplication_annotation()
        narl = make_adjacency(
            complications=SmallDuplicationWithPreciseDupRangeComplications(
                Locus('chr1', 201, 240), 1, 2
            ),
            type=SIMPLE_CHIMERA_TYPE.SMALL_DUP_EXPANSION,
        )
        assert narl.has_duplication_annotation()

    def test_distance_between_breakpoints(self):
        assert make_adjacency().distance_between_breakpoints() == 200

    def test_distance_between_breakpoints_interchromosomal(self):
        narl = make_adjacency(
            left=('chr1', 100, 200),
            right=('chr2', 10, 20),
            type=SIMPLE_CHIMERA_TYPE.INTER_CHR_NO_SS_WITH_LEFT_MATE_FIRST_IN_PARTNER,
        )
        assert narl.distance_between_breakpoints() == -1
        narl = make_adjacency(
            left=('chr1', 5000, 9000),
            right=('chr2', 1, 1),
            type=SIMPLE_CHIMERA_TYPE.INTER_CHR_NO_SS_WITH_LEFT_MATE_FIRST_IN_PARTNER,
        )
        assert narl.distance_between_breakpoints() == -1

    def test___str__(self):
        assert str(make_adjacency()).startswith('chr1:100-200\tchr1:250-300\tNO_SWITCH\t')


class TestNovelAdjacencyEquality:
    def test___eq__(self):
        first = make_adjacency(alt_haplotype_sequence=b'ACGTACGT')
        second = make_adjacency(alt_haplotype_sequence=b'ACGTACGT')
        assert first is not second
        assert first == second
        assert hash(first) == hash(second)

    def test___eq__without_sequence(self):
        assert make_adjacency() == make_adjacency()
        assert hash(make_adjacency()) == hash(make_adjacency())

    def test___ne__single_byte(self):
        assert make_adjacency(alt_haplotype_sequence=b'ACGTACGT') != make_adjacency(
            alt_haplotype_sequence=b'ACGTACGA'
        )

    def test___ne__sequence_presence(self):
        assert make_adjacency(alt_haplotype_sequence=b'') != make_adjacency()

    @pytest.mark.parametrize(
        'kwargs',
        [
            {'left': ('chr1', 100, 201)},
            {'right': ('chr1', 251, 300)},
            {'strand_switch': STRAND_SWITCH.FORWARD_TO_REVERSE},
            {'complications': SimpleInsDelOrReplacementComplications(homology='A')},
            {'type': SIMPLE_CHIMERA_TYPE.DEL_DUP_CONTRACTION},
        ],
    )
    def test___ne__single_field(self, kwargs):
        assert make_adjacency() != make_adjacency(**kwargs)

    def test___ne__other_types(self):
        assert make_adjacency() != None  # noqa: E711
        assert make_adjacency() != 'chr1:100-200'

    def test___hash__(self):
        temp = {make_adjacency(), make_adjacency(), make_adjacency(alt_haplotype_sequence=b'A')}
        assert len(temp) == 2


class TestFromSimpleChimera:
    def chimera(self):
        chimera = Mock(strand_switch=STRAND_SWITCH.NO_SWITCH)
        chimera.infer_type.return_value = SIMPLE_CHIMERA_TYPE.SIMPLE_DEL
        chimera.__str__ = Mock(return_value='contig_1\tchr1:100-200\tchr1:250-300')
        return chimera

    def test_from_simple_chimera(self):
        chimera = self.chimera()
        inferred = Mock()
        inferred.left_justified_breakpoints.return_value = (
            Locus('chr1', 100, 200),
            Locus('chr1', 250, 300),
        )
        inferred.complications.return_value = SimpleInsDelOrReplacementComplications()
        inferred.inferred_alt_haplotype_sequence.return_value = None
        factory = Mock(return_value=inferred)
        reference_dictionary = {'chr1': 1000}

        narl = NovelAdjacency.from_simple_chimera(
            chimera, b'ACGT', reference_dictionary, factory
        )
        factory.assert_called_once_with(chimera, b'ACGT', reference_dictionary)
        chimera.infer_type.assert_called_once_with(reference_dictionary)
        assert narl == make_adjacency()

    def test_inference_error(self):
        chimera = self.chimera()
        cause = ValueError('left breakpoint after right breakpoint')
        factory = Mock(side_effect=cause)

        with pytest.raises(BreakpointInferenceError) as err:
            NovelAdjacency.from_simple_chimera(chimera, b'ACGT', {'chr1': 1000}, factory)
        assert err.value.__cause__ is cause
        assert 'contig_1\tchr1:100-200\tchr1:250-300' in str(err.value)
        assert err.value.chimera_description == 'contig_1\tchr1:100-200\tchr1:250-300'

    def test_inconsistent_breakpoints_error(self):
        chimera = self.chimera()
        inferred = Mock()
        inferred.left_justified_breakpoints.side_effect = lambda: (
            Locus('chr1', 300, 250),
            Locus('chr1', 400, 500),
        )
        with pytest.raises(BreakpointInferenceError) as err:
            NovelAdjacency.from_simple_chimera(
                chimera, b'ACGT', {'chr1': 1000}, Mock(return_value=inferred)
            )
        assert isinstance(err.value.__cause__, AttributeError)
        assert err.value.chimera_description == 'contig_1\tchr1:100-200\tchr1:250-300'

    def test_type_inference_error(self):
        chimera = self.chimera()
        chimera.infer_type.side_effect = ValueError('cannot infer type')
        inferred = Mock()
        inferred.left_justified_breakpoints.return_value = (
            Locus('chr1', 100, 200),
            Locus('chr1', 250, 300),
        )
        with pytest.raises(BreakpointInferenceError):
            NovelAdjacency.from_simple_chimera(
                chimera, b'ACGT', {'chr1': 1000}, Mock(return_value=inferred)
            )

    def test_other_errors_propagate(self):
        chimera = self.chimera()
        factory = Mock(side_effect=KeyError('chr1'))
        with pytest.raises(KeyError):
            NovelAdjacency.from_simple_chimera(chimera, b'ACGT', {'chr1': 1000}, factory)
