"""
holds the structural variant calls produced by classifying a novel adjacency, and the routine
which lays out a pair of mated breakends
"""
import weakref
from typing import TYPE_CHECKING, Dict, NamedTuple, Optional

from .breakpoint import Locus, compare_loci
from .constants import BND_LAYOUT, SIMPLE_CHIMERA_TYPE, STRAND_SWITCH, SVTYPE, reverse_complement
from .types import ReferenceGenome

if TYPE_CHECKING:
    from .adjacency import NovelAdjacency


class SvCall:
    """
    a structural variant call. The call only refers back to the novel adjacency it was
    derived from (weakly), it does not own it

    Attributes:
        svtype: the kind of call
        length: the signed length of the call in reference base pairs
    """

    svtype: SVTYPE

    def __init__(self, novel_adjacency: 'NovelAdjacency', length: int):
        self._novel_adjacency = weakref.ref(novel_adjacency)
        self.length = int(length)
        self.chr = novel_adjacency.left_locus.chr
        self.start = novel_adjacency.left_locus.end
        self.end = novel_adjacency.right_locus.start

    @property
    def novel_adjacency(self) -> Optional['NovelAdjacency']:
        """the originating novel adjacency, None if it no longer exists"""
        return self._novel_adjacency()

    @property
    def id(self) -> str:
        return '{}_{}_{}_{}'.format(self.svtype.value, self.chr, self.start, self.end)

    @property
    def key(self):
        return (self.svtype, self.id, self.length)

    def __eq__(self, other):
        if not isinstance(other, SvCall):
            return False
        return self.key == other.key

    def __hash__(self):
        return hash(self.key)

    def __repr__(self):
        return '{}({}, length={})'.format(self.__class__.__name__, self.id, self.length)

    def to_dict(self) -> Dict:
        return {
            'id': self.id,
            'svtype': self.svtype.value,
            'chr': self.chr,
            'start': self.start,
            'end': self.end,
            'length': self.length,
        }


class Deletion(SvCall):
    svtype = SVTYPE.DEL


class Insertion(SvCall):
    svtype = SVTYPE.INS


class DuplicationTandem(SvCall):
    svtype = SVTYPE.DUP_TANDEM


class DuplicationInverted(SvCall):
    svtype = SVTYPE.DUP_INV


class Breakend(SvCall):
    """
    one side of a novel adjacency, reported together with its mate

    Attributes:
        chr: contig of the breakend
        start: position of the breakend
        ref_base: reference base at the position
        mate: the locus (contig, position) of the mate
        bracket_points_left: the mate bracket is ``]`` when True and ``[`` otherwise
        bases_first: the reference base precedes the bracketed mate position in the allele
        inserted_sequence: untemplated bases between the breakend and its mate
        mate_id: id of the mated breakend
    """

    svtype = SVTYPE.BND

    def __init__(
        self,
        novel_adjacency: 'NovelAdjacency',
        locus: Locus,
        ref_base: str,
        mate: Locus,
        bracket_points_left: bool,
        bases_first: bool,
        inserted_sequence: str,
        mate_number: int,
    ):
        SvCall.__init__(self, novel_adjacency, 0)
        self.chr = locus.chr
        self.start = locus.start
        self.end = locus.start
        self.ref_base = ref_base
        self.mate = mate
        self.bracket_points_left = bracket_points_left
        self.bases_first = bases_first
        self.inserted_sequence = inserted_sequence
        self.mate_number = mate_number

    def _base_id(self):
        first, second = (self, self.mate) if self.mate_number == 1 else (self.mate, self)
        return '{}_{}_{}_{}_{}'.format(
            self.svtype.value, first.chr, first.start, second.chr, second.start
        )

    @property
    def id(self) -> str:
        return '{}_{}'.format(self._base_id(), self.mate_number)

    @property
    def mate_id(self) -> str:
        return '{}_{}'.format(self._base_id(), 3 - self.mate_number)

    @property
    def alt_allele(self) -> str:
        """
        the breakend allele in VCF notation, one of ``t[p[``, ``t]p]``, ``]p]t`` and ``[p[t``
        """
        bracket = ']' if self.bracket_points_left else '['
        mate = '{0}{1}:{2}{0}'.format(bracket, self.mate.chr, self.mate.start)
        if self.bases_first:
            return self.ref_base + self.inserted_sequence + mate
        return mate + self.inserted_sequence + self.ref_base

    @property
    def key(self):
        return SvCall.key.fget(self) + (self.alt_allele, self.mate_id)

    def __repr__(self):
        return 'Breakend({}, {})'.format(self.id, self.alt_allele)

    def to_dict(self) -> Dict:
        row = SvCall.to_dict(self)
        row.update({'ref': self.ref_base, 'alt': self.alt_allele, 'mate_id': self.mate_id})
        return row


class BreakendPair(NamedTuple):
    first: Breakend
    second: Breakend


def _reference_base(reference: ReferenceGenome, chrom: str, pos: int) -> str:
    if chrom not in reference:
        raise KeyError('contig is missing from the reference', chrom)
    seq = reference[chrom].seq
    if pos < 1 or pos > len(seq):
        raise IndexError('position is outside the reference contig', chrom, pos)
    return str(seq[pos - 1]).upper()


def _junction_geometry(novel_adjacency: 'NovelAdjacency', layout: BND_LAYOUT):
    """
    (bracket_points_left, bases_first) for the mate at the left locus and the mate at the
    right locus
    """
    if layout == BND_LAYOUT.INTRA_CHR_STRAND_SWITCH_55:
        return (True, True), (True, True)
    elif layout == BND_LAYOUT.INTRA_CHR_STRAND_SWITCH_33:
        return (False, False), (False, False)
    elif layout == BND_LAYOUT.INTRA_CHR_REF_ORDER_SWAP:
        return (True, False), (False, True)
    # inter-chromosome: geometry follows the strand switch and the mate order in the partner
    if novel_adjacency.strand_switch == STRAND_SWITCH.FORWARD_TO_REVERSE:
        return (True, True), (True, True)
    elif novel_adjacency.strand_switch == STRAND_SWITCH.REVERSE_TO_FORWARD:
        return (False, False), (False, False)
    if novel_adjacency.type == SIMPLE_CHIMERA_TYPE.INTER_CHR_NO_SS_WITH_LEFT_MATE_FIRST_IN_PARTNER:
        return (False, True), (True, False)
    return (True, False), (False, True)


def pair_breakends(
    novel_adjacency: 'NovelAdjacency', reference: ReferenceGenome, layout: BND_LAYOUT
) -> BreakendPair:
    """
    lay out the two mated breakends of a novel adjacency

    The mate at the lesser reference locus (contigs ordered as in the reference) is reported
    first. A breakend whose reference base precedes its mate in the allele sits at the end
    of its locus, otherwise at the start. On strand switch junctions the mate at the right
    locus carries the reverse complement of the inserted sequence, whatever the output order

    Args:
        novel_adjacency: the novel adjacency to report as breakends
        reference: the reference sequences keyed by contig name, in reference dictionary order
        layout: the junction geometry

    Returns:
        the first and second mates

    Raises:
        KeyError: a contig of the novel adjacency is missing from the reference
    """
    geometry = _junction_geometry(novel_adjacency, layout)
    loci = [novel_adjacency.left_locus, novel_adjacency.right_locus]
    positions = []
    for locus, (_, bases_first) in zip(loci, geometry):
        positions.append(Locus(locus.chr, locus.end if bases_first else locus.start))

    order = [0, 1]
    if compare_loci(loci[0], loci[1], list(reference.keys())) > 0:
        order = [1, 0]

    inserted = novel_adjacency.complications.inserted_sequence
    strand_switched = novel_adjacency.strand_switch != STRAND_SWITCH.NO_SWITCH

    mates = []
    for mate_number, index in enumerate(order, start=1):
        bracket_points_left, bases_first = geometry[index]
        position = positions[index]
        mates.append(
            Breakend(
                novel_adjacency,
                position,
                _reference_base(reference, position.chr, position.start),
                positions[1 - index],
                bracket_points_left,
                bases_first,
                reverse_complement(inserted)
                if strand_switched and index == 1
                else inserted,
                mate_number,
            )
        )
    return BreakendPair(*mates)
