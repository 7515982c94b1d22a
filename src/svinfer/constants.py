"""
module responsible for small utility functions and constants used throughout the svinfer package
"""
import re
from enum import Enum
from typing import List

from Bio.Seq import reverse_complement as _reverse_complement

NO_DISTANCE: int = -1
"""distance between breakpoints that lie on different contigs"""


def reverse_complement(s: str) -> str:
    """
    wrapper for the Bio.Seq reverse_complement function

    Args:
        s: the input DNA sequence

    Returns:
        str: the reverse complement of the input sequence

    Warning:
        assumes the input is a DNA sequence

    Example:
        >>> reverse_complement('ATCCGGT')
        'ACCGGAT'
    """
    input_string = str(s)
    if not re.match('^[A-Za-z]*$', input_string):
        raise ValueError('unexpected sequence format. cannot reverse complement', input_string)
    return str(_reverse_complement(input_string))


class STRAND_SWITCH(Enum):
    """
    relative orientation of the two alignments flanking a novel adjacency

    Attributes:
        NO_SWITCH: both alignments are on the same strand
        FORWARD_TO_REVERSE: the first alignment is forward, the second reverse (5'-5' junction)
        REVERSE_TO_FORWARD: the first alignment is reverse, the second forward (3'-3' junction)

    Note:
        the declaration order is the wire ordinal and must not change
    """

    NO_SWITCH = 'no switch'
    FORWARD_TO_REVERSE = 'forward to reverse'
    REVERSE_TO_FORWARD = 'reverse to forward'


class SIMPLE_CHIMERA_TYPE(Enum):
    """
    coarse event type inferred from the mate ordering and contig identity of a simple chimera

    Note:
        the declaration order is the wire ordinal and must not change
    """

    SIMPLE_DEL = 'simple deletion'
    RPL = 'replacement'
    SIMPLE_INS = 'simple insertion'
    DEL_DUP_CONTRACTION = 'deletion from duplication contraction'
    SMALL_DUP_EXPANSION = 'small duplication expansion'
    SMALL_DUP_CPX = 'complex small duplication'
    INTRA_CHR_STRAND_SWITCH_55 = 'intra-chromosome strand switch 55'
    INTRA_CHR_STRAND_SWITCH_33 = 'intra-chromosome strand switch 33'
    INTRA_CHR_REF_ORDER_SWAP = 'intra-chromosome reference order swap'
    INTER_CHR_STRAND_SWITCH_55 = 'inter-chromosome strand switch 55'
    INTER_CHR_STRAND_SWITCH_33 = 'inter-chromosome strand switch 33'
    INTER_CHR_NO_SS_WITH_LEFT_MATE_FIRST_IN_PARTNER = 'inter-chromosome left mate first'
    INTER_CHR_NO_SS_WITH_LEFT_MATE_SECOND_IN_PARTNER = 'inter-chromosome left mate second'

    @classmethod
    def inter_chromosomal(cls) -> List['SIMPLE_CHIMERA_TYPE']:
        return [
            cls.INTER_CHR_STRAND_SWITCH_55,
            cls.INTER_CHR_STRAND_SWITCH_33,
            cls.INTER_CHR_NO_SS_WITH_LEFT_MATE_FIRST_IN_PARTNER,
            cls.INTER_CHR_NO_SS_WITH_LEFT_MATE_SECOND_IN_PARTNER,
        ]


class SVTYPE(Enum):
    """
    holds controlled vocabulary for the structural variant calls produced by the classifier
    """

    DEL = 'DEL'
    INS = 'INS'
    DUP_TANDEM = 'DUP:TANDEM'
    DUP_INV = 'DUP:INV'
    BND = 'BND'


class BND_LAYOUT(Enum):
    """
    the junction geometry used to lay out a pair of mated breakends

    Attributes:
        INTER_CHR: breakends on different contigs
        INTRA_CHR_REF_ORDER_SWAP: same contig, the contig visits the downstream locus first
        INTRA_CHR_STRAND_SWITCH_55: same contig, forward-to-reverse junction
        INTRA_CHR_STRAND_SWITCH_33: same contig, reverse-to-forward junction
    """

    INTER_CHR = 'inter-chromosome'
    INTRA_CHR_REF_ORDER_SWAP = 'intra-chromosome reference order swap'
    INTRA_CHR_STRAND_SWITCH_55 = 'intra-chromosome strand switch 55'
    INTRA_CHR_STRAND_SWITCH_33 = 'intra-chromosome strand switch 33'


def ordinal(member: Enum) -> int:
    """
    position of an enum member in its declaration order

    Example:
        >>> ordinal(STRAND_SWITCH.FORWARD_TO_REVERSE)
        1
    """
    return list(member.__class__).index(member)


def from_ordinal(enum_type, index: int):
    """
    inverse of ordinal

    Raises:
        ValueError: the index is not a valid ordinal for the enum
    """
    members = list(enum_type)
    if index < 0 or index >= len(members):
        raise ValueError(f'invalid ordinal ({index}) for {enum_type.__name__}')
    return members[index]
