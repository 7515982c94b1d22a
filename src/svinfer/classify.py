"""
maps a novel adjacency onto concrete structural variant calls

The inferred type of the novel adjacency selects the branch. The result is

1. a single call for simple variants, or
2. a deletion followed by an insertion for a replacement where both the reference and the
   alt path are at least the minimum reportable size, or
3. a pair of mated breakends
"""
from typing import Callable, Dict, List

from .adjacency import NovelAdjacency
from .complication import (
    IntraChrStrandSwitchComplications,
    SmallDuplicationComplications,
    SmallDuplicationWithImpreciseDupRangeComplications,
    SmallDuplicationWithPreciseDupRangeComplications,
)
from .config import DEFAULTS
from .constants import BND_LAYOUT, SIMPLE_CHIMERA_TYPE, STRAND_SWITCH
from .error import MalformedComplicationsError, UnreachableClassificationError
from .types import ReferenceGenome
from .util import logger
from .variant import (
    Deletion,
    DuplicationInverted,
    DuplicationTandem,
    Insertion,
    SvCall,
    pair_breakends,
)


def _expect_complications(novel_adjacency: NovelAdjacency, expected_type):
    complications = novel_adjacency.complications
    if not isinstance(complications, expected_type):
        raise MalformedComplicationsError(
            'inferred type {} requires {} but was given {}'.format(
                novel_adjacency.type.name,
                expected_type.__name__,
                complications.__class__.__name__,
            )
        )
    return complications


def deleted_length(novel_adjacency: NovelAdjacency) -> int:
    """number of reference bases between the left and right locations"""
    return novel_adjacency.right_locus.start - novel_adjacency.left_locus.end


def duplication_length(novel_adjacency: NovelAdjacency) -> int:
    """
    the length of a duplication expansion: the bases contributed by the extra copies of the
    repeat unit plus any inserted bases

    Note:
        uses the repeat counts exactly as annotated. Deriving the length from the alt haplotype
        (alt haplotype length less the affected reference range) would work better for complex
        expansions but is not done

    Raises:
        MalformedComplicationsError: the complications are not for a small duplication
    """
    dup = _expect_complications(novel_adjacency, SmallDuplicationComplications)
    extra_copies = dup.dup_repeat_num_on_ctg - dup.dup_repeat_num_on_ref
    return len(dup.inserted_sequence) + extra_copies * len(dup.dup_repeat_unit_ref_span)


def _breakends(layout: BND_LAYOUT):
    def _pair(novel_adjacency, reference, min_sv_size):
        return list(pair_breakends(novel_adjacency, reference, layout))

    return _pair


def _strand_switch(novel_adjacency, reference, min_sv_size):
    if novel_adjacency.has_duplication_annotation():
        complications = _expect_complications(novel_adjacency, IntraChrStrandSwitchComplications)
        logger.debug(f'inverted duplication: {novel_adjacency!r}')
        return [DuplicationInverted(novel_adjacency, len(complications.dup_repeat_unit_ref_span))]
    if novel_adjacency.strand_switch == STRAND_SWITCH.FORWARD_TO_REVERSE:
        layout = BND_LAYOUT.INTRA_CHR_STRAND_SWITCH_55
    else:
        layout = BND_LAYOUT.INTRA_CHR_STRAND_SWITCH_33
    return list(pair_breakends(novel_adjacency, reference, layout))


def _deletion(novel_adjacency, reference, min_sv_size):
    return [Deletion(novel_adjacency, deleted_length(novel_adjacency))]


def _replacement(novel_adjacency, reference, min_sv_size):
    deleted = deleted_length(novel_adjacency)
    inserted = len(novel_adjacency.complications.inserted_sequence)
    if deleted < min_sv_size:  # "fat" insertion
        logger.debug(
            f'replacement collapsed to an insertion (deleted={deleted}, inserted={inserted})'
        )
        return [Insertion(novel_adjacency, inserted)]
    calls: List[SvCall] = [Deletion(novel_adjacency, -deleted)]
    if inserted >= min_sv_size:
        calls.append(Insertion(novel_adjacency, inserted))
    return calls


def _insertion(novel_adjacency, reference, min_sv_size):
    return [Insertion(novel_adjacency, len(novel_adjacency.complications.inserted_sequence))]


def _duplication_calls(novel_adjacency, dup, min_sv_size):
    length = duplication_length(novel_adjacency)
    if len(dup.dup_repeat_unit_ref_span) < min_sv_size:
        logger.debug(f'small duplication reported as an insertion (length={length})')
        return [Insertion(novel_adjacency, length)]
    return [DuplicationTandem(novel_adjacency, length)]


def _expansion(novel_adjacency, reference, min_sv_size):
    dup = _expect_complications(
        novel_adjacency, SmallDuplicationWithPreciseDupRangeComplications
    )
    return _duplication_calls(novel_adjacency, dup, min_sv_size)


def _complex_duplication(novel_adjacency, reference, min_sv_size):
    dup = _expect_complications(
        novel_adjacency, SmallDuplicationWithImpreciseDupRangeComplications
    )
    if dup.is_dup_contraction():
        return _deletion(novel_adjacency, reference, min_sv_size)
    return _duplication_calls(novel_adjacency, dup, min_sv_size)


CLASSIFIERS: Dict[SIMPLE_CHIMERA_TYPE, Callable[..., List[SvCall]]] = {
    SIMPLE_CHIMERA_TYPE.INTER_CHR_STRAND_SWITCH_55: _breakends(BND_LAYOUT.INTER_CHR),
    SIMPLE_CHIMERA_TYPE.INTER_CHR_STRAND_SWITCH_33: _breakends(BND_LAYOUT.INTER_CHR),
    SIMPLE_CHIMERA_TYPE.INTER_CHR_NO_SS_WITH_LEFT_MATE_FIRST_IN_PARTNER: _breakends(
        BND_LAYOUT.INTER_CHR
    ),
    SIMPLE_CHIMERA_TYPE.INTER_CHR_NO_SS_WITH_LEFT_MATE_SECOND_IN_PARTNER: _breakends(
        BND_LAYOUT.INTER_CHR
    ),
    SIMPLE_CHIMERA_TYPE.INTRA_CHR_REF_ORDER_SWAP: _breakends(BND_LAYOUT.INTRA_CHR_REF_ORDER_SWAP),
    SIMPLE_CHIMERA_TYPE.INTRA_CHR_STRAND_SWITCH_55: _strand_switch,
    SIMPLE_CHIMERA_TYPE.INTRA_CHR_STRAND_SWITCH_33: _strand_switch,
    SIMPLE_CHIMERA_TYPE.SIMPLE_DEL: _deletion,
    SIMPLE_CHIMERA_TYPE.RPL: _replacement,
    SIMPLE_CHIMERA_TYPE.SIMPLE_INS: _insertion,
    SIMPLE_CHIMERA_TYPE.SMALL_DUP_EXPANSION: _expansion,
    SIMPLE_CHIMERA_TYPE.DEL_DUP_CONTRACTION: _deletion,
    SIMPLE_CHIMERA_TYPE.SMALL_DUP_CPX: _complex_duplication,
}


def classify(
    novel_adjacency: NovelAdjacency,
    reference: ReferenceGenome,
    min_sv_size: int = DEFAULTS['classify.min_sv_size'],
) -> List[SvCall]:
    """
    classify a novel adjacency as one or more structural variant calls

    Args:
        novel_adjacency: the novel adjacency to classify
        reference: the reference sequences keyed by contig name (used for breakends only)
        min_sv_size: the minimum size of a reportable structural variant

    Returns:
        the calls, in order. Mated breakends are (first, second) and replacements are
        (deletion, insertion)

    Raises:
        UnreachableClassificationError: the inferred type is not recognized
        MalformedComplicationsError: the complications do not match the inferred type

    Example:
        >>> classify(NovelAdjacency(
        ...     Locus('chr1', 100, 200), Locus('chr1', 250, 300), STRAND_SWITCH.NO_SWITCH,
        ...     SimpleInsDelOrReplacementComplications(), SIMPLE_CHIMERA_TYPE.SIMPLE_DEL), {})
        [Deletion(DEL_chr1_200_250, length=50)]
    """
    try:
        classifier = CLASSIFIERS[novel_adjacency.type]
    except (KeyError, TypeError):
        raise UnreachableClassificationError(
            'Inferred type not recognized', novel_adjacency.type
        ) from None
    return classifier(novel_adjacency, reference, min_sv_size)
