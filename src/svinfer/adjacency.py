"""
holds the novel adjacency record: a pair of left-justified reference locations made newly
adjacent by a simple rearrangement, together with the complications in pinning the
locations down and the alt haplotype sequence that spans the junction

It represents a bi-path bubble between two reference locations. One path is the reference
path (the contiguous block of bases between the locations, when they lie on the same
contig); the other is encoded by the alt haplotype sequence
"""
from typing import TYPE_CHECKING, List, Optional

from .breakpoint import Locus
from .complication import BreakpointComplications
from .constants import NO_DISTANCE, SIMPLE_CHIMERA_TYPE, STRAND_SWITCH
from .error import BreakpointInferenceError
from .types import InferenceFactory, ReferenceDictionary, ReferenceGenome, SimpleChimera
from .util import logger

if TYPE_CHECKING:
    from .variant import SvCall


class NovelAdjacency:
    """
    Attributes:
        left_locus: the left-justified left reference location
        right_locus: the left-justified right reference location
        strand_switch: relative orientation of the flanking alignments
        complications: ambiguity annotations for the breakpoints
        type: the coarse event type inferred from the chimeric alignment
        alt_haplotype_sequence: the alt haplotype bytes, if they could be assembled
    """

    def __init__(
        self,
        left_locus: Locus,
        right_locus: Locus,
        strand_switch: STRAND_SWITCH,
        complications: BreakpointComplications,
        type: SIMPLE_CHIMERA_TYPE,
        alt_haplotype_sequence: Optional[bytes] = None,
    ):
        """
        Args:
            left_locus: the left-justified left reference location
            right_locus: the left-justified right reference location
            strand_switch: relative orientation of the flanking alignments
            complications: ambiguity annotations for the breakpoints
            type: the coarse event type
            alt_haplotype_sequence: the alt haplotype sequence, if any

        Example:
            >>> NovelAdjacency(
            ...     Locus('chr1', 100, 200), Locus('chr1', 250, 300), STRAND_SWITCH.NO_SWITCH,
            ...     SimpleInsDelOrReplacementComplications(), SIMPLE_CHIMERA_TYPE.SIMPLE_DEL)
        """
        self._left_locus = left_locus
        self._right_locus = right_locus
        self._strand_switch = strand_switch
        self._complications = complications
        self._type = type
        self._alt_haplotype_sequence = (
            bytes(alt_haplotype_sequence) if alt_haplotype_sequence is not None else None
        )

    @classmethod
    def from_simple_chimera(
        cls,
        chimera: SimpleChimera,
        contig_sequence: bytes,
        reference_dictionary: ReferenceDictionary,
        inference_factory: InferenceFactory,
    ) -> 'NovelAdjacency':
        """
        infer the novel adjacency suggested by a simple chimera

        Args:
            chimera: the chimeric alignment of the contig
            contig_sequence: the bases of the evidence contig
            reference_dictionary: contig lengths keyed by contig name
            inference_factory: the breakpoint justification step

        Raises:
            BreakpointInferenceError: the breakpoints could not be inferred from the evidence
        """
        try:
            inferred = inference_factory(chimera, contig_sequence, reference_dictionary)
            left_locus, right_locus = inferred.left_justified_breakpoints()
            complications = inferred.complications()
            event_type = chimera.infer_type(reference_dictionary)
            alt_haplotype_sequence = inferred.inferred_alt_haplotype_sequence()
        except (ValueError, AttributeError) as err:
            description = str(chimera)
            logger.debug(f'breakpoint inference failed: {err}')
            raise BreakpointInferenceError(
                'Erred when inferring breakpoint location and event type from chimeric alignment:\n'
                + description,
                chimera_description=description,
            ) from err
        return cls(
            left_locus,
            right_locus,
            chimera.strand_switch,
            complications,
            event_type,
            alt_haplotype_sequence,
        )

    @property
    def left_locus(self) -> Locus:
        return self._left_locus

    @property
    def right_locus(self) -> Locus:
        return self._right_locus

    @property
    def strand_switch(self) -> STRAND_SWITCH:
        return self._strand_switch

    @property
    def complications(self) -> BreakpointComplications:
        return self._complications

    @property
    def type(self) -> SIMPLE_CHIMERA_TYPE:
        return self._type

    @property
    def alt_haplotype_sequence(self) -> Optional[bytes]:
        return self._alt_haplotype_sequence

    @property
    def interchromosomal(self) -> bool:
        """bool: True if the breakpoints are on different contigs, False otherwise"""
        return self.left_locus.chr != self.right_locus.chr

    def has_inserted_sequence(self) -> bool:
        return self.complications.inserted_sequence != ''

    def has_duplication_annotation(self) -> bool:
        return self.complications.has_duplication_annotation()

    def distance_between_breakpoints(self) -> int:
        """
        the reference distance spanned by the novel adjacency, -1 for adjacencies between
        different contigs
        """
        if self.interchromosomal:
            return NO_DISTANCE
        return self.right_locus.end - self.left_locus.start

    def length_for_dup_tandem(self) -> int:
        from .classify import duplication_length

        return duplication_length(self)

    def to_simple_or_bnd_types(self, reference: ReferenceGenome, **kwargs) -> List['SvCall']:
        """
        classify the novel adjacency, see :func:`svinfer.classify.classify`
        """
        from .classify import classify

        return classify(self, reference, **kwargs)

    @property
    def key(self):
        return (
            self.left_locus,
            self.right_locus,
            self.strand_switch,
            self.complications,
            self.type,
            self.alt_haplotype_sequence,
        )

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, NovelAdjacency):
            return False
        return self.key == other.key

    def __hash__(self):
        return hash(self.key)

    def __repr__(self):
        return 'NovelAdjacency({}, {}, {}, {})'.format(
            self.left_locus, self.right_locus, self.strand_switch.name, self.type.name
        )

    def __str__(self):
        # intended for debugging and error messages only
        return '{}\t{}\t{}\t{}'.format(
            self.left_locus, self.right_locus, self.strand_switch.name, self.complications
        )
