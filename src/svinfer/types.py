"""
Helper classes for type hints
"""

from typing import TYPE_CHECKING, Callable, Dict, Optional, Protocol, Tuple

from Bio.SeqRecord import SeqRecord

if TYPE_CHECKING:
    from .breakpoint import Locus
    from .complication import BreakpointComplications
    from .constants import SIMPLE_CHIMERA_TYPE, STRAND_SWITCH

ReferenceGenome = Dict[str, SeqRecord]
ReferenceDictionary = Dict[str, int]


class SimpleChimera(Protocol):
    """a chimeric alignment of a contig made of two alignment blocks"""

    strand_switch: 'STRAND_SWITCH'

    def infer_type(self, reference_dictionary: ReferenceDictionary) -> 'SIMPLE_CHIMERA_TYPE':
        ...


class BreakpointsInference(Protocol):
    """result of the breakpoint justification step for a single simple chimera"""

    def left_justified_breakpoints(self) -> Tuple['Locus', 'Locus']:
        ...

    def complications(self) -> 'BreakpointComplications':
        ...

    def inferred_alt_haplotype_sequence(self) -> Optional[bytes]:
        ...


InferenceFactory = Callable[[SimpleChimera, bytes, ReferenceDictionary], BreakpointsInference]
