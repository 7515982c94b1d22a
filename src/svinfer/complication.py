"""
holds the breakpoint complication classes: annotations describing the ambiguity (homology,
inserted sequence, duplicated repeat units) in pinning a novel adjacency down to base pair
resolution

The complications are produced by the breakpoint justification step and are treated as
immutable once built. Every kind knows how to write itself to, and read itself from, the
binary checkpoint format (see :mod:`svinfer.codec`)
"""
from typing import TYPE_CHECKING, Dict, Optional, Type

from .breakpoint import Locus

if TYPE_CHECKING:
    from .codec import ByteReader, ByteWriter


class BreakpointComplications:
    """
    complications common to every kind of novel adjacency

    Attributes:
        homology: sequence shared by both sides of the junction (forward strand)
        inserted_sequence: untemplated sequence inserted at the junction (forward strand)
    """

    KIND: int = -1

    def __init__(self, homology: str = '', inserted_sequence: str = ''):
        self._homology = homology or ''
        self._inserted_sequence = inserted_sequence or ''

    @property
    def homology(self) -> str:
        return self._homology

    @property
    def inserted_sequence(self) -> str:
        return self._inserted_sequence

    def has_duplication_annotation(self) -> bool:
        return False

    @property
    def key(self):
        return (self.__class__.__name__, self.homology, self.inserted_sequence)

    def __eq__(self, other):
        if not isinstance(other, BreakpointComplications):
            return False
        return self.key == other.key

    def __hash__(self):
        return hash(self.key)

    def __repr__(self):
        return '{}(homology={!r}, inserted_sequence={!r})'.format(
            self.__class__.__name__, self.homology, self.inserted_sequence
        )

    def to_dict(self) -> Dict:
        return {
            'type': self.__class__.__name__,
            'homology': self.homology,
            'inserted_sequence': self.inserted_sequence,
        }

    def write(self, writer: 'ByteWriter') -> None:
        writer.write_string(self.homology)
        writer.write_string(self.inserted_sequence)

    @classmethod
    def read(cls, reader: 'ByteReader') -> 'BreakpointComplications':
        homology = reader.read_string()
        inserted_sequence = reader.read_string()
        return cls(homology=homology, inserted_sequence=inserted_sequence)


class SimpleInsDelOrReplacementComplications(BreakpointComplications):
    """complications for simple insertions, deletions and replacements"""

    KIND = 0


class InterChromosomeComplications(BreakpointComplications):
    """complications for novel adjacencies between two different contigs"""

    KIND = 4


def _check_duplication_annotation(span, repeat_num_on_ref, repeat_num_on_ctg):
    if not isinstance(span, Locus):
        raise ValueError('duplication annotation requires a repeat unit reference span', span)
    if repeat_num_on_ref < 0 or repeat_num_on_ctg < 0:
        raise ValueError(
            'duplicated repeat counts must be non-negative', repeat_num_on_ref, repeat_num_on_ctg
        )


class SmallDuplicationComplications(BreakpointComplications):
    """
    complications for a small tandem duplication: a repeat unit on the reference appears a
    different number of times on the evidence contig

    Attributes:
        dup_repeat_unit_ref_span: the reference span of a single repeat unit
        dup_repeat_num_on_ref: number of copies of the unit on the reference
        dup_repeat_num_on_ctg: number of copies of the unit on the evidence contig
    """

    imprecise: bool = False

    def __init__(
        self,
        dup_repeat_unit_ref_span: Locus,
        dup_repeat_num_on_ref: int,
        dup_repeat_num_on_ctg: int,
        homology: str = '',
        inserted_sequence: str = '',
    ):
        BreakpointComplications.__init__(self, homology, inserted_sequence)
        _check_duplication_annotation(
            dup_repeat_unit_ref_span, dup_repeat_num_on_ref, dup_repeat_num_on_ctg
        )
        self._dup_repeat_unit_ref_span = dup_repeat_unit_ref_span
        self._dup_repeat_num_on_ref = int(dup_repeat_num_on_ref)
        self._dup_repeat_num_on_ctg = int(dup_repeat_num_on_ctg)

    @property
    def dup_repeat_unit_ref_span(self) -> Locus:
        return self._dup_repeat_unit_ref_span

    @property
    def dup_repeat_num_on_ref(self) -> int:
        return self._dup_repeat_num_on_ref

    @property
    def dup_repeat_num_on_ctg(self) -> int:
        return self._dup_repeat_num_on_ctg

    def has_duplication_annotation(self) -> bool:
        return True

    def is_dup_contraction(self) -> bool:
        """True when the contig carries fewer copies of the repeat unit than the reference"""
        return self.dup_repeat_num_on_ref > self.dup_repeat_num_on_ctg

    @property
    def key(self):
        return BreakpointComplications.key.fget(self) + (
            self.dup_repeat_unit_ref_span,
            self.dup_repeat_num_on_ref,
            self.dup_repeat_num_on_ctg,
        )

    def __repr__(self):
        return '{}(span={}, ref={}, ctg={}, homology={!r}, inserted_sequence={!r})'.format(
            self.__class__.__name__,
            self.dup_repeat_unit_ref_span,
            self.dup_repeat_num_on_ref,
            self.dup_repeat_num_on_ctg,
            self.homology,
            self.inserted_sequence,
        )

    def to_dict(self) -> Dict:
        row = BreakpointComplications.to_dict(self)
        row.update(
            {
                'dup_repeat_unit_ref_span': str(self.dup_repeat_unit_ref_span),
                'dup_repeat_num_on_ref': self.dup_repeat_num_on_ref,
                'dup_repeat_num_on_ctg': self.dup_repeat_num_on_ctg,
                'imprecise': self.imprecise,
            }
        )
        return row

    def write(self, writer: 'ByteWriter') -> None:
        BreakpointComplications.write(self, writer)
        writer.write_locus(self.dup_repeat_unit_ref_span)
        writer.write_int(self.dup_repeat_num_on_ref)
        writer.write_int(self.dup_repeat_num_on_ctg)

    @classmethod
    def read(cls, reader: 'ByteReader') -> 'SmallDuplicationComplications':
        homology = reader.read_string()
        inserted_sequence = reader.read_string()
        span = reader.read_locus()
        on_ref = reader.read_int()
        on_ctg = reader.read_int()
        return cls(span, on_ref, on_ctg, homology=homology, inserted_sequence=inserted_sequence)


class SmallDuplicationWithPreciseDupRangeComplications(SmallDuplicationComplications):
    """the duplicated range is known exactly"""

    KIND = 1
    imprecise = False


class SmallDuplicationWithImpreciseDupRangeComplications(SmallDuplicationComplications):
    """
    the duplicated range could not be resolved exactly, typically because the repeat
    units on the contig are not identical copies of the reference unit

    Attributes:
        imprecise_dup_affected_ref_range: the reference range affected by the duplication
    """

    KIND = 2
    imprecise = True

    def __init__(
        self,
        dup_repeat_unit_ref_span: Locus,
        dup_repeat_num_on_ref: int,
        dup_repeat_num_on_ctg: int,
        imprecise_dup_affected_ref_range: Locus,
        homology: str = '',
        inserted_sequence: str = '',
    ):
        SmallDuplicationComplications.__init__(
            self,
            dup_repeat_unit_ref_span,
            dup_repeat_num_on_ref,
            dup_repeat_num_on_ctg,
            homology=homology,
            inserted_sequence=inserted_sequence,
        )
        if not isinstance(imprecise_dup_affected_ref_range, Locus):
            raise ValueError(
                'imprecise duplication requires the affected reference range',
                imprecise_dup_affected_ref_range,
            )
        self._imprecise_dup_affected_ref_range = imprecise_dup_affected_ref_range

    @property
    def imprecise_dup_affected_ref_range(self) -> Locus:
        return self._imprecise_dup_affected_ref_range

    @property
    def key(self):
        return SmallDuplicationComplications.key.fget(self) + (
            self.imprecise_dup_affected_ref_range,
        )

    def to_dict(self) -> Dict:
        row = SmallDuplicationComplications.to_dict(self)
        row['imprecise_dup_affected_ref_range'] = str(self.imprecise_dup_affected_ref_range)
        return row

    def write(self, writer: 'ByteWriter') -> None:
        SmallDuplicationComplications.write(self, writer)
        writer.write_locus(self.imprecise_dup_affected_ref_range)

    @classmethod
    def read(cls, reader: 'ByteReader') -> 'SmallDuplicationWithImpreciseDupRangeComplications':
        homology = reader.read_string()
        inserted_sequence = reader.read_string()
        span = reader.read_locus()
        on_ref = reader.read_int()
        on_ctg = reader.read_int()
        affected = reader.read_locus()
        return cls(
            span, on_ref, on_ctg, affected, homology=homology, inserted_sequence=inserted_sequence
        )


class IntraChrStrandSwitchComplications(BreakpointComplications):
    """
    complications for a strand switch on a single contig (inversion breakpoints). When the
    junction is explained by an inverted duplication the duplicated repeat unit is annotated

    Attributes:
        dup_repeat_unit_ref_span: reference span of the inverted duplicated unit, if any
        dup_repeat_num_on_ref: copies of the unit on the reference
        dup_repeat_num_on_ctg: copies of the unit on the evidence contig
        inverted_transposition_ref_span: reference span of an inverted transposition, if any
    """

    KIND = 3

    def __init__(
        self,
        homology: str = '',
        inserted_sequence: str = '',
        dup_repeat_unit_ref_span: Optional[Locus] = None,
        dup_repeat_num_on_ref: int = 0,
        dup_repeat_num_on_ctg: int = 0,
        inverted_transposition_ref_span: Optional[Locus] = None,
    ):
        BreakpointComplications.__init__(self, homology, inserted_sequence)
        if dup_repeat_unit_ref_span is not None:
            _check_duplication_annotation(
                dup_repeat_unit_ref_span, dup_repeat_num_on_ref, dup_repeat_num_on_ctg
            )
        elif dup_repeat_num_on_ref or dup_repeat_num_on_ctg:
            raise ValueError('duplicated repeat counts given without a repeat unit span')
        self._dup_repeat_unit_ref_span = dup_repeat_unit_ref_span
        self._dup_repeat_num_on_ref = int(dup_repeat_num_on_ref)
        self._dup_repeat_num_on_ctg = int(dup_repeat_num_on_ctg)
        self._inverted_transposition_ref_span = inverted_transposition_ref_span

    @property
    def dup_repeat_unit_ref_span(self) -> Optional[Locus]:
        return self._dup_repeat_unit_ref_span

    @property
    def dup_repeat_num_on_ref(self) -> int:
        return self._dup_repeat_num_on_ref

    @property
    def dup_repeat_num_on_ctg(self) -> int:
        return self._dup_repeat_num_on_ctg

    @property
    def inverted_transposition_ref_span(self) -> Optional[Locus]:
        return self._inverted_transposition_ref_span

    def has_duplication_annotation(self) -> bool:
        return self.dup_repeat_unit_ref_span is not None

    @property
    def key(self):
        return BreakpointComplications.key.fget(self) + (
            self.dup_repeat_unit_ref_span,
            self.dup_repeat_num_on_ref,
            self.dup_repeat_num_on_ctg,
            self.inverted_transposition_ref_span,
        )

    def to_dict(self) -> Dict:
        row = BreakpointComplications.to_dict(self)
        for attr in ['dup_repeat_unit_ref_span', 'inverted_transposition_ref_span']:
            value = getattr(self, attr)
            row[attr] = str(value) if value is not None else None
        row['dup_repeat_num_on_ref'] = self.dup_repeat_num_on_ref
        row['dup_repeat_num_on_ctg'] = self.dup_repeat_num_on_ctg
        return row

    def write(self, writer: 'ByteWriter') -> None:
        BreakpointComplications.write(self, writer)
        writer.write_optional_locus(self.dup_repeat_unit_ref_span)
        writer.write_int(self.dup_repeat_num_on_ref)
        writer.write_int(self.dup_repeat_num_on_ctg)
        writer.write_optional_locus(self.inverted_transposition_ref_span)

    @classmethod
    def read(cls, reader: 'ByteReader') -> 'IntraChrStrandSwitchComplications':
        homology = reader.read_string()
        inserted_sequence = reader.read_string()
        span = reader.read_optional_locus()
        on_ref = reader.read_int()
        on_ctg = reader.read_int()
        transposition = reader.read_optional_locus()
        return cls(
            homology=homology,
            inserted_sequence=inserted_sequence,
            dup_repeat_unit_ref_span=span,
            dup_repeat_num_on_ref=on_ref,
            dup_repeat_num_on_ctg=on_ctg,
            inverted_transposition_ref_span=transposition,
        )


COMPLICATION_KINDS: Dict[int, Type[BreakpointComplications]] = {
    kind.KIND: kind
    for kind in [
        SimpleInsDelOrReplacementComplications,
        SmallDuplicationWithPreciseDupRangeComplications,
        SmallDuplicationWithImpreciseDupRangeComplications,
        IntraChrStrandSwitchComplications,
        InterChromosomeComplications,
    ]
}


def write_complications(writer: 'ByteWriter', complications: BreakpointComplications) -> None:
    """
    write the complications as a length prefixed block: the kind tag followed by the fields
    of the kind
    """
    if COMPLICATION_KINDS.get(complications.KIND) is not complications.__class__:
        raise TypeError('unsupported complications kind', complications.__class__.__name__)
    block = writer.__class__()
    block.write_int(complications.KIND)
    complications.write(block)
    writer.write_bytes(block.getvalue())


def read_complications(reader: 'ByteReader') -> BreakpointComplications:
    """
    Raises:
        ValueError: the block is truncated, has trailing bytes or an unknown kind tag
    """
    block = reader.__class__(reader.read_bytes())
    kind = block.read_int()
    if kind not in COMPLICATION_KINDS:
        raise ValueError(f'unknown breakpoint complications kind ({kind})')
    complications = COMPLICATION_KINDS[kind].read(block)
    if not block.at_end():
        raise ValueError('unexpected trailing bytes in breakpoint complications block')
    return complications
