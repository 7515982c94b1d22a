"""
binary checkpoint format for novel adjacency records

The layout is fixed and carries no version field: a checkpoint is only ever read back by the
same version of the package that wrote it. All integers are 4-byte signed big-endian and
strings/byte blocks are prefixed with their length

1. left locus: contig, start, end
2. right locus: contig, start, end
3. strand switch ordinal
4. breakpoint complications (length prefixed block, see :mod:`svinfer.complication`)
5. type ordinal
6. alt haplotype presence flag (1 byte), then the length and raw bytes when present
"""
import io
import struct
from typing import BinaryIO, Iterable, Iterator, Optional, Union

from .adjacency import NovelAdjacency
from .breakpoint import Locus
from .complication import read_complications, write_complications
from .constants import SIMPLE_CHIMERA_TYPE, STRAND_SWITCH, from_ordinal, ordinal

INT = struct.Struct('>i')
BOOL = struct.Struct('>?')


class ByteWriter:
    def __init__(self, fh: Optional[BinaryIO] = None):
        self.fh = fh if fh is not None else io.BytesIO()

    def getvalue(self) -> bytes:
        return self.fh.getvalue()

    def write_int(self, value: int) -> None:
        try:
            self.fh.write(INT.pack(value))
        except struct.error as err:
            raise ValueError(f'cannot encode ({value}) as a 4-byte signed integer') from err

    def write_bool(self, value: bool) -> None:
        self.fh.write(BOOL.pack(bool(value)))

    def write_bytes(self, value: bytes) -> None:
        self.write_int(len(value))
        self.fh.write(value)

    def write_string(self, value: str) -> None:
        self.write_bytes(value.encode('utf8'))

    def write_locus(self, locus: Locus) -> None:
        self.write_string(locus.chr)
        self.write_int(locus.start)
        self.write_int(locus.end)

    def write_optional_locus(self, locus: Optional[Locus]) -> None:
        self.write_bool(locus is not None)
        if locus is not None:
            self.write_locus(locus)


class ByteReader:
    def __init__(self, source: Union[bytes, BinaryIO]):
        if isinstance(source, (bytes, bytearray, memoryview)):
            source = io.BytesIO(bytes(source))
        self.fh = source

    def _read(self, size: int) -> bytes:
        chunk = self.fh.read(size)
        if len(chunk) != size:
            raise ValueError(f'truncated input: expected {size} bytes but found {len(chunk)}')
        return chunk

    def at_end(self) -> bool:
        position = self.fh.tell()
        if self.fh.read(1):
            self.fh.seek(position)
            return False
        return True

    def read_int(self) -> int:
        return INT.unpack(self._read(INT.size))[0]

    def read_bool(self) -> bool:
        flag = self._read(BOOL.size)
        if flag not in (b'\x00', b'\x01'):
            raise ValueError(f'invalid boolean flag ({flag!r})')
        return flag == b'\x01'

    def read_bytes(self) -> bytes:
        size = self.read_int()
        if size < 0:
            raise ValueError(f'invalid length prefix ({size})')
        return self._read(size)

    def read_string(self) -> str:
        return self.read_bytes().decode('utf8')

    def read_locus(self) -> Locus:
        chrom = self.read_string()
        start = self.read_int()
        end = self.read_int()
        try:
            return Locus(chrom, start, end)
        except AttributeError as err:
            raise ValueError(f'invalid locus ({chrom}:{start}-{end})') from err

    def read_optional_locus(self) -> Optional[Locus]:
        if self.read_bool():
            return self.read_locus()
        return None


def write_novel_adjacency(writer: ByteWriter, record: NovelAdjacency) -> None:
    writer.write_locus(record.left_locus)
    writer.write_locus(record.right_locus)
    writer.write_int(ordinal(record.strand_switch))
    write_complications(writer, record.complications)
    writer.write_int(ordinal(record.type))
    writer.write_bool(record.alt_haplotype_sequence is not None)
    if record.alt_haplotype_sequence is not None:
        writer.write_bytes(record.alt_haplotype_sequence)


def read_novel_adjacency(reader: ByteReader) -> NovelAdjacency:
    left_locus = reader.read_locus()
    right_locus = reader.read_locus()
    strand_switch = from_ordinal(STRAND_SWITCH, reader.read_int())
    complications = read_complications(reader)
    event_type = from_ordinal(SIMPLE_CHIMERA_TYPE, reader.read_int())
    alt_haplotype_sequence = None
    if reader.read_bool():
        alt_haplotype_sequence = reader.read_bytes()
    return NovelAdjacency(
        left_locus,
        right_locus,
        strand_switch,
        complications,
        event_type,
        alt_haplotype_sequence,
    )


def encode(record: NovelAdjacency) -> bytes:
    """
    Example:
        >>> decode(encode(record)) == record
        True
    """
    writer = ByteWriter()
    write_novel_adjacency(writer, record)
    return writer.getvalue()


def decode(data: bytes) -> NovelAdjacency:
    """
    Raises:
        ValueError: the data is truncated, corrupt or has trailing bytes
    """
    reader = ByteReader(data)
    record = read_novel_adjacency(reader)
    if not reader.at_end():
        raise ValueError('unexpected trailing bytes after the novel adjacency record')
    return record


def dump(records: Iterable[NovelAdjacency], fh: BinaryIO) -> int:
    """
    write records back to back to a binary file handle

    Returns:
        the number of records written
    """
    writer = ByteWriter(fh)
    count = 0
    for record in records:
        write_novel_adjacency(writer, record)
        count += 1
    return count


def load(fh: BinaryIO) -> Iterator[NovelAdjacency]:
    """
    read back the records written by :func:`dump`
    """
    reader = ByteReader(fh)
    while not reader.at_end():
        yield read_novel_adjacency(reader)
