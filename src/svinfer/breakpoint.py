from typing import Sequence

from .interval import Interval


class Locus(Interval):
    """
    a reference interval on a single contig
    coordinates are given as 1-indexed and inclusive
    """

    chr: str

    @property
    def key(self):
        return (self.chr, self.start, self.end)

    def __init__(self, chr: str, start: int, end=None):
        """
        Args:
            chr: the contig name
            start: the first position of the locus
            end: the last position of the locus, defaults to the start

        Examples:
            >>> Locus('chr1', 100, 200)
            >>> Locus('chr1', 100)
        """
        Interval.__init__(self, start, end)
        if self.start < 1:
            raise AttributeError('locus coordinates are 1-based', self.start)
        self.chr = str(chr)

    def __repr__(self):
        return 'Locus({})'.format(str(self))

    def __str__(self):
        return '{}:{}-{}'.format(self.chr, self.start, self.end)

    def __eq__(self, other):
        if not hasattr(other, 'key'):
            return False
        return self.key == other.key

    def __hash__(self):
        return hash(self.key)

    def __lt__(self, other):
        if self.chr != other.chr:
            raise TypeError('loci on different contigs have no natural order', self, other)
        return Interval.__lt__(self, other)


def compare_loci(first: Locus, second: Locus, contig_order: Sequence[str]) -> int:
    """
    compare two loci which may lie on different contigs

    Args:
        first: a locus
        second: a locus
        contig_order: contig names in reference dictionary order

    Returns:
        negative if first comes before second, positive if after and 0 if they are the same locus

    Raises:
        KeyError: a contig is not part of the contig order
    """
    if first.chr != second.chr:
        ranks = {chrom: i for i, chrom in enumerate(contig_order)}
        for chrom in (first.chr, second.chr):
            if chrom not in ranks:
                raise KeyError('contig is missing from the reference', chrom)
        return ranks[first.chr] - ranks[second.chr]
    if first < second:
        return -1
    elif second < first:
        return 1
    return 0
