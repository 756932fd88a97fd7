from collections import namedtuple
import logging

from .constants import DEFAULTS
from ..constants import PAIR_POSITION, SAM_FLAG
from ..error import MateDesignationError
from ..util import LOG


class ReadKey(namedtuple('ReadKey', [
    'query_name', 'position', 'reference_id', 'reference_start',
    'next_reference_id', 'next_reference_start', 'template_length'
])):
    """
    the identity of an alignment within its template. A read and its mate have keys which mirror one another
    """
    pass


def pair_position(flag):
    """
    Args:
        flag (int): the SAM flag of a read

    Returns:
        PAIR_POSITION: the mate designation, or None when the flag sets neither or both of the first/last in pair bits

    Example:
        >>> pair_position(0x41)
        'first'
        >>> pair_position(0x81)
        'second'
        >>> pair_position(0x01) is None
        True
    """
    first = bool(flag & SAM_FLAG.FIRST_IN_PAIR)
    second = bool(flag & SAM_FLAG.LAST_IN_PAIR)
    if first == second:
        return None
    return PAIR_POSITION.FIRST if first else PAIR_POSITION.SECOND


def mate_position(position):
    """
    Example:
        >>> mate_position(PAIR_POSITION.FIRST)
        'second'
    """
    PAIR_POSITION.enforce(position)
    return PAIR_POSITION.SECOND if position == PAIR_POSITION.FIRST else PAIR_POSITION.FIRST


def is_secondary_or_supplementary(read):
    """
    True for reads which are not the primary alignment of their segment
    """
    return bool(read.flag & (SAM_FLAG.SECONDARY | SAM_FLAG.SUPPLEMENTARY))


def _read_position(read):
    position = pair_position(read.flag)
    if position is None:
        raise MateDesignationError(read)
    return position


def read_key(read):
    """
    Args:
        read (pysam.AlignedSegment): the read

    Returns:
        ReadKey: the key the read is buffered under while waiting for its mate

    Raises:
        MateDesignationError: the read is not flagged as exactly one of the first or second mate
    """
    return ReadKey(
        read.query_name,
        _read_position(read),
        read.reference_id,
        read.reference_start,
        read.next_reference_id,
        read.next_reference_start,
        read.template_length,
    )


def mate_key(read):
    """
    computes the key the mate of a given read would have been buffered under. The mate designation is flipped,
    the reference/mate coordinates are swapped and the template length is negated so that for
    any true pair, mate_key(read) == read_key(mate)

    Raises:
        MateDesignationError: the read is not flagged as exactly one of the first or second mate
    """
    return ReadKey(
        read.query_name,
        mate_position(_read_position(read)),
        read.next_reference_id,
        read.next_reference_start,
        read.reference_id,
        read.reference_start,
        -read.template_length,
    )


class RecordPairs:
    """
    matches reads to their mates from a stream of alignment records which can be in any order

    reads are buffered by their key until a read arrives whose mate key matches. Matched pairs are returned as
    (first, second) tuples. Once the input is exhausted any reads remaining in the buffer are singletons and can
    be retrieved with :meth:`singletons`

    The engine is a single-pass iterator. Errors are raised per item and the next call to :func:`next` resumes
    with the following input item
    """

    def __init__(self, records, primary_only=None, log=LOG):
        """
        Args:
            records (iterable): decode results. Each item is either an alignment record or an exception instance
                for a record which could not be decoded
            primary_only (bool): skip secondary and supplementary alignments (defaults to DEFAULTS.primary_only)
            log (callable): function to log the singleton count with
        """
        self.records = iter(records)
        self.primary_only = DEFAULTS.primary_only if primary_only is None else primary_only
        self.log = log
        self.buffer = {}
        self.exhausted = False

    def next_pair(self):
        """
        pull records from the input until a pair is completed

        Returns:
            tuple: the (first, second) pair of reads or None when the input is exhausted

        Raises:
            Exception: the decode failure pulled from the input, as is
            MateDesignationError: the read pulled from the input cannot be assigned to a position in the pair
        """
        while True:
            try:
                read = next(self.records)
            except StopIteration:
                if self.buffer and not self.exhausted:
                    self.log('{} records are singletons'.format(len(self.buffer)), level=logging.INFO)
                self.exhausted = True
                return None

            if isinstance(read, Exception):
                raise read

            if self.primary_only and is_secondary_or_supplementary(read):
                continue

            key = mate_key(read)
            mate = self.buffer.pop(key, None)
            if mate is not None:
                if key.position == PAIR_POSITION.FIRST:
                    return mate, read
                return read, mate

            self.buffer[read_key(read)] = read

    def singletons(self):
        """
        drain the reads which have not been paired. Each read is removed from the buffer as it is yielded

        Note:
            this is meant to be called after the pairs have been exhausted. Before that it yields the reads which are
            unmatched so far
        """
        while self.buffer:
            _, read = self.buffer.popitem()
            yield read

    def __iter__(self):
        return self

    def __next__(self):
        pair = self.next_pair()
        if pair is None:
            raise StopIteration
        return pair
