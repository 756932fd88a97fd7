import pysam

from .error import RecordDecodeError
from .pairing import RecordPairs
from .util import LOG


def iter_records(bamfile):
    """
    reads every alignment record from a bam file in file order. Does not require an index

    Args:
        bamfile: path to the input bam file or an open :class:`pysam.AlignmentFile`

    Yields:
        :class:`pysam.AlignedSegment` for each record. If a record cannot be decoded a
        :class:`~matepair.error.RecordDecodeError` is yielded in its place and iteration stops
    """
    opened = not hasattr(bamfile, 'fetch')
    fh = pysam.AlignmentFile(bamfile, 'rb', check_sq=False) if opened else bamfile
    try:
        reads = fh.fetch(until_eof=True)
        while True:
            try:
                read = next(reads)
            except StopIteration:
                break
            except (OSError, ValueError) as err:
                # htslib cannot resynchronise on the stream after a corrupt record
                decode_error = RecordDecodeError('failed to decode alignment record', str(err))
                decode_error.__cause__ = err
                yield decode_error
                break
            yield read
    finally:
        if opened:
            fh.close()


def read_pairs(bamfile, primary_only=None, log=LOG):
    """
    Args:
        bamfile: path to the input bam file or an open :class:`pysam.AlignmentFile`
        primary_only (bool): skip secondary and supplementary alignments
        log (callable): function to log the singleton count with

    Returns:
        RecordPairs: iterator of (first, second) read pairs
    """
    return RecordPairs(iter_records(bamfile), primary_only=primary_only, log=log)
