from .constants import STRAND


class Feature:
    """
    a stranded genomic feature given by 1-based inclusive coordinates on a reference sequence
    """

    def __init__(self, reference_name, start, end, strand=STRAND.NS):
        """
        Args:
            reference_name (str): name of the reference sequence the feature is on
            start (int): start of the feature (inclusive)
            end (int): end of the feature (inclusive)
            strand (STRAND): the strand of the feature

        Raises:
            AttributeError: the start is after the end
            KeyError: the strand is not a valid STRAND value

        Example:
            >>> f = Feature('sq0', 8, 13, STRAND.POS)
            >>> len(f)
            6
        """
        start = int(start)
        end = int(end)
        if start > end:
            raise AttributeError('feature start > end is not allowed', start, end)
        self.reference_name = reference_name
        self.start = start
        self.end = end
        self.strand = STRAND.enforce(strand)

    def __len__(self):
        return self.end - self.start + 1

    def is_empty(self):
        return self.start == self.end

    def key(self):
        """:class:`tuple`: the items compared for equality"""
        return (self.reference_name, self.start, self.end, self.strand)

    def __eq__(self, other):
        if not hasattr(other, 'key'):
            return False
        return self.key() == other.key()

    def __repr__(self):
        return '{}({}:{}-{}{})'.format(self.__class__.__name__, self.reference_name, self.start, self.end, self.strand)
