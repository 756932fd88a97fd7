class RecordDecodeError(Exception):
    """
    raised (or forwarded by the pairing engine) when the upstream decoder could not produce an alignment record
    """
    pass


class MateDesignationError(ValueError):
    """
    raised when the flag of a read does not identify it as exactly one of the first or second mate

    Attributes:
        read: the offending alignment record
    """
    def __init__(self, read, *pos):
        ValueError.__init__(
            self, 'read flag does not resolve to a single mate designation', getattr(read, 'query_name', None),
            getattr(read, 'flag', None), *pos
        )
        self.read = read
