"""
Sub-package Documentation
============================

This is the package responsible for pairing reads with their mates from a stream of alignment records where the
mates can be in any order and separated by any number of other records.


Algorithm Overview
---------------------

- for each read pulled from the input

    - forward decode failures to the caller
    - skip secondary and supplementary alignments if only primary alignments are requested
    - compute the key the mate would have been buffered under (designation flipped, read/mate coordinates
      swapped, template length negated)

        - if the mate is in the buffer, remove it and return the pair ordered as (first, second)
        - otherwise buffer the read under its own key

- when the input is exhausted, any buffered reads are singletons and are drained separately

"""
from .pairing import (
    ReadKey,
    RecordPairs,
    is_secondary_or_supplementary,
    mate_key,
    mate_position,
    pair_position,
    read_key,
)
