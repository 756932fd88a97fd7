from ..constants import WeakMatepairNamespace


DEFAULTS = WeakMatepairNamespace()
"""
- ``primary_only``: ignore secondary and supplementary alignments when pairing reads (env: MATEPAIR_PRIMARY_ONLY)
"""
DEFAULTS.add('primary_only', False)
