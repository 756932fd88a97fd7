"""
reconstructs paired-end read pairs from a stream of alignment records
"""
__version__ = '1.0.0'
