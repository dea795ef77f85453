"""
Common utilities: logging, binary state encoding and random ensembles.
"""
