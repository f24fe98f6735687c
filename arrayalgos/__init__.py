"""Classic array and matrix algorithms, with an ``arrayalgos`` command line."""

__version__ = "0.1.0"