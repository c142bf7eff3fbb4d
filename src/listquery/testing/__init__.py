"""Testing support for consumers of the engine.

Hypothesis strategies live in :mod:`listquery.testing.strategies` and need
the ``testing`` extra.
"""

from listquery.testing.builder import RecordBuilder

__all__ = ["RecordBuilder"]
