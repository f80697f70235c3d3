"""Benchmarks for partial_deep_equal

Benchmarks are executed like normal tests by default, running the benchmarked
function only once. You can run them as real benchmarks with the ``--benchmark-only``
option if you want to measure them, e.g.::

    pytest tests/benchmarks --benchmark-only
"""
