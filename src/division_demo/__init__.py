"""
division_demo — integer division on top of the typed_result core.

Shows fallible operations returning Result[int, DivisionFailure], consumed
with exhaustive match/case, synchronously and through completion callbacks.
"""

__version__ = "0.1.0"
