"""fnkit
=====

Small generic helpers for folding, mapping, filtering and reversing
sequences, composing decorators and applying option callables.
"""

from .functional import apply_options, decorate, filter_, map_, reduce, reverse, reversed_decorate

__all__ = ["reduce", "map_", "filter_", "reverse", "decorate", "reversed_decorate", "apply_options"]
