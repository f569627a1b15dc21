"""Paginated selection core: selection set, page toggle and target accumulator."""

from .accumulator import AccumulationResult, SelectionObserver, TargetAccumulator
from .errors import AccumulationInProgress, FetchFailure, SelectionError
from .page_toggle import apply_page_toggle, is_fully_covered, set_checked, set_unchecked
from .selection_set import SelectionSet
from .source import RecordSource

__all__ = [
    "AccumulationInProgress",
    "AccumulationResult",
    "FetchFailure",
    "RecordSource",
    "SelectionError",
    "SelectionObserver",
    "SelectionSet",
    "TargetAccumulator",
    "apply_page_toggle",
    "is_fully_covered",
    "set_checked",
    "set_unchecked",
]
