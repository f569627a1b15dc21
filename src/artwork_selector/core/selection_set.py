"""
Selection set keyed by record identity.

The set tracks which records are selected independently of the page that is
currently displayed. Members are kept in the order they were first added.
"""

from typing import Dict, Iterable, Iterator, List, Union

from ..models import Artwork

Identity = int


def _identity(item: Union[Artwork, Identity]) -> Identity:
    return item.id if isinstance(item, Artwork) else item


class SelectionSet:
    """
    Identity-keyed set of selected records.

    All operations are total: adding a present record or removing an absent
    identity is a no-op.
    """

    def __init__(self, records: Iterable[Artwork] = ()):
        self._members: Dict[Identity, Artwork] = {}
        self.add_all_missing(records)

    def add(self, record: Artwork) -> bool:
        """Add ``record`` unless its identity is already selected.

        Returns:
            bool: True if the record was inserted
        """
        if record.id in self._members:
            return False
        self._members[record.id] = record
        return True

    def remove(self, item: Union[Artwork, Identity]) -> bool:
        """Remove an identity if present.

        Returns:
            bool: True if something was removed
        """
        return self._members.pop(_identity(item), None) is not None

    def contains(self, item: Union[Artwork, Identity]) -> bool:
        return _identity(item) in self._members

    def toggle(self, record: Artwork) -> bool:
        """Flip membership of a single record and return the new state."""
        if self.remove(record):
            return False
        self.add(record)
        return True

    def add_all_missing(self, records: Iterable[Artwork]) -> int:
        """Add every record not already selected, in iteration order.

        Returns:
            int: Number of records added
        """
        return sum(1 for record in records if self.add(record))

    def remove_all_present(self, records: Iterable[Artwork]) -> int:
        """Remove every member whose identity appears in ``records``.

        Returns:
            int: Number of records removed
        """
        return sum(1 for record in records if self.remove(record))

    def clear(self) -> None:
        self._members.clear()

    def ids(self) -> List[Identity]:
        return list(self._members)

    def records(self) -> List[Artwork]:
        return list(self._members.values())

    def copy(self) -> "SelectionSet":
        return SelectionSet(self._members.values())

    def __contains__(self, item: object) -> bool:
        if isinstance(item, (Artwork, int)):
            return self.contains(item)
        return False

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[Artwork]:
        return iter(list(self._members.values()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SelectionSet):
            return NotImplemented
        return self._members.keys() == other._members.keys()

    def __repr__(self) -> str:
        return f"SelectionSet(size={len(self)})"
