"""
Insertion ordered sets.

Grammars are printed, compared and transformed through these sets so
that every transformation yields the same productions in the same order
from one run to another.
"""


from collections import OrderedDict
from collections.abc import MutableSet
from itertools import islice
from typing import Any, Hashable, Iterable, Iterator


class OrderedSet(MutableSet):
    """
    Hash set that remembers the order elements were first added in.

    Membership, insertion and removal are O(1). Comparing two sets with
    ``==`` ignores the order, :func:`<OrderedSet.sequence_equals>` does
    not.
    """

    def __init__(self, iterable: Iterable[Hashable] = ()):
        self._items = OrderedDict.fromkeys(iterable)

    def __contains__(self, item: Any) -> bool:
        return item in self._items

    def __iter__(self) -> Iterator:
        return iter(self._items)

    def __reversed__(self) -> Iterator:
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Any:
        if index < 0:
            index += len(self._items)
        if not 0 <= index < len(self._items):
            raise IndexError("{} index out of range".format(type(self).__name__))
        return next(islice(self._items, index, None))

    def __repr__(self):
        return "{}([{}])".format(type(self).__name__, ", ".join(map(repr, self)))

    def add(self, item: Hashable) -> None:
        self._items[item] = None

    def discard(self, item: Hashable) -> None:
        self._items.pop(item, None)

    def update(self, *iterables: Iterable[Hashable]) -> None:
        for iterable in iterables:
            for item in iterable:
                self.add(item)

    def copy(self) -> "OrderedSet":
        return OrderedSet(self)

    def sequence_equals(self, other: Iterable) -> bool:
        """Compare both the elements and their order"""
        return list(self) == list(other)

    def power_set(self) -> "OrderedSet":
        """
        Enumerate every subset. The ``k``-th subset holds the ``i``-th
        element when the ``i``-th bit of ``k`` is set, so the empty set
        comes first and the full set last.
        """
        items = list(self)
        subsets = OrderedSet()
        for mask in range(1 << len(items)):
            subsets.add(FrozenOrderedSet(
                item for index, item in enumerate(items) if mask & (1 << index)))
        return subsets

    @classmethod
    def _from_iterable(cls, iterable):
        # Used by the set operators (&, |, -, ^) of the abstract base class
        return OrderedSet(iterable)


class FrozenOrderedSet(OrderedSet):
    """Immutable and hashable :func:`Ordered Set <OrderedSet>`"""

    def __hash__(self):
        return hash(frozenset(self._items))

    def add(self, item: Hashable) -> None:
        raise TypeError("{} is immutable".format(type(self).__name__))

    def discard(self, item: Hashable) -> None:
        raise TypeError("{} is immutable".format(type(self).__name__))

    def update(self, *iterables: Iterable[Hashable]) -> None:
        raise TypeError("{} is immutable".format(type(self).__name__))

    def copy(self) -> "FrozenOrderedSet":
        return self
