"""Read-only live views over the store's internal lists."""
from collections.abc import Sequence


class ReadOnlyListView(Sequence):
    """Sequence view of a list that always reflects its current contents.

    The view holds a reference to the backing list, never a copy, so
    mutations made by the owner are visible on the next read.
    """

    def __init__(self, backing: list):
        self._backing = backing

    def __getitem__(self, index):
        return self._backing[index]

    def __len__(self) -> int:
        return len(self._backing)

    def __eq__(self, other) -> bool:
        if isinstance(other, Sequence) and not isinstance(other, str):
            return list(self) == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._backing!r})"
