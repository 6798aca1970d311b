from typing import Generic, Iterable, TypeVar

T = TypeVar("T")


class StackError(IndexError):
    pass


class EmptyStackError(StackError):
    pass


class InsufficientSizeError(StackError):
    pass


class BoundedStack(Generic[T]):
    """
    LIFO container holding the hull boundary during the scan.
    Only the two topmost elements are observable; there is no random access.
    """

    def __init__(self, items: Iterable[T] = ()):
        self._items: list[T] = list(items)

    def push(self, value: T):
        self._items.append(value)

    def pop(self) -> T:
        if not self._items:
            raise EmptyStackError("pop from an empty stack")
        return self._items.pop()

    def top(self) -> T:
        if not self._items:
            raise EmptyStackError("top of an empty stack")
        return self._items[-1]

    def second_from_top(self) -> T:
        if len(self._items) < 2:
            raise InsufficientSizeError(
                f"second_from_top needs at least 2 elements, stack holds {len(self._items)}"
            )
        return self._items[-2]

    def size(self) -> int:
        return len(self._items)

    def empty(self) -> bool:
        return not self._items

    def clear(self):
        self._items.clear()

    def copy(self) -> "BoundedStack[T]":
        return BoundedStack(self._items)

    __copy__ = copy

    def to_list(self) -> list[T]:
        """
        Elements in bottom-to-top order.
        """
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"BoundedStack({self._items!r})"
