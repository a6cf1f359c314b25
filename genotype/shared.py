"""
genotype/shared.py - Shared handle with runtime-checked borrows.

A Shared handle lets the caller and the mutation operator reach the same
holder. Access goes through borrows:

    shape = Shared(Shape(...))

    with shape.borrow() as s:        # shared, read access
        s.rotation.get_scaled()

    with shape.borrow_mut() as s:    # exclusive access
        s.rotation.add_clamped(0.1)

Any number of shared borrows may overlap. An exclusive borrow cannot overlap
with any other borrow; conflicting requests raise BorrowError.
Single-threaded: the handle does no locking across threads.
"""

from contextlib import contextmanager
from typing import Generic, Iterator, Optional, TypeVar

from .errors import BorrowError

T = TypeVar("T")


class _Cell(Generic[T]):
    """Borrow state shared by every handle to one value."""

    __slots__ = ("value", "shared", "exclusive")

    def __init__(self, value: T):
        self.value = value
        self.shared = 0
        self.exclusive = False


class Shared(Generic[T]):
    """
    Shared ownership of a value with runtime-checked exclusive access.
    """

    def __init__(self, value: T):
        """
        Initialize a new shared cell.

        Args:
            value: The value to share, typically a ParamHolder
        """
        self._cell = _Cell(value)

    @classmethod
    def _from_cell(cls, cell: _Cell) -> "Shared[T]":
        handle = cls.__new__(cls)
        handle._cell = cell
        return handle

    def clone(self) -> "Shared[T]":
        """Return another handle to the same value."""
        return Shared._from_cell(self._cell)

    def ptr_eq(self, other: "Shared") -> bool:
        """Check if both handles point to the same value."""
        return self._cell is other._cell

    @property
    def is_borrowed(self) -> bool:
        """Check if any borrow is outstanding."""
        return self._cell.exclusive or self._cell.shared > 0

    @property
    def is_borrowed_mut(self) -> bool:
        """Check if an exclusive borrow is outstanding."""
        return self._cell.exclusive

    @property
    def borrow_count(self) -> int:
        """Number of outstanding shared borrows."""
        return self._cell.shared

    def acquire_shared(self) -> T:
        """
        Take a shared borrow. Pair with release_shared().

        Raises:
            BorrowError: If an exclusive borrow is outstanding
        """
        cell = self._cell
        if cell.exclusive:
            raise BorrowError("shared", cell.shared, cell.exclusive)
        cell.shared += 1
        return cell.value

    def release_shared(self) -> None:
        cell = self._cell
        if cell.shared <= 0:
            raise BorrowError(
                "shared", cell.shared, cell.exclusive, message="No shared borrow to release"
            )
        cell.shared -= 1

    def acquire_exclusive(self) -> T:
        """
        Take an exclusive borrow. Pair with release_exclusive().

        Raises:
            BorrowError: If any borrow is outstanding
        """
        cell = self._cell
        if cell.exclusive or cell.shared:
            raise BorrowError("exclusive", cell.shared, cell.exclusive)
        cell.exclusive = True
        return cell.value

    def release_exclusive(self) -> None:
        cell = self._cell
        if not cell.exclusive:
            raise BorrowError(
                "exclusive", cell.shared, cell.exclusive, message="No exclusive borrow to release"
            )
        cell.exclusive = False

    @contextmanager
    def borrow(self) -> Iterator[T]:
        """
        Context manager for shared access.

        Raises:
            BorrowError: If an exclusive borrow is outstanding
        """
        value = self.acquire_shared()
        try:
            yield value
        finally:
            self.release_shared()

    @contextmanager
    def borrow_mut(self) -> Iterator[T]:
        """
        Context manager for exclusive access.

        Raises:
            BorrowError: If any borrow is outstanding
        """
        value = self.acquire_exclusive()
        try:
            yield value
        finally:
            self.release_exclusive()

    def try_borrow_mut(self) -> Optional["BorrowGuard[T]"]:
        """
        Non-raising form of borrow_mut().

        Returns None if any borrow is outstanding. Otherwise takes the
        exclusive borrow and returns a guard holding it until release()
        or the end of a with block:

            guard = shape.try_borrow_mut()
            if guard is not None:
                with guard as s:
                    s.rotation.add_clamped(0.1)
        """
        if self.is_borrowed:
            return None
        value = self.acquire_exclusive()
        return BorrowGuard(self, value)

    def replace(self, value: T) -> T:
        """
        Swap in a new value, returning the old one.

        Raises:
            BorrowError: If any borrow is outstanding
        """
        old = self.acquire_exclusive()
        try:
            self._cell.value = value
        finally:
            self.release_exclusive()
        return old

    def __repr__(self) -> str:
        if self._cell.exclusive:
            return "Shared(<borrowed>)"
        return f"Shared({self._cell.value!r})"


class BorrowGuard(Generic[T]):
    """
    An exclusive borrow taken by Shared.try_borrow_mut().

    Holds the borrow until release() is called or a with block exits.
    """

    def __init__(self, owner: Shared[T], value: T):
        self._owner = owner
        self._value = value
        self._held = True

    @property
    def value(self) -> T:
        if not self._held:
            raise BorrowError(
                "exclusive", 0, False, message="Borrow guard already released"
            )
        return self._value

    @property
    def is_held(self) -> bool:
        return self._held

    def release(self) -> None:
        """Give the exclusive borrow back. Releasing twice is a no-op."""
        if self._held:
            self._held = False
            self._owner.release_exclusive()

    def __enter__(self) -> T:
        return self.value

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()
