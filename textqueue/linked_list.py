import logging
from collections.abc import Iterable, Iterator

from textqueue.exceptions import CorruptQueueError
from textqueue.sorting import merge_sort
from textqueue.utils import copy_bounded, format_queue, to_owned_bytes

logger = logging.getLogger(__name__)


class ListNode:
    """Node for singly linked list representation of a text queue."""

    __slots__ = ("value", "next")

    def __init__(self, value: bytes):
        self.value = value
        self.next: ListNode | None = None

    def __repr__(self):
        return f"Node({self.value!r})"


class TextQueue:
    """
    Singly linked queue of text values.

    Supports O(1) insertion at both ends, O(1) removal from the front,
    in-place reversal and merge sort. Every value is stored as an owned
    ``bytes`` copy. Not thread-safe.
    """

    def __init__(self, values: Iterable[bytes | str] | None = None):
        self.head: ListNode | None = None
        self.tail: ListNode | None = None
        self.size = 0

        for value in values or ():
            if not self.insert_back(value):
                raise MemoryError("could not allocate queue element")

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[bytes]:
        current = self.head
        while current is not None:
            yield current.value
            current = current.next

    def __repr__(self):
        return f"TextQueue({self.to_list()!r})"

    def __str__(self):
        return format_queue(self)

    def insert_front(self, text: bytes | str) -> bool:
        """
        Insert a copy of ``text`` at the front of the queue.

        Args:
            text: Value to store (bytes-like, or str encoded as UTF-8)

        Returns:
            True on success, False if the element could not be allocated.
            The queue is left unchanged on failure.
        """
        node = self._new_node(text)
        if node is None:
            return False

        node.next = self.head
        self.head = node
        if self.tail is None:
            self.tail = node
        self.size += 1
        return True

    def insert_back(self, text: bytes | str) -> bool:
        """
        Insert a copy of ``text`` at the back of the queue.

        Args:
            text: Value to store (bytes-like, or str encoded as UTF-8)

        Returns:
            True on success, False if the element could not be allocated.
            The queue is left unchanged on failure.
        """
        node = self._new_node(text)
        if node is None:
            return False

        if self.tail is None:
            self.head = self.tail = node
        else:
            self.tail.next = node
            self.tail = node
        self.size += 1
        return True

    def remove_front(self, out: bytearray | memoryview | None = None, capacity: int | None = None) -> bool:
        """
        Remove the front element, optionally copying its value out.

        The value is copied into ``out`` before the element is unlinked, so a
        rejected buffer leaves the queue untouched. A ``bytearray`` has its
        contents replaced with at most ``capacity - 1`` bytes of the value.
        A fixed-size writable buffer receives the same prefix followed by a
        NUL byte, never writing past its own length. Truncation is silent.
        A capacity of zero or less yields an empty fragment; no capacity
        means the whole value (or as much as a fixed-size buffer holds).

        Args:
            out: Buffer receiving the removed value
            capacity: Size of the caller's buffer, including room for a terminator

        Returns:
            True if an element was removed, False if the queue was empty

        Raises:
            TypeError: If ``out`` is not a writable buffer
        """
        if self.head is None:
            return False

        if out is not None:
            copy_bounded(self.head.value, out, capacity)
        self._detach_front()
        return True

    def pop_front(self) -> bytes | None:
        """Remove the front element and return its value, or None if empty."""
        node = self._detach_front()
        if node is None:
            return None
        return node.value

    def front(self) -> bytes:
        if self.head is None:
            raise IndexError("front from empty queue")
        return self.head.value

    def back(self) -> bytes:
        if self.tail is None:
            raise IndexError("back from empty queue")
        return self.tail.value

    def reverse(self) -> None:
        """Reverse the queue in place by relinking its nodes."""
        if self.head is None or self.head is self.tail:
            return

        prev = None
        current = self.head
        while current is not None:
            following = current.next
            current.next = prev
            prev = current
            current = following

        self.head, self.tail = self.tail, self.head
        logger.debug("Reversed queue of %d elements", self.size)

    def sort(self) -> None:
        """Sort the queue in ascending byte order, reusing its nodes."""
        if self.head is None or self.head is self.tail:
            return

        self.head, self.tail = merge_sort(self.head)
        logger.debug("Sorted queue of %d elements", self.size)

    def destroy(self) -> int:
        """
        Release every element of the queue.

        Each node is unlinked before it is dropped so no detached node keeps
        a reference into the chain.

        Returns:
            Number of released elements
        """
        released = 0
        current = self.head
        while current is not None:
            following = current.next
            current.next = None
            current = following
            released += 1

        self.head = self.tail = None
        self.size = 0
        logger.debug("Released %d queue elements", released)
        return released

    def to_list(self) -> list[bytes]:
        """Convert the queue to a regular list for debugging/output."""
        return list(self)

    def validate(self) -> None:
        """
        Check that head, tail and size agree with the node chain.

        Raises:
            CorruptQueueError: If any invariant is broken
        """
        if self.size == 0:
            if self.head is not None or self.tail is not None:
                raise CorruptQueueError("empty queue still references nodes")
            return

        if self.head is None or self.tail is None:
            raise CorruptQueueError(f"queue of size {self.size} is missing its head or tail")

        steps = 0
        current = self.head
        while current.next is not None:
            current = current.next
            steps += 1
            if steps >= self.size:
                raise CorruptQueueError(f"chain is longer than size {self.size} or contains a cycle")

        if steps != self.size - 1:
            raise CorruptQueueError(f"chain has {steps + 1} nodes but size is {self.size}")
        if current is not self.tail:
            raise CorruptQueueError("tail is not the last node of the chain")

    def _new_node(self, text: bytes | str) -> ListNode | None:
        try:
            return ListNode(to_owned_bytes(text))
        except MemoryError:
            logger.warning("Could not allocate queue element")
            return None

    def _detach_front(self) -> ListNode | None:
        node = self.head
        if node is None:
            return None

        self.head = node.next
        if self.head is None:
            self.tail = None
        node.next = None
        self.size -= 1
        return node
