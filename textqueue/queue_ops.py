"""Function-style queue operations that treat None as an empty queue."""

import logging

from textqueue.linked_list import TextQueue

logger = logging.getLogger(__name__)


def create() -> TextQueue | None:
    """Create an empty queue, or return None if it could not be allocated."""
    try:
        return TextQueue()
    except MemoryError:
        logger.warning("Could not allocate queue")
        return None


def destroy(queue: TextQueue | None) -> None:
    if queue is None:
        return
    queue.destroy()


def insert_front(queue: TextQueue | None, text: bytes | str) -> bool:
    if queue is None:
        return False
    return queue.insert_front(text)


def insert_back(queue: TextQueue | None, text: bytes | str) -> bool:
    if queue is None:
        return False
    return queue.insert_back(text)


def remove_front(queue: TextQueue | None, out: bytearray | memoryview | None = None, capacity: int | None = None) -> bool:
    if queue is None:
        return False
    return queue.remove_front(out, capacity)


def size(queue: TextQueue | None) -> int:
    if queue is None:
        return 0
    return queue.size


def reverse(queue: TextQueue | None) -> None:
    if queue is not None:
        queue.reverse()


def sort(queue: TextQueue | None) -> None:
    if queue is not None:
        queue.sort()
