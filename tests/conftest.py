import pytest

from textqueue.linked_list import TextQueue


@pytest.fixture
def fruit_queue():
    """Queue holding cherry, banana, apple front to back."""
    queue = TextQueue()
    queue.insert_back(b"banana")
    queue.insert_back(b"apple")
    queue.insert_front(b"cherry")
    return queue


@pytest.fixture
def chain_nodes():
    """Return a function collecting a queue's nodes front to back."""

    def _chain_nodes(queue):
        nodes = []
        current = queue.head
        while current is not None:
            nodes.append(current)
            current = current.next
        return nodes

    return _chain_nodes
