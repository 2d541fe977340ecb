import pytest

from textqueue import queue_ops
from textqueue.linked_list import TextQueue


def test_create_returns_empty_queue():
    queue = queue_ops.create()
    assert isinstance(queue, TextQueue)
    assert queue_ops.size(queue) == 0


def test_create_reports_allocation_failure(monkeypatch):
    def _exhausted():
        raise MemoryError

    monkeypatch.setattr(queue_ops, "TextQueue", _exhausted)
    assert queue_ops.create() is None


def test_none_queue_degrades_gracefully():
    out = bytearray(b"keep")
    assert not queue_ops.insert_front(None, b"a")
    assert not queue_ops.insert_back(None, b"a")
    assert not queue_ops.remove_front(None, out, 4)
    assert out == b"keep"
    assert queue_ops.size(None) == 0
    queue_ops.reverse(None)
    queue_ops.sort(None)
    queue_ops.destroy(None)


def test_fifo_round_trip():
    queue = queue_ops.create()
    for value in (b"a", b"b", b"c"):
        assert queue_ops.insert_back(queue, value)

    out = bytearray()
    removed = []
    for _ in range(3):
        assert queue_ops.remove_front(queue, out, 8)
        removed.append(bytes(out))
    assert removed == [b"a", b"b", b"c"]
    assert not queue_ops.remove_front(queue, out, 8)
    assert queue_ops.size(queue) == 0


def test_fruit_scenario():
    queue = queue_ops.create()
    queue_ops.insert_back(queue, b"banana")
    queue_ops.insert_back(queue, b"apple")
    queue_ops.insert_front(queue, b"cherry")
    assert queue.to_list() == [b"cherry", b"banana", b"apple"]

    queue_ops.sort(queue)
    assert queue.to_list() == [b"apple", b"banana", b"cherry"]

    queue_ops.reverse(queue)
    assert queue.to_list() == [b"cherry", b"banana", b"apple"]
    queue.validate()


def test_truncating_remove():
    queue = queue_ops.create()
    queue_ops.insert_back(queue, b"a rather long value")
    out = bytearray()
    assert queue_ops.remove_front(queue, out, 7)
    assert out == b"a rath"


def test_destroy_empties_queue():
    queue = queue_ops.create()
    for value in (b"x", b"y", b"z"):
        queue_ops.insert_front(queue, value)
    queue_ops.destroy(queue)
    assert queue_ops.size(queue) == 0
    queue.validate()


@pytest.mark.parametrize("operation", [queue_ops.reverse, queue_ops.sort])
def test_structural_ops_keep_size(operation):
    queue = TextQueue([b"q", b"w", b"e", b"r"])
    operation(queue)
    assert queue_ops.size(queue) == 4
    queue.validate()
