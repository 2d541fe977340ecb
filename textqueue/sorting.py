"""Merge sort over singly linked node chains, relinking nodes without copying values."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from textqueue.linked_list import ListNode


def split_middle(head: "ListNode") -> tuple["ListNode", "ListNode"]:
    """
    Cut a chain of at least two nodes after its midpoint.

    The slow cursor moves one node for every two nodes of the fast cursor,
    so the halves differ in length by at most one (the left half is the
    longer one for odd lengths).

    Args:
        head: First node of a chain with two or more nodes

    Returns:
        Heads of the left and right halves
    """
    slow = head
    fast = head.next
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next

    right = slow.next
    slow.next = None
    return head, right


def merge(
    left: "ListNode", left_tail: "ListNode", right: "ListNode", right_tail: "ListNode"
) -> tuple["ListNode", "ListNode"]:
    """
    Merge two sorted, non-empty chains into one sorted chain.

    Args:
        left: Head of the first sorted chain
        left_tail: Last node of the first chain
        right: Head of the second sorted chain
        right_tail: Last node of the second chain

    Returns:
        Head and last node of the merged chain
    """
    if right.value < left.value:
        head, right = right, right.next
    else:
        head, left = left, left.next
    tail = head

    while left is not None and right is not None:
        if right.value < left.value:
            tail.next = right
            tail, right = right, right.next
        else:
            tail.next = left
            tail, left = left, left.next

    # Relink whatever is left of the unexhausted half in one step
    if left is not None:
        tail.next = left
        return head, left_tail
    tail.next = right
    return head, right_tail


def merge_sort(head: "ListNode") -> tuple["ListNode", "ListNode"]:
    """
    Sort a non-empty chain by byte value.

    Recursion depth is logarithmic in the chain length because every level
    bisects its input.

    Returns:
        Head and last node of the sorted chain
    """
    if head.next is None:
        return head, head

    left, right = split_middle(head)
    left, left_tail = merge_sort(left)
    right, right_tail = merge_sort(right)
    return merge(left, left_tail, right, right_tail)
