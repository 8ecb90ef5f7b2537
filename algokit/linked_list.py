"""Problems on singly linked lists, including lists with random pointers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: Optional[ListNode] = None


@dataclass(eq=False)
class RandomNode:
    """A list node that also carries a pointer to any node of its list, or None."""

    val: int = 0
    next: Optional[RandomNode] = None
    random: Optional[RandomNode] = None


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order and return its head."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def list_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of a linked list in order.

    Raises ValueError if the list contains a cycle.
    """
    values: list[int] = []
    seen: set[int] = set()
    node = head
    while node is not None:
        if id(node) in seen:
            raise ValueError("the list contains a cycle")
        seen.add(id(node))
        values.append(node.val)
        node = node.next
    return values


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse a list in place and return its new head."""
    previous: Optional[ListNode] = None
    current = head
    while current is not None:
        current.next, previous, current = previous, current, current.next
    return previous


def merge_two_lists(
    list1: Optional[ListNode], list2: Optional[ListNode]
) -> Optional[ListNode]:
    """Splice two sorted lists into one sorted list and return its head."""
    dummy = ListNode()
    tail = dummy
    while list1 is not None and list2 is not None:
        if list1.val < list2.val:
            tail.next, list1 = list1, list1.next
        else:
            tail.next, list2 = list2, list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return dummy.next


def reorder_list(head: Optional[ListNode]) -> None:
    """Reorder L0, L1, ..., Ln in place into L0, Ln, L1, Ln-1, ..."""
    if head is None or head.next is None:
        return

    slow, fast = head, head.next
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next

    second = reverse_list(slow.next)
    slow.next = None

    first: Optional[ListNode] = head
    while second is not None:
        first_next, second_next = first.next, second.next
        first.next = second
        second.next = first_next
        first, second = first_next, second_next


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Remove the ``n``-th node from the end of the list and return the head."""
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    dummy = ListNode(next=head)
    right = head
    for _ in range(n):
        if right is None:
            raise ValueError(f"the list is shorter than {n} nodes")
        right = right.next

    left = dummy
    while right is not None:
        left = left.next
        right = right.next

    left.next = left.next.next
    return dummy.next


def copy_random_list(head: Optional[RandomNode]) -> Optional[RandomNode]:
    """Return a deep copy of a list whose nodes carry random pointers."""
    copies: dict[Optional[RandomNode], Optional[RandomNode]] = {None: None}
    node = head
    while node is not None:
        copies[node] = RandomNode(node.val)
        node = node.next

    node = head
    while node is not None:
        copy = copies[node]
        copy.next = copies[node.next]
        copy.random = copies[node.random]
        node = node.next
    return copies[head]


def add_two_numbers(
    l1: Optional[ListNode], l2: Optional[ListNode]
) -> Optional[ListNode]:
    """Add two numbers stored as lists of digits, least significant first."""
    dummy = ListNode()
    tail = dummy
    carry = 0
    while l1 is not None or l2 is not None or carry:
        total = carry
        if l1 is not None:
            total += l1.val
            l1 = l1.next
        if l2 is not None:
            total += l2.val
            l2 = l2.next
        carry, digit = divmod(total, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    return dummy.next


def has_cycle(head: Optional[ListNode]) -> bool:
    """Return True if following ``next`` pointers from ``head`` never ends."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def find_duplicate(nums: Sequence[int]) -> int:
    """Return a value that occurs more than once, or -1, by sorting a copy."""
    ordered = sorted(nums)
    for previous, current in zip(ordered, ordered[1:]):
        if previous == current:
            return current
    return -1


def find_duplicate_floyd(nums: Sequence[int]) -> int:
    """Find the repeated value by treating each value as a pointer to an index.

    Every value must be a valid index into ``nums``.
    """
    if not nums:
        raise ValueError("nums must not be empty")
    if any(not 0 <= value < len(nums) for value in nums):
        raise ValueError("every value must be an index into nums")

    slow = fast = 0
    while True:
        slow = nums[slow]
        fast = nums[nums[fast]]
        if slow == fast:
            break

    finder = 0
    while True:
        slow = nums[slow]
        finder = nums[finder]
        if slow == finder:
            return slow