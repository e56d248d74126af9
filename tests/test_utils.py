from dataclasses import dataclass

import pytest

from dein.utils import PriorityQueue, head_to_lower, head_to_upper, uniq


@dataclass(frozen=True)
class Item:
    num: int


def test_priority_queue_orders_items():
    pq = PriorityQueue(lambda i, j: i.num < j.num)
    for n in (5, 2, 3, 1, 6, 4):
        pq.push(Item(n))

    got = []
    while len(pq) != 0:
        got.append(pq.pop())

    assert got == [Item(1), Item(2), Item(3), Item(4), Item(5), Item(6)]


def test_priority_queue_pop_empty_raises():
    pq = PriorityQueue(lambda i, j: i < j)
    with pytest.raises(IndexError):
        pq.pop()


def test_priority_queue_len_tracks_pushes():
    pq = PriorityQueue(lambda i, j: i < j)
    pq.push(3)
    pq.push(1)
    assert len(pq) == 2
    assert pq.pop() == 1
    assert len(pq) == 1


@pytest.mark.parametrize(
    ("text", "want"),
    [("", ""), ("A", "a"), ("ABC", "aBC")],
)
def test_head_to_lower(text, want):
    assert head_to_lower(text) == want


@pytest.mark.parametrize(
    ("text", "want"),
    [("", ""), ("a", "A"), ("abc", "Abc")],
)
def test_head_to_upper(text, want):
    assert head_to_upper(text) == want


def test_uniq_ints():
    assert sorted(uniq([1, 2, 3, 1, 2, 3, 4])) == [1, 2, 3, 4]


def test_uniq_structs():
    got = uniq([Item(1), Item(2), Item(3), Item(1), Item(2), Item(3), Item(4)])
    assert sorted(got, key=lambda i: i.num) == [Item(1), Item(2), Item(3), Item(4)]


def test_uniq_keeps_first_occurrence_order():
    items = [3, 1, 3, 2, 1]
    got = uniq(items)
    assert got == sorted(set(items), key=items.index)