"""The partition-based operations against the quadratic remove/insert loops."""

import pytest

from conftest import is_sel, items_from_marks, random_items, tags
from reorder import naive
from reorder.partition import remove_all
from reorder.positional import bring_forward, bring_to_front, gather, send_backward, send_to_back


@pytest.mark.parametrize(
    "fast, slow",
    [
        (send_to_back, naive.naive_send_to_back),
        (bring_to_front, naive.naive_bring_to_front),
        (remove_all, naive.naive_delete),
    ],
)
def test_agrees_with_naive(rng, fast, slow):
    for n in range(0, 30):
        before = random_items(rng, n)
        a, b = list(before), list(before)
        fast(a, is_sel)
        slow(b, is_sel)
        assert a == b


def test_gather_agrees_with_naive(rng):
    for n in range(0, 30):
        before = random_items(rng, n)
        target = rng.randint(0, n)
        a, b = list(before), list(before)
        gather(a, target, is_sel)
        naive.naive_gather(b, target, is_sel)
        assert a == b


def test_bring_forward_agrees_when_first_element_is_not_selected(rng):
    for n in range(1, 30):
        before = random_items(rng, n)
        if before[0].selected:
            continue
        a, b = list(before), list(before)
        bring_forward(a, is_sel)
        naive.naive_bring_forward(b, is_sel)
        assert a == b


def test_send_backward_agrees_when_last_element_is_not_selected(rng):
    for n in range(1, 30):
        before = random_items(rng, n)
        selected = [i for i, x in enumerate(before) if x.selected]
        if before[-1].selected or selected == [0]:
            continue
        a, b = list(before), list(before)
        send_backward(a, is_sel)
        naive.naive_send_backward(b, is_sel)
        assert a == b


def test_naive_versions_stop_at_the_edges():
    a = items_from_marks("*..*.")
    naive.naive_bring_forward(a, is_sel)
    assert tags(a) == [0, 1, 2, 3, 4]

    a = items_from_marks(".*..*")
    naive.naive_send_backward(a, is_sel)
    assert tags(a) == [0, 1, 2, 3, 4]


def test_naive_delete_adjacent_matches():
    a = items_from_marks(".......**.")
    naive.naive_delete(a, is_sel)
    assert tags(a) == [0, 1, 2, 3, 4, 5, 6, 9]


def test_naive_gather_out_of_bounds():
    with pytest.raises(IndexError):
        naive.naive_gather(items_from_marks("..*"), 4, is_sel)
