import pytest

from conftest import Item, is_sel, items_from_marks, random_items, tags
from reorder.partition import (
    PartitionStep,
    half_stable_partition,
    remove_all,
    stable_partition,
    stable_partition_iterative,
)
from reorder.sequences import ArrayCollection, LinkedCollection
from reorder.verify import check_half_stable, check_stable

STABLE_VARIANTS = [
    pytest.param(lambda c, pred: stable_partition(c, pred, iterative_threshold=0), id="recursive"),
    pytest.param(lambda c, pred: stable_partition_iterative(c, pred), id="iterative"),
    pytest.param(lambda c, pred: stable_partition(c, pred, iterative_threshold=4), id="switching"),
]


@pytest.mark.parametrize("partition", STABLE_VARIANTS)
@pytest.mark.parametrize("n", [0, 1, 2, 3, 7, 16, 33, 100])
def test_stable_partition_keeps_both_orders(make_collection, rng, partition, n):
    for _ in range(5):
        before = random_items(rng, n)
        c = make_collection(before)
        boundary = partition(c, is_sel)
        after = c.to_list()

        check_stable(before, after, is_sel)
        assert c.distance(c.start, boundary) == sum(1 for x in before if not x.selected)


@pytest.mark.parametrize("partition", STABLE_VARIANTS)
def test_stable_partition_single_element(partition):
    a = [Item(0, True)]
    assert partition(a, is_sel) == 0
    a = [Item(0, False)]
    assert partition(a, is_sel) == 1


@pytest.mark.parametrize("marks", ["", "....", "****", "..**", "...*"])
def test_stable_partition_already_partitioned_is_noop(marks):
    before = items_from_marks(marks)
    a = list(before)
    stable_partition(a, is_sel)
    assert a == before


def test_stable_partition_iterative_matches_recursive(make_collection, rng):
    for n in (5, 31, 64):
        before = random_items(rng, n, p=0.5)
        c1 = make_collection(before)
        c2 = make_collection(before)
        b1 = stable_partition(c1, is_sel, iterative_threshold=0)
        b2 = stable_partition_iterative(c2, is_sel)
        assert c1.to_list() == c2.to_list()
        assert c1.distance(c1.start, b1) == c2.distance(c2.start, b2)


def test_stable_partition_within_slice(make_collection):
    before = items_from_marks("*.*.**.*")
    c = make_collection(before)
    lower = c.index_offset(c.start, 2)
    upper = c.index_offset(c.start, 6)
    boundary = stable_partition(c.slice(lower, upper), is_sel)
    assert tags(c.to_list()) == [0, 1, 3, 2, 4, 5, 6, 7]
    assert c.distance(c.start, boundary) == 3


@pytest.mark.parametrize("n", [0, 1, 2, 5, 20, 57])
def test_half_stable_partition(make_collection, rng, n):
    for _ in range(5):
        before = random_items(rng, n)
        c = make_collection(before)
        boundary = half_stable_partition(c, is_sel)
        check_half_stable(before, c.to_list(), c.distance(c.start, boundary), is_sel)


def test_half_stable_partition_without_suffix_elements_returns_end(make_collection):
    c = make_collection(items_from_marks("...."))
    assert half_stable_partition(c, is_sel) == c.end


def test_half_stable_partition_may_reorder_suffix():
    a = items_from_marks("**.")
    boundary = half_stable_partition(a, is_sel)
    assert boundary == 1
    assert tags(a) == [2, 1, 0]


def test_half_stable_partition_trace():
    a = items_from_marks("..**..**..")
    steps = []
    boundary = half_stable_partition(a, is_sel, trace=steps.append)

    assert boundary == 6
    # One step per position scanned after the first suffix element
    assert [s.step for s in steps] == list(range(7))
    assert [s.scan for s in steps] == list(range(3, 10))
    assert [s.swapped for s in steps] == [False, True, True, False, False, True, True]
    assert all(isinstance(s, PartitionStep) for s in steps)
    assert steps[-1].snapshot == a
    assert steps[0].describe().startswith("step=0, j=3, no swap")
    assert "swapped for 2" in steps[1].describe()


def test_remove_all_keeps_remaining_order(make_collection):
    before = items_from_marks(".......**.")
    c = make_collection(before)
    removed = remove_all(c, is_sel)
    assert removed == 2
    assert tags(c.to_list()) == [0, 1, 2, 3, 4, 5, 6, 9]
    assert c.count == 8


def test_remove_all_on_list():
    a = items_from_marks("*.*.*")
    assert remove_all(a, is_sel) == 3
    assert tags(a) == [1, 3]


def test_remove_all_rejects_slices():
    a = items_from_marks("*.*")
    c = ArrayCollection(a)
    with pytest.raises(TypeError):
        remove_all(c.slice(0, 2), is_sel)
    assert a == items_from_marks("*.*")


def test_predicate_errors_propagate():
    def boom(_):
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        stable_partition([1, 2, 3], boom)


def test_linked_partition_keeps_nodes():
    c = LinkedCollection(items_from_marks(".*.*"))
    nodes = list(c.positions())
    stable_partition(c, is_sel)
    assert list(c.positions()) == nodes
    assert tags(c) == [0, 2, 1, 3]


def test_threshold_is_read_from_environment_on_each_call(monkeypatch):
    from reorder import partition

    calls = []
    real = partition.stable_partition_iterative

    def recording(c, is_suffix, count=None):
        calls.append(count)
        return real(c, is_suffix, count)

    monkeypatch.setattr(partition, "stable_partition_iterative", recording)

    monkeypatch.setenv("REORDER_ITERATIVE_THRESHOLD", "0")
    a = items_from_marks("*.*.")
    stable_partition(a, is_sel)
    assert calls == []

    monkeypatch.setenv("REORDER_ITERATIVE_THRESHOLD", "2")
    a = items_from_marks("*.*.")
    boundary = stable_partition(a, is_sel)
    assert calls == [4]
    assert boundary == 2
    assert tags(a) == [1, 3, 0, 2]
