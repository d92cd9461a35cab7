import itertools

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from pushswap.sorter import (
    INT_MIN,
    assign_targets_in_a,
    assign_targets_in_b,
    bring_to_top,
    cheapest,
    compute_costs,
    final_rotate,
    move_cheapest_to_b,
    push_swap,
    push_to_a,
    push_to_b,
    sort_numbers,
    sort_three,
)
from pushswap.stack import Machine, Stack


def _replay(values, operations):
    machine = Machine(values)
    for name in operations:
        getattr(machine, name)()
    return machine


def _node(stack, value):
    return next(node for node in stack if node.value == value)


def test_target_in_b_is_closest_smaller():
    a, b = Stack([5]), Stack([1, 3, 7])
    assign_targets_in_b(a, b)
    assert a.top().target is _node(b, 3)


def test_target_in_b_falls_back_to_biggest():
    a, b = Stack([0]), Stack([1, 3, 7])
    assign_targets_in_b(a, b)
    assert a.top().target is _node(b, 7)


def test_target_in_b_never_picks_int_min():
    a, b = Stack([0]), Stack([INT_MIN, 5])
    assign_targets_in_b(a, b)
    assert a.top().target is _node(b, 5)


def test_target_in_b_empty_b_gives_none():
    a = Stack([4, 2])
    assign_targets_in_b(a, Stack())
    assert all(node.target is None for node in a)


def test_target_in_a_is_closest_bigger():
    a, b = Stack([1, 5, 9]), Stack([4])
    assign_targets_in_a(a, b)
    assert b.top().target is _node(a, 5)


def test_target_in_a_falls_back_to_smallest():
    a, b = Stack([1, 5, 9]), Stack([10])
    assign_targets_in_a(a, b)
    assert b.top().target is _node(a, 1)


def test_cheapest_picks_first_minimum():
    a = Stack([10, 20, 30])
    nodes = list(a)
    for node, cost in zip(nodes, [3, 1, 1]):
        node.cost = cost
    assert cheapest(a) is nodes[1]
    assert cheapest(Stack()) is None


def test_bring_to_top_reverse_rotates_lower_half():
    machine = Machine([1, 2, 3, 4, 5])
    machine.a.update_positions()
    node = _node(machine.a, 5)
    bring_to_top(machine, node, "a")
    assert machine.a.top() is node
    assert set(machine.operations) == {"rra"}


def test_bring_to_top_rotates_upper_half():
    machine = Machine([1, 2, 3, 4, 5])
    machine.a.update_positions()
    node = _node(machine.a, 2)
    bring_to_top(machine, node, "a")
    assert machine.a.top() is node
    assert set(machine.operations) == {"ra"}


def test_bring_to_top_rejects_bad_name_and_foreign_node():
    machine = Machine([1, 2])
    with pytest.raises(ValueError):
        bring_to_top(machine, machine.a.top(), "c")
    with pytest.raises(ValueError):
        bring_to_top(machine, Stack([1]).top(), "a")


def test_move_cheapest_to_b_moves_one_node():
    machine = Machine([5, 3, 8, 1, 9])
    before = sorted(machine.a.values())
    machine.a.update_positions()
    machine.b.update_positions()
    assign_targets_in_b(machine.a, machine.b)
    compute_costs(machine.a, machine.b)
    move_cheapest_to_b(machine)
    assert len(machine.a) == 4
    assert len(machine.b) == 1
    assert sorted(machine.a.values() + machine.b.values()) == before


@pytest.mark.parametrize("values", list(itertools.permutations([1, 2, 3])))
def test_sort_three_all_orders(values):
    machine = Machine(values)
    sort_three(machine)
    assert machine.a.values() == [1, 2, 3]
    assert len(machine.operations) <= 2


def test_push_to_b_leaves_three():
    machine = Machine([7, 2, 9, 4, 1, 8])
    push_to_b(machine)
    assert len(machine.a) == 3
    assert len(machine.b) == 3


def test_push_to_a_empties_b():
    machine = Machine([7, 2, 9, 4, 1, 8])
    push_to_b(machine)
    sort_three(machine)
    push_to_a(machine)
    assert len(machine.b) == 0
    assert sorted(machine.a.values()) == [1, 2, 4, 7, 8, 9]


def test_final_rotate_brings_smallest_up():
    machine = Machine([3, 4, 1, 2])
    final_rotate(machine)
    assert machine.a.values() == [1, 2, 3, 4]


def test_push_swap_sorts():
    machine = Machine([42, -7, 0, 13, 99, -50, 8])
    push_swap(machine)
    assert machine.a.values() == sorted([42, -7, 0, 13, 99, -50, 8])
    assert len(machine.b) == 0


def test_sort_numbers_small_cases():
    assert sort_numbers([2, 1]) == ["sa"]
    assert sort_numbers([3, 2, 1]) == ["ra", "sa"]
    assert sort_numbers([1, 2, 3]) == []


@settings(max_examples=80, deadline=None)
@given(st.lists(st.integers(INT_MIN, 2147483647), unique=True, max_size=30))
def test_sort_numbers_replay_sorts(values):
    operations = sort_numbers(values)
    machine = _replay(values, operations)
    assert machine.a.values() == sorted(values)
    assert len(machine.b) == 0