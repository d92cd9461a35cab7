"""Cost-driven sorting of stack A with the help of stack B."""

from __future__ import annotations

from typing import Iterable

from pushswap.stack import Machine, Node, Stack

INT_MIN = -2147483648
INT_MAX = 2147483647


def _target_in_b(node: Node, stack_b: Stack) -> Node | None:
    target = None
    closest_smaller = INT_MIN
    for candidate in stack_b:
        if node.value > candidate.value > closest_smaller:
            closest_smaller = candidate.value
            target = candidate
    return target if target is not None else stack_b.biggest()


def _target_in_a(stack_a: Stack, node: Node) -> Node | None:
    target = None
    closest_bigger = INT_MAX
    for candidate in stack_a:
        if node.value < candidate.value < closest_bigger:
            closest_bigger = candidate.value
            target = candidate
    return target if target is not None else stack_a.smallest()


def assign_targets_in_b(stack_a: Stack, stack_b: Stack) -> None:
    """Give every node of A the node of B holding the closest smaller number.

    When B holds no smaller number the target is B's biggest node.
    """
    for node in stack_a:
        node.target = _target_in_b(node, stack_b)


def assign_targets_in_a(stack_a: Stack, stack_b: Stack) -> None:
    """Give every node of B the node of A holding the closest bigger number.

    When A holds no bigger number the target is A's smallest node.
    """
    for node in stack_b:
        node.target = _target_in_a(stack_a, node)


def _distance(node: Node, size: int) -> int:
    return node.index if node.above_median else size - node.index


def compute_costs(stack_a: Stack, stack_b: Stack) -> None:
    """Set each node's cost of bringing it and its target to the tops."""
    size_a = len(stack_a)
    size_b = len(stack_b)
    for node in stack_a:
        if node.target is None:
            break
        node.cost = max(_distance(node, size_a), _distance(node.target, size_b))


def cheapest(stack_a: Stack) -> Node | None:
    """Return the first node with the lowest cost."""
    return min(stack_a, key=lambda node: node.cost, default=None)


def bring_to_top(machine: Machine, node: Node | None, stack_name: str) -> None:
    """Rotate the named stack until the node is on top."""
    if stack_name == "a":
        stack, forward, backward = machine.a, machine.ra, machine.rra
    elif stack_name == "b":
        stack, forward, backward = machine.b, machine.rb, machine.rrb
    else:
        raise ValueError(f"unknown stack name: {stack_name!r}")
    if node is not None and node not in stack:
        raise ValueError("node is not on the stack")
    step = forward if node is not None and node.above_median else backward
    while stack.top() is not node:
        step()


def move_cheapest_to_b(machine: Machine) -> None:
    """Bring the cheapest node of A and its target to the tops, then push it."""
    node = cheapest(machine.a)
    if node is None:
        return
    target = node.target
    if target is not None and node.above_median and target.above_median:
        while machine.a.top() is not node and machine.b.top() is not target:
            machine.rr()
    elif not node.above_median and target is not None and not target.above_median:
        while machine.a.top() is not node and machine.b.top() is not target:
            machine.rrr()
    bring_to_top(machine, node, "a")
    bring_to_top(machine, target, "b")
    machine.pb()


def sort_three(machine: Machine) -> None:
    """Sort a stack A of three numbers in at most two operations."""
    stack = machine.a
    biggest = stack.biggest()
    nodes = list(stack)
    if biggest is nodes[0]:
        machine.ra()
    elif biggest is nodes[1]:
        machine.rra()
    first, second = stack.values()[:2]
    if first > second:
        machine.sa()


def push_to_b(machine: Machine) -> None:
    """Push nodes from A to B until three remain in A."""
    while len(machine.a) > 3:
        machine.a.update_positions()
        machine.b.update_positions()
        assign_targets_in_b(machine.a, machine.b)
        compute_costs(machine.a, machine.b)
        move_cheapest_to_b(machine)


def push_to_a(machine: Machine) -> None:
    """Push every node of B back into its place in A."""
    while len(machine.b):
        machine.a.update_positions()
        machine.b.update_positions()
        assign_targets_in_a(machine.a, machine.b)
        top = machine.b.top()
        bring_to_top(machine, top.target, "a")
        machine.pa()


def final_rotate(machine: Machine) -> None:
    """Rotate A until its smallest number is on top."""
    machine.a.update_positions()
    bring_to_top(machine, machine.a.smallest(), "a")


def push_swap(machine: Machine) -> None:
    """Sort stack A using the machine's operations."""
    size = len(machine.a)
    if size == 2:
        first, second = machine.a.values()
        if first > second:
            machine.sa()
        return
    if size == 3:
        sort_three(machine)
        return
    push_to_b(machine)
    if len(machine.a) == 3:
        sort_three(machine)
    push_to_a(machine)
    final_rotate(machine)


def sort_numbers(values: Iterable[int]) -> list[str]:
    """Return the operations that sort the given distinct numbers."""
    machine = Machine(values)
    if not machine.a.is_sorted():
        push_swap(machine)
    return machine.operations