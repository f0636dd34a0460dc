"""Sample trees that show each tree operation, numbered 0 to 18."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from typing import TextIO

from bintree.node import Node
from bintree.printing import print_tree

_NIL = "(nil)"


def _describe(node: Node | None) -> str:
    return _NIL if node is None else str(node.value)


def _basic_tree() -> Node:
    root = Node(98)
    root.add_left(12)
    root.add_right(402)
    return root


def _sample_tree() -> Node:
    root = _basic_tree()
    assert root.left is not None
    root.left.insert_right(54)
    root.insert_right(128)
    return root


def _complete_tree(left_values: tuple[int, int]) -> Node:
    root = _basic_tree()
    assert root.left is not None and root.right is not None
    root.left.add_left(left_values[0])
    root.left.add_right(left_values[1])
    root.right.add_left(256)
    root.right.add_right(512)
    return root


def _family_tree() -> Node:
    root = Node(98)
    left = root.add_left(12)
    right = root.add_right(128)
    left.add_right(54)
    far = right.add_right(402)
    left.add_left(10)
    right.add_left(110)
    far.add_left(200)
    far.add_right(512)
    return root


def _demo_node(out: TextIO) -> None:
    print_tree(_complete_tree((6, 16)), out)


def _demo_insert_left(out: TextIO) -> None:
    root = _basic_tree()
    print_tree(root, out)
    print(file=out)
    assert root.right is not None
    root.right.insert_left(128)
    root.insert_left(54)
    print_tree(root, out)


def _demo_insert_right(out: TextIO) -> None:
    root = _basic_tree()
    print_tree(root, out)
    print(file=out)
    assert root.left is not None
    root.left.insert_right(54)
    root.insert_right(128)
    print_tree(root, out)


def _demo_delete(out: TextIO) -> None:
    root = _sample_tree()
    print_tree(root, out)
    root.delete()


def _sample_nodes(root: Node) -> list[Node]:
    assert root.right is not None and root.right.right is not None
    return [root, root.right, root.right.right]


def _measure_nodes(root: Node) -> list[Node]:
    assert root.right is not None and root.left is not None
    assert root.left.right is not None
    return [root, root.right, root.left.right]


def _demo_is_leaf(out: TextIO) -> None:
    root = _sample_tree()
    print_tree(root, out)
    for node in _sample_nodes(root):
        print(f"Is {node.value} a leaf: {int(node.is_leaf())}", file=out)


def _demo_is_root(out: TextIO) -> None:
    root = _sample_tree()
    print_tree(root, out)
    for node in _sample_nodes(root):
        print(f"Is {node.value} a root: {int(node.is_root())}", file=out)


def _traversal_demo(order: Callable[[Node], object]) -> Callable[[TextIO], None]:
    def demo(out: TextIO) -> None:
        root = _complete_tree((6, 56))
        print_tree(root, out)
        for value in order(root):  # type: ignore[attr-defined]
            print(value, file=out)

    return demo


def _measure_demo(label: str, measure: Callable[[Node], int]) -> Callable[[TextIO], None]:
    def demo(out: TextIO) -> None:
        root = _sample_tree()
        print_tree(root, out)
        for node in _measure_nodes(root):
            print(f"{label} {node.value}: {measure(node)}", file=out)

    return demo


def _demo_balance(out: TextIO) -> None:
    root = _sample_tree()
    root.insert_left(45)
    assert root.left is not None
    root.left.insert_right(50)
    assert root.left.left is not None
    root.left.left.insert_left(10)
    assert root.left.left.left is not None
    root.left.left.left.insert_left(8)
    print_tree(root, out)
    assert root.right is not None and root.left.left.right is not None
    for node in (root, root.right, root.left.left.right):
        print(f"Balance of {node.value}: {node.balance():+d}", file=out)


def _demo_is_full(out: TextIO) -> None:
    root = _sample_tree()
    assert root.left is not None and root.right is not None
    root.left.add_left(10)
    print_tree(root, out)
    for node in (root, root.left, root.right):
        print(f"Is {node.value} full: {int(node.is_full())}", file=out)


def _demo_is_perfect(out: TextIO) -> None:
    root = _sample_tree()
    assert root.left is not None and root.right is not None
    root.left.add_left(10)
    root.right.add_left(10)
    print_tree(root, out)
    print(f"Perfect: {int(root.is_perfect())}\n", file=out)

    assert root.right.right is not None
    root.right.right.add_left(10)
    print_tree(root, out)
    print(f"Perfect: {int(root.is_perfect())}\n", file=out)

    root.right.right.add_right(10)
    print_tree(root, out)
    print(f"Perfect: {int(root.is_perfect())}", file=out)


def _demo_sibling(out: TextIO) -> None:
    root = _family_tree()
    print_tree(root, out)
    assert root.left is not None and root.right is not None
    assert root.right.left is not None and root.left.right is not None
    for node in (root.left, root.right.left, root.left.right, root):
        print(f"Sibling of {node.value}: {_describe(node.sibling())}", file=out)


def _demo_uncle(out: TextIO) -> None:
    root = _family_tree()
    print_tree(root, out)
    assert root.left is not None and root.right is not None
    assert root.right.left is not None and root.left.right is not None
    for node in (root.right.left, root.left.right, root.left):
        print(f"Uncle of {node.value}: {_describe(node.uncle())}", file=out)


_DEMOS: dict[int, Callable[[TextIO], None]] = {
    0: _demo_node,
    1: _demo_insert_left,
    2: _demo_insert_right,
    3: _demo_delete,
    4: _demo_is_leaf,
    5: _demo_is_root,
    6: _traversal_demo(Node.preorder),
    7: _traversal_demo(Node.inorder),
    8: _traversal_demo(Node.postorder),
    9: _measure_demo("Height from", Node.height),
    10: _measure_demo("Depth of", Node.depth),
    11: _measure_demo("Size of", Node.size),
    12: _measure_demo("Leaves in", Node.leaves),
    13: _measure_demo("Nodes in", Node.internal_nodes),
    14: _demo_balance,
    15: _demo_is_full,
    16: _demo_is_perfect,
    17: _demo_sibling,
    18: _demo_uncle,
}


def run_demo(number: int, out: TextIO | None = None) -> None:
    """Run one numbered demo, writing its output to a stream (standard output by default)."""
    try:
        demo = _DEMOS[number]
    except KeyError:
        raise ValueError(f"no demo numbered {number}; choose 0 to {max(_DEMOS)}") from None
    demo(out if out is not None else sys.stdout)


def main(argv: list[str] | None = None) -> int:
    """Run the demos named on the command line, or all of them in order."""
    parser = argparse.ArgumentParser(
        prog="bintree-demo", description="Show the binary tree operations on sample trees."
    )
    parser.add_argument(
        "numbers",
        nargs="*",
        type=int,
        metavar="N",
        help=f"demo number, 0 to {max(_DEMOS)} (default: all)",
    )
    args = parser.parse_args(argv)
    numbers = args.numbers or sorted(_DEMOS)
    unknown = [n for n in numbers if n not in _DEMOS]
    if unknown:
        parser.error(f"unknown demo number: {unknown[0]}")
    for number in numbers:
        run_demo(number, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())