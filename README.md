# bintree

A small library of linked binary tree nodes. Every node knows its parent and
its two children, so it can answer questions about itself and the subtree
below it: traversals, height, depth, size, leaf counts, balance, whether the
tree is full or perfect, and who its sibling and uncle are. Trees can be drawn
as ASCII art.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Building a tree

`bintree.node.Node` is the only class you need. `Node(value)` makes a root;
the methods below make children and return the new node.

- `add_left(value)` / `add_right(value)` put a new child in that slot. A child
  already there is detached (its `parent` is cleared).
- `insert_left(value)` / `insert_right(value)` insert a new child in that slot;
  a child already there moves down to become the new node's child on the same
  side.
- `delete()` takes the whole subtree apart: it is unlinked from its parent and
  every node in it loses its parent and child links.

```python
from bintree.node import Node
from bintree.printing import print_tree, render

root = Node(98)
left = root.add_left(12)
right = root.add_right(402)
left.insert_right(54)
root.insert_right(128)

print_tree(root)
```

## Asking questions

| Method | Answer |
| --- | --- |
| `preorder()`, `inorder()`, `postorder()` | generators of the stored values, in that traversal order |
| `height()` | edges on the longest path down to a leaf (0 for a leaf) |
| `depth()` | edges up to the root (0 for the root) |
| `size()` | number of nodes in the subtree |
| `leaves()` | number of nodes without children |
| `internal_nodes()` | number of nodes with at least one child |
| `balance()` | height of the left subtree minus height of the right subtree |
| `is_leaf()`, `is_root()` | whether the node has no children / no parent |
| `is_full()` | every node has zero or two children |
| `is_perfect()` | every inner node has two children and all leaves are on the same level |
| `sibling()`, `uncle()` | the other child of the parent / the parent's sibling, or `None` |

## Drawing

`bintree.printing.render(tree)` returns the drawing as a string, one
newline-terminated line per level (an empty string for `None`);
`print_tree(tree, file)` writes it to a text stream, standard output when
`file` is omitted. Each value is shown zero-padded to three digits in
parentheses, with the branches drawn above:

```
       .-------(098)-------.
  .--(012)--.         .--(402)--.
(006)     (016)     (256)     (512)
```

## Demonstrations

The package ships nineteen numbered walkthroughs, 0 to 18, each building a
sample tree, printing it and then reporting on one feature (building,
inserting, deleting, the node checks, the traversals, the measures, the shape
checks, siblings and uncles). Run one or more by number, or all of them in
order with no arguments:

```
bintree-demo 16
bintree-demo
```

From Python, `bintree.demo.run_demo(number, out)` writes the same output to
any text stream (standard output by default) and raises `ValueError` for an
unknown number.