import io
import re

import pytest

from bintree.demo import main, run_demo
from bintree.node import Node
from bintree.printing import render


def _capture(number):
    out = io.StringIO()
    run_demo(number, out)
    return out.getvalue()


def _basic():
    root = Node(98)
    root.add_left(12)
    root.add_right(402)
    return root


def _sample():
    root = _basic()
    root.left.insert_right(54)
    root.insert_right(128)
    return root


def _complete(a, b):
    root = _basic()
    root.left.add_left(a)
    root.left.add_right(b)
    root.right.add_left(256)
    root.right.add_right(512)
    return root


def _after_drawing(text, tree):
    drawing = render(tree)
    assert text.startswith(drawing)
    return text[len(drawing):].splitlines()


def test_demo_0_is_the_drawing_of_the_tree():
    assert _capture(0) == render(_complete(6, 16))


def test_demo_1_draws_before_and_after_insert_left():
    before = _basic()
    after = _basic()
    after.right.insert_left(128)
    after.insert_left(54)
    assert _capture(1) == render(before) + "\n" + render(after)


def test_demo_2_draws_before_and_after_insert_right():
    before = _basic()
    assert _capture(2) == render(before) + "\n" + render(_sample())


def test_demo_3_only_draws():
    assert _capture(3) == render(_sample())


def test_demo_4_leaf_flags():
    lines = _after_drawing(_capture(4), _sample())
    assert lines == [
        "Is 98 a leaf: 0",
        "Is 128 a leaf: 0",
        "Is 402 a leaf: 1",
    ]


def test_demo_5_only_the_root_is_a_root():
    lines = _after_drawing(_capture(5), _sample())
    flags = [line.rsplit(": ", 1)[1] for line in lines]
    assert flags == ["1", "0", "0"]
    assert lines[0].startswith("Is 98 a root")


def test_demo_6_preorder_starts_at_root():
    lines = _after_drawing(_capture(6), _complete(6, 56))
    values = [int(line) for line in lines]
    assert values[0] == 98
    assert sorted(values) == sorted([98, 12, 402, 6, 56, 256, 512])


def test_demo_7_inorder_of_search_tree_is_sorted():
    lines = _after_drawing(_capture(7), _complete(6, 56))
    values = [int(line) for line in lines]
    assert values == sorted([98, 12, 402, 6, 56, 256, 512])


def test_demo_8_postorder_ends_at_root():
    lines = _after_drawing(_capture(8), _complete(6, 56))
    values = [int(line) for line in lines]
    assert values[-1] == 98
    assert values[0] == 6
    assert len(values) == 7


@pytest.mark.parametrize(
    "number, label",
    [(9, "Height from"), (10, "Depth of"), (11, "Size of"), (12, "Leaves in"), (13, "Nodes in")],
)
def test_measure_demos_report_three_nodes(number, label):
    lines = _after_drawing(_capture(number), _sample())
    assert len(lines) == 3
    names = [re.fullmatch(rf"{label} (\d+): (\d+)", line).group(1) for line in lines]
    assert names == ["98", "128", "54"]


def test_demo_10_root_depth_is_zero():
    lines = _after_drawing(_capture(10), _sample())
    assert lines[0] == "Depth of 98: 0"


def test_demo_11_root_size_counts_every_drawn_node():
    text = _capture(11)
    lines = _after_drawing(text, _sample())
    root_size = int(lines[0].rsplit(": ", 1)[1])
    assert root_size == render(_sample()).count("(")


def test_demo_14_balances_are_signed():
    lines = _capture(14).splitlines()[-3:]
    for line in lines:
        assert re.fullmatch(r"Balance of \d+: [+-]\d+", line)
    assert lines[0].startswith("Balance of 98: ")


def test_demo_15_root_is_not_full():
    lines = _capture(15).splitlines()[-3:]
    assert lines[0] == "Is 98 full: 0"


def test_demo_17_root_has_no_sibling():
    lines = _capture(17).splitlines()[-4:]
    assert lines[-1] == "Sibling of 98: (nil)"
    assert lines[0] == "Sibling of 12: 128"


def test_demo_18_children_of_root_have_no_uncle():
    lines = _capture(18).splitlines()[-3:]
    assert lines[-1] == "Uncle of 12: (nil)"
    assert lines[0] == "Uncle of 110: 12"


@pytest.mark.parametrize("number", [-1, 19, 100])
def test_unknown_demo_number_raises(number):
    with pytest.raises(ValueError):
        run_demo(number, io.StringIO())


def test_main_runs_named_demo(capsys):
    assert main(["4"]) == 0
    assert capsys.readouterr().out == _capture(4)


def test_main_runs_all_demos_in_order(capsys):
    assert main([]) == 0
    output = capsys.readouterr().out
    assert output == "".join(_capture(n) for n in range(19))


def test_main_rejects_unknown_number(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["99"])
    assert excinfo.value.code == 2
    assert "99" in capsys.readouterr().err