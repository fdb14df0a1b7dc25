import pytest
from circuit import OPERATIONS, OperationDictionary, Circuit


def make_circuit(symbols="+,-,*,/"):
    ops = [OPERATIONS.from_symbol(s) for s in symbols.split(",")]
    return Circuit(2, 1, OperationDictionary(ops))


def test_leaf_reads_slot():
    c = make_circuit()
    leaf = c.leaf(0)
    c.ints[0] = 7
    assert c.run(leaf) == 7
    assert c.to_str(leaf) == "7"
    assert c.size(leaf) == 1


@pytest.mark.parametrize("index, a, b, value, text", [
    (0, 7, 2, 9, "(7+2)"),
    (1, 2, 7, -5, "(2-7)"),
    (2, 7, 2, 14, "(7*2)"),
    (3, 7, 2, 3, "(7/2)"),
])
def test_binary_node(index, a, b, value, text):
    c = make_circuit()
    root = c.binary(0, c.leaf(0), c.leaf(1))
    c.ints[0] = a
    c.ints[1] = b
    c.ops[0] = index
    assert c.run(root) == value
    assert c.to_str(root) == text
    assert c.size(root) == 2


def test_division_truncates_toward_zero():
    div = OPERATIONS.DIV.func
    assert div(7, 2) == 3
    assert div(-7, 2) == -3
    assert div(7, -2) == -3
    assert div(-7, -2) == 3


def test_division_by_zero_is_undefined_and_propagates():
    ops = OperationDictionary([OPERATIONS.SUB, OPERATIONS.DIV])
    c = Circuit(3, 2, ops)
    a, b, d = c.leaf(0), c.leaf(1), c.leaf(2)
    diff = c.binary(1, b, d) # (b-d)
    root = c.binary(0, a, diff) # a / (b-d)
    c.ops[0] = 1
    c.ops[1] = 0
    c.ints[:] = [4, 3, 3]
    assert c.run(diff) == 0
    assert c.run(root) is None
    c.ints[2] = 1
    assert c.run(root) == 2


def test_products_widen_instead_of_wrapping():
    ops = OperationDictionary([OPERATIONS.MULT])
    c = Circuit(2, 1, ops)
    root = c.binary(0, c.leaf(0), c.leaf(1))
    c.ints[:] = 2 ** 40
    assert c.run(root) == 2 ** 80


def test_shared_subtree_sees_slot_changes():
    c = make_circuit()
    a, b = c.leaf(0), c.leaf(1)
    first = c.binary(0, a, b)
    second = c.binary(0, b, a)
    c.ints[:] = [1, 2]
    assert c.to_str(first) == "(1+2)"
    assert c.to_str(second) == "(2+1)"
    c.ops[0] = 2
    c.ints[0] = 3
    assert c.run(first) == 6
    assert c.to_str(second) == "(2*3)"


def test_mem_caches_per_assignment():
    c = make_circuit()
    root = c.binary(0, c.leaf(0), c.leaf(1))
    mem = {}
    assert c.run(root, mem) == 2
    assert mem[root] == 2
    # stale cache is returned as is
    c.ints[0] = 5
    assert c.run(root, mem) == 2
    assert c.run(root) == 6


def test_bad_slots_raise():
    c = make_circuit()
    with pytest.raises(IndexError):
        c.leaf(2)
    with pytest.raises(IndexError):
        c.binary(1, 0, 0)
    with pytest.raises(IndexError):
        c.binary(0, 5, 6)


def test_empty_dictionary_raises():
    with pytest.raises(ValueError):
        OperationDictionary([])


def test_from_symbol():
    assert OPERATIONS.from_symbol("*") is OPERATIONS.MULT
    assert OPERATIONS.from_symbol("%") is None


def test_to_tree_matches_shape():
    c = Circuit(3, 2, OperationDictionary([OPERATIONS.ADD, OPERATIONS.MULT]))
    a, b, d = c.leaf(0), c.leaf(1), c.leaf(2)
    root = c.binary(1, c.binary(0, a, b), d)
    c.ints[:] = [1, 2, 3]
    c.ops[:] = [0, 1]
    tree = c.to_tree(root)
    assert tree.size() == 5
    assert tree.depth() == 2
    assert tree[tree.root].tag == "*"
    assert sorted(n.tag for n in tree.leaves()) == ["1", "2", "3"]
