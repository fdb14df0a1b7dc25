from dataclasses import dataclass
from treelib import Tree as TreeTree
import numpy as np


def _truncated_div(a, b):
    # integer division rounding toward zero, None when undefined
    if b == 0:
        return None
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        return -q
    return q

class OpInfo():
    # struct describing arithmetic operations
    def __init__(self, func, name, symbol):
        self.func = func # func pointer/lambda
        self.name = name # string
        self.symbol = symbol # string used when rendering
    def __repr__(self):
        return "OpInfo(" + self.name + ")"
class _OperationHolder():
    # fake enum
    def __init__(self):
        self.ADD = OpInfo(lambda a, b: a+b, "ADD", "+")
        self.SUB = OpInfo(lambda a, b: a-b, "SUB", "-")
        self.MULT = OpInfo(lambda a, b: a*b, "MULT", "*")
        self.DIV = OpInfo(_truncated_div, "DIV", "/")
    def all(self):
        return [self.ADD, self.SUB, self.MULT, self.DIV]
    def from_symbol(self, symbol):
        for op in self.all():
            if op.symbol == symbol:
                return op
        return None
OPERATIONS = _OperationHolder() # instantiate enum


class OperationDictionary:
    """
    Ordered list of the operations a search may use.
    The position of an operation is what gets stored in a circuit's operator slots.
    """

    def __init__(self, operations):
        """
        :param operations: list of OpInfo, in enumeration order
        """
        if len(operations) == 0:
            raise ValueError('OperationDictionary needs at least one operation!')
        self.operations = list(operations)

    def operation(self, index):
        return self.operations[index]

    def max_index(self):
        return len(self.operations) - 1

    def __len__(self):
        return len(self.operations)


@dataclass(frozen=True)
class ArenaNode:
    """
    One node of a circuit. Leaves read an operand slot, other nodes combine two children
    with the operation found in an operator slot.
    """
    is_leaf: bool # whether node is a leaf
    slot: int # operand slot if is_leaf, else operator slot
    op_a: int # index of left child (-1 for leaves)
    op_b: int # index of right child (-1 for leaves)
    ind: int # index of self


class Circuit:
    """
    Arena holding the operand slots, the operator slots and every node built over them.
    Nodes never change once created; only the slots they reference do, so a node can be
    shared between any number of parents.
    """

    def __init__(self, n_ints, n_ops, dictionary: OperationDictionary):
        """
        :param n_ints: number of operand slots
        :param n_ops: number of operator slots
        :param dictionary: OperationDictionary the operator slots index into
        """
        self.dictionary = dictionary
        self.ints = np.ones(max(n_ints, 0), dtype=np.int64) # operand slots
        self.ops = np.zeros(max(n_ops, 0), dtype=np.int64) # operator slots (dictionary indexes)
        self.nodes = [] # every ArenaNode, indexed by ArenaNode.ind

    def leaf(self, slot):
        """
        Add a leaf reading operand slot slot.
        :return index of the new node
        """
        if slot < 0 or slot >= self.ints.shape[0]:
            raise IndexError('Operand slot ' + str(slot) + ' out of range!')
        node = ArenaNode(True, slot, -1, -1, len(self.nodes))
        self.nodes.append(node)
        return node.ind

    def binary(self, slot, op_a, op_b):
        """
        Add a node combining op_a and op_b with the operation in operator slot slot.
        :return index of the new node
        """
        if slot < 0 or slot >= self.ops.shape[0]:
            raise IndexError('Operator slot ' + str(slot) + ' out of range!')
        if op_a >= len(self.nodes) or op_b >= len(self.nodes):
            raise IndexError('Children must exist before their parent!')
        node = ArenaNode(False, slot, op_a, op_b, len(self.nodes))
        self.nodes.append(node)
        return node.ind

    def operation_at(self, slot):
        return self.dictionary.operation(int(self.ops[slot]))

    def run(self, ind, mem=None):
        """
        Recursively evaluate the tree rooted at ind with the current slot values.
        :param ind: index of root node
        :param mem: optional dict caching node outputs for one set of slot values
        :return integer result, or None if a division by zero happens anywhere in the tree
        """
        if mem is not None and ind in mem:
            return mem[ind]

        node = self.nodes[ind]
        if node.is_leaf:
            # python ints so products never wrap
            answer = int(self.ints[node.slot])
        else:
            answer = None
            a = self.run(node.op_a, mem)
            if a is not None:
                b = self.run(node.op_b, mem)
                if b is not None:
                    answer = self.operation_at(node.slot).func(a, b)

        if mem is not None:
            mem[ind] = answer
        return answer

    def to_str(self, ind):
        """
        Render the tree rooted at ind fully parenthesised, ex. ((1+2)*3)
        """
        node = self.nodes[ind]
        if node.is_leaf:
            return str(int(self.ints[node.slot]))
        return "(" + self.to_str(node.op_a) + self.operation_at(node.slot).symbol + self.to_str(node.op_b) + ")"

    def size(self, ind):
        # number of leaves under ind
        node = self.nodes[ind]
        if node.is_leaf:
            return 1
        return self.size(node.op_a) + self.size(node.op_b)

    def to_tree(self, ind, tree=None, parent=None):
        """
        Build a treelib Tree of the tree rooted at ind.
        :param ind: index of root node
        :param tree: Instantiated tree object
        :param parent: Pointer back to parent TreeNode
        NOTE: tree and parent are intended for internal use
        """
        my_tree = tree
        if tree is None:
            my_tree = TreeTree()
        node = self.nodes[ind]
        if node.is_leaf:
            my_name = str(int(self.ints[node.slot]))
        else:
            my_name = self.operation_at(node.slot).symbol
        my_node = my_tree.create_node(my_name, parent=parent)
        if not node.is_leaf:
            self.to_tree(node.op_a, tree=my_tree, parent=my_node)
            self.to_tree(node.op_b, tree=my_tree, parent=my_node)
        return my_tree

    def show(self, ind):
        """
        Use treelib to visualize the tree rooted at ind in the terminal.
        """
        self.to_tree(ind).show()
