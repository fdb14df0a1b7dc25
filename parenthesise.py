from circuit import Circuit, OperationDictionary


def n_shapes(leaves, mem=None):
    """
    Return the number of possible tree shapes with the given number of leaves
    (the Catalan number of leaves-1).
    """
    if leaves <= 0:
        return 0
    if mem == None:
        mem = {}
    if leaves in mem.keys():
        return mem[leaves]

    answer = None
    if leaves == 1:
        answer = 1
    else:
        answer = sum([
            n_shapes(a, mem) * n_shapes(leaves-a, mem) for a in range(1, leaves)
        ])

    mem[leaves] = answer
    return answer


def calculate_parenthesisations(circuit: Circuit, left, right, leaves, mem=None):
    """
    Find every way to fully parenthesise the leaves in [left, right).
    The split at leaf i always uses operator slot i-1, so each operator slot appears exactly once per tree.
    :param circuit: Circuit to add the new nodes to
    :param left: first leaf position (inclusive)
    :param right: last leaf position (exclusive)
    :param leaves: list of leaf node indexes, one per operand slot
    :param mem: dict (left, right) -> shapes, so sub-ranges are only built once
    :return list of root node indexes
    """
    if mem == None:
        mem = {}
    if (left, right) in mem.keys():
        return mem[(left, right)]

    if left + 1 == right:
        result = [leaves[left]]

    elif left + 2 == right:
        result = [circuit.binary(left, leaves[left], leaves[left+1])]

    else:
        result = []
        for i in range(left+1, right):
            left_combinations = calculate_parenthesisations(circuit, left, i, leaves, mem)
            right_combinations = calculate_parenthesisations(circuit, i, right, leaves, mem)
            # every left shape against every right shape
            for left_node in left_combinations:
                for right_node in right_combinations:
                    result.append(circuit.binary(i-1, left_node, right_node))

    mem[(left, right)] = result
    return result


class Composed:
    """
    A circuit of a given size together with every shape that can be built over its slots.
    """

    def __init__(self, size, dictionary: OperationDictionary):
        """
        :param size: number of operands
        :param dictionary: OperationDictionary the operator slots index into
        """
        self.size = size
        self.circuit = Circuit(size, size-1, dictionary)
        self.leaves = [self.circuit.leaf(i) for i in range(size)]
        # size 0 has nothing to parenthesise
        self.alternatives = []
        if size > 0:
            self.alternatives = calculate_parenthesisations(self.circuit, 0, size, self.leaves)

    def __len__(self):
        return len(self.alternatives)


def make_options(size, dictionary: OperationDictionary):
    return Composed(size, dictionary)
