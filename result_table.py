from dataclasses import dataclass, field
import json
import matplotlib.pyplot as plt


@dataclass
class TableEntry:
    """
    Best known way of making one value
    """
    size: int # minimal number of operands found so far
    exprs: list = field(default_factory=list) # distinct expressions of that size, in order found


class ResultTable:
    """
    Maps each value reached during a search to the smallest expressions that produce it.
    """

    def __init__(self):
        self.lib = {} # dict mapping value -> TableEntry
        self.max_observed = 0 # largest value seen at any size

    def accepts(self, value, size):
        # whether an expression of this size for value would be stored
        entry = self.lib.get(value)
        return entry is None or entry.size >= size

    def record(self, value, size, expr):
        """
        Offer an expression to the table.
        :param value: what the expression evaluates to
        :param size: number of operands in the expression
        :param expr: rendered expression
        :return True if expr was stored
        """
        if value > self.max_observed:
            self.max_observed = value

        entry = self.lib.get(value)
        if entry is None or entry.size > size:
            # new value, or strictly smaller than anything seen
            self.lib[value] = TableEntry(size, [expr])
            return True
        if entry.size == size and expr not in entry.exprs:
            entry.exprs.append(expr)
            return True
        return False

    def observe(self, value):
        # track a value without storing anything for it
        if value > self.max_observed:
            self.max_observed = value

    def line(self, value):
        entry = self.lib.get(value)
        if entry is None:
            return str(value) + " -> None"
        return str(value) + " -> (" + str(entry.size) + ") " + json.dumps(entry.exprs)

    def lines(self):
        """
        One report line per value from 1 to the largest value seen.
        """
        return [self.line(v) for v in range(1, self.max_observed+1)]

    def show_data(self, filename=None):
        """
        Scatter each value in the report range against its minimal size.
        :param filename: save the figure here instead of opening a window
        """
        values = []
        sizes = []
        for v in range(1, self.max_observed+1):
            if v in self.lib:
                values.append(v)
                sizes.append(self.lib[v].size)
        plt.scatter(values, sizes)
        plt.xlabel("value")
        plt.ylabel("minimal size")
        if filename is None:
            plt.show()
        else:
            plt.savefig(filename)
        plt.close()

    def __contains__(self, value):
        return value in self.lib

    def __getitem__(self, value):
        return self.lib[value]

    def __len__(self):
        return len(self.lib)
