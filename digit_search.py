from parenthesise import make_options, n_shapes
from odometer import Odometer
from result_table import ResultTable
from search_config import ConfigError, SearchConfig, make_config
import sys
import time
import argparse


class DigitSearchInst:
    """
    Finds, for every value reachable from single digit operands, the fewest operands needed
    and every expression of that size that produces it.
    Each size is searched exhaustively: all shapes, all operator choices, all operand choices.
    """

    def __init__(self, config: SearchConfig):
        """
        :param config: validated SearchConfig
        """
        self.config = config
        self.table = ResultTable()

    def estimate_work(self, size):
        """
        Number of tree evaluations needed for a size.
        """
        if size <= 0:
            return 0
        return (self.config.max_number ** size) * (len(self.config.dictionary) ** (size-1)) * n_shapes(size)

    def search_size(self, size):
        """
        Evaluate every expression with size operands and feed the results to the table.
        :return number of evaluations done
        """
        composed = make_options(size, self.config.dictionary)
        if len(composed) == 0:
            return 0

        circuit = composed.circuit
        int_odometer = Odometer(circuit.ints, 1, self.config.max_number)
        op_odometer = Odometer(circuit.ops, 0, self.config.dictionary.max_index())

        evaluations = 0
        for _ in op_odometer:
            for _ in int_odometer:
                # shapes share subtrees, so cache node outputs for this assignment
                mem = {}
                for root in composed.alternatives:
                    v = circuit.run(root, mem)
                    evaluations += 1
                    if v is None:
                        # division by zero somewhere
                        continue
                    if self.table.accepts(v, size):
                        self.table.record(v, size, circuit.to_str(root))
                    else:
                        self.table.observe(v)
        return evaluations

    def search(self, verbose=False, show_shapes=False):
        """
        Search every size from 1 to max_size.
        :param verbose: Whether to print update messages (default: False)
        :param show_shapes: Whether to draw every shape of each size with treelib
        """
        start_time = time.time()
        for size in range(1, self.config.max_size+1):
            if verbose:
                print(" --- SIZE", size, "---")
                print("Shapes:", n_shapes(size))
                print("Evaluations:", self.estimate_work(size))
                sys.stdout.write("Searching... ")
                sys.stdout.flush()

            if show_shapes:
                composed = make_options(size, self.config.dictionary)
                for root in composed.alternatives:
                    composed.circuit.show(root)

            self.search_size(size)

            if verbose:
                print("done.")
                print("Values Known:", len(self.table))
                print(' ')

        if verbose:
            print(" --- Search Complete! (" + str(round(time.time()-start_time, 1)) + " s) ---\n")
        return self.table

    def report(self):
        return self.table.lines()


def main(args):
    try:
        config = make_config(args.max_number, args.max_size, args.operations)
    except ConfigError as e:
        print(e)
        return 1

    inst = DigitSearchInst(config)
    inst.search(verbose=args.verbose, show_shapes=args.show_shapes)

    for line in inst.report():
        print(line)

    if args.plot:
        inst.table.show_data()
    return 0


def get_parser():
    parser = argparse.ArgumentParser(description='Minimal size expressions over single digit operands')

    parser.add_argument('--max-number', dest='max_number', type=int, required=True,
                    help='Operands range over 1..max_number')
    parser.add_argument('--max-size', dest='max_size', type=int, required=True,
                    help='Largest number of operands in an expression')
    parser.add_argument('--operations', dest='operations', type=str, default=None,
                    help='Comma separated operations to use, from +,-,*,/ (default: all)')
    parser.add_argument('--verbose', dest='verbose', action='store_const', const=True, default=False,
                    help='Whether to print progress for each size')
    parser.add_argument('--show-shapes', dest='show_shapes', action='store_const', const=True, default=False,
                    help='Whether to draw every shape with treelib')
    parser.add_argument('--plot', dest='plot', action='store_const', const=True, default=False,
                    help='Whether to plot minimal size against value')
    return parser


def cli():
    return main(get_parser().parse_args())


if __name__ == '__main__':
    sys.exit(cli())
