from dataclasses import dataclass
from circuit import OPERATIONS, OperationDictionary

# operations used when none are given, in enumeration order
DEFAULT_OPERATIONS = "+,-,*,/"

# symbols accepted in an operations list
ALLOWED_SYMBOLS = [op.symbol for op in OPERATIONS.all()]


class ConfigError(ValueError):
    """
    Raised when a search is configured with values it cannot run with.
    """
    pass


@dataclass(frozen=True)
class SearchConfig:
    max_number: int # operands range over 1..max_number
    max_size: int # largest number of operands to try
    dictionary: OperationDictionary # operations to combine operands with


def parse_operations(operations):
    """
    Turn a comma separated list of symbols into an OperationDictionary.
    :param operations: string like "+,*", or None for DEFAULT_OPERATIONS
    """
    if operations is None:
        operations = DEFAULT_OPERATIONS
    symbols = operations.split(",")
    ops = [OPERATIONS.from_symbol(s) for s in symbols]
    if None in ops:
        raise ConfigError(
            "unrecognised operations found, allowed=[" + ",".join(ALLOWED_SYMBOLS) + "], provided=" + str(symbols)
        )
    return OperationDictionary(ops)


def make_config(max_number, max_size, operations=None):
    """
    Validate search parameters.
    :param max_number: largest operand value, must be > 0
    :param max_size: largest number of operands, must be >= 0 (0 finds nothing)
    :param operations: comma separated operation symbols (default: all four)
    :return SearchConfig
    """
    if max_number <= 0:
        raise ConfigError("max_number must be > 0, was " + str(max_number))
    if max_size < 0:
        raise ConfigError("max_size must be >= 0, was " + str(max_size))
    return SearchConfig(max_number, max_size, parse_operations(operations))
