import numpy as np


class Odometer:
    """
    Mixed-radix counter over an existing integer array.
    Every digit runs from low to high (inclusive), the first digit turning fastest,
    so each of the (high-low+1)^n combinations is visited exactly once.
    The array is shared, not copied: whoever else holds it sees every step.
    """

    def __init__(self, digits: np.ndarray, low, high):
        """
        :param digits: 1 dimensional numpy integer array to drive
        :param low: smallest value of a digit
        :param high: largest value of a digit
        """
        if digits.ndim != 1:
            raise ValueError('Odometer digits must be 1 dimensional!')
        if low > high:
            raise ValueError('Odometer needs low <= high, got ' + str(low) + ' > ' + str(high))
        self.digits = digits
        self.low = low
        self.high = high
        self.reset()

    def reset(self):
        self.digits[:] = self.low

    def step(self):
        """
        Move to the next combination.
        :return False once every combination has been seen (digits are back at low), else True
        """
        i = 0
        # carry past digits that are already maxed out
        while i < self.digits.shape[0] and self.digits[i] == self.high:
            self.digits[i] = self.low
            i += 1
        if i < self.digits.shape[0]:
            self.digits[i] += 1
            return True
        return False

    def __iter__(self):
        """
        Reset, then yield once per combination (the digits hold that combination while yielded).
        """
        self.reset()
        while True:
            yield self.digits
            if not self.step():
                return
