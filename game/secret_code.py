import random
import time

from .ruleset import PEG_SLOTS


class Code:
    """
        Represents the hidden peg sequence of one Mastermind game.
    Attributes:
        sequence (list[int]): The color numbers of the hidden pegs.
        num_colors (int): Pegs are drawn from 0 .. num_colors - 1."""

    def __init__(self, sequence=None, num_colors=8, rng=None):
        """
        Initialize a Code instance.

        Args:
            sequence (list[int] or None): A known code. When None, a random
            code is generated.
            num_colors (int): Number of colors a generated peg is drawn from.
            rng (random.Random or None): Random source owned by this code.
            A new one seeded from the clock is created when None.
        """

        self.num_colors = num_colors
        self._rng = rng or random.Random(time.time_ns())
        if sequence is None:
            self.sequence = self.generate_random()
        else:
            self.sequence = [int(c) for c in sequence]

    def generate_random(self):
        """
        Draw PEG_SLOTS independent pegs uniformly from [0, num_colors).

        Returns:
            list[int]: The generated sequence.
        """

        return [self._rng.randrange(self.num_colors) for _ in range(PEG_SLOTS)]

    def compare_with(self, pegs) -> tuple[int, int]:
        """
        Compare this secret code with a guessed peg sequence and compute
        Mastermind-style feedback.

        Args:
            pegs (Sequence[int]): The guessed sequence, same length as the
            code. Values outside the color range never match.

        Returns:
            tuple[int, int]: (black, white)
            black: number of pegs with correct color in the correct position,
            white: number of pegs with correct color but in the wrong
            position.

        Notes:
            Positions counted as black are excluded from white-counting.
            White pegs are matched greedily: each guess peg takes the first
            still unmatched code peg of the same color, left to right.
        """

        black = 0
        white = 0

        remaining_code = self.sequence[:]
        remaining_guess = list(pegs)

        # Color and position.
        for i in range(len(self.sequence)):
            if self.sequence[i] == remaining_guess[i]:
                black += 1
                remaining_guess[i] = None
                remaining_code[i] = None

        # Color only. 0 is a valid color, so test against None explicitly.
        for color in remaining_guess:
            if color is not None and color in remaining_code:
                white += 1
                remaining_code[remaining_code.index(color)] = None

        return (black, white)

    def as_list(self):
        """Return a copy of the code sequence."""
        return list(self.sequence)

    def __eq__(self, other):
        """
        Check equality between this Code and another object.

        Args:
            other (Code or list): A Code instance or a list to compare against.

        Returns:
            bool: True if the sequences are equal, False otherwise.
        """

        if isinstance(other, Code):
            return self.sequence == other.sequence
        if isinstance(other, list):
            return self.sequence == other
        return False
