from .ruleset import DEFAULT_RULES


class Guess:
    """
        Represents a single player guess read from the console.
    Attributes:
        tokens (list[str]): The raw whitespace-separated tokens.
        sequence (list[int]): The parsed color numbers (empty until valid).
        num_colors (int): Allowed pegs are 0 .. num_colors - 1.
        is_valid (bool): Whether the guess is valid according to the rules."""

    def __init__(
        self, tokens: list[str] | str | None, num_colors=None, rules=None
    ):
        """
        Initialize a Guess instance.
        Args:
            tokens (list[str] | str | None): The guessed pegs, either a line
            of text or already split tokens.
            num_colors (int, optional): Number of colors in play. Defaults to
            the ruleset value.
            rules (dict, optional): The ruleset for validation. Defaults to
            DEFAULT_RULES.
        """

        # --- Input normalization ---
        if isinstance(tokens, str):
            self.tokens = tokens.split()
        elif tokens is None:
            self.tokens = []
        else:
            self.tokens = [str(t).strip() for t in tokens]

        # --- Attribute setup ---
        self.rules = rules or DEFAULT_RULES
        self.num_colors = num_colors or self.rules["num_colors"]
        self.sequence = []
        self.is_valid = False

        # --- Validation ---
        if self.tokens:
            self.is_valid = self.validate(strict=False)

    def validate(self, strict: bool = True):
        """
        Check if the guess follows the rules (length, numbers, color range).
        Fills in ``sequence`` on success.

        Args:
            strict (bool): If True, raise ValueError on invalid guess.
        Returns:
            bool: True if valid, False otherwise.
        """

        def fail(msg: str) -> bool:
            if strict:
                raise ValueError(msg)
            return False

        # Length check
        if len(self.tokens) != self.rules["code_length"]:
            return fail(
                f"Expected {self.rules['code_length']} numbers, "
                f"but got {len(self.tokens)}."
            )

        # Number and range check
        highest = self.num_colors - 1
        pegs = []
        for token in self.tokens:
            try:
                peg = int(token)
            except ValueError:
                return fail(f"'{token}' is not a number.")
            if not 0 <= peg <= highest:
                return fail(f"Invalid color '{peg}'. Allowed: 0 -- {highest}.")
            pegs.append(peg)

        self.sequence = pegs
        return True

    def get_guess(self):
        """
        Return the parsed guess.

        Returns:
            list[int]: The guess sequence."""
        return self.sequence

    def as_string(self):
        if not self.sequence:
            return "EMPTY"
        return " ".join(str(c) for c in self.sequence)

    def __str__(self):
        return self.as_string()
