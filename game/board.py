import enum
import logging

from .secret_code import Code
from .ruleset import DEFAULT_RULES, PEG_SLOTS

logger = logging.getLogger(__name__)


class GameStatus(enum.Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


class Board:
    """Main game board class: owns the secret code, turn counter and scoring.

    One board is one game session. Boards cannot be copied so the secret
    only ever lives in a single place.
    """

    def __init__(
        self,
        colors=DEFAULT_RULES["num_colors"],
        tries=DEFAULT_RULES["max_attempts"],
        code=None,
        rng=None,
    ):
        """
        Initialize the board and generate the secret code.

        Range checks on ``colors`` and ``tries`` are left to the caller.

        Args:
            colors (int): Number of peg colors, pegs are 0 .. colors - 1.
            tries (int): Number of guesses allowed.
            code (list[int], optional): A known secret code instead of a
            random one.
            rng (random.Random, optional): Random source for the secret.
        """
        self.num_colors = colors
        self.max_attempts = tries
        self.secret_code = Code(code, num_colors=colors, rng=rng)
        self.current_attempt = 0
        self.is_won = False
        logger.debug("new game: %d colors, %d tries", colors, tries)

    def guess(self, pegs):
        """Score one guess and use up a turn.

        Args:
            pegs (Sequence[int]): PEG_SLOTS color numbers. Values outside
            the color range are accepted and never match.

        Returns:
            tuple[int, int, bool]: (black_keys, white_keys, is_win)
        """
        # A finished game keeps its result.
        was_over = self.is_over
        self.current_attempt += 1

        black, white = self.secret_code.compare_with(pegs)
        win = black == PEG_SLOTS
        if win and not was_over:
            self.is_won = True

        logger.debug(
            "attempt %d: black=%d white=%d, %d turns left",
            self.current_attempt,
            black,
            white,
            self.turns_left(),
        )
        return black, white, win

    def turns_left(self):
        """Return how many guesses are left."""
        return max(0, self.max_attempts - self.current_attempt)

    def reveal_secret(self):
        """Return a copy of the secret code (used at the end of the game)."""
        return self.secret_code.as_list()

    @property
    def is_over(self):
        return self.is_won or self.turns_left() <= 0

    @property
    def status(self):
        if self.is_won:
            return GameStatus.WON
        if self.is_over:
            return GameStatus.LOST
        return GameStatus.IN_PROGRESS

    def __copy__(self):
        raise TypeError("a Board is one game session and cannot be copied")

    def __deepcopy__(self, memo):
        raise TypeError("a Board is one game session and cannot be copied")
