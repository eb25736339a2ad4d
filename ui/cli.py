# Command-line interface (text-based play)
import logging

from game.board import Board
from game.guess import Guess
from game.ruleset import PEG_SLOTS

logger = logging.getLogger(__name__)


def read_pegs(input_fn, prompt, pending=()):
    """
    Collect at least PEG_SLOTS whitespace-separated tokens on top of the
    pending ones, reading as many lines as needed. Raises EOFError when input
    runs out first.
    """
    tokens = list(pending)
    while len(tokens) < PEG_SLOTS:
        tokens += input_fn("" if tokens else prompt).split()
    return tokens


def gameloop(colors, tries, board=None, input_fn=input):
    """
    Play one game on the console.

    Args:
        colors (int): Number of peg colors, already clamped by the caller.
        tries (int): Number of guesses allowed.
        board (Board, optional): A prepared board, mostly for tests.
        input_fn (callable): Reads one line of input.

    Returns:
        int: The process exit status.
    """
    b = board or Board(colors=colors, tries=tries)
    highest = colors - 1

    print(
        f"The game is starting. You can try {tries} turns to guess the "
        f"{PEG_SLOTS} hidden numbers."
    )
    print(f"Each hidden number is from 0 to {highest}.")

    prompt = (
        f"Please input {PEG_SLOTS} numbers[0 -- {highest}] "
        "separated by whitespace: "
    )
    pending = []
    while b.turns_left() > 0:
        try:
            pending = read_pegs(input_fn, prompt, pending)
        except EOFError:
            print("\nNo more input. Exiting game.")
            return 0
        tokens, pending = pending[:PEG_SLOTS], pending[PEG_SLOTS:]

        # Checked here so a typo does not cost a turn
        guess = Guess(tokens, num_colors=colors)
        try:
            guess.validate()
        except ValueError as e:
            print(f"Invalid input: {e}")
            pending = []
            continue

        black, white, won = b.guess(guess.get_guess())
        logger.info("guess %s -> black=%d white=%d", guess, black, white)
        if won:
            print("Congratulations! You win!")
            return 0
        print(f"Black keys: {black}, White keys: {white}")

    print("Sorry! You lost!")
    print("The hidden pegs: " + " ".join(str(p) for p in b.reveal_secret()))
    return 0
