# Configuration: code length, color range and attempt limits.
PEG_SLOTS = 4
MIN_PEG_COLORS = 2
MAX_PEG_COLORS = MIN_PEG_COLORS + 8
MIN_TRIES_ALLOWED = 2

DEFAULT_RULES = {
    "code_length": PEG_SLOTS,  # Number of pegs in the code
    "num_colors": 8,  # Pegs are numbered 0 .. num_colors - 1
    "max_attempts": 10,  # Guesses per game, at least MIN_TRIES_ALLOWED
}
