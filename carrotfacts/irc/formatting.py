"""mIRC text formatting control codes."""

WHITE = 0
BLACK = 1
BLUE = 2
GREEN = 3
RED = 4
BROWN = 5
PURPLE = 6
ORANGE = 7
YELLOW = 8
LIGHT_GREEN = 9

COLOR_CODE = "\x03"
BOLD_CODE = "\x02"


def colorize(text: str, color: int) -> str:
    """Wrap ``text`` in a colour code; the colour is zero-padded to two digits."""
    return f"{COLOR_CODE}{color:02d}{text}{COLOR_CODE}"


def bold(text: str) -> str:
    return f"{BOLD_CODE}{text}{BOLD_CODE}"
