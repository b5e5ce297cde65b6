"""Key codes, terminal escape sequences and defaults."""

from readchar import key

# Keys delivered by readchar.readchar() in raw mode
ENTER_KEYS = frozenset({key.CR, key.LF})
CLEAR_KEYS = frozenset({key.BACKSPACE, "\x08"})
QUIT_KEYS = frozenset({key.ESC, key.CTRL_C})

# ANSI sequences
CLEAR_LINE = "\x1b[2K"
CURSOR_UP = "\x1b[1A"
CURSOR_COLUMN = "\x1b[{}G"

BANNER = "Press enter to add your word to a dictionary, backspace to erase and escape to exit."

LOGGER_NAME = "autocomplete"
