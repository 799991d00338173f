"""Constants used throughout boxmenu."""

# Frame glyphs
CORNER_CHAR = "+"
FILL_CHAR = "-"
BORDER_CHAR = "|"

# Columns reserved for the vertical borders of a framed line
BORDER_COLUMNS = 2

# Option keys are padded to this many columns before the label
KEY_COLUMN_WIDTH = 5

# Shown when a menu has no prompt of its own
DEFAULT_PROMPT = "Enter an option: "

# Used when the console cannot report a width (redirected output)
DEFAULT_FALLBACK_WIDTH = 80


class MessageTag:
    """Prefixes for queued status messages."""

    ERROR = "[ERROR]: "
    SUCCESS = "[SUCCESS]: "


INVALID_CHOICE_TEMPLATE = 'Invalid choice: "{choice}"'
