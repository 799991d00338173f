"""Custom exceptions for boxmenu.

- BoxMenuError: Base exception for all boxmenu errors
- OutOfRangeError: Menu model mutation with an invalid position or count
"""

from typing import Optional


class BoxMenuError(Exception):
    """Base exception for all boxmenu errors.

    All boxmenu-specific exceptions inherit from this class, allowing
    callers to catch all boxmenu errors with a single except clause.
    """

    pass


class OutOfRangeError(BoxMenuError, IndexError):
    """Menu model mutation outside the current bounds.

    Raised by line removal when:
    - The position is negative or past the last line
    - A range start plus count runs past the last line

    Attributes:
        position: Requested start position
        count: Requested number of items (1 for single removals)
        size: Number of items present when the call was made
    """

    def __init__(
        self,
        message: str,
        position: Optional[int] = None,
        count: Optional[int] = None,
        size: Optional[int] = None,
    ):
        super().__init__(message)
        self.position = position
        self.count = count
        self.size = size
