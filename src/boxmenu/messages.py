"""Queued status messages shown above the menu on the next redraw."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

from boxmenu.palette import MenuColor
from boxmenu.utils.constants import MessageTag


class MessageKind(Enum):
    """Kinds of status message, in display order."""

    ERROR = "error"
    EXCEPTION = "exception"
    SUCCESS = "success"


_KIND_ORDER = {kind: index for index, kind in enumerate(MessageKind)}

_KIND_TAGS = {
    MessageKind.ERROR: MessageTag.ERROR,
    MessageKind.EXCEPTION: "",
    MessageKind.SUCCESS: MessageTag.SUCCESS,
}

_KIND_COLORS = {
    MessageKind.ERROR: MenuColor.ERROR_MESSAGE,
    MessageKind.EXCEPTION: MenuColor.EXCEPTION_MESSAGE,
    MessageKind.SUCCESS: MenuColor.SUCCESS_MESSAGE,
}


@dataclass(frozen=True)
class StatusMessage:
    kind: MessageKind
    text: str

    @property
    def tag(self) -> str:
        """Literal prefix; empty for raw exception messages."""
        return _KIND_TAGS[self.kind]

    @property
    def color(self) -> MenuColor:
        return _KIND_COLORS[self.kind]

    def format(self) -> str:
        return f"{self.tag}{self.text}"


class MessageQueue:
    """Pending error and success messages.

    The renderer takes the messages with drain(), which hands them over
    and leaves the queue empty for the next round.
    """

    def __init__(self):
        self._messages: list[StatusMessage] = []

    @classmethod
    def from_lists(
        cls,
        errors: Optional[Iterable[str]] = None,
        successes: Optional[Iterable[str]] = None,
    ) -> "MessageQueue":
        """Build a queue from plain lists. The lists are copied, not kept."""
        queue = cls()
        queue.errors(errors or ())
        queue.successes(successes or ())
        return queue

    def _add(self, kind: MessageKind, text: str) -> None:
        self._messages.append(StatusMessage(kind, text))

    def error(self, text: str) -> None:
        self._add(MessageKind.ERROR, text)

    def errors(self, texts: Iterable[str]) -> None:
        for text in texts:
            self.error(text)

    def exception(self, text: str) -> None:
        """Queue a raw message, shown without a tag."""
        self._add(MessageKind.EXCEPTION, text)

    def success(self, text: str) -> None:
        self._add(MessageKind.SUCCESS, text)

    def successes(self, texts: Iterable[str]) -> None:
        for text in texts:
            self.success(text)

    def peek(self) -> list[StatusMessage]:
        """Pending messages in display order, without removing them."""
        return sorted(self._messages, key=lambda m: _KIND_ORDER[m.kind])

    def drain(self) -> list[StatusMessage]:
        """Remove and return all pending messages in display order."""
        messages = self.peek()
        self._messages = []
        return messages

    def __len__(self) -> int:
        return len(self._messages)

    def __bool__(self) -> bool:
        return bool(self._messages)
