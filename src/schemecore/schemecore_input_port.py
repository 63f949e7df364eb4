"""Textual input port reading from an in-memory string."""


class SchemeStringInputPort:
    """
    Sequential character reader over a string.

    Tracks a read position and a 1-indexed line number.  Characters can be
    pushed back one at a time, and the position can be queried and set
    because the whole buffer is in memory.
    """

    def __init__(self, text: str) -> None:
        self._buffer = text
        self._index = 0
        self._line_no = 1
        self._closed = False

    def get_char(self) -> str | None:
        """
        Read the next character.

        Returns:
            The character, or None at end of stream
        """
        if self._index >= len(self._buffer):
            return None

        c = self._buffer[self._index]
        self._index += 1
        if c == '\n':
            self._line_no += 1

        return c

    def unget_char(self, c: str | None) -> None:
        """
        Push back the character most recently read.

        Pushing back end of stream is a no-op.
        """
        if c is None or self._index == 0:
            return

        if c == '\n':
            self._line_no -= 1

        self._index -= 1

    def look_ahead_char(self) -> str | None:
        """Return the next character without consuming it."""
        c = self.get_char()
        self.unget_char(c)
        return c

    def to_string(self) -> str:
        return "<string input port>"

    def close(self) -> int:
        self._closed = True
        return 0

    def is_closed(self) -> bool:
        return self._closed

    def has_position(self) -> bool:
        return True

    def has_set_position(self) -> bool:
        return True

    def position(self) -> int:
        return self._index

    def set_position(self, position: int) -> bool:
        """
        Move the read position.

        Args:
            position: Zero-based character offset

        Returns:
            False if the position lies outside the buffer, True otherwise
        """
        if position < 0 or position >= len(self._buffer):
            return False

        self._index = position
        self._line_no = self._buffer.count('\n', 0, position) + 1
        return True

    def line_no(self) -> int:
        return self._line_no
