class Chip8Error(Exception):
    """Base class for errors raised by the interpreter."""


class RomTooLarge(Chip8Error):
    """The program image does not fit between the entry point and the end of memory."""

    def __init__(self, size, limit):
        super().__init__(f"ROM is {size} bytes, the limit is {limit} bytes")
        self.size = size
        self.limit = limit
