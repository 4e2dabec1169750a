from .errors import Chip8Error, RomTooLarge
from .machine import Machine

__all__ = ["Machine", "Chip8Error", "RomTooLarge"]
