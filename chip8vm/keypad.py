import numpy as np

from . import config


class Keypad:
    """Input latch: one flag per logical key 0x0-0xF, written by the host."""

    def __init__(self):
        self.keys = np.zeros(config.num_keys, dtype=np.uint8)

    def press(self, key):
        self.keys[key & 0xF] = 1

    def release(self, key):
        self.keys[key & 0xF] = 0

    def set(self, key, pressed):
        self.keys[key & 0xF] = 1 if pressed else 0

    def is_pressed(self, key):
        return bool(self.keys[key & 0xF])

    def clear(self):
        self.keys[:] = 0

    def mask(self):
        """16-bit snapshot of the latch, bit k set while key k is down."""
        bits = self.keys.astype(np.uint16) << np.arange(config.num_keys, dtype=np.uint16)
        return int(bits.sum())
