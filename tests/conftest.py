import random

import pytest

from chip8vm import Machine


def assemble(*words):
    """Pack 16-bit instruction words into big-endian ROM bytes."""
    out = bytearray()
    for w in words:
        out += bytes([(w >> 8) & 0xFF, w & 0xFF])
    return bytes(out)


def run(machine, steps):
    for _ in range(steps):
        machine.step()


@pytest.fixture
def machine():
    m = Machine(rng=random.Random(1234))
    m.initialize(b"")
    return m


@pytest.fixture
def load():
    """Build an initialized machine from a list of instruction words."""
    def _load(*words):
        m = Machine(rng=random.Random(1234))
        m.initialize(assemble(*words))
        return m
    return _load
