import random

from . import config, cpu
from .config import log
from .errors import Chip8Error, RomTooLarge
from .framebuffer import Framebuffer
from .keypad import Keypad
from .memory import Memory
from .state import MachineState


class Machine:
    """The whole interpreter: memory, CPU state, display and key latch.

    The host writes ``keypad`` before calling ``advance_frame`` and reads
    ``framebuffer`` and ``bell`` after it returns.
    """

    def __init__(self, rng=None):
        self.memory = Memory()
        self.state = MachineState()
        self.framebuffer = Framebuffer()
        self.keypad = Keypad()
        self.rng = rng if rng is not None else random.Random()
        self.bell = False
        self.initialized = False

    def initialize(self, rom):
        rom = bytes(rom)
        if len(rom) > config.max_rom_size:
            raise RomTooLarge(len(rom), config.max_rom_size)

        self.memory.reset(rom)
        self.framebuffer.clear()
        self.state = MachineState()
        self.bell = False
        self.initialized = True
        log(f"Loaded {len(rom)} bytes at {config.entry_point:03X}")

    def execute(self, word):
        return cpu.execute(self, word)

    def step(self):
        """Fetch, decode and execute one instruction."""
        if not self.initialized:
            raise Chip8Error("machine not initialized")
        st = self.state
        opcode = self.memory.read_word(st.pc)
        st.pc = (st.pc + 2) % config.memory_size
        return cpu.execute(self, opcode)

    def advance_frame(self):
        """Run one frame's worth of instructions, then tick both timers once."""
        for _ in range(config.cycles_per_frame):
            self.step()
        self.state.tick_timers()
        self.bell = self.state.sound > 0
