from enum import Enum

import numpy as np

from . import config


class WaitState(Enum):
    IDLE = 0
    WAITING = 1


class MachineState:
    """Registers, program counter, index register, call stack and timers."""

    def __init__(self):
        self.V = [0] * config.num_registers   # V[0xF] doubles as the flag register
        self.I = 0
        self.pc = config.entry_point
        self.stack = np.zeros(config.stack_size, dtype=np.uint16)
        self.sp = 0
        self.delay = 0
        self.sound = 0

        # FX0A bookkeeping: keys held when the wait was (re)armed
        self.wait_state = WaitState.IDLE
        self.wait_mask = 0

    # ---- call stack (wraps instead of faulting) ----
    def push(self, address):
        self.stack[self.sp] = address
        self.sp = (self.sp + 1) % config.stack_size

    def pop(self):
        self.sp = (self.sp - 1) % config.stack_size
        return int(self.stack[self.sp])

    # ---- key wait ----
    def arm_wait(self, mask):
        self.wait_mask = mask
        self.wait_state = WaitState.WAITING if mask else WaitState.IDLE

    def clear_wait(self):
        self.wait_mask = 0
        self.wait_state = WaitState.IDLE

    # ---- timers ----
    def tick_timers(self):
        if self.delay > 0:
            self.delay -= 1
        if self.sound > 0:
            self.sound -= 1
