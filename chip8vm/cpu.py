# Instruction decode & dispatch.
#
# Every handler takes the machine and the decoded instruction and performs
# exactly one state transition. By the time a handler runs the program counter
# already points at the next instruction, so a skip is one more "pc += 2".
# Cogwood's CHIP8 Technical reference http://devernay.free.fr/hacks/chip8/C8TECH10.HTM

from collections import namedtuple

from . import config
from .config import log
from .state import WaitState


class Instruction(namedtuple("Instruction", "word family x y n nn nnn")):
    __slots__ = ()

    def mnemonic(self):
        f, x, y, n, nn, nnn = self.family, self.x, self.y, self.n, self.nn, self.nnn
        if self.word == 0x00E0:
            return "CLS"
        if self.word == 0x00EE:
            return "RET"
        if f == 0x0:
            return f"SYS {nnn:03X}"
        if f == 0x1:
            return f"JP {nnn:03X}"
        if f == 0x2:
            return f"CALL {nnn:03X}"
        if f == 0x3:
            return f"SE V{x:X}, {nn:02X}"
        if f == 0x4:
            return f"SNE V{x:X}, {nn:02X}"
        if f == 0x5:
            return f"SE V{x:X}, V{y:X}"
        if f == 0x6:
            return f"LD V{x:X}, {nn:02X}"
        if f == 0x7:
            return f"ADD V{x:X}, {nn:02X}"
        if f == 0x8 and n in ALU_NAMES:
            return f"{ALU_NAMES[n]} V{x:X}, V{y:X}"
        if f == 0x9 and n == 0:
            return f"SNE V{x:X}, V{y:X}"
        if f == 0xA:
            return f"LD I, {nnn:03X}"
        if f == 0xB:
            return f"JP V0, {nnn:03X}"
        if f == 0xC:
            return f"RND V{x:X}, {nn:02X}"
        if f == 0xD:
            return f"DRW V{x:X}, V{y:X}, {n:X}"
        if f == 0xE and nn == 0x9E:
            return f"SKP V{x:X}"
        if f == 0xE and nn == 0xA1:
            return f"SKNP V{x:X}"
        if f == 0xF and nn in MISC_NAMES:
            return MISC_NAMES[nn].format(x=f"V{x:X}")
        return f"??? {self.word:04X}"


ALU_NAMES = {
    0x0: "LD", 0x1: "OR", 0x2: "AND", 0x3: "XOR", 0x4: "ADD",
    0x5: "SUB", 0x6: "SHR", 0x7: "SUBN", 0xE: "SHL",
}

MISC_NAMES = {
    0x07: "LD {x}, DT", 0x0A: "LD {x}, K", 0x15: "LD DT, {x}",
    0x18: "LD ST, {x}", 0x1E: "ADD I, {x}", 0x29: "LD F, {x}",
    0x33: "LD B, {x}", 0x55: "LD [I], {x}", 0x65: "LD {x}, [I]",
}


def decode(word):
    word &= 0xFFFF
    return Instruction(
        word=word,
        family=word >> 12,
        x=(word >> 8) & 0xF,
        y=(word >> 4) & 0xF,
        n=word & 0xF,
        nn=word & 0xFF,
        nnn=word & 0xFFF,
    )


def skip(m):
    m.state.pc += 2


# ---- 0nnn / 00E0 / 00EE ----
def op_CLS(m, ins):
    m.framebuffer.clear()


def op_RET(m, ins):
    m.state.pc = m.state.pop()


# ---- 1nnn .. 7xkk ----
def op_JP(m, ins):
    m.state.pc = ins.nnn


def op_CALL(m, ins):
    m.state.push(m.state.pc)
    m.state.pc = ins.nnn


def op_SE_Vx_kk(m, ins):
    if m.state.V[ins.x] == ins.nn:
        skip(m)


def op_SNE_Vx_kk(m, ins):
    if m.state.V[ins.x] != ins.nn:
        skip(m)


def op_SE_Vx_Vy(m, ins):
    if m.state.V[ins.x] == m.state.V[ins.y]:
        skip(m)


def op_LD_Vx_kk(m, ins):
    m.state.V[ins.x] = ins.nn


def op_ADD_Vx_kk(m, ins):
    V = m.state.V
    V[ins.x] = (V[ins.x] + ins.nn) & 0xFF


# ---- 8xy0..8xyE ----
# The flag is written first; the result is then computed from the registers
# as they stand, so VF takes part when it is an operand.
def op_LD_Vx_Vy(m, ins):
    m.state.V[ins.x] = m.state.V[ins.y]


def op_OR(m, ins):
    m.state.V[ins.x] |= m.state.V[ins.y]


def op_AND(m, ins):
    m.state.V[ins.x] &= m.state.V[ins.y]


def op_XOR(m, ins):
    m.state.V[ins.x] ^= m.state.V[ins.y]


def op_ADD(m, ins):
    V, x, y = m.state.V, ins.x, ins.y
    V[0xF] = 1 if V[x] + V[y] > 0xFF else 0
    V[x] = (V[x] + V[y]) & 0xFF


def op_SUB(m, ins):
    V, x, y = m.state.V, ins.x, ins.y
    V[0xF] = 1 if V[x] >= V[y] else 0
    V[x] = (V[x] - V[y]) & 0xFF


def op_SHR(m, ins):
    V, x = m.state.V, ins.x
    V[x] = V[ins.y]
    V[0xF] = V[x] & 0x01
    V[x] >>= 1


def op_SUBN(m, ins):
    V, x, y = m.state.V, ins.x, ins.y
    V[0xF] = 1 if V[y] >= V[x] else 0
    V[x] = (V[y] - V[x]) & 0xFF


def op_SHL(m, ins):
    V, x = m.state.V, ins.x
    V[x] = V[ins.y]
    V[0xF] = V[x] & 0x80    # raw bit, not normalized to 1
    V[x] = (V[x] << 1) & 0xFF


# ---- 9xy0 .. Dxyn ----
def op_SNE_Vx_Vy(m, ins):
    if m.state.V[ins.x] != m.state.V[ins.y]:
        skip(m)


def op_LD_I(m, ins):
    m.state.I = ins.nnn


def op_JP_V0(m, ins):
    m.state.pc = ins.nnn + m.state.V[0]


def op_RND(m, ins):
    m.state.V[ins.x] = m.rng.randint(0, 255) & ins.nn


def op_DRW(m, ins):
    st = m.state
    px, py = st.V[ins.x], st.V[ins.y]
    st.V[0xF] = 0
    rows = [m.memory.read(st.I + i) for i in range(ins.n)]
    if m.framebuffer.draw_sprite(px, py, rows):
        st.V[0xF] = 1


# ---- Ex9E / ExA1 ----
def op_SKP(m, ins):
    if m.keypad.is_pressed(m.state.V[ins.x] & 0xF):
        skip(m)


def op_SKNP(m, ins):
    if not m.keypad.is_pressed(m.state.V[ins.x] & 0xF):
        skip(m)


# ---- Fx07..Fx65 ----
def op_LD_Vx_DT(m, ins):
    m.state.V[ins.x] = m.state.delay


def op_WAITKEY(m, ins):
    # Resolves on a key being released, not pressed: the mask latched on the
    # previous attempt is compared against the keys held right now.
    st = m.state
    current = m.keypad.mask()
    if st.wait_state is WaitState.WAITING:
        released = st.wait_mask & ~current & 0xFFFF
        if released:
            st.V[ins.x] = released & 0xFF
            st.clear_wait()
            return
    st.arm_wait(current)
    st.pc -= 2  # stall (PC will re-execute this instr)


def op_LD_DT_Vx(m, ins):
    m.state.delay = m.state.V[ins.x]


def op_LD_ST_Vx(m, ins):
    m.state.sound = m.state.V[ins.x]


def op_ADD_I_Vx(m, ins):
    m.state.I = (m.state.I + m.state.V[ins.x]) & 0xFFF


def op_FONT(m, ins):
    m.state.I = config.font_location + 5 * (m.state.V[ins.x] & 0xF)


def op_BCD(m, ins):
    v, I = m.state.V[ins.x], m.state.I
    m.memory.write(I, v // 100)
    m.memory.write(I + 1, (v // 10) % 10)
    m.memory.write(I + 2, v % 10)


def op_STORE(m, ins):
    st = m.state
    for i in range(ins.x + 1):
        m.memory.write(st.I, st.V[i])
        st.I = (st.I + 1) & 0xFFF


def op_LOAD(m, ins):
    st = m.state
    for i in range(ins.x + 1):
        st.V[i] = m.memory.read(st.I)
        st.I = (st.I + 1) & 0xFFF


# dispatch table: family -> (sub-selector field, handlers keyed by that field)
# A selector of None means the whole family is one instruction.
opcodes = {
    0x0: ("nnn", {0x0E0: op_CLS, 0x0EE: op_RET}),  # other 0nnn (SYS) ignored
    0x1: (None, op_JP),
    0x2: (None, op_CALL),
    0x3: (None, op_SE_Vx_kk),
    0x4: (None, op_SNE_Vx_kk),
    0x5: (None, op_SE_Vx_Vy),    # low nibble not checked
    0x6: (None, op_LD_Vx_kk),
    0x7: (None, op_ADD_Vx_kk),
    0x8: ("n", {
        0x0: op_LD_Vx_Vy,
        0x1: op_OR,
        0x2: op_AND,
        0x3: op_XOR,
        0x4: op_ADD,
        0x5: op_SUB,
        0x6: op_SHR,
        0x7: op_SUBN,
        0xE: op_SHL,
    }),
    0x9: ("n", {0x0: op_SNE_Vx_Vy}),
    0xA: (None, op_LD_I),
    0xB: (None, op_JP_V0),
    0xC: (None, op_RND),
    0xD: (None, op_DRW),
    0xE: ("nn", {0x9E: op_SKP, 0xA1: op_SKNP}),
    0xF: ("nn", {
        0x07: op_LD_Vx_DT,
        0x0A: op_WAITKEY,
        0x15: op_LD_DT_Vx,
        0x18: op_LD_ST_Vx,
        0x1E: op_ADD_I_Vx,
        0x29: op_FONT,
        0x33: op_BCD,
        0x55: op_STORE,
        0x65: op_LOAD,
    }),
}

assert sorted(opcodes) == list(range(16)), "every instruction family needs an entry"


def lookup(ins):
    """Handler for a decoded instruction, or None for an ignored sub-opcode."""
    selector, table = opcodes[ins.family]
    if selector is None:
        return table
    return table.get(getattr(ins, selector))


def execute(m, word):
    ins = decode(word)
    if config.logs_on:
        log(f"{(m.state.pc - 2) % config.memory_size:03X}: {ins.word:04X}  {ins.mnemonic()}")

    handler = lookup(ins)
    if handler is None:
        log(f"Ignored opcode: {ins.word:04X}")
    else:
        handler(m, ins)

    m.state.pc %= config.memory_size
    return ins
