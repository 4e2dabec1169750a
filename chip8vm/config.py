# ---- Machine configuration ----
memory_size = 4096
entry_point = 0x200                       # programs are loaded here
max_rom_size = memory_size - entry_point  # 3584 bytes
font_location = 0x50
stack_size = 128
num_registers = 16
num_keys = 16

width, height = 64, 32
cycles_per_frame = 12   # ~720 instructions/s at 60 frames/s
frame_HZ = 60

# ---- Host configuration ----
scale = 10
beep_frequency = 440
sample_rate = 44100

# set fonts (binary pixel patterns)
fontset = [
    0xF0, 0x90, 0x90, 0x90, 0xF0,  # 0
    0x20, 0x60, 0x20, 0x20, 0x70,  # 1
    0xF0, 0x10, 0xF0, 0x80, 0xF0,  # 2
    0xF0, 0x10, 0xF0, 0x10, 0xF0,  # 3
    0x90, 0x90, 0xF0, 0x10, 0x10,  # 4
    0xF0, 0x80, 0xF0, 0x10, 0xF0,  # 5
    0xF0, 0x80, 0xF0, 0x90, 0xF0,  # 6
    0xF0, 0x10, 0x20, 0x40, 0x40,  # 7
    0xF0, 0x90, 0xF0, 0x90, 0xF0,  # 8
    0xF0, 0x90, 0xF0, 0x10, 0xF0,  # 9
    0xF0, 0x90, 0xF0, 0x90, 0x90,  # A
    0xE0, 0x90, 0xE0, 0x90, 0xE0,  # B
    0xF0, 0x80, 0x80, 0x80, 0xF0,  # C
    0xE0, 0x90, 0x90, 0x90, 0xE0,  # D
    0xF0, 0x80, 0xF0, 0x80, 0xF0,  # E
    0xF0, 0x80, 0xF0, 0x80, 0x80   # F
] #notice 80 bytes

#make it true if you want the logs
logs_on = False


def set_logging(enabled):
    global logs_on
    logs_on = bool(enabled)


def log(*args):
    if logs_on:
        print(*args)
