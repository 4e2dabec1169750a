from . import config


class Memory:
    """Flat 4KB address space. Every access wraps modulo the memory size."""

    def __init__(self):
        self.data = bytearray(config.memory_size)

    def __len__(self):
        return len(self.data)

    def read(self, address):
        return self.data[address % config.memory_size]

    def write(self, address, value):
        self.data[address % config.memory_size] = value & 0xFF

    def read_word(self, address):
        # big-endian 16-bit instruction word
        return (self.read(address) << 8) | self.read(address + 1)

    def load(self, address, data):
        for i, b in enumerate(data):
            self.write(address + i, b)

    def reset(self, program=b""):
        """Zero everything, then install the font and the program."""
        self.data[:] = bytes(config.memory_size)
        self.data[config.font_location:config.font_location + len(config.fontset)] = bytes(config.fontset)
        self.data[config.entry_point:config.entry_point + len(program)] = program
