import sys
from pathlib import Path

from . import config
from .config import log
from .errors import Chip8Error
from .machine import Machine

usage = "Usage: chip8vm romfile"


def load_rom(path):
    log("Loading ROM:", path)
    return Path(path).read_bytes()


def main(argv=None):
    args = sys.argv[1:] if argv is None else argv
    if len(args) == 1 and args[0] in ("-h", "--help"):
        print(usage)
        return 0
    if len(args) != 1:
        print(usage, file=sys.stderr)
        return 1

    machine = Machine()
    try:
        machine.initialize(load_rom(args[0]))
    except OSError as e:
        print(f"Unable to read {args[0]}: {e.strerror or e}", file=sys.stderr)
        return 1
    except Chip8Error as e:
        print(f"Unable to load {args[0]}: {e}", file=sys.stderr)
        return 1

    # imported late so the core runs without a display
    import pyglet
    from .window import Chip8Window

    Chip8Window(machine, scale=config.scale)
    pyglet.app.run()
    return 0
