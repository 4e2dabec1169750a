import numpy as np
import pytest

from chip8vm.framebuffer import Framebuffer
from chip8vm.keypad import Keypad
from chip8vm.memory import Memory
from chip8vm.render import framebuffer_to_rgba


def test_memory_wraps():
    mem = Memory()
    mem.write(0x1005, 0x1FF)
    assert mem.read(0x005) == 0xFF
    assert mem.read(0x2005) == 0xFF
    mem.load(0xFFE, b"\x01\x02\x03")
    assert mem.read_word(0xFFE) == 0x0102
    assert mem.read_word(0xFFF) == 0x0203


def test_keypad_mask():
    kp = Keypad()
    assert kp.mask() == 0
    kp.press(0)
    kp.press(0xF)
    assert kp.mask() == 0x8001
    kp.set(0, False)
    assert kp.mask() == 0x8000
    kp.clear()
    assert not kp.is_pressed(0xF)


def test_framebuffer_returns_collision():
    fb = Framebuffer()
    assert fb.draw_sprite(0, 0, [0b10100000]) is False
    assert fb.draw_sprite(0, 0, [0b00100000]) is True
    assert fb.pixels[0, 0]
    assert not fb.pixels[0, 2]



@pytest.mark.parametrize("scale", [1, 3])
def test_render_flips_and_scales(scale):
    fb = Framebuffer()
    fb.pixels[0, 0] = True
    data = framebuffer_to_rgba(fb.pixels, scale)
    img = np.frombuffer(data, dtype=np.uint8).reshape(32 * scale, 64 * scale, 4)
    # top-left of the screen is the last row of the image
    assert (img[-1, 0] == [255, 255, 255, 255]).all()
    assert (img[-scale, scale - 1] == [255, 255, 255, 255]).all()
    assert (img[0, 0] == [0, 0, 0, 255]).all()
    assert img[..., :3].astype(bool).sum() == 3 * scale * scale
