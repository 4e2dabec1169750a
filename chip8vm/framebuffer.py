import numpy as np

from . import config


class Framebuffer:
    """64x32 monochrome display, indexed as pixels[y, x] with row 0 at the top."""

    def __init__(self):
        self.pixels = np.zeros((config.height, config.width), dtype=bool)

    def clear(self):
        self.pixels[:] = False

    def draw_sprite(self, x, y, rows):
        """XOR the sprite rows onto the screen starting at (x, y).

        The start position wraps around the screen but the sprite itself is
        clipped at the right and bottom edges. Returns True if any lit pixel
        was erased.
        """
        x %= config.width
        y %= config.height
        collision = False

        for line in rows:
            if y >= config.height:
                break
            px = x
            for bit in range(8):
                if px >= config.width:
                    break
                new_value = bool(line & (0x80 >> bit))
                if self.pixels[y, px] and new_value:
                    collision = True
                    self.pixels[y, px] = False
                elif not self.pixels[y, px] and new_value:
                    self.pixels[y, px] = True
                px += 1
            y += 1

        return collision
