import numpy as np


def framebuffer_to_rgba(pixels, scale=1, on=(255, 255, 255), off=(0, 0, 0)):
    """Turn a (height, width) boolean grid into upscaled RGBA bytes.

    Rows come out bottom-up because pyglet images have their origin at the
    bottom-left corner.
    """
    pixels = np.asarray(pixels, dtype=bool)
    height, width = pixels.shape

    small = np.empty((height, width, 4), dtype=np.uint8)
    small[...] = (*off, 255)
    small[pixels] = (*on, 255)
    small = small[::-1]

    if scale != 1:
        small = np.repeat(np.repeat(small, scale, axis=0), scale, axis=1)
    return np.ascontiguousarray(small).tobytes()
