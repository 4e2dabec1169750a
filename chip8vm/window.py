# We're subclassing pyglet (that'll handle graphics, sound output, and keyboard handling)
# and overriding whatever def we need from there. The interpreter itself lives in
# Machine; this window only feeds it key states, paces the frames and shows the result.

import pyglet
from pyglet.window import key
from pyglet.media import synthesis

from . import config
from .render import framebuffer_to_rgba

#map binding keys
keymap = {
    key._1: 0x1, key._2: 0x2, key._3: 0x3, key._4: 0xC,
    key.Q: 0x4, key.W: 0x5, key.E: 0x6, key.R: 0xD,
    key.A: 0x7, key.S: 0x8, key.D: 0x9, key.F: 0xE,
    key.Z: 0xA, key.X: 0x0, key.C: 0xB, key.V: 0xF,
}


def generate_beep(duration=1.0, frequency=config.beep_frequency, sample_rate=config.sample_rate):
    wave = synthesis.Sine(duration=duration, frequency=frequency, sample_rate=sample_rate)
    return pyglet.media.StaticSource(wave)


class Chip8Window(pyglet.window.Window):

    def __init__(self, machine, scale=config.scale):
        self.zoom = scale
        super().__init__(
            width=config.width * scale,
            height=config.height * scale,
            caption="CHIP-8 Emulator",
            vsync=False
        )
        self.machine = machine

        self.image = pyglet.image.ImageData(
            config.width * scale,
            config.height * scale,
            'RGBA',
            framebuffer_to_rgba(machine.framebuffer.pixels, scale)
        )

        # Beep sound, looped while the bell is on
        self.beep_player = pyglet.media.Player()
        self.beep_player.queue(generate_beep())
        self.beep_player.loop = True
        self.sound_playing = False

        pyglet.clock.schedule_interval(self.tick, 1 / config.frame_HZ)

    # one frame of emulation per clock tick
    def tick(self, dt):
        self.machine.advance_frame()
        self._update_bell(self.machine.bell)
        self.dispatch_event('on_draw')

    # sound
    def _update_bell(self, bell):
        if bell and not self.sound_playing:
            self.beep_player.play()
            self.sound_playing = True
        elif not bell and self.sound_playing:
            self.beep_player.pause()
            self.sound_playing = False

    # draw
    def on_draw(self):
        self.clear()
        data = framebuffer_to_rgba(self.machine.framebuffer.pixels, self.zoom)
        self.image.set_data('RGBA', config.width * self.zoom * 4, data)
        self.image.blit(0, 0)

    # keyboard
    def on_key_press(self, symbol, modifiers):
        if symbol == key.ESCAPE:
            self.close()
        elif symbol == key.F1:
            config.set_logging(not config.logs_on)
            print("logs_on:", config.logs_on)
        elif symbol in keymap:
            self.machine.keypad.press(keymap[symbol])

    def on_key_release(self, symbol, modifiers):
        if symbol in keymap:
            self.machine.keypad.release(keymap[symbol])

    def on_close(self):
        pyglet.clock.unschedule(self.tick)
        self.beep_player.delete()
        super().on_close()
