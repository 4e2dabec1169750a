from chip8vm.state import WaitState

from conftest import run


def test_wait_blocks_without_keys(load):
    m = load(0xF50A)
    for _ in range(3):
        m.advance_frame()
        assert m.state.pc == 0x200
    assert m.state.wait_state is WaitState.IDLE


def test_press_alone_does_not_resolve(load):
    m = load(0xF50A)
    m.keypad.press(0x5)
    m.advance_frame()
    assert m.state.pc == 0x200
    assert m.state.wait_state is WaitState.WAITING
    assert m.state.wait_mask == 1 << 5


def test_release_resolves_wait(load):
    m = load(0xF50A, 0x6101)
    m.step()
    m.keypad.press(0x5)
    m.step()
    assert m.state.pc == 0x200
    m.keypad.release(0x5)
    m.step()
    assert m.state.pc == 0x202
    assert m.state.V[5] == 1 << 5
    assert m.state.wait_state is WaitState.IDLE
    assert m.state.wait_mask == 0
    m.step()
    assert m.state.V[1] == 1


def test_release_resolves_across_frames(load):
    m = load(0xF30A)
    m.keypad.press(0x2)
    m.advance_frame()
    m.keypad.release(0x2)
    m.advance_frame()
    assert m.state.pc != 0x200
    assert m.state.V[3] == 0b100


def test_only_released_keys_count(load):
    m = load(0xF00A)
    m.keypad.press(1)
    m.keypad.press(2)
    m.step()
    m.keypad.release(2)
    m.step()
    assert m.state.V[0] == 0b100
    assert m.keypad.is_pressed(1)


def test_new_press_while_waiting_is_tracked(load):
    m = load(0xF00A)
    m.keypad.press(1)
    m.step()
    m.keypad.press(3)
    m.step()
    assert m.state.wait_mask == 0b1010
    m.keypad.release(3)
    m.step()
    assert m.state.V[0] == 0b1000


def test_high_keys_truncate_to_register_width(load):
    m = load(0xF00A)
    m.keypad.press(0xC)
    run(m, 1)
    m.keypad.release(0xC)
    run(m, 1)
    assert m.state.pc == 0x202
    assert m.state.V[0] == 0
