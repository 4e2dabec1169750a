from chip8vm import config
from chip8vm.app import load_rom, main


def test_help(capsys):
    assert main(["--help"]) == 0
    assert "Usage" in capsys.readouterr().out


def test_wrong_argument_count(capsys):
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().err


def test_missing_rom(tmp_path, capsys):
    assert main([str(tmp_path / "nope.ch8")]) == 1
    assert "Unable to read" in capsys.readouterr().err


def test_rom_too_large(tmp_path, capsys):
    rom = tmp_path / "big.ch8"
    rom.write_bytes(bytes(config.max_rom_size + 1))
    assert main([str(rom)]) == 1
    assert "3584" in capsys.readouterr().err


def test_load_rom(tmp_path):
    rom = tmp_path / "a.ch8"
    rom.write_bytes(b"\x00\xE0")
    assert load_rom(rom) == b"\x00\xE0"


def test_logging_switch(capsys):
    config.set_logging(True)
    try:
        config.log("hello", 1)
    finally:
        config.set_logging(False)
    config.log("hidden")
    assert capsys.readouterr().out == "hello 1\n"
