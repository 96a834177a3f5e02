"""Tests for the command line driver."""

import json

from octadis.cli import main


class TestListing:

    def test_listing_to_stdout(self, rom_file, capsys):
        assert main([str(rom_file)]) == 0

        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "0200 00 e0 CLS"
        assert lines[-1] == "0208 12 00 JUMP #$200"
        assert len(lines) == 5

    def test_listing_to_file(self, rom_file, tmp_path, capsys):
        output = tmp_path / "listing.txt"

        assert main([str(rom_file), "-o", str(output)]) == 0
        assert capsys.readouterr().out == ""
        assert output.read_text().splitlines()[1] == "0202 6a 02 MVI Va,#$02"

    def test_base_address_and_style(self, rom_file, capsys):
        assert main([str(rom_file), "--base-address", "0x300", "--style", "uppercase"]) == 0

        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "0300 00 E0 CLS"
        assert lines[2] == "0304 A2 0A MVI I,#$20A"

    def test_empty_rom(self, tmp_path, capsys):
        rom = tmp_path / "empty.ch8"
        rom.write_bytes(b"")

        assert main([str(rom)]) == 0
        assert capsys.readouterr().out == ""

    def test_odd_rom_truncated_with_warning(self, tmp_path, capsys):
        rom = tmp_path / "odd.ch8"
        rom.write_bytes(bytes([0x00, 0xE0, 0x12]))

        assert main([str(rom)]) == 0
        captured = capsys.readouterr()
        assert captured.out.splitlines() == ["0200 00 e0 CLS"]
        assert "trailing byte 0x12" in captured.err

    def test_odd_rom_padded(self, tmp_path, capsys):
        rom = tmp_path / "odd.ch8"
        rom.write_bytes(bytes([0x00, 0xE0, 0x12]))

        assert main([str(rom), "--trailing-byte", "pad"]) == 0
        assert capsys.readouterr().out.splitlines()[-1] == "0202 12 00 JUMP #$200"

    def test_progress_bar_on_stderr(self, rom_file, capsys):
        assert main([str(rom_file), "--progress"]) == 0

        captured = capsys.readouterr()
        assert len(captured.out.splitlines()) == 5
        assert "Disassembling" in captured.err


class TestConfigFile:

    def test_config_file(self, rom_file, tmp_path, capsys):
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"base_address": 0, "style": "uppercase"}))

        assert main([str(rom_file), "--config", str(config)]) == 0
        assert capsys.readouterr().out.splitlines()[0] == "0000 00 E0 CLS"

    def test_invalid_config(self, rom_file, tmp_path, capsys):
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"style": "fancy"}))

        assert main([str(rom_file), "--config", str(config)]) == 1
        assert "Invalid configuration" in capsys.readouterr().err

    def test_config_not_an_object(self, rom_file, tmp_path, capsys):
        config = tmp_path / "config.json"
        config.write_text(json.dumps([1, 2]))

        assert main([str(rom_file), "--config", str(config)]) == 1
        assert "must hold a JSON object" in capsys.readouterr().err

    def test_missing_config(self, rom_file, tmp_path):
        assert main([str(rom_file), "--config", str(tmp_path / "missing.json")]) == 1


class TestErrors:

    def test_missing_rom(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.ch8")]) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Couldn't open file!" in captured.err
