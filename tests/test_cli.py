import json

from main import main

from lc3asm import assemble, build_image


def write_image(tmp_path, source, origin=0x3000):
    path = tmp_path / "prog.obj"
    path.write_bytes(build_image(origin, assemble(source)))
    return str(path)


def test_runs_program_to_halt(tmp_path, capsys):
    image = write_image(tmp_path, "AND R0, R0, #0\nADD R0, R0, #15\nADD R0, R0, #15\n"
                                  "ADD R0, R0, #15\nADD R0, R0, #15\nADD R0, R0, #5\nOUT\nHALT")
    assert main([image]) == 0
    assert capsys.readouterr().out == "AHALT\n"


def test_missing_image(tmp_path, capsys):
    assert main([str(tmp_path / "missing.obj")]) == 1
    assert "lc3-vm:" in capsys.readouterr().err


def test_image_without_origin(tmp_path, capsys):
    path = tmp_path / "short.obj"
    path.write_bytes(b"\x30")
    assert main([str(path)]) == 1


def test_fault_is_not_a_process_error(tmp_path, capsys):
    image = write_image(tmp_path, "RTI")
    assert main([image]) == 0
    assert "illegal instruction" in capsys.readouterr().err


def test_config_file(tmp_path, capsys):
    config = tmp_path / "vm.json"
    config.write_text(json.dumps({"pc_start": "0x4000", "halt_message": "bye"}))
    image = write_image(tmp_path, "HALT", origin=0x4000)
    assert main([image, "--config", str(config)]) == 0
    assert capsys.readouterr().out == "bye\n"


def test_bad_config_file(tmp_path, capsys):
    config = tmp_path / "vm.json"
    config.write_text(json.dumps({"speed": 11}))
    image = write_image(tmp_path, "HALT")
    assert main([image, "--config", str(config)]) == 1
    assert "unknown configuration keys" in capsys.readouterr().err


def test_logs_decoded_image(tmp_path, caplog):
    image = write_image(tmp_path, "AND R0, R0, #0\nHALT", origin=0x3100)
    with caplog.at_level("INFO", logger="lc3"):
        assert main([image]) == 0
    assert "2 words at x3100" in caplog.text
