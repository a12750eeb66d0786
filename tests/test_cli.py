import os

import pytest

from fileenc.cli import (
    Options,
    UsageError,
    build_pipeline,
    help_text,
    main,
    output_path,
    parse_args,
)
from fileenc.pipeline import Mode


def test_parse_args_encrypt_short_flags():
    options = parse_args(["-E", "-I", "in", "-O", "out"])
    assert options == Options(mode=Mode.ENCRYPT, input_dir="in", out="out", keep_running=False)


def test_parse_args_decrypt_long_flags_and_running():
    options = parse_args(["--decrypt", "--input", "src", "--out", "dst", "--running"])
    assert options.mode is Mode.DECRYPT
    assert options.input_dir == "src"
    assert options.out == "dst"
    assert options.keep_running is True


def test_parse_args_last_mode_wins():
    options = parse_args(["-E", "-D", "-I", "in", "-O", "out"])
    assert options.mode is Mode.DECRYPT


def test_parse_args_empty_raises():
    with pytest.raises(UsageError, match="missing parameter"):
        parse_args([])


def test_parse_args_unknown_flag_raises():
    with pytest.raises(UsageError, match="-X"):
        parse_args(["-E", "-X"])


def test_parse_args_without_mode_raises():
    with pytest.raises(UsageError, match="mode"):
        parse_args(["-I", "in", "-O", "out"])


def test_parse_args_without_input_raises():
    with pytest.raises(UsageError, match="input"):
        parse_args(["-E", "-O", "out"])


def test_parse_args_input_flag_without_value_raises():
    with pytest.raises(UsageError, match="input"):
        parse_args(["-E", "-O", "out", "-I"])


def test_parse_args_without_out_raises():
    with pytest.raises(UsageError):
        parse_args(["-E", "-I", "in"])


def test_help_text_lists_options():
    text = help_text()
    for flag in ("-E --encrypt", "-D --decrypt", "-I --input", "-O --out", "-R --running"):
        assert flag in text


def test_build_pipeline_has_three_layers_and_round_trips():
    data = bytes(range(256)) + b"odd"
    encrypted = build_pipeline(Mode.ENCRYPT).run(data)
    assert len(encrypted) == len(data)
    assert encrypted != data
    assert len(build_pipeline(Mode.DECRYPT)) == 3
    assert build_pipeline(Mode.DECRYPT).run(encrypted) == data


def test_output_path_encrypt_appends_suffix():
    options = Options(mode=Mode.ENCRYPT, input_dir="in", out="out")
    assert output_path(options, "in/a.txt") == "out" + os.sep + "a.txt.03"


def test_output_path_decrypt_strips_suffix():
    options = Options(mode=Mode.DECRYPT, input_dir="in", out="out")
    assert output_path(options, "in/a.txt.03") == "out" + os.sep + "a.txt"
    assert output_path(options, "in/b.bin") == "out" + os.sep + "b.bin"


def test_main_without_arguments_fails(capsys):
    assert main([]) == -1
    assert "Usage" in capsys.readouterr().out


def test_main_missing_directory_fails(tmp_path):
    missing = str(tmp_path / "nope")
    assert main(["-E", "-I", missing, "-O", str(tmp_path)]) == 1


def test_main_empty_directory_fails(tmp_path):
    empty = tmp_path / "empty"
    empty.mkdir()
    assert main(["-E", "-I", str(empty), "-O", str(tmp_path)]) == 1


def test_main_encrypt_then_decrypt_round_trip(tmp_path):
    source_dir = tmp_path / "in"
    encrypted_dir = tmp_path / "enc"
    restored_dir = tmp_path / "dec"
    for directory in (source_dir, encrypted_dir, restored_dir):
        directory.mkdir()
    contents = {"a.txt": b"hello world", "b.bin": bytes(range(200))}
    for name, data in contents.items():
        (source_dir / name).write_bytes(data)

    assert main(["-E", "-I", str(source_dir), "-O", str(encrypted_dir)]) == 0
    encrypted_names = sorted(p.name for p in encrypted_dir.iterdir())
    assert encrypted_names == ["a.txt.03", "b.bin.03"]
    assert (encrypted_dir / "a.txt.03").read_bytes() != contents["a.txt"]

    assert main(["-D", "-I", str(encrypted_dir), "-O", str(restored_dir)]) == 0
    for name, data in contents.items():
        assert (restored_dir / name).read_bytes() == data