"""Command line front end: encrypt or decrypt every file of a directory."""

import sys
import time
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .ciphers import (
    add_decrypt,
    add_encrypt,
    swap_decrypt,
    swap_encrypt,
    xor_decrypt,
    xor_encrypt,
)
from .files import (
    get_basename,
    join_path,
    list_files,
    read_file,
    remove_last_suffix,
    save_file,
)
from .pipeline import Mode, Pipeline

ENCRYPTED_SUFFIX = ".03"
_IDLE_SECONDS = 999999


class UsageError(Exception):
    """Raised when the command line cannot be used."""


@dataclass
class Options:
    """Parsed command line settings."""

    mode: Mode
    input_dir: str
    out: str
    keep_running: bool = False


def _log(message: str) -> None:
    print(message, end="")


def parse_args(argv: Sequence[str]) -> Options:
    """Parse the arguments that follow the program name."""
    args = list(argv)
    if not args:
        raise UsageError("missing parameter")

    mode: Optional[Mode] = None
    input_dir: Optional[str] = None
    out: Optional[str] = None
    keep_running = False

    tokens = iter(args)
    for arg in tokens:
        if arg in ("-E", "--encrypt"):
            mode = Mode.ENCRYPT
        elif arg in ("-D", "--decrypt"):
            mode = Mode.DECRYPT
        elif arg in ("-I", "--input"):
            input_dir = next(tokens, None)
        elif arg in ("-O", "--out"):
            out = next(tokens, None)
        elif arg in ("-R", "--running"):
            keep_running = True
        else:
            raise UsageError(f"error parameter: {arg}")

    if mode is None:
        raise UsageError("not encrypt/decrypt mode")
    if input_dir is None:
        raise UsageError("the input direction is empty")
    if out is None:
        raise UsageError("the output direction is empty")
    return Options(mode=mode, input_dir=input_dir, out=out, keep_running=keep_running)


def help_text() -> str:
    """Return the usage message."""
    return (
        "\n\nencrypt and decrypt files.\n\n"
        "Usage: <run mode> <file path...>\n"
        "-E --encrypt: encrypt files\n"
        "-D --decrypt: decrypt files\n"
        "-I --input input directory\n"
        "    * means all files in current directory.\n"
        "-O --out: out directory\n"
        "-R --running: not exit the process\n"
        "Example 2: FileEncrypt -E -I ./in -O ./out\n"
        "    encrypt all files in the in directory and output files into out directory.\n"
    )


def build_pipeline(mode) -> Pipeline:
    """Return the pipeline of xor, pair swap and add layers for mode."""
    pipeline = Pipeline(mode)
    _log("[append function] decrypt func: xor    decrypt func: xor\n")
    pipeline.add_layer(xor_encrypt, xor_decrypt)
    _log("[append function] decrypt func: enExchangeByte    decrypt func: deExchangeByte\n")
    pipeline.add_layer(swap_encrypt, swap_decrypt)
    _log("[append function] decrypt func: byte_add_num    decrypt func: byte_dec_num\n")
    pipeline.add_layer(add_encrypt, add_decrypt)
    return pipeline


def output_path(options: Options, source: str) -> str:
    """Return where the processed form of source is written."""
    target = join_path(options.out, get_basename(source))
    if options.mode is Mode.ENCRYPT:
        return target + ENCRYPTED_SUFFIX
    return remove_last_suffix(target, ENCRYPTED_SUFFIX)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the command; return the process exit status."""
    if argv is None:
        argv = sys.argv[1:]

    _log("[+] start \n")
    try:
        options = parse_args(argv)
    except UsageError as exc:
        _log(f"[E] {exc}\n")
        _log("[!] parsed error \n")
        _log(help_text())
        return -1
    _log("[+] parsed the parameter \n")
    _log("\n")

    try:
        sources = list_files(options.input_dir)
    except OSError:
        sources = []
    if not sources:
        _log("[E] read the direction error \n")
        return 1

    _log(f"********************* found {len(sources)} files.*********************\n")
    for number, source in enumerate(sources, start=1):
        _log(f"  [{number}]{source}\n")
    _log("[+] read the direction success \n")

    _log(
        f"Run Mode: {int(options.mode)}\n"
        f"Input Diectory: {options.input_dir}\n"
        f"File Count: {len(sources)}\n"
        f"Out Dectory: {options.out}\n"
        f"Is Exit: {int(options.keep_running)}\n"
    )

    pipeline = build_pipeline(options.mode)
    for source in sources:
        _log(f"doing {source}\n")
        target = output_path(options, source)
        try:
            save_file(target, pipeline.run(read_file(source)))
        except (OSError, ValueError) as exc:
            _log(f"[E] {exc}\n")
            return 1
        _log(f"[finish] save as {target}\n")

    while options.keep_running:
        time.sleep(_IDLE_SECONDS)
    return 0


if __name__ == "__main__":
    sys.exit(main())