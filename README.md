# fileenc

`fileenc` scrambles or restores every file in a directory. It passes each file's
bytes through a fixed chain of reversible transforms:

1. XOR of each byte with `0xAC`
2. swapping each pair of adjacent bytes (a trailing odd byte is left as is)
3. adding `0xAC` to each byte, modulo 256

Decryption applies the inverse transforms in reverse order.

This is light obfuscation, not real cryptography. The key is fixed and the
transforms are trivially reversible. Do not use it to protect secrets.

## Installation

```
pip install .
```

## Command line

```
fileenc -E -I ./in -O ./out
```

This encrypts every file in `./in`. Each result is written to `./out` under
the same name with `.03` added.

```
fileenc -D -I ./out -O ./restored
```

This decrypts every file in `./out` and writes it to `./restored`. A trailing
`.03` is removed from the name if it is there.

Options:

| Option | Meaning |
| --- | --- |
| `-E`, `--encrypt` | encrypt files |
| `-D`, `--decrypt` | decrypt files |
| `-I`, `--input DIR` | directory whose entries are processed |
| `-O`, `--out DIR` | directory the results are written to |
| `-R`, `--running` | keep the process alive after the work is done |

A mode, an input directory and an output directory are all required. If one
is missing, or an option is not recognised:

- the error and the usage text are printed;
- `main` returns `-1`.

Behaviour to be aware of:

- Entries of the input directory are processed in name order. Progress
  messages go to standard output.
- Every entry is processed, subdirectories included. The command does not
  descend into subdirectories. A subdirectory cannot be read, which ends the
  run with status `1`.
- Files larger than 100 MiB are rejected, and the run ends with status `1`.
- The output directory is not created. It must already exist.
- An empty or unreadable input directory ends the run with status `1`.

## Library use

```python
from fileenc.cli import build_pipeline
from fileenc.pipeline import Mode

encrypted = build_pipeline(Mode.ENCRYPT).run(b"hello")
assert build_pipeline(Mode.DECRYPT).run(encrypted) == b"hello"
```

You can build your own chain of up to ten layers from the functions in
`fileenc.ciphers`:

- `xor_encrypt` / `xor_decrypt`
- `swap_encrypt` / `swap_decrypt`
- `add_encrypt` / `add_decrypt`

```python
from fileenc import ciphers
from fileenc.pipeline import Mode, Pipeline

pipeline = Pipeline(Mode.ENCRYPT)
pipeline.add_layer(ciphers.xor_encrypt, ciphers.xor_decrypt)
pipeline.add_layer(ciphers.swap_encrypt, ciphers.swap_decrypt)
scrambled = pipeline.run(b"some bytes")
```

Adding an eleventh layer raises `fileenc.pipeline.PipelineFullError`.

`fileenc.files` holds the file and path helpers the command uses:

- `list_files`
- `read_file`
- `save_file`
- `get_basename`
- `join_path`
- `remove_last_suffix`