"""File listing, reading, writing and path helpers."""

import os
from pathlib import Path
from typing import List

MAX_LIST_BYTES = 1024 * 1024
MAX_FILE_SIZE = 100 * 1024 * 1024


def list_files(directory: str) -> List[str]:
    """Return the paths of the entries in directory, with '/' as separator.

    Entries are taken in name order until their total size, counting one
    terminator byte per path, would reach MAX_LIST_BYTES.
    """
    paths: List[str] = []
    used = 0
    for name in sorted(os.listdir(directory)):
        if name in (".", ".."):
            continue
        full_path = f"{directory}\\{name}".replace("\\", "/")
        size = len(full_path.encode()) + 1
        if used + size >= MAX_LIST_BYTES:
            break
        paths.append(full_path)
        used += size
    return paths


def read_file(path) -> bytes:
    """Return the whole content of a file; raise ValueError if it is too large."""
    file_path = Path(path)
    size = file_path.stat().st_size
    if size > MAX_FILE_SIZE:
        raise ValueError(f"{path}: file of {size} bytes exceeds {MAX_FILE_SIZE} bytes")
    return file_path.read_bytes()


def save_file(path, data: bytes) -> None:
    """Write data to a file, replacing its content."""
    Path(path).write_bytes(data)


def get_basename(path: str) -> str:
    """Return the part after the last '/' or '\\'."""
    cut = max(path.rfind("/"), path.rfind("\\"))
    return path[cut + 1:]


def join_path(directory: str, filename: str) -> str:
    """Join a directory and a file name with the platform separator."""
    return directory.replace("/", os.sep) + os.sep + filename


def remove_last_suffix(path: str, suffix: str) -> str:
    """Return path without suffix if it ends with it, else path unchanged."""
    if suffix and path.endswith(suffix):
        return path[: -len(suffix)]
    return path