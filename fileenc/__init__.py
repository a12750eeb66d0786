"""Batch file encryption and decryption through a chain of byte transforms."""

__version__ = "0.1.0"

__all__ = ["ciphers", "cli", "files", "pipeline"]