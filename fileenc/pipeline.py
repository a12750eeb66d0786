"""A chain of reversible layers applied in order to encrypt and in reverse to decrypt."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, List, Tuple

MAX_LAYERS = 10

Transform = Callable[[bytes], bytes]


class Mode(IntEnum):
    """Direction in which a pipeline runs."""

    ENCRYPT = 1
    DECRYPT = 2


@dataclass(frozen=True)
class Layer:
    """One encryption stage with its inverse."""

    encrypt: Transform
    decrypt: Transform


class PipelineFullError(Exception):
    """Raised when more than the allowed number of layers is added."""


class Pipeline:
    """Ordered encryption layers run in one direction."""

    def __init__(self, mode):
        self.mode = Mode(mode)
        self._layers: List[Layer] = []

    @property
    def layers(self) -> Tuple[Layer, ...]:
        return tuple(self._layers)

    def __len__(self) -> int:
        return len(self._layers)

    def add_layer(self, encrypt: Transform, decrypt: Transform) -> Layer:
        """Append a layer; raise PipelineFullError past the limit."""
        if len(self._layers) >= MAX_LAYERS:
            raise PipelineFullError(f"at most {MAX_LAYERS} layers are allowed")
        layer = Layer(encrypt, decrypt)
        self._layers.append(layer)
        return layer

    def run(self, data: bytes) -> bytes:
        """Apply the layers to data according to the pipeline's mode."""
        result = bytes(data)
        if self.mode is Mode.ENCRYPT:
            for layer in self._layers:
                result = layer.encrypt(result)
        else:
            for layer in reversed(self._layers):
                result = layer.decrypt(result)
        return result