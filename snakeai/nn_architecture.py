"""Layer layout of the network that steers a snake."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

INPUT_SIZE = 7
NEURONS_PER_LAYER_1 = 32
NEURONS_PER_LAYER_2 = 64
OUTPUT_SIZE = 3


class Activation(Enum):
    """Activation function applied after a layer."""

    RELU = "Relu"
    SIGMOID = "Sigmoid"


@dataclass(frozen=True)
class LayerConfig:
    """Dimensions and activation of one fully connected layer."""

    input_dim: int
    output_dim: int
    activation: Activation

    def to_dict(self) -> dict[str, Any]:
        return {
            "input_dim": self.input_dim,
            "output_dim": self.output_dim,
            "activation": self.activation.value,
        }


def default_layers() -> list[LayerConfig]:
    """The standard three-layer layout: two ReLU hidden layers, sigmoid output."""
    return [
        LayerConfig(INPUT_SIZE, NEURONS_PER_LAYER_1, Activation.RELU),
        LayerConfig(NEURONS_PER_LAYER_1, NEURONS_PER_LAYER_2, Activation.RELU),
        LayerConfig(NEURONS_PER_LAYER_2, OUTPUT_SIZE, Activation.SIGMOID),
    ]


@dataclass
class NNArchitecture:
    """An ordered list of layers; defaults to the standard layout."""

    layers: list[LayerConfig] = field(default_factory=default_layers)

    def to_dict(self) -> dict[str, Any]:
        """A JSON-ready description of the layers."""
        return {"layers": [layer.to_dict() for layer in self.layers]}