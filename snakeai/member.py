"""A network-driven snake player whose fitness comes from playing games."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np

from snakeai.nn_architecture import Activation, NNArchitecture
from snakeai.sensors import current_input
from snakeai.snakegame import Direction, SnakeGame


def relu(z: np.ndarray) -> np.ndarray:
    """Element-wise max(x, 0)."""
    return np.maximum(np.asarray(z, dtype=float), 0.0)


def sigmoid(z: np.ndarray) -> np.ndarray:
    """Element-wise logistic function."""
    return 1.0 / (1.0 + np.exp(-np.asarray(z, dtype=float)))


def forward_layer(
    a: np.ndarray, w: np.ndarray, b: np.ndarray, activation: Activation
) -> np.ndarray:
    """One fully connected layer: ``activation(w @ a + b)``."""
    z = np.asarray(w, dtype=float) @ np.asarray(a, dtype=float) + np.asarray(b, dtype=float)
    if activation is Activation.RELU:
        return relu(z)
    return sigmoid(z)


def _matrix_to_dict(matrix: np.ndarray) -> dict[str, Any]:
    rows, cols = matrix.shape
    return {"v": 1, "dim": [rows, cols], "data": [float(x) for x in matrix.ravel()]}


def _make_rng(seed: int | bytes | Sequence[int] | None) -> np.random.Generator:
    if isinstance(seed, (bytes, bytearray)):
        return np.random.default_rng(list(seed))
    return np.random.default_rng(seed)


class Member:
    """One individual: a network's weights and biases plus its game statistics."""

    def __init__(
        self,
        weights: Sequence[np.ndarray] | None = None,
        biases: Sequence[np.ndarray] | None = None,
        seed: int | bytes | Sequence[int] | None = None,
        generation: int = 0,
        architecture: NNArchitecture | None = None,
    ) -> None:
        self.nn_architecture = architecture if architecture is not None else NNArchitecture()
        rng = _make_rng(seed)
        layers = self.nn_architecture.layers

        if weights is None:
            self.weights = [
                rng.standard_normal((layer.output_dim, layer.input_dim)) for layer in layers
            ]
        else:
            self.weights = [np.array(w, dtype=float) for w in weights]

        if biases is None:
            self.biases = [rng.standard_normal((layer.output_dim, 1)) for layer in layers]
        else:
            self.biases = [np.array(b, dtype=float) for b in biases]

        self.fitness = 0.0
        self.generation = generation
        self.killed_by_wall = 0
        self.killed_by_myself = 0
        self.killed_by_hunger = 0
        self.apples_eaten = 0

    def feedforward(self, inputs: np.ndarray) -> np.ndarray:
        """Run a column vector through every layer of the network."""
        a = np.asarray(inputs, dtype=float)
        for layer, w, b in zip(self.nn_architecture.layers, self.weights, self.biases):
            a = forward_layer(a, w, b, layer.activation)
        return a

    def next_move(self, inputs: np.ndarray) -> int:
        """Index of the largest output; on ties the last such index wins."""
        best_idx = 0
        best_value: float | None = None
        for idx, value in enumerate(self.feedforward(inputs).ravel()):
            if best_value is None or not best_value > value:
                best_idx, best_value = idx, value
        return best_idx

    def play_game(self) -> int:
        """Play one game to its end, record how it ended and return its score."""
        game = SnakeGame()
        while game.alive:
            game.move(Direction(self.next_move(current_input(game))))

        if game.killed_by_hunger:
            self.killed_by_hunger += 1
        elif game.killed_by_myself:
            self.killed_by_myself += 1
        elif game.killed_by_wall:
            self.killed_by_wall += 1
        self.apples_eaten += game.apples_eaten
        return game.score

    def evaluate(self, iterations: int) -> float:
        """Reset statistics, play ``iterations`` games and set fitness to the mean score."""
        self.killed_by_hunger = 0
        self.killed_by_myself = 0
        self.killed_by_wall = 0
        self.apples_eaten = 0
        self.fitness = 0.0
        total = sum(self.play_game() for _ in range(iterations))
        self.fitness = total / iterations if iterations else float("nan")
        return self.fitness

    def to_dict(self) -> dict[str, Any]:
        """A JSON-ready description of the member."""
        return {
            "fitness": self.fitness,
            "nn_architecture": self.nn_architecture.to_dict(),
            "weights": [_matrix_to_dict(w) for w in self.weights],
            "biases": [_matrix_to_dict(b) for b in self.biases],
            "generation": self.generation,
            "killed_by_wall": self.killed_by_wall,
            "killed_by_myself": self.killed_by_myself,
            "killed_by_hunger": self.killed_by_hunger,
            "apples_eaten": self.apples_eaten,
        }