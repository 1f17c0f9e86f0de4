"""A generation of snake players and the genetic operators that breed the next one."""

from __future__ import annotations

import copy
import math
from collections.abc import Iterable, Sequence
from enum import Enum

import numpy as np

from snakeai.member import Member

DEFAULT_ITERATIONS = 10

MIX_TYPE_ALL_PERCENTAGE = 30
MIX_TYPE_HALF_PERCENTAGE = 60

MIX_WEIGHTS_PERCENTAGE = 50
MIX_BIASES_PERCENTAGE = 50

MIX_MUTATE_PERCENTAGE = 1


class MixType(Enum):
    """How many genes a child takes from its second parent."""

    ALL = "all"
    PERCENTAGE = "percentage"
    SINGLE = "single"


class MixTarget(Enum):
    """Which parameters of the network are crossed over."""

    WEIGHTS = "weights"
    BIASES = "biases"
    BOTH = "both"
    RANDOM = "random"


def select_proportional_by_fitness(
    members: Sequence[Member], rng: np.random.Generator | None = None
) -> Member:
    """Roulette-wheel selection: a copy of a member picked with probability ~ fitness."""
    rng = rng if rng is not None else np.random.default_rng()
    total = sum(member.fitness for member in members)
    if not 0.0 < total < math.inf:
        raise ValueError(f"total fitness must be positive and finite, got {total}")

    wheel = rng.uniform(0.0, total)
    for member in members:
        if wheel < member.fitness:
            return copy.deepcopy(member)
        wheel -= member.fitness
    raise RuntimeError("could not select a member proportionally; check the fitness values")


def _random_index(rng: np.random.Generator, matrices: Sequence[np.ndarray]) -> tuple[int, int, int]:
    i = int(rng.integers(len(matrices)))
    rows, cols = matrices[i].shape
    return i, int(rng.integers(rows)), int(rng.integers(cols))


def cross_members(
    mem1: Member,
    mem2: Member,
    mix_type: MixType,
    mix_target: MixTarget,
    mutate: bool,
    generation: int,
    rng: np.random.Generator | None = None,
) -> Member:
    """A child that starts as ``mem1`` and takes genes from ``mem2``, perhaps mutated."""
    rng = rng if rng is not None else np.random.default_rng()
    child = Member(weights=mem1.weights, biases=mem1.biases, generation=generation)

    if mix_target is MixTarget.WEIGHTS:
        change_weights, change_biases = True, False
    elif mix_target is MixTarget.BIASES:
        change_weights, change_biases = False, True
    elif mix_target is MixTarget.BOTH:
        change_weights, change_biases = True, True
    else:
        change_weights = bool(rng.random() < 0.5)
        change_biases = bool(rng.random() < 0.5)

    targets = []
    if change_weights:
        targets.append((child.weights, mem2.weights))
    if change_biases:
        targets.append((child.biases, mem2.biases))

    if mix_type is MixType.SINGLE:
        for mine, theirs in targets:
            i, j, k = _random_index(rng, mine)
            mine[i][j, k] = theirs[i][j, k]
    else:
        percentage = 100 if mix_type is MixType.ALL else 50
        for mine, theirs in targets:
            for matrix, donor in zip(mine, theirs):
                mask = rng.integers(1, 101, size=matrix.shape) <= percentage
                matrix[mask] = donor[mask]

    if mutate:
        for mine, _ in targets:
            i, j, k = _random_index(rng, mine)
            mine[i][j, k] = rng.uniform(-1.0, 1.0)

    return child


class Population:
    """A set of members together with statistics from their last evaluation."""

    def __init__(
        self, size: int = 0, iterations: int | None = None, generation: int = 0
    ) -> None:
        self.members: list[Member] = [Member(generation=generation) for _ in range(size)]
        self.iterations = DEFAULT_ITERATIONS if iterations is None else iterations
        self.killed_by_wall = 0
        self.killed_by_myself = 0
        self.killed_by_hunger = 0
        self.apples_eaten = 0
        self.average_fitness = 0.0
        self.max_fitness = 0.0
        self._rng = np.random.default_rng()

    def add_members(self, members: Iterable[Member]) -> None:
        """Append the given members."""
        self.members.extend(members)

    def add_random_members(self, quantity: int, generation: int) -> None:
        """Append ``quantity`` freshly initialised members."""
        self.members.extend(Member(generation=generation) for _ in range(quantity))

    def best_members(self, quantity: int) -> list[Member]:
        """Copies of the ``quantity`` fittest members, fittest first."""
        ranked = sorted(self.members, key=lambda member: member.fitness, reverse=True)
        return [copy.deepcopy(member) for member in ranked[:quantity]]

    def add_crossover_members(
        self, best_members: Sequence[Member], quantity: int, generation: int
    ) -> None:
        """Append ``quantity`` children bred from fitness-weighted parents."""
        rng = self._rng
        children = []
        for _ in range(quantity):
            roll = int(rng.integers(0, 100))
            if roll < MIX_TYPE_ALL_PERCENTAGE:
                mix_type = MixType.ALL
            elif roll < MIX_TYPE_HALF_PERCENTAGE:
                mix_type = MixType.PERCENTAGE
            else:
                mix_type = MixType.SINGLE

            weights_hit = int(rng.integers(0, 100)) < MIX_WEIGHTS_PERCENTAGE
            biases_hit = int(rng.integers(0, 100)) < MIX_BIASES_PERCENTAGE
            if weights_hit and biases_hit:
                mix_target = MixTarget.BOTH
            elif weights_hit:
                mix_target = MixTarget.WEIGHTS
            elif biases_hit:
                mix_target = MixTarget.BIASES
            else:
                mix_target = MixTarget.RANDOM

            mutate = bool(rng.random() < MIX_MUTATE_PERCENTAGE / 100.0)

            parent1 = select_proportional_by_fitness(best_members, rng)
            parent2 = select_proportional_by_fitness(best_members, rng)
            children.append(
                cross_members(parent1, parent2, mix_type, mix_target, mutate, generation, rng)
            )
        self.add_members(children)

    def update_fitness(self) -> None:
        """Evaluate every member, gather the totals and print a summary line."""
        self.killed_by_wall = 0
        self.killed_by_myself = 0
        self.killed_by_hunger = 0
        self.apples_eaten = 0
        self.average_fitness = 0.0

        total_fitness = 0.0
        max_fitness = 0.0
        for member in self.members:
            member.evaluate(self.iterations)
            self.killed_by_wall += member.killed_by_wall
            self.killed_by_myself += member.killed_by_myself
            self.killed_by_hunger += member.killed_by_hunger
            self.apples_eaten += member.apples_eaten
            total_fitness += member.fitness
            if member.fitness > max_fitness:
                max_fitness = member.fitness

        self.max_fitness = max_fitness
        self.average_fitness = (
            total_fitness / len(self.members) if self.members else float("nan")
        )
        print(
            f"[Population] max(Fit): {max_fitness:.0f}, avg(Fit): {self.average_fitness:.0f}"
        )