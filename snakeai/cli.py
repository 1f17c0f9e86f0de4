"""Command line entry point that runs the evolutionary training loop."""

from __future__ import annotations

import argparse
import json
from collections.abc import Iterable, Sequence
from os import PathLike

from snakeai.member import Member
from snakeai.population import Population

GENS = 3000
ITER_PER_MEMBER = 10

POP_SIZE = 100
BEST_N_TO_KEEP = 10
CROSSOVER_N = 89
RANDOM_N_TO_ADD = 1


def save_members(members: Iterable[Member], path: str | PathLike[str]) -> None:
    """Write the members as pretty-printed JSON to ``path``."""
    text = json.dumps([member.to_dict() for member in members], indent=2)
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(text)


def evolve(
    generations: int = GENS - 1,
    pop_size: int = POP_SIZE,
    iterations: int = ITER_PER_MEMBER,
    keep_best: int = BEST_N_TO_KEEP,
    crossovers: int = CROSSOVER_N,
    randoms: int = RANDOM_N_TO_ADD,
) -> Population:
    """Run ``generations`` rounds of evaluation and breeding; return the last population."""
    pop = Population(pop_size, iterations, 0)
    for generation in range(1, generations + 1):
        print(f"Generation {generation}")
        pop.update_fitness()

        new_pop = Population(0, iterations, generation)
        best = pop.best_members(keep_best)
        new_pop.add_members(best)
        new_pop.add_crossover_members(best, crossovers, generation)
        new_pop.add_random_members(randoms, generation)
        pop = new_pop
    return pop


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snakeai", description="Evolve neural networks that play snake."
    )
    parser.add_argument("--generations", type=int, default=GENS - 1)
    parser.add_argument("--pop-size", type=int, default=POP_SIZE)
    parser.add_argument("--iterations", type=int, default=ITER_PER_MEMBER)
    parser.add_argument("--keep-best", type=int, default=BEST_N_TO_KEEP)
    parser.add_argument("--crossovers", type=int, default=CROSSOVER_N)
    parser.add_argument("--randoms", type=int, default=RANDOM_N_TO_ADD)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments and run the training loop."""
    args = _build_parser().parse_args(argv)
    evolve(
        generations=args.generations,
        pop_size=args.pop_size,
        iterations=args.iterations,
        keep_best=args.keep_best,
        crossovers=args.crossovers,
        randoms=args.randoms,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())