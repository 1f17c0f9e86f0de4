# snakeai

Neuroevolution for Snake. Each population member is a small feed-forward
network (7 inputs, two hidden ReLU layers of 32 and 64 neurons, 3 sigmoid
outputs) that steers a snake on an 18×18 board. A genetic algorithm keeps the
fittest members, breeds new ones by crossover with occasional mutation, and
adds a few random newcomers each generation.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running the evolution

```
snakeai
```

This runs 2999 generations with the default settings (100 members, 10 games
per member, the best 10 kept, 89 crossovers and 1 random member per
generation), printing the generation number and the population's maximum and
average fitness as it goes. The options `--generations`, `--pop-size`,
`--iterations`, `--keep-best`, `--crossovers` and `--randoms` change these
settings; `snakeai --help` lists them.

## Using the library

```python
from snakeai.population import Population
from snakeai.cli import evolve, save_members

# Let the command's loop do the work; the last population is returned
pop = evolve(generations=50, pop_size=100, iterations=10,
             keep_best=10, crossovers=89, randoms=1)

# Or drive it yourself
pop = Population(20, 5, 0)
pop.update_fitness()
print(pop.average_fitness, pop.max_fitness, pop.apples_eaten)
best = pop.best_members(3)
save_members(best, "best_members.json")
```

Crossover and selection are available as functions in `snakeai.population`:
`select_proportional_by_fitness` (roulette-wheel selection; it raises
`ValueError` when the total fitness is not positive) and `cross_members`,
which takes a `MixType` (`ALL`, `PERCENTAGE`, `SINGLE`) and a `MixTarget`
(`WEIGHTS`, `BIASES`, `BOTH`, `RANDOM`).

Members can be evaluated on their own:

```python
from snakeai.member import Member

member = Member(seed=42)
member.evaluate(10)
print(member.fitness, member.apples_eaten)
print(member.to_dict()["nn_architecture"])
```

A game can be played by hand as well:

```python
from snakeai.snakegame import SnakeGame, Direction
from snakeai.sensors import current_input

game = SnakeGame()
print(current_input(game))      # the (7, 1) input the networks see
game.move(Direction.EAST)
print(game.render())
print(game.score, game.alive)
```

## Scoring

Each step the snake survives is worth 5 points and each apple 300. A snake
starves after 37 moves without eating. It dies on hitting a wall or itself,
or on turning straight back. Eating three apples ends the game with the top
score of 10000 (and prints `bingo!`).

## What it does not do

The `snakeai` command does not save anything while it trains; storing
members is left to `save_members`, called from your own code. There is no
graphical or interactive game screen: `SnakeGame.render` returns a text
picture of the board, and nothing more.