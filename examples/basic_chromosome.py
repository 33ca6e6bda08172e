"""Minimal example: build, evaluate, mutate and rank integer chromosomes."""

from __future__ import annotations

from bitgene.core.chromosome import IntegerChromosome
from bitgene.utils import ChromosomeConfig, get_logger

LOGGER = get_logger("examples", level="DEBUG")
TARGET = 1_000


def evaluate(chromosome: IntegerChromosome) -> None:
    chromosome.fitness = -abs(TARGET - chromosome.to_integer())


def main() -> None:
    config = ChromosomeConfig(min_value=0, max_value=2_000, seed=1234)
    source = config.build_random_source()
    population = [config.create_chromosome(source) for _ in range(8)]

    for chromosome in population:
        evaluate(chromosome)
    population.sort(reverse=True)
    best = population[0]
    LOGGER.info("Best seed value %d (fitness %s) bits=%s", best.to_integer(), best.fitness, best)

    # Flip the least significant bit of a copy; the copy must be re-evaluated.
    mutant = best.clone()
    mutant.flip_gene(31)
    LOGGER.info("Mutant %d fitness after flip: %s", mutant.to_integer(), mutant.fitness)
    evaluate(mutant)

    winner = max(best, mutant)
    LOGGER.info("Winner %d with fitness %s", winner.to_integer(), winner.fitness)


if __name__ == "__main__":
    main()
