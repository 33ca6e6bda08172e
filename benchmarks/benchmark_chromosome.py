"""Chromosome operation micro benchmarks."""

from time import perf_counter

from bitgene.core.chromosome import IntegerChromosome
from bitgene.randomization import BasicRandomization, NumpyRandomization

SOURCES = {
    "basic": BasicRandomization(seed=0),
    "numpy": NumpyRandomization(seed=0),
}


def time_op(op, repeat: int = 10_000) -> float:
    start = perf_counter()
    for _ in range(repeat):
        op()
    return perf_counter() - start


if __name__ == "__main__":
    for name, source in SOURCES.items():
        chromosome = IntegerChromosome(0, 1_000_000, random_source=source)
        ops = {
            "construct": lambda: IntegerChromosome(0, 1_000_000, random_source=source),
            "clone": chromosome.clone,
            "flip_gene": lambda: chromosome.flip_gene(17),
            "to_integer": chromosome.to_integer,
        }
        for op_name, op in ops.items():
            print(f"{name}/{op_name}: {time_op(op):.6f}s")
