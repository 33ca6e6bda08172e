import logging

import numpy as np
import pytest

from bitgene.core.chromosome import IntegerChromosome
from bitgene.core.gene import ONE, ZERO
from bitgene.randomization import BasicRandomization, NumpyRandomization
from bitgene.utils import ChromosomeConfig, ensure_bit, ensure_genes, get_logger


def test_ensure_bit_normalizes_ints_and_bools():
    assert ensure_bit(0) is ZERO
    assert ensure_bit(1) is ONE
    assert ensure_bit(True) is ONE
    assert ensure_bit(ONE) is ONE


@pytest.mark.parametrize("value", [2, -1, 0.0, "1", None])
def test_ensure_bit_rejects_other_values(value):
    with pytest.raises(ValueError):
        ensure_bit(value)


def test_ensure_bit_accepts_numpy_integers():
    assert ensure_bit(np.int64(1)) is ONE
    assert ensure_bit(np.uint8(0)) is ZERO
    with pytest.raises(ValueError):
        ensure_bit(np.int64(2))
    with pytest.raises(ValueError):
        ensure_bit(np.float64(1.0))


def test_ensure_genes_reports_position():
    with pytest.raises(ValueError, match="position 2"):
        ensure_genes([0, 1, 5])
    assert ensure_genes((1, 0)) == [ONE, ZERO]


def test_config_defaults_round_trip():
    config = ChromosomeConfig()
    assert ChromosomeConfig.from_mapping(config.as_dict()) == config
    assert config.as_dict() == {
        "min_value": 0,
        "max_value": 2**31 - 1,
        "seed": None,
        "randomization": "basic",
    }


@pytest.mark.parametrize(
    "kwargs",
    [
        {"min_value": 10, "max_value": 1},
        {"min_value": -(2**31) - 1, "max_value": 0},
        {"max_value": 2**31},
        {"randomization": "quantum"},
    ],
)
def test_config_rejects_invalid_settings(kwargs):
    with pytest.raises(ValueError):
        ChromosomeConfig(**kwargs)


def test_config_from_mapping_rejects_unknown_keys():
    with pytest.raises(ValueError):
        ChromosomeConfig.from_mapping({"min_value": 0, "length": 16})


def test_config_builds_named_source():
    assert isinstance(ChromosomeConfig(randomization="numpy").build_random_source(), NumpyRandomization)
    assert isinstance(ChromosomeConfig().build_random_source(), BasicRandomization)


def test_config_create_chromosome_is_seeded():
    config = ChromosomeConfig(min_value=-100, max_value=100, seed=21)

    a = config.create_chromosome()
    b = config.create_chromosome()

    assert isinstance(a, IntegerChromosome)
    assert (a.min_value, a.max_value) == (-100, 100)
    assert a.to_integer() == b.to_integer()
    assert -100 <= a.to_integer() <= 100


def test_config_create_chromosome_with_shared_source(scripted_source):
    source = scripted_source(17)
    chromosome = ChromosomeConfig(min_value=0, max_value=20).create_chromosome(source)
    assert chromosome.random_source is source
    assert chromosome.to_integer() == 17


def test_get_logger_installs_single_handler():
    logger = get_logger("tests")
    again = get_logger("tests")
    root = logging.getLogger("bitgene")

    assert logger is again
    assert logger.name == "bitgene.tests"
    assert len(root.handlers) == 1
    assert root.level == logging.INFO


def test_get_logger_level_applies_to_package():
    try:
        get_logger(level="DEBUG")
        assert logging.getLogger("bitgene.core.chromosome").isEnabledFor(logging.DEBUG)
    finally:
        get_logger(level=logging.INFO)
