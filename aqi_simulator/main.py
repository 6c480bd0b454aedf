"""
Main entry point for the AQI simulator.
"""
import sys
import argparse
import logging
from typing import List, Optional

from aqi_simulator.config.settings import (
    DEFAULT_NUM_SAMPLES,
    DEFAULT_TEST_SIZE,
    DEFAULT_LOG_LEVEL,
    LOG_FORMAT,
)
from aqi_simulator.models.sample import parse_sample_line
from aqi_simulator.models.schemas import SimulationResponse
from aqi_simulator.models.simulator import AQISimulator
from aqi_simulator.utils.report import (
    BANNER,
    INPUT_PROMPT,
    CLOSING_NOTE,
    format_evaluation_report,
    format_prediction,
)

logger = logging.getLogger(__name__)


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def fraction(value: str) -> float:
    number = float(value)
    if not 0.0 < number < 1.0:
        raise argparse.ArgumentTypeError(f"must be between 0 and 1, got {value}")
    return number


def parse_args(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Generate a synthetic air quality dataset, evaluate the rule-based "
                    "predictor and classify one sample"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the random generator (default: unseeded)"
    )
    parser.add_argument(
        "--samples",
        type=positive_int,
        default=DEFAULT_NUM_SAMPLES,
        help="Number of samples to generate"
    )
    parser.add_argument(
        "--test-size",
        type=fraction,
        default=DEFAULT_TEST_SIZE,
        help="Proportion of data held out for evaluation"
    )
    parser.add_argument(
        "--sample",
        type=str,
        default=None,
        help="Sample to classify instead of prompting: nine values or 'demo'"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output in JSON format"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=DEFAULT_LOG_LEVEL,
        help="Logging level"
    )
    return parser.parse_args(argv)


def read_sample_line(prompt: str) -> str:
    """Read one line from stdin, treating end of input as an empty line."""
    try:
        return input(prompt)
    except EOFError:
        return ""


def main(argv: Optional[List[str]] = None) -> int:
    """Run the simulation, print the report and classify one sample."""
    args = parse_args(argv)

    # Configure logging
    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)

    simulator = AQISimulator(seed=args.seed, num_samples=args.samples, test_size=args.test_size)
    evaluation = simulator.run()

    if args.json:
        line = args.sample if args.sample is not None else read_sample_line("")
        sample, _ = parse_sample_line(line)
        result = SimulationResponse(evaluation=evaluation, prediction=simulator.classify(sample))
        print(result.model_dump_json(indent=2))
        return 0

    print(f"{BANNER}\n")
    print(format_evaluation_report(evaluation))

    line = args.sample if args.sample is not None else read_sample_line(INPUT_PROMPT)
    sample, _ = parse_sample_line(line)
    logger.info(f"Classifying {sample!r}")

    print(f"\n{format_prediction(simulator.classify(sample))}")
    print(f"\n{CLOSING_NOTE}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
