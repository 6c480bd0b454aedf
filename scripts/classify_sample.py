#!/usr/bin/env python
"""
Script to classify a single sample from sensor readings.
Usage: python classify_sample.py --pm25 150 --pm10 180 --no2 80 --o3 60 --city-type 1
"""
import sys
import argparse
import logging
from pathlib import Path

from pydantic import ValidationError

# Add parent directory to path
sys.path.append(str(Path(__file__).resolve().parent.parent))

# Import application modules
from aqi_simulator.config.settings import DEMO_SAMPLE, LOG_FORMAT
from aqi_simulator.models.sample import Sample
from aqi_simulator.models.schemas import SampleInput
from aqi_simulator.models.simulator import AQISimulator

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format=LOG_FORMAT,
)
logger = logging.getLogger(__name__)


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Classify AQI level and health risk for one sample")
    for name, value in DEMO_SAMPLE.items():
        parser.add_argument(
            f"--{name.replace('_', '-')}",
            type=int if name == "city_type" else float,
            default=value,
            help=f"{SampleInput.model_fields[name].description} (default: {value})"
        )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output in JSON format"
    )
    return parser.parse_args(argv)


def main(argv=None):
    """Main function to classify a sample."""
    args = parse_args(argv)

    try:
        sample_input = SampleInput(**{name: getattr(args, name) for name in DEMO_SAMPLE})
    except ValidationError as e:
        logger.error(f"Invalid sample: {str(e)}")
        return 1

    prediction = AQISimulator.classify(Sample.from_features(sample_input.model_dump()))

    if args.json:
        print(prediction.model_dump_json(indent=2))
    else:
        print(f"\nSample Classification Results:")
        print(f"------------------------------")
        for name, value in prediction.sample.model_dump().items():
            print(f"{name}: {value}")
        print(f"Pollution Score: {prediction.score:.3f}")
        print(f"AQI Level: {prediction.aqi_level} ({prediction.aqi_category})")
        print(f"Health Risk: {prediction.health_risk} ({prediction.health_risk_category})")
        print(f"------------------------------\n")

    return 0


if __name__ == "__main__":
    sys.exit(main())
