"""Main entry point: roll dice lazily and report what was drawn."""

import logging
import sys
import time

from .config import SequenceConfig, get_sequence_config
from .sources import DiceRolls, ReplaySequence
from .writers import ParquetSequenceWriter

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """Configure logging level.

    Args:
        verbose: Enable verbose logging
    """
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    else:
        logging.getLogger().setLevel(logging.INFO)


def print_summary(config: SequenceConfig, rolls: list, top: list, elapsed: float):
    """Print summary of the run.

    Args:
        config: Configuration the run used
        rolls: Every value of one full traversal
        top: Highest values, as produced by the composed query
        elapsed: Seconds spent traversing
    """
    print("\n" + "=" * 80)
    print("EXECUTION SUMMARY")
    print("=" * 80)

    print("\nDice:")
    print(f"  Seed: {config.seed}")
    print(f"  Sides: {config.dice_sides}")
    print(f"  Stops after rolling: {config.dice_sentinel}")

    print("\nTraversal:")
    print(f"  Rolls drawn: {len(rolls)}")
    print(f"  Values: {rolls}")
    print(f"  Top {config.take_limit} (descending): {top}")
    print(f"  Time taken: {elapsed:.4f} seconds")

    print("\n" + "=" * 80)


def main():
    """Main execution function."""
    try:
        config = get_sequence_config()
        setup_logging(config.verbose)

        logger.info("Starting lazy dice-roll run")
        rolls = DiceRolls(seed=config.seed, sides=config.dice_sides, sentinel=config.dice_sentinel)

        # Roll once; an unseeded die gives different rolls on every traversal
        start_time = time.time()
        drawn = ReplaySequence(rolls)
        elapsed = time.time() - start_time

        values = drawn.to_list()
        top = drawn.order_descending().take(config.take_limit).to_list()

        if config.output_file:
            logger.info(f"Writing rolls to {config.output_file}")
            writer = ParquetSequenceWriter(config.output_file, block_size=config.block_size)
            stats = writer.write(drawn)
            logger.info(f"Wrote {stats.total_rows} rows in {stats.total_batches} row groups")

        print_summary(config, values, top, elapsed)

        logger.info("Execution completed successfully!")
        return 0

    except KeyboardInterrupt:
        logger.warning("Execution interrupted by user")
        return 130
    except Exception as e:
        logger.error(f"Error during execution: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
