import argparse
import sys

from small_world.config import (
    DEFAULT_INPUT_PATH,
    DEFAULT_MAX_DEPTH,
    DEFAULT_SAMPLE_COUNT,
    DEFAULT_SEED,
    AnalysisConfig,
)
from small_world.exceptions import EmptySampleError, ParseError
from small_world.graph_store import load_graph
from small_world.plotting import plot_distributions
from small_world.report import format_report, format_significance
from small_world.sampler import analyze
from small_world.significance import small_world_ttest


def _positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be a non-negative integer, got {value}")
    return number


def parse_arguments(argv=None) -> argparse.Namespace:
    """
    Parse command-line arguments for the small-world analysis.

    Returns:
        argparse.Namespace: Parsed arguments containing:
            - edge_list: Path to the edge-list file (default facebook_combined.txt)
            - samples: Number of random pairs / roots per sampling pass
            - max_depth: Hop bound for the reachability pass
            - seed: Seed for the random source
            - no_seed: Boolean flag to leave the random source unseeded
            - significance: Boolean flag to run the one-sided t-test
            - plot: Boolean flag to show the sampled distributions
            - verbose: Boolean flag to print graph and sampling summaries
    """
    parser = argparse.ArgumentParser(
        description='Test the small-world hypothesis on a social network edge list.',
        usage='python -m small_world [edge_list.txt] [OPTIONS]'
    )

    parser.add_argument('edge_list',
                        type=str,
                        nargs='?',
                        default=str(DEFAULT_INPUT_PATH),
                        metavar='edge_list.txt',
                        help='Edge-list file, one "<id> <id>" pair per line '
                             f'(default: {DEFAULT_INPUT_PATH}).')

    parser.add_argument('--samples',
                        type=_positive_int,
                        default=DEFAULT_SAMPLE_COUNT,
                        metavar='N',
                        help=f'Random pairs / roots drawn per pass (default: {DEFAULT_SAMPLE_COUNT}).')

    parser.add_argument('--max_depth',
                        type=_non_negative_int,
                        default=DEFAULT_MAX_DEPTH,
                        metavar='k',
                        help=f'Hop bound for reachability (default: {DEFAULT_MAX_DEPTH}).')

    seed_group = parser.add_mutually_exclusive_group()
    seed_group.add_argument('--seed',
                            type=int,
                            default=DEFAULT_SEED,
                            help=f'Seed for the random source (default: {DEFAULT_SEED}).')
    seed_group.add_argument('--no_seed',
                            action='store_true',
                            help='Leave the random source unseeded.')

    parser.add_argument('--significance',
                        action='store_true',
                        help='Run a one-sided t-test of the sampled separation against 6.')

    parser.add_argument('--plot',
                        action='store_true',
                        help='Show histograms of the sampled path lengths and reachability.')

    parser.add_argument('--verbose',
                        action='store_true',
                        help='Print graph and sampling summaries.')

    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_arguments(argv)
    config = AnalysisConfig(
        input_path=args.edge_list,
        sample_count=args.samples,
        max_depth=args.max_depth,
        seed=None if args.no_seed else args.seed,
    )

    # ── GRAPH LOADING ─────────────────────────────────────────────────────────
    try:
        store = load_graph(config.input_path, verbose=args.verbose)
    except FileNotFoundError:
        print(f"Error: File '{config.input_path}' not found. Please check the path and try again.")
        return 1
    except PermissionError:
        print(f"Error: Permission denied reading '{config.input_path}'.")
        return 1
    except ParseError as err:
        print(f"Error: Invalid edge list '{config.input_path}': {err}")
        return 1
    except UnicodeDecodeError:
        print(f"Error: '{config.input_path}' is not a text edge list.")
        return 1
    except OSError as err:
        print(f"Error reading edge list: {err}")
        return 1

    # ── SAMPLING ──────────────────────────────────────────────────────────────
    try:
        result = analyze(store, config, verbose=args.verbose)
    except EmptySampleError as err:
        print(f"Error: {err}")
        return 1

    for line in format_report(result):
        print(line)

    # ── SIGNIFICANCE ──────────────────────────────────────────────────────────
    if args.significance:
        print(f"\n=== Small-World Significance Test (threshold: {config.small_world_threshold}) ===")
        significance = small_world_ttest(result.path_lengths, config.small_world_threshold)
        for line in format_significance(significance, config.small_world_threshold):
            print(line)

    # ── PLOT ──────────────────────────────────────────────────────────────────
    if args.plot:
        plot_distributions(result)

    return 0  # success


if __name__ == "__main__":
    sys.exit(main())
