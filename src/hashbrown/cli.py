"""Command-line interface: digest files or compare two files."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from pydantic import ValidationError
import toml

from hashbrown.common import (
    ConfigLoader, HashbrownError, LogContext, expand_path_variables, setup_logging
)
from hashbrown.engine import (
    DigestError,
    DigestExecutor,
    HashAlgorithm,
    UnsupportedAlgorithmError,
    compare,
    describe_file,
)
from hashbrown.engine.config import HashbrownConfig

APP_NAME = "hashbrown"

EXIT_OK = 0
EXIT_DIFFERENT = 1
EXIT_DIGEST_FAILED = 1
EXIT_ERROR = 2

logger = logging.getLogger(__package__ or __name__)


def digest_command(
    config: HashbrownConfig,
    paths: Sequence[Path],
    algorithms_override: Optional[List[HashAlgorithm]] = None,
    chunk_size_override: Optional[int] = None,
    worker_threads_override: Optional[int] = None,
    verbose: bool = False,
) -> int:
    """Digest one or more files and print the results.

    With a single algorithm each line reads ``<hex>  <path>``; with several,
    ``<ALG> (<path>) = <hex>``.

    Args:
        config: Configuration object
        paths: Files to digest
        algorithms_override: Algorithms to use (default: config default)
        chunk_size_override: Optional override for chunk size
        worker_threads_override: Optional override for worker threads
        verbose: Also print file size and modification time

    Returns:
        Exit code (0 if every digest succeeded, 1 otherwise)
    """
    algorithms = algorithms_override or [config.engine.algorithm]
    chunk_size = chunk_size_override or config.engine.chunk_size
    worker_threads = worker_threads_override or config.engine.worker_threads
    tagged = len(algorithms) > 1

    with LogContext(logger, command="digest"):
        logger.info(
            f"Configuration: {{'files': {len(paths)}, 'algorithms': {[a.value for a in algorithms]}, "
            f"'chunk_size': {chunk_size}, 'worker_threads': {worker_threads}}}"
        )

        with DigestExecutor(worker_threads=worker_threads, chunk_size=chunk_size) as executor:
            results = executor.digest_many(paths, algorithms)

        failed = 0
        for path, algorithm, result in results:
            if isinstance(result, DigestError):
                failed += 1
                print(f"{APP_NAME}: {algorithm.value}: {result.message}", file=sys.stderr)
                continue

            if tagged:
                print(f"{algorithm.value} ({path}) = {result}")
            else:
                print(f"{result}  {path}")

            if verbose:
                _print_file_info(path)

        logger.info(f"Digest complete: {{'succeeded': {len(results) - failed}, 'failed': {failed}}}")

    return EXIT_DIGEST_FAILED if failed else EXIT_OK


def compare_command(
    config: HashbrownConfig,
    path_a: Path,
    path_b: Path,
    algorithm_override: Optional[HashAlgorithm] = None,
    chunk_size_override: Optional[int] = None,
    sequential: bool = False,
) -> int:
    """Compare two files by digest and print the outcome.

    Args:
        config: Configuration object
        path_a: First file
        path_b: Second file
        algorithm_override: Optional override for the algorithm
        chunk_size_override: Optional override for chunk size
        sequential: Digest the files one after the other

    Returns:
        Exit code (0 identical, 1 different, 2 error)
    """
    algorithm = algorithm_override or config.engine.algorithm
    chunk_size = chunk_size_override or config.engine.chunk_size

    with LogContext(logger, command="compare"):
        if path_a.resolve() == path_b.resolve():
            print(f"{APP_NAME}: cannot compare a file with itself: {path_a}", file=sys.stderr)
            return EXIT_ERROR

        logger.info(
            f"Configuration: {{'a': {str(path_a)!r}, 'b': {str(path_b)!r}, "
            f"'algorithm': {algorithm.value!r}, 'sequential': {sequential}}}"
        )

        outcome = compare(
            path_a,
            path_b,
            algorithm,
            chunk_size=chunk_size,
            concurrent=not sequential,
        )

        if outcome.is_error:
            print(f"{APP_NAME}: {outcome.summary}", file=sys.stderr)
            return EXIT_ERROR

        print(f"{outcome.summary} ({algorithm.value})")
        return EXIT_OK if outcome.is_identical else EXIT_DIFFERENT


def _print_file_info(path: Path) -> None:
    try:
        info = describe_file(path)
    except DigestError as e:
        logger.warning(f"File info unavailable: {{'path': {str(path)!r}, 'error': {e.message!r}}}")
        return
    print(f"    size: {info.file_size} bytes")
    print(f"    modified: {info.modified_time.isoformat()}")


def _algorithm_arg(value: str) -> HashAlgorithm:
    try:
        return HashAlgorithm.from_name(value)
    except UnsupportedAlgorithmError as e:
        raise argparse.ArgumentTypeError(e.message) from e


def _positive_int_arg(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {value!r}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the hashbrown command."""
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Compute file digests and compare files by digest"
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to config file (defaults.toml)"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Log level (overrides config)"
    )
    algorithm_names = ", ".join(a.value for a in HashAlgorithm)
    subparsers = parser.add_subparsers(dest="command", required=True)

    digest_parser = subparsers.add_parser("digest", help="Print file digests")
    digest_parser.add_argument("files", nargs="+", type=Path, help="Files to digest")
    digest_parser.add_argument(
        "-a", "--algorithm",
        dest="algorithms",
        action="append",
        type=_algorithm_arg,
        help=f"Hash algorithm, repeatable ({algorithm_names}; default from config)"
    )
    digest_parser.add_argument(
        "--chunk-size",
        type=_positive_int_arg,
        help="Bytes per read (overrides config)"
    )
    digest_parser.add_argument(
        "--workers",
        type=_positive_int_arg,
        help="Number of digest worker threads (overrides config)"
    )
    digest_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Also print file size and modification time"
    )

    compare_parser = subparsers.add_parser("compare", help="Compare two files by digest")
    compare_parser.add_argument("file_a", type=Path, help="First file")
    compare_parser.add_argument("file_b", type=Path, help="Second file")
    compare_parser.add_argument(
        "-a", "--algorithm",
        type=_algorithm_arg,
        help=f"Hash algorithm ({algorithm_names}; default from config)"
    )
    compare_parser.add_argument(
        "--chunk-size",
        type=_positive_int_arg,
        help="Bytes per read (overrides config)"
    )
    compare_parser.add_argument(
        "--sequential",
        action="store_true",
        help="Digest the two files one after the other instead of concurrently"
    )

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the hashbrown command."""
    args = build_parser().parse_args(argv)

    loader = ConfigLoader(app_name=APP_NAME, config_class=HashbrownConfig)
    try:
        config = loader.load(defaults_path=args.config)
    except (OSError, ValidationError, toml.TomlDecodeError) as e:
        print(f"{APP_NAME}: invalid configuration: {e}", file=sys.stderr)
        return EXIT_ERROR

    log_file = Path(expand_path_variables(config.logging.file)) if config.logging.file else None
    setup_logging(
        level=args.log_level or config.logging.level,
        format=config.logging.format,
        log_file=log_file,
    )

    try:
        if args.command == "digest":
            return digest_command(
                config=config,
                paths=args.files,
                algorithms_override=args.algorithms,
                chunk_size_override=args.chunk_size,
                worker_threads_override=args.workers,
                verbose=args.verbose,
            )
        return compare_command(
            config=config,
            path_a=args.file_a,
            path_b=args.file_b,
            algorithm_override=args.algorithm,
            chunk_size_override=args.chunk_size,
            sequential=args.sequential,
        )
    except HashbrownError as e:
        logger.error(f"Command failed: {{'error': {e.message!r}, 'context': {e.context!r}}}")
        print(f"{APP_NAME}: {e.message}", file=sys.stderr)
        return EXIT_ERROR
    except Exception as e:
        logger.exception(f"Command failed: {e}")
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
