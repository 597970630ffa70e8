"""Command-line interface for the Asterisk Wrapper."""

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from .config import Config, load_config
from .providers import InMemoryMessageStore
from .notifiers import LoggingNotifier
from .service import AsteriskWrapper, WrapOutcome


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Asterisk Wrapper - Wrap plain chat text in *emphasis*",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s message.txt              # Print rewritten message
  echo 'hello world' | %(prog)s     # Read from stdin
  %(prog)s --check a.txt b.txt      # Exit 1 if anything would change
  %(prog)s -c config.yaml msg.txt   # Use specific config file
  %(prog)s --emphasis _ msg.txt     # Wrap with underscores instead
""",
    )

    parser.add_argument(
        "files",
        metavar="FILE",
        nargs="*",
        help="Message files to rewrite ('-' or none for stdin, decoded with the configured encoding)",
    )

    parser.add_argument(
        "-c", "--config",
        metavar="FILE",
        help="Path to YAML configuration file",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    parser.add_argument(
        "--check",
        action="store_true",
        help="Don't print anything, exit 1 if any message would change",
    )

    parser.add_argument(
        "--emphasis",
        metavar="CHAR",
        help="Emphasis delimiter (default: *)",
    )

    parser.add_argument(
        "--quote",
        metavar="CHAR",
        help='Quote delimiter (default: ")',
    )

    return parser.parse_args()


def read_messages(paths: list[str], encoding: str) -> list[str]:
    """
    Read one message per path.

    Args:
        paths: File paths; "-" reads stdin.
        encoding: Encoding for files and stdin.

    Returns:
        Message texts in the order given.

    Raises:
        OSError: If a file can't be read.
        UnicodeDecodeError: If input isn't valid in the given encoding.
        LookupError: If the encoding is unknown.
    """
    messages = []
    for path in paths or ["-"]:
        if path == "-":
            messages.append(sys.stdin.buffer.read().decode(encoding))
        else:
            messages.append(Path(path).read_text(encoding=encoding))
    return messages


def main() -> int:
    """Main entry point."""
    args = parse_args()
    setup_logging(args.verbose)

    logger = logging.getLogger(__name__)

    # Load configuration
    if args.config:
        try:
            config = load_config(args.config)
        except FileNotFoundError:
            logger.error(f"Config file not found: {args.config}")
            return 1
    else:
        config = Config()

    if config.verbose and not args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    # Override config with command line arguments
    if args.emphasis is not None:
        config = replace(config, emphasis_delimiter=args.emphasis)
    if args.quote is not None:
        config = replace(config, quote_delimiter=args.quote)

    try:
        messages = read_messages(args.files, config.encoding)
    except (OSError, UnicodeDecodeError, LookupError) as e:
        logger.error(f"Failed to read input: {e}")
        return 1

    store = InMemoryMessageStore(messages)
    try:
        wrapper = AsteriskWrapper(store, LoggingNotifier(), config)
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    counts = wrapper.wrap_all()

    if args.check:
        changed = counts[WrapOutcome.UPDATED]
        if changed:
            logger.info(f"{changed} message(s) would be rewritten")
            return 1
        return 0

    for text in store.messages():
        sys.stdout.write(text)

    return 0


if __name__ == "__main__":
    sys.exit(main())
