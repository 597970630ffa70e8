"""Configuration handling for the Asterisk Wrapper."""

from dataclasses import dataclass
from pathlib import Path
import yaml


@dataclass
class Config:
    """Configuration settings for the rewriter.

    Attributes:
        emphasis_delimiter: Character that marks emphasis.
        quote_delimiter: Character that marks quoted dialogue.
        encoding: Text encoding for files read from the command line.
        verbose: Enable debug logging.
    """

    emphasis_delimiter: str = "*"
    quote_delimiter: str = '"'
    encoding: str = "utf-8"
    verbose: bool = False


def load_config(path: str | Path) -> Config:
    """
    Load configuration from a YAML file.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        Config object with loaded values.

    Raises:
        FileNotFoundError: If config file doesn't exist.
    """
    config_path = Path(path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    # Extract sections
    rewriter = data.get("rewriter") or {}
    io = data.get("io") or {}
    logging_section = data.get("logging") or {}

    return Config(
        emphasis_delimiter=str(rewriter.get("emphasis_delimiter", Config.emphasis_delimiter)),
        quote_delimiter=str(rewriter.get("quote_delimiter", Config.quote_delimiter)),
        encoding=io.get("encoding", Config.encoding),
        verbose=bool(logging_section.get("verbose", Config.verbose)),
    )
