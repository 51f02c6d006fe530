import logging
import os
from pathlib import Path


def _int_from_env(name, default):
    """Reads an integer setting from the environment, keeping the default on bad input."""
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        print(f"Warning: {name}={raw!r} is not an integer. Using the default of {default}.")
        return default


def _sentence_band_from_env(min_name, max_name, defaults):
    """Reads the sentences-per-paragraph band, keeping the defaults unless 1 <= min <= max."""
    low = _int_from_env(min_name, defaults[0])
    high = _int_from_env(max_name, defaults[1])
    if not 1 <= low <= high:
        print(f"Warning: {min_name}={low} and {max_name}={high} do not satisfy 1 <= min <= max. "
              f"Using the defaults of {defaults[0]} and {defaults[1]}.")
        return defaults
    return low, high


def _log_level_from_env(name, default):
    """Reads a logging level name from the environment, keeping the default if it is unknown."""
    level = os.environ.get(name, default).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        print(f"Warning: {name}={level!r} is not a logging level. Using the default of {default}.")
        return default
    return level


# --- Path Configuration ---
# LIPSUM_DATA_DIR may point at a directory holding replacement corpus files.
PACKAGE_ROOT = Path(__file__).parent
DATA_DIR = Path(os.environ.get('LIPSUM_DATA_DIR', PACKAGE_ROOT / 'data'))
LOREM_IPSUM_PATH = DATA_DIR / 'lorem-ipsum.txt'
LIBER_PRIMUS_PATH = DATA_DIR / 'liber-primus.txt'

# --- Chain Configuration ---
DEFAULT_ORDER = _int_from_env('LIPSUM_ORDER', 2)
MAX_ORDER = 8

# --- Generation Configuration ---
# Paragraph length is drawn uniformly from this band (inclusive).
MIN_SENTENCES_PER_PARAGRAPH, MAX_SENTENCES_PER_PARAGRAPH = _sentence_band_from_env(
    'LIPSUM_MIN_SENTENCES', 'LIPSUM_MAX_SENTENCES', (3, 7))

TITLE_MIN_WORDS = 3
TITLE_MAX_WORDS = 8

DEFAULT_WORD_COUNT = 25

# --- Logging ---
LOG_LEVEL = _log_level_from_env('LIPSUM_LOG_LEVEL', 'WARNING')
LOG_FORMAT = '%(levelname)s: %(message)s'
