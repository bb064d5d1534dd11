"""Default location of the bootstrap cache file."""

import sys
from pathlib import Path

CACHE_SUFFIX = ".bootstrap.cache"
DEFAULT_PROGRAM = "seedlist"


def default_cache_path(program: str | None = None) -> Path:
    """Return ./<program stem>.bootstrap.cache, one cache per program name.

    program defaults to the running script (sys.argv[0]).
    """
    if program is None:
        program = sys.argv[0] if sys.argv and sys.argv[0] else DEFAULT_PROGRAM
    stem = Path(program).stem or DEFAULT_PROGRAM
    return Path(".") / f"{stem}{CACHE_SUFFIX}"
