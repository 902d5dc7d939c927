"""Read swatchbook settings from a .env file without clobbering the real environment.

Settings are plain SWATCHBOOK_* variables (see swatchbook.core.config.Settings).
A variable already set in the process environment always wins; the .env file
only fills gaps. Which file is read:
  - the --env-file path, when given (a missing path loads nothing), else
  - the first .env found walking up from the working directory. The walk
    stops at the directory holding .git (dir or worktree file), so a palette
    project never picks up an unrelated .env from a parent checkout.

Lines may be KEY=value, KEY="value" or export KEY=value; # comments are skipped.
"""

import os
from pathlib import Path


def _find_dotenv(start: Path) -> Path | None:
    """Walk up from start, return first .env found, stop at .git boundary."""
    current = start.resolve()
    while True:
        candidate = current / '.env'
        if candidate.is_file():
            return candidate
        # .git can be a dir (normal clone) or file (worktree)
        if (current / '.git').exists():
            return None
        parent = current.parent
        if parent == current:
            return None
        current = parent


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Parse a .env file into a dict. Handles KEY=value, KEY="value" and `export KEY=value`."""
    result: dict[str, str] = {}
    for line in path.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, raw_value = line.partition('=')
        key = key.strip().removeprefix('export ').strip()
        value = raw_value.strip().strip('"').strip("'")
        if key:
            result[key] = value
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Load .env into os.environ for keys not already set.

    Returns the path that was loaded, or None if no .env was found/used.
    """
    if env_file:
        path = Path(env_file)
        if not path.is_file():
            return None
    else:
        path = _find_dotenv(Path.cwd())
        if path is None:
            return None

    for key, value in _parse_dotenv(path).items():
        os.environ.setdefault(key, value)

    return path
