"""Configuration for the colorchan command line.

Settings come from COLORCHAN_* environment variables. A .env file can fill
in the ones that are missing:

  1. Existing OS environment variables — never overwritten.
  2. The file given with --env-file, if any.
  3. Otherwise the first .env found walking up from cwd, stopping at the
     nearest .git (directory or worktree file).

Recognised variables:
  COLORCHAN_MODEL   default Y'CbCr model name       (bt601)
  COLORCHAN_DTYPE   default channel storage dtype   (uint8)
  COLORCHAN_GAMUT   default out-of-gamut policy     (clip)
"""

from __future__ import annotations

import os
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = 'COLORCHAN_'


@dataclass(frozen=True)
class Settings:
    model: str = 'bt601'
    dtype: str = 'uint8'
    gamut: str = 'clip'


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Read Settings from the environment, falling back to defaults for blanks."""
    env = os.environ if environ is None else environ
    defaults = Settings()
    values = {}
    for name in ('model', 'dtype', 'gamut'):
        raw = env.get(ENV_PREFIX + name.upper(), '').strip()
        values[name] = raw or getattr(defaults, name)
    return Settings(**values)


def _walk_up(start: Path) -> Iterator[Path]:
    """Yield start and its parents, ending at the first directory holding .git."""
    current = start.resolve()
    while True:
        yield current
        if (current / '.git').exists() or current.parent == current:
            return
        current = current.parent


def _find_dotenv(start: Path) -> Path | None:
    for directory in _walk_up(start):
        candidate = directory / '.env'
        if candidate.is_file():
            return candidate
    return None


def _parse_line(line: str) -> tuple[str, str] | None:
    line = line.strip()
    if not line or line.startswith('#') or '=' not in line:
        return None
    if line.startswith('export '):
        line = line[len('export ') :]
    key, _, raw_value = line.partition('=')
    key = key.strip()
    if not key:
        return None
    return key, raw_value.strip().strip('"').strip("'")


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Parse KEY=value lines; quotes are stripped, comments and junk ignored."""
    pairs = (_parse_line(line) for line in path.read_text(encoding='utf-8').splitlines())
    return dict(p for p in pairs if p is not None)


def load_env(env_file: str | None = None) -> Path | None:
    """Copy .env values into os.environ for keys not already set.

    Returns the path that was loaded, or None if no file was used.
    """
    if env_file:
        path: Path | None = Path(env_file)
        if not path.is_file():
            return None
    else:
        path = _find_dotenv(Path.cwd())
        if path is None:
            return None

    for key, value in _parse_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path
