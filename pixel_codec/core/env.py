"""Configuration for pixel-codec: .env loading and settings.

Load order (first wins):
  1. Existing OS environment variables — never overwritten.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Recognised variables:
  PIXEL_CODEC_LEVEL       default level number, 1-5 (default 1)
  PIXEL_CODEC_PIXEL_SIZE  rendered size of one pixel in px (default 32)

Command-line flags override both.
"""

import os
import sys
from dataclasses import dataclass
from pathlib import Path

from pixel_codec.core.raster import PIXEL_SIZE

LEVEL_VAR = 'PIXEL_CODEC_LEVEL'
PIXEL_SIZE_VAR = 'PIXEL_CODEC_PIXEL_SIZE'


@dataclass(frozen=True)
class Settings:
    level: int = 1
    pixel_size: int = PIXEL_SIZE


def _find_dotenv(start: Path) -> Path | None:
    """Return the nearest .env at or above start, without crossing a .git boundary."""
    for directory in (start.resolve(), *start.resolve().parents):
        candidate = directory / '.env'
        if candidate.is_file():
            return candidate
        if (directory / '.git').exists():
            return None
    return None


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Parse KEY=value lines. Blank lines, # comments and lines without '=' are skipped."""
    result: dict[str, str] = {}
    for raw in path.read_text(encoding='utf-8').splitlines():
        line = raw.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, value = line.partition('=')
        key = key.strip()
        if key:
            result[key] = value.strip().strip('"').strip("'")
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Copy .env values into os.environ for keys not already set.

    Returns the path that was loaded, or None if no .env was found/used.
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


def _int_setting(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        return int(raw)
    except ValueError:
        print(f'pixel-codec: ignoring {name}={raw!r} (not an integer), using {default}', file=sys.stderr)
        return default


def load_settings() -> Settings:
    """Read settings from the environment (call load_env first to include .env)."""
    return Settings(
        level=_int_setting(LEVEL_VAR, Settings.level),
        pixel_size=_int_setting(PIXEL_SIZE_VAR, Settings.pixel_size),
    )
