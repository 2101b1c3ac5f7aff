"""Shared types for pixel-codec: EditMode, Level, Exhibit, View, Report."""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from pixel_codec.core.codec import channel_max

Pixel = tuple[int, int, int]


class EditMode(str, enum.Enum):
    """Which digit alphabet the learner types for a level."""

    BINARY = 'binary'
    HEXADECIMAL = 'hexadecimal'


@dataclass(frozen=True)
class Level:
    """One stage of the exercise, from the level catalog or built ad hoc."""

    index: int | None  # 0-based catalog position, None for custom levels
    bpp: int  # bits per pixel
    edit: EditMode
    title: str = ''
    instructions: str = ''

    @property
    def number(self) -> int | None:
        """Level number as shown to learners (1-based)."""
        return None if self.index is None else self.index + 1

    @property
    def slug(self) -> str:
        if self.index is None:
            return f'custom-{self.bpp}bpp'
        return f'level-{self.number}'

    @property
    def max_value(self) -> int:
        return channel_max(self.bpp)

    @property
    def colour_count(self) -> int:
        return 1 << self.bpp

    @property
    def shows_hex_view(self) -> bool:
        # hex is only a readable abbreviation once a channel is a whole nibble
        return self.edit is EditMode.BINARY and self.bpp >= 12


@dataclass
class Exhibit:
    """Learner text for one level, run through the codec pipeline."""

    level: Level
    text: str
    data: str = ''  # normalized digits as typed
    binary: str = ''
    hex: str = ''
    pixels: list[Pixel] = field(default_factory=list)
    hex_view: str | None = None


class View:
    """A self-registering report view.

    Usage in a view module:

        view = View(name='pixels', help='Decoded RGB triples')

        @view.run
        def run(exhibit, report, args):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._run_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def execute(self, exhibit: Exhibit, report: Report, args: Any) -> None:
        """Execute the view's run function."""
        if self._run_fn is None:
            raise RuntimeError(f'View {self.name} has no run function')
        self._run_fn(exhibit, report, args)


@dataclass
class Report:
    """Accumulates sections from views for text/JSON output."""

    source_path: str = ''
    level: Level | None = None
    sections: dict[str, dict[str, Any]] = field(default_factory=dict)
    errors: list[str] = field(default_factory=list)

    def add(self, view_name: str, data: dict[str, Any]) -> None:
        """Add (or replace) the section produced by a view."""
        self.sections[view_name] = data

    def record_error(self, view_name: str, message: str) -> None:
        self.errors.append(f'{view_name}: {message}')
        self.add(view_name, {'error': message})
