import random
from dataclasses import dataclass, replace
from typing import Optional

import constants as const
from grid_core import MazeConfigError, validate_size


def parse_style(value: Optional[str]) -> str:
    """Resolves a style name; unknown values fall back to the plain grid."""
    if value is None:
        return const.STYLE_GRID
    style = const.STYLE_ALIASES.get(value.strip().lower())
    if style is None:
        print(f"Warning: Unknown style {value!r}, using '{const.STYLE_GRID}'.")
        return const.STYLE_GRID
    return style


@dataclass
class MazeConfig:
    size: int = const.DEFAULT_MAZE_SIZE
    style: str = const.STYLE_GRID
    seed: Optional[int] = None
    # None means the style default: doodle noise for grid, none otherwise
    jitter: Optional[float] = None

    def validate(self) -> "MazeConfig":
        """Returns a checked copy with the style resolved; self is left as given."""
        validate_size(self.size)
        if self.jitter is not None and self.jitter < 0:
            raise MazeConfigError(f"Jitter must be non-negative, got {self.jitter}.")
        return replace(self, style=parse_style(self.style))

    def resolve_jitter(self) -> float:
        if self.style != const.STYLE_GRID:
            return 0.0
        if self.jitter is None:
            return const.DEFAULT_JITTER
        return float(self.jitter)

    def make_rng(self) -> random.Random:
        return random.Random(self.seed)


__all__ = ["MazeConfig", "parse_style"]
