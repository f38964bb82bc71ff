"""Data models and constants for the image-to-picross converter."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

# AIDEV-NOTE: Raw board cell values. 0..255 are filled cells (color index in
# color mode, MONO_FILL in monochrome mode).
EMPTY_CELL = -1
MONO_FILL = 255

# Fixed opacity cutoff used by color_difference, independent of the
# configurable alpha threshold. Keep the two separate.
COLOR_DISTANCE_ALPHA = 128

# Presentation colors
BACKGROUND_COLOR = "#ffffff"
FOREGROUND_COLOR = "#000000"

# Configuration file path
CONFIG_FILE = Path.home() / ".picross_config.json"


class BoardPolicy(Enum):
    """Strategies for turning opaque cells into filled board cells.

    AIDEV-NOTE: SILHOUETTE is the current behavior. OUTLINE keeps only opaque
    cells that border transparency or a sharp color change.
    """

    SILHOUETTE = "silhouette"  # Every opaque cell is filled
    OUTLINE = "outline"  # Edge and color-change cells only


@dataclass(frozen=True)
class PixelData:
    """One RGBA pixel, each channel 0-255."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0


TRANSPARENT_PIXEL = PixelData(0, 0, 0, 0)


@dataclass(frozen=True)
class BoundingBox:
    """Tight rectangle around all pixels above the alpha threshold.

    A fully transparent image yields an inverted box
    (min_x=image width, min_y=image height, max_x=max_y=0).
    """

    min_x: int
    min_y: int
    max_x: int
    max_y: int
    width: int
    height: int

    @property
    def is_empty(self) -> bool:
        return self.max_x < self.min_x or self.max_y < self.min_y


@dataclass
class ProcessingConfig:
    """Configuration for converting an image into a board."""

    board_size: int = 16  # Output grid is board_size x board_size
    color_threshold: float = 80  # Euclidean RGB distance (OUTLINE policy only)
    alpha_threshold: int = 128  # Opaque means alpha > alpha_threshold
    color_mode: bool = False  # Emit quantized color indices instead of MONO_FILL
    board_policy: BoardPolicy = BoardPolicy.SILHOUETTE

    # camelCase names accepted by from_dict
    _ALIASES = {
        "boardSize": "board_size",
        "colorThreshold": "color_threshold",
        "alphaThreshold": "alpha_threshold",
        "colorMode": "color_mode",
        "boardPolicy": "board_policy",
    }

    @classmethod
    def from_dict(cls, data: dict) -> "ProcessingConfig":
        """Build a config from a partial mapping, falling back to defaults.

        Accepts both snake_case field names and their camelCase aliases.
        """
        config = cls()
        for key, value in data.items():
            name = cls._ALIASES.get(key, key)
            if name == "board_policy":
                value = BoardPolicy(value)
            if name in ("board_size", "color_threshold", "alpha_threshold",
                        "color_mode", "board_policy"):
                setattr(config, name, value)
        return config

    def validate(self) -> None:
        """Raise ValueError for settings the pipeline cannot use."""
        if (
            isinstance(self.board_size, bool)
            or not isinstance(self.board_size, int)
            or self.board_size < 1
        ):
            raise ValueError(f"board_size must be a positive integer, got {self.board_size!r}")
        if self.alpha_threshold < 0:
            raise ValueError(f"alpha_threshold must be >= 0, got {self.alpha_threshold!r}")
        if self.color_threshold < 0:
            raise ValueError(f"color_threshold must be >= 0, got {self.color_threshold!r}")
        if not isinstance(self.color_mode, bool):
            raise ValueError(f"color_mode must be a boolean, got {self.color_mode!r}")
        if not isinstance(self.board_policy, BoardPolicy):
            raise ValueError(f"Unknown board policy: {self.board_policy!r}")


# --- Board Models ---


@dataclass
class PicrossClueData:
    """Length of one run of filled cells in a row or column."""

    value: int
    completed: bool = False


@dataclass
class PicrossCellData:
    """A single board cell as seen by the presentation layer.

    AIDEV-NOTE: `correct` is ground truth fixed at generation time.
    `pushed` and `marked` belong to the player and are only initialized here.
    """

    color: str
    enabled: bool = True
    pushed: bool = False
    correct: bool = False
    marked: bool = False
    text: "str | None" = None


@dataclass
class PicrossRowData:
    cells: "list[PicrossCellData]" = field(default_factory=list)


@dataclass
class PicrossBoardData:
    """Full board: cell rows plus row and column clues."""

    rows: "list[PicrossRowData]"
    row_clues: "list[list[PicrossClueData]]"
    column_clues: "list[list[PicrossClueData]]"

    @property
    def size(self) -> int:
        return len(self.rows)


@dataclass
class ProcessingResult:
    """Result of the image-to-board pipeline."""

    board: PicrossBoardData
    board_size: int

    # Raw matrix: EMPTY_CELL or 0..255, row-major
    matrix: "list[list[int]]" = field(default_factory=list)

    # Crop used for rescaling
    bounding_box: "BoundingBox | None" = None
