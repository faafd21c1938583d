"""
Settings Manager.

Handles editor settings with JSON file storage.
"""

import json
import logging
import os
from dataclasses import dataclass, field, asdict, fields
from typing import Optional, List
from pathlib import Path

from models.primitives import FillMode
from models.raster import StrokeStyle
from services.color_adjuster import hex_to_rgb
from services.affine import DEFAULT_MOVE_OFFSET, DEFAULT_SCALE_FACTOR, DEFAULT_ROTATE_DEGREES
from services.fractal import MandelbrotParams
from services.hit_tester import DEFAULT_HIT_PADDING, DEFAULT_ELLIPSE_TOLERANCE
from services.primitive_registry import HitOptions

logger = logging.getLogger(__name__)


def _checked_color(value: str) -> str:
    if hex_to_rgb(value) is None:
        raise ValueError(f"Invalid color: {value!r}")
    return value


@dataclass
class CanvasSettings:
    """Drawing surface size and background."""
    width: int = 800
    height: int = 600
    background: str = "#ffffff"

    def __post_init__(self):
        self.width = int(self.width)
        self.height = int(self.height)
        self.background = _checked_color(self.background)


@dataclass
class DrawingDefaults:
    """Initial values of the drawing controls."""
    stroke_color: str = "#000000"
    stroke_width: int = 2
    fill_mode: str = "none"

    def __post_init__(self):
        self.stroke_color = _checked_color(self.stroke_color)
        self.stroke_width = max(1, int(self.stroke_width))
        self.fill_mode = FillMode(self.fill_mode).value


@dataclass
class AffineSettings:
    """Step sizes for the move/scale/rotate tools."""
    move_dx: float = DEFAULT_MOVE_OFFSET[0]
    move_dy: float = DEFAULT_MOVE_OFFSET[1]
    scale_factor: float = DEFAULT_SCALE_FACTOR
    rotate_degrees: float = DEFAULT_ROTATE_DEGREES

    def __post_init__(self):
        self.move_dx = float(self.move_dx)
        self.move_dy = float(self.move_dy)
        self.scale_factor = float(self.scale_factor)
        self.rotate_degrees = float(self.rotate_degrees)


@dataclass
class SelectionSettings:
    """Selection outline style and hit-test tolerances."""
    outline_color: str = "#ff0000"
    outline_width: int = 1
    dash: List[int] = field(default_factory=lambda: [5, 3])
    margin: float = 4
    hit_padding: float = DEFAULT_HIT_PADDING
    ellipse_tolerance: float = DEFAULT_ELLIPSE_TOLERANCE

    def __post_init__(self):
        self.outline_color = _checked_color(self.outline_color)
        self.outline_width = max(1, int(self.outline_width))
        self.dash = [int(d) for d in self.dash]
        self.margin = float(self.margin)
        self.hit_padding = float(self.hit_padding)
        self.ellipse_tolerance = float(self.ellipse_tolerance)

    def outline_style(self) -> StrokeStyle:
        return StrokeStyle(self.outline_color, self.outline_width, tuple(self.dash))

    def hit_options(self) -> HitOptions:
        return HitOptions(self.hit_padding, self.ellipse_tolerance)


@dataclass
class FractalSettings:
    """Mandelbrot window and color ramp."""
    max_iterations: int = 100
    x_min: float = -2.5
    x_max: float = 1.0
    y_min: float = -1.2
    y_max: float = 1.2
    color_step: int = 10

    def __post_init__(self):
        self.max_iterations = int(self.max_iterations)
        self.color_step = int(self.color_step)
        for name in ("x_min", "x_max", "y_min", "y_max"):
            setattr(self, name, float(getattr(self, name)))

    def params(self) -> MandelbrotParams:
        return MandelbrotParams(**asdict(self))


def _from_group(cls, data: dict):
    """
    Build a settings group, ignoring keys it does not know.

    A group with a malformed value falls back to its defaults.
    """
    known = {f.name for f in fields(cls)}
    try:
        return cls(**{k: v for k, v in data.items() if k in known})
    except (AttributeError, TypeError, ValueError) as e:
        logger.warning(f"Invalid {cls.__name__} values, using defaults: {e}")
        return cls()


@dataclass
class AppSettings:
    """Complete application settings."""
    canvas: CanvasSettings = field(default_factory=CanvasSettings)
    drawing: DrawingDefaults = field(default_factory=DrawingDefaults)
    affine: AffineSettings = field(default_factory=AffineSettings)
    selection: SelectionSettings = field(default_factory=SelectionSettings)
    fractal: FractalSettings = field(default_factory=FractalSettings)
    window_geometry: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "canvas": asdict(self.canvas),
            "drawing": asdict(self.drawing),
            "affine": asdict(self.affine),
            "selection": asdict(self.selection),
            "fractal": asdict(self.fractal),
            "window_geometry": self.window_geometry,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AppSettings":
        """Create from dictionary."""
        settings = cls()

        if "canvas" in data:
            settings.canvas = _from_group(CanvasSettings, data["canvas"])
        if "drawing" in data:
            settings.drawing = _from_group(DrawingDefaults, data["drawing"])
        if "affine" in data:
            settings.affine = _from_group(AffineSettings, data["affine"])
        if "selection" in data:
            settings.selection = _from_group(SelectionSettings, data["selection"])
        if "fractal" in data:
            settings.fractal = _from_group(FractalSettings, data["fractal"])
        if "window_geometry" in data:
            settings.window_geometry = data["window_geometry"]

        return settings


class SettingsManager:
    """
    Manages editor settings with JSON file storage.

    Settings file location:
    - Windows: %APPDATA%/RasterShapeEditor/settings.json
    - Linux: ~/.config/RasterShapeEditor/settings.json
    - macOS: ~/Library/Application Support/RasterShapeEditor/settings.json
    """

    APP_NAME = "RasterShapeEditor"
    SETTINGS_FILE = "settings.json"

    def __init__(self, config_override: Optional[str] = None):
        """
        Initialize settings manager.

        Args:
            config_override: Optional path to override config file location.
                            Useful for testing.
        """
        self._settings = AppSettings()
        self._config_override = config_override
        self._settings_path = self._get_settings_path()
        self._ensure_settings_dir()
        self.load()

    @property
    def settings(self) -> AppSettings:
        """Get current settings."""
        return self._settings

    @property
    def settings_path(self) -> str:
        """Get the settings file path."""
        return str(self._settings_path)

    @property
    def canvas(self) -> CanvasSettings:
        return self._settings.canvas

    @property
    def drawing(self) -> DrawingDefaults:
        return self._settings.drawing

    @property
    def affine(self) -> AffineSettings:
        return self._settings.affine

    @property
    def selection(self) -> SelectionSettings:
        return self._settings.selection

    @property
    def fractal(self) -> FractalSettings:
        return self._settings.fractal

    def _get_settings_path(self) -> Path:
        """Get platform-specific settings directory."""
        if self._config_override:
            return Path(self._config_override)

        import platform
        system = platform.system()

        if system == "Windows":
            base = os.environ.get("APPDATA", os.path.expanduser("~"))
            config_dir = Path(base) / self.APP_NAME
        elif system == "Darwin":  # macOS
            config_dir = Path.home() / "Library" / "Application Support" / self.APP_NAME
        else:  # Linux and others
            xdg_config = os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
            config_dir = Path(xdg_config) / self.APP_NAME

        return config_dir / self.SETTINGS_FILE

    def _ensure_settings_dir(self):
        """Create settings directory if it doesn't exist."""
        self._settings_path.parent.mkdir(parents=True, exist_ok=True)

    def load(self) -> bool:
        """Load settings from file."""
        if not self._settings_path.exists():
            return False

        try:
            with open(self._settings_path, "r", encoding="utf-8") as f:
                data = json.load(f)
            self._settings = AppSettings.from_dict(data)
            return True
        except (OSError, ValueError, TypeError, AttributeError) as e:
            logger.warning(f"Error loading settings from {self._settings_path}: {e}")
            self._settings = AppSettings()
            return False

    def save(self) -> bool:
        """Save settings to file."""
        try:
            self._ensure_settings_dir()
            with open(self._settings_path, "w", encoding="utf-8") as f:
                json.dump(self._settings.to_dict(), f, indent=2)
            return True
        except (OSError, TypeError) as e:
            logger.warning(f"Error saving settings to {self._settings_path}: {e}")
            return False

    def reset(self):
        """Reset settings to defaults."""
        self._settings = AppSettings()
        self.save()

    def save_window_geometry(self, geometry: bytes, state: bytes):
        """Save window geometry and state."""
        import base64
        self._settings.window_geometry = {
            "geometry": base64.b64encode(geometry).decode("ascii"),
            "state": base64.b64encode(state).decode("ascii"),
        }
        self.save()

    def get_window_geometry(self) -> tuple:
        """Get saved window geometry and state."""
        import base64
        geo = self._settings.window_geometry
        if not geo:
            return None, None

        try:
            geometry = base64.b64decode(geo.get("geometry", ""))
            state = base64.b64decode(geo.get("state", ""))
            return geometry, state
        except (ValueError, TypeError):
            return None, None
