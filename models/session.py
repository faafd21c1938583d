"""
Editor session model.

Holds everything the input layer and UI controls contribute to an editing
operation: current tool and affine modes, the pending gesture start point,
the active selection and the control values (color, width, fill,
lightness, brightness). A session is passed explicitly into every
controller operation.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .primitives import ToolMode, AffineMode, FillMode


@dataclass
class SelectionSync:
    """Control values pushed to the UI when the selection changes."""
    index: int
    color: str
    fill_mode: FillMode = FillMode.NONE
    lightness: int = 0
    brightness: int = 0


@dataclass
class EditorSession:
    """
    Per-editor mutable state.

    Attributes:
        tool_mode: Active drawing/selection tool
        affine_mode: Active transform, exclusive with tool_mode
        selected_index: Index into the shape store, or None
        stroke_color: Color picker value ("#rrggbb")
        stroke_width: Width spin box value
        fill_mode: Fill selector value
        lightness: Lightness slider, -100..100
        brightness: Brightness slider
        gesture_start: Pointer-down position of the gesture in progress
    """
    tool_mode: ToolMode = ToolMode.NONE
    affine_mode: AffineMode = AffineMode.NONE
    selected_index: Optional[int] = None
    stroke_color: str = "#000000"
    stroke_width: int = 2
    fill_mode: FillMode = FillMode.NONE
    lightness: int = 0
    brightness: int = 0
    gesture_start: Optional[Tuple[float, float]] = None

    def __post_init__(self):
        if isinstance(self.tool_mode, str):
            self.tool_mode = ToolMode(self.tool_mode)
        if isinstance(self.affine_mode, str):
            self.affine_mode = AffineMode(self.affine_mode)
        if isinstance(self.fill_mode, str):
            self.fill_mode = FillMode(self.fill_mode)
        self.stroke_width = max(1, int(self.stroke_width))

    @property
    def has_selection(self) -> bool:
        return self.selected_index is not None

    def set_tool_mode(self, mode: ToolMode):
        """Switch tool; any affine mode is dropped."""
        self.tool_mode = ToolMode(mode) if isinstance(mode, str) else mode
        self.affine_mode = AffineMode.NONE

    def set_affine_mode(self, mode: AffineMode):
        """Switch affine transform; any tool mode is dropped."""
        self.affine_mode = AffineMode(mode) if isinstance(mode, str) else mode
        self.tool_mode = ToolMode.NONE

    def reset_adjustments(self):
        self.lightness = 0
        self.brightness = 0

    def sync_from(self, sync: SelectionSync):
        """Copy selection control values into the session."""
        self.stroke_color = sync.color
        self.fill_mode = sync.fill_mode
        self.lightness = sync.lightness
        self.brightness = sync.brightness
