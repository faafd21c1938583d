"""
Shape Store and Editor Controller.

ShapeStore is the ordered collection of primitives (insertion order is paint
order). EditorController owns a store, applies every editing operation on
behalf of an EditorSession and repaints the surface after each mutation.

Usage:
    controller = EditorController(surface=RecordingSurface())
    session = EditorSession(tool_mode=ToolMode.CIRCLE)
    controller.pointer_pressed(session, 50, 50)
    controller.pointer_released(session, 60, 50)   # adds a circle, r=10
"""

import logging
import math
from typing import Iterator, List, Optional, Tuple

from PyQt6.QtCore import QObject, pyqtSignal

from models.primitives import (
    Primitive, LinePrimitive, CirclePrimitive, EllipsePrimitive,
    ToolMode, AffineMode, FillMode,
    is_fillable, with_color, with_fill_mode,
)
from models.raster import StrokeStyle, ClearCommand, FillRectCommand, StrokeRectCommand
from models.session import EditorSession, SelectionSync
from services.color_adjuster import apply_lightness_brightness, normalize_hex
from services.primitive_registry import HitOptions, get_handler
from services.surface import RecordingSurface

logger = logging.getLogger(__name__)


class ShapeStore:
    """
    Ordered, index-addressed primitive collection.

    Append-only apart from explicit removal; replacing an entry commits a
    transformed copy in place.
    """

    def __init__(self):
        self._primitives: List[Primitive] = []

    def __len__(self) -> int:
        return len(self._primitives)

    def __iter__(self) -> Iterator[Primitive]:
        return iter(self._primitives)

    def __getitem__(self, index: int) -> Primitive:
        return self._primitives[index]

    def append(self, primitive: Primitive) -> int:
        """Append and return the new index."""
        self._primitives.append(primitive)
        return len(self._primitives) - 1

    def replace(self, index: int, primitive: Primitive):
        self._primitives[index] = primitive

    def remove(self, index: int) -> Primitive:
        return self._primitives.pop(index)

    def clear(self):
        self._primitives.clear()

    def has_index(self, index: Optional[int]) -> bool:
        return index is not None and 0 <= index < len(self._primitives)

    def topmost_hit(self, x: float, y: float, options: HitOptions = HitOptions()) -> Optional[int]:
        """Index of the last-inserted primitive hit at (x, y), or None."""
        for index in range(len(self._primitives) - 1, -1, -1):
            primitive = self._primitives[index]
            if get_handler(primitive).hit_test(primitive, x, y, options):
                return index
        return None


def primitive_from_gesture(session: EditorSession, start: Tuple[float, float],
                           end: Tuple[float, float]) -> Optional[Primitive]:
    """
    Build the primitive a completed drag creates in the session's tool mode.

    Lines join start to end; circles and ellipses are centered on start.
    Returns None for non-drawing modes.
    """
    sx, sy = start
    ex, ey = end
    color = session.stroke_color
    width = session.stroke_width

    if session.tool_mode == ToolMode.LINE:
        return LinePrimitive(sx, sy, ex, ey, color=color, base_color=color, stroke_width=width)
    if session.tool_mode == ToolMode.CIRCLE:
        return CirclePrimitive(
            sx, sy, math.hypot(ex - sx, ey - sy),
            color=color, base_color=color, stroke_width=width, fill_mode=session.fill_mode,
        )
    if session.tool_mode == ToolMode.ELLIPSE:
        return EllipsePrimitive(
            sx, sy, abs(ex - sx), abs(ey - sy),
            color=color, base_color=color, stroke_width=width, fill_mode=session.fill_mode,
        )
    return None


class EditorController(QObject):
    """
    Applies editing operations and keeps the surface in sync.

    Every mutating operation ends with a full redraw: clear, repaint all
    primitives in insertion order, then outline the selection.

    Signals:
        selectionChanged(object): SelectionSync for the new selection, or None
        redrawn(): Emitted after each full redraw
    """

    selectionChanged = pyqtSignal(object)
    redrawn = pyqtSignal()

    def __init__(self, surface=None, settings=None, parent: Optional[QObject] = None):
        """
        Args:
            surface: Surface to paint on (defaults to a RecordingSurface)
            settings: Optional SettingsManager supplying canvas size, affine
                      steps and selection style
        """
        super().__init__(parent)
        self.store = ShapeStore()
        self.surface = surface if surface is not None else RecordingSurface()

        if settings is not None:
            self.canvas_size = (settings.canvas.width, settings.canvas.height)
            self.move_offset = (settings.affine.move_dx, settings.affine.move_dy)
            self.scale_factor = settings.affine.scale_factor
            self.rotate_degrees = settings.affine.rotate_degrees
            self.outline_style = settings.selection.outline_style()
            self.selection_margin = settings.selection.margin
            self.hit_options = settings.selection.hit_options()
        else:
            self.canvas_size = (800, 600)
            self.move_offset = (10.0, 10.0)
            self.scale_factor = 1.2
            self.rotate_degrees = 15.0
            self.outline_style = StrokeStyle()
            self.selection_margin = 4
            self.hit_options = HitOptions()

    # =========================================================================
    # Helpers
    # =========================================================================

    def selected(self, session: EditorSession) -> Optional[Primitive]:
        """The selected primitive, or None (also for a stale index)."""
        if self.store.has_index(session.selected_index):
            return self.store[session.selected_index]
        return None

    def _commit(self, session: EditorSession, primitive: Primitive):
        self.store.replace(session.selected_index, primitive)

    def _notify_selection(self, session: EditorSession, sync: Optional[SelectionSync]):
        if sync is not None:
            session.sync_from(sync)
        self.selectionChanged.emit(sync)

    # =========================================================================
    # Public API
    # =========================================================================

    def set_tool_mode(self, session: EditorSession, mode: ToolMode) -> list:
        session.set_tool_mode(mode)
        return self.redraw(session)

    def set_affine_mode(self, session: EditorSession, mode: AffineMode) -> list:
        session.set_affine_mode(mode)
        return self.redraw(session)

    def add_primitive(self, session: EditorSession, primitive: Primitive) -> int:
        """Append a primitive; it becomes the selection."""
        index = self.store.append(primitive)
        session.selected_index = index
        logger.debug(f"Added {primitive.kind.value} at index {index}")
        self.redraw(session)
        return index

    def select_at(self, session: EditorSession, x: float, y: float) -> Optional[int]:
        """
        Select the topmost primitive under (x, y).

        A miss clears the selection. A hit initializes an unset base color
        from the displayed color and pushes the primitive's control values
        (with neutral lightness/brightness) through ``selectionChanged``.
        """
        index = self.store.topmost_hit(x, y, self.hit_options)
        session.selected_index = index

        if index is None:
            logger.debug(f"Nothing selected at ({x}, {y})")
            self.selectionChanged.emit(None)
        else:
            primitive = self.store[index]
            if not primitive.base_color:
                primitive = with_color(primitive, primitive.color, base_color=primitive.color)
                self.store.replace(index, primitive)
            logger.debug(f"Selected {primitive.kind.value} at index {index}")
            self._notify_selection(session, SelectionSync(
                index=index,
                color=primitive.color,
                fill_mode=primitive.fill_mode,
            ))

        self.redraw(session)
        return index

    def recolor_selected(self, session: EditorSession, color: str) -> bool:
        """Set both displayed and base color of the selection."""
        primitive = self.selected(session)
        if primitive is None:
            return False
        color = normalize_hex(color)
        session.stroke_color = color
        self._commit(session, with_color(primitive, color, base_color=color))
        logger.debug(f"Recolored index {session.selected_index} to {color}")
        self.redraw(session)
        return True

    def set_fill_mode_selected(self, session: EditorSession, fill_mode: FillMode) -> bool:
        """Change the fill of a selected circle/ellipse; lines are left alone."""
        if isinstance(fill_mode, str):
            fill_mode = FillMode(fill_mode)
        session.fill_mode = fill_mode
        primitive = self.selected(session)
        if primitive is None or not is_fillable(primitive):
            return False
        self._commit(session, with_fill_mode(primitive, fill_mode))
        self.redraw(session)
        return True

    def adjust_selected(self, session: EditorSession, lightness: int, brightness: int) -> bool:
        """Recompute the selection's color from its base color and the deltas."""
        session.lightness = lightness
        session.brightness = brightness
        primitive = self.selected(session)
        if primitive is None:
            return False
        base = primitive.base_color or primitive.color
        color = apply_lightness_brightness(base, lightness, brightness)
        self._commit(session, with_color(primitive, color, base_color=base))
        self.redraw(session)
        return True

    def reset_adjustments(self, session: EditorSession) -> bool:
        """Zero lightness/brightness and restore the base color."""
        session.reset_adjustments()
        primitive = self.selected(session)
        if primitive is None:
            return False
        if primitive.base_color:
            self._commit(session, with_color(primitive, primitive.base_color))
        self.redraw(session)
        return True

    def apply_affine(self, session: EditorSession, mode: Optional[AffineMode] = None,
                     pivot: Optional[Tuple[float, float]] = None) -> bool:
        """
        Transform the selection.

        Args:
            mode: Transform to apply (defaults to the session's affine mode)
            pivot: Rotation pivot; required for ROTATE

        Returns:
            True if a primitive was transformed
        """
        mode = mode or session.affine_mode
        if isinstance(mode, str):
            mode = AffineMode(mode)
        primitive = self.selected(session)
        if primitive is None or mode == AffineMode.NONE:
            return False

        handler = get_handler(primitive)
        if mode == AffineMode.MOVE:
            dx, dy = self.move_offset
            transformed = handler.translate(primitive, dx, dy)
        elif mode == AffineMode.SCALE:
            transformed = handler.scale(primitive, self.scale_factor)
        elif mode == AffineMode.ROTATE:
            if pivot is None:
                return False
            transformed = handler.rotate(primitive, pivot, self.rotate_degrees)
        else:
            return False

        self._commit(session, transformed)
        logger.debug(f"Applied {mode.value} to index {session.selected_index}")
        self.redraw(session)
        return True

    def delete_selected(self, session: EditorSession) -> bool:
        if self.selected(session) is None:
            return False
        removed = self.store.remove(session.selected_index)
        logger.debug(f"Deleted {removed.kind.value} at index {session.selected_index}")
        session.selected_index = None
        self.selectionChanged.emit(None)
        self.redraw(session)
        return True

    def clear_all(self, session: EditorSession):
        self.store.clear()
        session.selected_index = None
        self.selectionChanged.emit(None)
        self.redraw(session)

    # =========================================================================
    # Pointer input
    # =========================================================================

    def pointer_pressed(self, session: EditorSession, x: float, y: float):
        """
        Pointer-down: select in SELECT mode, transform with an affine mode,
        otherwise remember the gesture start.
        """
        session.gesture_start = (x, y)

        if session.tool_mode == ToolMode.SELECT:
            self.select_at(session, x, y)
            return

        if session.affine_mode != AffineMode.NONE and session.has_selection:
            self.apply_affine(session, session.affine_mode, pivot=(x, y))

    def pointer_released(self, session: EditorSession, x: float, y: float) -> Optional[int]:
        """Pointer-up: in a drawing mode, create a primitive from the gesture."""
        if not session.tool_mode.draws or session.gesture_start is None:
            return None
        primitive = primitive_from_gesture(session, session.gesture_start, (x, y))
        session.gesture_start = None
        return self.add_primitive(session, primitive)

    # =========================================================================
    # Rendering
    # =========================================================================

    def selection_outline(self, primitive: Primitive) -> StrokeRectCommand:
        """Dashed bounding box around ``primitive`` with the selection margin."""
        min_x, min_y, max_x, max_y = primitive.bounds()
        m = self.selection_margin
        return StrokeRectCommand(
            min_x - m, min_y - m,
            (max_x - min_x) + 2 * m, (max_y - min_y) + 2 * m,
            self.outline_style,
        )

    def render_commands(self, session: EditorSession) -> list:
        """Full redraw as a list of draw commands."""
        width, height = self.canvas_size
        commands = [ClearCommand(width, height)]
        for primitive in self.store:
            for rect in get_handler(primitive).rasterize(primitive):
                commands.append(FillRectCommand(rect.x, rect.y, rect.w, rect.h, primitive.color))

        primitive = self.selected(session)
        if primitive is not None:
            commands.append(self.selection_outline(primitive))
        return commands

    def redraw(self, session: EditorSession) -> list:
        """Repaint the surface from scratch and return the commands used."""
        commands = self.render_commands(session)
        with self.surface.frame():
            for command in commands:
                command.apply_to(self.surface)
        self.redrawn.emit()
        return commands
