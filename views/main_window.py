"""
Main application window.

Hosts the raster canvas plus the controls that feed the editor session:
tool and transform modes, stroke color/width, fill, lightness and
brightness.
"""

import logging
from typing import Optional

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QActionGroup, QColor, QKeySequence
from PyQt6.QtWidgets import (
    QMainWindow, QToolBar, QPushButton, QLabel, QSpinBox,
    QComboBox, QSlider, QColorDialog, QScrollArea,
)

from models import ToolMode, AffineMode, FillMode, EditorSession, SelectionSync
from services import EditorController, SettingsManager, render_mandelbrot_split
from views.image_surface import QImageSurface
from views.raster_canvas import RasterCanvas

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Raster shape editor window."""

    def __init__(self, settings_manager: Optional[SettingsManager] = None):
        super().__init__()
        self.settings_manager = settings_manager or SettingsManager()

        drawing = self.settings_manager.drawing
        self.session = EditorSession(
            stroke_color=drawing.stroke_color,
            stroke_width=drawing.stroke_width,
            fill_mode=drawing.fill_mode,
        )
        canvas = self.settings_manager.canvas
        self.controller = EditorController(
            surface=QImageSurface(canvas.width, canvas.height, canvas.background),
            settings=self.settings_manager,
        )

        # Setup
        self._setup_window()
        self._setup_central_widget()
        self._setup_menu()
        self._setup_toolbars()
        self._setup_status_bar()
        self._connect_signals()

        # Restore window geometry
        self._load_window_settings()

    def _load_window_settings(self):
        """Restore window geometry and state."""
        geometry, state = self.settings_manager.get_window_geometry()
        if geometry:
            self.restoreGeometry(geometry)
        if state:
            self.restoreState(state)

    def _save_window_settings(self):
        """Save window geometry and state."""
        self.settings_manager.save_window_geometry(
            bytes(self.saveGeometry()),
            bytes(self.saveState())
        )

    def closeEvent(self, event):
        """Handle window close - save settings."""
        self._save_window_settings()
        super().closeEvent(event)

    def _setup_window(self):
        """Configure window properties."""
        self.setWindowTitle("Raster Shape Editor")
        self.resize(1000, 760)
        self.setStyleSheet("""
            QMainWindow {
                background: #F3F4F6;
            }
            QToolBar {
                background: #F9FAFB;
                border-bottom: 1px solid #E5E7EB;
                spacing: 6px;
            }
        """)

    def _setup_central_widget(self):
        self.canvas = RasterCanvas(self.controller, self.session)
        scroll = QScrollArea()
        scroll.setWidget(self.canvas)
        scroll.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.setCentralWidget(scroll)

    def _setup_menu(self):
        """Create menu bar."""
        menubar = self.menuBar()

        file_menu = menubar.addMenu("&File")

        clear_action = QAction("&Clear Canvas", self)
        clear_action.setShortcut(QKeySequence.StandardKey.New)
        clear_action.triggered.connect(self._on_clear_canvas)
        file_menu.addAction(clear_action)

        fractal_action = QAction("Render &Mandelbrot", self)
        fractal_action.setShortcut("Ctrl+M")
        fractal_action.triggered.connect(self._on_render_fractal)
        file_menu.addAction(fractal_action)

        file_menu.addSeparator()

        exit_action = QAction("E&xit", self)
        exit_action.setShortcut(QKeySequence.StandardKey.Quit)
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

        edit_menu = menubar.addMenu("&Edit")

        delete_action = QAction("&Delete Selected", self)
        delete_action.setShortcut(QKeySequence.StandardKey.Delete)
        delete_action.triggered.connect(self._on_delete_selected)
        edit_menu.addAction(delete_action)

        reset_action = QAction("&Reset Lightness/Brightness", self)
        reset_action.triggered.connect(self._on_reset_adjustments)
        edit_menu.addAction(reset_action)

    def _setup_toolbars(self):
        """Mode toolbar plus style controls."""
        modes = QToolBar("Modes", self)
        modes.setMovable(False)
        self.addToolBar(modes)

        # Tool and affine modes are mutually exclusive
        self._mode_group = QActionGroup(self)
        self._mode_group.setExclusive(True)
        for label, mode in (("Line", ToolMode.LINE), ("Circle", ToolMode.CIRCLE),
                            ("Ellipse", ToolMode.ELLIPSE), ("Select", ToolMode.SELECT)):
            action = self._add_mode_action(modes, label)
            action.triggered.connect(lambda checked, m=mode: self._on_tool_mode(m))
        modes.addSeparator()
        for label, mode in (("Move", AffineMode.MOVE), ("Scale", AffineMode.SCALE),
                            ("Rotate", AffineMode.ROTATE)):
            action = self._add_mode_action(modes, label)
            action.triggered.connect(lambda checked, m=mode: self._on_affine_mode(m))

        style = QToolBar("Style", self)
        style.setMovable(False)
        self.addToolBar(style)

        self.color_btn = QPushButton()
        self.color_btn.setFixedWidth(48)
        self.color_btn.clicked.connect(self._on_pick_color)
        style.addWidget(QLabel(" Color "))
        style.addWidget(self.color_btn)

        self.width_spin = QSpinBox()
        self.width_spin.setRange(1, 50)
        self.width_spin.setValue(self.session.stroke_width)
        self.width_spin.valueChanged.connect(self._on_width_changed)
        style.addWidget(QLabel(" Width "))
        style.addWidget(self.width_spin)

        self.fill_combo = QComboBox()
        for fill in FillMode:
            self.fill_combo.addItem(fill.value.capitalize(), fill.value)
        self.fill_combo.currentIndexChanged.connect(self._on_fill_changed)
        style.addWidget(QLabel(" Fill "))
        style.addWidget(self.fill_combo)

        self.lightness_slider = self._make_slider()
        self.brightness_slider = self._make_slider()
        style.addWidget(QLabel(" Lightness "))
        style.addWidget(self.lightness_slider)
        style.addWidget(QLabel(" Brightness "))
        style.addWidget(self.brightness_slider)

        self._sync_controls()

    def _add_mode_action(self, toolbar: QToolBar, label: str) -> QAction:
        action = QAction(label, self)
        action.setCheckable(True)
        self._mode_group.addAction(action)
        toolbar.addAction(action)
        return action

    def _make_slider(self) -> QSlider:
        slider = QSlider(Qt.Orientation.Horizontal)
        slider.setRange(-100, 100)
        slider.setValue(0)
        slider.setFixedWidth(120)
        slider.valueChanged.connect(self._on_adjustment_changed)
        return slider

    def _setup_status_bar(self):
        self.statusBar().showMessage("Ready")

    def _connect_signals(self):
        self.controller.selectionChanged.connect(self._on_selection_changed)

    # =========================================================================
    # Control sync
    # =========================================================================

    def _sync_controls(self):
        """Push session values into the widgets without re-triggering them."""
        widgets = (self.width_spin, self.fill_combo, self.lightness_slider, self.brightness_slider)
        for w in widgets:
            w.blockSignals(True)
        self.color_btn.setStyleSheet(f"background: {self.session.stroke_color};")
        self.width_spin.setValue(self.session.stroke_width)
        self.fill_combo.setCurrentIndex(self.fill_combo.findData(self.session.fill_mode.value))
        self.lightness_slider.setValue(self.session.lightness)
        self.brightness_slider.setValue(self.session.brightness)
        for w in widgets:
            w.blockSignals(False)

    # =========================================================================
    # Handlers
    # =========================================================================

    def _on_tool_mode(self, mode: ToolMode):
        self.controller.set_tool_mode(self.session, mode)
        self.statusBar().showMessage(f"Tool: {mode.value}", 2000)

    def _on_affine_mode(self, mode: AffineMode):
        self.controller.set_affine_mode(self.session, mode)
        self.statusBar().showMessage(f"Transform: {mode.value} (click the canvas)", 2000)

    def _on_pick_color(self):
        color = QColorDialog.getColor(QColor(self.session.stroke_color), self, "Stroke Color")
        if not color.isValid():
            return
        hex_color = color.name()
        self.session.stroke_color = hex_color
        self.controller.recolor_selected(self.session, hex_color)
        self._sync_controls()

    def _on_width_changed(self, value: int):
        self.session.stroke_width = value

    def _on_fill_changed(self, index: int):
        fill = self.fill_combo.itemData(index)
        self.controller.set_fill_mode_selected(self.session, fill)

    def _on_adjustment_changed(self, _value: int):
        self.controller.adjust_selected(
            self.session,
            self.lightness_slider.value(),
            self.brightness_slider.value(),
        )

    def _on_reset_adjustments(self):
        self.controller.reset_adjustments(self.session)
        self._sync_controls()

    def _on_delete_selected(self):
        if self.controller.delete_selected(self.session):
            self.statusBar().showMessage("Deleted selected shape", 2000)

    def _on_clear_canvas(self):
        self.controller.clear_all(self.session)
        self.statusBar().showMessage("Canvas cleared", 2000)

    def _on_selection_changed(self, sync: Optional[SelectionSync]):
        self._sync_controls()
        if sync is None:
            self.statusBar().showMessage("No selection", 2000)
        else:
            kind = self.controller.store[sync.index].kind.value
            self.statusBar().showMessage(f"Selected {kind} #{sync.index}", 2000)

    def _on_render_fractal(self):
        canvas = self.settings_manager.canvas
        logger.info(f"Rendering Mandelbrot frame {canvas.width}x{canvas.height}")
        self.statusBar().showMessage("Rendering Mandelbrot...")
        buffer = render_mandelbrot_split(canvas.width, canvas.height,
                                         self.settings_manager.fractal.params())
        self.canvas.show_image_buffer(buffer)
        self.statusBar().showMessage("Mandelbrot rendered", 3000)
