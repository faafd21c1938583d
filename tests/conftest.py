"""
Pytest configuration and shared fixtures for raster shape editor tests.
"""

import os
import pytest
import tempfile
import shutil
from pathlib import Path
from typing import Generator

# Add parent directory to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

# Qt surface tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from models.primitives import (
    LinePrimitive, CirclePrimitive, EllipsePrimitive, FillMode, ToolMode,
)
from models.session import EditorSession
from services.settings_manager import SettingsManager
from services.shape_store import EditorController
from services.surface import RecordingSurface


# ============== Temporary Directory Fixtures ==============

@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    tmp = tempfile.mkdtemp(prefix="raster_editor_test_")
    yield Path(tmp)
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def settings_path(temp_dir: Path) -> Path:
    """Path for a throwaway settings file."""
    return temp_dir / "config" / "settings.json"


@pytest.fixture
def settings_manager(settings_path: Path) -> SettingsManager:
    """Settings manager backed by a temporary file."""
    return SettingsManager(str(settings_path))


# ============== Primitive Fixtures ==============

@pytest.fixture
def horizontal_line() -> LinePrimitive:
    """Line from (0, 0) to (3, 0), width 1."""
    return LinePrimitive(0, 0, 3, 0, color="#000000", stroke_width=1)


@pytest.fixture
def solid_circle() -> CirclePrimitive:
    """Solid circle at (50, 50) with radius 10."""
    return CirclePrimitive(50, 50, 10, color="#ff0000", stroke_width=1, fill_mode=FillMode.SOLID)


@pytest.fixture
def outline_ellipse() -> EllipsePrimitive:
    """Unfilled ellipse at (100, 80) with radii 20 x 10."""
    return EllipsePrimitive(100, 80, 20, 10, color="#0000ff", stroke_width=1)


# ============== Editor Fixtures ==============

@pytest.fixture
def session() -> EditorSession:
    """Fresh editor session with default controls."""
    return EditorSession(stroke_color="#000000", stroke_width=1)


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture
def controller(qapp, surface: RecordingSurface) -> EditorController:
    """Controller painting onto a recording surface."""
    return EditorController(surface=surface)


@pytest.fixture
def overlapping_circles(controller: EditorController, session: EditorSession) -> EditorController:
    """Two circles whose outlines both pass through (100, 100)."""
    controller.add_primitive(session, CirclePrimitive(90, 100, 10, color="#ff0000", base_color="#ff0000"))
    controller.add_primitive(session, CirclePrimitive(110, 100, 10, color="#00ff00", base_color="#00ff00"))
    session.selected_index = None
    return controller


@pytest.fixture
def drawing_session(session: EditorSession) -> EditorSession:
    """Session with the line tool active."""
    session.set_tool_mode(ToolMode.LINE)
    return session


# ============== Qt Fixtures ==============

@pytest.fixture(scope="session")
def qapp():
    """Offscreen QApplication shared by Qt tests."""
    from PyQt6.QtWidgets import QApplication
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app
