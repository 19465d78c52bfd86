# Force the headless Qt platform before any QApplication exists and provide a
# minimal 'qtbot' fallback when pytest-qt is not installed. If pytest-qt is
# present its fixture wins.

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

try:
    import pytestqt  # type: ignore  # noqa: F401
except ImportError:  # pragma: no cover

    @pytest.fixture
    def qtbot():  # type: ignore
        QApplication = pytest.importorskip("PyQt6.QtWidgets").QApplication
        QApplication.instance() or QApplication(sys.argv)
        widgets = []

        class Bot:
            def addWidget(self, w):  # mimic pytest-qt API subset
                widgets.append(w)

        yield Bot()
        for w in widgets:
            w.deleteLater()


@pytest.fixture
def settings_snapshot():
    """Restore the SettingsService singleton after a test mutates it."""
    from themes_report.gui.services.settings_service import SettingsService

    original = SettingsService.instance
    SettingsService.instance = SettingsService()
    yield SettingsService.instance
    SettingsService.instance = original
