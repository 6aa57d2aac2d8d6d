import json
import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt5 import QtCore, QtTest, QtWidgets  # noqa: E402

from passgen_pro.app import CLIPBOARD_CLEAR_SECONDS, MainWindow  # noqa: E402
from passgen_pro.history import STORAGE_KEY  # noqa: E402


@pytest.fixture(scope="module")
def qapp():
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app


@pytest.fixture
def settings_path(tmp_path):
    return str(tmp_path / "passgen.ini")


@pytest.fixture
def window(qapp, settings_path):
    win = MainWindow(QtCore.QSettings(settings_path, QtCore.QSettings.IniFormat))
    yield win
    win.deleteLater()


def wipe_timers(win):
    return [
        t for t in win.findChildren(QtCore.QTimer)
        if t.isActive() and t.interval() == CLIPBOARD_CLEAR_SECONDS * 1000
    ]


def test_second_copy_replaces_pending_wipe(window):
    window.on_generate_clicked()
    window.on_copy_clicked()
    window.on_copy_clicked()

    assert len(wipe_timers(window)) == 1
    assert window.copy_btn.text() == "Copied"


def test_wipe_clears_clipboard_holding_the_secret(qapp, window):
    window.on_generate_clicked()
    window.on_copy_clicked()
    secret = window.password_edit.text()
    assert qapp.clipboard().text() == secret

    (timer,) = wipe_timers(window)
    timer.start(1)
    QtTest.QTest.qWait(50)

    assert qapp.clipboard().text() == ""
    assert wipe_timers(window) == []


def test_wipe_leaves_replaced_clipboard_alone(qapp, window):
    window.on_generate_clicked()
    window.on_copy_clicked()
    qapp.clipboard().setText("something else")

    (timer,) = wipe_timers(window)
    timer.start(1)
    QtTest.QTest.qWait(50)

    assert qapp.clipboard().text() == "something else"


def test_copied_indicator_resets(window):
    window.on_generate_clicked()
    window.on_copy_clicked()
    assert window.copy_btn.text() == "Copied"

    window._copied_timer.start(1)
    QtTest.QTest.qWait(50)

    assert window.copy_btn.text() == "Copy"


def test_generate_without_categories_shows_error_and_no_output(window):
    for cb in (window.upper_cb, window.lower_cb, window.numbers_cb, window.symbols_cb):
        cb.setChecked(False)

    window.on_generate_clicked()

    assert window.error_label.text() != ""
    assert window.password_edit.text() == ""
    assert window.history.list() == []


def test_history_title_counts_entries(window):
    assert window.history_group.title() == "History (0)"
    window.on_generate_clicked()
    window.on_generate_clicked()
    assert window.history_group.title() == "History (2)"


def test_clear_history_asks_first(window, monkeypatch):
    window.on_generate_clicked()

    monkeypatch.setattr(QtWidgets.QMessageBox, "question", lambda *a, **k: QtWidgets.QMessageBox.No)
    window.on_clear_history_clicked()
    assert len(window.history.list()) == 1

    monkeypatch.setattr(QtWidgets.QMessageBox, "question", lambda *a, **k: QtWidgets.QMessageBox.Yes)
    window.on_clear_history_clicked()
    assert window.history.list() == []
    assert window.history_group.title() == "History (0)"


def test_reset_masks_the_secret_again(window):
    window.reveal_cb.setChecked(True)
    assert window.password_edit.echoMode() == QtWidgets.QLineEdit.Normal

    window.on_reset_clicked()

    assert not window.reveal_cb.isChecked()
    assert window.password_edit.echoMode() == QtWidgets.QLineEdit.Password


def test_window_starts_over_out_of_range_history(qapp, settings_path):
    entry = {"id": "1", "password": "pw", "createdAt": 10 ** 23, "strength": "weak", "length": 2}
    stored = QtCore.QSettings(settings_path, QtCore.QSettings.IniFormat)
    stored.setValue(STORAGE_KEY, json.dumps([entry]))
    stored.sync()

    win = MainWindow(QtCore.QSettings(settings_path, QtCore.QSettings.IniFormat))
    try:
        assert win.history_list.count() == 0
        assert win.history_group.title() == "History (0)"
    finally:
        win.deleteLater()


def test_save_qr_and_copy_actions_have_distinct_icons(window):
    actions = {a.text(): a for a in window.findChildren(QtWidgets.QAction)}
    copy_icon = actions["Copy to clipboard"].icon().pixmap(20, 20).toImage()
    save_icon = actions["Save QR code"].icon().pixmap(20, 20).toImage()

    assert not save_icon.isNull()
    assert copy_icon != save_icon
