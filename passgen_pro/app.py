# -*- coding: utf-8 -*-
"""
PassGen Pro desktop window (PyQt5).

- Password or passphrase mode, options held in one immutable GenerationOptions.
- Strength tier, entropy, crack-time estimate and compliance badges.
- Clipboard wipe 30 seconds after copy; "Copied" indicator clears after 2 seconds.
- Persistent history (20 most recent) and preferences via QSettings.
- QR code preview and PNG export.
"""

from __future__ import annotations

import logging
import sys
import time
from typing import Optional

from PyQt5 import QtCore, QtGui, QtWidgets

from .charsets import GenerationOptions
from .compliance import ComplianceBadges
from .errors import ConfigurationError, RenderError
from .history import HistoryStore, QSettingsBackend
from .qr import render_qr_png
from .service import MODE_PASSPHRASE, MODE_PASSWORD, GenerationRequest, generate_secret
from .strength import TIER_FAIR, TIER_GOOD, TIER_STRONG, TIER_VERY_STRONG

# -------------------------
# Application Constants
# -------------------------

APP_ORG = "PassGenPro"
APP_NAME = "PasswordGenerator"
APP_TITLE = "PassGen Pro"

DEFAULT_LENGTH = 16
MIN_LENGTH = 8
MAX_LENGTH = 32

DEFAULT_WORD_COUNT = 4
MIN_WORD_COUNT = 3
MAX_WORD_COUNT = 7

CLIPBOARD_CLEAR_SECONDS = 30
COPIED_INDICATOR_SECONDS = 2

# Strength bar is drawn against the very-strong threshold.
STRENGTH_BAR_MAX_BITS = 128

TIER_LABELS = {
    "weak": "Weak",
    "fair": "Fair",
    "good": "Good",
    "strong": "Strong",
    "very-strong": "Very strong",
}

logger = logging.getLogger(__name__)


# =========================
#        MAIN WINDOW
# =========================

class MainWindow(QtWidgets.QMainWindow):
    """
    Main generator window.

    - Options panel (mode, length / word count, categories, exclusions)
    - Output panel (secret, strength, badges, QR)
    - Persistent history
    """

    def __init__(self, settings: Optional[QtCore.QSettings] = None) -> None:
        super().__init__()

        self.settings = settings if settings is not None else QtCore.QSettings(APP_ORG, APP_NAME)
        self.history = HistoryStore(QSettingsBackend(self.settings))

        self.setWindowTitle(APP_TITLE)
        self.setMinimumSize(900, 600)

        self._current_secret: str = ""
        self._last_copied_value: str = ""
        self._clipboard_clear_timer: Optional[QtCore.QTimer] = None

        self._copied_timer = QtCore.QTimer(self)
        self._copied_timer.setSingleShot(True)
        self._copied_timer.timeout.connect(self._reset_copy_button)

        self._apply_global_styles()
        self._build_ui()
        self._load_settings()
        self._on_mode_changed()
        self.refresh_history()

    # ---------- UI CONSTRUCTION ----------

    def _build_ui(self) -> None:
        central = QtWidgets.QWidget(self)
        self.setCentralWidget(central)

        self._main_layout = QtWidgets.QVBoxLayout(central)

        self._build_toolbar()
        self._build_menu_bar()

        top_layout = QtWidgets.QHBoxLayout()
        self._main_layout.addLayout(top_layout, stretch=3)

        top_layout.addWidget(self._build_options_panel(), stretch=2)
        top_layout.addWidget(self._build_output_panel(), stretch=3)

        self.history_group = self._build_history_panel()
        self._main_layout.addWidget(self.history_group, stretch=2)

        self.status_bar = self.statusBar()
        self.status_bar.showMessage("Ready.")

    def _build_options_panel(self) -> QtWidgets.QGroupBox:
        group = QtWidgets.QGroupBox("Options")
        layout = QtWidgets.QVBoxLayout(group)

        # Mode
        mode_row = QtWidgets.QHBoxLayout()
        mode_row.addWidget(QtWidgets.QLabel("Mode:"))
        self.mode_combo = QtWidgets.QComboBox()
        self.mode_combo.addItem("Password", MODE_PASSWORD)
        self.mode_combo.addItem("Passphrase", MODE_PASSPHRASE)
        mode_row.addWidget(self.mode_combo, stretch=1)
        layout.addLayout(mode_row)

        # Length row
        self.length_row = QtWidgets.QWidget()
        length_layout = QtWidgets.QHBoxLayout(self.length_row)
        length_layout.setContentsMargins(0, 0, 0, 0)
        self.length_spin = QtWidgets.QSpinBox()
        self.length_spin.setRange(MIN_LENGTH, MAX_LENGTH)
        self.length_spin.setValue(DEFAULT_LENGTH)
        self.length_slider = QtWidgets.QSlider(QtCore.Qt.Horizontal)
        self.length_slider.setRange(MIN_LENGTH, MAX_LENGTH)
        self.length_slider.setValue(DEFAULT_LENGTH)

        self.length_spin.valueChanged.connect(self.length_slider.setValue)
        self.length_slider.valueChanged.connect(self.length_spin.setValue)

        length_layout.addWidget(QtWidgets.QLabel("Length:"))
        length_layout.addWidget(self.length_spin)
        length_layout.addWidget(self.length_slider)
        layout.addWidget(self.length_row)

        # Word count row
        self.words_row = QtWidgets.QWidget()
        words_layout = QtWidgets.QHBoxLayout(self.words_row)
        words_layout.setContentsMargins(0, 0, 0, 0)
        self.words_spin = QtWidgets.QSpinBox()
        self.words_spin.setRange(MIN_WORD_COUNT, MAX_WORD_COUNT)
        self.words_spin.setValue(DEFAULT_WORD_COUNT)
        words_layout.addWidget(QtWidgets.QLabel("Words:"))
        words_layout.addWidget(self.words_spin)
        words_layout.addStretch(1)
        layout.addWidget(self.words_row)

        # Categories
        self.categories_box = QtWidgets.QWidget()
        categories_layout = QtWidgets.QVBoxLayout(self.categories_box)
        categories_layout.setContentsMargins(0, 0, 0, 0)

        self.upper_cb = QtWidgets.QCheckBox("Uppercase (A–Z)")
        self.lower_cb = QtWidgets.QCheckBox("Lowercase (a–z)")
        self.numbers_cb = QtWidgets.QCheckBox("Numbers (0–9)")
        self.symbols_cb = QtWidgets.QCheckBox("Symbols (!@#$...)")

        for cb in (self.upper_cb, self.lower_cb, self.numbers_cb, self.symbols_cb):
            cb.setChecked(True)
            categories_layout.addWidget(cb)

        # Advanced
        self.advanced_group = QtWidgets.QGroupBox("Advanced")
        self.advanced_group.setCheckable(True)
        self.advanced_group.setChecked(False)
        advanced_layout = QtWidgets.QVBoxLayout(self.advanced_group)
        self.exclude_confusing_cb = QtWidgets.QCheckBox("Exclude confusing characters (I, l, O, 0, 1)")
        self.exclude_unsafe_cb = QtWidgets.QCheckBox("Only symbols accepted by most forms (!@#$%^&*_+-=)")
        advanced_layout.addWidget(self.exclude_confusing_cb)
        advanced_layout.addWidget(self.exclude_unsafe_cb)
        categories_layout.addWidget(self.advanced_group)

        layout.addWidget(self.categories_box)

        self.error_label = QtWidgets.QLabel("")
        self.error_label.setObjectName("errorLabel")
        self.error_label.setWordWrap(True)
        layout.addWidget(self.error_label)

        layout.addStretch(1)

        self.mode_combo.currentIndexChanged.connect(self._on_mode_changed)

        return group

    def _build_output_panel(self) -> QtWidgets.QGroupBox:
        group = QtWidgets.QGroupBox("Output & Security Metrics")
        layout = QtWidgets.QVBoxLayout(group)

        mono_font = QtGui.QFont("Consolas")
        mono_font.setStyleHint(QtGui.QFont.TypeWriter)

        # Secret output
        secret_row = QtWidgets.QHBoxLayout()
        self.password_edit = QtWidgets.QLineEdit()
        self.password_edit.setReadOnly(True)
        self.password_edit.setFont(mono_font)
        self.password_edit.setEchoMode(QtWidgets.QLineEdit.Password)
        self.password_edit.setPlaceholderText("Click “Generate” to create a password.")
        self.reveal_cb = QtWidgets.QCheckBox("Show")
        self.reveal_cb.toggled.connect(self._on_reveal_toggled)
        secret_row.addWidget(self.password_edit, stretch=1)
        secret_row.addWidget(self.reveal_cb)
        layout.addLayout(secret_row)

        # Buttons
        btn_row = QtWidgets.QHBoxLayout()
        self.generate_btn = QtWidgets.QPushButton("Generate")
        self.copy_btn = QtWidgets.QPushButton("Copy")
        self.qr_btn = QtWidgets.QPushButton("QR Code")
        self.reset_btn = QtWidgets.QPushButton("Reset")

        for btn in (self.generate_btn, self.copy_btn, self.qr_btn, self.reset_btn):
            btn_row.addWidget(btn)
        layout.addLayout(btn_row)

        # Strength
        strength_row = QtWidgets.QHBoxLayout()
        self.strength_bar = QtWidgets.QProgressBar()
        self.strength_bar.setRange(0, STRENGTH_BAR_MAX_BITS)
        self.strength_bar.setFormat("Strength")
        self.strength_bar.setTextVisible(True)
        self.strength_label = QtWidgets.QLabel("Strength: N/A")
        strength_row.addWidget(self.strength_bar, stretch=3)
        strength_row.addWidget(self.strength_label, stretch=2)
        layout.addLayout(strength_row)

        self.metrics_label = QtWidgets.QLabel("Entropy and crack time will appear here after generation.")
        self.metrics_label.setWordWrap(True)
        layout.addWidget(self.metrics_label)

        # Compliance badges
        badges_row = QtWidgets.QHBoxLayout()
        self.badge_labels = {}
        for key, text, tip in (
            ("nist", "NIST", "At least 8 characters and no sequential runs like abc or 123"),
            ("owasp", "OWASP", "Uppercase, lowercase, digits and symbols all present"),
            ("strong", "Strong", "At least 12 characters with letters and digits"),
            ("complex", "Complex", "At least 3 of the 4 character classes present"),
        ):
            label = QtWidgets.QLabel(text)
            label.setToolTip(tip)
            label.setAlignment(QtCore.Qt.AlignCenter)
            badges_row.addWidget(label)
            self.badge_labels[key] = label
        layout.addLayout(badges_row)
        self._show_badges(None)

        # QR preview
        self.qr_label = QtWidgets.QLabel()
        self.qr_label.setAlignment(QtCore.Qt.AlignCenter)
        self.qr_label.setVisible(False)
        layout.addWidget(self.qr_label)

        self.generate_btn.clicked.connect(self.on_generate_clicked)
        self.copy_btn.clicked.connect(self.on_copy_clicked)
        self.qr_btn.clicked.connect(self.on_qr_clicked)
        self.reset_btn.clicked.connect(self.on_reset_clicked)

        return group

    def _build_history_panel(self) -> QtWidgets.QGroupBox:
        group = QtWidgets.QGroupBox("History")
        layout = QtWidgets.QVBoxLayout(group)

        mono_font = QtGui.QFont("Consolas")
        mono_font.setStyleHint(QtGui.QFont.TypeWriter)

        self.history_list = QtWidgets.QListWidget()
        self.history_list.setFont(mono_font)
        layout.addWidget(self.history_list)

        row = QtWidgets.QHBoxLayout()
        row.addStretch(1)
        self.delete_history_btn = QtWidgets.QPushButton("Delete Selected")
        self.clear_history_btn = QtWidgets.QPushButton("Clear History")
        row.addWidget(self.delete_history_btn)
        row.addWidget(self.clear_history_btn)
        layout.addLayout(row)

        self.delete_history_btn.clicked.connect(self.on_delete_history_clicked)
        self.clear_history_btn.clicked.connect(self.on_clear_history_clicked)

        return group

    def _build_toolbar(self) -> None:
        toolbar = QtWidgets.QToolBar("Main Toolbar")
        toolbar.setIconSize(QtCore.QSize(20, 20))
        self.addToolBar(toolbar)

        style = self.style()

        def add_action(text: str, icon, shortcut: str, handler, status_tip: str) -> QtWidgets.QAction:
            action = QtWidgets.QAction(icon, text, self)
            action.setShortcut(shortcut)
            action.setStatusTip(status_tip)
            action.triggered.connect(handler)
            toolbar.addAction(action)
            return action

        add_action(
            "Generate",
            style.standardIcon(QtWidgets.QStyle.SP_MediaPlay),
            "Ctrl+G",
            self.on_generate_clicked,
            "Generate a new password or passphrase",
        )
        add_action(
            "Copy to clipboard",
            style.standardIcon(QtWidgets.QStyle.SP_DialogSaveButton),
            "Ctrl+C",
            self.on_copy_clicked,
            f"Copy the current secret (cleared after {CLIPBOARD_CLEAR_SECONDS} seconds)",
        )
        add_action(
            "Reset options",
            style.standardIcon(QtWidgets.QStyle.SP_DialogResetButton),
            "Ctrl+R",
            self.on_reset_clicked,
            "Restore default options",
        )

        toolbar.addSeparator()

        add_action(
            "Save QR code",
            style.standardIcon(QtWidgets.QStyle.SP_DriveFDIcon),
            "Ctrl+Shift+S",
            self.on_save_qr_clicked,
            "Save the current secret as a QR code image",
        )

    def _build_menu_bar(self) -> None:
        menubar = self.menuBar()

        file_menu = menubar.addMenu("&File")
        exit_action = QtWidgets.QAction("E&xit", self)
        exit_action.setShortcut("Ctrl+Q")
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

        view_menu = menubar.addMenu("&View")
        self.toggle_history_action = QtWidgets.QAction("Show &history", self, checkable=True)
        self.toggle_history_action.setChecked(True)
        self.toggle_history_action.triggered.connect(self.toggle_history_visibility)
        view_menu.addAction(self.toggle_history_action)

    # ---------- STYLES ----------

    def _apply_global_styles(self) -> None:
        self.setStyleSheet(
            """
            QMainWindow { background-color: #202124; }

            QGroupBox {
                color: #ffffff;
                font-weight: 600;
                border: 1px solid #444;
                border-radius: 8px;
                margin-top: 10px;
            }
            QGroupBox::title {
                subcontrol-origin: margin;
                left: 8px;
                padding: 0 4px;
            }

            QLabel { color: #e8eaed; }
            QLabel#errorLabel { color: #ef5350; }

            QLineEdit, QListWidget {
                background-color: #303134;
                color: #e8eaed;
                border-radius: 4px;
                padding: 4px;
                border: 1px solid #555;
            }

            QComboBox, QSpinBox, QSlider, QCheckBox, QMenuBar, QMenu, QStatusBar {
                color: #e8eaed;
                background-color: #202124;
            }

            QPushButton {
                background-color: #1a73e8;
                color: #ffffff;
                border-radius: 4px;
                padding: 6px 12px;
                border: 1px solid #1a73e8;
            }
            QPushButton:hover { background-color: #4285f4; }
            QPushButton:pressed { background-color: #3367d6; }

            QProgressBar {
                border: 1px solid #555;
                border-radius: 4px;
                text-align: center;
                background-color: #303134;
                color: #e8eaed;
            }
            QProgressBar::chunk {
                border-radius: 4px;
                margin: 0px;
            }
            """
        )

    def _set_strength_bar_style(self, tier: str) -> None:
        color = "#d32f2f"  # red
        if tier == TIER_FAIR:
            color = "#f57c00"  # orange
        elif tier == TIER_GOOD:
            color = "#fbc02d"  # yellow
        elif tier == TIER_STRONG:
            color = "#388e3c"  # green
        elif tier == TIER_VERY_STRONG:
            color = "#2e7d32"  # darker green

        self.strength_bar.setStyleSheet(
            f"""
            QProgressBar {{
                border: 1px solid #555;
                border-radius: 4px;
                text-align: center;
                background-color: #303134;
                color: #e8eaed;
            }}
            QProgressBar::chunk {{
                border-radius: 4px;
                margin: 0px;
                background-color: {color};
            }}
            """
        )

    def _show_badges(self, badges: Optional[ComplianceBadges]) -> None:
        for key, label in self.badge_labels.items():
            passed = badges is not None and getattr(badges, key)
            background = "#2e7d32" if passed else "#3c4043"
            label.setStyleSheet(
                f"background-color: {background}; color: #ffffff; border-radius: 4px; padding: 2px 6px;"
            )

    # ---------- SETTINGS ----------

    def _load_settings(self) -> None:
        self.restoreGeometry(self.settings.value("geometry", b""))

        mode = self.settings.value("mode", MODE_PASSWORD, type=str)
        index = self.mode_combo.findData(mode)
        self.mode_combo.setCurrentIndex(max(index, 0))

        self.length_spin.setValue(self.settings.value("length", DEFAULT_LENGTH, type=int))
        self.words_spin.setValue(self.settings.value("word_count", DEFAULT_WORD_COUNT, type=int))

        self.upper_cb.setChecked(self.settings.value("uppercase", True, type=bool))
        self.lower_cb.setChecked(self.settings.value("lowercase", True, type=bool))
        self.numbers_cb.setChecked(self.settings.value("numbers", True, type=bool))
        self.symbols_cb.setChecked(self.settings.value("symbols", True, type=bool))

        self.exclude_confusing_cb.setChecked(self.settings.value("exclude_confusing", False, type=bool))
        self.exclude_unsafe_cb.setChecked(self.settings.value("exclude_unsafe_symbols", False, type=bool))
        self.advanced_group.setChecked(
            self.exclude_confusing_cb.isChecked() or self.exclude_unsafe_cb.isChecked()
        )

        history_visible = self.settings.value("history_visible", True, type=bool)
        self.toggle_history_action.setChecked(history_visible)
        self.history_group.setVisible(history_visible)

    def _save_settings(self) -> None:
        self.settings.setValue("geometry", self.saveGeometry())

        self.settings.setValue("mode", self.mode_combo.currentData())
        self.settings.setValue("length", self.length_spin.value())
        self.settings.setValue("word_count", self.words_spin.value())

        self.settings.setValue("uppercase", self.upper_cb.isChecked())
        self.settings.setValue("lowercase", self.lower_cb.isChecked())
        self.settings.setValue("numbers", self.numbers_cb.isChecked())
        self.settings.setValue("symbols", self.symbols_cb.isChecked())

        self.settings.setValue("exclude_confusing", self.exclude_confusing_cb.isChecked())
        self.settings.setValue("exclude_unsafe_symbols", self.exclude_unsafe_cb.isChecked())

        self.settings.setValue("history_visible", self.history_group.isVisible())

    def closeEvent(self, event: QtGui.QCloseEvent) -> None:
        self._save_settings()
        super().closeEvent(event)

    # ---------- OPTIONS ----------

    def _read_request(self) -> GenerationRequest:
        advanced = self.advanced_group.isChecked()
        return GenerationRequest(
            mode=self.mode_combo.currentData(),
            length=self.length_spin.value(),
            word_count=self.words_spin.value(),
            options=GenerationOptions(
                uppercase=self.upper_cb.isChecked(),
                lowercase=self.lower_cb.isChecked(),
                numbers=self.numbers_cb.isChecked(),
                symbols=self.symbols_cb.isChecked(),
                exclude_confusing=advanced and self.exclude_confusing_cb.isChecked(),
                exclude_unsafe_symbols=advanced and self.exclude_unsafe_cb.isChecked(),
            ),
        )

    def _on_mode_changed(self) -> None:
        passphrase = self.mode_combo.currentData() == MODE_PASSPHRASE
        self.length_row.setVisible(not passphrase)
        self.categories_box.setVisible(not passphrase)
        self.words_row.setVisible(passphrase)
        self.error_label.clear()

    def _on_reveal_toggled(self, checked: bool) -> None:
        mode = QtWidgets.QLineEdit.Normal if checked else QtWidgets.QLineEdit.Password
        self.password_edit.setEchoMode(mode)

    # ---------- ACTIONS ----------

    def on_generate_clicked(self) -> None:
        request = self._read_request()

        try:
            result = generate_secret(request)
        except ConfigurationError as e:
            self.error_label.setText(str(e))
            self.status_bar.showMessage("Select at least one character type.", 5000)
            return

        self.error_label.clear()
        self._current_secret = result.secret
        self.password_edit.setText(result.secret)
        self._reset_copy_button()
        self.qr_label.clear()
        self.qr_label.setVisible(False)

        strength = result.strength
        tier_label = TIER_LABELS.get(strength.tier, strength.tier)
        self.strength_bar.setValue(int(min(max(strength.entropy_bits, 0.0), float(STRENGTH_BAR_MAX_BITS))))
        self.strength_label.setText(f"Strength: {tier_label}")
        self._set_strength_bar_style(strength.tier)
        self.metrics_label.setText(
            f"Length: {len(result.secret)} characters\n"
            f"Entropy: {strength.entropy_bits:.2f} bits ({tier_label})\n"
            f"Estimated crack time: {strength.crack_time}"
        )
        self._show_badges(result.badges)

        self.history.save(result.secret, strength.tier, len(result.secret))
        self.refresh_history()

        self.status_bar.showMessage(f"Generated a new {request.mode}.", 5000)

    def on_copy_clicked(self) -> None:
        secret = self._current_secret
        if not secret:
            self.status_bar.showMessage("Nothing to copy.", 5000)
            return

        QtWidgets.QApplication.clipboard().setText(secret)
        self._last_copied_value = secret

        self.copy_btn.setText("Copied")
        self._copied_timer.start(COPIED_INDICATOR_SECONDS * 1000)
        self._schedule_clipboard_clear(CLIPBOARD_CLEAR_SECONDS)

        self.status_bar.showMessage(
            f"Copied. The clipboard will be cleared in {CLIPBOARD_CLEAR_SECONDS} seconds.", 5000
        )

    def _reset_copy_button(self) -> None:
        self._copied_timer.stop()
        self.copy_btn.setText("Copy")

    def _schedule_clipboard_clear(self, seconds: int) -> None:
        # A new copy replaces any pending wipe.
        if self._clipboard_clear_timer is not None:
            self._clipboard_clear_timer.stop()
            self._clipboard_clear_timer.deleteLater()
            self._clipboard_clear_timer = None

        timer = QtCore.QTimer(self)
        timer.setSingleShot(True)

        def clear_if_unchanged() -> None:
            clipboard = QtWidgets.QApplication.clipboard()
            if self._last_copied_value and clipboard.text() == self._last_copied_value:
                clipboard.clear()
                self.status_bar.showMessage("Clipboard cleared.", 5000)
            self._last_copied_value = ""
            self._clipboard_clear_timer = None
            timer.deleteLater()

        timer.timeout.connect(clear_if_unchanged)
        timer.start(max(1, seconds) * 1000)

        self._clipboard_clear_timer = timer

    def _render_current_qr(self) -> Optional[bytes]:
        if not self._current_secret:
            self.status_bar.showMessage("Generate a secret first.", 5000)
            return None
        try:
            return render_qr_png(self._current_secret)
        except RenderError:
            logger.debug("QR rendering failed.", exc_info=True)
            self.status_bar.showMessage("Could not render a QR code.", 5000)
            return None

    def on_qr_clicked(self) -> None:
        png = self._render_current_qr()
        if png is None:
            self.qr_label.setVisible(False)
            return

        pixmap = QtGui.QPixmap()
        pixmap.loadFromData(png, "PNG")
        self.qr_label.setPixmap(pixmap)
        self.qr_label.setVisible(True)

    def on_save_qr_clicked(self) -> None:
        png = self._render_current_qr()
        if png is None:
            return

        default_name = f"password-qr-{int(time.time() * 1000)}.png"
        path, _ = QtWidgets.QFileDialog.getSaveFileName(self, "Save QR code", default_name, "PNG images (*.png)")
        if not path:
            return

        try:
            with open(path, "wb") as f:
                f.write(png)
        except OSError as e:
            QtWidgets.QMessageBox.warning(self, "Save failed", f"Could not save the QR code:\n{e}")
            return

        self.status_bar.showMessage(f"QR code saved to {path}.", 5000)

    def on_reset_clicked(self) -> None:
        self.mode_combo.setCurrentIndex(self.mode_combo.findData(MODE_PASSWORD))
        self.length_spin.setValue(DEFAULT_LENGTH)
        self.words_spin.setValue(DEFAULT_WORD_COUNT)
        for cb in (self.upper_cb, self.lower_cb, self.numbers_cb, self.symbols_cb):
            cb.setChecked(True)
        self.exclude_confusing_cb.setChecked(False)
        self.exclude_unsafe_cb.setChecked(False)
        self.advanced_group.setChecked(False)
        self.reveal_cb.setChecked(False)

        self._current_secret = ""
        self.password_edit.clear()
        self.qr_label.clear()
        self.qr_label.setVisible(False)
        self.strength_bar.setValue(0)
        self.strength_label.setText("Strength: N/A")
        self.metrics_label.setText("Entropy and crack time will appear here after generation.")
        self._show_badges(None)
        self.error_label.clear()

        self.status_bar.showMessage("Options reset.", 5000)

    # ---------- HISTORY ----------

    def refresh_history(self) -> None:
        records = self.history.list()
        self.history_group.setTitle(f"History ({len(records)})")
        self.history_list.clear()
        for record in records:
            created = QtCore.QDateTime.fromMSecsSinceEpoch(record.created_at).toString("yyyy-MM-dd HH:mm:ss")
            tier_label = TIER_LABELS.get(record.strength, record.strength)
            item = QtWidgets.QListWidgetItem(f"{created}  {tier_label:<12} {record.length:>3}  {record.password}")
            item.setData(QtCore.Qt.UserRole, record.id)
            self.history_list.addItem(item)

    def on_delete_history_clicked(self) -> None:
        item = self.history_list.currentItem()
        if item is None:
            self.status_bar.showMessage("Select a history entry first.", 5000)
            return
        self.history.delete_one(item.data(QtCore.Qt.UserRole))
        self.refresh_history()

    def on_clear_history_clicked(self) -> None:
        answer = QtWidgets.QMessageBox.question(
            self,
            "Clear history",
            "Delete all saved passwords from the history?",
            QtWidgets.QMessageBox.Yes | QtWidgets.QMessageBox.No,
            QtWidgets.QMessageBox.No,
        )
        if answer != QtWidgets.QMessageBox.Yes:
            return

        self.history.clear_all()
        self.refresh_history()
        self.status_bar.showMessage("History cleared.", 5000)

    def toggle_history_visibility(self, checked: bool) -> None:
        self.history_group.setVisible(bool(checked))


# =========================
#          ENTRY
# =========================

def main() -> None:
    # High-DPI friendliness (must be set before app creation)
    QtWidgets.QApplication.setAttribute(QtCore.Qt.AA_EnableHighDpiScaling, True)
    QtWidgets.QApplication.setAttribute(QtCore.Qt.AA_UseHighDpiPixmaps, True)

    logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")

    app = QtWidgets.QApplication(sys.argv)
    app.setOrganizationName(APP_ORG)
    app.setApplicationName(APP_NAME)

    window = MainWindow()
    window.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
