"""
------------------------------------------------------------------------------
Project:        QRBillFlux
File:           qrflux/config.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Manages application configuration using QSettings: default
                encoding options for new bills and logging levels.
------------------------------------------------------------------------------
"""

from pathlib import Path
from typing import Any, Dict, Optional

from PyQt6.QtCore import QSettings, QStandardPaths

from qrflux.logger import parse_component_levels
from qrflux.models.types import QrDataSeparator
from qrflux.utils.charset import CharacterSet


class AppConfig:
    """
    Manages application configuration using QSettings.
    Singleton-like usage via a single instance per profile.
    """

    # Keys (groups handled in methods)
    KEY_CHARACTER_SET: str = "character_set"
    KEY_SEPARATOR: str = "separator"
    KEY_CURRENCY: str = "currency"
    KEY_LOG_LEVEL: str = "log_level"
    KEY_LOG_COMPONENTS: str = "log_components"

    # Defaults
    DEFAULT_CHARACTER_SET: CharacterSet = CharacterSet.LATIN1_SUBSET
    DEFAULT_SEPARATOR: QrDataSeparator = QrDataSeparator.LF
    DEFAULT_CURRENCY: str = "CHF"
    DEFAULT_LOG_LEVEL: str = "WARNING"

    APP_ID: str = "qrflux"
    _active_profile: Optional[str] = None

    def __init__(self, profile: Optional[str] = None) -> None:
        """
        Initializes the configuration manager.

        Args:
            profile: Optional profile name (e.g. 'dev', 'test').
                    If provided, settings are isolated (e.g. qrflux-dev).
        """
        # If no profile provided, use the last active one
        if profile is None:
            profile = AppConfig._active_profile
        else:
            AppConfig._active_profile = profile

        self.profile = profile
        self.active_id = self.APP_ID
        if profile:
            self.active_id = f"{self.APP_ID}-{profile}"

        self.settings = QSettings(self.active_id, self.active_id)

    def get_data_dir(self) -> Path:
        """
        Returns the path to the application data directory.
        Forces a flat structure: ~/.local/share/qrflux[-profile]/
        """
        base_path = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.GenericDataLocation)
        data_dir = Path(base_path) / self.active_id
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir

    def _get_setting(self, group: str, key: str, default: Any = None) -> Any:
        """
        Helper to retrieve a setting value from a specific group.

        Args:
            group: The configuration group name.
            key: The setting key.
            default: The default value if not found.

        Returns:
            The retrieved value or default.
        """
        if group:
            self.settings.beginGroup(group)
        val = self.settings.value(key, default)
        if group:
            self.settings.endGroup()
        return val

    def _set_setting(self, group: str, key: str, value: Any) -> None:
        """
        Helper to save a setting value into a specific group.

        Args:
            group: The configuration group name.
            key: The setting key.
            value: The value to save.
        """
        if isinstance(value, str):
            value = value.strip()

        if group:
            self.settings.beginGroup(group)
        self.settings.setValue(key, value)
        if group:
            self.settings.endGroup()

    def get_character_set(self) -> CharacterSet:
        """
        Retrieves the character set used to clean text fields.
        Unknown values fall back to the default.
        """
        raw = str(self._get_setting("Encoding", self.KEY_CHARACTER_SET, self.DEFAULT_CHARACTER_SET.value))
        try:
            return CharacterSet(raw.upper())
        except ValueError:
            return self.DEFAULT_CHARACTER_SET

    def set_character_set(self, character_set: CharacterSet) -> None:
        self._set_setting("Encoding", self.KEY_CHARACTER_SET, CharacterSet(character_set).value)

    def get_separator(self) -> QrDataSeparator:
        """Retrieves the line separator for the QR code text."""
        raw = str(self._get_setting("Encoding", self.KEY_SEPARATOR, self.DEFAULT_SEPARATOR.value))
        try:
            return QrDataSeparator(raw.upper())
        except ValueError:
            return self.DEFAULT_SEPARATOR

    def set_separator(self, separator: QrDataSeparator) -> None:
        self._set_setting("Encoding", self.KEY_SEPARATOR, QrDataSeparator(separator).value)

    def get_currency(self) -> str:
        """Retrieves the default currency for new bills."""
        return str(self._get_setting("Defaults", self.KEY_CURRENCY, self.DEFAULT_CURRENCY))

    def set_currency(self, currency: str) -> None:
        self._set_setting("Defaults", self.KEY_CURRENCY, currency.upper())

    def get_log_level(self) -> str:
        """Retrieves the global log level."""
        return str(self._get_setting("Logging", self.KEY_LOG_LEVEL, self.DEFAULT_LOG_LEVEL))

    def set_log_level(self, level: str) -> None:
        """Saves the global log level."""
        self._set_setting("Logging", self.KEY_LOG_LEVEL, level.upper())

    def get_log_components(self) -> Dict[str, str]:
        """Retrieves component-specific log levels ("codec=DEBUG,validator=INFO")."""
        raw = str(self._get_setting("Logging", self.KEY_LOG_COMPONENTS, ""))
        return parse_component_levels(raw)

    def set_log_components(self, components: Dict[str, str]) -> None:
        """Saves component-specific log levels."""
        raw = ",".join(f"{name}={level.upper()}" for name, level in components.items())
        self._set_setting("Logging", self.KEY_LOG_COMPONENTS, raw)

    def get_log_file_path(self) -> Path:
        """Returns the absolute path to the log file."""
        return self.get_data_dir() / "qrflux.log"
