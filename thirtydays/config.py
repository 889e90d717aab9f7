import logging
from pathlib import Path
from typing import Any, Dict, Union

import toml

CONFIG_FILENAME = 'thirtydays.toml'
CONFIG_SECTION = 'thirtydays'


class ConfigurationError(Exception):
    """Raised when there's an error with configuration loading or validation."""

    pass


class Config:
    """
    Configuration manager for the Thirty Days app.

    Handles loading, validation, and access to configuration settings
    from the thirtydays.toml file. A missing file is not an error: every
    setting has a default.
    """

    MIN_WINDOW_SIZE = 100
    MAX_WINDOW_SIZE = 10_000

    DEFAULTS: Dict[str, Any] = {
        'LOCALE': 'en',
        'DARK_MODE': False,
        'WINDOW_WIDTH': 406,
        'WINDOW_HEIGHT': 762,
        'CATALOG_FILE': '',
        'STRINGS_FILE': '',
        'ASSETS_DIR': '',
        'FONTS_DIR': '',
    }

    def __init__(self, config_path: Union[str, Path] = None):
        """
        Initialize configuration manager.

        Args:
            config_path: Optional path to config file. Defaults to current directory.
        """
        self.config_file = self._determine_config_path(config_path)
        self.config: Dict[str, Any] = {}

        if self.config_file.exists():
            self._load_config()
            self._validate_config()
        else:
            logging.info(f'No {self.config_file.name} found, using defaults')

    @staticmethod
    def _determine_config_path(config_path: Union[str, Path] = None) -> Path:
        if config_path:
            path = Path(config_path)
            return path / CONFIG_FILENAME if path.is_dir() else path
        return Path.cwd() / CONFIG_FILENAME

    def _load_config(self) -> None:
        """Load configuration from TOML file."""
        try:
            with open(self.config_file, 'r', encoding='utf-8') as f:
                config_data = toml.load(f)
                self.config = config_data.get(CONFIG_SECTION, {})
        except toml.TomlDecodeError as e:
            raise ConfigurationError(f'Invalid TOML syntax in config file: {e}') from e
        except OSError as e:
            raise ConfigurationError(f'Failed to read config file: {e}') from e

    def _validate_config(self) -> None:
        """Validate configuration values, falling back to defaults."""
        locale = self.config.get('LOCALE')
        if locale is not None and (not isinstance(locale, str) or not locale):
            logging.warning(f'Invalid LOCALE: {locale!r}. Using default.')
            self.config.pop('LOCALE')

        dark_mode = self.config.get('DARK_MODE')
        if dark_mode is not None and not isinstance(dark_mode, bool):
            logging.warning(f'Invalid DARK_MODE: {dark_mode!r}. Using false.')
            self.config['DARK_MODE'] = False

        for dimension in ('WINDOW_WIDTH', 'WINDOW_HEIGHT'):
            value = self.config.get(dimension)
            if value is not None and (
                isinstance(value, bool)
                or not isinstance(value, int)
                or not self.MIN_WINDOW_SIZE <= value <= self.MAX_WINDOW_SIZE
            ):
                logging.warning(f'Invalid {dimension}: {value!r}. Using default.')
                self.config.pop(dimension)

        for path_key in ('CATALOG_FILE', 'STRINGS_FILE', 'ASSETS_DIR', 'FONTS_DIR'):
            value = self.config.get(path_key)
            if value is not None and not isinstance(value, str):
                logging.warning(f'Invalid {path_key}: {value!r}. Using default.')
                self.config.pop(path_key)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value.

        Args:
            key: Configuration key
            default: Value returned when neither the file nor the defaults
                define the key

        Returns:
            Configuration value or default
        """
        if key in self.config:
            return self.config[key]
        return self.DEFAULTS.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self.config[key] = value

    def save(self) -> 'Config':
        """
        Save configuration to file and reload.

        Returns:
            Self for method chaining

        Raises:
            ConfigurationError: If save operation fails
        """
        try:
            with open(self.config_file, 'w', encoding='utf-8') as f:
                toml.dump({CONFIG_SECTION: self.config}, f)
        except OSError as e:
            raise ConfigurationError(f'Failed to save configuration: {e}') from e
        self._load_config()
        return self

    def _path_or_none(self, key: str) -> Union[Path, None]:
        value = self.get(key)
        if not value:
            return None
        path = Path(value).expanduser()
        if not path.is_absolute():
            path = self.config_file.parent / path
        return path

    # === Locale & Theme Properties ===

    @property
    def LOCALE(self) -> str:
        """Locale table used to resolve strings."""
        return self.get('LOCALE')

    @property
    def DARK_MODE(self) -> bool:
        """Use the dark color palette."""
        return self.get('DARK_MODE')

    # === Window Properties ===

    @property
    def WINDOW_WIDTH(self) -> int:
        """Desktop window width; ignored on Android."""
        return self.get('WINDOW_WIDTH')

    @property
    def WINDOW_HEIGHT(self) -> int:
        """Desktop window height; ignored on Android."""
        return self.get('WINDOW_HEIGHT')

    # === Resource Properties ===
    # Relative paths are resolved against the config file's folder.

    @property
    def CATALOG_FILE(self) -> Union[Path, None]:
        """Custom catalog TOML, or None for the packaged catalog."""
        return self._path_or_none('CATALOG_FILE')

    @property
    def STRINGS_FILE(self) -> Union[Path, None]:
        """Custom strings TOML, or None for the packaged strings."""
        return self._path_or_none('STRINGS_FILE')

    @property
    def ASSETS_DIR(self) -> Union[Path, None]:
        """Custom image folder, or None for the packaged images."""
        return self._path_or_none('ASSETS_DIR')

    @property
    def FONTS_DIR(self) -> Union[Path, None]:
        """Folder holding the Ubuntu TTFs, or None for the packaged fonts folder."""
        return self._path_or_none('FONTS_DIR')
