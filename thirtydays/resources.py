"""Resolvers that turn opaque resource handles into strings and image paths.

Resolution never raises: a handle missing from the active locale falls back
to the fallback locale, then to the handle itself; a missing image falls
back to the placeholder asset. Every fallback is logged.
"""

import logging
from pathlib import Path
from typing import Dict, List, Union

import toml

from thirtydays.model import ResourceHandle

PACKAGE_DIR = Path(__file__).parent
DEFAULT_STRINGS_FILE = PACKAGE_DIR / 'data' / 'strings.toml'
DEFAULT_ASSETS_DIR = PACKAGE_DIR / 'assets' / 'images'
DEFAULT_LOCALE = 'en'


class StringResolver:
    """Localization resolver backed by a TOML file with one table per locale."""

    def __init__(
        self,
        strings_path: Union[str, Path, None] = None,
        locale: str = DEFAULT_LOCALE,
        fallback_locale: str = DEFAULT_LOCALE,
    ):
        self.strings_path = Path(strings_path) if strings_path else DEFAULT_STRINGS_FILE
        self.fallback_locale = fallback_locale
        self._tables: Dict[str, Dict[str, str]] = self._load_tables()

        if locale not in self._tables:
            logging.warning(
                f'Locale {locale!r} not found in {self.strings_path.name}. '
                f'Using {fallback_locale!r}.'
            )
            locale = fallback_locale
        self.locale = locale

    def _load_tables(self) -> Dict[str, Dict[str, str]]:
        try:
            with open(self.strings_path, 'r', encoding='utf-8') as f:
                data = toml.load(f)
        except (OSError, toml.TomlDecodeError) as e:
            logging.error(f'Failed to load strings from {self.strings_path}: {e}')
            return {}

        return {
            locale: {key: str(value) for key, value in table.items()}
            for locale, table in data.items()
            if isinstance(table, dict)
        }

    @property
    def locales(self) -> List[str]:
        """Locales available in the strings file."""
        return sorted(self._tables)

    def resolve(self, handle: ResourceHandle) -> str:
        """Return the display string for ``handle`` in the active locale."""
        for locale in (self.locale, self.fallback_locale):
            value = self._tables.get(locale, {}).get(handle)
            if value is not None:
                return value

        logging.warning(f'Missing string resource: {handle!r}')
        return handle

    def format(self, handle: ResourceHandle, **values) -> str:
        """Resolve ``handle`` and interpolate ``values`` into it."""
        template = self.resolve(handle)
        try:
            return template.format(**values)
        except (KeyError, IndexError, ValueError) as e:
            logging.warning(f'Could not format string resource {handle!r}: {e}')
            return template


class AssetResolver:
    """Asset resolver mapping image handles to files in an assets folder."""

    def __init__(
        self,
        assets_dir: Union[str, Path, None] = None,
        extension: str = '.png',
        placeholder: ResourceHandle = 'placeholder',
    ):
        self.assets_dir = Path(assets_dir) if assets_dir else DEFAULT_ASSETS_DIR
        self.extension = extension
        self.placeholder = placeholder

    def path_for(self, handle: ResourceHandle) -> Path:
        return self.assets_dir / f'{handle}{self.extension}'

    def resolve(self, handle: ResourceHandle) -> str:
        """Return the absolute path of the image for ``handle``."""
        path = self.path_for(handle)
        if path.is_file():
            return str(path.resolve())

        logging.warning(f'Missing image asset {handle!r}, using {self.placeholder!r}')
        return str(self.path_for(self.placeholder).resolve())
