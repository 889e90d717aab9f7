"""Static catalog source.

The catalog lives in ``data/catalog.toml`` as an array of ``[[motorcycle]]``
tables. Entries are returned in file order; the position of an entry in the
file is what decides its day.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

import toml

from thirtydays.model import Motorcycle

DATA_DIR = Path(__file__).parent / 'data'
DEFAULT_CATALOG_FILE = DATA_DIR / 'catalog.toml'

REQUIRED_KEYS = ('make', 'quote', 'image')


class CatalogError(Exception):
    """Raised when the catalog file is missing or malformed."""

    pass


class MotorcycleRepository:
    """Loads the catalog entries from TOML."""

    _cached: Optional[List[Motorcycle]] = None

    @staticmethod
    def load(path: Union[str, Path, None] = None) -> List[Motorcycle]:
        """
        Read catalog entries from a TOML file.

        Args:
            path: Catalog file. Defaults to the packaged catalog.

        Returns:
            List[Motorcycle]: Entries in file order

        Raises:
            CatalogError: If the file is missing, unparsable, or an entry
                lacks one of the required handles.
        """
        catalog_file = Path(path) if path else DEFAULT_CATALOG_FILE

        try:
            with open(catalog_file, 'r', encoding='utf-8') as f:
                data = toml.load(f)
        except FileNotFoundError as e:
            raise CatalogError(f'Catalog file not found: {catalog_file}') from e
        except toml.TomlDecodeError as e:
            raise CatalogError(f'Invalid TOML syntax in catalog: {e}') from e

        entries = []
        for index, raw in enumerate(data.get('motorcycle', [])):
            missing = [key for key in REQUIRED_KEYS if not raw.get(key)]
            if missing:
                raise CatalogError(
                    f'Catalog entry #{index + 1} is missing: {", ".join(missing)}'
                )
            entries.append(
                Motorcycle(
                    make=str(raw['make']),
                    quote=str(raw['quote']),
                    image=str(raw['image']),
                )
            )

        logging.info(f'Loaded {len(entries)} catalog entries from {catalog_file}')
        return entries

    @classmethod
    def motorcycles(cls) -> List[Motorcycle]:
        """The packaged catalog, loaded once."""
        if cls._cached is None:
            cls._cached = cls.load()
        return list(cls._cached)
