"""
Resource bundles backed by JSON files or in-memory dictionaries.

A bundle named ``sample_app.resources.main_window.MainWindow`` lives in the
package ``sample_app.resources.main_window`` as a family of files::

    MainWindow.json         neutral resources
    MainWindow.de.json      German
    MainWindow.de-DE.json   German (Germany)

Lookups walk from the most specific culture file to the neutral one.
"""

from __future__ import annotations

import io
import json
import logging
import threading
from abc import ABC, abstractmethod
from importlib import resources
from pathlib import Path
from typing import Any, BinaryIO, Dict, Mapping, Optional, Tuple, Union

from babel import Locale

from .culture import fallback_chain
from .errors import BundleNotFoundError

logger = logging.getLogger(__name__)

# {"$file": "images/logo.svg"} marks a binary resource stored next to the JSON
FILE_REFERENCE = "$file"


class _FallbackBundle(ABC):
    """Lookup logic shared by every bundle: walk the culture fallback chain.

    Subclasses provide ``_load`` and, for binary resources, ``_is_binary`` and
    ``_read_binary``.
    """

    def __init__(self, name: str):
        self.name = name
        self._lock = threading.Lock()
        # Cache: { culture tag: resources }
        self._cache: Dict[str, Dict[str, Any]] = {}

    @abstractmethod
    def _load(self, tag: str) -> Dict[str, Any]:
        """Return the resources of one culture tag, {} if it has none."""

    def _entries(self, tag: str) -> Dict[str, Any]:
        with self._lock:
            if tag not in self._cache:
                self._cache[tag] = self._load(tag)
            return self._cache[tag]

    def _find(self, key: str, culture: Locale) -> Tuple[bool, Any]:
        for tag in fallback_chain(culture):
            entries = self._entries(tag)
            if key in entries:
                return True, entries[key]
        return False, None

    def _is_binary(self, value: Any) -> bool:
        return isinstance(value, (bytes, bytearray))

    def _read_binary(self, value: Any) -> Optional[bytes]:
        return bytes(value)

    def lookup_string(self, key: str, culture: Locale) -> Optional[str]:
        found, value = self._find(key, culture)
        if found and isinstance(value, str):
            return value
        return None

    def lookup_object(self, key: str, culture: Locale) -> Optional[Any]:
        found, value = self._find(key, culture)
        if not found:
            return None
        if self._is_binary(value):
            # An unreadable binary resource is missing, never its marker
            return self._read_binary(value)
        return value

    def lookup_stream(self, key: str, culture: Locale) -> Optional[BinaryIO]:
        found, value = self._find(key, culture)
        if not found or not self._is_binary(value):
            return None
        data = self._read_binary(value)
        if data is None:
            return None
        return io.BytesIO(data)

    def release(self) -> None:
        with self._lock:
            self._cache.clear()
        logger.debug(f"Released resources of bundle {self.name}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class JsonResourceBundle(_FallbackBundle):
    """A bundle stored as one JSON file per culture inside a folder."""

    def __init__(self, root: Any, base_name: str, name: Optional[str] = None):
        super().__init__(name or base_name)
        # Either a pathlib.Path or an importlib.resources Traversable
        self.root = root
        self.base_name = base_name

        if not self._has_any_file():
            raise BundleNotFoundError(
                self.name, f"no {base_name}*.json files found in {root}"
            )

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------
    @classmethod
    def from_name(cls, name: str) -> "JsonResourceBundle":
        """Resolve a dotted ``{Project}.{Resources}.{Context}.{BaseName}`` name."""
        package, _, base_name = name.rpartition(".")
        if not package or not base_name:
            raise BundleNotFoundError(name, "expected 'package.BaseName'")

        try:
            root = resources.files(package)
        except (ImportError, TypeError) as e:
            raise BundleNotFoundError(name, str(e)) from e

        return cls(root, base_name, name=name)

    @classmethod
    def from_directory(
        cls, directory: Union[str, Path], base_name: str
    ) -> "JsonResourceBundle":
        return cls(Path(directory), base_name)

    # ------------------------------------------------------------------
    # File access
    # ------------------------------------------------------------------
    def _has_any_file(self) -> bool:
        try:
            if not self.root.is_dir():
                return False
            for entry in self.root.iterdir():
                if entry.name == f"{self.base_name}.json":
                    return True
                if entry.name.startswith(f"{self.base_name}.") and entry.name.endswith(
                    ".json"
                ):
                    return True
        except OSError as e:
            logger.error(f"Failed to scan bundle folder {self.root}: {e}")
        return False

    def _file_for(self, tag: str) -> Any:
        if tag:
            return self.root / f"{self.base_name}.{tag}.json"
        return self.root / f"{self.base_name}.json"

    def _load(self, tag: str) -> Dict[str, Any]:
        path = self._file_for(tag)
        if not path.is_file():
            return {}

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.error(f"Failed to load resources {path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.error(f"Resource file {path} is not a JSON object, ignoring it")
            return {}

        logger.debug(f"Loaded {len(data)} resources from {path}")
        return data

    def _is_binary(self, value: Any) -> bool:
        return isinstance(value, dict) and set(value) == {FILE_REFERENCE}

    def _read_binary(self, value: Any) -> Optional[bytes]:
        target = self.root
        for part in str(value[FILE_REFERENCE]).split("/"):
            target = target / part

        try:
            return target.read_bytes()
        except OSError as e:
            logger.error(f"Failed to read binary resource {target}: {e}")
            return None


class DictResourceBundle(_FallbackBundle):
    """
    An in-memory bundle.

    ``cultures`` maps a culture tag ("de-DE", "de", or "" for neutral) to its
    resources. ``bytes`` values are binary resources.
    """

    def __init__(
        self, cultures: Mapping[str, Mapping[str, Any]], name: str = "<memory>"
    ):
        super().__init__(name)
        self._source = {tag: dict(entries) for tag, entries in cultures.items()}

    def _load(self, tag: str) -> Dict[str, Any]:
        return self._source.get(tag, {})
