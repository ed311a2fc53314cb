"""Persistence of the preference document."""
from __future__ import annotations

import json
import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Protocol, Union

from pydantic import ValidationError

from .entities import PreferenceDocument
from .errors import StorageDecodeError, StorageOpenError, StorageWriteError


logger = logging.getLogger(__name__)

DEFAULT_FILE_MODE = 0o644


class PreferenceStore(Protocol):
    """Durable load/save of the single preference document.

    Implementations are not required to serialize concurrent
    load-mutate-save cycles; a backend that needs that guarantee can add it
    here without changing :class:`~rest_weather.core.preferences.PreferenceService`.
    """

    def load(self) -> PreferenceDocument:
        """Return the stored document, creating the default one if absent."""
        ...

    def save(self, document: PreferenceDocument) -> None:
        """Replace the stored document with ``document``."""
        ...


class JsonFilePreferenceStore(PreferenceStore):
    """Keep the preference document in a local JSON file."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def load(self) -> PreferenceDocument:
        try:
            raw = self.path.read_bytes()
        except FileNotFoundError:
            # Two first-time callers may both get here; the last write wins.
            logger.info("Creating default preference file at %s", self.path)
            default = PreferenceDocument()
            self.save(default)
            return default
        except OSError as exc:
            logger.error("Failed to open preference file %s: %s", self.path, exc)
            raise StorageOpenError(f"failed to open file: {exc}") from exc

        try:
            return PreferenceDocument.model_validate(json.loads(raw.decode("utf-8")))
        except (UnicodeDecodeError, ValueError, ValidationError) as exc:
            logger.error("Failed to decode preference file %s: %s", self.path, exc)
            raise StorageDecodeError(f"failed to decode file: {exc}") from exc

    def save(self, document: PreferenceDocument) -> None:
        payload = json.dumps(document.to_json())
        tmp_name = None
        try:
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as handle:
                tmp_name = handle.name
                handle.write(payload)
                handle.write("\n")
            os.chmod(tmp_name, self._file_mode())
            os.replace(tmp_name, self.path)
        except OSError as exc:
            logger.error("Failed to save preference file %s: %s", self.path, exc)
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageWriteError(f"failed to save user data: {exc}") from exc

    def _file_mode(self) -> int:
        # Temporary files are created 0600; keep the mode of the file being replaced.
        try:
            return stat.S_IMODE(self.path.stat().st_mode)
        except FileNotFoundError:
            return DEFAULT_FILE_MODE


__all__ = ["PreferenceStore", "JsonFilePreferenceStore"]
