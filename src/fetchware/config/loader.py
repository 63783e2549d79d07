import json
import logging
import os
from enum import Enum
from pathlib import Path
from typing import Any, Callable

import yaml

from fetchware.config.models.fetch import FetchConfig
from fetchware.config.preprocessor import ConfigPreprocessor, ConfigValue


class ConfigFormat(str, Enum):
    YAML = "yaml"
    JSON = "json"


_PARSERS: dict[ConfigFormat, Callable[[str], Any]] = {
    ConfigFormat.YAML: yaml.safe_load,
    ConfigFormat.JSON: json.loads,
}

_SUFFIXES: dict[str, ConfigFormat] = {
    ".yaml": ConfigFormat.YAML,
    ".yml": ConfigFormat.YAML,
    ".json": ConfigFormat.JSON,
}


class ConfigLoader:
    """
    Turns a YAML or JSON document into a validated FetchConfig.

    A source is either a path (Path, or a single-line string naming an
    existing file) or the document text itself. The raw structure passes
    through every registered preprocessor, in registration order, before
    pydantic validation. An empty document yields the default FetchConfig.
    """

    def __init__(self, preprocessors: list[ConfigPreprocessor] | None = None):
        self._preprocessors = list(preprocessors or [])
        self._logger = logging.getLogger(f"[{self.__class__.__name__}]")

    def add_preprocessor(self, preprocessor: ConfigPreprocessor) -> None:
        self._preprocessors.append(preprocessor)

    def load(self, source: str | Path, fmt: ConfigFormat | str | None = None) -> FetchConfig:
        """
        Parse and validate `source`.

        When `fmt` is omitted the format follows the file suffix, and raw
        text is read as YAML (which also accepts JSON documents).
        """
        path = self._as_path(source)
        fmt = self._resolve_format(path, fmt)
        text = self._read_source(source)

        self._logger.debug("Loading %s config from %s", fmt.value, path or "text")
        return self._validate(_PARSERS[fmt](text))

    def from_yaml(self, source: str | Path) -> FetchConfig:
        return self.load(source, ConfigFormat.YAML)

    def from_json(self, source: str | Path) -> FetchConfig:
        return self.load(source, ConfigFormat.JSON)

    def _read_source(self, source: str | Path) -> str:
        path = self._as_path(source)
        return path.read_text() if path is not None else str(source)

    @staticmethod
    def _as_path(source: str | Path) -> Path | None:
        if isinstance(source, Path):
            return source
        # multi-line strings are always document text
        if "\n" not in source and os.path.isfile(source):
            return Path(source)
        return None

    @staticmethod
    def _resolve_format(path: Path | None, fmt: ConfigFormat | str | None) -> ConfigFormat:
        if fmt is not None:
            return ConfigFormat(fmt)
        if path is None:
            return ConfigFormat.YAML
        try:
            return _SUFFIXES[path.suffix.lower()]
        except KeyError:
            raise ValueError(f"Cannot infer config format from file suffix {path.suffix!r}") from None

    def _validate(self, data: ConfigValue) -> FetchConfig:
        for preprocessor in self._preprocessors:
            data = preprocessor.process(data)
        return FetchConfig.model_validate(data or {})
