# src/ratetable/adapters/persistence/config_file.py
"""
Config File - Optional JSON Configuration Loader

Reads one candidate configuration file and parses it into a PartialConfig.
A file that does not exist (or cannot be read) is an expected condition and
yields None. A file that exists but does not parse, or whose fields have the
wrong shape, raises MalformedConfigError.

Expected file shape (both keys optional):
    {"rates": {"<FROM>": {"<TO>": <number>, ...}, ...}, "port": "<string>"}

Files that USE this module:
- ratetable.application.config_merger (load_effective_config tries each candidate)
- tests.test_config_file (unit tests)

Files that this module USES:
- ratetable.domain.models (PartialConfig)
- ratetable.domain.errors (MalformedConfigError)
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, ValidationError, model_validator

from ratetable.domain.errors import MalformedConfigError
from ratetable.domain.models import PartialConfig

logger = logging.getLogger(__name__)


FIELD_NAMES = ("rates", "port")


class ConfigFileModel(BaseModel):
    """
    Wire shape of a config file.

    Top-level keys match in any letter case ("Port", "RATES"); when several
    spellings of one key are present the last one wins. Other keys are
    ignored with a warning. Rates must be finite numbers.
    """

    model_config = ConfigDict(strict=True, extra="ignore", frozen=True, allow_inf_nan=False)

    rates: Optional[dict[str, dict[str, float]]] = None
    port: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def match_field_names(cls, data):
        if not isinstance(data, dict):
            return data
        matched = {}
        for key, value in data.items():
            name = key.lower()
            if name in FIELD_NAMES:
                matched[name] = value
            else:
                logger.warning("Ignoring unknown config key %r", key)
        return matched

    def to_partial(self) -> PartialConfig:
        return PartialConfig(rates=self.rates, port=self.port)


def _describe(exc: ValidationError) -> str:
    """Short human-readable reason from a pydantic validation error."""
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "<root>"
        parts.append(f"{loc}: {err.get('msg')}")
    return "; ".join(parts)


def parse_partial_config(raw: Union[str, bytes], source: str = "<string>") -> PartialConfig:
    """
    Parse config file contents.

    Args:
        raw: JSON document
        source: Name used in error messages

    Returns:
        PartialConfig with only the keys present in the document

    Raises:
        MalformedConfigError: If the document is not valid JSON or a field has the wrong shape
    """
    try:
        model = ConfigFileModel.model_validate_json(raw)
    except ValidationError as e:
        raise MalformedConfigError(source, _describe(e)) from e
    return model.to_partial()


def load_partial_config(path: Union[str, Path]) -> Optional[PartialConfig]:
    """
    Load a config file if it exists.

    Args:
        path: Candidate file path

    Returns:
        PartialConfig, or None if the file does not exist or cannot be read

    Raises:
        MalformedConfigError: If the file exists but is malformed
    """
    p = Path(path)
    try:
        raw = p.read_bytes()
    except OSError as e:
        logger.debug("Config file %s not loaded: %s", p, e)
        return None
    return parse_partial_config(raw, source=str(path))
