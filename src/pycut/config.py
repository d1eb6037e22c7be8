from __future__ import annotations

import argparse
import os
from collections.abc import Mapping
from dataclasses import dataclass

from .modes import ExtractionMode, mode_from_options
from .sources import STDIN

LOG_LEVEL_ENV = "PYCUT_LOG_LEVEL"
DEFAULT_DELIMITER = "\t"
DEFAULT_ENCODING = "utf-8"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True, slots=True)
class CutConfig:
    """Everything one run needs, validated and fixed before any source is opened."""

    mode: ExtractionMode
    sources: tuple[str, ...] = (STDIN,)
    delimiter: str = DEFAULT_DELIMITER
    encoding: str = DEFAULT_ENCODING
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        if len(self.delimiter) != 1:
            raise ValueError(f"delimiter must be a single character, got {self.delimiter!r}")

    @classmethod
    def from_namespace(
        cls,
        ns: argparse.Namespace,
        *,
        environ: Mapping[str, str] | None = None,
    ) -> "CutConfig":
        env = os.environ if environ is None else environ
        log_level = ns.log_level or env.get(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL
        return cls(
            mode=mode_from_options(fields=ns.fields, bytes_=ns.bytes, chars=ns.chars),
            sources=tuple(ns.files) or (STDIN,),
            delimiter=ns.delimiter,
            encoding=ns.encoding,
            log_level=log_level.upper(),
        )
