"""
CipherLab Configuration
========================

Dataclass settings loaded from a TOML file with two tables:

``[global]``
    Logging, worker count and debug flag shared by every component.
``[cipherlab]``
    Cipher alphabet, crack thresholds, remote word list and brute-force
    ranges.

Keys missing from the file keep their defaults and unknown keys are
ignored, so a classroom can ship a config with only the values it
changes.

References:
    - TOML v1.0.0. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import sys
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Mapping, TypeVar

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[no-redef]

_DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parent.parent / "config.toml"

_Section = TypeVar("_Section")


@dataclass(slots=True)
class CipherLabConfig:
    """Settings for the transforms and the cryptanalysis engine.

    A best score above ``confident_threshold`` is reported as a confident
    crack and one above ``tentative_threshold`` as a tentative crack.
    Both are tuning values and can be changed freely.
    """

    alphabet: str = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    top_n: int = 10
    confident_threshold: int = 50
    tentative_threshold: int = 30

    # Datamuse-compatible JSON array of {"word": ...}
    enable_remote_wordlist: bool = True
    wordlist_url: str = "https://api.datamuse.com/words?ml=secret&max=50"
    wordlist_timeout: float = 3.0
    max_remote_words: int = 50

    rail_min: int = 2
    rail_max: int = 8
    max_key_length: int = 10

    # Keywords per thread-pool task when max_workers > 1
    chunk_size: int = 64


@dataclass(slots=True)
class GlobalConfig:
    """Settings shared by every CipherLab component."""

    log_level: str = "INFO"
    log_file: str | None = None
    log_json: bool = False
    output_dir: str = "output"
    max_workers: int = 1
    debug: bool = False
    version: str = "1.0.0"


@dataclass(slots=True)
class LabConfig:
    """Complete CipherLab configuration.

    Usage:
        >>> LabConfig().cipherlab.top_n
        10
        >>> config = LabConfig.load("classroom.toml")
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    cipherlab: CipherLabConfig = field(default_factory=CipherLabConfig)

    @classmethod
    def load(cls, path: str | Path | None = None) -> LabConfig:
        """Read a TOML file into a :class:`LabConfig`.

        Without *path*, ``config.toml`` next to the packages is used if it
        exists, otherwise the defaults.

        Raises:
            FileNotFoundError: If an explicitly given *path* does not exist.
        """
        if path is None:
            if not _DEFAULT_CONFIG_PATH.exists():
                return cls()
            config_path = _DEFAULT_CONFIG_PATH
        else:
            config_path = Path(path)
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with config_path.open("rb") as fh:
            return cls.from_dict(tomllib.load(fh))

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> LabConfig:
        """Build a config from parsed TOML tables."""
        return cls(
            global_settings=_section(GlobalConfig, raw.get("global", {})),
            cipherlab=_section(CipherLabConfig, raw.get("cipherlab", {})),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _section(section_cls: type[_Section], data: Mapping[str, Any]) -> _Section:
    known = {f.name for f in fields(section_cls)}  # type: ignore[arg-type]
    return section_cls(**{k: v for k, v in data.items() if k in known})
