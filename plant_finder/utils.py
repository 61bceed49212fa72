"""Utility helpers for reading the bundled plant finder datasets."""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from functools import cache
from os import PathLike
from pathlib import Path
from typing import Any, TextIO, Union

import yaml

__all__ = [
    "load_data",
    "load_dataset",
    "dataset_file",
    "dataset_paths",
    "dataset_search_paths",
    "clear_dataset_cache",
    "get_data_dir",
    "get_extra_dirs",
    "overlay_dir",
    "deep_update",
]

PathType = Union[str, PathLike]


def _open_text(path: Path) -> TextIO:
    return open(path, encoding="utf-8")


def load_data(path: PathType) -> Any:
    """Return the parsed contents of ``path`` supporting JSON or YAML."""

    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(p)

    try:
        with _open_text(p) as f:
            if p.suffix.lower() in {".yaml", ".yml"}:
                return yaml.safe_load(f) or {}
            return json.load(f)
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {p}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {p}: {exc}") from exc


def deep_update(base: dict[str, Any], other: Mapping[str, Any]) -> dict[str, Any]:
    """Recursively merge ``other`` into ``base`` and return ``base``."""

    for key, value in other.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, Mapping):
            deep_update(base[key], value)
        else:
            base[key] = value
    return base


# Bundled datasets live in the package ``data`` folder. The location can be
# replaced with ``PLANT_FINDER_DATA_DIR``. ``PLANT_FINDER_EXTRA_DATA_DIRS``
# holds an ``os.pathsep`` separated list of directories merged after the base
# directory and ``PLANT_FINDER_OVERLAY_DIR`` names a directory merged last so
# individual records can be corrected without copying whole datasets.
DEFAULT_DATA_DIR = Path(__file__).resolve().parent / "data"
DATA_ENV = "PLANT_FINDER_DATA_DIR"
OVERLAY_ENV = "PLANT_FINDER_OVERLAY_DIR"
EXTRA_ENV = "PLANT_FINDER_EXTRA_DATA_DIRS"

_PATH_CACHE: tuple[Path, ...] | None = None
_ENV_STATE: tuple[str | None, str | None] | None = None


def get_data_dir() -> Path:
    """Return base dataset directory honoring ``PLANT_FINDER_DATA_DIR``."""

    env = os.getenv(DATA_ENV)
    return Path(env).expanduser() if env else DEFAULT_DATA_DIR


def overlay_dir() -> Path | None:
    """Return the overlay directory defined via ``PLANT_FINDER_OVERLAY_DIR``."""

    env = os.getenv(OVERLAY_ENV)
    return Path(env).expanduser() if env else None


def get_extra_dirs() -> tuple[Path, ...]:
    """Return additional dataset directories from ``PLANT_FINDER_EXTRA_DATA_DIRS``."""

    env = os.getenv(EXTRA_ENV)
    if not env:
        return ()
    dirs: list[Path] = []
    for part in env.split(os.pathsep):
        path = Path(part).expanduser()
        if path.is_dir():
            dirs.append(path)
    return tuple(dirs)


def dataset_paths() -> tuple[Path, ...]:
    """Return directories searched when loading datasets.

    Results are cached but refreshed automatically when the relevant
    environment variables change between calls.
    """

    global _PATH_CACHE, _ENV_STATE
    env_state = (os.getenv(DATA_ENV), os.getenv(EXTRA_ENV))
    if _PATH_CACHE is None or _ENV_STATE != env_state:
        _PATH_CACHE = (get_data_dir(), *get_extra_dirs())
        _ENV_STATE = env_state
    return _PATH_CACHE


def dataset_search_paths(include_overlay: bool = False) -> tuple[Path, ...]:
    """Return dataset search paths optionally including the overlay first."""

    paths: list[Path] = []
    if include_overlay:
        ov = overlay_dir()
        if ov:
            paths.append(ov)
    paths.extend(dataset_paths())
    return tuple(paths)


@cache
def dataset_file(filename: str) -> Path | None:
    """Return absolute path to ``filename`` if found in the search paths."""

    for base in dataset_search_paths(include_overlay=True):
        path = base / filename
        if path.exists():
            return path
    return None


def _merge(data: Any, extra: Any) -> Any:
    if isinstance(extra, dict) and isinstance(data, dict):
        return deep_update(data, extra)
    return extra


@cache
def load_dataset(filename: str) -> Any:
    """Return dataset ``filename`` merged across extra and overlay directories.

    Mappings are deep merged in search order. Any other payload (a list of
    records for example) is replaced wholesale by later directories. Missing
    files yield an empty mapping.
    """

    data: Any = {}
    for base in dataset_paths():
        path = base / filename
        if path.exists():
            data = _merge(data, load_data(path))

    overlay = overlay_dir()
    if overlay:
        overlay_path = overlay / filename
        if overlay_path.exists():
            data = _merge(data, load_data(overlay_path))

    return data


def clear_dataset_cache() -> None:
    """Clear cached dataset results loaded via :func:`load_dataset`."""

    global _PATH_CACHE, _ENV_STATE
    load_dataset.cache_clear()
    dataset_file.cache_clear()
    _PATH_CACHE = None
    _ENV_STATE = None
