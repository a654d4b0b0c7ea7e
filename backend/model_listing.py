"""Discover model asset directories and order them by priority.

Each model lives in a directory named ``<priority>_<name>`` under the
``models`` folder of the asset root. Only the first underscore splits the
two parts, so ``3_my_model`` is priority 3 with name ``my_model``.
"""
from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List


MODELS_DIRNAME = "models"
_PRIORITY_RE = re.compile(r"[0-9]+")


class ModelListingError(Exception):
    """Base class for failures while listing models."""


class ModelsDirectoryNotFound(ModelListingError):
    """Raised when the models directory does not exist."""

    def __init__(self, path: str):
        super().__init__(f"models directory not found: {path}")
        self.path = path


class MalformedDirectoryName(ModelListingError, ValueError):
    """Raised when a directory name is not ``<priority>_<name>``."""

    def __init__(self, dirname: str, reason: str):
        super().__init__(f"malformed model directory name {dirname!r}: {reason}")
        self.dirname = dirname


@dataclass(frozen=True)
class ModelEntry:
    name: str
    priority: int

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "priority": self.priority}


def parse_dirname(dirname: str) -> ModelEntry:
    prefix, sep, name = dirname.partition("_")
    if not sep:
        raise MalformedDirectoryName(dirname, "missing '_' delimiter")
    if not _PRIORITY_RE.fullmatch(prefix):
        raise MalformedDirectoryName(dirname, "priority must be a non-negative integer")
    return ModelEntry(name=name, priority=int(prefix))


def sort_entries(entries: Iterable[ModelEntry]) -> List[ModelEntry]:
    # sorted() is stable: ties keep enumeration order
    return sorted(entries, key=lambda entry: entry.priority)


def list_model_dirnames(models_dir: str) -> List[str]:
    if not os.path.isdir(models_dir):
        raise ModelsDirectoryNotFound(models_dir)
    with os.scandir(models_dir) as it:
        return [entry.name for entry in it if entry.is_dir()]


def list_models(asset_root: str) -> List[ModelEntry]:
    """Read ``<asset_root>/models`` and return its entries sorted by priority.

    The directory is re-read on every call; nothing is cached.
    """
    models_dir = os.path.join(asset_root, MODELS_DIRNAME)
    return sort_entries(parse_dirname(d) for d in list_model_dirnames(models_dir))
