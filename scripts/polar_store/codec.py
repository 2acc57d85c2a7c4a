"""YAML encoding of Polar records."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError

from .errors import PolarDecodeError
from .models import Polar

EXTENSION = "yaml"


def file_name(polar_id: str) -> str:
    """``<id>.yaml``"""
    return f"{polar_id}.{EXTENSION}"


def dumps(polar: Polar) -> str:
    """Serialize a Polar to its on-disk YAML form."""
    return yaml.safe_dump(
        polar.to_document(),
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )


def loads(text: str, source: str | Path = "<string>") -> Polar | None:
    """Parse YAML text into a Polar.

    Returns None for an empty document. Syntax and validation failures are
    raised as :class:`PolarDecodeError` naming *source*.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise PolarDecodeError(source, e) from e
    if data is None:
        return None
    try:
        return Polar.model_validate(data)
    except ValidationError as e:
        raise PolarDecodeError(source, e) from e


def read_polar(path: str | Path) -> Polar | None:
    """Load a Polar from a YAML file. OSErrors propagate."""
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise PolarDecodeError(p, e) from e
    return loads(text, source=p)


def write_polar(path: str | Path, polar: Polar) -> Path:
    """Write (create or truncate) a Polar YAML file."""
    p = Path(path)
    p.write_text(dumps(polar), encoding="utf-8")
    return p
