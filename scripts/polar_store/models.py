"""Polar record and its nested tuning sub-records."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

U8 = Annotated[int, Field(ge=0, le=255)]
U16 = Annotated[int, Field(ge=0, le=65535)]


class PolarModel(BaseModel):
    """Base for every polar structure: camelCase keys, snake_case attributes."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class Foil(PolarModel):
    speed_ratio: float
    twa_min: float
    twa_max: float
    twa_merge: float
    tws_min: float
    tws_max: float
    tws_merge: float


class Hull(PolarModel):
    speed_ratio: float


class Penalty(PolarModel):
    ratio: float
    timer: U16


class PenaltyBoundaries(PolarModel):
    """Low-wind / high-wind penalties."""

    lw: Penalty
    hw: Penalty


class PenaltyCase(PolarModel):
    std_timer_sec: U16
    std_ratio: float
    pro_timer_sec: U16
    pro_ratio: float
    std: PenaltyBoundaries


class Winch(PolarModel):
    tack: PenaltyCase
    gybe: PenaltyCase
    sail_change: PenaltyCase
    lws: U8
    hws: U8


class Sail(PolarModel):
    id: U8
    name: str
    speed: list[list[float]]


class Polar(PolarModel):
    """A named set of sailing-performance tuning parameters.

    ``id`` is the record's primary key. It is written to the file but the
    store always replaces it with the filename stem on read. ``polar_id`` is
    the secondary id, stored under ``_id``. ``archived`` only reflects the
    directory the file was found in and is never written.
    """

    id: str | None = None
    polar_id: U8 = Field(alias="_id")
    archived: bool = Field(default=False, exclude=True)
    label: str
    global_speed_ratio: float
    ice_speed_ratio: float
    auto_sail_change_tolerance: float
    bad_sail_tolerance: float
    max_speed: float
    foil: Foil
    hull: Hull
    winch: Winch
    tws: list[U8]
    twa: list[U8]
    sail: list[Sail]

    def to_document(self) -> dict:
        """On-disk mapping: camelCase keys, ``_id``, no ``archived``."""
        return self.model_dump(mode="json", by_alias=True)

    def to_api_dict(self) -> dict:
        """Document mapping plus the computed ``archived`` flag."""
        data = self.to_document()
        data["archived"] = self.archived
        return data


def derive_id(label: str | None) -> str | None:
    """Return the last ``/`` segment of *label*, or None when it is empty."""
    if not label:
        return None
    last = label.split("/")[-1]
    return last or None
