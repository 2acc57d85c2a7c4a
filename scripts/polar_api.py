"""Request handlers translating store results into HTTP-style responses.

Each handler mirrors one REST route of the polars API
(``/polars/api/v1/polars...``) and never raises: store errors are mapped to
status codes and anything unexpected becomes a 500.
"""

from __future__ import annotations

from dataclasses import dataclass
from http import HTTPStatus
from typing import Any

from pydantic import ValidationError

from polar_store import (
    AlreadyExists,
    IdMandatory,
    NotFound,
    Order,
    Polar,
    PolarError,
    PolarStore,
    sort_polars,
)
from polar_utils.log import polar_log


@dataclass
class ApiResponse:
    status: HTTPStatus
    body: Any = None

    @property
    def ok(self) -> bool:
        return self.status < 400

    def to_dict(self) -> dict:
        return {"status": int(self.status), "body": self.body}


def _error(status: HTTPStatus, error: Exception | str) -> ApiResponse:
    return ApiResponse(status, {"error": str(error)})


def _parse(data: dict) -> Polar | ApiResponse:
    try:
        return Polar.model_validate(data)
    except ValidationError as e:
        return _error(HTTPStatus.UNPROCESSABLE_ENTITY, e)


def list_polars(
    store: PolarStore,
    archived: bool | None = None,
    sort_by: str | None = None,
    order: Order | str = Order.ASC,
) -> ApiResponse:
    """``GET /polars?archived=&sort_by=&order=``"""
    try:
        polars = store.list(archived)
    except PolarError as e:
        polar_log(f"list failed: {e}")
        return _error(HTTPStatus.INTERNAL_SERVER_ERROR, e)
    if sort_by is not None:
        try:
            polars = sort_polars(polars, sort_by, order)
        except ValueError as e:
            return _error(HTTPStatus.UNPROCESSABLE_ENTITY, e)
    return ApiResponse(HTTPStatus.OK, [p.to_api_dict() for p in polars])


def get_polar(store: PolarStore, polar_id: str) -> ApiResponse:
    """``GET /polars/<id>``"""
    try:
        polar = store.get(polar_id)
    except PolarError as e:
        polar_log(f"get {polar_id} failed: {e}")
        return _error(HTTPStatus.INTERNAL_SERVER_ERROR, e)
    if polar is None:
        return _error(HTTPStatus.NOT_FOUND, NotFound(polar_id))
    return ApiResponse(HTTPStatus.OK, polar.to_api_dict())


def find_polar(store: PolarStore, polar_id: int) -> ApiResponse:
    """``GET /polars?polar_id=<n>``"""
    try:
        polar = store.find_by_polar_id(polar_id)
    except PolarError as e:
        polar_log(f"find {polar_id} failed: {e}")
        return _error(HTTPStatus.INTERNAL_SERVER_ERROR, e)
    if polar is None:
        return _error(HTTPStatus.NOT_FOUND, f"No polar with _id {polar_id}")
    return ApiResponse(HTTPStatus.OK, polar.to_api_dict())


def create_polar(store: PolarStore, data: dict) -> ApiResponse:
    """``POST /polars``"""
    polar = _parse(data)
    if isinstance(polar, ApiResponse):
        return polar
    try:
        stored = store.create(polar)
    except IdMandatory as e:
        return _error(HTTPStatus.BAD_REQUEST, e)
    except AlreadyExists as e:
        return _error(HTTPStatus.CONFLICT, e)
    except PolarError as e:
        return _error(HTTPStatus.INTERNAL_SERVER_ERROR, e)
    return ApiResponse(HTTPStatus.CREATED, {"id": stored.id})


def update_polar(store: PolarStore, polar_id: str, data: dict) -> ApiResponse:
    """``PUT /polars/<id>``"""
    polar = _parse(data)
    if isinstance(polar, ApiResponse):
        return polar
    try:
        store.update(polar_id, polar)
    except NotFound as e:
        return _error(HTTPStatus.NOT_FOUND, e)
    except PolarError as e:
        return _error(HTTPStatus.INTERNAL_SERVER_ERROR, e)
    return ApiResponse(HTTPStatus.NO_CONTENT)


def delete_polar(store: PolarStore, polar_id: str) -> ApiResponse:
    """``DELETE /polars/<id>``"""
    try:
        store.delete(polar_id)
    except NotFound as e:
        return _error(HTTPStatus.NOT_FOUND, e)
    except PolarError as e:
        return _error(HTTPStatus.INTERNAL_SERVER_ERROR, e)
    return ApiResponse(HTTPStatus.NO_CONTENT)


def archive_polar(store: PolarStore, polar_id: str) -> ApiResponse:
    """``POST /polars/<id>/archive``"""
    try:
        store.archive(polar_id)
    except NotFound as e:
        return _error(HTTPStatus.NOT_FOUND, e)
    except PolarError as e:
        return _error(HTTPStatus.INTERNAL_SERVER_ERROR, e)
    return ApiResponse(HTTPStatus.OK)


def restore_polar(store: PolarStore, polar_id: str) -> ApiResponse:
    """``POST /polars/<id>/restore``"""
    try:
        store.restore(polar_id)
    except NotFound as e:
        return _error(HTTPStatus.NOT_FOUND, e)
    except AlreadyExists as e:
        return _error(HTTPStatus.CONFLICT, e)
    except PolarError as e:
        return _error(HTTPStatus.INTERNAL_SERVER_ERROR, e)
    return ApiResponse(HTTPStatus.CREATED)
