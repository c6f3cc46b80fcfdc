"""
FastAPI integration.

Wires the binding adapter into a FastAPI application:

- ``install`` puts the registry on ``app.state`` and renders rejected requests
- ``validated(name)`` is a dependency that returns the cleaned parameters or
  halts the request with the validator's error body

Usage:
    app = FastAPI()
    install(app, registry)

    @app.post("/api/fancy-resources")
    async def create(params: dict[str, Any] = Depends(validated("create_fancy_resource"))):
        ...
"""

from __future__ import annotations

import json
import logging
from collections.abc import Awaitable, Callable, Mapping
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .binding import DEFAULT_REJECT_STATUS, Reject, RequestCache, bind
from .engine import ValidatorDefinition
from .errors import DefinitionError

logger = logging.getLogger(__name__)

_REGISTRY_ATTR = "paramguard_registry"
_STATUS_ATTR = "paramguard_status_code"
_CACHE_ATTR = "paramguard_cache"
_RAW_INPUT_ATTR = "paramguard_raw_input"

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


class RequestRejected(Exception):
    """Raised inside a request to halt it with a ``Reject`` outcome.

    Rendered by the handler that ``install`` registers; never escapes the app.
    """

    def __init__(self, outcome: Reject):
        self.outcome = outcome
        super().__init__(f"Request rejected with status {outcome.status_code}")


async def _rejected_handler(request: Request, exc: RequestRejected) -> JSONResponse:
    return JSONResponse(status_code=exc.outcome.status_code, content=exc.outcome.body)


def install(
    app: FastAPI,
    registry: Mapping[str, ValidatorDefinition],
    status_code: int = DEFAULT_REJECT_STATUS,
) -> None:
    """Attach a validator registry to an app and register the rejection handler."""
    setattr(app.state, _REGISTRY_ATTR, registry)
    setattr(app.state, _STATUS_ATTR, status_code)
    app.add_exception_handler(RequestRejected, _rejected_handler)
    logger.info(f"Installed {len(registry)} request validators")


def get_registry(request: Request) -> Mapping[str, ValidatorDefinition]:
    registry = getattr(request.app.state, _REGISTRY_ATTR, None)
    if registry is None:
        raise DefinitionError("No validator registry installed on this app; call install() at startup")
    return registry


def get_request_cache(request: Request) -> RequestCache:
    """Return the request's validation cache, creating it on first use."""
    cache = getattr(request.state, _CACHE_ATTR, None)
    if cache is None:
        cache = RequestCache()
        setattr(request.state, _CACHE_ATTR, cache)
    return cache


def _flatten(multi: Any) -> dict[str, Any]:
    """Collapse a multi-dict: single values stay scalar, repeated keys become lists."""
    flat: dict[str, Any] = {}
    for key in multi.keys():
        values = multi.getlist(key)
        flat[key] = values[0] if len(values) == 1 else list(values)
    return flat


def _reject_status(request: Request) -> int:
    return getattr(request.app.state, _STATUS_ATTR, DEFAULT_REJECT_STATUS)


def _malformed_body(request: Request) -> RequestRejected:
    body = {"errors": [{"field": "body", "message": "malformed body"}]}
    return RequestRejected(Reject(body=body, status_code=_reject_status(request)))


async def _read_body(request: Request) -> dict[str, Any]:
    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()

    if content_type in FORM_CONTENT_TYPES:
        form = await request.form()
        return _flatten(form)

    raw = await request.body()
    if not raw or not content_type.endswith("json"):
        return {}

    try:
        payload = json.loads(raw)
    except ValueError as e:
        # JSONDecodeError, UnicodeDecodeError and oversized integer literals
        logger.info(f"Rejecting unparseable JSON body on {request.url.path}: {e}")
        raise _malformed_body(request) from e

    if not isinstance(payload, dict):
        logger.info(f"Rejecting non-object JSON body on {request.url.path}")
        raise _malformed_body(request)
    return payload


async def collect_raw_input(request: Request) -> dict[str, Any]:
    """
    Gather request parameters into one mapping.

    Sources are merged query string first, then body, then path parameters,
    so path parameters win on key collisions. The result is cached on the
    request so several validators on one request read the body once.

    Raises:
        RequestRejected: If the body is declared JSON but is not a JSON object
    """
    cached = getattr(request.state, _RAW_INPUT_ATTR, None)
    if cached is not None:
        return cached

    raw_input = _flatten(request.query_params)
    raw_input.update(await _read_body(request))
    raw_input.update(request.path_params)

    setattr(request.state, _RAW_INPUT_ATTR, raw_input)
    return raw_input


def validated(name: str) -> Callable[[Request], Awaitable[dict[str, Any]]]:
    """
    Build a dependency that validates the request with the named validator.

    The dependency returns a fresh dict of cleaned parameters. On invalid
    input it raises ``RequestRejected``; an unknown name raises
    ``UnknownValidatorError``, which FastAPI reports as a 500.
    """

    async def dependency(request: Request) -> dict[str, Any]:
        raw_input = await collect_raw_input(request)
        outcome = bind(name, raw_input, get_registry(request), get_request_cache(request), _reject_status(request))
        if isinstance(outcome, Reject):
            raise RequestRejected(outcome)
        return dict(outcome.cleaned)

    dependency.__name__ = f"validated_{name}"
    return dependency
