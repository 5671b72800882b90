from collections.abc import MutableMapping
from datetime import UTC, datetime
from re import ASCII
from re import compile as re_compile
from typing import Any

from fastapi import FastAPI, Request
from fastapi.routing import APIRoute
from starlette.routing import BaseRoute, Match, Route

# Leading integer of a string: optional whitespace, optional sign, ASCII digits.
LEADING_INT = re_compile(r"^\s*([+-]?\d+)", ASCII)

# Largest value BSON can encode as an integer.
MAX_INT64 = 2**63 - 1


def host(request: Request) -> str:
    """Return the host IP address."""
    return request.client.host if request.client else "unknown"


def today_str() -> str:
    """Return today's date as a string."""
    return datetime.now(datetime.now().astimezone().tzinfo).strftime(
        "%Y-%m-%d %H:%M:%S",
    )


def utc_now() -> datetime:
    """Return the current UTC time truncated to milliseconds (BSON precision)."""
    now = datetime.now(tz=UTC)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def parse_int(value: str | None) -> int | None:
    """
    Parse the leading integer of a string.

    Trailing characters are ignored, so ``"3abc"`` parses to ``3``.
    Returns ``None`` when the string does not start with a number or has
    too many digits to convert.
    """
    if value is None:
        return None
    found = LEADING_INT.match(value)
    if found is None:
        return None
    try:
        return int(found.group(1))
    except ValueError:
        return None


def positive_int_or(value: str | None, default: int) -> int:
    """Return the parsed integer when it is in ``1..MAX_INT64``, else ``default``."""
    parsed = parse_int(value)
    return parsed if parsed is not None and 0 < parsed <= MAX_INT64 else default


def get_summary(request: Request) -> str | None:
    """Extract route summary from request."""

    scope: MutableMapping[str, Any] = request.scope
    app: FastAPI = scope["app"]
    routes: list[BaseRoute] = app.routes

    summary = None
    for route in routes:
        is_api_route = type(route) is APIRoute
        is_route = type(route) is Route
        if is_api_route and route.matches(scope)[0] == Match.FULL:
            summary = route.summary
            break
        if is_route and route.matches(scope)[0] == Match.FULL:
            summary = route.name
            break

    return summary
