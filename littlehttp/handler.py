"""Request handlers for static pages, the orders web service and missing pages."""

from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass
from pathlib import Path

from littlehttp.request import HttpRequest
from littlehttp.response import HttpResponse

_PACKAGE_DIR = Path(__file__).resolve().parent
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


@dataclass
class OrderStatus:
    """The shipping status of one order."""

    order_id: int
    order_date: str
    order_status: str

    @classmethod
    def from_json(cls, item: object) -> OrderStatus:
        """Build an order from a decoded JSON object, raising ValueError if it is malformed."""
        if not isinstance(item, dict):
            raise ValueError(f"order must be a JSON object, got {item!r}")
        try:
            order_id = item["order_id"]
            order_date = item["order_date"]
            order_status = item["order_status"]
        except KeyError as exc:
            raise ValueError(f"order is missing field {exc.args[0]!r}") from None
        if isinstance(order_id, bool) or not isinstance(order_id, int):
            raise ValueError(f"order_id must be an integer, got {order_id!r}")
        if not _I32_MIN <= order_id <= _I32_MAX:
            raise ValueError(f"order_id out of range: {order_id}")
        if not isinstance(order_date, str):
            raise ValueError(f"order_date must be a string, got {order_date!r}")
        if not isinstance(order_status, str):
            raise ValueError(f"order_status must be a string, got {order_status!r}")
        return cls(order_id=order_id, order_date=order_date, order_status=order_status)


def _public_path() -> str:
    return os.environ.get("PUBLIC_PATH", str(_PACKAGE_DIR / "public"))


def _data_path() -> str:
    return os.environ.get("DATA_PATH", str(_PACKAGE_DIR / "data"))


def load_file(file_name: str) -> str | None:
    """Return the text of a file under the public directory, or None if it cannot be read."""
    full_path = f"{_public_path()}/{file_name}"
    try:
        with open(full_path, encoding="utf-8", newline="") as handle:
            return handle.read()
    except (OSError, UnicodeDecodeError):
        return None


def load_orders() -> list[OrderStatus]:
    """Read ``orders.json`` from the data directory.

    Raises OSError if the file cannot be read and ValueError if it is not a
    JSON list of orders.
    """
    full_path = f"{_data_path()}/orders.json"
    with open(full_path, encoding="utf-8") as handle:
        data = json.load(handle)
    if not isinstance(data, list):
        raise ValueError("orders.json must hold a JSON list")
    return [OrderStatus.from_json(item) for item in data]


def _not_found() -> HttpResponse:
    return HttpResponse("404", None, load_file("404.html"))


def handle_not_found(request: HttpRequest) -> HttpResponse:
    """Answer with the 404 page."""
    return _not_found()


def _content_type(path: str) -> str:
    if path.endswith(".css"):
        return "text/css"
    if path.endswith(".js"):
        return "text/javascript"
    return "text/html"


def handle_static(request: HttpRequest) -> HttpResponse:
    """Serve a static page named by the first segment of the request path."""
    segments = request.resource.split("/")
    path = segments[1] if len(segments) > 1 else ""
    if path == "":
        return HttpResponse("200", None, load_file("index.html"))
    if path == "health":
        return HttpResponse("200", None, load_file("health.html"))
    contents = load_file(path)
    if contents is None:
        return _not_found()
    return HttpResponse("200", {"Content-Type": _content_type(path)}, contents)


def handle_web_service(request: HttpRequest) -> HttpResponse:
    """Serve ``/api/shipping/orders`` as JSON; any other API path is not found."""
    segments = request.resource.split("/")
    if len(segments) > 3 and segments[2] == "shipping" and segments[3] == "orders":
        body = json.dumps(
            [asdict(order) for order in load_orders()],
            separators=(",", ":"),
            ensure_ascii=False,
        )
        return HttpResponse("200", {"Content-Type": "application/json"}, body)
    return _not_found()