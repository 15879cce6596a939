import io
import json

import pytest

from littlehttp.request import HttpRequest, Method, parse_request
from littlehttp.router import route

ORDERS = [{"order_id": 7, "order_date": "1 Mar 2021", "order_status": "Shipped"}]


@pytest.fixture
def site(tmp_path, monkeypatch):
    public = tmp_path / "public"
    public.mkdir()
    (public / "index.html").write_text("index page", encoding="utf-8")
    (public / "404.html").write_text("missing page", encoding="utf-8")
    data = tmp_path / "data"
    data.mkdir()
    (data / "orders.json").write_text(json.dumps(ORDERS), encoding="utf-8")
    monkeypatch.setenv("PUBLIC_PATH", str(public))
    monkeypatch.setenv("DATA_PATH", str(data))


def _run(request):
    stream = io.BytesIO()
    route(request, stream)
    return stream.getvalue().decode("utf-8")


def test_get_root_serves_index(site):
    text = _run(parse_request("GET / HTTP/1.1\r\n\r\n"))
    assert text.startswith("HTTP/1.1 200 OK\r\n")
    assert text.endswith("\r\n\r\nindex page")
    assert "Content-Type:text/html\r\n" in text


def test_get_api_serves_json(site):
    text = _run(parse_request("GET /api/shipping/orders HTTP/1.1\r\n\r\n"))
    head, body = text.split("\r\n\r\n", 1)
    assert head.startswith("HTTP/1.1 200 OK")
    assert "Content-Type:application/json" in head
    assert json.loads(body) == ORDERS


def test_post_is_not_found(site):
    text = _run(HttpRequest(method=Method.POST, resource="/"))
    assert text.startswith("HTTP/1.1 404 Not Found\r\n")
    assert text.endswith("missing page")


def test_unknown_static_page_is_not_found(site):
    text = _run(parse_request("GET /absent.html HTTP/1.1\r\n\r\n"))
    assert text.startswith("HTTP/1.1 404 Not Found\r\n")


def test_content_length_matches_body(site):
    text = _run(parse_request("GET / HTTP/1.1\r\n\r\n"))
    head, body = text.split("\r\n\r\n", 1)
    length_line = [line for line in head.split("\r\n") if line.startswith("Content-Length")][0]
    assert int(length_line.split(":")[1]) == len(body.encode("utf-8"))