"""Dispatch of parsed requests to the matching handler."""

from __future__ import annotations

from littlehttp.handler import handle_not_found, handle_static, handle_web_service
from littlehttp.request import HttpRequest, Method


def route(request: HttpRequest, stream) -> None:
    """Handle ``request`` and write the response to ``stream``.

    GET requests under ``/api`` go to the web service, other GET requests to
    the static page handler, and every other method gets the 404 page.
    """
    if request.method is Method.GET:
        segments = request.resource.split("/")
        if len(segments) > 1 and segments[1] == "api":
            response = handle_web_service(request)
        else:
            response = handle_static(request)
    else:
        response = handle_not_found(request)
    response.send_response(stream)