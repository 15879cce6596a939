"""HTTP response construction and serialisation."""

from __future__ import annotations

_STATUS_TEXT = {
    "200": "OK",
    "400": "Bad Request",
    "404": "Not Found",
    "500": "Internal Server Error",
}


class HttpResponse:
    """An HTTP/1.1 response with a status, headers and optional body."""

    def __init__(
        self,
        status_code: str = "200",
        headers: dict[str, str] | None = None,
        body: str | None = None,
    ) -> None:
        self.version = "HTTP/1.1"
        self.status_code = status_code
        self.headers = dict(headers) if headers is not None else {"Content-Type": "text/html"}
        self.status_text = _STATUS_TEXT.get(status_code, "Not Found")
        self.body = body

    def __str__(self) -> str:
        if self.body is None:
            raise ValueError("cannot serialise a response without a body")
        header_text = "".join(f"{k}:{v}\r\n" for k, v in self.headers.items())
        length = len(self.body.encode("utf-8"))
        return (
            f"{self.version} {self.status_code} {self.status_text}\r\n"
            f"{header_text}Content-Length: {length}\r\n\r\n{self.body}"
        )

    def __repr__(self) -> str:
        return (
            f"HttpResponse(version={self.version!r}, status_code={self.status_code!r}, "
            f"status_text={self.status_text!r}, headers={self.headers!r}, body={self.body!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HttpResponse):
            return NotImplemented
        return (
            self.version == other.version
            and self.status_code == other.status_code
            and self.status_text == other.status_text
            and self.headers == other.headers
            and self.body == other.body
        )

    __hash__ = None  # type: ignore[assignment]

    def send_response(self, stream) -> None:
        """Write the serialised response to a socket or binary stream.

        Write failures are ignored; a response without a body raises ValueError.
        """
        data = str(self).encode("utf-8")
        try:
            if hasattr(stream, "sendall"):
                stream.sendall(data)
            else:
                stream.write(data)
        except OSError:
            pass