# littlehttp

littlehttp is a small, single-threaded HTTP/1.1 server. It serves static pages and a JSON web service that reports order status. The package also has a plain TCP echo server and a client that sends it a greeting.

## Install

```
pip install .
```

## HTTP server

```
littlehttp-server [host:port]
```

By default the server listens on `localhost:3000`. It handles one connection at a time. From each connection it reads a single chunk of at most 90 bytes, parses that chunk as the request, writes one response and closes the connection.

Requests are routed as follows:

- `GET /` serves `index.html` from the public directory.
- `GET /health` serves `health.html` from the public directory.
- `GET /<name>` serves the file `<name>` from the public directory. Only the first path segment is used. The `Content-Type` depends on the name:
  - A name ending in `.css` gives `text/css`.
  - A name ending in `.js` gives `text/javascript`.
  - Any other name gives `text/html`.
- `GET /<name>` for a file that cannot be read gets `404 Not Found` with the body of `404.html`.
- `GET /api/shipping/orders` returns the orders in `orders.json` from the data directory. The orders are sent as compact JSON with `Content-Type: application/json`.
- Any other `GET /api/...` path gets the 404 page.
- Any method other than `GET` gets the 404 page.

Two environment variables set where files are read from:

- `PUBLIC_PATH` is the directory of the static pages. If it is unset, the server uses a `public` directory inside the installed package.
- `DATA_PATH` is the directory that holds `orders.json`. If it is unset, the server uses a `data` directory inside the installed package.

`orders.json` must be a JSON list of objects. Each object has three fields:

- `order_id`, an integer that fits in 32 bits.
- `order_date`, a string.
- `order_status`, a string.

## Using the pieces from Python

```python
from littlehttp.request import parse_request, Method, Version
from littlehttp.response import HttpResponse

req = parse_request("GET /greeting HTTP/1.1\r\nHost: localhost:3000\r\n\r\n")
assert req.method is Method.GET
assert req.version is Version.V1_1
assert req.resource == "/greeting"
assert req.headers == {"Host": " localhost"}

resp = HttpResponse("404", None, "nothing here")
print(str(resp))
# HTTP/1.1 404 Not Found\r\nContent-Type:text/html\r\nContent-Length: 12\r\n\r\nnothing here
```

### Requests

`littlehttp.request` provides the following:

- `parse_request(text)` looks at each line of the request text:
  - A line that contains `HTTP` is the request line, made of method, path and version. It raises `ValueError` if that line has fewer than three words.
  - A line that contains `:` is a header. Only the text between the first and second colon is kept as the value, and it keeps its leading space.
  - Blank lines are skipped.
  - Any other line becomes `msg_body`.
- `parse_method(s)` recognises `GET` and `POST`. Any other value gives `Method.UNINITIALIZED`.
- `parse_version(s)` recognises only `HTTP/1.1`. Any other value gives `Version.UNINITIALIZED`.
- `HttpRequest` is a dataclass with the fields `method`, `version`, `resource`, `headers` and `msg_body`.

### Responses

`littlehttp.response.HttpResponse(status_code="200", headers=None, body=None)` builds a response:

- When `headers` is `None`, the headers are `Content-Type: text/html`.
- The status text is `OK` for 200, `Bad Request` for 400, `Not Found` for 404 and `Internal Server Error` for 500. Any other code gets `Not Found`.
- `str(response)` gives the wire form. `Content-Length` is the body's length in UTF-8 bytes.
- `send_response(stream)` writes the wire form to a socket, using `sendall`, or to a binary stream, using `write`. Write errors are ignored.
- Both `str(response)` and `send_response` raise `ValueError` if the response has no body.

### Handlers and routing

`littlehttp.handler` provides the following:

- `handle_static`, `handle_web_service` and `handle_not_found` each take an `HttpRequest` and return an `HttpResponse`.
- `load_file(name)` reads a file from the public directory. It returns `None` if the file cannot be read.
- `load_orders()` reads `orders.json` and returns a list of `OrderStatus`.

`littlehttp.router.route(request, stream)` picks the handler for `request` and writes its response to `stream`.

`littlehttp.server.Server("host:port")` takes the address to listen on. It raises `ValueError` for an address that is not of that form. It has two methods:

- `run()` serves connections until it is interrupted.
- `handle_connection(conn)` serves a single accepted socket.

## Limits

The package has the following limits:

- No `public` or `data` directory ships with the package. Set `PUBLIC_PATH` and `DATA_PATH`, or create those directories, before starting the server.
- When a page that a response needs cannot be read, the response has no body. This includes `index.html`, `health.html` and `404.html`. A missing or malformed `orders.json` is also an error. In each of these cases the error is not caught, and the server stops.
- Only the first 90 bytes of a request are read. A request whose request line or headers go past that limit is cut off. A request cut off inside a line that is not valid UTF-8 raises an error.
- No concurrency, keep-alive, HEAD, POST handling or query strings.

## TCP echo

Start the echo server. It listens on `127.0.0.1:3000` by default. For each connection it reads up to 1024 bytes and sends them back:

```
littlehttp-echo-server [--host HOST] [--port PORT]
```

In another terminal, send `Hello` and print the reply:

```
littlehttp-echo-client [--host HOST] [--port PORT]
```

From Python you can use these functions from `littlehttp.echo`:

- `serve(host, port)` runs the echo server.
- `echo_once(conn)` echoes one chunk on an accepted socket and returns it.
- `send_hello(host, port)` sends `Hello` and returns the reply as a string.