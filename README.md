# filehttpd

A small threaded HTTP server that serves content from the directory it is
started in.

## Running

```
pip install .
filehttpd
```

`python -m filehttpd.server` does the same.

On start the server makes sure the working directory holds `html/`,
`resources/`, `images/` and `files/`. If `resources/config.json` is missing, it
writes a default one. If the configured home page is missing, it writes an
example page. Then it listens on the configured port on all interfaces. Each
connection is handled on its own thread.

To stop the server, type `exit`, `quit`, `kill` or `stop` on standard input.
End of input also stops it. The command exits with status 1 if the server
cannot start, for example when the configuration is invalid or the port is in
use.

## Configuration

`resources/config.json`:

```json
{
  "loggerFilter": -1,
  "home": "html/example.html",
  "port": 8000
}
```

- `loggerFilter`: the lowest log level that is printed. The levels are -1 for
  debug, 0 for info, 1 for warning and 2 for error.
- `home`: the page served for `GET /` and for any GET the server does not
  recognise.
- `port`: the TCP port to listen on.

`loggerFilter` and `port` must be integers and `home` must be a string. If they
are not, loading the configuration raises `ValueError`.

## What GET serves

The content type is taken from everything after the first dot in the path.

| Request target            | Served from                                                     |
|---------------------------|-----------------------------------------------------------------|
| `/`                       | the `home` page (an empty page if the file is missing)          |
| `/favicon.ico`            | `images/favicon.ico`                                            |
| `/x.html`, `.css`, `.js`  | `html/x.html` and the like                                      |
| `/page/name`              | `html/name.html`                                                |
| `/images/...`             | `images/...`                                                    |
| `/files/...`              | `files/...`; files of unknown type go out as `application/octet-stream` |
| anything else             | the `home` page                                                 |

For `/files/...` with an unknown type, a `Content-Disposition: attachment` line
is added to the end of the body. It is not sent as a response header.

A GET that carries a body gets no response, except for `/favicon.ico`.

## What it does not do

- POST, PUT and DELETE requests are read and the connection is closed. Nothing
  is sent back, and nothing is stored or removed.
- When a requested file is missing or empty, no response is sent and the
  connection is closed. The server does not send `404 Not Found`.
- Each connection serves exactly one request. Only what arrives with the
  headers is read as the body. `Content-Length` is not honoured.
- If answering fails with an error, the client gets `500 Internal Server Error`.

## Use from Python

```python
from filehttpd.server import HTTPServer

with HTTPServer() as server:
    print(server.port, server.config.default_html)
    ...  # connections are accepted on a background thread
```

`HTTPServer.close()` stops accepting connections and closes the listening
socket. Leaving the `with` block calls it.

The pieces can also be used on their own:

- `filehttpd.request.parse_request(raw, client)` parses raw request text into
  an `HTTPRequest`. Its fields are `method`, `target`, `http_version`,
  `headers`, `content` and `client`. Methods other than GET, POST, PUT and
  DELETE are read as GET.
- `filehttpd.result.HTTPResult(content_type, content)` builds a response.
  `to_bytes()` serialises it. `content_type_for(path)` guesses a
  `ContentType` and `mime_type(content_type)` gives the header value.
- `filehttpd.environment.get_server_config()` returns the `ServerConfig`,
  setting up the working directory first if needed.
  `setup_file_environment()`, `load_server_config()`, `ensure_existence()` and
  `read_file()` are also available.
- `filehttpd.handlers.handle_method(request)` dispatches a request and returns
  the `HTTPResult` sent, or `None`.
- `filehttpd.request_handler.handle_client(sock)` reads, answers and closes one
  connection.
- `filehttpd.log` prints coloured messages to standard output.
  `set_filter(level)` and `get_filter()` control the level filter, which
  starts at `LogLevel.INFO`.