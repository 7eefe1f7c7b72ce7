# mhttpclient

A small HTTP/1.1 client that talks directly over TCP sockets. Each request
is sent with `Connection: close`, and the reply is read until the server
closes the connection. URLs may start with `http://` or have no scheme at
all; `https://` URLs are rejected.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Synchronous requests

```python
from mhttpclient.client import (
    HttpClientError,
    http_get_json_sync,
    http_post_json_sync,
    http_post_form_sync,
)

try:
    response = http_get_json_sync("http://example.com:8080/api/home")
    print(response.status_code)   # int
    print(response.headers)       # raw header block as text
    print(response.body)          # bytes
    print(response.text)          # body decoded as UTF-8

    http_post_json_sync(
        "http://example.com:8080/api/execCmd",
        '{"value":"input keyevent 24","timeout":10}',
    )
    http_post_form_sync(
        "http://example.com:8080/api/swipe",
        "startX=500&startY=1500&endX=500&endY=500&duration=1000",
    )
except HttpClientError as exc:
    print("request failed:", exc)
```

`HttpClientError` is raised for an `https://` URL, a host that cannot be
reached, an empty reply, or a reply that does not start with an HTTP status
line.

The JSON helpers send `Accept: application/json` for GET and
`Content-Type: application/json` for POST; `http_post_form_sync` sends
`Content-Type: application/x-www-form-urlencoded`. Bodies may be `str`
(sent as UTF-8) or `bytes`, and a `Content-Length` header is added for them.
For full control use `http_request_sync(url, method, headers, body)` with an
`HttpMethod` member (`GET`, `POST`, `PUT`, `DELETE`) or its name, and a header
string such as `"Accept: text/plain"`.

Lower-level pieces are available too: `parse_url` returns a `UrlComponents`
(host, path, port — port 80 when none is given), `build_request` returns the
request bytes, and `parse_response` turns raw reply bytes into an
`HttpResponse`.

## GET requests with query parameters

```python
from mhttpclient.params import HttpParams, build_object_params_get_url
from mhttpclient.client import http_get_object_params_json_sync

params = HttpParams()
params.add("value", "input keyevent 24")
params.add("timeout", "10")

print(build_object_params_get_url("http://example.com/api/execCmd", params))
# http://example.com/api/execCmd?value=input+keyevent+24&timeout=10

response = http_get_object_params_json_sync("http://example.com/api/execCmd", params)
```

`HttpParams` keeps insertion order and yields `HttpParam(key, value)` pairs;
any iterable of `(key, value)` tuples works in its place. With no parameters
the base URL is returned unchanged.

A flat key, value, key, value sequence works through
`build_array_params_get_url` and `http_get_array_params_json_sync`:

```python
from mhttpclient.params import build_array_params_get_url

build_array_params_get_url(
    "http://example.com/api/execCmd",
    ["value", "input keyevent 24", "timeout", "10"],
)
```

Here only values are encoded, keys are used as given, and a pair whose key or
value is `None` is skipped. A `ValueError` is raised when the base URL is
missing, the list is empty, or it has an odd number of items.

Encoding is done by `url_encode`: letters, digits and `-_.~` are kept,
spaces become `+`, and every other UTF-8 byte becomes `%XX`.

## Asynchronous requests

The async helpers run the request on a daemon thread and hand the response,
together with your `user_data`, to a callback. They return the started
`threading.Thread`, so you can `join()` it. If the request fails, the
callback receives `None` as the response.

```python
from mhttpclient.client import http_get_async

def on_done(response, user_data):
    print(user_data, response.status_code if response else None)

thread = http_get_async("http://example.com/api/home", on_done, "home page")
thread.join()
```

`http_post_json_async` and `http_post_form_async` work the same way for POST
bodies, and `http_request_async` accepts any method and headers.

## Command line

Installing the package provides the `mhttpclient` command, which sends one
request and prints the status and body of the response:

```
mhttpclient --help
mhttpclient http://example.com:8080/api/home
mhttpclient http://example.com:8080/api/execCmd -p "value=input keyevent 24" -p timeout=10
mhttpclient http://example.com:8080/api/execCmd --json '{"timeout":10}'
mhttpclient http://example.com:8080/api/swipe --form "startX=500&endX=500"
mhttpclient http://example.com:8080/api/home --async
```

Without `--json` or `--form` a JSON GET is sent, with any `-p/--param
KEY=VALUE` options added to the query string. `--param` cannot be combined
with a POST body. `--async` runs the request on a background thread and waits
for its callback. The command exits with status 1 and an error message when
the request fails.

## What it does not do

There is no HTTPS, no redirect following, no timeouts, and no handling of
chunked transfer encoding or compression: the body is whatever bytes follow
the header block. Headers are returned as one raw text block, not parsed into
a mapping, and the whole reply is held in memory.