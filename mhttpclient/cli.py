"""Command-line front end: send one request and print the reply."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from mhttpclient.client import (
    HttpClientError,
    HttpResponse,
    http_get_async,
    http_get_json_sync,
    http_get_object_params_json_sync,
    http_post_form_async,
    http_post_form_sync,
    http_post_json_async,
    http_post_json_sync,
)
from mhttpclient.params import build_object_params_get_url

__all__ = ["format_response", "main"]


def format_response(response: HttpResponse) -> str:
    """Render a response as its status code and body."""
    return f"Response:\nStatus: {response.status_code}\nBody: {response.text}"


def _parse_param(text: str) -> tuple[str, str]:
    key, sep, value = text.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got {text!r}")
    return key, value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mhttpclient",
        description="Send an HTTP request and print the status and body.",
    )
    parser.add_argument("url", help="http:// URL to request")
    bodies = parser.add_mutually_exclusive_group()
    bodies.add_argument("--json", dest="json_body", metavar="BODY", help="POST a JSON body")
    bodies.add_argument("--form", dest="form_body", metavar="BODY", help="POST a form body")
    parser.add_argument(
        "-p",
        "--param",
        dest="params",
        action="append",
        type=_parse_param,
        default=[],
        metavar="KEY=VALUE",
        help="query parameter for a GET request (repeatable)",
    )
    parser.add_argument(
        "--async",
        dest="run_async",
        action="store_true",
        help="run the request on a background thread and wait for its callback",
    )
    return parser


def _run_sync(args: argparse.Namespace) -> HttpResponse:
    if args.json_body is not None:
        return http_post_json_sync(args.url, args.json_body)
    if args.form_body is not None:
        return http_post_form_sync(args.url, args.form_body)
    if args.params:
        return http_get_object_params_json_sync(args.url, args.params)
    return http_get_json_sync(args.url)


def _run_async(args: argparse.Namespace) -> Optional[HttpResponse]:
    results: list[Optional[HttpResponse]] = []

    def on_done(response: Optional[HttpResponse], _user_data: object) -> None:
        results.append(response)

    if args.json_body is not None:
        thread = http_post_json_async(args.url, args.json_body, on_done)
    elif args.form_body is not None:
        thread = http_post_form_async(args.url, args.form_body, on_done)
    else:
        url = build_object_params_get_url(args.url, args.params)
        thread = http_get_async(url, on_done)
    thread.join()
    return results[0] if results else None


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse arguments, send the request and print the result; return an exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.params and (args.json_body is not None or args.form_body is not None):
        parser.error("--param applies only to GET requests")

    if args.run_async:
        if args.url.lower().startswith("https://"):
            print("error: HTTPS is not supported", file=sys.stderr)
            return 1
        response = _run_async(args)
        if response is None:
            print("error: request failed", file=sys.stderr)
            return 1
    else:
        try:
            response = _run_sync(args)
        except (HttpClientError, ValueError) as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1

    print(format_response(response))
    return 0


if __name__ == "__main__":
    sys.exit(main())