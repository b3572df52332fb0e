#!/usr/bin/env python3
"""
Command-line client for a running URL shortener service.

Usage:
    shortlinks-cli shorten <url> [<url> ...] [--validity MINUTES] [--shortcode CODE]
    shortlinks-cli stats <shortcode>
    shortlinks-cli list
"""

import argparse
import json
import os
import sys
from typing import Any, List, Optional

import requests


DEFAULT_BASE_URL = "http://localhost:3000"


class URLShortenerCLI:
    """Command-line interface talking to the shortener over HTTP."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        raw_json: bool = False,
        timeout: float = 5,
        session: Optional[requests.Session] = None,
    ):
        """Initialize CLI."""
        self.base_url = base_url.rstrip("/")
        self.raw_json = raw_json
        self.timeout = timeout
        self.session = session or requests.Session()

    def _print(self, payload: Any, text: str) -> None:
        print(json.dumps(payload, indent=2) if self.raw_json else text)

    def _fail(self, response: requests.Response) -> int:
        try:
            error = response.json().get("error", response.text)
        except ValueError:
            error = response.text
        print(json.dumps({
            "success": False,
            "status": response.status_code,
            "error": error,
        }, indent=2), file=sys.stderr)
        return 1

    def shorten(
        self,
        urls: List[str],
        validity: Optional[int] = None,
        shortcode: Optional[str] = None,
    ) -> int:
        """Shorten one or more URLs; returns 1 if any of them failed."""
        exit_code = 0
        for url in urls:
            body = {"url": url}
            if validity is not None:
                body["validity"] = validity
            if shortcode:
                body["shortcode"] = shortcode

            response = self.session.post(
                f"{self.base_url}/shorturls", json=body, timeout=self.timeout
            )
            if response.status_code != 201:
                exit_code = self._fail(response)
                continue

            data = response.json()
            self._print(data, f"{data['shortlink']} -> {url} (expires {data['expiry']})")

        return exit_code

    def stats(self, shortcode: str) -> int:
        """Show statistics for a short code."""
        response = self.session.get(
            f"{self.base_url}/shorturls/{shortcode}", timeout=self.timeout
        )
        if response.status_code != 200:
            return self._fail(response)

        data = response.json()
        lines = [
            f"Original URL: {data['originalUrl']}",
            f"Created:      {data['createdAt']}",
            f"Expires:      {data['expiry']}",
            f"Total clicks: {data['totalClicks']}",
        ]
        for click in data["clicks"]:
            lines.append(f"  {click['time']}  {click['referrer']}  {click['geo']}")
        self._print(data, "\n".join(lines))
        return 0

    def list_urls(self) -> int:
        """List every short URL."""
        response = self.session.get(f"{self.base_url}/shorturls", timeout=self.timeout)
        if response.status_code != 200:
            return self._fail(response)

        urls = response.json()
        lines = [
            f"{item['shortlink']}  {item['totalClicks']:>5} clicks  expires {item['expiry']}  -> {item['url']}"
            for item in urls
        ]
        lines.append(f"{len(urls)} short URLs")
        self._print(urls, "\n".join(lines))
        return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="URL Shortener CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Shorten a URL
  %(prog)s shorten https://example.com/long/url

  # Shorten several URLs at once, valid for two hours
  %(prog)s shorten https://example.com/a https://example.com/b --validity 120

  # Shorten with custom code
  %(prog)s shorten https://example.com/long/url --shortcode mylink

  # Get statistics
  %(prog)s stats mylink

  # List all URLs
  %(prog)s list
        """
    )

    parser.add_argument(
        "--base-url",
        default=os.getenv("SHORTLINKS_URL", DEFAULT_BASE_URL),
        help=f"Service URL (default: from SHORTLINKS_URL env or {DEFAULT_BASE_URL})"
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print raw JSON responses"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    shorten_parser = subparsers.add_parser("shorten", help="Shorten URLs")
    shorten_parser.add_argument("urls", nargs="+", metavar="url", help="URLs to shorten")
    shorten_parser.add_argument("--validity", type=int, help="Validity in minutes (default 30)")
    shorten_parser.add_argument("--shortcode", help="Custom short code (single URL only)")

    stats_parser = subparsers.add_parser("stats", help="Get URL statistics")
    stats_parser.add_argument("shortcode", help="Short code to get stats for")

    subparsers.add_parser("list", help="List all URLs")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "shorten" and args.shortcode and len(args.urls) > 1:
        parser.error("--shortcode can only be used with a single URL")

    cli = URLShortenerCLI(base_url=args.base_url, raw_json=args.json)

    try:
        if args.command == "shorten":
            return cli.shorten(args.urls, args.validity, args.shortcode)
        elif args.command == "stats":
            return cli.stats(args.shortcode)
        elif args.command == "list":
            return cli.list_urls()
        else:
            parser.print_help()
            return 1
    except requests.RequestException as e:
        print(json.dumps({
            "success": False,
            "error": f"Cannot reach {cli.base_url}: {e}"
        }, indent=2), file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
