"""CLI deployment check for the storefront's server-rendered pages.

Requests every public page route of a running deployment and verifies the
status code and Cache-Control policy each one is expected to return.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from urllib.parse import quote, urlparse

import httpx

IMMUTABLE = "public, max-age=31536000, immutable"
LISTING = "public, max-age=300"
MISSING_SLUG = "page-check-missing-slug"


@dataclass
class PageCheck:
    path: str
    status: int
    cache_control: str | None


@dataclass
class CheckResult:
    check: PageCheck
    status: int | None
    cache_control: str | None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return (
            self.error is None
            and self.status == self.check.status
            and self.cache_control == self.check.cache_control
        )


def normalize_base_url(base_url: str) -> str:
    """Validate a deployment base URL and strip any trailing slash."""
    parsed = urlparse(base_url.strip())
    if parsed.scheme not in {"http", "https"} or not parsed.netloc:
        raise ValueError(f"Invalid base URL: {base_url!r}")
    return base_url.strip().rstrip("/")


def default_checks(blog_slug: str | None = None, forum_slug: str | None = None) -> list[PageCheck]:
    """Checks for all page routes; item routes only when a known slug is given."""
    checks = [
        PageCheck("/blog", 200, LISTING),
        PageCheck("/blog/submit", 200, LISTING),
        PageCheck(f"/blog/{MISSING_SLUG}", 404, None),
        PageCheck("/forum", 200, LISTING),
        PageCheck(f"/forum/{MISSING_SLUG}", 404, None),
    ]
    if blog_slug:
        checks.append(PageCheck(f"/blog/{quote(blog_slug, safe='')}", 200, IMMUTABLE))
    if forum_slug:
        checks.append(PageCheck(f"/forum/{quote(forum_slug, safe='')}", 200, LISTING))
    return checks


def check_page(client: httpx.Client, check: PageCheck) -> CheckResult:
    try:
        resp = client.get(check.path)
    except httpx.HTTPError as exc:
        return CheckResult(check, None, None, error=str(exc) or type(exc).__name__)
    return CheckResult(check, resp.status_code, resp.headers.get("cache-control"))


def run_checks(client: httpx.Client, checks: list[PageCheck]) -> list[CheckResult]:
    return [check_page(client, check) for check in checks]


def format_result(result: CheckResult) -> str:
    mark = "OK  " if result.ok else "FAIL"
    if result.error is not None:
        return f"{mark} {result.check.path}: {result.error}"
    return (
        f"{mark} {result.check.path}: status={result.status} "
        f"(expected {result.check.status}), cache-control={result.cache_control!r} "
        f"(expected {result.check.cache_control!r})"
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="storefront-page-check",
        description="Check status and cache headers of deployed storefront pages",
    )
    parser.add_argument("base_url", help="Deployment base URL, e.g. https://shop.example.com")
    parser.add_argument("--blog-slug", help="Slug of a published blog post to check")
    parser.add_argument("--forum-slug", help="Slug of an approved forum topic to check")
    parser.add_argument("--timeout", type=float, default=15.0, help="Request timeout in seconds")
    args = parser.parse_args(argv)

    try:
        base_url = normalize_base_url(args.base_url)
    except ValueError as exc:
        print(f"Error: {exc}")
        sys.exit(2)

    checks = default_checks(args.blog_slug, args.forum_slug)
    with httpx.Client(base_url=base_url, timeout=args.timeout) as client:
        results = run_checks(client, checks)

    for result in results:
        print(format_result(result))
    failed = sum(1 for r in results if not r.ok)
    print(f"{len(results) - failed}/{len(results)} checks passed")
    if failed:
        sys.exit(1)


if __name__ == "__main__":
    main()
