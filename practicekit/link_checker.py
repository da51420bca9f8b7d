"""A multi-threaded checker for broken links on a web site."""

from __future__ import annotations

import argparse
import ipaddress
import pprint
import queue
import threading
from dataclasses import dataclass
from typing import Optional, Union
from urllib.parse import urljoin, urlsplit, urlunsplit

import requests
from bs4 import BeautifulSoup

DEFAULT_START_URL = "https://www.google.org"


class CrawlError(Exception):
    """Raised when a page cannot be fetched."""


class BadResponse(CrawlError):
    """Raised when a page is answered with a non-success status."""

    def __init__(self, status: str) -> None:
        super().__init__(f"bad http response: {status}")
        self.status = status


@dataclass(frozen=True)
class CrawlCommand:
    """A page to visit, and whether to collect the links found on it."""

    url: str
    extract_links: bool


def _normalize(url: str) -> str:
    """Give web URLs without a path the root path, as a URL parser would."""
    parts = urlsplit(url)
    if parts.scheme in ("http", "https") and parts.netloc and not parts.path:
        parts = parts._replace(path="/")
    return urlunsplit(parts)


def _domain(url: str) -> Optional[str]:
    """Return the host name of ``url``, or None when it has none or is an IP address."""
    try:
        host = urlsplit(url).hostname
    except ValueError:
        return None
    if not host:
        return None
    try:
        ipaddress.ip_address(host)
    except ValueError:
        return host
    return None


def visit_page(session: requests.Session, command: CrawlCommand) -> list[str]:
    """Fetch the page and return the absolute URLs of its links.

    Links are collected only when the command asks for them.
    """
    print(f"Checking {command.url}")
    try:
        response = session.get(command.url)
    except requests.RequestException as err:
        raise CrawlError(f"request error: {err}") from err
    if not 200 <= response.status_code < 300:
        raise BadResponse(f"{response.status_code} {response.reason or ''}".strip())

    if not command.extract_links:
        return []

    base_url = response.url
    document = BeautifulSoup(response.text, "html.parser")
    link_urls: list[str] = []
    for element in document.find_all("a"):
        href = element.get("href")
        if href is None:
            continue
        try:
            link_urls.append(_normalize(urljoin(base_url, href)))
        except ValueError as err:
            print(f"On {base_url}: ignored unparsable {href!r}: {err}")
    return link_urls


class CrawlState:
    """Tracks the start domain and the pages already visited."""

    def __init__(self, start_url: str) -> None:
        start_url = _normalize(start_url)
        domain = _domain(start_url)
        if domain is None:
            raise ValueError(f"start URL has no domain: {start_url!r}")
        self.domain = domain
        self.visited_pages: set[str] = {start_url}

    def should_extract_links(self, url: str) -> bool:
        """Return whether links within the given page should be extracted."""
        return _domain(url) == self.domain

    def mark_visited(self, url: str) -> bool:
        """Mark the page visited; return False if it already was."""
        if url in self.visited_pages:
            return False
        self.visited_pages.add(url)
        return True


_Result = tuple[str, Union[list[str], CrawlError]]


def _crawl_worker(commands: queue.Queue, results: queue.Queue) -> None:
    with requests.Session() as session:
        while True:
            command = commands.get()
            if command is None:
                return
            try:
                outcome: Union[list[str], CrawlError] = visit_page(session, command)
            except CrawlError as err:
                outcome = err
            results.put((command.url, outcome))


def check_links(start_url: str, thread_count: int = 16) -> list[str]:
    """Crawl from ``start_url`` and return the URLs that could not be fetched.

    Links are followed only on pages within the start URL's domain.
    """
    if thread_count < 1:
        raise ValueError("thread_count must be at least 1")
    start_url = _normalize(start_url)
    state = CrawlState(start_url)
    commands: queue.Queue = queue.Queue()
    results: queue.Queue = queue.Queue()
    for _ in range(thread_count):
        threading.Thread(target=_crawl_worker, args=(commands, results), daemon=True).start()

    commands.put(CrawlCommand(start_url, extract_links=True))
    pending = 1
    bad_urls: list[str] = []
    try:
        while pending > 0:
            url, outcome = results.get()
            pending -= 1
            if isinstance(outcome, CrawlError):
                bad_urls.append(url)
                print(f"Got crawling error: {outcome}")
                continue
            for link in outcome:
                if state.mark_visited(link):
                    commands.put(CrawlCommand(link, state.should_extract_links(link)))
                    pending += 1
    finally:
        for _ in range(thread_count):
            commands.put(None)
    return bad_urls


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Find broken links on a web site.")
    parser.add_argument("start_url", nargs="?", default=DEFAULT_START_URL)
    parser.add_argument("--threads", type=int, default=16)
    args = parser.parse_args(argv)
    bad_urls = check_links(args.start_url, args.threads)
    print(f"Bad URLs: {pprint.pformat(bad_urls)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())