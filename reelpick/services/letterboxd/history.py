"""Watch history retrieval from a member's Letterboxd RSS feed."""

import re
from xml.etree import ElementTree

import httpx
from loguru import logger

from reelpick.core.exceptions import AccountNotFoundError
from reelpick.services.letterboxd.client import LetterboxdClient

LETTERBOXD_NS = {"letterboxd": "https://letterboxd.com"}

_YEAR_SUFFIX = re.compile(r"\s*\(\d{4}\)$")


def normalize_title(raw: str) -> str:
    """Strip a trailing parenthesized release year and surrounding whitespace."""
    return _YEAR_SUFFIX.sub("", raw.strip()).strip()


def parse_feed(xml_content: str) -> list[str]:
    """
    Parse a Letterboxd RSS document into normalized titles, most recent first.

    Raises ElementTree.ParseError on malformed XML.
    """
    root = ElementTree.fromstring(xml_content)
    channel = root.find("channel")
    if channel is None:
        return []

    titles = []
    for item in channel.findall("item"):
        # Prefer the structured film title; diary <title> carries rating stars
        film_title = item.find("letterboxd:filmTitle", LETTERBOXD_NS)
        raw = film_title.text if film_title is not None and film_title.text else item.findtext("title", "")
        title = normalize_title(raw or "")
        if title:
            titles.append(title)
    return titles


class HistoryFetcher:
    """Retrieves the titles a member logged most recently."""

    def __init__(self, client: LetterboxdClient | None = None):
        self.client = client or LetterboxdClient()

    async def close(self):
        await self.client.close()

    async def fetch_titles(self, username: str) -> list[str]:
        """
        Return the member's watched titles.

        Raises AccountNotFoundError if the feed is unreachable, unparsable or empty.
        """
        try:
            xml_content = await self.client.get_feed(username)
        except httpx.HTTPError as e:
            logger.error(f"Failed to fetch RSS for {username}: {e}")
            raise AccountNotFoundError(username) from e

        try:
            titles = parse_feed(xml_content)
        except ElementTree.ParseError as e:
            logger.error(f"Failed to parse RSS XML for {username}: {e}")
            raise AccountNotFoundError(username) from e

        if not titles:
            logger.info(f"RSS feed for {username} has no entries")
            raise AccountNotFoundError(username)

        logger.info(f"Fetched {len(titles)} watched titles for {username}")
        return titles
