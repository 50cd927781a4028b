from urllib.parse import quote

from reelpick.core.base_client import BaseClient
from reelpick.core.config import settings
from reelpick.core.version import __version__


class LetterboxdClient(BaseClient):
    """
    Client for public Letterboxd pages. Feed responses are never cached.
    """

    def __init__(self, timeout: float = settings.REQUEST_TIMEOUT_SECONDS):
        headers = {
            "User-Agent": f"Reelpick/{__version__}",
            "Accept": "application/rss+xml, application/xml;q=0.9, */*;q=0.8",
        }
        super().__init__(base_url=settings.LETTERBOXD_BASE_URL, timeout=timeout, headers=headers)

    async def get_feed(self, username: str) -> str:
        """Fetch the raw RSS document of a member's diary."""
        return await self.get_text(f"/{quote(username, safe='')}/rss/")
