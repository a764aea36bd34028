"""
Presenter for the News Screen.

Owns the fetch state behind the article list: the next page to request,
the articles accumulated so far, and the last published Resource.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable

from ...config.constants import QUERY_PAGE_SIZE
from ...exceptions import ApiError
from ...models.articles import Article, NewsResponse
from ...models.resource import Resource
from ...services.news_service import NewsService

logger = logging.getLogger(__name__)

StateCallback = Callable[[Resource[NewsResponse]], Awaitable[None]]


class NewsPresenter:
    """
    Handles article fetching for the news screen.

    Every request publishes ``Resource.loading()`` followed by either
    ``Resource.success`` with the accumulated response or
    ``Resource.error`` with a message. Results from a request that was
    overtaken by ``reset_state()`` are dropped.
    """

    def __init__(
        self,
        service: NewsService,
        on_state_update: StateCallback | None = None,
        page_size: int = QUERY_PAGE_SIZE,
    ):
        self.service = service
        self.on_state_update = on_state_update
        self.page_size = page_size
        self.page = 1
        self.articles: Resource[NewsResponse] | None = None
        self._accumulated: list[Article] = []
        self._generation = 0

    async def _notify_update(self) -> None:
        if self.on_state_update and self.articles is not None:
            await self.on_state_update(self.articles)

    async def _publish(self, resource: Resource[NewsResponse]) -> None:
        self.articles = resource
        await self._notify_update()

    async def _publish_error(self, generation: int, message: str) -> None:
        if generation != self._generation:
            logger.debug(f"Dropping stale error: {message}")
            return
        await self._publish(Resource.error(message))

    def reset_state(self) -> None:
        """Start over from the first page with an empty list."""
        self.page = 1
        self._accumulated = []
        self._generation += 1

    def total_pages(self, total_results: int) -> int:
        return total_results // self.page_size + 2

    def is_last_page(self, total_results: int) -> bool:
        # page has already been advanced past the page just loaded
        return self.page == self.total_pages(total_results)

    async def get_all_articles(self, topic: str) -> None:
        """Load the next page for ``topic`` and append it to the list."""
        await self._fetch(topic, replace=False)

    async def get_all_new_articles(self, query: str) -> None:
        """Run a search; a first page replaces whatever was shown."""
        await self._fetch(query, replace=self.page == 1)

    async def _fetch(self, query: str, replace: bool) -> None:
        generation = self._generation
        page = self.page
        await self._publish(Resource.loading())

        try:
            response = await asyncio.to_thread(self.service.fetch_articles, query, page)
        except ApiError as e:
            logger.warning(f"Fetch failed q={query!r} page={page}: {e}")
            await self._publish_error(generation, e.message)
            return
        except Exception as e:
            logger.error(f"Unexpected fetch error q={query!r} page={page}: {e}", exc_info=True)
            await self._publish_error(generation, str(e) or type(e).__name__)
            return

        if generation != self._generation:
            logger.debug(f"Dropping stale page {page} for q={query!r}")
            return

        self.page += 1
        if replace:
            self._accumulated = list(response.articles)
        else:
            self._accumulated.extend(response.articles)

        await self._publish(
            Resource.success(
                NewsResponse(
                    status=response.status,
                    total_results=response.total_results,
                    articles=list(self._accumulated),
                )
            )
        )
