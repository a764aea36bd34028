"""Transient pagination state owned by the news screen."""

from dataclasses import dataclass

from ...config.constants import QUERY_PAGE_SIZE


@dataclass(frozen=True)
class ListWindow:
    """Which slice of the list is on screen."""

    first_visible: int
    visible_count: int
    total_count: int

    @property
    def is_at_last_item(self) -> bool:
        return self.first_visible + self.visible_count >= self.total_count


@dataclass
class PaginationState:
    is_loading: bool = False
    is_last_page: bool = False
    is_scrolling: bool = False
    page_size: int = QUERY_PAGE_SIZE

    def should_paginate(self, window: ListWindow) -> bool:
        """True when the next page should be requested for this scroll position."""
        is_not_loading_and_not_last_page = not self.is_loading and not self.is_last_page
        is_not_at_beginning = window.first_visible >= 0
        is_total_more_than_visible = window.total_count >= self.page_size
        return (
            is_not_loading_and_not_last_page
            and window.is_at_last_item
            and is_not_at_beginning
            and is_total_more_than_visible
            and self.is_scrolling
        )

    def reset(self) -> None:
        self.is_loading = False
        self.is_last_page = False
        self.is_scrolling = False
