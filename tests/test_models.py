"""Tests for article and resource models."""

from datetime import datetime, timezone

from newsreel.models.articles import Article, ArticleSource, NewsResponse, parse_published_at
from newsreel.models.resource import Resource, ResourceStatus

API_ARTICLE = {
    "source": {"id": "bbc-news", "name": "BBC News"},
    "author": "Alex Smith",
    "title": "Markets rally on rate news",
    "description": "Stocks rose sharply.",
    "url": "https://bbc.example/markets",
    "urlToImage": "https://bbc.example/markets.jpg",
    "publishedAt": "2026-10-18T09:30:00Z",
    "content": "Stocks rose sharply on Monday...",
}


class TestParsePublishedAt:
    def test_trailing_z_is_utc(self):
        assert parse_published_at("2026-10-18T09:30:00Z") == datetime(
            2026, 10, 18, 9, 30, tzinfo=timezone.utc
        )

    def test_missing_value(self):
        assert parse_published_at(None) is None
        assert parse_published_at("") is None

    def test_garbage_value(self):
        assert parse_published_at("yesterday") is None


class TestArticle:
    def test_from_dict_maps_camel_case_fields(self):
        article = Article.from_dict(API_ARTICLE)
        assert article.title == "Markets rally on rate news"
        assert article.source == ArticleSource(id="bbc-news", name="BBC News")
        assert article.url_to_image == "https://bbc.example/markets.jpg"
        assert article.published_at.year == 2026
        assert article.key == "https://bbc.example/markets"

    def test_from_dict_tolerates_missing_fields(self):
        article = Article.from_dict({"title": "Bare", "url": "https://x.example"})
        assert article.author is None
        assert article.description is None
        assert article.published_at is None
        assert article.source.name == "Unknown"

    def test_string_source_becomes_name(self):
        article = Article.from_dict(dict(API_ARTICLE, source="Reuters"))
        assert article.source == ArticleSource(id=None, name="Reuters")

    def test_unexpected_source_type(self):
        article = Article.from_dict(dict(API_ARTICLE, source=["bbc"]))
        assert article.source.name == "Unknown"

    def test_to_dict_uses_api_field_names(self):
        data = Article.from_dict(API_ARTICLE).to_dict()
        assert data["urlToImage"] == API_ARTICLE["urlToImage"]
        assert data["source"] == {"id": "bbc-news", "name": "BBC News"}
        assert data["publishedAt"].startswith("2026-10-18T09:30:00")


class TestNewsResponse:
    def test_from_dict(self):
        news = NewsResponse.from_dict(
            {"status": "ok", "totalResults": 57, "articles": [API_ARTICLE, API_ARTICLE]}
        )
        assert news.status == "ok"
        assert news.total_results == 57
        assert len(news.articles) == 2

    def test_removed_articles_are_dropped(self):
        removed = dict(API_ARTICLE, title="[Removed]")
        news = NewsResponse.from_dict({"totalResults": 2, "articles": [removed, API_ARTICLE]})
        assert [a.title for a in news.articles] == ["Markets rally on rate news"]

    def test_empty_body(self):
        news = NewsResponse.from_dict({})
        assert news.total_results == 0
        assert news.articles == []

    def test_null_and_non_dict_entries_are_skipped(self):
        news = NewsResponse.from_dict(
            {"totalResults": 3, "articles": [None, "stray", API_ARTICLE]}
        )
        assert [a.url for a in news.articles] == ["https://bbc.example/markets"]

    def test_non_list_articles_field(self):
        news = NewsResponse.from_dict({"totalResults": 1, "articles": {"title": "x"}})
        assert news.articles == []


class TestResource:
    def test_constructors(self):
        assert Resource.loading().status is ResourceStatus.LOADING

        ok = Resource.success([1, 2])
        assert ok.status is ResourceStatus.SUCCESS
        assert ok.data == [1, 2]
        assert ok.message is None

        failed = Resource.error("boom")
        assert failed.status is ResourceStatus.ERROR
        assert failed.message == "boom"
        assert failed.data is None
