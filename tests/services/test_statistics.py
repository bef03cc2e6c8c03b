"""Tests for app/services/statistics.py aggregation helpers."""

from uuid import uuid4

import pytest

from app.models import BlogDB
from app.services.statistics import (
    dummy,
    favorite_blog,
    most_blogs,
    most_likes,
    summarize,
    total_likes,
)

BLOGS = [
    {"title": "React patterns", "author": "Michael Chan", "likes": 7},
    {"title": "Go To Statement Considered Harmful", "author": "Edsger W. Dijkstra", "likes": 5},
    {"title": "Canonical string reduction", "author": "Edsger W. Dijkstra", "likes": 12},
    {"title": "First class tests", "author": "Robert C. Martin", "likes": 10},
    {"title": "TDD harms architecture", "author": "Robert C. Martin", "likes": 0},
    {"title": "Type wars", "author": "Robert C. Martin", "likes": 2},
]


class TestDummy:
    def test_returns_one(self) -> None:
        assert dummy([]) == 1
        assert dummy(BLOGS) == 1


class TestTotalLikes:
    """Tests for total_likes."""

    def test_empty_list_is_zero(self) -> None:
        assert total_likes([]) == 0

    def test_single_blog_equals_its_likes(self) -> None:
        assert total_likes(BLOGS[:1]) == 7

    def test_bigger_list(self) -> None:
        assert total_likes(BLOGS) == 36

    def test_missing_likes_count_as_zero(self) -> None:
        assert total_likes([{"title": "a"}, {"title": "b", "likes": None}, {"likes": 3}]) == 3


class TestFavoriteBlog:
    """Tests for favorite_blog."""

    def test_empty_list_is_none(self) -> None:
        assert favorite_blog([]) is None

    def test_picks_most_liked(self) -> None:
        assert favorite_blog(BLOGS) == BLOGS[2]

    def test_tie_resolves_to_first(self) -> None:
        blogs = [{"title": "a", "likes": 4}, {"title": "b", "likes": 4}]
        assert favorite_blog(blogs)["title"] == "a"

    def test_all_zero_likes_returns_first(self) -> None:
        blogs = [{"title": "a"}, {"title": "b"}]
        assert favorite_blog(blogs)["title"] == "a"


class TestMostBlogs:
    """Tests for most_blogs."""

    def test_empty_list_is_none(self) -> None:
        assert most_blogs([]) is None

    def test_author_with_most_blogs(self) -> None:
        result = most_blogs(BLOGS)
        assert result is not None
        assert result.model_dump() == {"author": "Robert C. Martin", "blogs": 3}

    def test_tie_resolves_to_first_encountered(self) -> None:
        blogs = [{"author": "B"}, {"author": "A"}, {"author": "A"}, {"author": "B"}]
        assert most_blogs(blogs).author == "B"


class TestMostLikes:
    """Tests for most_likes."""

    def test_empty_list_is_none(self) -> None:
        assert most_likes([]) is None

    def test_author_with_most_likes(self) -> None:
        result = most_likes(BLOGS)
        assert result is not None
        assert result.model_dump() == {"author": "Edsger W. Dijkstra", "likes": 17}

    def test_tie_resolves_to_first_encountered(self) -> None:
        blogs = [{"author": "B", "likes": 3}, {"author": "A", "likes": 3}]
        assert most_likes(blogs).author == "B"


class TestSmallCollection:
    """Every aggregate over a three-blog collection."""

    BLOGS = [
        {"title": "one", "author": "A", "likes": 5},
        {"title": "two", "author": "B", "likes": 10},
        {"title": "three", "author": "A", "likes": 3},
    ]

    def test_aggregates(self) -> None:
        assert total_likes(self.BLOGS) == 18
        assert favorite_blog(self.BLOGS)["title"] == "two"
        assert most_blogs(self.BLOGS).model_dump() == {"author": "A", "blogs": 2}
        assert most_likes(self.BLOGS).model_dump() == {"author": "A", "likes": 8}

    def test_inputs_are_not_mutated(self) -> None:
        snapshot = [dict(b) for b in self.BLOGS]
        for aggregate in (total_likes, favorite_blog, most_blogs, most_likes):
            aggregate(self.BLOGS)
        assert snapshot == self.BLOGS

    def test_missing_author_groups_under_none(self) -> None:
        blogs = [{"likes": 1}, {"likes": 2}, {"author": "A", "likes": 2}]
        assert most_blogs(blogs).author is None
        assert most_likes(blogs).model_dump() == {"author": None, "likes": 3}


class TestSummarize:
    """Tests for summarize over ORM rows."""

    @pytest.fixture
    def rows(self) -> list[BlogDB]:
        owner = uuid4()
        return [
            BlogDB(user_id=owner, title=b["title"], url="https://x.test", author=b["author"], likes=b["likes"])
            for b in BLOGS
        ]

    def test_full_report(self, rows: list[BlogDB]) -> None:
        report = summarize(rows)

        assert report.total_blogs == 6
        assert report.total_likes == 36
        assert report.favorite_blog is not None
        assert report.favorite_blog.title == "Canonical string reduction"
        assert report.most_blogs.author == "Robert C. Martin"
        assert report.most_likes.likes == 17

    def test_empty_report(self) -> None:
        report = summarize([])

        assert report.total_blogs == 0
        assert report.total_likes == 0
        assert report.favorite_blog is None
        assert report.most_blogs is None
        assert report.most_likes is None

    def test_serializes_with_camel_case(self, rows: list[BlogDB]) -> None:
        dumped = summarize(rows).model_dump(by_alias=True)
        assert {"totalBlogs", "totalLikes", "favoriteBlog", "mostBlogs", "mostLikes"} <= dumped.keys()
