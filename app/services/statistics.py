"""
Pure aggregation over blog collections.

Every function accepts any iterable of blog-like records: ORM rows, response
schemas or plain mappings. A missing or ``None`` ``likes`` counts as 0 and a
missing author groups under ``None``. Nothing here touches storage.
"""

from collections import Counter
from collections.abc import Iterable, Mapping
from typing import Any

from app.schemas.blog import AuthorBlogs, AuthorLikes, BlogResponse, BlogStatistics


def _field(blog: Any, name: str) -> Any:
    if isinstance(blog, Mapping):
        return blog.get(name)
    return getattr(blog, name, None)


def _likes(blog: Any) -> int:
    return _field(blog, "likes") or 0


def dummy(blogs: Iterable[Any]) -> int:
    """Return 1 for any input."""
    return 1


def total_likes(blogs: Iterable[Any]) -> int:
    """Sum of likes across ``blogs``; 0 for an empty collection."""
    return sum(_likes(blog) for blog in blogs)


def favorite_blog[BlogT](blogs: Iterable[BlogT]) -> BlogT | None:
    """
    Return the blog with the most likes.

    Ties resolve to the first such blog in iteration order. An empty
    collection yields ``None``.
    """
    favorite: BlogT | None = None
    best = 0
    for blog in blogs:
        likes = _likes(blog)
        if favorite is None or likes > best:
            favorite, best = blog, likes
    return favorite


def most_blogs(blogs: Iterable[Any]) -> AuthorBlogs | None:
    """
    Return the author with the most blogs.

    Ties resolve to the author encountered first.
    """
    counts = Counter(_field(blog, "author") for blog in blogs)
    if not counts:
        return None
    # Counter.most_common keeps first-insertion order among equal counts
    author, count = counts.most_common(1)[0]
    return AuthorBlogs(author=author, blogs=count)


def most_likes(blogs: Iterable[Any]) -> AuthorLikes | None:
    """
    Return the author whose blogs have the greatest summed likes.

    Ties resolve to the author encountered first.
    """
    totals: dict[str | None, int] = {}
    for blog in blogs:
        author = _field(blog, "author")
        totals[author] = totals.get(author, 0) + _likes(blog)
    if not totals:
        return None
    author = max(totals, key=totals.__getitem__)
    return AuthorLikes(author=author, likes=totals[author])


def summarize(blogs: Iterable[Any]) -> BlogStatistics:
    """Compute every aggregate in a single report."""
    items = list(blogs)
    favorite = favorite_blog(items)
    return BlogStatistics(
        total_blogs=len(items),
        total_likes=total_likes(items),
        favorite_blog=BlogResponse.model_validate(favorite, from_attributes=True)
        if favorite is not None
        else None,
        most_blogs=most_blogs(items),
        most_likes=most_likes(items),
    )
