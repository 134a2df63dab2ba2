"""Chronological archive: published posts grouped by year, then month."""

from typing import Iterable

from blog.schemas.post import ArchiveMonth, ArchivePost, ArchiveYear, PostSimpleResponse


def build_archive(posts: Iterable[PostSimpleResponse]) -> list[ArchiveYear]:
    """Group posts into years and months, newest first.

    Posts are sorted by creation time descending before grouping, so the
    insertion order of the grouping dicts already gives descending years and
    months. Every group carries a ``total``: the number of posts in a month,
    or the sum of its months for a year.
    """
    ordered = sorted(posts, key=lambda post: post.create_time, reverse=True)

    years: dict[int, dict[int, list[ArchivePost]]] = {}
    for post in ordered:
        created = post.create_time
        months = years.setdefault(created.year, {})
        months.setdefault(created.month, []).append(
            ArchivePost(
                id=post.id,
                title=post.title,
                slug=post.slug,
                tags=post.tags,
                create_time=post.create_time,
            )
        )

    archive = []
    for year, months in years.items():
        month_groups = [
            ArchiveMonth(month=month, total=len(month_posts), posts=month_posts)
            for month, month_posts in months.items()
        ]
        archive.append(
            ArchiveYear(
                year=year,
                total=sum(group.total for group in month_groups),
                months=month_groups,
            )
        )
    return archive
