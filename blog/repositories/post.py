"""Post repository.

Every query here ignores soft-deleted rows.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from sqlalchemy import update
from sqlalchemy.orm import Query, Session

from blog.core.config import UNLIMITED_PAGE_SIZE
from blog.models.post import Post, PostStatus
from blog.models.post_tag import PostTag


@dataclass
class PostFilter:
    """Filters shared by the admin and public listings."""

    keyword: Optional[str] = None
    tag_id: Optional[int] = None
    status: Optional[int] = None
    ignore_pinned: bool = False


class PostRepository:
    """Read and write access to the post table."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def _live(self) -> Query:
        return self.session.query(Post).filter(Post.is_deleted.is_(False))

    def add(self, post: Post) -> Post:
        self.session.add(post)
        self.session.flush()  # Flush to get the post ID
        return post

    def exists_by_slug(self, slug: str, exclude_post_id: Optional[int] = None) -> bool:
        """Whether a live post other than ``exclude_post_id`` already uses ``slug``."""
        query = self._live().filter(Post.slug == slug)
        if exclude_post_id is not None:
            query = query.filter(Post.id != exclude_post_id)
        return self.session.query(query.exists()).scalar()

    def find_by_id(self, post_id: int) -> Optional[Post]:
        return self._live().filter(Post.id == post_id).first()

    def find_by_slug(self, slug: str) -> Optional[Post]:
        return self._live().filter(Post.slug == slug).first()

    def find_page(self, filters: PostFilter, page_num: int = 1, page_size: int = 10) -> tuple[list[Post], int]:
        """Return one page of posts and the total number of matches.

        A ``page_size`` of ``UNLIMITED_PAGE_SIZE`` returns every match without
        running the count query; the total is then the number of records.
        """
        query = self._live()

        if filters.keyword:
            query = query.filter(Post.title.contains(filters.keyword, autoescape=True))
        if filters.tag_id is not None:
            query = query.join(PostTag, PostTag.post_id == Post.id).filter(PostTag.tag_id == filters.tag_id)
        if filters.status is not None:
            query = query.filter(Post.status == int(filters.status))

        if filters.ignore_pinned:
            query = query.order_by(Post.create_time.desc(), Post.id.desc())
        else:
            query = query.order_by(Post.is_pinned.desc(), Post.create_time.desc(), Post.id.desc())

        if page_size == UNLIMITED_PAGE_SIZE:
            posts = query.all()
            return posts, len(posts)

        total = query.count()
        posts = query.offset((page_num - 1) * page_size).limit(page_size).all()
        return posts, total

    def increment_views(self, post_id: int) -> None:
        """Atomically add one view.

        ``update_time`` is assigned to itself so the column's onupdate hook
        does not fire: a read is not a content change.
        """
        self.session.execute(
            update(Post)
            .where(Post.id == post_id)
            .values(views=Post.views + 1, update_time=Post.update_time)
            .execution_options(synchronize_session=False)
        )

    def find_adjacent(self, create_time: datetime, previous: bool) -> Optional[Post]:
        """Nearest published post created strictly before (previous) or after (next) ``create_time``."""
        query = self._live().filter(Post.status == PostStatus.PUBLISHED)
        if previous:
            query = query.filter(Post.create_time < create_time).order_by(Post.create_time.desc(), Post.id.desc())
        else:
            query = query.filter(Post.create_time > create_time).order_by(Post.create_time.asc(), Post.id.asc())
        return query.first()

    def count_by_status(self, status: int) -> int:
        return self._live().filter(Post.status == int(status)).count()
