"""Post-tag link store.

``post_tag`` rows carry no data beyond the two ids; they are created and
removed in batches keyed by post id and never updated in place.
"""

from typing import Iterable, NamedTuple

from sqlalchemy import delete, insert, select
from sqlalchemy.orm import Session

from blog.models.post_tag import PostTag
from blog.models.tag import Tag


class TagLink(NamedTuple):
    post_id: int
    tag_id: int
    tag_name: str


class PostTagRepository:
    """Access to the post_tag association table."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def replace_links(self, post_id: int, tag_ids: Iterable[int] | None) -> None:
        """Make ``tag_ids`` the exact tag set of ``post_id``.

        Existing links are removed first, then one row is inserted per unique
        id. ``None`` or an empty list leaves the post without tags.
        """
        self.delete_by_post(post_id)

        # dict keeps first-seen order while dropping caller-supplied duplicates
        unique_ids = list(dict.fromkeys(tag_ids or []))
        if not unique_ids:
            return

        self.session.execute(
            insert(PostTag),
            [{"post_id": post_id, "tag_id": tag_id} for tag_id in unique_ids],
        )
        self.session.flush()

    def delete_by_post(self, post_id: int) -> int:
        """Remove every link of a post, returning how many rows went away."""
        result = self.session.execute(
            delete(PostTag)
            .where(PostTag.post_id == post_id)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount

    def count_by_tag(self, tag_id: int) -> int:
        return self.session.query(PostTag).filter(PostTag.tag_id == tag_id).count()

    def links_for_posts(self, post_ids: Iterable[int]) -> list[TagLink]:
        """Batch lookup of (post_id, tag_id, tag_name) for many posts in one query."""
        post_ids = list(post_ids)
        if not post_ids:
            return []

        rows = self.session.execute(
            select(PostTag.post_id, Tag.id, Tag.name)
            .join(Tag, Tag.id == PostTag.tag_id)
            .where(PostTag.post_id.in_(post_ids))
            .order_by(PostTag.post_id, Tag.id)
        ).all()
        return [TagLink(post_id, tag_id, tag_name) for post_id, tag_id, tag_name in rows]
