"""Tag registry: uniquely named tags and their usage counts."""

import logging
from typing import Optional

from sqlalchemy import and_, func
from sqlalchemy.orm import Session

from blog.core.config import UNLIMITED_PAGE_SIZE
from blog.core.errors import ConflictError, ForbiddenError, NotFoundError
from blog.models.post import Post, PostStatus
from blog.models.post_tag import PostTag
from blog.models.tag import Tag
from blog.repositories.post_tag import PostTagRepository
from blog.schemas.page import PageResult
from blog.schemas.tag import TagPostCountResponse, TagResponse

logger = logging.getLogger(__name__)


class TagService:
    def __init__(self, session: Session, links: PostTagRepository) -> None:
        self.session = session
        self.links = links

    def _get(self, tag_id: int) -> Tag:
        tag = self.session.get(Tag, tag_id)
        if tag is None:
            raise NotFoundError("Tag not found")
        return tag

    def _name_taken(self, name: str, exclude_tag_id: Optional[int] = None) -> bool:
        query = self.session.query(Tag).filter(Tag.name == name)
        if exclude_tag_id is not None:
            query = query.filter(Tag.id != exclude_tag_id)
        return self.session.query(query.exists()).scalar()

    def create_tag(self, name: str) -> TagResponse:
        """Create a tag; the exact (case-sensitive) name must be free."""
        if self._name_taken(name):
            raise ConflictError("Tag name already exists")

        tag = Tag(name=name)
        self.session.add(tag)
        self.session.commit()
        self.session.refresh(tag)
        logger.info(f"Tag created: id={tag.id}, name={tag.name!r}")
        return TagResponse.model_validate(tag)

    def rename_tag(self, tag_id: int, name: str) -> TagResponse:
        tag = self._get(tag_id)
        if self._name_taken(name, exclude_tag_id=tag_id):
            raise ConflictError("Tag name already exists")

        tag.name = name
        self.session.commit()
        self.session.refresh(tag)
        logger.info(f"Tag renamed: id={tag.id}, name={tag.name!r}")
        return TagResponse.model_validate(tag)

    def delete_tag(self, tag_id: int) -> None:
        """Delete a tag that no post references."""
        tag = self._get(tag_id)

        post_count = self.links.count_by_tag(tag_id)
        if post_count > 0:
            logger.warning(f"Refused to delete tag {tag.name!r}: used by {post_count} post(s)")
            raise ForbiddenError(f"Cannot delete tag '{tag.name}': {post_count} post(s) are using it")

        self.session.delete(tag)
        self.session.commit()
        logger.info(f"Tag deleted: id={tag_id}")

    def list_with_usage_counts(
        self,
        published_only: bool,
        keyword: Optional[str] = None,
        page_num: int = 1,
        page_size: int = UNLIMITED_PAGE_SIZE,
    ) -> PageResult[TagPostCountResponse]:
        """Tags with the number of live posts using them.

        The public listing counts published posts only, the admin listing
        counts drafts too; nothing else differs between them.
        """
        post_join = and_(Post.id == PostTag.post_id, Post.is_deleted.is_(False))
        if published_only:
            post_join = and_(post_join, Post.status == PostStatus.PUBLISHED)

        post_count = func.count(Post.id).label("post_count")
        query = (
            self.session.query(Tag, post_count)
            .outerjoin(PostTag, PostTag.tag_id == Tag.id)
            .outerjoin(Post, post_join)
            .group_by(Tag.id)
            .order_by(post_count.desc(), Tag.id.asc())
        )

        tags = self.session.query(Tag)
        if keyword:
            query = query.filter(Tag.name.contains(keyword, autoescape=True))
            tags = tags.filter(Tag.name.contains(keyword, autoescape=True))

        if page_size == UNLIMITED_PAGE_SIZE:
            rows = query.all()
            total = len(rows)
        else:
            total = tags.count()
            rows = query.offset((page_num - 1) * page_size).limit(page_size).all()

        return PageResult[TagPostCountResponse](
            records=[
                TagPostCountResponse(id=tag.id, name=tag.name, post_count=count, create_time=tag.create_time)
                for tag, count in rows
            ],
            total=total,
            page_size=page_size,
            current_page=page_num,
        )
