"""Post orchestration: create, update, delete and query workflows.

Writes that belong to one call (post row, tag links, slug release) run in a
single transaction; domain failures are raised before the first write.
"""

from collections import defaultdict
from datetime import datetime, UTC
import logging
import time
from typing import Iterable, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from blog.core.config import UNLIMITED_PAGE_SIZE
from blog.core.errors import BadRequestError, ConflictError, NotFoundError
from blog.db.database import transaction
from blog.models.post import Post, PostStatus
from blog.models.tag import Tag
from blog.repositories.post import PostFilter, PostRepository
from blog.repositories.post_tag import PostTagRepository
from blog.schemas.page import PageResult
from blog.schemas.post import (
    ArchiveYear,
    PostArchiveQuery,
    PostCreate,
    PostDetailResponse,
    PostNavResponse,
    PostQuery,
    PostSimpleResponse,
    PostUpdate,
)
from blog.schemas.tag import TagResponse
from blog.services.archive import build_archive
from blog.utils.read_time import estimate_minutes

logger = logging.getLogger(__name__)

SLUG_MAX_LENGTH = 255


class PostService:
    def __init__(self, session: Session, posts: PostRepository, links: PostTagRepository) -> None:
        self.session = session
        self.posts = posts
        self.links = links

    # -- writes ---------------------------------------------------------

    def create_post(self, post_in: PostCreate) -> PostDetailResponse:
        """Create a post and link it to existing tags."""
        self._check_slug_unique(post_in.slug)
        self._validate_tag_ids(post_in.tag_ids)

        try:
            with transaction(self.session):
                post = self.posts.add(
                    Post(
                        title=post_in.title,
                        slug=post_in.slug,
                        summary=post_in.summary,
                        content=post_in.content,
                        cover_image=post_in.cover_image,
                        is_pinned=post_in.is_pinned,
                        status=int(post_in.status),
                        read_time=estimate_minutes(post_in.content),
                    )
                )
                self.links.replace_links(post.id, post_in.tag_ids)
        except IntegrityError as exc:
            # a concurrent writer took the slug after the check above
            raise self._slug_taken(post_in.slug) from exc

        logger.info(f"Post created: id={post.id}, slug={post.slug!r}")
        return self._build_detail(post)

    def update_post_by_id(self, post_id: int, post_in: PostUpdate) -> PostDetailResponse:
        """Update the provided fields of a post and replace its tag set.

        Fields left out of ``post_in`` keep their value; the tag set is always
        replaced, so an absent ``tag_ids`` removes every tag.
        """
        post = self._get(post_id)
        if post_in.slug is not None:
            self._check_slug_unique(post_in.slug, exclude_post_id=post_id)
        self._validate_tag_ids(post_in.tag_ids)

        try:
            with transaction(self.session):
                changes = post_in.model_dump(exclude_unset=True, exclude_none=True, exclude={"tag_ids"})
                for field, value in changes.items():
                    setattr(post, field, int(value) if field == "status" else value)
                post.read_time = estimate_minutes(post.content)
                post.update_time = datetime.now(UTC)
                self.session.flush()
                self.links.replace_links(post.id, post_in.tag_ids)
        except IntegrityError as exc:
            raise self._slug_taken(post_in.slug) from exc

        logger.info(f"Post updated: id={post_id}")
        return self._build_detail(post)

    def delete_post_by_id(self, post_id: int) -> None:
        """Soft-delete a post after dropping its links and releasing its slug."""
        post = self._get(post_id)

        with transaction(self.session):
            self.links.delete_by_post(post_id)
            post.slug = self._released_slug(post.slug)
            self.session.flush()
            post.is_deleted = True

        logger.info(f"Post deleted: id={post_id}")

    # -- reads ----------------------------------------------------------

    def get_post_by_id(self, post_id: int) -> PostDetailResponse:
        """Admin lookup: drafts included, views untouched."""
        return self._build_detail(self._get(post_id))

    def get_post_by_slug(self, slug: str) -> PostDetailResponse:
        """Public lookup: drafts are invisible, every read counts one view."""
        post = self.posts.find_by_slug(slug)
        if post is None or post.status != PostStatus.PUBLISHED:
            raise NotFoundError("Post not found or not published")

        self.posts.increment_views(post.id)
        self.session.commit()
        self.session.refresh(post)
        return self._build_detail(post)

    def get_page(
        self,
        filters: PostFilter,
        page_num: int = 1,
        page_size: int = 10,
    ) -> PageResult[PostSimpleResponse]:
        """Filtered page of posts with their tags resolved in one batch."""
        posts, total = self.posts.find_page(filters, page_num, page_size)
        tags_by_post = self._tags_by_post(post.id for post in posts)

        records = []
        for post in posts:
            record = PostSimpleResponse.model_validate(post)
            record.tags = tags_by_post.get(post.id, [])
            records.append(record)

        return PageResult[PostSimpleResponse](
            records=records,
            total=total,
            page_size=page_size,
            current_page=page_num,
        )

    def get_admin_page(self, query: PostQuery) -> PageResult[PostSimpleResponse]:
        filters = PostFilter(
            keyword=query.keyword,
            tag_id=query.tag_id,
            status=query.status,
            ignore_pinned=query.ignore_pinned,
        )
        return self.get_page(filters, query.page_num, query.page_size)

    def get_public_page(self, query: PostQuery) -> PageResult[PostSimpleResponse]:
        # public listings only ever show published posts, pinned first
        filters = PostFilter(
            keyword=query.keyword,
            tag_id=query.tag_id,
            status=PostStatus.PUBLISHED,
            ignore_pinned=False,
        )
        return self.get_page(filters, query.page_num, query.page_size)

    def get_archive(self, query: PostArchiveQuery) -> list[ArchiveYear]:
        filters = PostFilter(keyword=query.keyword, tag_id=query.tag_id, status=PostStatus.PUBLISHED)
        page = self.get_page(filters, page_size=UNLIMITED_PAGE_SIZE)
        return build_archive(page.records)

    # -- helpers --------------------------------------------------------

    def _get(self, post_id: int) -> Post:
        post = self.posts.find_by_id(post_id)
        if post is None:
            raise NotFoundError("Post not found")
        return post

    def _check_slug_unique(self, slug: str, exclude_post_id: Optional[int] = None) -> None:
        if self.posts.exists_by_slug(slug, exclude_post_id):
            raise self._slug_taken(slug)

    @staticmethod
    def _slug_taken(slug: Optional[str]) -> ConflictError:
        logger.warning(f"Slug already taken: {slug!r}")
        return ConflictError("Slug already in use")

    def _validate_tag_ids(self, tag_ids: Optional[list[int]]) -> None:
        """Fail unless every referenced tag exists; duplicates are tolerated."""
        if not tag_ids:
            return

        distinct_ids = set(tag_ids)
        found = self.session.query(Tag).filter(Tag.id.in_(distinct_ids)).count()
        if found != len(distinct_ids):
            raise BadRequestError("Post contains nonexistent tags")

    @staticmethod
    def _released_slug(slug: str) -> str:
        suffix = f"_del_{int(time.time() * 1000)}"
        return slug[:SLUG_MAX_LENGTH - len(suffix)] + suffix

    def _tags_by_post(self, post_ids: Iterable[int]) -> dict[int, list[TagResponse]]:
        tags_by_post = defaultdict(list)
        for link in self.links.links_for_posts(post_ids):
            tags_by_post[link.post_id].append(TagResponse(id=link.tag_id, name=link.tag_name))
        return tags_by_post

    def _nav(self, post: Post, previous: bool) -> Optional[PostNavResponse]:
        neighbour = self.posts.find_adjacent(post.create_time, previous=previous)
        return PostNavResponse.model_validate(neighbour) if neighbour else None

    def _build_detail(self, post: Post) -> PostDetailResponse:
        detail = PostDetailResponse.model_validate(post)
        detail.tags = self._tags_by_post([post.id]).get(post.id, [])

        # navigation only makes sense among published posts
        if post.status == PostStatus.PUBLISHED:
            detail.previous = self._nav(post, previous=True)
            detail.next = self._nav(post, previous=False)
        return detail
