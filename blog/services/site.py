"""Site setup and statistics."""

import logging

from sqlalchemy.orm import Session

from blog.core.errors import BadRequestError, InternalError
from blog.core.security import get_password_hash
from blog.models.post import PostStatus
from blog.models.tag import Tag
from blog.models.user import User
from blog.repositories.post import PostRepository
from blog.schemas.site import OwnerInfo, SiteInfoResponse, SiteStats
from blog.schemas.user import UserSetup
from blog.services.tag import TagService

logger = logging.getLogger(__name__)


class SiteService:
    def __init__(self, session: Session, posts: PostRepository, tags: TagService) -> None:
        self.session = session
        self.posts = posts
        self.tags = tags

    def is_initialized(self) -> bool:
        return self.session.query(User).filter(User.is_owner.is_(True), User.is_deleted.is_(False)).count() > 0

    def setup_owner(self, setup: UserSetup) -> User:
        """Create the single site owner; only allowed once."""
        if self.is_initialized():
            raise BadRequestError("Site is already initialized")

        owner = User(
            username=setup.username,
            password=get_password_hash(setup.password),
            nickname=setup.nickname,
            avatar=setup.avatar,
            description=setup.description,
            email=setup.email,
            is_owner=True,
            is_deleted=False,
        )
        self.session.add(owner)
        self.session.commit()
        self.session.refresh(owner)
        logger.info(f"Site owner created: username={owner.username!r}")
        return owner

    def get_admin_site_info(self) -> SiteInfoResponse:
        owner = (
            self.session.query(User)
            .filter(User.is_owner.is_(True), User.is_deleted.is_(False))
            .first()
        )
        if owner is None:
            raise InternalError("Site owner is missing")

        public_tags = self.tags.list_with_usage_counts(published_only=True)
        used_tag_count = sum(1 for tag in public_tags.records if tag.post_count > 0)
        total_tag_count = self.session.query(Tag).count()

        return SiteInfoResponse(
            owner=OwnerInfo(
                nickname=owner.nickname,
                avatar=owner.avatar,
                description=owner.description,
                created_at=owner.create_time,
            ),
            stats=SiteStats(
                published_post_count=self.posts.count_by_status(PostStatus.PUBLISHED),
                draft_post_count=self.posts.count_by_status(PostStatus.DRAFT),
                used_tag_count=used_tag_count,
                unused_tag_count=total_tag_count - used_tag_count,
            ),
        )

    def get_public_site_info(self) -> SiteInfoResponse:
        """Same owner info; counts that reveal unpublished content are zeroed."""
        info = self.get_admin_site_info()
        info.stats.draft_post_count = 0
        info.stats.unused_tag_count = 0
        return info
