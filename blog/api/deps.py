"""FastAPI dependencies that build services from the request's session."""

from fastapi import Depends
from sqlalchemy.orm import Session

from blog.db.database import get_session
from blog.repositories.post import PostRepository
from blog.repositories.post_tag import PostTagRepository
from blog.services.post import PostService
from blog.services.site import SiteService
from blog.services.tag import TagService


def get_tag_service(session: Session = Depends(get_session)) -> TagService:
    return TagService(session, PostTagRepository(session))


def get_post_service(session: Session = Depends(get_session)) -> PostService:
    return PostService(session, PostRepository(session), PostTagRepository(session))


def get_site_service(
    session: Session = Depends(get_session),
    tags: TagService = Depends(get_tag_service),
) -> SiteService:
    return SiteService(session, PostRepository(session), tags)
