from typing import Annotated, List
from fastapi import APIRouter, Depends, Query, Response, status
from blog.api.deps import get_post_service
from blog.core.security import get_current_user
from blog.schemas.page import PageResult
from blog.schemas.post import (
    ArchiveYear,
    PostArchiveQuery,
    PostCreate,
    PostDetailResponse,
    PostQuery,
    PostSimpleResponse,
    PostUpdate,
)
from blog.services.post import PostService

router = APIRouter()
admin_router = APIRouter(dependencies=[Depends(get_current_user)])

@admin_router.post("", response_model=PostDetailResponse, status_code=status.HTTP_201_CREATED, summary="Create a new post")
def create_post(
    post: PostCreate,
    service: PostService = Depends(get_post_service)
):
    """Create a post; every tag id must refer to an existing tag"""
    return service.create_post(post)

@admin_router.get("", response_model=PageResult[PostSimpleResponse], summary="List posts for the admin console")
def list_admin_posts(
    query: Annotated[PostQuery, Query()],
    service: PostService = Depends(get_post_service)
):
    """List posts of any status, optionally ignoring pinned ordering"""
    return service.get_admin_page(query)

@admin_router.get("/{post_id}", response_model=PostDetailResponse, summary="Get a post by id")
def get_post(
    post_id: int,
    service: PostService = Depends(get_post_service)
):
    """Get a post by id, drafts included; does not count a view"""
    return service.get_post_by_id(post_id)

@admin_router.put("/{post_id}", response_model=PostDetailResponse, summary="Update a post, including its tags")
def update_post(
    post_id: int,
    post_update: PostUpdate,
    service: PostService = Depends(get_post_service)
):
    """Update a post"""
    return service.update_post_by_id(post_id, post_update)

@admin_router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a post")
def delete_post(
    post_id: int,
    service: PostService = Depends(get_post_service)
):
    """Delete a post and its tag links"""
    service.delete_post_by_id(post_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.get("", response_model=PageResult[PostSimpleResponse], summary="List published posts")
def list_posts(
    query: Annotated[PostQuery, Query()],
    service: PostService = Depends(get_post_service)
):
    """List published posts, pinned first"""
    return service.get_public_page(query)

@router.get("/archive", response_model=List[ArchiveYear], summary="Published posts grouped by year and month")
def get_archive(
    query: Annotated[PostArchiveQuery, Query()],
    service: PostService = Depends(get_post_service)
):
    """Archive of published posts, newest first"""
    return service.get_archive(query)

@router.get("/{slug}", response_model=PostDetailResponse, summary="Read a published post")
def get_post_by_slug(
    slug: str,
    service: PostService = Depends(get_post_service)
):
    """Read a published post by slug; counts one view"""
    return service.get_post_by_slug(slug)
