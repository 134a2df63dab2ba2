from typing import Annotated, List
from fastapi import APIRouter, Depends, Query, Response, status
from blog.api.deps import get_tag_service
from blog.core.security import get_current_user
from blog.schemas.page import PageResult
from blog.schemas.tag import TagCreate, TagPostCountResponse, TagQuery, TagResponse, TagUpdate
from blog.services.tag import TagService

router = APIRouter()
admin_router = APIRouter(dependencies=[Depends(get_current_user)])

@admin_router.post("", response_model=TagResponse, status_code=status.HTTP_201_CREATED, summary="Create a new tag")
def create_tag(
    tag: TagCreate,
    service: TagService = Depends(get_tag_service)
):
    """Create a new tag"""
    return service.create_tag(tag.name)

@admin_router.get("", response_model=PageResult[TagPostCountResponse], summary="List tags with post counts")
def list_admin_tags(
    query: Annotated[TagQuery, Query()],
    service: TagService = Depends(get_tag_service)
):
    """List tags with the number of posts (drafts included) using each"""
    return service.list_with_usage_counts(
        published_only=False,
        keyword=query.keyword,
        page_num=query.page_num,
        page_size=query.page_size,
    )

@admin_router.put("/{tag_id}", response_model=TagResponse, summary="Rename a tag")
def update_tag(
    tag_id: int,
    tag_update: TagUpdate,
    service: TagService = Depends(get_tag_service)
):
    """Rename a tag"""
    return service.rename_tag(tag_id, tag_update.name)

@admin_router.delete("/{tag_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a tag")
def delete_tag(
    tag_id: int,
    service: TagService = Depends(get_tag_service)
):
    """Delete a tag that no post uses"""
    service.delete_tag(tag_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.get("", response_model=List[TagPostCountResponse], summary="List all tags")
def list_tags(
    service: TagService = Depends(get_tag_service)
):
    """List all tags with the number of published posts using each"""
    return service.list_with_usage_counts(published_only=True).records
