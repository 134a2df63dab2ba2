from fastapi import APIRouter
from blog.api.endpoints import (
    posts,
    site,
    tags,
    users,
)

api_router = APIRouter()

# public
api_router.include_router(posts.router, prefix="/posts", tags=["posts"])
api_router.include_router(tags.router, prefix="/tags", tags=["tags"])
api_router.include_router(site.router, prefix="/site", tags=["site"])
api_router.include_router(users.router, prefix="/user", tags=["user"])

# admin, bearer token required
api_router.include_router(posts.admin_router, prefix="/admin/posts", tags=["admin"])
api_router.include_router(tags.admin_router, prefix="/admin/tags", tags=["admin"])
api_router.include_router(site.admin_router, prefix="/admin/site", tags=["admin"])
api_router.include_router(users.admin_router, prefix="/admin/user", tags=["admin"])
