from fastapi import APIRouter, Depends, status
from blog.api.deps import get_site_service
from blog.core.security import get_current_user
from blog.schemas.site import SiteInfoResponse
from blog.schemas.user import UserResponse, UserSetup
from blog.services.site import SiteService

router = APIRouter()
admin_router = APIRouter(dependencies=[Depends(get_current_user)])

@router.get("/initialized", response_model=bool, summary="Whether the site owner has been set up")
def is_initialized(
    service: SiteService = Depends(get_site_service)
):
    return service.is_initialized()

@router.post("/setup", response_model=UserResponse, status_code=status.HTTP_201_CREATED, summary="Create the site owner")
def setup(
    setup_in: UserSetup,
    service: SiteService = Depends(get_site_service)
):
    """Create the site owner; only available before the site is initialized"""
    return service.setup_owner(setup_in)

@router.get("/info", response_model=SiteInfoResponse, summary="Public site information")
def get_public_site_info(
    service: SiteService = Depends(get_site_service)
):
    return service.get_public_site_info()

@admin_router.get("/info", response_model=SiteInfoResponse, summary="Site information for the admin console")
def get_admin_site_info(
    service: SiteService = Depends(get_site_service)
):
    return service.get_admin_site_info()
