"""API routes exposing the resolved directory layout."""

from fastapi import APIRouter, Depends

from approot.models.paths import DiscoveryResponse, PathsResponse, SummaryResponse
from approot.services.discovery_service.discoverer import PathDiscoverer
from approot.services.registry_service.main import PathServices as ps
from approot.services.registry_service.paths import Paths
from approot.utility.logger import AppLogger

router = APIRouter(tags=["Paths"])
logger = AppLogger.get_logger(__name__)


@router.get("/", response_model=SummaryResponse)
def summary(paths: Paths = Depends(ps.get_paths)) -> SummaryResponse:
    """Return the locations most callers care about."""
    return SummaryResponse(
        root=paths.get_root_path(),
        config=paths.get_config_path(),
        views=paths.get_views_path(),
        public=paths.get_public_path(),
    )


@router.get("/paths", response_model=PathsResponse)
def all_paths(paths: Paths = Depends(ps.get_paths)) -> PathsResponse:
    """Return every resolved category, custom overrides included."""
    return paths.to_model()


@router.get("/discovery", response_model=DiscoveryResponse)
def discovery(
    paths: Paths = Depends(ps.get_paths),
    discoverer: PathDiscoverer = Depends(ps.get_discoverer),
) -> DiscoveryResponse:
    """Run auto-discovery against the configured root and report what it finds."""
    root_path = paths.get_root_path()
    discovered = discoverer.discover(root_path)
    logger.info("Discovery found %d path(s) under %s", len(discovered), root_path)
    return DiscoveryResponse(root_path=root_path, discovered_paths=discovered)
