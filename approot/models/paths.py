"""Pydantic models for path listings returned by the API."""

from pydantic import BaseModel, Field
from typing import Dict


class PathsResponse(BaseModel):
    """Every resolved category; custom override categories ride along as extras."""
    root: str
    config: str
    resources: str
    views: str
    assets: str
    cache: str
    logs: str
    public: str
    database: str
    migrations: str
    storage: str
    tests: str

    model_config = {"extra": "allow"}


class SummaryResponse(BaseModel):
    """The handful of locations shown on the landing route."""
    root: str
    config: str
    views: str
    public: str


class DiscoveryResponse(BaseModel):
    """Result of running auto-discovery against the configured root."""
    root_path: str = Field(..., alias="rootPath")
    discovered_paths: Dict[str, str] = Field(
        default_factory=dict, alias="discoveredPaths"
    )

    model_config = {"populate_by_name": True}
