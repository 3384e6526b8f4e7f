"""
Lunch routes.

Endpoints for getting today's lunch as a Mattermost command response
and listing the supported buildings.
"""

import logging
from typing import Iterator, List

from fastapi import APIRouter, Depends, HTTPException, Path
from pydantic import BaseModel

from ..services.buildings import Building, UnknownBuildingError, list_buildings, resolve
from ..services.lunch_client import FetchError, LunchClient
from ..services.mattermost import MattermostCommandResponse, ResponseType
from ..services.menu_extractor import ExtractionError


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["lunch"])


class BuildingInfo(BaseModel):
    """A supported building and its menu page."""
    name: str
    path: str
    url: str


def get_lunch_client() -> Iterator[LunchClient]:
    """
    Dependency providing a LunchClient for the duration of one request.

    Tests replace it through app.dependency_overrides.
    """
    client = LunchClient()
    try:
        yield client
    finally:
        client.close()


@router.get("/buildings", response_model=List[BuildingInfo])
def get_buildings():
    """
    List the buildings that have a lunch menu.

    Returns:
        Building names accepted by the lunch endpoint, with their menu page URLs
    """
    return [
        BuildingInfo(name=b.name.lower(), path=b.value, url=resolve(b))
        for b in list_buildings()
    ]


@router.get("/{building}/lunch", response_model=MattermostCommandResponse)
def get_lunch(
    building: str = Path(
        ...,
        description="The building for which to get lunch (case-insensitive)",
        examples=["aastvej"],
    ),
    response_type: ResponseType = ResponseType.IN_CHANNEL,
    client: LunchClient = Depends(get_lunch_client),
):
    """
    Get today's lunch for the specified building.

    Args:
        building: Building name, e.g. aastvej or KIRKBI
        response_type: Mattermost visibility of the response

    Returns:
        Mattermost slash command response with the menu as markdown

    Raises:
        HTTPException: 404 for an unknown building, 500 if the menu
            could not be fetched or read
    """
    try:
        parsed = Building.parse(building)
    except UnknownBuildingError as e:
        raise HTTPException(status_code=404, detail=str(e))

    try:
        markdown = client.get_lunch(parsed)
    except (FetchError, ExtractionError) as e:
        logger.error(f"Could not get lunch for {parsed.name.lower()}: {e}")
        raise HTTPException(status_code=500)

    return MattermostCommandResponse.for_type(markdown, response_type)
