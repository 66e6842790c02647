"""Wine catalogue search endpoint."""

import logging
import re
from typing import Annotated

from fastapi import APIRouter, Query, status
from fastapi.responses import JSONResponse
from pymongo.errors import OperationFailure, PyMongoError

from pourfolio.models import WineReference
from pourfolio.schemas.reference import WineSearchResponse, WineSearchResult

logger = logging.getLogger(__name__)

router = APIRouter()

MIN_QUERY_LENGTH = 2
MAX_RESULTS = 20
SEARCH_ERROR = "Failed to search wines"


async def text_search(query: str) -> list[WineReference]:
    """Ranked search through the catalogue text index."""
    return await WineReference.find(
        {"$text": {"$search": query}}
    ).sort(
        [("score", {"$meta": "textScore"})]
    ).limit(MAX_RESULTS).to_list()


async def regex_search(query: str) -> list[WineReference]:
    """Case-insensitive substring match on name or producer."""
    pattern = re.compile(re.escape(query), re.IGNORECASE)
    return await WineReference.find(
        {
            "$or": [
                {"name": {"$regex": pattern}},
                {"producer": {"$regex": pattern}},
            ]
        }
    ).limit(MAX_RESULTS).to_list()


async def search_wines(
    q: Annotated[str, Query(description="Name or producer to search for")] = "",
) -> WineSearchResponse | JSONResponse:
    """Search the shared wine catalogue by name or producer.

    Queries shorter than two characters return no results. A database
    failure answers 500 with an empty ``wines`` list and an ``error``.
    """
    query = q.strip()
    if len(query) < MIN_QUERY_LENGTH:
        return WineSearchResponse(wines=[])

    try:
        # Use the text index when it exists, else fall back to a regex scan
        try:
            wines = await text_search(query)
        except OperationFailure as e:
            logger.debug("Text search unavailable, falling back to regex: %s", e)
            wines = await regex_search(query)
    except PyMongoError:
        logger.exception("Catalogue search failed for %r", query)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=WineSearchResponse(wines=[], error=SEARCH_ERROR).model_dump(mode="json"),
        )

    return WineSearchResponse(wines=[WineSearchResult.from_reference(wine) for wine in wines])


router.add_api_route("/search", search_wines, methods=["GET"], response_model=WineSearchResponse)
