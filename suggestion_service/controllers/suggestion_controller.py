# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Suggested-name endpoints.
Thin HTTP layer — delegates ALL logic to SuggestionService.
"""

from fastapi import APIRouter, Depends, HTTPException, Query
from starlette.responses import Response

from suggestion_service.core.config import settings
from suggestion_service.core.dependencies import get_suggestion_service
from suggestion_service.schemas import SuggestedName, SuggestionMeta
from suggestion_service.services.suggestion_service import SuggestionService

router = APIRouter(prefix=settings.API_PREFIX, tags=["Suggestions"])


@router.get(
    "/suggestions/meta",
    response_model=SuggestionMeta,
    responses={204: {"description": "Nothing to report"}},
)
def get_suggestions_meta(
    count: bool = Query(default=False),
    service: SuggestionService = Depends(get_suggestion_service),
):
    """Metadata about stored suggestions; ?count=true returns the total."""
    meta = service.get_meta(count=count)
    if meta is None:
        return Response(status_code=204, media_type="application/json")
    return SuggestionMeta(**meta)


@router.post("/suggestions", status_code=201, response_model=SuggestedName)
def suggest_name(
    payload: SuggestedName,
    service: SuggestionService = Depends(get_suggestion_service),
):
    """Submit a new suggested name."""
    return service.suggest(payload)


@router.get("/suggestions", response_model=list[SuggestedName])
def list_suggestions(
    service: SuggestionService = Depends(get_suggestion_service),
):
    """List all suggested names."""
    return service.list_suggestions()


@router.delete("/suggestions/{name}", status_code=204)
def delete_suggestion(
    name: str,
    service: SuggestionService = Depends(get_suggestion_service),
):
    """Delete a suggested name. Unknown names are a bad request."""
    try:
        service.delete_suggestion(name)
    except KeyError as e:
        raise HTTPException(status_code=400, detail=e.args[0])
    return Response(status_code=204)
