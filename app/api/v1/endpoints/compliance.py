"""Compliance API: thin routes delegating to ComplianceQueryService."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query
from fastapi.responses import Response

from app.api.v1.dependencies import get_compliance_query_service
from app.application.dtos.compliance import FilterState
from app.application.use_cases.compliance import ComplianceQueryService
from app.domain.enums import EntityCategory, StatusFilter
from app.schemas.compliance import (
    ChecklistResponse,
    ComplianceAlertResponse,
    EntityComplianceResponse,
)
from app.shared.utils.datetime import utc_now

router = APIRouter()

_SEARCH_MAX_LENGTH = 200


@router.get("/{category}/checklist", response_model=ChecklistResponse)
async def get_checklist(
    category: Annotated[EntityCategory, Path(description="Entity category")],
    svc: Annotated[ComplianceQueryService, Depends(get_compliance_query_service)],
    search: Annotated[str, Query(max_length=_SEARCH_MAX_LENGTH)] = "",
    status: StatusFilter = StatusFilter.ALL,
    page: Annotated[int, Query(ge=1)] = 1,
):
    """Ranked, filtered checklist page (critical first) with global severity counts."""
    result = await svc.get_checklist(
        category, FilterState(search=search, status=status, page=page)
    )
    return ChecklistResponse.from_dto(result)


@router.get(
    "/{category}/checklist.csv",
    response_class=Response,
    responses={200: {"content": {"text/csv": {}}}},
)
async def export_checklist_csv(
    category: Annotated[EntityCategory, Path(description="Entity category")],
    svc: Annotated[ComplianceQueryService, Depends(get_compliance_query_service)],
    search: Annotated[str, Query(max_length=_SEARCH_MAX_LENGTH)] = "",
    status: StatusFilter = StatusFilter.ALL,
) -> Response:
    """Whole filtered checklist as a semicolon-separated CSV download."""
    now = utc_now()
    content = await svc.export_checklist_csv(
        category, FilterState(search=search, status=status), now
    )
    filename = f"document_checklist_{category.value}_{now.date().isoformat()}.csv"
    return Response(
        content=content,
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get(
    "/{category}/entities/{entity_id}",
    response_model=EntityComplianceResponse,
)
async def get_entity_compliance(
    category: Annotated[EntityCategory, Path(description="Entity category")],
    entity_id: str,
    svc: Annotated[ComplianceQueryService, Depends(get_compliance_query_service)],
):
    """Compliance report for one company or driver, with every document on file."""
    profile = await svc.get_entity_report(category, entity_id)
    return EntityComplianceResponse.from_profile(profile)


@router.get(
    "/{category}/entities/{entity_id}/alert",
    response_model=ComplianceAlertResponse,
)
async def get_entity_alert(
    category: Annotated[EntityCategory, Path(description="Entity category")],
    entity_id: str,
    svc: Annotated[ComplianceQueryService, Depends(get_compliance_query_service)],
):
    """Whether the entity has a missing or expired mandatory document."""
    blocking = await svc.has_blocking_issues(category, entity_id)
    return ComplianceAlertResponse(entity_id=entity_id, has_blocking_issues=blocking)
