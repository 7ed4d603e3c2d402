# =============================================================================
# app/routers/reports.py - Report Endpoints
# =============================================================================
# Any logged-in user can file a report. Listing and reading are scoped to
# what the caller may see; status changes are for the operator of the point.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from app.auth import AuthUser, get_current_user, require_roles
from app.dependencies import PaginationDep, resolve_id
from core.models.report import (
    ReportCreate,
    ReportList,
    ReportResponse,
    ReportStatus,
    ReportStatusUpdate,
)
from core.models.user import UserRole
from core.services.report_service import ReportService

router = APIRouter()


@router.post("", response_model=ReportResponse, status_code=status.HTTP_201_CREATED)
def create_report(
    request: ReportCreate,
    user: AuthUser = Depends(get_current_user),
):
    """File a report about a collection point. It starts as PENDING."""
    return ReportService.create_report(user.id, request)


@router.get("", response_model=ReportList)
def list_reports(
    pagination: PaginationDep,
    user: AuthUser = Depends(get_current_user),
    status_filter: Annotated[ReportStatus | None, Query(alias="status", description="Filter by status")] = None,
    collection_point_id: Annotated[int | None, Query(gt=0, description="Filter by collection point")] = None,
):
    """
    List reports, newest first.

    Citizens see their own reports, operators see reports on their points,
    admins see everything.
    """
    page, page_size = pagination
    reports, total = ReportService.list_reports(
        user_id=user.id,
        role=user.role,
        page=page,
        page_size=page_size,
        status=status_filter,
        collection_point_id=collection_point_id,
    )
    return ReportList(reports=reports, total=total, page=page, page_size=page_size)


@router.get("/{report_id}", response_model=ReportResponse)
def get_report(
    report_id: str,
    user: AuthUser = Depends(get_current_user),
):
    """Get a report you filed, or one on a point you operate."""
    return ReportService.get_report(resolve_id(report_id, "report"), user.id, user.role)


@router.patch("/{report_id}/status", response_model=ReportResponse)
def update_report_status(
    report_id: str,
    request: ReportStatusUpdate,
    user: AuthUser = Depends(require_roles(UserRole.OPERATOR, UserRole.ADMIN)),
):
    """
    Move a report to PENDING, IN_PROGRESS or RESOLVED.

    A RESOLVED report must be reopened (PENDING) before it can go back
    IN_PROGRESS.
    """
    return ReportService.update_status(
        resolve_id(report_id, "report"),
        user.id,
        user.role,
        request.status,
    )
