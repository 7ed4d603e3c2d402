# =============================================================================
# core/services/report_service.py - Report Business Logic
# =============================================================================
# Citizens file reports; operators work the reports filed on the points they
# manage. Visibility:
# - USER / CLIENT: their own reports
# - OPERATOR: reports on points they operate
# - ADMIN: everything
# Reports a caller can't see are reported as not found.
# =============================================================================

import logging
from datetime import datetime, timezone
from typing import Any

from lib.supabase_client import SupabaseClient
from core.models.report import ReportCreate, ReportStatus
from core.models.user import UserRole
from core.services.collection_point_service import CollectionPointService
from app.exceptions import InvalidStatusTransitionError, ReportNotFoundError

logger = logging.getLogger(__name__)


class ReportService:
    """Service for report filing and status management."""

    @staticmethod
    def _operated_point_ids(operator_id: int) -> set[int]:
        rows = SupabaseClient.fetch_rows(
            "collection_points", columns="id", filters={"operator_id": operator_id}
        )
        return {row["id"] for row in rows}

    @staticmethod
    def _can_view(report: dict[str, Any], user_id: int, role: UserRole) -> bool:
        if role == UserRole.ADMIN:
            return True
        if report["user_id"] == user_id:
            return True
        if role == UserRole.OPERATOR:
            return report["collection_point_id"] in ReportService._operated_point_ids(user_id)
        return False

    @staticmethod
    def create_report(user_id: int, data: ReportCreate) -> dict[str, Any]:
        """
        File a new PENDING report.

        Raises:
            CollectionPointNotFoundError: If the point doesn't exist
        """
        CollectionPointService.get_point_row(data.collection_point_id)

        report = SupabaseClient.insert_row(
            "reports",
            {
                "user_id": user_id,
                "collection_point_id": data.collection_point_id,
                "type": data.type.value,
                "description": data.description,
                "status": ReportStatus.PENDING.value,
            },
        )
        logger.info(
            f"User {user_id} filed {data.type.value} report {report['id']} "
            f"on collection point {data.collection_point_id}"
        )
        return report

    @staticmethod
    def get_report(report_id: int, user_id: int, role: UserRole) -> dict[str, Any]:
        """
        Raises:
            ReportNotFoundError: If the report doesn't exist or is not visible
        """
        report = SupabaseClient.fetch_by_id("reports", report_id)
        if not report or not ReportService._can_view(report, user_id, role):
            raise ReportNotFoundError(report_id)
        return report

    @staticmethod
    def list_reports(
        user_id: int,
        role: UserRole,
        page: int,
        page_size: int,
        status: ReportStatus | None = None,
        collection_point_id: int | None = None,
    ) -> tuple[list[dict[str, Any]], int]:
        """
        List the reports visible to the caller, newest first.

        Returns:
            Tuple of (reports list, total count)
        """
        filters: dict[str, Any] = {}
        if status is not None:
            filters["status"] = status.value
        if collection_point_id is not None:
            filters["collection_point_id"] = collection_point_id

        if role == UserRole.OPERATOR:
            point_ids = ReportService._operated_point_ids(user_id)
            if collection_point_id is not None:
                point_ids &= {collection_point_id}
            if not point_ids:
                return [], 0
            filters["collection_point_id"] = sorted(point_ids)
        elif role != UserRole.ADMIN:
            filters["user_id"] = user_id

        return SupabaseClient.fetch_page("reports", page, page_size, filters=filters)

    @staticmethod
    def update_status(
        report_id: int,
        user_id: int,
        role: UserRole,
        status: ReportStatus,
    ) -> dict[str, Any]:
        """
        Move a report through its status machine.

        IN_PROGRESS and RESOLVED record the caller as resolved_by; RESOLVED
        also stamps resolved_at. Going back to PENDING clears both.

        Raises:
            ReportNotFoundError: If the report doesn't exist
            PermissionDeniedError: If the caller doesn't operate the point
            InvalidStatusTransitionError: RESOLVED -> IN_PROGRESS
        """
        report = SupabaseClient.fetch_by_id("reports", report_id)
        if not report:
            raise ReportNotFoundError(report_id)

        point = CollectionPointService.get_point_row(report["collection_point_id"])
        CollectionPointService.ensure_can_manage(point, user_id, role)

        current = ReportStatus(report["status"])
        if current == status:
            return report
        if current == ReportStatus.RESOLVED and status == ReportStatus.IN_PROGRESS:
            raise InvalidStatusTransitionError(current.value, status.value)

        changes: dict[str, Any] = {"status": status.value}
        if status == ReportStatus.PENDING:
            changes["resolved_by"] = None
            changes["resolved_at"] = None
        elif status == ReportStatus.IN_PROGRESS:
            changes["resolved_by"] = user_id
            changes["resolved_at"] = None
        else:
            changes["resolved_by"] = user_id
            changes["resolved_at"] = datetime.now(timezone.utc).isoformat()

        updated = SupabaseClient.update_rows("reports", changes, filters={"id": report_id})
        if not updated:
            raise ReportNotFoundError(report_id)

        logger.info(f"Report {report_id}: {current.value} -> {status.value} by user {user_id}")
        return updated[0]
