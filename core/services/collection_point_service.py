# =============================================================================
# core/services/collection_point_service.py - Collection Point Business Logic
# =============================================================================
# Handles collection point CRUD. A point is spread across several tables
# (collection_points, addresses, schedules, collection_point_waste_types);
# this service assembles them into one nested dict for the API and writes
# them back on create/update.
# =============================================================================

import logging
from typing import Any

from lib.supabase_client import SupabaseClient, SupabaseClientError
from core.models.collection_point import CollectionPointCreate, CollectionPointUpdate
from core.models.user import UserRole
from core.services.waste_type_service import WasteTypeService
from app.exceptions import CollectionPointNotFoundError, PermissionDeniedError

logger = logging.getLogger(__name__)

# Columns of collection_points that clients may write directly
SCALAR_FIELDS = ("name", "description", "is_active", "accessibility", "capacity")
# ...and the ones that may not be set to null
REQUIRED_FIELDS = ("name", "is_active")


class CollectionPointService:
    """
    Service for collection point operations.

    Points are readable by anyone; only the owning operator or an admin
    may change them.
    """

    # -------------------------------------------------------------------------
    # Assembly
    # -------------------------------------------------------------------------

    @staticmethod
    def _hydrate(points: list[dict[str, Any]]) -> list[dict[str, Any]]:
        """Attach address, schedule and waste types to each point row."""
        if not points:
            return []

        ids = [p["id"] for p in points]
        addresses = {
            row["collection_point_id"]: row
            for row in SupabaseClient.fetch_rows("addresses", filters={"collection_point_id": ids})
        }
        schedules = {
            row["collection_point_id"]: row
            for row in SupabaseClient.fetch_rows("schedules", filters={"collection_point_id": ids})
        }
        links = SupabaseClient.fetch_rows(
            "collection_point_waste_types",
            filters={"collection_point_id": ids},
        )

        waste_type_ids = sorted({link["waste_type_id"] for link in links})
        waste_types = {}
        if waste_type_ids:
            waste_types = {
                row["id"]: row
                for row in SupabaseClient.fetch_rows("waste_types", filters={"id": waste_type_ids})
            }

        by_point: dict[int, list[dict[str, Any]]] = {}
        for link in links:
            waste_type = waste_types.get(link["waste_type_id"])
            if waste_type:
                by_point.setdefault(link["collection_point_id"], []).append(waste_type)

        hydrated = []
        for point in points:
            hydrated.append({
                **point,
                "address": addresses.get(point["id"]),
                "schedule": schedules.get(point["id"]),
                "waste_types": sorted(by_point.get(point["id"], []), key=lambda wt: wt["id"]),
            })
        return hydrated

    @staticmethod
    def _ids_matching(city: str | None, waste_type_id: int | None) -> set[int] | None:
        """
        Resolve the filters that live on child tables into a set of point ids.

        Returns None when no such filter was requested.
        """
        matching: set[int] | None = None

        if city:
            rows = SupabaseClient.fetch_rows(
                "addresses", columns="collection_point_id", filters={"city": city}
            )
            matching = {row["collection_point_id"] for row in rows}

        if waste_type_id is not None:
            rows = SupabaseClient.fetch_rows(
                "collection_point_waste_types",
                columns="collection_point_id",
                filters={"waste_type_id": waste_type_id},
            )
            ids = {row["collection_point_id"] for row in rows}
            matching = ids if matching is None else matching & ids

        return matching

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    @staticmethod
    def get_point_row(collection_point_id: int) -> dict[str, Any]:
        """
        Fetch the bare collection_points row.

        Raises:
            CollectionPointNotFoundError: If the point doesn't exist
        """
        point = SupabaseClient.fetch_by_id("collection_points", collection_point_id)
        if not point:
            raise CollectionPointNotFoundError(collection_point_id)
        return point

    @staticmethod
    def get_point(collection_point_id: int) -> dict[str, Any]:
        """
        Fetch a point with address, schedule and waste types.

        Raises:
            CollectionPointNotFoundError: If the point doesn't exist
        """
        point = CollectionPointService.get_point_row(collection_point_id)
        return CollectionPointService._hydrate([point])[0]

    @staticmethod
    def list_points(
        page: int,
        page_size: int,
        city: str | None = None,
        waste_type_id: int | None = None,
        active_only: bool = True,
        operator_id: int | None = None,
    ) -> tuple[list[dict[str, Any]], int]:
        """
        List points ordered by name.

        Args:
            city: Only points whose address is in this city
            waste_type_id: Only points accepting this waste type
            active_only: Hide points with is_active = false
            operator_id: Only points managed by this operator

        Returns:
            Tuple of (hydrated points, total count)
        """
        filters: dict[str, Any] = {}
        if active_only:
            filters["is_active"] = True
        if operator_id is not None:
            filters["operator_id"] = operator_id

        ids = CollectionPointService._ids_matching(city, waste_type_id)
        if ids is not None:
            if not ids:
                return [], 0
            filters["id"] = sorted(ids)

        points, total = SupabaseClient.fetch_page(
            "collection_points", page, page_size,
            filters=filters, order_by="name", desc=False,
        )
        return CollectionPointService._hydrate(points), total

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    @staticmethod
    def ensure_can_manage(point: dict[str, Any], user_id: int, role: UserRole) -> None:
        """
        Raises:
            PermissionDeniedError: Unless the caller operates the point or is an admin
        """
        if role == UserRole.ADMIN:
            return
        if role == UserRole.OPERATOR and point["operator_id"] == user_id:
            return
        logger.warning(f"User {user_id} ({role.value}) denied on collection point {point['id']}")
        raise PermissionDeniedError(
            "Not authorized to manage this collection point",
            details={"collection_point_id": point["id"]},
        )

    @staticmethod
    def _write_one_to_one(table: str, collection_point_id: int, values: dict[str, Any]) -> None:
        """
        Overwrite the point's row in `table`, or insert it when missing.

        The stored row is updated in place, never deleted first, so a failed
        write leaves the previous values intact.
        """
        updated = SupabaseClient.update_rows(
            table, values, filters={"collection_point_id": collection_point_id}
        )
        if not updated:
            SupabaseClient.insert_row(table, {"collection_point_id": collection_point_id, **values})

    @staticmethod
    def _sync_waste_types(collection_point_id: int, waste_type_ids: list[int]) -> None:
        """Add missing links first, then drop the ones no longer wanted."""
        links = SupabaseClient.fetch_rows(
            "collection_point_waste_types",
            columns="waste_type_id",
            filters={"collection_point_id": collection_point_id},
        )
        current = {link["waste_type_id"] for link in links}

        SupabaseClient.insert_rows(
            "collection_point_waste_types",
            [
                {"collection_point_id": collection_point_id, "waste_type_id": wt_id}
                for wt_id in waste_type_ids
                if wt_id not in current
            ],
        )

        stale = sorted(current - set(waste_type_ids))
        if stale:
            SupabaseClient.delete_rows(
                "collection_point_waste_types",
                filters={"collection_point_id": collection_point_id, "waste_type_id": stale},
            )

    @staticmethod
    def _replace_children(
        collection_point_id: int,
        data: CollectionPointCreate | CollectionPointUpdate,
        waste_type_ids: list[int] | None,
    ) -> None:
        if data.address is not None:
            CollectionPointService._write_one_to_one(
                "addresses", collection_point_id, data.address.model_dump()
            )

        if data.schedule is not None:
            CollectionPointService._write_one_to_one(
                "schedules", collection_point_id, data.schedule.model_dump()
            )

        if waste_type_ids is not None:
            CollectionPointService._sync_waste_types(collection_point_id, waste_type_ids)

    @staticmethod
    def create_point(operator_id: int, data: CollectionPointCreate) -> dict[str, Any]:
        """
        Create a point owned by `operator_id` with its nested records.

        If a child record can't be written the point row is deleted again
        before the error propagates.

        Raises:
            UnknownWasteTypeError: If any waste_type_ids don't exist
            SupabaseClientError: If a write fails
        """
        waste_type_ids = WasteTypeService.ensure_exist(data.waste_type_ids)

        row = {field: getattr(data, field) for field in SCALAR_FIELDS}
        row["operator_id"] = operator_id
        point = SupabaseClient.insert_row("collection_points", row)

        try:
            CollectionPointService._replace_children(point["id"], data, waste_type_ids)
        except SupabaseClientError:
            logger.error(f"Child records of collection point {point['id']} failed, removing the point")
            # ON DELETE CASCADE removes whatever children were written
            SupabaseClient.delete_rows("collection_points", filters={"id": point["id"]})
            raise

        logger.info(f"Created collection point {point['id']} for operator {operator_id}")

        return CollectionPointService.get_point(point["id"])

    @staticmethod
    def update_point(
        collection_point_id: int,
        user_id: int,
        role: UserRole,
        data: CollectionPointUpdate,
    ) -> dict[str, Any]:
        """
        Apply a partial update.

        Raises:
            CollectionPointNotFoundError: If the point doesn't exist
            PermissionDeniedError: If the caller may not manage it
            UnknownWasteTypeError: If any waste_type_ids don't exist
        """
        point = CollectionPointService.get_point_row(collection_point_id)
        CollectionPointService.ensure_can_manage(point, user_id, role)

        waste_type_ids = None
        if data.waste_type_ids is not None:
            waste_type_ids = WasteTypeService.ensure_exist(data.waste_type_ids)

        provided = data.model_dump(exclude_unset=True, include=set(SCALAR_FIELDS))
        changes = {
            key: value for key, value in provided.items()
            if value is not None or key not in REQUIRED_FIELDS
        }
        if changes:
            SupabaseClient.update_rows("collection_points", changes, filters={"id": collection_point_id})

        CollectionPointService._replace_children(collection_point_id, data, waste_type_ids)
        logger.info(f"Updated collection point {collection_point_id}: {sorted(changes)}")

        return CollectionPointService.get_point(collection_point_id)

    @staticmethod
    def delete_point(collection_point_id: int, user_id: int, role: UserRole) -> None:
        """
        Delete a point. Address, schedule, links, reviews and reports go with
        it through ON DELETE CASCADE.

        Raises:
            CollectionPointNotFoundError: If the point doesn't exist
            PermissionDeniedError: If the caller may not manage it
        """
        point = CollectionPointService.get_point_row(collection_point_id)
        CollectionPointService.ensure_can_manage(point, user_id, role)

        SupabaseClient.delete_rows("collection_points", filters={"id": collection_point_id})
        logger.info(f"Deleted collection point {collection_point_id} by user {user_id}")
