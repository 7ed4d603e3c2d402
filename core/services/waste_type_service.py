# =============================================================================
# core/services/waste_type_service.py - Waste Type Business Logic
# =============================================================================

import logging
from typing import Any, Iterable

from lib.supabase_client import SupabaseClient
from core.models.waste_type import WasteTypeCreate
from app.exceptions import (
    DuplicateWasteTypeError,
    UnknownWasteTypeError,
    WasteTypeNotFoundError,
)

logger = logging.getLogger(__name__)


class WasteTypeService:
    """Service for the waste type catalogue."""

    @staticmethod
    def list_waste_types() -> list[dict[str, Any]]:
        return SupabaseClient.fetch_rows("waste_types", order_by="name")

    @staticmethod
    def get_waste_type(waste_type_id: int) -> dict[str, Any]:
        """
        Raises:
            WasteTypeNotFoundError: If the waste type doesn't exist
        """
        waste_type = SupabaseClient.fetch_by_id("waste_types", waste_type_id)
        if not waste_type:
            raise WasteTypeNotFoundError(waste_type_id)
        return waste_type

    @staticmethod
    def create_waste_type(data: WasteTypeCreate) -> dict[str, Any]:
        """
        Raises:
            DuplicateWasteTypeError: If the name is already used
        """
        if SupabaseClient.fetch_rows("waste_types", columns="id", filters={"name": data.name}):
            raise DuplicateWasteTypeError(data.name)

        waste_type = SupabaseClient.insert_row("waste_types", data.model_dump())
        logger.info(f"Created waste type {waste_type['id']}: {data.name}")
        return waste_type

    @staticmethod
    def ensure_exist(waste_type_ids: Iterable[int]) -> list[int]:
        """
        Check that every id refers to a waste type.

        Returns:
            The ids de-duplicated, in first-seen order

        Raises:
            UnknownWasteTypeError: Listing the ids that don't exist
        """
        ids = list(dict.fromkeys(waste_type_ids))
        if not ids:
            return []

        rows = SupabaseClient.fetch_rows("waste_types", columns="id", filters={"id": ids})
        found = {row["id"] for row in rows}
        missing = [i for i in ids if i not in found]
        if missing:
            raise UnknownWasteTypeError(missing)
        return ids
