# =============================================================================
# lib/supabase_client.py - Supabase Client Wrapper
# =============================================================================
# This module provides a typed wrapper for Supabase database operations.
# It implements the singleton pattern to reuse a single client connection
# and provides table-level helpers used by the service layer:
# - Fetching a single row by primary key
# - Fetching filtered row lists
# - Inserting, updating and deleting rows
# - A lightweight connectivity probe for health checks
#
# Usage:
#   from lib.supabase_client import SupabaseClient
#   review = SupabaseClient.fetch_by_id("reviews", 42)
# =============================================================================

from __future__ import annotations

import logging
from typing import Any, Iterable

from supabase import create_client, Client, ClientOptions

from app.config import settings
from lib.utils import ApplicationError

# Set up logging for this module
logger = logging.getLogger(__name__)


class SupabaseClientError(ApplicationError):
    """
    Error during Supabase operations.

    Raised by every wrapper method so callers only need one except clause.
    """

    def __init__(
        self,
        message: str,
        code: str = "SUPABASE_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code=code, suggestion=suggestion, details=details)

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f" Suggestion: {self.suggestion}"
        return result


class SupabaseClient:
    """
    Typed wrapper for Supabase database operations.

    Implements singleton pattern - one client instance is shared across
    the application. All methods are class methods for easy access without
    instantiation.

    Example:
        # Fetch a collection point
        point = SupabaseClient.fetch_by_id("collection_points", 3)

        # Fetch all ratings of that point
        rows = SupabaseClient.fetch_rows(
            "reviews",
            columns="rating",
            filters={"collection_point_id": 3},
        )
    """

    _instance: Client | None = None

    @classmethod
    def get_client(cls) -> Client:
        """
        Get or create the singleton Supabase client.

        Uses service_role key which bypasses Row Level Security (RLS).
        Authorization is enforced by the API layer instead.

        Raises:
            SupabaseClientError: If client creation fails
        """
        if cls._instance is None:
            try:
                cls._instance = create_client(
                    settings.SUPABASE_URL,
                    settings.SUPABASE_SERVICE_KEY,
                    options=ClientOptions(
                        postgrest_client_timeout=settings.DATABASE_TIMEOUT_SECONDS
                    ),
                )
                logger.info("Supabase client initialized successfully")
            except Exception as e:
                raise SupabaseClientError(
                    message=f"Failed to create Supabase client: {e}",
                    code="CLIENT_INIT_FAILED",
                    suggestion="Check SUPABASE_URL and SUPABASE_SERVICE_KEY in your .env file"
                )
        return cls._instance

    @staticmethod
    def _apply_filters(query, filters: dict[str, Any] | None):
        for column, value in (filters or {}).items():
            if isinstance(value, (list, tuple, set)):
                query = query.in_(column, list(value))
            else:
                query = query.eq(column, value)
        return query

    # -------------------------------------------------------------------------
    # Health
    # -------------------------------------------------------------------------

    @classmethod
    def check_connection(cls) -> None:
        """
        Run the cheapest possible query to prove the database answers.

        Raises:
            SupabaseClientError: If the query fails
        """
        client = cls.get_client()
        try:
            client.table("users").select("id").limit(1).execute()
        except Exception as e:
            raise SupabaseClientError(
                message=f"Database probe failed: {e}",
                code="CONNECTION_FAILED",
                suggestion="Check that the Supabase project is reachable"
            )

    # -------------------------------------------------------------------------
    # Read Operations
    # -------------------------------------------------------------------------

    @classmethod
    def fetch_by_id(
        cls,
        table: str,
        record_id: int,
        columns: str = "*",
        id_column: str = "id",
    ) -> dict[str, Any] | None:
        """
        Fetch a single row by primary key.

        Args:
            table: Table name
            record_id: Primary key value
            columns: PostgREST column list (default: all)
            id_column: Name of the key column (default: "id")

        Returns:
            Row dict, or None if not found

        Raises:
            SupabaseClientError: If query fails
        """
        client = cls.get_client()

        try:
            response = (
                client.table(table)
                .select(columns)
                .eq(id_column, record_id)
                .limit(1)
                .execute()
            )
        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to fetch {table} row: {e}",
                code="FETCH_FAILED",
                details={"table": table, id_column: record_id}
            )

        rows = response.data or []
        return rows[0] if rows else None

    @classmethod
    def fetch_rows(
        cls,
        table: str,
        columns: str = "*",
        filters: dict[str, Any] | None = None,
        order_by: str | None = None,
        desc: bool = False,
    ) -> list[dict[str, Any]]:
        """
        Fetch every row matching the filters.

        Filter values that are lists/tuples/sets become `IN` clauses,
        everything else becomes an equality check.

        Raises:
            SupabaseClientError: If query fails
        """
        client = cls.get_client()
        query = cls._apply_filters(client.table(table).select(columns), filters)
        if order_by:
            query = query.order(order_by, desc=desc)

        try:
            response = query.execute()
        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to fetch {table} rows: {e}",
                code="FETCH_FAILED",
                details={"table": table, "filters": filters or {}}
            )

        rows = response.data or []
        logger.debug(f"Fetched {len(rows)} rows from {table}")
        return rows

    @classmethod
    def fetch_page(
        cls,
        table: str,
        page: int,
        page_size: int,
        filters: dict[str, Any] | None = None,
        order_by: str = "created_at",
        desc: bool = True,
    ) -> tuple[list[dict[str, Any]], int]:
        """
        Fetch one page of rows plus the total row count.

        Args:
            page: Page number (1-indexed)
            page_size: Items per page

        Returns:
            Tuple of (rows, total count)

        Raises:
            SupabaseClientError: If query fails
        """
        client = cls.get_client()
        query = cls._apply_filters(
            client.table(table).select("*", count="exact"), filters
        )

        offset = (page - 1) * page_size
        query = query.order(order_by, desc=desc).range(offset, offset + page_size - 1)

        try:
            response = query.execute()
        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to list {table}: {e}",
                code="LIST_FAILED",
                details={"table": table, "page": page, "page_size": page_size}
            )

        return response.data or [], response.count or 0

    # -------------------------------------------------------------------------
    # Write Operations
    # -------------------------------------------------------------------------

    @classmethod
    def insert_row(cls, table: str, data: dict[str, Any]) -> dict[str, Any]:
        """
        Insert a row and return it with generated columns filled in.

        Raises:
            SupabaseClientError: If insert fails or returns nothing
        """
        rows = cls.insert_rows(table, [data])
        if not rows:
            raise SupabaseClientError(
                message="Insert returned no data",
                code="INSERT_NO_DATA",
                details={"table": table}
            )
        return rows[0]

    @classmethod
    def insert_rows(
        cls,
        table: str,
        rows: Iterable[dict[str, Any]],
    ) -> list[dict[str, Any]]:
        """
        Insert several rows in one request.

        Raises:
            SupabaseClientError: If insert fails
        """
        payload = list(rows)
        if not payload:
            return []

        client = cls.get_client()
        try:
            response = client.table(table).insert(payload).execute()
        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to insert into {table}: {e}",
                code="INSERT_FAILED",
                details={"table": table, "rows": len(payload)}
            )

        return response.data or []

    @classmethod
    def update_rows(
        cls,
        table: str,
        data: dict[str, Any],
        filters: dict[str, Any],
    ) -> list[dict[str, Any]]:
        """
        Update matching rows and return them.

        Raises:
            SupabaseClientError: If update fails
        """
        client = cls.get_client()
        query = cls._apply_filters(client.table(table).update(data), filters)

        try:
            response = query.execute()
        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to update {table}: {e}",
                code="UPDATE_FAILED",
                details={"table": table, "filters": filters}
            )

        return response.data or []

    @classmethod
    def delete_rows(
        cls,
        table: str,
        filters: dict[str, Any],
    ) -> list[dict[str, Any]]:
        """
        Delete matching rows and return what was removed.

        An empty filter dict is rejected so a bad call can't wipe a table.

        Raises:
            SupabaseClientError: If delete fails
        """
        if not filters:
            raise SupabaseClientError(
                message=f"Refusing to delete from {table} without filters",
                code="DELETE_UNFILTERED",
                details={"table": table}
            )

        client = cls.get_client()
        query = cls._apply_filters(client.table(table).delete(), filters)

        try:
            response = query.execute()
        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to delete from {table}: {e}",
                code="DELETE_FAILED",
                details={"table": table, "filters": filters}
            )

        return response.data or []
