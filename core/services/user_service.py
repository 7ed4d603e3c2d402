# =============================================================================
# core/services/user_service.py - Account Business Logic
# =============================================================================
# Registration, password login and profile edits. The password hash never
# leaves this module: every dict returned here has it stripped.
# =============================================================================

import logging
from typing import Any

from lib.security import hash_password, verify_password
from lib.supabase_client import SupabaseClient
from core.models.user import OAuthProvider, UserRegister, UserRole, UserUpdate
from app.exceptions import (
    EmailAlreadyRegisteredError,
    InvalidCredentialsError,
    UserNotFoundError,
)

logger = logging.getLogger(__name__)


def _public(user: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in user.items() if key != "password"}


class UserService:
    """Service for user accounts."""

    @staticmethod
    def _find_by_email(email: str) -> dict[str, Any] | None:
        rows = SupabaseClient.fetch_rows("users", filters={"email": email.lower()})
        return rows[0] if rows else None

    @staticmethod
    def register(data: UserRegister) -> dict[str, Any]:
        """
        Create a local (APP) account, plus its operators row for operators.

        Raises:
            EmailAlreadyRegisteredError: If the email is taken
        """
        email = data.email.lower()
        if UserService._find_by_email(email):
            raise EmailAlreadyRegisteredError(email)

        user = SupabaseClient.insert_row(
            "users",
            {
                "email": email,
                "name": data.name,
                "surname": data.surname,
                "cellphone": data.cellphone,
                "role": data.role.value,
                "password": hash_password(data.password),
                "oauth_provider": OAuthProvider.APP.value,
            },
        )

        if data.role == UserRole.OPERATOR and data.operator is not None:
            SupabaseClient.insert_row(
                "operators",
                {"user_id": user["id"], **data.operator.model_dump()},
            )

        logger.info(f"Registered user {user['id']} with role {data.role.value}")
        return UserService.get_profile(user["id"])

    @staticmethod
    def authenticate(email: str, password: str) -> dict[str, Any]:
        """
        Check credentials.

        Raises:
            InvalidCredentialsError: Unknown email or wrong password
        """
        user = UserService._find_by_email(email)
        if not user or not verify_password(password, user.get("password")):
            logger.warning(f"Failed login for {email}")
            raise InvalidCredentialsError()
        return _public(user)

    @staticmethod
    def get_profile(user_id: int) -> dict[str, Any]:
        """
        Fetch a user with the operator block attached when present.

        Raises:
            UserNotFoundError: If the user doesn't exist
        """
        user = SupabaseClient.fetch_by_id("users", user_id)
        if not user:
            raise UserNotFoundError(user_id)

        profile = _public(user)
        profile["operator"] = None
        if user.get("role") == UserRole.OPERATOR.value:
            profile["operator"] = SupabaseClient.fetch_by_id(
                "operators", user_id, id_column="user_id"
            )
        return profile

    @staticmethod
    def update_profile(user_id: int, data: UserUpdate) -> dict[str, Any]:
        """
        Raises:
            UserNotFoundError: If the user doesn't exist
        """
        changes = data.model_dump(exclude_unset=True)
        # name and surname are NOT NULL; an explicit null means "leave it"
        changes = {k: v for k, v in changes.items() if v is not None or k == "cellphone"}

        if changes:
            updated = SupabaseClient.update_rows("users", changes, filters={"id": user_id})
            if not updated:
                raise UserNotFoundError(user_id)
            logger.info(f"Updated profile of user {user_id}: {sorted(changes)}")

        return UserService.get_profile(user_id)
