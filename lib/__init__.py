# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - supabase_client.py: Typed Supabase wrapper for database operations
# - security.py: Password hashing and access-token signing
# - utils.py: Shared utilities (error base class, identifier parsing)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.supabase_client import SupabaseClient, SupabaseClientError
from lib.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)
from lib.utils import ApplicationError, parse_int_id

__all__ = [
    # Supabase
    "SupabaseClient",
    "SupabaseClientError",
    # Security
    "create_access_token",
    "decode_access_token",
    "hash_password",
    "verify_password",
    # Utils
    "ApplicationError",
    "parse_int_id",
]
