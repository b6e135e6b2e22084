"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and providing shared utilities for data operations.
"""

import time
import uuid
from typing import TypeVar, Generic
from supabase import Client


T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints

    Subclasses implement domain-specific data access methods and map
    rows to Pydantic models internally. Lookups return None when a row
    is absent rather than an empty model.

    Example:
        class ProductRepository(BaseRepository[Product]):
            def get_by_id(self, product_id: str) -> Optional[Product]:
                result = self._db.table("products").select("*").eq("id", product_id).execute()
                if not result.data:
                    return None
                return Product(**result.data[0])
    """

    table_name: str = ""

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    def _table(self):
        return self._db.table(self.table_name)

    @staticmethod
    def _now() -> int:
        """Current time as epoch seconds."""
        return int(time.time())

    @staticmethod
    def _is_valid_id(value: str) -> bool:
        """Whether a string is a well-formed row ID (UUID)."""
        try:
            uuid.UUID(str(value))
        except ValueError:
            return False
        return True
