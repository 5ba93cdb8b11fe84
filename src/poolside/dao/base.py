"""Base DAO with Supabase client connection."""

from typing import Any, Generic, TypeVar
from uuid import UUID

from pydantic import BaseModel
from supabase import Client, create_client

from poolside.config import get_settings

T = TypeVar("T", bound=BaseModel)


class SupabaseClient:
    """Singleton Supabase client manager."""

    _instance: Client | None = None

    @classmethod
    def get_client(cls) -> Client:
        """Get or create the Supabase client from settings."""
        if cls._instance is None:
            settings = get_settings()
            if not settings.has_supabase_credentials:
                raise RuntimeError("SUPABASE_URL and SUPABASE_KEY environment variables must be set")
            cls._instance = create_client(settings.supabase_url, settings.supabase_client_key)

        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the client (useful for testing)."""
        cls._instance = None


class BaseDAO(Generic[T]):
    """Base Data Access Object with common CRUD operations."""

    table_name: str
    model_class: type[T]

    # Fields held on the model but never written to this table
    exclude_on_write: frozenset[str] = frozenset()

    def __init__(self, client: Client | None = None):
        """Initialize the DAO.

        Args:
            client: Supabase client. If not provided, uses the singleton.
        """
        self.client = client or SupabaseClient.get_client()

    @property
    def table(self):
        """Get the table reference."""
        return self.client.table(self.table_name)

    def get_by_id(self, id: UUID) -> T | None:
        """Get a single record by ID, or None if not found."""
        result = self.table.select("*").eq("id", str(id)).execute()

        if not result.data:
            return None

        return self._to_model(result.data[0])

    def create(self, model: T) -> T:
        """Create a new record and return it with ID populated."""
        result = self.table.insert(self._to_db(model)).execute()
        return self._to_model(result.data[0])

    def update(self, id: UUID, model: T) -> T | None:
        """Update an existing record.

        Returns:
            The updated model or None if not found
        """
        data = self._to_db(model)
        data.pop("id", None)
        result = self.table.update(data).eq("id", str(id)).execute()

        if not result.data:
            return None

        return self._to_model(result.data[0])

    def delete(self, id: UUID) -> bool:
        """Delete a record by ID.

        Returns:
            True if deleted, False if not found
        """
        result = self.table.delete().eq("id", str(id)).execute()
        return len(result.data) > 0

    def _to_model(self, row: dict[str, Any]) -> T:
        """Convert a database row to a model instance."""
        return self.model_class(**row)

    def _to_db(self, model: T) -> dict[str, Any]:
        """Convert a model instance to a database row.

        Dumps in JSON mode so UUIDs, dates and enums arrive as strings;
        computed fields and ``exclude_on_write`` fields are left out.
        """
        exclude = set(type(model).model_computed_fields) | set(self.exclude_on_write)
        return model.model_dump(mode="json", exclude_none=True, exclude=exclude)
