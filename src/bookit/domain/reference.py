"""Reference resolution for booking parameters.

A booking can be computed against a business object, given either directly
as ``reference`` or as a ``(reference_type, reference_id)`` pair that is
looked up in the database.
"""

from typing import Any, Callable, Mapping, Optional

from bookit.database.base import Database
from bookit.domain.amount import is_blank
from bookit.domain.entities import ReferenceEntity
from bookit.domain.errors import NotFoundError, reference_not_found, unknown_reference_type


class ReferenceResolver:
    """Locates the reference entity named by booking parameters."""

    def __init__(self, db: Database):
        """Initialize reference resolver.

        Args:
            db: Database instance used for (type, id) lookups
        """
        self.db = db
        self.lookups: dict[str, Callable[[int], Optional[ReferenceEntity]]] = {
            "invoice": db.get_invoice,
            "booking": db.get_booking,
        }

    def lookup(self, reference_type: str, reference_id: Any) -> ReferenceEntity:
        """Look up a reference entity by type name and ID.

        Raises:
            NotFoundError: If the type is unknown or the ID does not resolve
        """
        finder = self.lookups.get(str(reference_type).strip().lower())
        if finder is None:
            raise NotFoundError(unknown_reference_type(reference_type))

        try:
            entity_id = int(str(reference_id).strip())
        except ValueError:
            raise NotFoundError(reference_not_found(reference_type, reference_id))

        entity = finder(entity_id)
        if entity is None:
            raise NotFoundError(reference_not_found(reference_type, reference_id))
        return entity

    def resolve(self, params: Mapping[str, Any]) -> Optional[ReferenceEntity]:
        """Return the reference named by normalised booking parameters.

        A direct ``reference`` wins without any lookup. Otherwise both
        ``reference_type`` and ``reference_id`` must be non-blank for a lookup
        to happen; if either is missing there is no reference.
        """
        reference = params.get("reference")
        if reference is not None:
            return reference

        reference_type = params.get("reference_type")
        reference_id = params.get("reference_id")
        if is_blank(reference_type) or is_blank(reference_id):
            return None
        return self.lookup(reference_type, reference_id)
