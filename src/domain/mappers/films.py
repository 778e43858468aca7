"""Film <-> FilmDTO conversion."""

from __future__ import annotations

from uuid import UUID

from src.domain.models.films import Film, FilmDTO

# Fields copied one-to-one between Film and FilmDTO (identity handled separately).
_SHARED_FIELDS = ("title", "rating", "updated_at", "completed_at", "deleted_at")


class FilmMapper:
    """Bidirectional, stateless conversion between Film and FilmDTO."""

    def to_dto(self, entity: Film) -> FilmDTO:
        return FilmDTO(
            id=str(entity.film_id),
            title=entity.title,
            rating=entity.rating,
            updated_at=entity.updated_at,
            completed_at=entity.completed_at,
            deleted_at=entity.deleted_at,
        )

    def to_entity(self, dto: FilmDTO, existing: Film | None = None) -> Film:
        """Build a Film from *dto*, merging onto *existing* when given.

        Without *existing*, unset DTO fields fall back to the Film defaults
        (a fresh film_id among them).  With *existing*, only fields the caller
        explicitly set on the DTO overwrite the existing values; the result is
        re-validated, so e.g. an explicit ``title=None`` raises ValidationError.

        Raises:
            ValueError: dto.id is not a valid UUID string.
            pydantic.ValidationError: the resulting field values are invalid.
        """
        if existing is None:
            data = {
                name: getattr(dto, name)
                for name in _SHARED_FIELDS
                if getattr(dto, name) is not None
            }
            if dto.id is not None:
                data["film_id"] = UUID(dto.id)
            return Film.model_validate(data)

        updates = {
            name: getattr(dto, name)
            for name in _SHARED_FIELDS
            if name in dto.model_fields_set
        }
        if dto.id is not None and "id" in dto.model_fields_set:
            updates["film_id"] = UUID(dto.id)
        return Film.model_validate({**existing.model_dump(), **updates})
