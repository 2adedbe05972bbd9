"""Field-level cache parameters for the ``@cache`` directive."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import SchemaError


class MutationInvalidation(Enum):
    """Which cached entries a mutation on the type invalidates."""
    ENTITY = "entity"
    LIST = "list"
    TYPE = "type"


class FieldCacheParams(BaseModel):
    """Parameters of a field-level cache directive.

    Accepts both the Python names and the SDL argument names:

        FieldCacheParams(max_age=60)
        FieldCacheParams.coerce({"maxAge": 60, "staleWhileRevalidate": 30})
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="forbid")

    max_age: int = Field(alias="maxAge", ge=0)
    stale_while_revalidate: int | None = Field(default=None, alias="staleWhileRevalidate", ge=0)
    mutation_invalidation: MutationInvalidation | None = Field(default=None, alias="mutationInvalidation")

    @classmethod
    def coerce(cls, params: Any) -> "FieldCacheParams":
        """Build params from an instance or a mapping, raising SchemaError."""
        if isinstance(params, cls):
            return params
        try:
            return cls.model_validate(params)
        except ValidationError as e:
            raise SchemaError(f"Invalid cache parameters: {e}") from e

    def __str__(self) -> str:
        args = [f"maxAge: {self.max_age}"]
        if self.stale_while_revalidate is not None:
            args.append(f"staleWhileRevalidate: {self.stale_while_revalidate}")
        if self.mutation_invalidation is not None:
            args.append(f"mutationInvalidation: {self.mutation_invalidation.value}")
        return f"@cache({', '.join(args)})"
