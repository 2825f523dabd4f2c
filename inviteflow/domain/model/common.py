"""Base model for domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable entity base.

    Changes are made with ``model_copy(update=...)`` and written back
    through a repository. Unknown fields are rejected so that storage
    rows and models cannot drift apart silently.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")
