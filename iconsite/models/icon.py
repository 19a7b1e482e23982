from pydantic import BaseModel, ConfigDict


class Icon(BaseModel):
    """One entry of the icon catalog.

    Only ``name`` and ``path`` are required; any other field of the catalog
    record (categories, aliases, ...) is kept as-is.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    name: str
    path: str
