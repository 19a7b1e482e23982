from pydantic import BaseModel, ConfigDict


class BuildTime(BaseModel):
    model_config = ConfigDict(frozen=True)

    formatted: str


class BuildInfo(BaseModel):
    """Values computed once at build start and shared by every page."""

    model_config = ConfigDict(frozen=True)

    time: BuildTime
