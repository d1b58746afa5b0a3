"""Shared pydantic base for configuration and wire models."""

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Immutable model: categories and parse options never change mid-run."""

    model_config = ConfigDict(frozen=True)
