"""Request and response models for the name service."""
from pydantic import BaseModel, ConfigDict, StrictStr, model_validator


class NameRequest(BaseModel):
    """Body accepted by ``POST /``."""

    name: StrictStr


class NameResponse(BaseModel):
    """Envelope returned by every route.

    A successful envelope carries no ``error_message``; a failed one carries
    an ``error_message`` and no ``name``.  Build instances through :meth:`ok`
    and :meth:`error`.
    """

    model_config = ConfigDict(frozen=True)

    name: str = ""
    success: bool = False
    error_message: str = ""

    @model_validator(mode="after")
    def _one_side_populated(self) -> "NameResponse":
        if self.success and self.error_message:
            raise ValueError("a successful response cannot carry an error_message")
        if not self.success and (self.name or not self.error_message):
            raise ValueError("a failed response needs an error_message and no name")
        return self

    @classmethod
    def ok(cls, name: str) -> "NameResponse":
        return cls(name=name, success=True, error_message="")

    @classmethod
    def error(cls, message: str) -> "NameResponse":
        return cls(name="", success=False, error_message=message)
