"""Per-call hashing options."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class HashOptions(BaseModel):
    """Per-call overrides for PasswordHasher.hash. Unset fields fall back to the hasher's config."""
    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    salt: Optional[str] = Field(None, description="hex salt to reuse instead of generating one")
    length: Optional[int] = Field(None, alias="len", gt=0, description="derived key length in hex chars")
    salt_length: Optional[int] = Field(None, alias="saltLen", gt=0, description="salt length in hex chars")
    iterations: Optional[int] = Field(None, gt=0)
    digest: Optional[str] = Field(None, min_length=1)

    @classmethod
    def coerce(cls, options) -> "HashOptions":
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        return cls.model_validate(options)
