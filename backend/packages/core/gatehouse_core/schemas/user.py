"""
User record schema.

The persisted shape of an administrator in the credential document.
"""

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class UserRecord(BaseModel):
    """
    Stored administrator record.

    Records are immutable; rotation produces a new record via
    ``with_refresh_token``. Unknown keys in the stored document are kept so
    a wholesale rewrite does not drop them.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    username: str = Field(..., min_length=1)
    password_hash: str = Field(
        ...,
        # "password" is the key used by older credential documents
        validation_alias=AliasChoices("passwordHash", "password", "password_hash"),
        serialization_alias="passwordHash",
    )
    refresh_token: str | None = Field(
        None,
        validation_alias=AliasChoices("refreshToken", "refresh_token"),
        serialization_alias="refreshToken",
    )

    def with_refresh_token(self, refresh_token: str | None) -> "UserRecord":
        """Return a copy of this record holding ``refresh_token``."""
        return self.model_copy(update={"refresh_token": refresh_token})

    def to_document(self) -> dict[str, Any]:
        """Serialize for the credential document."""
        return self.model_dump(by_alias=True, exclude_none=True)
