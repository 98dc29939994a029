"""Self-governance call encoding.

A proposal whose destination is the vault itself carries a governance
call in its payload. Once the proposal is executed, the call is decoded
and applied to the owner registry. This is the only way the owner set or
threshold can change.

Wire format: UTF-8 JSON, validated with pydantic.

    {"method": "add_owner", "owner": "0xabc..."}
    {"method": "remove_owner", "owner": "0xabc..."}
    {"method": "set_threshold", "required_confirmations": 3}
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, StrictInt, model_validator


class GovernanceMethod(StrEnum):
    """Registry mutations reachable through self-governance."""

    ADD_OWNER = "add_owner"
    REMOVE_OWNER = "remove_owner"
    SET_THRESHOLD = "set_threshold"


_OWNER_METHODS = frozenset({GovernanceMethod.ADD_OWNER, GovernanceMethod.REMOVE_OWNER})


class GovernanceCall(BaseModel):
    """A decoded self-governance call.

    Attributes:
        method: Registry mutation to perform.
        owner: Owner argument for add_owner/remove_owner.
        required_confirmations: Threshold argument for set_threshold.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    method: GovernanceMethod
    owner: str | None = None
    required_confirmations: StrictInt | None = None

    @model_validator(mode="after")
    def _check_arguments(self) -> "GovernanceCall":
        if self.method in _OWNER_METHODS:
            if self.owner is None:
                raise ValueError(f"{self.method.value} requires an owner")
            if self.required_confirmations is not None:
                raise ValueError(f"{self.method.value} takes no threshold")
        else:
            if self.required_confirmations is None:
                raise ValueError("set_threshold requires required_confirmations")
            if self.owner is not None:
                raise ValueError("set_threshold takes no owner")
        return self

    @classmethod
    def add_owner(cls, owner: str) -> "GovernanceCall":
        return cls(method=GovernanceMethod.ADD_OWNER, owner=owner)

    @classmethod
    def remove_owner(cls, owner: str) -> "GovernanceCall":
        return cls(method=GovernanceMethod.REMOVE_OWNER, owner=owner)

    @classmethod
    def set_threshold(cls, required_confirmations: int) -> "GovernanceCall":
        return cls(
            method=GovernanceMethod.SET_THRESHOLD,
            required_confirmations=required_confirmations,
        )

    def encode(self) -> bytes:
        """Encode as a proposal payload.

        Returns:
            UTF-8 JSON bytes without unset arguments.
        """
        return self.model_dump_json(exclude_none=True).encode("utf-8")

    @classmethod
    def decode(cls, payload: bytes) -> "GovernanceCall":
        """Decode a proposal payload.

        Args:
            payload: Raw payload bytes.

        Returns:
            The validated governance call.

        Raises:
            pydantic.ValidationError: payload is not a valid governance call.
        """
        return cls.model_validate_json(payload)
