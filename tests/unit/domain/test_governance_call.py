"""Unit tests for GovernanceCall payload encoding."""

import json

import pytest
from pydantic import ValidationError

from quorum_vault.domain.models.governance_call import GovernanceCall, GovernanceMethod


class TestGovernanceCallConstruction:
    """Tests for the GovernanceCall constructors and validation."""

    def test_add_owner(self) -> None:
        """add_owner carries an owner and no threshold."""
        call = GovernanceCall.add_owner("0xdave")
        assert call.method == GovernanceMethod.ADD_OWNER
        assert call.owner == "0xdave"
        assert call.required_confirmations is None

    def test_set_threshold(self) -> None:
        """set_threshold carries a threshold and no owner."""
        call = GovernanceCall.set_threshold(3)
        assert call.method == GovernanceMethod.SET_THRESHOLD
        assert call.required_confirmations == 3
        assert call.owner is None

    def test_owner_method_without_owner_rejected(self) -> None:
        """remove_owner needs an owner."""
        with pytest.raises(ValidationError):
            GovernanceCall(method=GovernanceMethod.REMOVE_OWNER)

    def test_set_threshold_without_value_rejected(self) -> None:
        """set_threshold needs a value."""
        with pytest.raises(ValidationError):
            GovernanceCall(method=GovernanceMethod.SET_THRESHOLD)

    def test_mixed_arguments_rejected(self) -> None:
        """An owner method cannot also carry a threshold."""
        with pytest.raises(ValidationError):
            GovernanceCall(
                method=GovernanceMethod.ADD_OWNER,
                owner="0xdave",
                required_confirmations=2,
            )

    def test_frozen(self) -> None:
        """Decoded calls are immutable."""
        call = GovernanceCall.add_owner("0xdave")
        with pytest.raises(ValidationError):
            call.owner = "0xeve"  # type: ignore[misc]


class TestGovernanceCallWireFormat:
    """Tests for encode() and decode()."""

    def test_encode_is_flat_json(self) -> None:
        """Encoded payloads are flat JSON objects without unset fields."""
        payload = GovernanceCall.remove_owner("0xbob").encode()
        assert json.loads(payload) == {"method": "remove_owner", "owner": "0xbob"}

    def test_decode_set_threshold(self) -> None:
        """A hand-written payload decodes to the right call."""
        call = GovernanceCall.decode(b'{"method": "set_threshold", "required_confirmations": 3}')
        assert call == GovernanceCall.set_threshold(3)

    def test_decode_roundtrip(self) -> None:
        """decode(encode(call)) gives the call back."""
        call = GovernanceCall.add_owner("0xdave")
        assert GovernanceCall.decode(call.encode()) == call

    @pytest.mark.parametrize(
        "payload",
        [
            b"not json",
            b"{}",
            b'{"method": "transfer"}',
            b'{"method": "add_owner", "owner": "0xdave", "extra": 1}',
            b'{"method": "set_threshold", "required_confirmations": "3"}',
        ],
    )
    def test_decode_rejects_invalid_payloads(self, payload: bytes) -> None:
        """Anything that is not exactly a governance call is rejected."""
        with pytest.raises(ValidationError):
            GovernanceCall.decode(payload)
