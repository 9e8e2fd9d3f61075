# tests/test_base.py
from __future__ import annotations

import pytest
from pydantic import ValidationError

from emis.schemas.base import Address, AuditFields, BaseEntity, ContactInfo, RequiredContactInfo

from .conftest import USER_ID


def _audit(**overrides) -> dict:
    data = {
        "createdAt": "2024-01-01T09:00:00Z",
        "createdBy": USER_ID,
        "updatedAt": "2024-02-01T09:00:00+01:00",
        "updatedBy": USER_ID,
        "version": 0,
    }
    data.update(overrides)
    return data


def test_address_round_trip(address):
    parsed = Address.from_wire(address)
    assert parsed.postal_code == "62701"
    assert parsed.to_wire() == address
    assert Address.from_wire(parsed.to_wire()) == parsed


def test_address_snake_case_input_accepted(address):
    address["postal_code"] = address.pop("postalCode")
    assert Address.from_wire(address).to_wire()["postalCode"] == "62701"


def test_address_geocode_optional_but_bounded(address):
    assert "latitude" not in Address.from_wire(address).to_wire()
    address["latitude"] = 95
    with pytest.raises(ValidationError) as exc:
        Address.from_wire(address)
    err = exc.value.errors()[0]
    assert err["loc"] == ("latitude",)
    assert err["type"] == "out_of_range"


def test_unknown_keys_are_stripped(address):
    address["legacyCode"] = "X"
    assert "legacyCode" not in Address.from_wire(address).to_wire()


def test_contact_info_variants():
    assert ContactInfo.from_wire({}).to_wire() == {}
    with pytest.raises(ValidationError):
        RequiredContactInfo.from_wire({"email": "office@springfieldschools.org"})


def test_audit_version_non_negative_integer():
    assert AuditFields.from_wire(_audit(version=3)).version == 3
    for bad in (-1, 1.5, "2"):
        with pytest.raises(ValidationError):
            AuditFields.from_wire(_audit(version=bad))


def test_base_entity_requires_identity():
    data = _audit(tenantId=USER_ID, entityId=USER_ID, entityType="school")
    entity = BaseEntity.from_wire(data)
    assert entity.entity_type == "school"
    with pytest.raises(ValidationError):
        BaseEntity.from_wire(_audit())


def test_json_round_trip(address):
    parsed = Address.from_wire(address)
    assert Address.from_json(parsed.to_json()) == parsed
