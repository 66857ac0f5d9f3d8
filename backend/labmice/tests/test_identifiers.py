import uuid

import pytest

from labmice.errors import InvalidIdentifier, ErrorKind
from labmice.identifiers import is_valid_id, parse_id, parse_optional_id


def test_generated_ids_are_valid():
    value = uuid.uuid4()
    assert is_valid_id(value)
    assert is_valid_id(str(value))
    assert is_valid_id(str(value).upper())


@pytest.mark.parametrize(
    "value",
    [
        None,
        "",
        "   ",
        "not-an-id",
        "507f1f77bcf86cd799439011",  # 24-hex object id
        uuid.uuid4().hex,  # no hyphens
        "{" + str(uuid.uuid4()) + "}",
        "urn:uuid:" + str(uuid.uuid4()),
        str(uuid.uuid4()) + "\n",
        12345,
        ["a"],
    ],
)
def test_rejects_anything_else(value):
    assert not is_valid_id(value)


def test_parse_id_round_trips_and_raises():
    value = uuid.uuid4()
    assert parse_id(str(value)) == value
    assert parse_id(value) is value
    with pytest.raises(InvalidIdentifier) as exc:
        parse_id("xyz")
    assert exc.value.kind is ErrorKind.INVALID_IDENTIFIER
    assert exc.value.status_code == 400


def test_parse_optional_id_treats_falsy_as_unset():
    assert parse_optional_id(None) is None
    assert parse_optional_id("") is None
    with pytest.raises(InvalidIdentifier):
        parse_optional_id("bogus")
