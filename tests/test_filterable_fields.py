import pytest

from core.errors import UnknownEntityTypeError
from core.filterable_fields import FILTERABLE_FIELDS, get_filterable_fields
from core.models import ENTITY_TYPES


def test_every_entity_type_has_a_table():
    assert set(FILTERABLE_FIELDS) == set(ENTITY_TYPES)


@pytest.mark.parametrize("entity_type", ENTITY_TYPES)
def test_fields_are_plain_dicts(entity_type):
    fields = get_filterable_fields(entity_type)

    assert fields
    for field in fields:
        assert set(field) == {"name", "type", "category", "description"}
        assert field["category"] in ("attribute", "convenience")


def test_works_table_has_common_filters():
    names = {f["name"] for f in get_filterable_fields("works")}

    assert {"publication_year", "cited_by_count", "open_access.is_oa", "from_publication_date"} <= names


def test_unknown_entity_type_raises():
    with pytest.raises(UnknownEntityTypeError, match="Unknown entity_type for get_filterable_fields: widgets"):
        get_filterable_fields("widgets")
