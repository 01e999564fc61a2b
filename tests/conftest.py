import pytest

from record_projection.result import PaginatedResult
from sample_records import Person


@pytest.fixture
def people() -> PaginatedResult[Person]:
    payload = [
        Person(ident=1, given_name="Ada"),
        Person(ident=2, given_name="Grace"),
        Person(ident=3, given_name="Edsger"),
    ]
    return PaginatedResult[Person](page=2, records_per_page=3, payload=payload)
