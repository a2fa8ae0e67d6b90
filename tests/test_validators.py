from __future__ import annotations

import logging

import pytest

from token_topup.models.schemas import Company, User
from token_topup.utils.validators import (
    collect_defects,
    partition_records,
    remove_duplicate_companies,
    verify,
)


def test_verify_accepts_complete_company(company_record, verification_logger, caplog) -> None:
    with caplog.at_level(logging.WARNING, logger=verification_logger.name):
        assert verify(company_record(), Company, "Company", verification_logger) is True
    assert caplog.records == []


def test_missing_field_is_reported_once(company_record, verification_logger, caplog) -> None:
    record = company_record(id=3)
    del record["top_up"]

    with caplog.at_level(logging.WARNING, logger=verification_logger.name):
        assert verify(record, Company, "Company", verification_logger) is False

    assert caplog.messages == [
        "Warning: Company (ID: 3) missing field 'top_up'.  Skipping..."
    ]


def test_wrong_type_names_actual_and_expected(user_record, verification_logger, caplog) -> None:
    record = user_record(id=9, tokens="5")

    with caplog.at_level(logging.WARNING, logger=verification_logger.name):
        assert verify(record, User, "User", verification_logger) is False

    assert caplog.messages == [
        "Warning: User (ID: 9) field 'tokens' has invalid type 'str' (expected 'int').  Skipping..."
    ]


@pytest.mark.parametrize(
    "field, value",
    [
        ("tokens", True),
        ("tokens", 5.0),
        ("active_status", 1),
        ("email_status", "true"),
        ("last_name", None),
    ],
)
def test_json_types_are_not_coerced(user_record, field, value) -> None:
    defects = collect_defects(user_record(**{field: value}), User, "User")
    assert [defect.field for defect in defects] == [field]


def test_every_defect_is_collected(user_record) -> None:
    record = user_record(company_id="1", active_status="yes")
    del record["email"]

    defects = collect_defects(record, User, "User")

    assert sorted(defect.field for defect in defects) == ["active_status", "company_id", "email"]
    assert all(defect.record_id == 1 for defect in defects)


def test_unknown_id_when_id_is_missing(company_record) -> None:
    record = company_record()
    del record["id"]

    defects = collect_defects(record, Company, "Company")

    assert [defect.message for defect in defects] == [
        "Warning: Company (ID: unknown) missing field 'id'.  Skipping..."
    ]


def test_non_object_record_is_invalid() -> None:
    defects = collect_defects(42, Company, "Company")
    assert [defect.message for defect in defects] == [
        "Warning: Company (ID: unknown) is not a JSON object.  Skipping..."
    ]


def test_extra_fields_are_allowed(company_record) -> None:
    assert collect_defects(company_record(country="NZ"), Company, "Company") == []


def test_partition_keeps_order(user_record, verification_logger) -> None:
    records = [
        user_record(id=1),
        user_record(id=2, tokens=None),
        user_record(id=3),
        "not a user",
        user_record(id=5),
    ]

    valid, invalid = partition_records(records, User, "User", verification_logger)

    assert [user.id for user in valid] == [1, 3, 5]
    assert all(isinstance(user, User) for user in valid)
    assert invalid == [records[1], records[3]]


def test_duplicate_ids_remove_whole_group(company_record, verification_logger, caplog) -> None:
    valid = [
        Company.model_validate(company_record(id=7, name="First")),
        Company.model_validate(company_record(id=2, name="Other")),
        Company.model_validate(company_record(id=7, name="Second")),
    ]
    invalid = [{"id": "bad"}]

    with caplog.at_level(logging.WARNING, logger=verification_logger.name):
        remaining = remove_duplicate_companies(valid, invalid, verification_logger)

    assert [company.id for company in remaining] == [2]
    assert invalid[0] == {"id": "bad"}
    assert [record["name"] for record in invalid[1:]] == ["First", "Second"]
    assert caplog.messages == [
        "Warning: Company First (ID: 7) is a duplicate ID.  Skipping...",
        "Warning: Company Second (ID: 7) is a duplicate ID.  Skipping...",
    ]


def test_remaining_companies_are_sorted_by_id(company_record, verification_logger) -> None:
    valid = [Company.model_validate(company_record(id=company_id)) for company_id in (5, 1, 3)]

    remaining = remove_duplicate_companies(valid, [], verification_logger)

    assert [company.id for company in remaining] == [1, 3, 5]


def test_dumped_duplicate_keeps_extra_fields(company_record, verification_logger) -> None:
    valid = [
        Company.model_validate(company_record(id=4, country="NZ")),
        Company.model_validate(company_record(id=4)),
    ]
    invalid: list = []

    remove_duplicate_companies(valid, invalid, verification_logger)

    assert invalid[0] == company_record(id=4, country="NZ")
