# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import json
from datetime import date
from typing import Any
from uuid import UUID

import pytest

from restproxy.codec import CodecSettings, EnumEncoding, JsonCodec, NamingConvention, enum_from_text, enum_text
from restproxy.errors import CodecError

from .resources import Board, Item, Owner, Status, Task, Ticket


@pytest.mark.parametrize(
    ("naming", "expected"),
    [
        (NamingConvention.CAMEL, "displayName"),
        (NamingConvention.PASCAL, "DisplayName"),
        (NamingConvention.SNAKE, "display_name"),
        (NamingConvention.KEBAB, "display-name"),
        (NamingConvention.PRESERVE, "display_name"),
    ],
)
def test_naming_convention_controls_property_names(naming, expected):
    codec = JsonCodec(CodecSettings(naming=naming))
    assert json.loads(codec.encode(Owner(display_name="Sam"), Owner)) == {expected: "Sam"}
    assert codec.decode(json.dumps({expected: "Sam"}), Owner) == Owner(display_name="Sam")


def test_enum_text_helpers():
    assert enum_text(Status.IN_PROGRESS, EnumEncoding.CAMEL_CASE_STRING) == "inProgress"
    assert enum_text(Status.DONE, EnumEncoding.CAMEL_CASE_STRING) == "done"
    assert enum_text(Status.IN_PROGRESS, EnumEncoding.NAME) == "IN_PROGRESS"
    assert enum_text(Status.IN_PROGRESS, EnumEncoding.VALUE) == "in-progress"
    assert enum_from_text(Status, "INPROGRESS") is Status.IN_PROGRESS
    assert enum_from_text(Status, "archived") is None
    assert enum_from_text(Status, 3) is None


def test_encode_defaults_camel_case_omit_none_and_camel_enums():
    codec = JsonCodec()
    task = Task(
        title="Write docs",
        status=Status.IN_PROGRESS,
        due_date=date(2026, 3, 1),
        owner=Owner(display_name="Sam"),
        external_ref="X-1",
    )

    payload = json.loads(codec.encode(task, Task))

    assert payload == {
        "title": "Write docs",
        "status": "inProgress",
        "dueDate": "2026-03-01",
        "owner": {"displayName": "Sam"},
        "tags": [],
        "ext": "X-1",
    }


def test_encode_honors_custom_settings():
    codec = JsonCodec(CodecSettings(naming=NamingConvention.SNAKE, omit_none=False, enum_encoding=EnumEncoding.VALUE))
    payload = json.loads(codec.encode(Task(id=3, status=Status.DONE), Task))
    assert payload["id"] == 3
    assert payload["status"] == "done"
    assert payload["due_date"] is None
    assert "validation_errors" in payload

    by_name = JsonCodec(CodecSettings(enum_encoding=EnumEncoding.NAME))
    assert json.loads(by_name.encode(Task(status=Status.IN_PROGRESS), Task))["status"] == "IN_PROGRESS"


def test_encode_plain_dicts_and_rejects_unknown_objects():
    codec = JsonCodec()
    assert json.loads(codec.encode({"id": 1, "name": "a"}, dict)) == {"id": 1, "name": "a"}
    with pytest.raises(CodecError):
        codec.encode(object(), Item)


def test_pydantic_model_keeps_its_own_config():
    codec = JsonCodec(CodecSettings(naming=NamingConvention.SNAKE))
    ticket = codec.decode('{"id": 2, "summary": "Broken", "status": "IN_PROGRESS"}', Ticket)
    assert ticket == Ticket(id=2, summary="Broken", status=Status.IN_PROGRESS)
    assert json.loads(codec.encode(ticket, Ticket)) == {"id": 2, "summary": "Broken", "status": "inProgress"}


def test_decode_nested_dataclass_and_ignores_unknown():
    body = json.dumps(
        {
            "id": 7,
            "title": "Ship",
            "status": "inProgress",
            "dueDate": "2026-03-01",
            "owner": {"displayName": "Sam", "emailAddress": "sam@example.test"},
            "tags": ["a", "b"],
            "validationErrors": {"title": ["too short"]},
            "ext": "X-9",
            "unknown": True,
        }
    )
    task = JsonCodec().decode(body, Task)
    assert task == Task(
        id=7,
        title="Ship",
        status=Status.IN_PROGRESS,
        due_date=date(2026, 3, 1),
        owner=Owner(display_name="Sam", email_address="sam@example.test"),
        tags=["a", "b"],
        validation_errors={"title": ["too short"]},
        external_ref="X-9",
    )


def test_decode_accepts_python_field_names():
    task = JsonCodec().decode('{"due_date": "2026-03-01", "validation_errors": {}}', Task)
    assert task.due_date == date(2026, 3, 1)
    assert task.validation_errors == {}


@pytest.mark.parametrize("raw", ["inProgress", "IN_PROGRESS", "in-progress", "InProgress"])
def test_decode_enum_accepts_every_encoding(raw):
    task = JsonCodec().decode(json.dumps({"status": raw}), Task)
    assert task.status is Status.IN_PROGRESS


def test_decode_invalid_enum_raises_codec_error():
    with pytest.raises(CodecError):
        JsonCodec().decode('{"status": "archived"}', Task)


def test_decode_bad_enum_inside_list_raises_codec_error():
    codec = JsonCodec()
    assert codec.decode('{"id": 1, "statuses": ["open", "done"]}', Board).statuses == [Status.OPEN, Status.DONE]
    with pytest.raises(CodecError):
        codec.decode('{"id": 1, "statuses": ["open", "archived"]}', Board)


@pytest.mark.parametrize(
    "body",
    [
        '{"id": "abc", "name": 7}',
        '{"id": 1, "name": ["a"]}',
        '{"id": {"nested": 1}}',
    ],
)
def test_decode_wrong_scalar_types_raise_codec_error(body):
    with pytest.raises(CodecError):
        JsonCodec().decode(body, Item)


def test_decode_malformed_date_raises_codec_error():
    with pytest.raises(CodecError):
        JsonCodec().decode('{"id": 1, "dueDate": "not-a-date"}', Task)
    with pytest.raises(CodecError):
        JsonCodec().decode('{"id": 1, "dueDate": "2026-02-30"}', Task)


def test_decode_malformed_uuid_raises_codec_error():
    codec = JsonCodec()
    assert codec.decode('"12345678-1234-5678-1234-567812345678"', UUID) == UUID("12345678-1234-5678-1234-567812345678")
    with pytest.raises(CodecError):
        codec.decode('"not-a-uuid"', UUID)


def test_decode_missing_required_field_raises_codec_error():
    with pytest.raises(CodecError):
        JsonCodec().decode('{"emailAddress": "x@example.test"}', Owner)


def test_decode_list_and_shape_mismatches():
    codec = JsonCodec()
    assert codec.decode_list('[{"id":1,"name":"a"},{"id":2}]', Item) == [Item(id=1, name="a"), Item(id=2)]
    assert codec.decode_list("[]", Item) == []
    with pytest.raises(CodecError):
        codec.decode_list('{"id": 1}', Item)
    with pytest.raises(CodecError):
        codec.decode_list("null", Item)
    with pytest.raises(CodecError):
        codec.decode_list('[{"id": 1, "status": "archived"}]', Task)
    with pytest.raises(CodecError):
        codec.decode("[1, 2]", Item)
    with pytest.raises(CodecError):
        codec.decode("{not json", Item)


def test_decode_untyped_shapes_pass_through():
    codec = JsonCodec()
    assert codec.decode('{"id": 1}', dict) == {"id": 1}
    assert codec.decode('{"id": 1}', Any) == {"id": 1}
    assert codec.decode("null", Item) is None


def test_empty_body_decodes_to_default_shape():
    codec = JsonCodec()
    assert codec.decode("", Task) == Task()
    assert codec.decode("  ", dict) == {}
    assert codec.decode(None, Owner) is None
    assert codec.decode_list("", Item) == []


def test_decode_matches_independent_decoding():
    body = '{"id": 5, "name": "five"}'
    assert JsonCodec().decode(body, Item) == JsonCodec(CodecSettings()).decode(body, Item)
