r"""Unit tests for the data model and its JSON codec."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

import pytest
from coola.equality import objects_are_equal

from pastemyst.exceptions import DecodeError, ValidationError
from pastemyst.expiration import (
    NEVER,
    Duration,
    ExpirationUnit,
    ExpiresIn,
    coerce_expiration,
    parse_expiration,
)
from pastemyst.models import (
    CreatePaste,
    EditHistory,
    EditPaste,
    EditType,
    ExpirationPolicy,
    Paste,
    Pasty,
    User,
    UserFlag,
    Visibility,
)
from tests.helpers import PASTE_ID, PASTY_LANGUAGE, create_paste_json, create_user_json

EDIT_JSON = {
    "_id": "e1",
    "editId": "batch1",
    "editType": 3,
    "metadata": ["cwy615yg"],
    "edit": "print('hello')",
    "editedAt": 1_588_441_300,
}


###########################
#     Tests for Pasty     #
###########################


def test_pasty_defaults() -> None:
    pasty = Pasty(code="x")
    assert pasty.id == ""
    assert pasty.title == ""
    assert pasty.language == "Autodetect"


def test_pasty_to_dict_without_id() -> None:
    assert Pasty(code="x", title="t", language="Python").to_dict() == {
        "title": "t",
        "language": "Python",
        "code": "x",
    }


def test_pasty_to_dict_with_id() -> None:
    assert Pasty(code="x", id="abc").to_dict()["_id"] == "abc"


def test_pasty_from_dict() -> None:
    pasty = Pasty.from_dict({"_id": "p", "title": "t", "language": "D", "code": "void main() {}"})
    assert pasty == Pasty(id="p", title="t", language="D", code="void main() {}")


def test_pasty_from_dict_missing_code() -> None:
    with pytest.raises(DecodeError, match=r"missing key 'code'"):
        Pasty.from_dict({"_id": "p", "title": "t", "language": "D"})


#################################
#     Tests for EditHistory     #
#################################


def test_edit_history_from_dict() -> None:
    edit = EditHistory.from_dict(EDIT_JSON)
    assert edit.id == "e1"
    assert edit.edit_id == "batch1"
    assert edit.edit_type is EditType.PASTY_CONTENT
    assert edit.metadata == ("cwy615yg",)
    assert edit.edited_at == datetime.fromtimestamp(1_588_441_300, tz=timezone.utc)


def test_edit_history_round_trip() -> None:
    assert EditHistory.from_dict(EDIT_JSON).to_dict() == EDIT_JSON


def test_edit_history_unknown_type() -> None:
    with pytest.raises(DecodeError, match=r"unknown edit type 9"):
        EditHistory.from_dict({**EDIT_JSON, "editType": 9})


def test_edit_history_edited_at_out_of_range() -> None:
    with pytest.raises(DecodeError, match=r"out of range"):
        EditHistory.from_dict({**EDIT_JSON, "editedAt": 10**20})


###########################
#     Tests for Paste     #
###########################


def test_paste_from_dict() -> None:
    paste = Paste.from_dict(create_paste_json())
    assert paste.id == PASTE_ID
    assert paste.owner_id is None
    assert paste.title == "pastemyst fixture"
    assert paste.created_at == datetime.fromtimestamp(1_588_441_258, tz=timezone.utc)
    assert paste.expiration_policy is ExpirationPolicy.NEVER
    assert paste.expires_in == NEVER
    assert paste.deletes_at is None
    assert paste.visibility is Visibility.UNLISTED
    assert paste.tags == ()
    assert len(paste.pasties) == 2
    assert paste.pasties[1].language == PASTY_LANGUAGE
    assert paste.stars == 3
    assert paste.edits == ()


def test_paste_url() -> None:
    assert Paste.from_dict(create_paste_json()).url == f"https://paste.myst.rs/{PASTE_ID}"


def test_paste_from_dict_owner_and_tags() -> None:
    paste = Paste.from_dict(create_paste_json(ownerId="u1", tags=["python", "demo"]))
    assert paste.owner_id == "u1"
    assert paste.tags == ("python", "demo")


def test_paste_from_dict_timed_relative() -> None:
    paste = Paste.from_dict(create_paste_json(expiresIn="1d", deletesAt=1_588_527_658))
    assert paste.expiration_policy is ExpirationPolicy.TIMED_RELATIVE
    assert paste.expires_in == Duration(1, ExpirationUnit.DAY)
    assert paste.deletes_at == datetime.fromtimestamp(1_588_527_658, tz=timezone.utc)


def test_paste_from_dict_timed_absolute() -> None:
    paste = Paste.from_dict(create_paste_json(expiresIn="1700000000", deletesAt=0))
    assert paste.expiration_policy is ExpirationPolicy.TIMED_ABSOLUTE
    assert paste.expires_in is None
    assert paste.deletes_at == datetime.fromtimestamp(1_700_000_000, tz=timezone.utc)


@pytest.mark.parametrize(
    ("is_private", "is_public", "visibility"),
    [
        (False, False, Visibility.UNLISTED),
        (True, False, Visibility.PRIVATE),
        (False, True, Visibility.PUBLIC),
    ],
)
def test_paste_from_dict_visibility(
    is_private: bool, is_public: bool, visibility: Visibility
) -> None:
    paste = Paste.from_dict(create_paste_json(isPrivate=is_private, isPublic=is_public))
    assert paste.visibility is visibility


def test_paste_from_dict_private_and_public() -> None:
    with pytest.raises(DecodeError, match=r"both private and public"):
        Paste.from_dict(create_paste_json(isPrivate=True, isPublic=True))


@pytest.mark.parametrize("key", ["_id", "title", "createdAt", "expiresIn", "isPublic", "pasties"])
def test_paste_from_dict_missing_key(key: str) -> None:
    data = create_paste_json()
    del data[key]
    with pytest.raises(DecodeError, match=rf"missing key '{key}'"):
        Paste.from_dict(data)


@pytest.mark.parametrize(
    ("key", "value"),
    [("createdAt", "yesterday"), ("createdAt", True), ("isPrivate", 0), ("tags", "a,b"), ("stars", "3")],
)
def test_paste_from_dict_wrong_type(key: str, value: Any) -> None:
    with pytest.raises(DecodeError, match=rf"key '{key}'"):
        Paste.from_dict(create_paste_json(**{key: value}))


def test_paste_from_dict_not_an_object() -> None:
    with pytest.raises(DecodeError, match=r"paste must be a JSON object, got list"):
        Paste.from_dict([])


def test_paste_from_dict_unknown_expiration() -> None:
    with pytest.raises(DecodeError, match=r"unknown expiration code"):
        Paste.from_dict(create_paste_json(expiresIn="3d"))


@pytest.mark.parametrize("expires_in", ["\u00b2", "\u0661\u0662", "1\u00b3"])
def test_paste_from_dict_non_ascii_digit_expiration(expires_in: str) -> None:
    with pytest.raises(DecodeError, match=r"unknown expiration code"):
        Paste.from_dict(create_paste_json(expiresIn=expires_in))


@pytest.mark.parametrize("key", ["createdAt", "deletesAt"])
@pytest.mark.parametrize("value", [10**20, -(10**20)])
def test_paste_from_dict_timestamp_out_of_range(key: str, value: int) -> None:
    with pytest.raises(DecodeError, match=r"out of range"):
        Paste.from_dict(create_paste_json(**{key: value, "expiresIn": "1d"}))


def test_paste_from_dict_absolute_expiration_out_of_range() -> None:
    with pytest.raises(DecodeError, match=r"out of range"):
        Paste.from_dict(create_paste_json(expiresIn=str(10**20)))


def test_paste_from_dict_without_stars_and_edits() -> None:
    data = create_paste_json()
    del data["stars"]
    del data["edits"]
    paste = Paste.from_dict(data)
    assert paste.stars == 0
    assert paste.edits == ()


def test_paste_from_dict_with_edits() -> None:
    paste = Paste.from_dict(create_paste_json(edits=[EDIT_JSON]))
    assert paste.edits == (EditHistory.from_dict(EDIT_JSON),)


def test_paste_round_trip() -> None:
    data = create_paste_json(ownerId="u1", isPublic=True, tags=["a"], edits=[EDIT_JSON])
    assert objects_are_equal(Paste.from_dict(data).to_dict(), data)


def test_paste_round_trip_timed_absolute() -> None:
    data = create_paste_json(expiresIn="1700000000", deletesAt=1_700_000_000)
    assert Paste.from_dict(Paste.from_dict(data).to_dict()) == Paste.from_dict(data)


def test_paste_is_immutable() -> None:
    paste = Paste.from_dict(create_paste_json())
    with pytest.raises(AttributeError):
        paste.title = "changed"  # type: ignore[misc]


##########################
#     Tests for User     #
##########################


def test_user_from_dict() -> None:
    user = User.from_dict(create_user_json())
    assert user.id == "5ce1b8d4"
    assert user.username == "codemyst"
    assert user.default_language == "D"
    assert user.supporter_length == 0
    assert user.flags == UserFlag.CONTRIBUTOR | UserFlag.PUBLIC_PROFILE
    assert user.is_contributor
    assert user.has_public_profile
    assert not user.is_supporter


def test_user_from_dict_supporter() -> None:
    user = User.from_dict(create_user_json(supporterLength=12, contributor=False))
    assert user.is_supporter
    assert not user.is_contributor


def test_user_from_dict_missing_key() -> None:
    data = create_user_json()
    del data["avatarUrl"]
    with pytest.raises(DecodeError, match=r"missing key 'avatarUrl'"):
        User.from_dict(data)


def test_user_round_trip() -> None:
    data = create_user_json(supporterLength=5)
    assert objects_are_equal(User.from_dict(data).to_dict(), data)


#################################
#     Tests for CreatePaste     #
#################################


def test_create_paste_defaults() -> None:
    payload = CreatePaste(pasties=[Pasty(code="x")])
    assert payload.title == ""
    assert payload.expires_in == NEVER
    assert payload.visibility is Visibility.UNLISTED
    assert payload.tags == ()
    assert isinstance(payload.pasties, tuple)
    assert not payload.requires_auth


def test_create_paste_to_dict() -> None:
    payload = CreatePaste(
        title="hello",
        expires_in="1d",
        visibility=Visibility.PRIVATE,
        tags=["rust", "demo"],
        pasties=[Pasty(title="main.rs", language="Rust", code="fn main() {}")],
    )
    assert objects_are_equal(
        payload.to_dict(),
        {
            "title": "hello",
            "expiresIn": "1d",
            "isPrivate": True,
            "isPublic": False,
            "tags": "rust,demo",
            "pasties": [{"title": "main.rs", "language": "Rust", "code": "fn main() {}"}],
        },
    )


@pytest.mark.parametrize(
    ("expires_in", "code"),
    [
        ("never", "never"),
        ("1m", "1m"),
        ("1M", "1m"),
        ("24h", None),
        (Duration(1, ExpirationUnit.WEEK), "1w"),
        (NEVER, "never"),
    ],
)
def test_create_paste_expiration_code(expires_in: Any, code: str | None) -> None:
    payload = CreatePaste(pasties=[Pasty(code="x")], expires_in=expires_in)
    if code is None:
        with pytest.raises(ValidationError, match=r"does not accept"):
            payload.expiration_code()
    else:
        assert payload.expiration_code() == code


def test_create_paste_wire_code_takes_precedence_over_expression() -> None:
    payload = CreatePaste(pasties=[Pasty(code="x")], expires_in="1m")
    assert payload.expiration_code() == ExpiresIn.ONE_MONTH
    assert coerce_expiration("1m") == Duration(1, ExpirationUnit.MONTH)
    assert parse_expiration("1m") == Duration(1, ExpirationUnit.MINUTE)
    with pytest.raises(ValidationError, match=r"does not accept"):
        CreatePaste(pasties=[Pasty(code="x")], expires_in="2m").expiration_code()


def test_create_paste_invalid_expression() -> None:
    payload = CreatePaste(pasties=[Pasty(code="x")], expires_in="soon")
    with pytest.raises(ValidationError, match=r"invalid expiration expression"):
        payload.to_dict()


def test_create_paste_without_pasty() -> None:
    with pytest.raises(ValidationError, match=r"at least one pasty"):
        CreatePaste(pasties=[]).validate()


@pytest.mark.parametrize(
    ("visibility", "requires_auth"),
    [(Visibility.UNLISTED, False), (Visibility.PRIVATE, True), (Visibility.PUBLIC, True)],
)
def test_create_paste_requires_auth(visibility: Visibility, requires_auth: bool) -> None:
    payload = CreatePaste(pasties=[Pasty(code="x")], visibility=visibility)
    assert payload.requires_auth is requires_auth


def test_create_paste_echo_round_trip() -> None:
    payload = CreatePaste(
        title="round trip",
        pasties=[Pasty(title="a.py", language="Python", code="a = 1"), Pasty(code="b")],
    )
    body = payload.to_dict()
    echoed = create_paste_json(
        title=body["title"],
        pasties=[{"_id": f"p{i}", **pasty} for i, pasty in enumerate(body["pasties"])],
    )
    paste = Paste.from_dict(echoed)
    assert len(paste.pasties) == len(payload.pasties)
    assert paste.title == payload.title
    assert [p.title for p in paste.pasties] == [p.title for p in payload.pasties]
    assert [p.code for p in paste.pasties] == [p.code for p in payload.pasties]


###############################
#     Tests for EditPaste     #
###############################


def test_edit_paste_to_dict_empty() -> None:
    assert EditPaste().to_dict() == {}


def test_edit_paste_to_dict_partial() -> None:
    assert EditPaste(title="new", visibility=Visibility.PUBLIC, tags=("a", "b")).to_dict() == {
        "title": "new",
        "isPrivate": False,
        "isPublic": True,
        "tags": "a,b",
    }


def test_edit_paste_from_paste() -> None:
    paste = Paste.from_dict(create_paste_json(tags=["x"]))
    payload = EditPaste.from_paste(paste)
    data = payload.to_dict()
    assert data["title"] == paste.title
    assert data["tags"] == "x"
    assert [pasty["_id"] for pasty in data["pasties"]] == ["cwy615yg", "jwbykypd"]


def test_edit_paste_empty_pasties() -> None:
    with pytest.raises(ValidationError, match=r"at least one pasty"):
        EditPaste(pasties=[]).to_dict()


def test_edit_paste_pasty_without_id() -> None:
    with pytest.raises(ValidationError, match=r"identifier"):
        EditPaste(pasties=[Pasty(code="x")]).validate()
