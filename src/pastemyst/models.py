r"""Implement the data model of the PasteMyst API and its JSON codec.

The model types are immutable dataclasses. ``from_dict`` decodes the
JSON objects returned by the service and raises ``DecodeError`` when a
required key is missing or has the wrong type. ``to_dict`` builds the
JSON objects sent to the service.

PasteMyst describes the visibility of a paste with two booleans
(``isPrivate`` and ``isPublic``). This module exposes a single
``Visibility`` value instead and only translates to and from the two
booleans while encoding and decoding.
"""

from __future__ import annotations

__all__ = [
    "CreatePaste",
    "EditHistory",
    "EditPaste",
    "EditType",
    "ExpirationPolicy",
    "Paste",
    "Pasty",
    "User",
    "UserFlag",
    "Visibility",
]

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum, Flag, IntEnum, auto
from typing import TYPE_CHECKING, Any, TypeVar

from pastemyst.exceptions import DecodeError, ParseError, ValidationError
from pastemyst.expiration import (
    NEVER,
    ExpirationSpec,
    Never,
    coerce_expiration,
    from_wire,
    to_wire,
)
from pastemyst.language import AUTODETECT

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

T = TypeVar("T")


class Visibility(Enum):
    r"""Visibility of a paste.

    * ``PUBLIC``: listed on the owner's public profile.
    * ``PRIVATE``: only accessible by the owner.
    * ``UNLISTED``: accessible to anyone with the link.
    """

    PUBLIC = "public"
    PRIVATE = "private"
    UNLISTED = "unlisted"


class ExpirationPolicy(Enum):
    r"""How the expiration of a paste is defined."""

    NEVER = "never"
    TIMED_RELATIVE = "timed_relative"
    TIMED_ABSOLUTE = "timed_absolute"


class EditType(IntEnum):
    r"""Kind of change recorded in the edit history of a paste."""

    TITLE = 0
    PASTY_TITLE = 1
    PASTY_LANGUAGE = 2
    PASTY_CONTENT = 3
    PASTY_ADDED = 4
    PASTY_REMOVED = 5


class UserFlag(Flag):
    r"""Capabilities of a PasteMyst user."""

    NONE = 0
    CONTRIBUTOR = auto()
    SUPPORTER = auto()
    PUBLIC_PROFILE = auto()


def _require(data: Mapping[str, Any], key: str, expected: type[T]) -> T:
    if key not in data:
        msg = f"missing key {key!r}"
        raise DecodeError(msg)
    value = data[key]
    # bool is a subclass of int but never a valid int field
    if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
        msg = (
            f"key {key!r} has type {type(value).__name__}, "
            f"expected {expected.__name__}"
        )
        raise DecodeError(msg)
    return value


def _require_object(data: Any, name: str) -> Mapping[str, Any]:
    if not isinstance(data, dict):
        msg = f"{name} must be a JSON object, got {type(data).__name__}"
        raise DecodeError(msg)
    return data


def _require_str_list(data: Mapping[str, Any], key: str) -> tuple[str, ...]:
    values = _require(data, key, list)
    if not all(isinstance(value, str) for value in values):
        msg = f"key {key!r} must be a list of strings"
        raise DecodeError(msg)
    return tuple(values)


def _timestamp(value: int) -> datetime:
    try:
        return datetime.fromtimestamp(value, tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as exc:
        msg = f"timestamp {value} is out of range"
        raise DecodeError(msg) from exc


def _visibility_from_wire(is_private: bool, is_public: bool) -> Visibility:
    if is_private and is_public:
        msg = "paste is marked both private and public"
        raise DecodeError(msg)
    if is_private:
        return Visibility.PRIVATE
    if is_public:
        return Visibility.PUBLIC
    return Visibility.UNLISTED


def _visibility_to_wire(visibility: Visibility) -> dict[str, bool]:
    return {
        "isPrivate": visibility is Visibility.PRIVATE,
        "isPublic": visibility is Visibility.PUBLIC,
    }


@dataclass(frozen=True)
class Pasty:
    r"""A single code snippet of a paste.

    Args:
        code: The content of the pasty.
        title: The title of the pasty.
        language: The language name, preferably one of the
            ``LanguageTable`` names. It is not checked locally.
        id: The identifier assigned by PasteMyst. Leave it empty when
            creating a paste; keep the server value when editing one.

    Example:
        ```pycon
        >>> from pastemyst.models import Pasty
        >>> pasty = Pasty(code="print('hi')", title="hello.py", language="Python")
        >>> pasty.id
        ''

        ```
    """

    code: str
    title: str = ""
    language: str = AUTODETECT
    id: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> Pasty:
        r"""Decode a pasty JSON object."""
        data = _require_object(data, "pasty")
        return cls(
            id=_require(data, "_id", str),
            title=_require(data, "title", str),
            language=_require(data, "language", str),
            code=_require(data, "code", str),
        )

    def to_dict(self) -> dict[str, Any]:
        r"""Encode the pasty. ``_id`` is only sent once assigned."""
        data: dict[str, Any] = {}
        if self.id:
            data["_id"] = self.id
        data["title"] = self.title
        data["language"] = self.language
        data["code"] = self.code
        return data


@dataclass(frozen=True)
class EditHistory:
    r"""A single entry of the edit history of a paste.

    Several entries can share the same ``edit_id`` when multiple fields
    were changed at once. ``edit`` stores the value before the change.
    """

    id: str
    edit_id: str
    edit_type: EditType
    metadata: tuple[str, ...]
    edit: str
    edited_at: datetime

    @classmethod
    def from_dict(cls, data: Any) -> EditHistory:
        r"""Decode an edit JSON object."""
        data = _require_object(data, "edit")
        raw_type = _require(data, "editType", int)
        try:
            edit_type = EditType(raw_type)
        except ValueError as exc:
            msg = f"unknown edit type {raw_type}"
            raise DecodeError(msg) from exc
        return cls(
            id=_require(data, "_id", str),
            edit_id=_require(data, "editId", str),
            edit_type=edit_type,
            metadata=_require_str_list(data, "metadata"),
            edit=_require(data, "edit", str),
            edited_at=_timestamp(_require(data, "editedAt", int)),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "_id": self.id,
            "editId": self.edit_id,
            "editType": int(self.edit_type),
            "metadata": list(self.metadata),
            "edit": self.edit,
            "editedAt": int(self.edited_at.timestamp()),
        }


@dataclass(frozen=True)
class Paste:
    r"""A paste as returned by PasteMyst.

    Attributes:
        id: The identifier of the paste.
        owner_id: The identifier of the owner, ``None`` for anonymous
            pastes.
        title: The title of the paste.
        created_at: When the paste was created.
        expiration_policy: How the expiration is defined.
        expires_in: The relative expiration, ``None`` when the policy is
            ``TIMED_ABSOLUTE``.
        deletes_at: When the paste will be deleted, ``None`` if never.
        visibility: The visibility of the paste.
        tags: The tags of the paste.
        pasties: The pasties of the paste.
        stars: The number of stars the paste received.
        edits: The edit history of the paste.
    """

    id: str
    owner_id: str | None
    title: str
    created_at: datetime
    expiration_policy: ExpirationPolicy
    expires_in: ExpirationSpec | None
    deletes_at: datetime | None
    visibility: Visibility
    tags: tuple[str, ...]
    pasties: tuple[Pasty, ...]
    stars: int = 0
    edits: tuple[EditHistory, ...] = ()

    @property
    def url(self) -> str:
        r"""The address of the paste on the PasteMyst website."""
        return f"https://paste.myst.rs/{self.id}"

    @classmethod
    def from_dict(cls, data: Any) -> Paste:
        r"""Decode a paste JSON object.

        Args:
            data: The decoded JSON body.

        Returns:
            The paste.

        Raises:
            DecodeError: if the object does not match the paste schema,
                or if it is marked both private and public.

        Example:
            ```pycon
            >>> from pastemyst.models import Paste
            >>> paste = Paste.from_dict(
            ...     {
            ...         "_id": "abc",
            ...         "ownerId": "",
            ...         "title": "demo",
            ...         "createdAt": 0,
            ...         "expiresIn": "never",
            ...         "deletesAt": 0,
            ...         "isPrivate": False,
            ...         "isPublic": False,
            ...         "tags": [],
            ...         "pasties": [{"_id": "p1", "title": "", "language": "Python", "code": "1"}],
            ...     }
            ... )
            >>> paste.visibility
            <Visibility.UNLISTED: 'unlisted'>

            ```
        """
        data = _require_object(data, "paste")
        owner_id = _require(data, "ownerId", str)
        raw_expires_in = _require(data, "expiresIn", str)
        deletes_at = _require(data, "deletesAt", int)

        expires_in: ExpirationSpec | None
        if raw_expires_in.isascii() and raw_expires_in.isdigit():
            # absolute unix time instead of a relative code
            policy = ExpirationPolicy.TIMED_ABSOLUTE
            expires_in = None
            deletes_at = deletes_at or int(raw_expires_in)
        else:
            expires_in = from_wire(raw_expires_in)
            policy = (
                ExpirationPolicy.NEVER
                if isinstance(expires_in, Never)
                else ExpirationPolicy.TIMED_RELATIVE
            )

        stars = data.get("stars", 0)
        if not isinstance(stars, int) or isinstance(stars, bool):
            msg = f"key 'stars' has type {type(stars).__name__}, expected int"
            raise DecodeError(msg)
        edits = data.get("edits", [])
        if not isinstance(edits, list):
            msg = f"key 'edits' has type {type(edits).__name__}, expected list"
            raise DecodeError(msg)

        return cls(
            id=_require(data, "_id", str),
            owner_id=owner_id or None,
            title=_require(data, "title", str),
            created_at=_timestamp(_require(data, "createdAt", int)),
            expiration_policy=policy,
            expires_in=expires_in,
            deletes_at=_timestamp(deletes_at) if deletes_at else None,
            visibility=_visibility_from_wire(
                _require(data, "isPrivate", bool), _require(data, "isPublic", bool)
            ),
            tags=_require_str_list(data, "tags"),
            pasties=tuple(Pasty.from_dict(pasty) for pasty in _require(data, "pasties", list)),
            stars=stars,
            edits=tuple(EditHistory.from_dict(edit) for edit in edits),
        )

    def to_dict(self) -> dict[str, Any]:
        r"""Encode the paste in the format returned by PasteMyst."""
        if self.expires_in is None:
            expires_in = str(int(self.deletes_at.timestamp())) if self.deletes_at else "0"
        else:
            expires_in = to_wire(self.expires_in)
        return {
            "_id": self.id,
            "ownerId": self.owner_id or "",
            "title": self.title,
            "createdAt": int(self.created_at.timestamp()),
            "expiresIn": expires_in,
            "deletesAt": int(self.deletes_at.timestamp()) if self.deletes_at else 0,
            "stars": self.stars,
            **_visibility_to_wire(self.visibility),
            "tags": list(self.tags),
            "pasties": [pasty.to_dict() for pasty in self.pasties],
            "edits": [edit.to_dict() for edit in self.edits],
        }


@dataclass(frozen=True)
class User:
    r"""The public profile of a PasteMyst user.

    Attributes:
        id: The identifier of the user.
        username: The username.
        avatar_url: The address of the avatar image.
        default_language: The default pasty language of the user.
        supporter_length: For how long the user has been a supporter,
            0 if not a supporter.
        flags: The capabilities of the user.
    """

    id: str
    username: str
    avatar_url: str
    default_language: str
    supporter_length: int
    flags: UserFlag = UserFlag.NONE

    @property
    def is_contributor(self) -> bool:
        return UserFlag.CONTRIBUTOR in self.flags

    @property
    def is_supporter(self) -> bool:
        return UserFlag.SUPPORTER in self.flags

    @property
    def has_public_profile(self) -> bool:
        return UserFlag.PUBLIC_PROFILE in self.flags

    @classmethod
    def from_dict(cls, data: Any) -> User:
        r"""Decode a user JSON object."""
        data = _require_object(data, "user")
        supporter_length = _require(data, "supporterLength", int)
        flags = UserFlag.NONE
        if _require(data, "contributor", bool):
            flags |= UserFlag.CONTRIBUTOR
        if supporter_length > 0:
            flags |= UserFlag.SUPPORTER
        if _require(data, "publicProfile", bool):
            flags |= UserFlag.PUBLIC_PROFILE
        return cls(
            id=_require(data, "_id", str),
            username=_require(data, "username", str),
            avatar_url=_require(data, "avatarUrl", str),
            default_language=_require(data, "defaultLang", str),
            supporter_length=supporter_length,
            flags=flags,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "_id": self.id,
            "username": self.username,
            "avatarUrl": self.avatar_url,
            "defaultLang": self.default_language,
            "publicProfile": self.has_public_profile,
            "supporterLength": self.supporter_length,
            "contributor": self.is_contributor,
        }


@dataclass(frozen=True)
class CreatePaste:
    r"""The payload sent to create a paste.

    Args:
        pasties: The pasties of the new paste. At least one is required.
        title: The title of the paste.
        expires_in: When the paste expires: an ``ExpiresIn`` code, an
            expiration expression, or a spec. It must resolve to one of
            the values PasteMyst accepts. A string equal to an
            ``ExpiresIn`` code keeps its wire meaning, where ``m`` is a
            month: ``"1m"`` is one month, not one minute as in
            ``parse_expiration``. Pass ``"1M"`` or a ``Duration`` to
            avoid the ambiguity.
        visibility: The visibility of the paste. ``PUBLIC`` and
            ``PRIVATE`` require an auth token.
        tags: The tags of the paste. PasteMyst only keeps them on pastes
            owned by an account.

    Example:
        ```pycon
        >>> from pastemyst.models import CreatePaste, Pasty
        >>> payload = CreatePaste(pasties=[Pasty(code="fn main() {}", language="Rust")], expires_in="1d")
        >>> payload.to_dict()["expiresIn"]
        '1d'

        ```
    """

    pasties: Sequence[Pasty]
    title: str = ""
    expires_in: str | ExpirationSpec = NEVER
    visibility: Visibility = Visibility.UNLISTED
    tags: Sequence[str] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "pasties", tuple(self.pasties))
        object.__setattr__(self, "tags", tuple(self.tags))

    @property
    def requires_auth(self) -> bool:
        r"""Whether the payload asks to associate the paste with an
        account."""
        return self.visibility is not Visibility.UNLISTED

    def validate(self) -> None:
        r"""Check the payload before it is sent.

        Raises:
            ValidationError: if there is no pasty, or if the expiration
                is invalid or not accepted by PasteMyst.
        """
        if not self.pasties:
            msg = "a paste must contain at least one pasty"
            raise ValidationError(msg)
        self.expiration_code()

    def expiration_code(self) -> str:
        r"""Return the wire code of the expiration.

        Raises:
            ValidationError: if the expiration is invalid or not
                accepted by PasteMyst.
        """
        try:
            spec = coerce_expiration(self.expires_in)
        except ParseError as exc:
            raise ValidationError(str(exc)) from exc
        return to_wire(spec)

    def to_dict(self) -> dict[str, Any]:
        r"""Encode the payload.

        Raises:
            ValidationError: if the payload is invalid.
        """
        self.validate()
        return {
            "title": self.title,
            "expiresIn": self.expiration_code(),
            **_visibility_to_wire(self.visibility),
            "tags": ",".join(self.tags),
            "pasties": [pasty.to_dict() for pasty in self.pasties],
        }


@dataclass(frozen=True)
class EditPaste:
    r"""The payload sent to edit a paste.

    Fields left to ``None`` are not sent and stay unchanged. PasteMyst
    cannot update a single pasty: when ``pasties`` is set it must hold
    every pasty of the paste with its identifier.

    Args:
        title: The new title.
        visibility: The new visibility.
        tags: The new tags.
        pasties: The new pasties, identified by their ``id``.
    """

    title: str | None = None
    visibility: Visibility | None = None
    tags: Sequence[str] | None = None
    pasties: Sequence[Pasty] | None = None

    def __post_init__(self) -> None:
        if self.tags is not None:
            object.__setattr__(self, "tags", tuple(self.tags))
        if self.pasties is not None:
            object.__setattr__(self, "pasties", tuple(self.pasties))

    @classmethod
    def from_paste(cls, paste: Paste) -> EditPaste:
        r"""Create a payload holding every editable field of a paste."""
        return cls(
            title=paste.title,
            visibility=paste.visibility,
            tags=paste.tags,
            pasties=paste.pasties,
        )

    def validate(self) -> None:
        r"""Check the payload before it is sent.

        Raises:
            ValidationError: if ``pasties`` is empty or holds a pasty
                without identifier.
        """
        if self.pasties is None:
            return
        if not self.pasties:
            msg = "a paste must contain at least one pasty"
            raise ValidationError(msg)
        if any(not pasty.id for pasty in self.pasties):
            msg = "every edited pasty needs the identifier assigned by PasteMyst"
            raise ValidationError(msg)

    def to_dict(self) -> dict[str, Any]:
        r"""Encode the payload.

        Raises:
            ValidationError: if the payload is invalid.
        """
        self.validate()
        data: dict[str, Any] = {}
        if self.title is not None:
            data["title"] = self.title
        if self.visibility is not None:
            data.update(_visibility_to_wire(self.visibility))
        if self.tags is not None:
            data["tags"] = ",".join(self.tags)
        if self.pasties is not None:
            data["pasties"] = [pasty.to_dict() for pasty in self.pasties]
        return data

