r"""Unit tests for the language table."""

from __future__ import annotations

import pytest

from pastemyst import language
from pastemyst.language import (
    AUTODETECT,
    PLAIN,
    RUST,
    LanguageInfo,
    LanguageTable,
    get_language_by_extension,
    get_language_by_name,
    get_languages,
)


@pytest.fixture
def table() -> LanguageTable:
    return LanguageTable(
        [
            LanguageInfo(
                name="Zig", mode="zig", aliases=frozenset({"ziglang"}), extensions=frozenset({"zig"})
            ),
            LanguageInfo(
                name="Zag",
                mode="zag",
                aliases=frozenset({"zig"}),
                extensions=frozenset({"zig", "zag"}),
            ),
        ]
    )


###################################
#     Tests for LanguageTable     #
###################################


def test_language_table_len(table: LanguageTable) -> None:
    assert len(table) == 2


def test_language_table_iter_keeps_order(table: LanguageTable) -> None:
    assert [info.name for info in table] == ["Zig", "Zag"]


def test_language_table_names(table: LanguageTable) -> None:
    assert table.names() == ("Zig", "Zag")


def test_language_table_repr(table: LanguageTable) -> None:
    assert repr(table) == "LanguageTable(num_languages=2)"


def test_language_table_contains(table: LanguageTable) -> None:
    assert "ZIGLANG" in table
    assert "python" not in table
    assert 42 not in table


def test_language_table_first_entry_wins(table: LanguageTable) -> None:
    assert table.find_by_name("zig").name == "Zig"
    assert table.find_by_extension("zig").name == "Zig"
    assert table.find_by_extension("zag").name == "Zag"


def test_language_table_empty() -> None:
    table = LanguageTable([])
    assert len(table) == 0
    assert table.find_by_name("rust") is None


def test_language_table_default_is_shared() -> None:
    assert LanguageTable.default() is LanguageTable.default()


##############################################
#     Tests for the default language table   #
##############################################


def test_find_by_name_is_case_insensitive() -> None:
    table = LanguageTable.default()
    assert table.find_by_name("RuSt") == table.find_by_name("rust")
    assert table.find_by_name("RUST").name == RUST


def test_find_by_name_ignores_surrounding_whitespace() -> None:
    assert LanguageTable.default().find_by_name("  rust ").name == RUST


def test_find_by_name_alias() -> None:
    assert get_language_by_name("py").name == "Python"
    assert get_language_by_name("plaintext").name == PLAIN


def test_find_by_name_unknown_returns_none() -> None:
    assert get_language_by_name("not a language") is None


def test_find_by_extension_is_case_insensitive() -> None:
    assert get_language_by_extension("RS") == get_language_by_extension("rs")


def test_find_by_extension_accepts_leading_dot() -> None:
    assert get_language_by_extension(".rs").name == RUST


def test_find_by_extension_unknown_returns_none() -> None:
    assert get_language_by_extension("xyz123") is None


def test_find_by_extension_header_is_c() -> None:
    assert get_language_by_extension("h").name == "C"


def test_rust_language_info() -> None:
    info = get_language_by_name("rust")
    assert info.mode == "rust"
    assert info.extensions == frozenset({"rs"})
    assert info.color == "#dea584"
    assert "text/x-rustsrc" in info.mimes


def test_get_languages() -> None:
    languages = get_languages()
    assert isinstance(languages, tuple)
    assert languages[0].name == AUTODETECT
    assert len({info.name for info in languages}) == len(languages)


def test_language_info_is_immutable() -> None:
    info = get_language_by_name("rust")
    with pytest.raises(AttributeError):
        info.name = "Rusty"  # type: ignore[misc]


LANGUAGE_CONSTANTS = sorted(name for name in language.__all__ if name.isupper())


@pytest.mark.parametrize("constant", LANGUAGE_CONSTANTS)
def test_language_constant_resolves(constant: str) -> None:
    name = getattr(language, constant)
    assert get_language_by_name(name).name == name


def test_default_table_covers_every_constant() -> None:
    names = {getattr(language, constant) for constant in LANGUAGE_CONSTANTS}
    assert names == set(LanguageTable.default().names())


@pytest.mark.parametrize(
    "name",
    ["Haxe", "APL", "Verilog", "TypeScript-JSX", "MySQL", "reStructuredText", "mscgen"],
)
def test_find_by_name_less_common_languages(name: str) -> None:
    assert get_language_by_name(name.upper()).name == name


def test_language_constant_synonyms() -> None:
    assert language.CLANG == language.C
    assert language.DLANG == language.D
    assert language.GITHUB_MARKDOWN == language.GFM


@pytest.mark.parametrize(
    ("extension", "name"),
    [
        ("m", "Objective-C"),
        ("v", "Verilog"),
        ("sv", "SystemVerilog"),
        ("tsx", "TypeScript-JSX"),
        ("hx", "Haxe"),
        ("conf", PLAIN),
        ("sig", "PGP"),
    ],
)
def test_find_by_extension_shared_extensions(extension: str, name: str) -> None:
    assert get_language_by_extension(extension).name == name
