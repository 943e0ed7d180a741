import pytest

from imagereloc.name import parse_name
from imagereloc.pathmapping import (
    flatten_repo_path,
    flatten_repo_path_preserve_tag_digest,
)

PREFIX = "test.host/testuser"
DIGEST = "sha256:1e725169f37aec55908694840bc808fb13ebf02cb1765df225437c56a796f870"
SOME_PATH = "test.host/testuser/some-user-some-path-3236c106420c1d0898246e1d2b6ba8b6"

LONG_MANY = (
    "some.registry.com/some-user/axxxxxxxxx/bxxxxxxxxx/cxxxxxxxxx/dxxxxxxxxx/"
    "exxxxxxxxx/fxxxxxxxxx/gxxxxxxxxx/hxxxxxxxxx/ixxxxxxxxx/jxxxxxxxxx/kxxxxxxxxx/lxxxxxxxxx/"
    "mxxxxxxxxx/nxxxxxxxxx/oxxxxxxxxx/pxxxxxxxxx/qxxxxxxxxx/rxxxxxxxxx/sxxxxxxxxx/txxxxxxxxx"
)
LONG_FEW = (
    "some.registry.com/some-user/axxxxxxxxxabxxxxxxxxxbcxxxxxxxxxcdxxxxxxxxxd"
    "exxxxxxxxxefxxxxxxxxx/gxxxxxxxxxghxxxxxxxxxhixxxxxxxxxijxxxxxxxxxjkxxxxxxxxxklxxxxxxxxxl"
    "mxxxxxxxxxmnxxxxxxxxxnoxxxxxxxxxopxxxxxxxxxpqxxxxxxxxxqrxxxxxxxxxrsxxxxxxxxx/txxxxxxxxx"
)
LONG_TWO = (
    "some.registry.com/some-user/axxxxxxxxxabxxxxxxxxxbcxxxxxxxxxcdxxxxxxxxxd"
    "exxxxxxxxxefxxxxxxxxxfgxxxxxxxxxghxxxxxxxxxhixxxxxxxxxijxxxxxxxxxjkxxxxxxxxxklxxxxxxxxxl"
    "mxxxxxxxxxmnxxxxxxxxxnoxxxxxxxxxopxxxxxxxxxpqxxxxxxxxxqrxxxxxxxxxrsxxxxxxxxxstxxxxxxxxx"
)
LONG_THREE = (
    "some.registry.com/some-user/axxxxxxxxxabxxxxxxxxxbcxxxxxxxxxcdxxxxxxxxxd"
    "exxxxxxxxxefxxxxxxxxxfgxxxxxxxxxghxxxxxxxxxhixxxxxxxxxijxxxxxxxxxjkxxxxxxxxxklxxxxxxxxxl"
    "mxxxxxxxxxmnxxxxxxxxxnoxxxxxxxxxopxxxxxxxxxpqxxxxxxxxxqrxxxxxxxxxrsxxxxxxxxx/txxxxxxxxx"
)
LONG_FIRST = (
    "some.registry.com/axxxxxxxxxabxxxxxxxxxbcxxxxxxxxxcdxxxxxxxxxd"
    "exxxxxxxxxefxxxxxxxxxfgxxxxxxxxxghxxxxxxxxxhixxxxxxxxxijxxxxxxxxxjkxxxxxxxxxklxxxxxxxxxl"
    "mxxxxxxxxxmnxxxxxxxxxnoxxxxxxxxxopxxxxxxxxxpqxxxxxxxxxqrxxxxxxxxxrsxxxxxxxxxstxxxxxxxxx/suffix"
)


@pytest.mark.parametrize(
    ("original", "expected"),
    [
        ("some.registry.com/some-user",
         "test.host/testuser/some-user-9482d6a53a1789fb7304a4fe88362903"),
        ("some.registry.com/some-user/some/path", SOME_PATH),
        ("some.registry.com/some-user/some/path:v1", SOME_PATH),
        (f"some.registry.com/some-user/some/path@{DIGEST}", SOME_PATH),
        (f"some.registry.com/some-user/some/path:v1@{DIGEST}", SOME_PATH),
        (LONG_MANY,
         "test.host/testuser/some-user-axxxxxxxxx-bxxxxxxxxx-cxxxxxxxxx-dxxxxxxxxx-exxxxxxxxx-"
         "fxxxxxxxxx-gxxxxxxxxx-hxxxxxxxxx-ixxxxxxxxx-jxxxxxxxxx-kxxxxxxxxx-lxxxxxxxxx-mxxxxxxxxx-"
         "nxxxxxxxxx-oxxxxxxxxx-pxxxxxxxxx---txxxxxxxxx-b0d16e8b4d43f2ec842cfcc61989a966"),
        (LONG_FEW,
         "test.host/testuser/some-user-axxxxxxxxxabxxxxxxxxxbcxxxxxxxxxcdxxxxxxxxxdexxxxxxxxx"
         "efxxxxxxxxx---txxxxxxxxx-4817a2fce97ff7aae687d14e66328781"),
        (LONG_TWO, "test.host/testuser/some-user-a363dc80420c33618202ba2828aec456"),
        (LONG_THREE, "test.host/testuser/some-user---txxxxxxxxx-5134b4594954926468fe0bdc23f640ef"),
        (LONG_FIRST, "test.host/testuser/suffix-3fa7b8289050d7d4fe5d56f3098397a0"),
    ],
)
def test_flatten_repo_path(original, expected):
    mapped = str(flatten_repo_path(PREFIX, parse_name(original)))
    assert mapped == expected
    assert str(parse_name(mapped)) == mapped


EXPECTED_MAPPED = "test.host/testuser/some-user-some-path-f4cdc2223f0c472921033d606fa74a89"


def _preserve(original):
    result = flatten_repo_path_preserve_tag_digest(PREFIX, parse_name(original))
    assert str(parse_name(str(result))) == str(result)
    return result


def test_preserve_neither_tag_nor_digest():
    result = _preserve("some.registry.com/some-user/some-path")
    assert str(result) == EXPECTED_MAPPED
    assert result.tag() == ""
    assert str(result.digest()) == ""


def test_preserve_tag():
    result = _preserve("some.registry.com/some-user/some-path:v1")
    assert result.tag() == "v1"
    assert str(result.digest()) == ""
    assert str(result.without_tag_or_digest()) == EXPECTED_MAPPED


def test_preserve_digest():
    result = _preserve(f"some.registry.com/some-user/some-path@{DIGEST}")
    assert result.tag() == ""
    assert str(result.digest()) == DIGEST
    assert str(result.without_tag_or_digest()) == EXPECTED_MAPPED


def test_preserve_tag_and_digest():
    result = _preserve(f"some.registry.com/some-user/some-path:v1@{DIGEST}")
    assert result.tag() == "v1"
    assert str(result.digest()) == DIGEST
    assert str(result.without_tag_or_digest()) == EXPECTED_MAPPED