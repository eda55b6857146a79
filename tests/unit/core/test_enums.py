"""Precise unit tests for core enums."""

from tanuki.api.core.enums import AccessLevel, EnableState, Method, PaginationKind, YesNo
from tanuki.api.core.params import QueryParams


def test_method_string_value():
    assert str(Method.DELETE) == "DELETE"
    assert Method("PATCH") is Method.PATCH


def test_pagination_kind_values():
    assert str(PaginationKind.KEYSET) == "keyset"


def test_access_level_ordering_and_names():
    assert AccessLevel.DEVELOPER < AccessLevel.MAINTAINER
    assert AccessLevel(30) is AccessLevel.DEVELOPER
    assert AccessLevel.NO_ACCESS.as_str() == "no access"


def test_yes_no_from_bool():
    assert YesNo.from_bool(True) is YesNo.YES
    assert str(YesNo.from_bool(False)) == "no"


def test_value_enums_render_as_parameters():
    params = QueryParams()
    params.push("state", EnableState.DISABLED).push("confirm", YesNo.from_bool(True))
    params.push("min_access_level", AccessLevel.REPORTER)
    assert params.encode() == "state=disabled&confirm=yes&min_access_level=20"
