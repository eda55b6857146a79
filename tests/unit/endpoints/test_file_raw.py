"""Precise unit tests for the FileRaw endpoint."""

import pytest

from tanuki.api.core.exceptions import MissingFieldError
from tanuki.api.endpoints import FileRaw
from tanuki.api.runtime.rest.runner import raw
from tanuki.api.testing import ExpectedUrl, SingleTestClient

FILE_ENDPOINT = "projects/simple%2Fproject/repository/files/path%2Fto%2Ffile/raw"


def test_project_is_necessary():
    with pytest.raises(MissingFieldError) as exc_info:
        FileRaw.builder().file_path("new/file").build()
    assert exc_info.value.field == "project"


def test_file_path_is_necessary():
    with pytest.raises(MissingFieldError) as exc_info:
        FileRaw.builder().project(1).build()
    assert exc_info.value.field == "file_path"


def test_sufficient_parameters():
    FileRaw.builder().project("simple/project").file_path("new/file").build()


def test_endpoint():
    client = SingleTestClient(ExpectedUrl(endpoint=FILE_ENDPOINT), b"file contents\n")

    endpoint = FileRaw.builder().project("simple/project").file_path("path/to/file").build()

    assert raw(endpoint).query(client) == b"file contents\n"


@pytest.mark.parametrize(
    ("options", "query"),
    [
        ({"ref": "branch"}, (("ref", "branch"),)),
        ({"lfs": True}, (("lfs", "true"),)),
        ({"lfs": False, "ref": "v1.0"}, (("ref", "v1.0"), ("lfs", "false"))),
    ],
)
def test_endpoint_query(options, query):
    client = SingleTestClient(ExpectedUrl(endpoint=FILE_ENDPOINT, query=query), b"")

    endpoint = (
        FileRaw.builder()
        .project("simple/project")
        .file_path("path/to/file")
        .set(**options)
        .build()
    )
    raw(endpoint).query(client)

    assert len(client.requests) == 1


def test_special_characters_in_path():
    endpoint = FileRaw.builder().project(5).file_path("dir name/#notes?.md").build()
    assert endpoint.endpoint_path() == "projects/5/repository/files/dir%20name%2F%23notes%3F.md/raw"


@pytest.mark.asyncio
async def test_endpoint_async():
    client = SingleTestClient(ExpectedUrl(endpoint=FILE_ENDPOINT), b"\x89PNG")
    endpoint = FileRaw.builder().project("simple/project").file_path("path/to/file").build()
    assert await raw(endpoint).query_async(client) == b"\x89PNG"
