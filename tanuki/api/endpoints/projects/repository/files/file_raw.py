"""Raw repository file endpoint definition."""

from __future__ import annotations

from dataclasses import dataclass

from .....core.common import NameOrId, path_escaped
from .....core.endpoint import Endpoint, optional, required
from .....core.enums import Method
from .....core.params import QueryParams


@dataclass(frozen=True)
class FileRaw(Endpoint):
    """Get a raw file from a repository.

    The response is the file content itself, so execute it with ``raw()``
    rather than decoding JSON.
    """

    # The project to get a file within.
    project: NameOrId = required(convert=NameOrId.of)
    # The path to the file in the repository; escaped automatically.
    file_path: str = required()
    # The ref to get the file from.
    ref: str | None = optional()
    # If true, resolve LFS pointers to their backing data.
    lfs: bool | None = optional()

    def method(self) -> Method:
        return Method.GET

    def endpoint_path(self) -> str:
        return f"projects/{self.project}/repository/files/{path_escaped(self.file_path)}/raw"

    def parameters(self) -> QueryParams:
        params = QueryParams()
        params.push_opt("ref", self.ref).push_opt("lfs", self.lfs)
        return params
