"""Source file set model.

Lists every input file of a build, per asset family, in declared order.
"""

from collections.abc import Iterator

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field


class SourceFileSet(BaseModel):
    """Ordered source files per asset family.

    Paths are relative to the client directory or absolute. ``libs`` maps a
    served library name to the files concatenated into it; ``rewrite_urls``
    names the library entries whose relative ``url(`` references point at
    sibling library entries.
    """

    model_config = ConfigDict(frozen=True)

    scripts: list[str] = Field(default_factory=list)
    styles: list[str] = Field(default_factory=list)
    other: list[str] = Field(default_factory=list)
    libs: dict[str, list[str]] = Field(default_factory=dict)
    rewrite_urls: list[str] = Field(default_factory=list)

    def tracked_files(self) -> Iterator[str]:
        """Yield every file the bundles are built from, libraries included."""
        yield from self.scripts
        yield from self.styles
        yield from self.other
        for files in self.libs.values():
            yield from files
