"""Reading and writing CITATION.cff files."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

import structlog

from cffkit.models.index import Index
from cffkit.validation import ValidationResult, Validator

logger = structlog.get_logger(__name__)

CFF_FILENAME = "CITATION.cff"
YAML_HEADER = "---\n"


def _split_comment(text: str) -> tuple[list[str], str]:
    """Separate the leading ``#`` comment block from the YAML body."""
    comment: list[str] = []
    lines = text.splitlines(keepends=True)
    for line in lines:
        if not line.startswith("#"):
            break
        comment.append(line[1:].strip())
    return comment, "".join(lines[len(comment) :])


def _render(index: Index | str, comment: list[str]) -> str:
    body = index if isinstance(index, str) else index.to_yaml()
    if body.startswith(YAML_HEADER):
        body = body[len(YAML_HEADER) :]
    header = "".join(f"# {line}".rstrip() + "\n" for line in comment)
    if header:
        header += "\n"
    return header + body


class CffFile:
    """A CITATION.cff file on disk and the Index it holds.

    Attribute access that the file does not handle itself is passed on to
    the Index, so ``cff.title`` and ``cff.to_bibtex()`` both work.
    """

    def __init__(
        self,
        filename: str | Path,
        index: Index | str | None = None,
        comment: list[str] | None = None,
    ) -> None:
        self.filename = Path(filename)
        self.index = index if isinstance(index, Index) else Index(index)
        self.comment = list(comment or [])

    @classmethod
    def read(cls, path: str | Path) -> CffFile:
        path = Path(path)
        comment, body = _split_comment(path.read_text(encoding="utf-8"))
        logger.debug("file.read", path=str(path))
        return cls(path, Index.read(body), comment=comment)

    @classmethod
    @contextmanager
    def open(cls, path: str | Path) -> Iterator[CffFile]:
        """Read ``path`` (or start a new file there) and save it on exit."""
        path = Path(path)
        cff = cls.read(path) if path.is_file() else cls(path)
        yield cff
        cff.save()

    @staticmethod
    def write(path: str | Path, index: Index | str, comment: list[str] | None = None) -> None:
        """Write ``index``, or already rendered YAML, to ``path``."""
        path = Path(path)
        path.write_text(_render(index, list(comment or [])), encoding="utf-8")
        logger.info("file.write", path=str(path))

    def save(self) -> None:
        self.write(self.filename, self.index, self.comment)

    @property
    def invalid_filename(self) -> bool:
        return self.filename.name != CFF_FILENAME

    def validate(
        self,
        fail_fast: bool = False,
        fail_on_filename: bool = True,
        validate_as: str | None = None,
        validator: Validator | None = None,
    ) -> tuple[bool, list[Any], bool]:
        """Validate the Index and the file name.

        Returns ``(ok, errors, invalid_filename)``; a badly named file only
        fails validation when ``fail_on_filename`` is set.
        """
        result: ValidationResult = self.index.validate(
            fail_fast=fail_fast, validate_as=validate_as, validator=validator
        )
        invalid_filename = self.invalid_filename
        ok = result.ok and not (fail_on_filename and invalid_filename)
        return ok, result.errors, invalid_filename

    def validate_or_raise(
        self,
        fail_fast: bool = False,
        fail_on_filename: bool = True,
        validate_as: str | None = None,
        validator: Validator | None = None,
    ) -> None:
        result = self.index.validate(fail_fast=fail_fast, validate_as=validate_as, validator=validator)
        result.raise_for_errors(invalid_filename=fail_on_filename and self.invalid_filename)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_") or name == "index":
            raise AttributeError(name)
        return getattr(self.index, name)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in ("filename", "index", "comment"):
            object.__setattr__(self, name, value)
        else:
            setattr(self.index, name, value)

    def __repr__(self) -> str:
        return f"CffFile({str(self.filename)!r})"

