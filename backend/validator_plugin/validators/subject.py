"""Subject resolution — turn an input value into the content to check."""

import os
from pathlib import Path

from pydantic import BaseModel, NonNegativeInt

from validator_plugin.validators.errors import SubjectUnreadableError


class Subject(BaseModel):
    """The content under validation, as seen by the checks."""

    input_name: str
    reference: str
    path: Path
    size: NonNegativeInt

    model_config = {"frozen": True}


def resolve_subject(input_name: str, reference: str) -> Subject:
    """Resolve a path reference and read its size.

    Raises:
        SubjectUnreadableError: the path is empty, missing, not a regular
            file, or cannot be stat'ed.
    """
    if not reference:
        raise SubjectUnreadableError(reference)

    path = Path(reference)
    try:
        if not path.is_file():
            raise FileNotFoundError(f"Not a regular file: {reference}")
        size = path.stat().st_size
        if not os.access(path, os.R_OK):
            raise PermissionError(f"Permission denied: {reference}")
    except OSError as e:
        raise SubjectUnreadableError(reference, e) from e

    return Subject(input_name=input_name, reference=reference, path=path, size=size)
