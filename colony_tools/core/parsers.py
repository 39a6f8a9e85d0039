import json
import os
from concurrent.futures import ThreadPoolExecutor

import json5
from pydantic import ValidationError

from colony_tools.core.config import JSON_FILE_EXTENSION
from colony_tools.core.errors import InvalidFileError


def read_json_file(filepath, schema):
    """
    Reads a .json game file and validates it against a pydantic TypeAdapter.

    Game files contain // and /* */ comments, so the text goes through json5
    rather than the json module. Returns the validated value.
    """
    if not os.path.isfile(filepath):
        raise InvalidFileError(f"File at path: {filepath} does not exist")

    if os.path.splitext(filepath)[1] != JSON_FILE_EXTENSION:
        raise InvalidFileError(f"File at path: {filepath} is not a .json file")

    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            parsed = json5.loads(f.read(), strict=False)
    except (UnicodeDecodeError, ValueError) as e:
        raise InvalidFileError(f"File at path: {filepath} is not valid JSON: {e}") from e

    try:
        return schema.validate_python(parsed)
    except ValidationError as e:
        raise InvalidFileError(f"File at path: {filepath} does not match provided schema") from e


def read_json_files(filepaths, schema):
    """
    Reads several files of the same kind concurrently.

    Results come back in the order of filepaths. The first failure is
    re-raised and the rest of the batch is discarded.
    """
    if not filepaths:
        return []

    with ThreadPoolExecutor() as executor:
        return list(executor.map(lambda path: read_json_file(path, schema), filepaths))


def write_json_file(filepath, content):
    """Serialises content to filepath. Returns False instead of raising on I/O errors."""
    try:
        with open(filepath, 'w', encoding='utf-8') as f:
            json.dump(content, f, ensure_ascii=False, indent=4)
    except OSError as e:
        print(f"Error writing {filepath}: {e}")
        return False

    return True
