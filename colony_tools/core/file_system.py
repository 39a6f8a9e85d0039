import os

from colony_tools.core.errors import InvalidDirectoryError, MissingFileError, MultipleFilesError


def _remove_extension(filename):
    base, _ = os.path.splitext(filename)
    return base


def find_files(root, file_extension=None, exact=None, prefix=None):
    """
    Lists the files directly inside root that match the given filters.

    file_extension narrows by suffix (e.g. ".json"). At most one of exact
    (basename without extension must equal it) or prefix (basename must
    start with it) may be given. Returns sorted absolute paths; an empty
    list when nothing matches.
    """
    if exact is not None and prefix is not None:
        raise ValueError("Only one of exact or prefix may be provided")

    if not os.path.isdir(root):
        raise InvalidDirectoryError(f"Provided folder: {root} is not valid")

    matched = []
    for filename in os.listdir(root):
        abs_path = os.path.abspath(os.path.join(root, filename))
        if not os.path.isfile(abs_path):
            continue
        if file_extension and not filename.endswith(file_extension):
            continue
        if exact is not None and _remove_extension(filename) != exact:
            continue
        if prefix is not None and not filename.startswith(prefix):
            continue
        matched.append(abs_path)

    return sorted(matched)


def find_single_file(root, name, file_extension):
    """
    Finds the one file named name + file_extension inside root.

    Raises MissingFileError if there is none and MultipleFilesError if the
    finder reports more than one.
    """
    files = find_files(root, file_extension=file_extension, exact=name)
    if not files:
        raise MissingFileError(f"No {name}{file_extension} file found in provided directory")
    if len(files) > 1:
        raise MultipleFilesError(f"Multiple {name}{file_extension} files found, ensure only one exists")
    return files[0]
