import os


def file_exists(directory, name):
    """True iff ``directory/name`` is an existing regular file."""
    # isfile() follows symlinks and reports stat errors as False.
    return os.path.isfile(os.path.join(directory, name))


def all_files_exist(directory, names):
    """True iff every name in ``names`` is a regular file inside ``directory``."""
    return all(file_exists(directory, name) for name in names)


def find_first_dir_index(directories, names):
    """
    Index of the first directory that holds every file in ``names``.

    Empty entries (as produced by ``"a;;b".split(";")``) are never matched
    but still count towards the index, so the result always points into the
    list that was passed in.
    """
    for index, directory in enumerate(directories):
        if directory and all_files_exist(directory, names):
            return index
    return None
