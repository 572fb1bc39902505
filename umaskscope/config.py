"""Read umaskscope config files."""

import json
import os.path

from .utils import parse_umask

parsers = {".json": json.load}

# Errors a parser may raise for a file it can’t make sense of.
ParseError = (ValueError,)

# Optionally load support for yaml config files.
try:
    import ruamel.yaml

    # The base loader keeps every scalar a string: `umask: 022` must stay octal.
    yaml = ruamel.yaml.YAML(typ="base", pure=True)
    parsers[".yaml"] = parsers[".yml"] = yaml.load
    ParseError += (ruamel.yaml.YAMLError,)
except ImportError:
    pass


def get_parser(path):
    """Get a config file parser based on the file extension."""
    _, ext = os.path.splitext(path)
    return parsers[ext]


def read_config(path):
    """Read a config file and validate the umask it defines.

    The umask must be given as a string of octal digits. Numbers are rejected
    since json (and yaml 1.2) read them as decimals.
    """
    parser = get_parser(path)
    with open(path, encoding="utf-8") as config_file:
        data = parser(config_file)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")

    umask = data.setdefault("umask", None)
    if umask is not None:
        if not isinstance(umask, str):
            raise ValueError(f"{path}: umask must be a string of octal digits, got {umask!r}")
        data["umask"] = parse_umask(umask)
    return data
