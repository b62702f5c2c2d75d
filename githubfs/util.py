import json


def pretty_json(_object):
    return json.dumps(_object, indent=2, sort_keys=False)


# modes of open() that would change the file
WRITE_MODE_CHARS = set("wax+")


def is_write_mode(mode):
    return any(c in WRITE_MODE_CHARS for c in mode)
