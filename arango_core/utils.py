"""Utility Functions."""

from re import sub


def camelify(text):
    """Convert a snake_case string to camelCase.

    :param text: the string to convert
    :type text: str
    :returns: the camelCase string
    :rtype: str
    """
    return sub(r'_(.)', lambda match: match.group(1).upper(), text)


def filter_keys(data, allowed):
    """Split ``data`` into the allowed entries and the dropped key names.

    :param data: the options to filter
    :type data: dict
    :param allowed: the allowed key names
    :type allowed: tuple or set
    :returns: the allowed entries and the names of the dropped keys
    :rtype: (dict, list)
    """
    kept = {}
    dropped = []
    for key, value in data.items():
        if key in allowed:
            kept[key] = value
        else:
            dropped.append(key)
    return kept, dropped


def normalize_path(path):
    """Return the resource path with exactly one leading slash.

    :param path: the server-relative resource path
    :type path: str
    :returns: the normalized path
    :rtype: str
    """
    return '/' + path.lstrip('/')
