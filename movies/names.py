from .exceptions import MalformedNameError

NAME_SEPARATOR = ', '

FIRST_NAME_MAX_LENGTH = 50
LAST_NAME_MAX_LENGTH = 100
FULL_NAME_MAX_LENGTH = 150


def split_name_list(value):
    """Turn a comma-joined field such as "Jane Doe, John Smith" into a list of names."""
    if not value:
        return []
    return [name.strip() for name in value.split(',') if name.strip()]


def split_full_name(name):
    """
    Split "First Last" into (first_name, last_name, full_name).

    Everything after the first token is the last name, so "Guillermo del Toro"
    keeps "del Toro" together. The full name is whitespace-normalized and is
    the key people are looked up by (case-insensitively).
    """
    tokens = (name or '').split()
    if len(tokens) < 2:
        raise MalformedNameError(name)
    first_name = tokens[0]
    last_name = ' '.join(tokens[1:])
    full_name = ' '.join(tokens)
    if (len(first_name) > FIRST_NAME_MAX_LENGTH
            or len(last_name) > LAST_NAME_MAX_LENGTH
            or len(full_name) > FULL_NAME_MAX_LENGTH):
        raise MalformedNameError(
            name,
            f"'{full_name[:20]}...' is too long: first name up to {FIRST_NAME_MAX_LENGTH}, "
            f"last name up to {LAST_NAME_MAX_LENGTH}, full name up to {FULL_NAME_MAX_LENGTH} characters.",
        )
    return first_name, last_name, full_name


def join_names(names):
    return NAME_SEPARATOR.join(names)
