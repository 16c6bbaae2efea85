"""
Seller identifier (public username) rules.

The identifier is the path segment of a public catalog URL, so it is kept to
lowercase ASCII letters, digits and underscore.
"""

import re


IDENTIFIER_MAX_LENGTH = 20
IDENTIFIER_MIN_LENGTH = 3
IDENTIFIER_PATTERN = re.compile(r'^[a-z0-9_]+$')

_DISALLOWED_CHARS = re.compile(r'[^a-z0-9_]')


def normalize_identifier(raw: str) -> str:
    """Lower-case, drop characters outside [a-z0-9_] and truncate to 20 characters.

    >>> normalize_identifier('Loja da Ana!')
    'lojadaana'
    """
    return _DISALLOWED_CHARS.sub('', raw.lower())[:IDENTIFIER_MAX_LENGTH]


def is_well_formed_identifier(identifier: str) -> bool:
    return bool(IDENTIFIER_PATTERN.fullmatch(identifier))
