"""Field-name normalisation rules.

Purpose
-------
Turn keys coming from a source format into the canonical camel-case field
names stored by :class:`lib_typed_config.core.Config`.

Contents
--------
* :func:`normalize_key` – collapse ``snake_case`` / ``dotted.case`` INI keys
  into ``camelCase``.
* :func:`strip_prefix` – rename a field for a slice by removing its prefix.
* :func:`lcfirst` – lower-case the first character only.

System Role
-----------
Pure functions with no I/O. The INI reader calls :func:`normalize_key` for
every parsed key and the slice extractor calls :func:`strip_prefix` for every
field of the source container.
"""

from __future__ import annotations


def lcfirst(text: str) -> str:
    """Return *text* with its first character lower-cased.

    Examples
    --------
    >>> lcfirst("ValueOne")
    'valueOne'
    >>> lcfirst("")
    ''
    """

    return text[:1].lower() + text[1:]


def normalize_key(key: str) -> str:
    """Return the canonical camel-case field name for an INI *key*.

    What
    ----
    The key is lower-cased wholesale, dots are folded into underscores, the
    result is split on underscores and every word after the first gets its
    first letter upper-cased. Words are joined without separators and the
    first letter of the whole result is lower-cased. Dots and underscores are
    therefore interchangeable and runs of separators collapse.

    Examples
    --------
    >>> normalize_key("db.connection_pool")
    'dbConnectionPool'
    >>> normalize_key("DEBUG")
    'debug'
    >>> normalize_key("_cache__ttl")
    'cacheTtl'
    >>> normalize_key("a.b_c.d")
    'aBCD'
    """

    words = key.lower().replace(".", "_").split("_")
    joined = words[0] + "".join(word[:1].upper() + word[1:] for word in words[1:])
    return lcfirst(joined)


def strip_prefix(name: str, prefix: str) -> str | None:
    """Return *name* without *prefix* (first letter lower-cased), or ``None``.

    The prefix match is ordinal and case-sensitive. ``None`` signals that the
    field does not belong to the slice.

    Examples
    --------
    >>> strip_prefix("prefixOneValueTwo", "prefixOne")
    'valueTwo'
    >>> strip_prefix("prefixTwoValueOne", "prefixOne") is None
    True
    >>> strip_prefix("PrefixOneValue", "prefixOne") is None
    True
    """

    if not name.startswith(prefix):
        return None
    return lcfirst(name[len(prefix) :])
