"""Logger lookup for the notitas package.

Every module logs under the ``notitas`` namespace: the engine as
``notitas.renumber`` and the insertion flow as ``notitas.insertion``. Both
emit only at DEBUG level and only when a document actually changes. No
handlers are installed here; the host application configures output.

Example:
    >>> import logging
    >>> logging.basicConfig(level=logging.DEBUG)
    >>> logging.getLogger("notitas").setLevel(logging.DEBUG)
    >>> from notitas import renumber
    >>> _ = renumber("a[^x]\\n\\n[^x]: X")  # doctest: +SKIP
    DEBUG:notitas.renumber:Renumbered 1 footnotes (1 definitions moved)
"""

from __future__ import annotations

import logging

_ROOT = "notitas"


def get_logger(name: str) -> logging.Logger:
    """Logger for name inside the ``notitas`` namespace.

    Module names from this package (``notitas.renumber``) are used as is;
    anything else is nested under the root, so ``get_logger("editor")``
    returns ``notitas.editor``.
    """
    if name != _ROOT and not name.startswith(_ROOT + "."):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
