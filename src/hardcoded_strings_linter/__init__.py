"""Pylint plugin flagging display strings and asset paths hardcoded into widget constructors.

Enable with ``load-plugins = ["hardcoded_strings_linter.infrastructure.checker"]``.
"""

__version__ = "0.3.0"
