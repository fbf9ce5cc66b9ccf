"""Built-in codecs. Importing this package registers every one of them."""

from . import bitpack, numeral, bigint, substitution, escape

__all__ = ["bitpack", "numeral", "bigint", "substitution", "escape"]
