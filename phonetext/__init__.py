"""UTF-8 codepoint text, interchange-validity checks and a cached regular-expression layer."""

__version__ = "0.1.0"

__all__ = [
    "rune",
    "unilib",
    "utf8scan",
    "textiter",
    "unicodetext",
    "unicodestring",
    "regexp",
    "regexp_cache",
]