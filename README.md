# phonetext

Small building blocks for working with UTF-8 text at the codepoint level,
plus a minimal regular-expression interface with a compiled-pattern cache.

## Modules

- `phonetext.rune`: decode and encode single UTF-8 sequences.
  `decode_rune` returns a `DecodedRune(rune, consumed)`; a sequence cut short
  by the end of the data gives `(RUNE_ERROR, 0)`, any other malformed sequence
  `(RUNE_ERROR, 1)`. Also `decode_rune_checked`, `encode_rune`, `rune_len`,
  `runes_len` and `full_rune`.
- `phonetext.unilib`: codepoint and byte checks. "Interchange valid" rejects
  C0 controls other than HT, LF, FF and CR, the C1 controls, surrogates and
  non-characters (`is_valid_codepoint`, `is_interchange_valid_codepoint`,
  `one_char_len`, `is_trail_byte`, `span_interchange_valid`,
  `is_interchange_valid`).
- `phonetext.utf8scan`: `codepoint_count`, `decode_at`, and
  `coerce_to_interchange_valid`, which turns each bad byte or each
  non-interchange character into a single space.
- `phonetext.textiter`: `TextIterator` moves forward (`advance`) and backward
  (`retreat`) over UTF-8 bytes one codepoint at a time; `iter_codepoints` and
  `iter_codepoints_reversed` are generators over the same bytes.
- `phonetext.unicodetext.UnicodeText`: a UTF-8-backed codepoint container
  that is always valid for interchange. Invalid input is never rejected; it
  is repaired with spaces and a warning is logged.
- `phonetext.unicodestring.UnicodeString`: an indexable, editable codepoint
  string built on `UnicodeText` (`replace`, `set_char_at`, `substring`,
  `index_of`, ...).
- `phonetext.regexp`: the abstract `RegExp` interface, the `re`-based
  `PythonRegExp`, the consumable `RegExpInput` and `RegExpFactory`.
  Replacement strings refer to groups as `$0`–`$9`.
- `phonetext.regexp_cache`: `RegExpCache`, a thread-safe cache that compiles
  each pattern once through a factory.

## Installation

```
pip install phonetext
```

The package needs nothing beyond the standard library.

## Examples

```python
from phonetext.rune import decode_rune, encode_rune
from phonetext.utf8scan import coerce_to_interchange_valid

encode_rune(0x20AC)                  # b'\xe2\x82\xac'
decode_rune(b"\xe2\x82")             # DecodedRune(rune=65533, consumed=0)
coerce_to_interchange_valid(b"a\x01b")  # b'a b'
```

```python
from phonetext.unicodetext import UnicodeText
from phonetext.unicodestring import UnicodeString

text = UnicodeText.from_utf8("caf\u00e9".encode())
len(text)           # 4
list(text)          # [99, 97, 102, 233]
text.utf8()         # b'caf\xc3\xa9'

s = UnicodeString("+1 650")
s.index_of(ord("6"))  # 3
s.set_char_at(0, ord("0"))
s.to_utf8()           # b'01 650'
```

```python
from phonetext.regexp import PythonRegExp, RegExpFactory, RegExpInput
from phonetext.regexp_cache import RegExpCache

cache = RegExpCache(RegExpFactory(), 64)
digits = cache.get_regexp(r"(\d+)")
digits.full_match("12345")           # '12345'

source = RegExpInput("123abc")
digits.consume(source)               # ('123',)
str(source)                          # 'abc'

PythonRegExp(r"(\d)(\d)").global_replace("1234", "$2$1")  # '2143'
```

## What it does not do

This is a library only: it has no command-line tool, and it does not parse,
validate or format phone numbers itself. It supplies the text and
regular-expression pieces such code would build on.

## Running the tests

```
pip install -e .[test]
pytest
```