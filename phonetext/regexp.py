"""A small regular expression interface with a default implementation on ``re``.

The interface covers only what phone number handling needs: consuming a
match from the front of some input, matching a whole or partial string, and
replacing matches. Group references in replacement strings use the ``$N``
notation, where N is a single digit.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Callable

_GROUP_REF = re.compile(r"\$(\d)")


class RegExpInput:
    """Text that a regular expression consumes from the front."""

    __slots__ = ("_text", "_pos")

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    @property
    def remaining(self) -> str:
        """The part of the text not consumed yet."""
        return self._text[self._pos :]

    @property
    def consumed(self) -> str:
        """The part of the text consumed so far."""
        return self._text[: self._pos]

    def _advance(self, count: int) -> None:
        self._pos = min(self._pos + count, len(self._text))

    def __str__(self) -> str:
        return self.remaining

    def __repr__(self) -> str:
        return f"RegExpInput({self.remaining!r})"


class RegExp(ABC):
    """A compiled regular expression."""

    @abstractmethod
    def consume(
        self, text_input: RegExpInput, anchor_at_start: bool = True
    ) -> tuple[str, ...] | None:
        """Match against ``text_input`` and move it past the match.

        With ``anchor_at_start`` the match must begin at the start of the
        remaining text; otherwise it may begin anywhere. Returns the captured
        groups, with ``""`` for groups that took no part, or None when there
        is no match (the input is then left as it was).
        """

    def find_and_consume(self, text_input: RegExpInput) -> tuple[str, ...] | None:
        """Consume the first match found anywhere in the remaining text."""
        return self.consume(text_input, anchor_at_start=False)

    @abstractmethod
    def match(self, text: str, full_match: bool = False) -> str | None:
        """Match ``text`` and return the matched string, or None.

        With ``full_match`` the whole of ``text`` must match. The returned
        string is the first captured group if the pattern has one, else the
        whole match.
        """

    def partial_match(self, text: str) -> str | None:
        """Match anywhere inside ``text``."""
        return self.match(text, full_match=False)

    def full_match(self, text: str) -> str | None:
        """Match the whole of ``text``."""
        return self.match(text, full_match=True)

    @abstractmethod
    def replace(
        self, text: str, replacement: str, replace_all: bool = False
    ) -> str | None:
        """Replace the first match, or every match with ``replace_all``.

        Returns the new text, or None when the pattern does not match.
        """

    def global_replace(self, text: str, replacement: str) -> str | None:
        """Replace every match in ``text``."""
        return self.replace(text, replacement, replace_all=True)


class PythonRegExp(RegExp):
    """A regular expression backed by the standard ``re`` module."""

    __slots__ = ("_regex",)

    def __init__(self, pattern: str) -> None:
        try:
            self._regex = re.compile(pattern)
        except re.error as exc:
            raise ValueError(f"invalid regular expression {pattern!r}: {exc}") from exc

    @property
    def pattern(self) -> str:
        """The source pattern."""
        return self._regex.pattern

    def consume(
        self, text_input: RegExpInput, anchor_at_start: bool = True
    ) -> tuple[str, ...] | None:
        remaining = text_input.remaining
        found = (
            self._regex.match(remaining)
            if anchor_at_start
            else self._regex.search(remaining)
        )
        if found is None:
            return None
        text_input._advance(found.end())
        return found.groups(default="")

    def match(self, text: str, full_match: bool = False) -> str | None:
        found = self._regex.fullmatch(text) if full_match else self._regex.search(text)
        if found is None:
            return None
        if self._regex.groups:
            return found.group(1) or ""
        return found.group(0)

    def replace(
        self, text: str, replacement: str, replace_all: bool = False
    ) -> str | None:
        expand = self._expander(replacement)
        result, count = self._regex.subn(expand, text, count=0 if replace_all else 1)
        return result if count else None

    def _expander(self, replacement: str) -> Callable[[re.Match[str]], str]:
        bad = [
            int(ref)
            for ref in _GROUP_REF.findall(replacement)
            if int(ref) > self._regex.groups
        ]
        if bad:
            raise ValueError(
                f"replacement refers to group {bad[0]}, "
                f"but the pattern has {self._regex.groups}"
            )

        def expand(found: re.Match[str]) -> str:
            return _GROUP_REF.sub(
                lambda ref: found.group(int(ref.group(1))) or "", replacement
            )

        return expand

    def __repr__(self) -> str:
        return f"PythonRegExp({self._regex.pattern!r})"


class RegExpFactory:
    """Creates regular expressions and their inputs."""

    def create_input(self, text: str) -> RegExpInput:
        """Return a consumable input over ``text``."""
        return RegExpInput(text)

    def create_regexp(self, pattern: str) -> RegExp:
        """Compile ``pattern``; raises ValueError if it is invalid."""
        return PythonRegExp(pattern)