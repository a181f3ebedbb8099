"""docingest/extraction/cleaning.py

Deterministic text normalization.

- clean_structured: full pass for text that already scores well
- clean_basic: the cheap subset (token removal + whitespace) used as the
  universal fallback
- sanitize_model_output: scrub a language-model reply down to plain prose

clean_structured strips PDF structure in one left-to-right stack scan, so a
token exposed by removing another ("EBTT" -> "ET") is caught in the same pass
and the run time stays linear in the input size.
"""

from __future__ import annotations

import re
from array import array

from docingest.extraction.quality import BINARY_PATTERN


# Longest first, so "endstream" wins over "stream".
_LITERAL_TOKENS: tuple[str, ...] = (
    "endstream", "endobj", "stream",
    "<<", ">>", "BT", "ET", "Td", "Tj", "TJ", "Tm", "Tc", "Tw", "Tz", "TL", "Ts", "Tr", "Tf",
)
_OBJ_KEYWORD = "obj"

# Character classes for the scan. Binary bytes are dropped before the scan,
# so everything it sees is printable ASCII plus \n \r \t.
_LETTER, _DIGIT, _SPACE, _OTHER = range(4)

_WHITESPACE_RUN = re.compile(r"\s+")
_CAPITAL_RUN_BOUNDARY = re.compile(r"(?<=[A-Z]{2})(?=[A-Z][a-z])")
_CASE_BOUNDARY = re.compile(r"([a-z])([A-Z])")
_BLANK_LINES = re.compile(r"\n\s*\n")

_BASIC_TOKENS = re.compile(r"endstream|endobj|stream|BT|ET")

_CODE_FENCE = re.compile(r"```[\s\S]*?```")
_BRACKETED = re.compile(r"\[.*?\]")
_PARENTHESIZED = re.compile(r"\(.*?\)")
_NON_PROSE = re.compile(r"[^\w\s.,;:!?\-]")


def _char_class(ch: str) -> int:
    if "a" <= ch <= "z" or "A" <= ch <= "Z":
        return _LETTER
    if "0" <= ch <= "9":
        return _DIGIT
    if ch in " \t\n\r":
        return _SPACE
    return _OTHER


class _StructureScanner:
    """Output stack plus, per position, its class and the start of its run.

    Removable constructs:
      literal tokens (_LITERAL_TOKENS)
      object headers        12 0 obj
      name pairs            /Type /Page
      name/number pairs     /Length 42
      coordinate operators  100 200 re   (numbers may carry a decimal part)

    The stack never contains a removable construct, which makes the result
    stable under a second scan.
    """

    def __init__(self) -> None:
        self.out: list[str] = []
        self.cls = bytearray()
        self.run = array("q")

    def push(self, ch: str) -> None:
        cls = _char_class(ch)
        if self.cls and self.cls[-1] == cls and cls != _OTHER:
            self.run.append(self.run[-1])
        else:
            self.run.append(len(self.out))
        self.out.append(ch)
        self.cls.append(cls)

    def truncate(self, size: int) -> None:
        del self.out[size:]
        del self.cls[size:]
        del self.run[size:]

    def _is(self, i: int, cls: int) -> bool:
        return i >= 0 and self.cls[i] == cls

    def _number_start(self, end: int) -> int | None:
        # Start of a `\d+\.?\d*` match ending at `end`, extended as far left as it goes.
        if self._is(end, _DIGIT):
            start = self.run[end]
            if start >= 2 and self.out[start - 1] == "." and self._is(start - 2, _DIGIT):
                return self.run[start - 2]
            return start
        if end >= 1 and self.out[end] == "." and self._is(end - 1, _DIGIT):
            return self.run[end - 1]
        return None

    def _after_space(self, start: int) -> int | None:
        # Index just before the whitespace run that ends at start - 1.
        if not self._is(start - 1, _SPACE):
            return None
        return self.run[start - 1] - 1

    def _name_start(self, end: int) -> int | None:
        # Start of a `/[A-Za-z]+` name ending at `end`.
        if not self._is(end, _LETTER):
            return None
        slash = self.run[end] - 1
        if slash >= 0 and self.out[slash] == "/":
            return slash
        return None

    def _drop_literal_token(self) -> bool:
        tail = "".join(self.out[-9:])
        for token in _LITERAL_TOKENS:
            if tail.endswith(token):
                self.truncate(len(self.out) - len(token))
                return True
        return False

    def _drop_object_header(self) -> bool:
        if "".join(self.out[-3:]) != _OBJ_KEYWORD:
            return False
        end = self._after_space(len(self.out) - 3)
        if end is None or not self._is(end, _DIGIT):
            return False
        end = self._after_space(self.run[end])
        if end is None or not self._is(end, _DIGIT):
            return False
        self.truncate(self.run[end])
        return True

    def _drop_letter_construct(self) -> bool:
        # Name pairs first, then coordinate operators; both end in a letter run.
        top = len(self.out) - 1
        start = self._name_start(top)
        if start is not None:
            end = self._after_space(start)
            first = self._name_start(end) if end is not None else None
            if first is not None:
                self.truncate(first)
                return True

        end = self._after_space(self.run[top])
        second = self._number_start(end) if end is not None else None
        if second is None:
            return False
        end = self._after_space(second)
        first = self._number_start(end) if end is not None else None
        if first is None:
            return False
        self.truncate(first)
        return True

    def _drop_name_number(self) -> bool:
        end = self._after_space(self.run[len(self.out) - 1])
        start = self._name_start(end) if end is not None else None
        if start is None:
            return False
        self.truncate(start)
        return True

    def close_run(self, next_cls: int | None) -> None:
        """Drop constructs ending in a letter or digit run once that run is complete."""
        while self.out:
            top_cls = self.cls[-1]
            if top_cls == next_cls:
                return
            if top_cls == _LETTER and self._drop_letter_construct():
                continue
            if top_cls == _DIGIT and self._drop_name_number():
                continue
            return

    def feed(self, ch: str) -> None:
        self.close_run(_char_class(ch))
        self.push(ch)
        if not self._drop_literal_token():
            self._drop_object_header()

    def text(self) -> str:
        self.close_run(None)
        return "".join(self.out)


def strip_structure(content: str) -> str:
    scanner = _StructureScanner()
    for ch in BINARY_PATTERN.sub("", content):
        scanner.feed(ch)
    return scanner.text()


def clean_structured(content: str) -> str:
    text = strip_structure(content)
    text = _WHITESPACE_RUN.sub(" ", text)
    # Re-split words that were fused when a token between them was removed.
    text = _CAPITAL_RUN_BOUNDARY.sub(" ", text)
    text = _CASE_BOUNDARY.sub(r"\1 \2", text)
    text = _BLANK_LINES.sub("\n", text)
    return text.strip()


def clean_basic(content: str) -> str:
    text = _BASIC_TOKENS.sub("", content)
    text = _WHITESPACE_RUN.sub(" ", text)
    return text.strip()


def sanitize_model_output(reply: str) -> str:
    text = _CODE_FENCE.sub("", reply or "")
    text = _BRACKETED.sub("", text)
    text = _PARENTHESIZED.sub("", text)
    text = _NON_PROSE.sub("", text)
    text = _WHITESPACE_RUN.sub(" ", text)
    return text.strip()
