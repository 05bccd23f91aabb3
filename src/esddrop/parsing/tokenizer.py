from __future__ import annotations

"""
OptionTokenizer – splits the free-form 'other_options' string into argv.

Rules:
    * Tokens are separated by unquoted ASCII spaces; runs of spaces never
      produce empty tokens.
    * A single or double quote opens a quoted run when none is open and
      closes it only when it matches the opener. The other quote kind is
      literal inside a run. There is no escape character.
    * Quote characters stay in the token while scanning. Each finished
      token loses one surrounding pair of identical quotes.
    * An unterminated quote swallows the rest of the string, spaces
      included.

shlex is not used here: it honors backslash escapes and rejects
unterminated quotes, and Windows paths rely on neither behavior.
"""

from typing import List, Optional

_QUOTES = ("'", '"')


class OptionTokenizer:
    @staticmethod
    def unquote(token: str) -> str:
        if len(token) >= 2 and token[0] in _QUOTES and token[0] == token[-1]:
            return token[1:-1]
        return token

    @staticmethod
    def split_raw(text: str) -> List[str]:
        """Split *text* on unquoted spaces, keeping quote characters."""
        out: List[str] = []
        buf: List[str] = []
        in_quote: Optional[str] = None
        for ch in text:
            if ch in _QUOTES:
                if in_quote is None:
                    in_quote = ch
                elif in_quote == ch:
                    in_quote = None
            if in_quote is None and ch == " ":
                if buf:
                    out.append("".join(buf))
                    buf = []
            else:
                buf.append(ch)
        if buf:
            out.append("".join(buf))
        return out

    @staticmethod
    def split(text: str) -> List[str]:
        """Tokenize *text* and unquote each token.

        >>> OptionTokenizer.split('a "b c" \\'d e\\'')
        ['a', 'b c', 'd e']
        """
        if not text:
            return []
        return [OptionTokenizer.unquote(tok) for tok in OptionTokenizer.split_raw(text)]
