"""Text transforms applied to header text — typographic texturizing and shortcodes."""

from __future__ import annotations

import re
from typing import Callable

# ---------------------------------------------------------------------------
# Texturize
# ---------------------------------------------------------------------------

_TAG_RE = re.compile(r"(<[^>]*>)")
_NO_TEXTURIZE_TAGS = {"code", "pre", "kbd", "script", "style", "tt"}
_TAG_NAME_RE = re.compile(r"^<\s*(/?)\s*([a-zA-Z0-9]+)")

# Order matters: longer sequences first
_STATIC_REPLACEMENTS = [
    ("---", "&#8212;"),
    (" -- ", " &#8212; "),
    ("--", "&#8211;"),
    (" - ", " &#8211; "),
    ("...", "&#8230;"),
    ("``", "&#8220;"),
    ("''", "&#8221;"),
    ("(tm)", "&#8482;"),
    ("(TM)", "&#8482;"),
    ("(c)", "&#169;"),
    ("(C)", "&#169;"),
    ("(r)", "&#174;"),
    ("(R)", "&#174;"),
]

_DYNAMIC_REPLACEMENTS = [
    # '99 style year abbreviations
    (re.compile(r"'(\d\d)\b"), r"&#8217;\1"),
    # Opening single quote at start or after whitespace/opening punctuation
    (re.compile(r"(^|[\s(\[{\"\-])'"), r"\1&#8216;"),
    # Apostrophe / closing single quote
    (re.compile(r"'"), r"&#8217;"),
    # Opening double quote
    (re.compile(r'(^|[\s(\[{\-])"'), r"\1&#8220;"),
    # Closing double quote
    (re.compile(r'"'), r"&#8221;"),
    # Multiplication between numbers
    (re.compile(r"\b(\d+)x(\d+)\b"), r"\1&#215;\2"),
]


def _texturize_text(text: str) -> str:
    for old, new in _STATIC_REPLACEMENTS:
        text = text.replace(old, new)
    for pattern, repl in _DYNAMIC_REPLACEMENTS:
        text = pattern.sub(repl, text)
    return text


def texturize(text: str | None) -> str:
    """Replace plain-text punctuation with typographic HTML entities.

    Markup is preserved as-is; text inside ``<code>``, ``<pre>``, ``<kbd>``,
    ``<script>`` and ``<style>`` elements is left alone.
    """
    if not text:
        return ""

    out = []
    skip_stack: list[str] = []
    for part in _TAG_RE.split(text):
        if not part:
            continue
        if part.startswith("<") and part.endswith(">"):
            m = _TAG_NAME_RE.match(part)
            if m:
                closing, name = m.group(1), m.group(2).lower()
                if name in _NO_TEXTURIZE_TAGS:
                    if closing:
                        if skip_stack and skip_stack[-1] == name:
                            skip_stack.pop()
                    elif not part.endswith("/>"):
                        skip_stack.append(name)
            out.append(part)
        elif skip_stack:
            out.append(part)
        else:
            out.append(_texturize_text(part))
    return "".join(out)


# ---------------------------------------------------------------------------
# Shortcodes
# ---------------------------------------------------------------------------

ShortcodeHandler = Callable[[dict, str], str]

_shortcodes: dict[str, ShortcodeHandler] = {}

_ATTR_RE = re.compile(
    r'([\w-]+)\s*=\s*"([^"]*)"'
    r"|([\w-]+)\s*=\s*'([^']*)'"
    r'|([\w-]+)\s*=\s*([^\s\'"]+)'
    r'|"([^"]*)"'
    r"|(\S+)"
)


def add_shortcode(tag: str, handler: ShortcodeHandler) -> None:
    """Register ``handler(attrs, content) -> str`` for ``[tag]``."""
    _shortcodes[tag] = handler


def remove_shortcode(tag: str) -> None:
    _shortcodes.pop(tag, None)


def remove_all_shortcodes() -> None:
    _shortcodes.clear()


def shortcode_exists(tag: str) -> bool:
    return tag in _shortcodes


def parse_shortcode_attrs(text: str) -> dict:
    """Parse ``a="1" b='2' c=3 flag`` into a dict. Positional values get int keys."""
    attrs: dict = {}
    position = 0
    for m in _ATTR_RE.finditer(text or ""):
        if m.group(1):
            attrs[m.group(1).lower()] = m.group(2)
        elif m.group(3):
            attrs[m.group(3).lower()] = m.group(4)
        elif m.group(5):
            attrs[m.group(5).lower()] = m.group(6)
        else:
            attrs[position] = m.group(7) if m.group(7) is not None else m.group(8)
            position += 1
    return attrs


def _shortcode_re(tags: list[str]) -> re.Pattern:
    names = "|".join(re.escape(t) for t in sorted(tags, key=len, reverse=True))
    # [[tag]] escapes a shortcode
    return re.compile(
        r"\[(\[?)(" + names + r")(?![\w-])([^\]\/]*(?:\/(?!\])[^\]\/]*)*?)"
        r"(?:(\/)\]|\](?:([^\[]*(?:\[(?!\/\2\])[^\[]*)*)\[\/\2\])?)(\]?)",
        re.DOTALL,
    )


def do_shortcode(text: str | None) -> str:
    """Expand registered shortcodes in ``text``. Unknown tags are left as-is."""
    if not text:
        return ""
    if "[" not in text or not _shortcodes:
        return text

    pattern = _shortcode_re(list(_shortcodes))

    def _expand(m: re.Match) -> str:
        if m.group(1) == "[" and m.group(6) == "]":
            return m.group(0)[1:-1]
        handler = _shortcodes.get(m.group(2))
        if handler is None:
            return m.group(0)
        content = m.group(5) or ""
        result = handler(parse_shortcode_attrs(m.group(3)), content)
        return m.group(1) + str(result if result is not None else "") + m.group(6)

    return pattern.sub(_expand, text)
