"""Paragraph-aware full justification of plain text."""

import re

import constants

# blank line(s) between two paragraphs, whitespace-only lines included
PARAGRAPH_SEPARATOR = re.compile(r"\n\s*\n")

# CRLF or lone CR
LINE_ENDING = re.compile(r"\r\n?")


def split_words(text: str) -> list[str]:
    """Split text into words on runs of whitespace.

    Line feeds and tabs are whitespace too, so original line breaks inside
    a paragraph do not survive the split.
    """
    return text.split()


def count_words(text: str) -> int:
    """Count whitespace-delimited words in the text."""
    return len(split_words(text))


def build_lines(words: list[str], width: int) -> list[list[str]]:
    """Pack words into lines greedily.

    A word stays on the current line while the line, including one
    separating space, still fits into the width. A word longer than the
    width ends up alone on its own line.
    """
    lines: list[list[str]] = []
    current_line: list[str] = []
    current_length = 0

    for word in words:
        separator = 1 if current_line else 0
        if current_line and current_length + separator + len(word) > width:
            lines.append(current_line)
            current_line = [word]
            current_length = len(word)
        else:
            current_line.append(word)
            current_length += separator + len(word)

    if current_line:
        lines.append(current_line)
    return lines


def justify_line(words: list[str], width: int) -> str:
    """Pad the gaps between words so the line is exactly width characters."""
    if len(words) == 1:
        return words[0]

    gaps = len(words) - 1
    extra = width - sum(len(word) for word in words)
    base, remainder = divmod(extra, gaps)

    parts = []
    for index, word in enumerate(words[:-1]):
        parts.append(word)
        parts.append(" " * (base + (1 if index < remainder else 0)))
    parts.append(words[-1])
    return "".join(parts)


def justify_paragraph(paragraph: str, width: int) -> str:
    """Justify one paragraph, leaving its last line left-aligned."""
    words = split_words(paragraph)
    if not words:
        return ""

    lines = build_lines(words, width)
    justified = [justify_line(line, width) for line in lines[:-1]]
    justified.append(" ".join(lines[-1]))
    return "\n".join(justified)


def justify(text: str, width: int = constants.DEFAULT_LINE_WIDTH) -> str:
    """Justify text to the given line width.

    Paragraphs are separated by one or more blank lines and stay separated
    by exactly one blank line in the output. Empty paragraphs produced by
    consecutive separators are kept as empty strings.

    Args:
        text: Raw text with any line ending style.
        width: Target line width, must be positive.

    Returns:
        The justified text, never containing carriage returns.
    """
    normalized = LINE_ENDING.sub("\n", text)
    paragraphs = PARAGRAPH_SEPARATOR.split(normalized)
    return "\n\n".join(
        justify_paragraph(paragraph.strip(), width) for paragraph in paragraphs
    )
