"""Whitespace normalisation for generated markdown."""

from __future__ import annotations

from typing import List

_FENCE = "```"


class MarkdownLinter:
    """Keeps rendered README whitespace predictable.

    Outside code fences, runs of blank lines collapse to one and headings are
    separated from preceding text by a blank line. Trailing whitespace is
    dropped everywhere and the document ends with exactly one newline.
    """

    def lint(self, markdown: str) -> str:
        lines = markdown.replace("\r\n", "\n").replace("\r", "\n").split("\n")
        output: List[str] = []
        in_fence = False

        for raw in lines:
            line = raw.rstrip()
            if line.startswith(_FENCE):
                in_fence = not in_fence
                output.append(line)
                continue
            if in_fence:
                output.append(line)
                continue

            blank_before = not output or output[-1] == ""
            if not line:
                if not blank_before:
                    output.append("")
                continue
            if line.startswith("#") and not blank_before:
                output.append("")
            output.append(line)

        while output and output[-1] == "":
            output.pop()
        while output and output[0] == "":
            output.pop(0)
        return "\n".join(output) + "\n"


__all__ = ["MarkdownLinter"]
