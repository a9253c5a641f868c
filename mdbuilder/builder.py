"""Fluent Markdown document builder."""

from __future__ import annotations

from typing import Iterable, Mapping, Sequence, Union

from . import inline
from .alignment import Alignment
from .utils.text_utils import TextUtils

HORIZONTAL_RULE = "-" * 41

_SEPARATOR_CELLS = {
    Alignment.LEFT: ":-|",
    Alignment.CENTER: ":-:|",
    Alignment.RIGHT: "-:|",
}


class MarkdownBuilder:
    """
    Chainable Markdown accumulator.

    Every structural operation appends its lines plus one blank separator
    line to an internal buffer and returns the builder itself, so calls can
    be chained::

        md = (
            MarkdownBuilder()
            .h1("Release notes")
            .bulleted_list(["Faster startup", "Fewer bugs"])
            .get_markdown()
        )
    """

    def __init__(self) -> None:
        self._markdown = ""

    def block(self) -> "MarkdownBuilder":
        """
        Create a new, empty builder of the same type.

        Useful for assembling the body of a :meth:`dropdown` section.

        Returns
        -------
        MarkdownBuilder
            A fresh builder; no state is shared with ``self``.
        """
        return type(self)()

    # ------------------------------------------------------------------
    # Buffer primitives
    # ------------------------------------------------------------------

    def write(self, text: str) -> "MarkdownBuilder":
        """Append text verbatim."""
        self._markdown += text
        return self

    def writeln(self, text: str) -> "MarkdownBuilder":
        """Append text followed by a newline."""
        return self.write(text).br()

    def br(self) -> "MarkdownBuilder":
        """Append a single newline."""
        return self.write("\n")

    def get_markdown(self) -> str:
        """
        Return the accumulated document.

        Leading and trailing whitespace of the whole buffer is stripped; the
        buffer itself is left untouched, so this can be called at any point.

        Returns
        -------
        str
            Markdown text.
        """
        return self._markdown.strip(TextUtils.TRIM_CHARACTERS)

    def __str__(self) -> str:
        return self.get_markdown()

    # ------------------------------------------------------------------
    # Blocks
    # ------------------------------------------------------------------

    def p(self, text: str) -> "MarkdownBuilder":
        """
        Add a paragraph.

        Parameters
        ----------
        text : str
            Paragraph text, written as is.

        Returns
        -------
        MarkdownBuilder
            Self for method chaining.
        """
        return self.writeln(text).br()

    def h1(self, header: str) -> "MarkdownBuilder":
        """
        Add a first level heading, underlined with ``=``.

        Parameters
        ----------
        header : str
            Heading text. Newlines are removed and whitespace runs collapsed.

        Returns
        -------
        MarkdownBuilder
            Self for method chaining.
        """
        header = TextUtils.single_line(header)
        return self.writeln(header).writeln("=" * len(header)).br()

    def h2(self, header: str) -> "MarkdownBuilder":
        """
        Add a second level heading, underlined with ``-``.

        Parameters
        ----------
        header : str
            Heading text. Newlines are removed and whitespace runs collapsed.

        Returns
        -------
        MarkdownBuilder
            Self for method chaining.
        """
        header = TextUtils.single_line(header)
        return self.writeln(header).writeln("-" * len(header)).br()

    def h3(self, header: str) -> "MarkdownBuilder":
        """Add a ``###`` heading."""
        header = TextUtils.single_line(header)
        return self.writeln("### " + header).br()

    def h4(self, header: str) -> "MarkdownBuilder":
        """Add a ``####`` heading."""
        header = TextUtils.single_line(header)
        return self.writeln("#### " + header).br()

    def blockquote(self, text: str) -> "MarkdownBuilder":
        """
        Add a blockquote.

        Each line of ``text`` is quoted separately; blank lines become a
        bare ``>`` so the quote is not interrupted.

        Parameters
        ----------
        text : str
            Quote text, may span multiple lines.

        Returns
        -------
        MarkdownBuilder
            Self for method chaining.
        """
        lines = [(">  " + line).strip(TextUtils.TRIM_CHARACTERS) for line in text.split("\n")]
        return self.p("\n".join(lines))

    def bulleted_list(self, items: Iterable[str]) -> "MarkdownBuilder":
        """
        Add a bulleted list.

        Parameters
        ----------
        items : Iterable[str]
            List items. An item containing newlines is rendered with its
            continuation lines indented under the item text.

        Returns
        -------
        MarkdownBuilder
            Self for method chaining.
        """
        for item in _values(items):
            first, *rest = item.split("\n")
            self.writeln("* " + first)
            for line in rest:
                self.writeln("  " + line)

        return self.br()

    def numbered_list(self, items: Iterable[str]) -> "MarkdownBuilder":
        """
        Add a numbered list.

        Items are numbered from 1 in iteration order. Continuation lines of
        multi-line items are indented by three spaces, which lines up with
        the text of single digit items only.

        Parameters
        ----------
        items : Iterable[str]
            List items; for a mapping the values are used and keys ignored.

        Returns
        -------
        MarkdownBuilder
            Self for method chaining.
        """
        for number, item in enumerate(_values(items), start=1):
            first, *rest = item.split("\n")
            self.writeln(f"{number}. {first}")
            for line in rest:
                self.writeln("   " + line)

        return self.br()

    def hr(self) -> "MarkdownBuilder":
        """Add a horizontal rule."""
        return self.p(HORIZONTAL_RULE)

    def code(self, code: str, lang: str = "") -> "MarkdownBuilder":
        """
        Add a fenced code block.

        Parameters
        ----------
        code : str
            Code content, written verbatim. Fences inside it are not escaped.
        lang : str, optional
            Language hint, by default "".

        Returns
        -------
        MarkdownBuilder
            Self for method chaining.
        """
        return (
            self.writeln("```" + lang)
            .writeln(code)
            .writeln("```")
            .br()
        )

    def table(
        self,
        columns: Sequence[str],
        rows: Iterable[Sequence[str]],
        alignments: Sequence[Alignment] = (),
    ) -> "MarkdownBuilder":
        """
        Add a pipe table.

        Writes the header row, the alignment row and one line per data row.
        Unlike the other blocks no blank line is appended after the last
        row. Cells are not escaped and row lengths are not checked.

        Parameters
        ----------
        columns : Sequence[str]
            Header cells.
        rows : Iterable[Sequence[str]]
            Data rows.
        alignments : Sequence[Alignment], optional
            Per-column alignment; missing entries default to left.

        Returns
        -------
        MarkdownBuilder
            Self for method chaining.
        """
        self.writeln("|" + "|".join(columns) + "|")

        self.write("|")
        for i in range(len(columns)):
            alignment = alignments[i] if i < len(alignments) else Alignment.LEFT
            self.write(_SEPARATOR_CELLS.get(alignment, _SEPARATOR_CELLS[Alignment.LEFT]))

        self.br()

        for row in rows:
            self.writeln("|" + "|".join(row) + "|")

        return self

    def dropdown(self, title: str, block: "MarkdownBuilder", open: bool = False) -> "MarkdownBuilder":
        """
        Add a collapsible ``<details>`` section.

        The content of ``block`` is copied in as it is right now; changing
        ``block`` afterwards has no effect on this document.

        Parameters
        ----------
        title : str
            Summary line.
        block : MarkdownBuilder
            Builder holding the section body.
        open : bool, optional
            Render the section expanded, by default False.

        Returns
        -------
        MarkdownBuilder
            Self for method chaining.
        """
        return (
            self.writeln("<details open>" if open else "<details>")
            .writeln(f"<summary>{title}</summary>")
            .br()
            .writeln(block.get_markdown())
            .writeln("</details>")
            .br()
        )

    # Spelled-out names
    write_line = writeln
    line_break = br
    paragraph = p
    heading1 = h1
    heading2 = h2
    heading3 = h3
    heading4 = h4
    horizontal_rule = hr
    code_block = code
    collapsible = dropdown

    # Inline formatting
    inline_code = staticmethod(inline.inline_code)
    inline_italic = staticmethod(inline.inline_italic)
    inline_bold = staticmethod(inline.inline_bold)
    inline_link = staticmethod(inline.inline_link)
    inline_img = staticmethod(inline.inline_img)
    inline_tab = staticmethod(inline.inline_tab)
    inline_space = staticmethod(inline.inline_space)


def _values(items: Union[Iterable[str], Mapping[object, str]]) -> Iterable[str]:
    if isinstance(items, Mapping):
        return items.values()
    return items
