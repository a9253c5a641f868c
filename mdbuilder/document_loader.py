# mdbuilder/document_loader.py

"""
Declarative document descriptions.

A description is a YAML or JSON mapping with an optional ``title`` and a
``blocks`` list. Each block is a single-key mapping naming a builder
operation, for example::

    title: Release notes
    blocks:
      - h2: Highlights
      - bulleted_list:
          - Faster startup
          - "Multi-line\\nitem"
      - table:
          columns: [Name, Size]
          rows: [[a.txt, "12"]]
          alignments: [left, right]
      - dropdown:
          title: Details
          open: true
          blocks:
            - p: Hidden by default
"""

import json
import logging
from pathlib import Path
from typing import Any, Callable, Dict, List

import yaml

from .alignment import Alignment
from .builder import MarkdownBuilder
from .exceptions import DocumentError

logger = logging.getLogger(__name__)


class DocumentLoader:
    """Loads document descriptions and replays them onto a builder."""

    YAML_SUFFIXES = {'.yaml', '.yml'}
    JSON_SUFFIXES = {'.json'}

    TEXT_BLOCKS = {
        'p': 'p',
        'paragraph': 'p',
        'h1': 'h1',
        'h2': 'h2',
        'h3': 'h3',
        'h4': 'h4',
        'blockquote': 'blockquote',
    }
    LIST_BLOCKS = {
        'bulleted_list': 'bulleted_list',
        'numbered_list': 'numbered_list',
    }

    def __init__(self, builder_factory: Callable[[], MarkdownBuilder] = MarkdownBuilder):
        """
        Initialize the loader.

        Args:
            builder_factory: Callable returning an empty builder
        """
        self.builder_factory = builder_factory

    def load_file(self, path: str) -> Dict[str, Any]:
        """
        Read a description file.

        Args:
            path: Path to a .yaml/.yml or .json file

        Returns:
            The parsed description

        Raises:
            DocumentError: If the file type is unsupported, the file cannot be
                read or parsed, or its top level is not a mapping
        """
        file_path = Path(path)
        suffix = file_path.suffix.lower()

        if suffix not in self.YAML_SUFFIXES | self.JSON_SUFFIXES:
            raise DocumentError(f"Unsupported document type '{suffix or file_path.name}'", str(path))

        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                if suffix in self.JSON_SUFFIXES:
                    document = json.load(f)
                else:
                    document = yaml.safe_load(f)
        except OSError as e:
            raise DocumentError(f"Cannot read file: {e}", str(path)) from e
        except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError) as e:
            raise DocumentError(f"Invalid syntax: {e}", str(path)) from e

        if not isinstance(document, dict):
            raise DocumentError("Top level must be a mapping", str(path))

        logger.debug(f"Loaded document description from {path}")
        return document

    def build(self, document: Dict[str, Any]) -> MarkdownBuilder:
        """
        Build a document description.

        Args:
            document: Mapping with optional 'title' and 'blocks'

        Returns:
            A builder holding the rendered document

        Raises:
            DocumentError: If a block is malformed or of an unknown kind
        """
        builder = self.builder_factory()

        title = document.get('title')
        if title:
            builder.h1(str(title))

        self._build_blocks(builder, document.get('blocks') or [], path='blocks')
        return builder

    def render_file(self, path: str) -> str:
        """Load, build and return the Markdown of a description file."""
        try:
            return self.build(self.load_file(path)).get_markdown()
        except DocumentError as e:
            if e.source:
                raise
            raise DocumentError(str(e), str(path)) from e

    def _build_blocks(self, builder: MarkdownBuilder, blocks: Any, path: str) -> None:
        if not isinstance(blocks, list):
            raise DocumentError(f"{path} must be a list")

        for index, block in enumerate(blocks):
            location = f"{path}[{index}]"
            if not isinstance(block, dict) or len(block) != 1:
                raise DocumentError(f"{location} must be a mapping with exactly one key")

            kind, payload = next(iter(block.items()))
            logger.debug(f"Building {location}: {kind}")
            self._build_block(builder, str(kind), payload, location)

    def _build_block(self, builder: MarkdownBuilder, kind: str, payload: Any, location: str) -> None:
        if kind in self.TEXT_BLOCKS:
            getattr(builder, self.TEXT_BLOCKS[kind])(self._text(payload))
        elif kind in self.LIST_BLOCKS:
            getattr(builder, self.LIST_BLOCKS[kind])(self._strings(payload, location))
        elif kind == 'hr':
            builder.hr()
        elif kind == 'code':
            self._build_code(builder, payload, location)
        elif kind == 'table':
            self._build_table(builder, payload, location)
        elif kind in ('dropdown', 'collapsible'):
            self._build_dropdown(builder, payload, location)
        else:
            raise DocumentError(f"{location}: unknown block type '{kind}'")

    def _build_code(self, builder: MarkdownBuilder, payload: Any, location: str) -> None:
        if isinstance(payload, dict):
            if 'code' not in payload:
                raise DocumentError(f"{location}: code block needs a 'code' entry")
            builder.code(self._text(payload['code']), self._text(payload.get('lang')))
        else:
            builder.code(self._text(payload))

    def _build_table(self, builder: MarkdownBuilder, payload: Any, location: str) -> None:
        if not isinstance(payload, dict) or 'columns' not in payload:
            raise DocumentError(f"{location}: table needs a 'columns' entry")

        columns = self._strings(payload['columns'], f"{location}.columns")
        rows = [
            self._strings(row, f"{location}.rows[{i}]")
            for i, row in enumerate(payload.get('rows') or [])
        ]
        try:
            alignments = [Alignment.parse(a) for a in payload.get('alignments') or []]
        except ValueError as e:
            raise DocumentError(f"{location}: {e}") from e

        builder.table(columns, rows, alignments)

    def _build_dropdown(self, builder: MarkdownBuilder, payload: Any, location: str) -> None:
        if not isinstance(payload, dict) or 'title' not in payload:
            raise DocumentError(f"{location}: dropdown needs a 'title' entry")

        inner = builder.block()
        self._build_blocks(inner, payload.get('blocks') or [], path=f"{location}.blocks")
        builder.dropdown(self._text(payload['title']), inner, open=self._flag(payload.get('open', False)))

    @staticmethod
    def _text(value: Any) -> str:
        return '' if value is None else str(value)

    @staticmethod
    def _flag(value: Any) -> bool:
        if isinstance(value, str):
            return value.strip().lower() in ('1', 'true', 'yes', 'on')
        return bool(value)

    @staticmethod
    def _strings(value: Any, location: str) -> List[str]:
        if not isinstance(value, list):
            raise DocumentError(f"{location} must be a list")
        return [DocumentLoader._text(v) for v in value]
