# mdbuilder/main.py

"""
Command line entry point.

Renders document description files (YAML/JSON) to Markdown:
  mdbuild notes.yaml changelog.json
Outputs, per input file, into the configured output directory:
  - <name>.md
  - <name>.html (when output.html is enabled)
"""

import os
import sys
import logging
from pathlib import Path
from typing import List, Optional
from dotenv import load_dotenv
from tqdm import tqdm

from .config_loader import ConfigLoader
from .document_loader import DocumentLoader
from .exceptions import DocumentError
from .utils.html_renderer import HTMLRenderer
from .utils.text_utils import TextUtils

logger = logging.getLogger(__name__)


def setup_logging(config: ConfigLoader):
    log_level = getattr(logging, config.get_log_level().upper(), logging.INFO)
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    log_file = config.get_log_file()
    if log_file:
        handlers.insert(0, logging.FileHandler(log_file, encoding="utf-8"))
    logging.basicConfig(
        level=log_level,
        format=config.get_log_format(),
        handlers=handlers,
    )
    logger.info("Logging initialized")


def render_document(source: str, loader: DocumentLoader, config: ConfigLoader) -> str:
    """Render one description file and write its outputs. Returns the .md path."""
    markdown_text = loader.render_file(source)

    output_dir = config.get_output_dir()
    os.makedirs(output_dir, exist_ok=True)
    stem = TextUtils.sanitize_filename(Path(source).stem)

    md_path = os.path.join(output_dir, f"{stem}.md")
    with open(md_path, "w", encoding="utf-8") as f:
        f.write(markdown_text + "\n")
    logger.info(f"✓ Markdown: {md_path}")

    if config.is_html_enabled():
        html_path = os.path.join(output_dir, f"{stem}.html")
        HTMLRenderer.render_markdown_to_file(
            markdown_text, html_path, title=Path(source).stem, css_path=config.get_css_path()
        )
        logger.info(f"✓ HTML:     {html_path}")

    return md_path


def _prompt_sources() -> List[str]:
    raw = input("Enter document description file(s) to render: ").strip()
    return raw.split() if raw else []


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()

    config = ConfigLoader()
    setup_logging(config)

    sources = list(sys.argv[1:] if argv is None else argv)
    if not sources:
        sources = _prompt_sources()
    if not sources:
        logger.error("No document description provided")
        return 1

    loader = DocumentLoader()
    failed = 0

    with tqdm(sources, desc="Rendering documents", disable=len(sources) < 2) as pbar:
        for source in pbar:
            pbar.set_description(f"Rendering {os.path.basename(source)}")
            try:
                render_document(source, loader, config)
            except (DocumentError, OSError) as e:
                failed += 1
                logger.error(f"Failed to render {source}: {e}")

    logger.info(f"Rendered {len(sources) - failed}/{len(sources)} document(s)")
    return 1 if failed else 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n\nOperation cancelled by user")
        logger.info("Operation cancelled by user")
        sys.exit(130)
