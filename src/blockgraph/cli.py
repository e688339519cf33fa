"""Command line entry point: analyze or replay a document and print the resolved JSON."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

import blockgraph.methods.remote  # noqa: F401
import blockgraph.methods.saved  # noqa: F401
import blockgraph.methods.textract  # noqa: F401
from blockgraph.config import ServiceConfig
from blockgraph.core.errors import AnalysisError
from blockgraph.core.registry import AnalyzerRegistry
from blockgraph.utils.io import is_saved_response
from blockgraph.utils.log import setup_logging

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Resolve form fields and tables from a document or a saved analysis response."
    )
    parser.add_argument("path", help="Image/PDF to analyze, or a saved AnalyzeDocument .json")
    parser.add_argument("--analyzer", default=None,
                        help=f"One of: {', '.join(AnalyzerRegistry.list())}")
    parser.add_argument("--output", "-o", default=None, help="Write JSON here instead of stdout")
    parser.add_argument("--include-blocks", action="store_true",
                        help="Include the raw blocks in the output")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)

    setup_logging(args.log_level)
    config = ServiceConfig.from_env()

    name = args.analyzer or ("saved" if is_saved_response(args.path) else config.analyzer)
    analyzer_config = config.model_copy(update={"analyzer": name})

    try:
        analyzer = AnalyzerRegistry.create(name, **analyzer_config.analyzer_kwargs())
        result = analyzer.analyze(args.path)
    except (KeyError, ValueError, FileNotFoundError, AnalysisError) as exc:
        logger.error("%s", exc.args[0] if isinstance(exc, KeyError) else exc)
        return 1

    exclude = None if args.include_blocks else {"blocks"}
    text = json.dumps(result.model_dump(by_alias=True, exclude=exclude), indent=2, ensure_ascii=False)
    if args.output:
        out = Path(args.output)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(text + "\n", encoding="utf-8")
    else:
        sys.stdout.write(text + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
