"""
main.py

Entry point for the Text Analyzer service.

Exposes the FastAPI `app` (serve it with any ASGI server, e.g.
`uvicorn text_analyzer.main:app`) and a command-line interface that runs the
same analysis pipeline once on text given as an argument or read from a file.
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import List, Optional

from fastapi import FastAPI

from text_analyzer.api.error_handlers import register_error_handlers, utc_timestamp
from text_analyzer.api.routers import analysis as analysis_router
from text_analyzer.api.schemas import HealthResponse
from text_analyzer.models.errors import ClassifiedError
from text_analyzer.utils.logger import get_logger
from text_analyzer.utils.metrics import metrics_tracker

logger = get_logger()

app = FastAPI(
    title="Text Analyzer API",
    description="Summarizes text, labels its sentiment and extracts three keywords.",
    version="0.1.0",
)

app.include_router(analysis_router.router)
register_error_handlers(app)


@app.get("/health", response_model=HealthResponse, tags=["Health Check"])
async def health():
    """Basic health check endpoint."""
    return HealthResponse(status="OK", timestamp=utc_timestamp())


def main(argv: Optional[List[str]] = None) -> int:
    """
    Analyzes one text from the command line and prints the result as JSON.

    Exactly one of `--text` or `--file` must be given.

    Returns:
        int: 0 on success, 1 on a classified error or an unreadable input file.
    """
    parser = argparse.ArgumentParser(
        description="Summarize text, label its sentiment and extract three keywords"
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--text", type=str, help="Text to analyze")
    source.add_argument(
        "--file",
        type=Path,
        help="Path to a UTF-8 text file whose content will be analyzed",
    )
    args = parser.parse_args(argv)

    if args.text is not None:
        text = args.text
    else:
        try:
            text = args.file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Could not read input file '{args.file}': {e}")
            return 1

    metrics_tracker.reset()
    logger.info("Starting text analysis")
    exit_code = 0
    try:
        service = analysis_router.get_analysis_service()
        result = asyncio.run(service.analyze({"text": text}))
        print(json.dumps(result.model_dump(mode="json"), indent=2, ensure_ascii=False))
    except ClassifiedError as e:
        logger.error(f"Analysis failed ({e.kind.value}): {e.message}")
        exit_code = 1
    finally:
        logger.info(
            f"Analysis Summary: {json.dumps(metrics_tracker.get_summary(), indent=2)}"
        )
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
