"""
Explain or diagram one Solana transaction from the command line.

Usage:
    python -m backend_txinsight.tools.explain_tx <signature>
    python -m backend_txinsight.tools.explain_tx <signature> --diagram
    python -m backend_txinsight.tools.explain_tx --file tx.json [--diagram]

Reads provider credentials and SOLANA_RPC_URL from env / .env.
Exit codes: 0 success, 1 pipeline error, 2 bad arguments.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from backend_txinsight.config import get_settings
from backend_txinsight.core.exceptions import TxInsightError
from backend_txinsight.generation.invoker import OpenAIGenerationInvoker
from backend_txinsight.lookup.rpc_lookup import SolanaRpcLookup
from backend_txinsight.pipeline import TransactionPipeline
from backend_txinsight.prompts import OutputMode
from backend_txinsight.txinsight_logging import get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Explain or diagram a Solana transaction.")
    ap.add_argument("signature", nargs="?", default=None, help="Transaction signature (base58)")
    ap.add_argument("--file", dest="file", default=None, help="Read the transaction document from a JSON file")
    ap.add_argument("--diagram", action="store_true", help="Generate a Mermaid diagram instead of an explanation")
    ap.add_argument("--show-category", action="store_true", help="Print the detected category to stderr")
    return ap


def _load_document(path: str) -> Any:
    with open(Path(path), encoding="utf-8") as f:
        return json.load(f)


def build_pipeline() -> TransactionPipeline:
    settings = get_settings()
    return TransactionPipeline(
        generator=OpenAIGenerationInvoker(settings.generation),
        lookup=SolanaRpcLookup(settings.solana_rpc_url, timeout_sec=settings.solana_rpc_timeout_sec),
    )


def main(argv: list[str] | None = None, pipeline: TransactionPipeline | None = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    if bool(args.signature) == bool(args.file):
        ap.print_usage(sys.stderr)
        print("explain_tx: give exactly one of <signature> or --file", file=sys.stderr)
        return 2

    mode = OutputMode.DIAGRAM if args.diagram else OutputMode.EXPLANATION
    try:
        pipeline = pipeline or build_pipeline()
        if args.file:
            result = pipeline.run(_load_document(args.file), mode)
        else:
            result = pipeline.run_reference(args.signature, mode)
    except TxInsightError as e:
        print(f"explain_tx: {e.message}", file=sys.stderr)
        return 1
    except (OSError, json.JSONDecodeError) as e:
        print(f"explain_tx: could not read {args.file}: {e}", file=sys.stderr)
        return 1

    if args.show_category:
        print(f"category: {result.category.value}", file=sys.stderr)
    print(result.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
