"""CLI entry point.

This script extracts job descriptions from saved HTML files or live URLs and
prints them, or writes a JSON list to disk.

Examples:
    python run_extract.py saved_posting.html
    python run_extract.py https://www.indeed.com/viewjob?jk=abc123 --verbose
    python run_extract.py a.html b.html --out descriptions.json --config my_catalog.json

Each output record is {source, site, success, text?, error?}.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List

from jd_engine.config import load_config
from jd_engine.extractor import DescriptionExtractor
from jd_engine.service import DescriptionService


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Extract job descriptions from HTML files or URLs.")
    p.add_argument("sources", nargs="+", help="HTML file paths or http(s) URLs.")
    p.add_argument("--config", type=str, default=None, help="Optional JSON file overriding catalog/keywords.")
    p.add_argument("--out", type=str, default=None, help="Write results as JSON to this path instead of printing.")
    p.add_argument("--verbose", action="store_true", help="Log each selector and heading attempt.")
    return p.parse_args()


def run_one(service: DescriptionService, source: str) -> Dict[str, Any]:
    if source.startswith(("http://", "https://")):
        resp = service.detect(url=source)
    else:
        path = Path(source).expanduser()
        try:
            html = path.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            return {"source": source, "site": None, "success": False, "error": str(exc)}
        resp = service.detect(html=html)

    return {"source": source, "site": None, **resp.to_message()}


def main() -> int:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    service = DescriptionService(extractor=DescriptionExtractor(load_config(args.config)))
    results: List[Dict[str, Any]] = [run_one(service, s) for s in args.sources]

    if args.out:
        out_path = Path(args.out).expanduser().resolve()
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(json.dumps(results, indent=2, ensure_ascii=False), encoding="utf-8")
        print(f"Wrote {len(results)} results to: {out_path}")
    else:
        for r in results:
            if len(results) > 1:
                print(f"== {r['source']}")
            print(r["text"] if r["success"] else f"[no description] {r['error']}")

    return 0 if all(r["success"] for r in results) else 1


if __name__ == "__main__":
    sys.exit(main())
