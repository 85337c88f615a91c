"""Lightweight REST client for the pysbc API."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import httpx


def load_requirements(path: Path | None, inline: str) -> dict:
    if path is not None:
        return json.loads(path.read_text(encoding="utf-8"))
    if not inline:
        return {}
    try:
        return json.loads(inline)
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Invalid requirements JSON: {exc}") from exc


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the pysbc REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("requirements", type=Path, nargs="?", help="Requirements JSON file")
    parser.add_argument("--inline", default="", help="Inline requirements JSON")
    parser.add_argument("--preset", help="Solve a named preset instead of custom requirements")
    parser.add_argument("--list-presets", action="store_true", help="List presets and exit")
    parser.add_argument("--suggestions", action="store_true", help="Request market suggestions instead of a squad")
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url) as client:
        if args.list_presets:
            resp = client.get("/presets")
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))
            return

        if args.preset:
            resp = client.post(f"/presets/{args.preset}/solve")
        else:
            requirements = load_requirements(args.requirements, args.inline)
            path = "/market-suggestions" if args.suggestions else "/solve"
            resp = client.post(path, json=requirements)
        resp.raise_for_status()
        payload = resp.json()

    if not payload.get("success"):
        raise SystemExit(f"Solve failed: {payload.get('error')}")
    print(json.dumps(payload, indent=2))


if __name__ == "__main__":
    main()
