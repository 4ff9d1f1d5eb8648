#!/usr/bin/env python3

"""Simple CLI to hit the local playground /api/generate endpoint."""

import argparse
import os
import sys
from time import perf_counter

import httpx

DEFAULT_URL = os.getenv("PLAYGROUND_URL", "http://localhost:3000/api/generate")
DEFAULT_MODEL = "meta-llama/Llama-3.3-70B-Instruct-Turbo"


def main() -> int:
    """Entry point to this tool."""
    parser = argparse.ArgumentParser(
        description="Send a prompt to a locally running LLM Playground."
    )
    parser.add_argument(
        "--prompt",
        default="Say Hello",
        help="Prompt text. Defaults to 'Say Hello'.",
    )
    parser.add_argument(
        "--model",
        default=DEFAULT_MODEL,
        help=f"Model identifier. Defaults to {DEFAULT_MODEL!r}.",
    )
    parser.add_argument(
        "--max-tokens",
        type=int,
        default=256,
        help="Maximum number of tokens to generate (default: 256).",
    )
    parser.add_argument(
        "--api-key",
        default=None,
        help="API key overriding the one configured in the service.",
    )
    parser.add_argument(
        "--url",
        default=DEFAULT_URL,
        help=f"Endpoint URL. Defaults to env PLAYGROUND_URL or {DEFAULT_URL!r}.",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=60,
        help="Request timeout in seconds (default: 60).",
    )
    args = parser.parse_args()

    payload = {
        "prompt": args.prompt,
        "parameters": {
            "model": args.model,
            "max_tokens": args.max_tokens,
            "temperature": 0.7,
            "top_p": 0.8,
            "top_k": 40,
            "repetition_penalty": 1.0,
        },
    }
    if args.api_key:
        payload["apiKey"] = args.api_key

    t0 = perf_counter()
    try:
        resp = httpx.post(args.url, json=payload, timeout=args.timeout)
        elapsed = perf_counter() - t0
    except httpx.HTTPError as e:
        elapsed = perf_counter() - t0
        print(f"Request failed after {elapsed:.2f}s: {e}", file=sys.stderr)
        return 1

    try:
        obj = resp.json()
    except ValueError:
        print("Server response is not valid JSON.", file=sys.stderr)
        print(resp.text[:1000], file=sys.stderr)
        return 2

    if resp.is_error:
        print(f"Server answered {resp.status_code}: {obj.get('error')}", file=sys.stderr)
        if obj.get("details"):
            print(obj["details"], file=sys.stderr)
        return 1

    if "text" not in obj:
        print("JSON is missing 'text' field:", file=sys.stderr)
        print(obj, file=sys.stderr)
        return 3

    print(obj["text"])
    print(f"Response time {elapsed:.2f} seconds")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
