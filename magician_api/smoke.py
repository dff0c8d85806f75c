#!/usr/bin/env python3
"""
Smoke check against a running Website Magician API.
Sends one authenticated POST /api/analyze and reports the result.

Usage:
    python -m magician_api.smoke
    BASE_URL=https://your-deployment.example magician-smoke
"""

import json
import os
import sys
from typing import Optional

import requests
from dotenv import load_dotenv

DEFAULT_BASE_URL = "http://localhost:3001"
SAMPLE_URL = "https://example.com"
TIMEOUT_S = 10


def run_smoke_check(base_url: str, token: Optional[str]) -> int:
    try:
        res = requests.post(
            f"{base_url.rstrip('/')}/api/analyze",
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {token}",
            },
            json={"url": SAMPLE_URL},
            timeout=TIMEOUT_S,
        )
        if not res.ok:
            raise RuntimeError(f"Request failed: {res.status_code}")
        data = res.json()
    except (requests.RequestException, RuntimeError, ValueError) as e:
        print(f"❌ API test failed: {e}")
        return 1

    print("✅ API responded correctly:")
    print(json.dumps(data, indent=2, ensure_ascii=False))
    return 0


def main() -> None:
    # Load .env file if it exists
    load_dotenv()
    token = os.getenv("MAGICIAN_API_TOKEN")
    base_url = os.getenv("BASE_URL", DEFAULT_BASE_URL)
    sys.exit(run_smoke_check(base_url, token))


if __name__ == "__main__":
    main()
