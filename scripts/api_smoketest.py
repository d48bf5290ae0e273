"""Tiny end-to-end smoke test against a running API.

Walks one user through create -> get -> update -> delete and prints each status.

Usage:
  uvicorn user_registry.main:app --port 8000
  python scripts/api_smoketest.py [base_url]
"""

from __future__ import annotations

import sys
import uuid

import httpx


def main() -> int:
    base_url = (sys.argv[1] if len(sys.argv) > 1 else "http://127.0.0.1:8000").rstrip("/")
    email = f"smoke.{uuid.uuid4().hex[:8]}@example.com"
    body = {"firstName": "Smoke", "lastName": "Test", "email": email, "age": 42}

    try:
        with httpx.Client(base_url=base_url, timeout=10.0) as c:
            r = c.get("/healthz")
            print("/healthz", r.status_code, r.json())

            r = c.post("/api/users", json=body)
            print("POST /api/users", r.status_code)
            if r.status_code != 201:
                print(r.text)
                return 1
            user_id = r.json()["id"]

            r = c.post("/api/users", json=body)
            print("POST duplicate", r.status_code, "(expect 409)")

            r = c.put(f"/api/users/{user_id}", json={**body, "age": 43})
            print(f"PUT /api/users/{user_id}", r.status_code, r.json())

            r = c.delete(f"/api/users/{user_id}")
            print(f"DELETE /api/users/{user_id}", r.status_code)

            r = c.get(f"/api/users/{user_id}")
            print(f"GET /api/users/{user_id}", r.status_code, "(expect 404)")
    except httpx.HTTPError as exc:
        print("exception:", type(exc).__name__, str(exc))
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
