#!/usr/bin/env python3
"""
Simple smoke test against a running wiki server.

Usage:
  API_URL (optional, default http://localhost:8080)

Run:
  python3 scripts/smoke_test.py
"""

import os
import re
import sys
import time
import uuid

import httpx

API_URL = os.getenv("API_URL", "http://localhost:8080").rstrip("/")
TIMEOUT = 10

ID_FIELD = re.compile(r'name="id" value="(-?\d+)"')


def fail(msg):
    print("FAIL:", msg)
    sys.exit(2)


def ok(msg):
    print("OK:", msg)


def page_id_of(html):
    m = ID_FIELD.search(html)
    if not m:
        fail("page has no id field")
    return int(m.group(1))


def main():
    client = httpx.Client(timeout=TIMEOUT, follow_redirects=False)
    # 1) readiness
    try:
        r = client.get(f"{API_URL}/ready")
    except Exception as e:
        fail(f"ready request failed: {e}")
    if r.status_code != 200:
        fail(f"ready returned {r.status_code}: {r.text}")
    ok("ready OK")

    # unique name so repeated runs don't collide
    name = f"Smoke-{int(time.time())}-{uuid.uuid4().hex[:6]}"
    markdown = "# Smoke Test\n\nThis page was created by smoke_test.py"

    # 2) create computes the page url
    r = client.post(f"{API_URL}/create", data={"name": name})
    if r.status_code != 303 or r.headers.get("location") != f"/wiki/{name}":
        fail(f"create returned {r.status_code} -> {r.headers.get('location')}")
    ok("create OK")

    # 3) unknown page is offered as a new page
    r = client.get(f"{API_URL}/wiki/{name}")
    if r.status_code != 200 or 'value="yes"' not in r.text:
        fail(f"new page view unexpected: {r.status_code}")
    ok("new page view OK")

    # 4) save
    r = client.post(
        f"{API_URL}/save",
        data={"id": "-1", "title": name, "markdown": markdown, "newPage": "yes"},
    )
    if r.status_code != 303:
        fail(f"save failed: {r.status_code} {r.text}")
    ok("save OK")

    r = client.get(f"{API_URL}/wiki/{name}")
    if "<h1>Smoke Test</h1>" not in r.text:
        fail("saved page did not render markdown")
    page_id = page_id_of(r.text)
    ok(f"page view OK (id={page_id})")

    # 5) home lists it
    r = client.get(f"{API_URL}/")
    if f"/wiki/{name}" not in r.text:
        fail("home page does not list the new page")
    ok("home lists page")

    # 6) delete cleanup
    r = client.post(f"{API_URL}/delete", data={"id": str(page_id)})
    if r.status_code != 303:
        print("WARN: delete returned unexpected status:", r.status_code, r.text)
    else:
        ok("delete (cleanup) OK")

    print("\nSMOKE TEST PASSED\n")
    client.close()


if __name__ == "__main__":
    main()
