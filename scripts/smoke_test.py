"""End-to-end smoke test against a running server.

Usage: python scripts/smoke_test.py [base_url]
"""
import sys
from datetime import date

import requests

BASE_URL = sys.argv[1] if len(sys.argv) > 1 else "http://localhost:8000"
PRODUCTS = f"{BASE_URL}/products"


def print_step(msg):
    print(f"\n⚡ {msg}")


def fail(msg, resp=None):
    print(f"❌ {msg}" + (f": {resp.status_code} {resp.text}" if resp is not None else ""))
    sys.exit(1)


def main():
    print("🚀 Starting Smoke Test...")
    today = date.today().isoformat()

    print_step("Creating product...")
    draft = {"name": "Figure A", "category": "Figure", "price": 10.0, "stock": 5}
    resp = requests.post(PRODUCTS, json=draft)
    if resp.status_code != 201:
        fail("Create failed", resp)
    product = resp.json()
    product_id = product["id"]
    if product["lastRestockDate"] != today:
        fail(f"Expected lastRestockDate {today}, got {product['lastRestockDate']}")
    print(f"✅ Product Created: ID {product_id}")

    print_step("Restocking...")
    resp = requests.put(f"{PRODUCTS}/{product_id}", json={**draft, "stock": 20})
    if resp.status_code != 200 or resp.json()["lastRestockDate"] != today:
        fail("Restock update failed", resp)
    print("✅ Stock raised to 20")

    print_step("Running reports...")
    ids = [p["id"] for p in requests.get(f"{PRODUCTS}/report", params={"minStock": 10}).json()]
    if product_id not in ids:
        fail("Product missing from minStock=10 report")
    ids = [p["id"] for p in requests.get(f"{PRODUCTS}/report", params={"minStock": 25}).json()]
    if product_id in ids:
        fail("Product unexpectedly in minStock=25 report")
    print("✅ Reports filter as expected")

    print_step("Deleting...")
    resp = requests.delete(f"{PRODUCTS}/{product_id}")
    if resp.status_code != 204:
        fail("Delete failed", resp)
    resp = requests.get(f"{PRODUCTS}/{product_id}")
    if resp.status_code != 404:
        fail("Deleted product still readable", resp)
    print("✅ Product deleted")

    print("\n🎉 SMOKE TEST COMPLETE!")


if __name__ == "__main__":
    main()
