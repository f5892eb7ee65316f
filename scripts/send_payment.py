"""Send a single payment to a running service and print the answer.

Handy for checking gateway wiring by hand, e.g. against Stripe test keys.
"""

import argparse
import json

import httpx


def main() -> None:
    """Parse CLI args and POST one payment."""

    parser = argparse.ArgumentParser(description="POST one payment to /process_payment.")
    parser.add_argument("--base-url", default="http://localhost:8000")
    parser.add_argument("--amount", default="10.0")
    parser.add_argument("--currency", default="usd")
    parser.add_argument("--payment-method", default="card")
    parser.add_argument("--card-number", default="4242424242424242")
    parser.add_argument("--expiration-date", default="12/30")
    parser.add_argument("--cvv", default="123")
    parser.add_argument("--correlation-id", default=None)
    args = parser.parse_args()

    payload = {
        "amount": args.amount,
        "currency": args.currency,
        "payment_method": args.payment_method,
        "card_number": args.card_number,
        "expiration_date": args.expiration_date,
        "cvv": args.cvv,
    }
    headers = {"x-correlation-id": args.correlation_id} if args.correlation_id else {}
    resp = httpx.post(f"{args.base_url}/process_payment", json=payload, headers=headers, timeout=30.0)
    print(f"status={resp.status_code}")
    print(json.dumps(resp.json()))


if __name__ == "__main__":
    main()
