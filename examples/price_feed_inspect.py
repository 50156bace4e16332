#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import sys

from pyth.sdk import MalformedInputError, PriceFeed


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Inspect a Pyth price feed JSON payload")
    p.add_argument("path", nargs="?", default="-", help="JSON file, '-' for stdin")
    p.add_argument("max_age", nargs="?", type=int, default=60, help="Allowed age in seconds")
    return p.parse_args()


def main() -> int:
    args = parse_args()
    if args.path == "-":
        raw = json.load(sys.stdin)
    else:
        with open(args.path, encoding="utf-8") as fh:
            raw = json.load(fh)

    try:
        feed = PriceFeed.from_json(raw)
    except MalformedInputError as exc:
        print(f"Malformed price feed: {exc}", file=sys.stderr)
        return 1

    current = feed.get_current_price()
    ema = feed.get_ema_price()
    latest, published = feed.get_latest_available_price_unchecked()
    fresh = feed.get_latest_available_price_within_duration(args.max_age)

    print("=" * 65)
    print(f"Feed id    : {feed.id}")
    print(f"Product id : {feed.product_id}")
    print(f"Status     : {feed.status}")
    print(f"Publishers : {feed.num_publishers}/{feed.max_num_publishers}")
    print("=" * 65)
    if current is None:
        print("Current    : unavailable (not trading)")
    else:
        print(f"Current    : {current.price} ± {current.conf} x 10^{current.expo}")
    print(f"EMA        : {ema.price} ± {ema.conf} x 10^{ema.expo}")
    print(f"Latest     : {latest.get_price_as_number_unchecked():.6f} @ {published}")
    print(f"Within {args.max_age}s : {'yes' if fresh is not None else 'no'}")
    metadata = feed.get_metadata()
    if metadata is not None:
        print(
            f"Metadata   : chain={metadata.emitter_chain} seq={metadata.sequence_number} "
            f"attested={metadata.attestation_time}"
        )
    print("=" * 65)
    return 0


if __name__ == "__main__":
    sys.exit(main())
