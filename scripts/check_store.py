#!/usr/bin/env python3
"""Report which festival store is active and whether it answers."""

import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv
load_dotenv()

from app.config import Settings
from lib.supabase_client import StoreError, SupabaseClient


def main() -> int:
    config = Settings()
    print(f"Supabase URL set: {bool(config.NEXT_PUBLIC_SUPABASE_URL)}")
    print(f"Supabase key set: {bool(config.NEXT_PUBLIC_SUPABASE_ANON_KEY)}")

    store = SupabaseClient.create_store(config)
    print(f"Store mode: {store.mode}")

    if not store.ping():
        print("Store did not answer the ping query")
        return 1

    try:
        rows = store.read()
    except StoreError as e:
        print(f"Read failed: {e}")
        return 1

    print(f"Festivals in {config.FESTIVALS_TABLE}: {len(rows)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
