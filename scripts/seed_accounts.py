#!/usr/bin/env python3
"""Fill the shared account repository with generated accounts.

Accounts are generated up front and saved from a thread pool, then the
repository summary (and optionally every record) is printed as JSON.

Usage::

    python scripts/seed_accounts.py --count 1000 --workers 8 --seed 42
"""

import argparse
import json
import time
from concurrent.futures import ThreadPoolExecutor

from account_store.config import StoreConfig
from account_store.generators import AccountGenerator
from account_store.logging import get_logger, setup_logging
from account_store.serialization import to_dict
from account_store.store import get_repository

logger = get_logger("seed_accounts")


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed the in-memory account repository")
    parser.add_argument("--count", type=int, default=100, help="Number of accounts to save")
    parser.add_argument("--workers", type=int, default=4, help="Concurrent saving threads")
    parser.add_argument("--seed", type=int, default=None, help="Random seed (overrides SEED)")
    parser.add_argument("--dump", action="store_true", help="Print every stored account")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    config = StoreConfig.from_env()
    if args.seed is not None:
        config.seed = args.seed
    setup_logging(level=config.log_level, format_type=config.log_format)

    generator = AccountGenerator(seed=config.seed, locale=config.locale)
    accounts = list(generator.generate_batch(args.count))

    repository = get_repository()
    start = time.time()
    with ThreadPoolExecutor(max_workers=args.workers) as executor:
        saved = list(executor.map(repository.save, accounts))
    elapsed = time.time() - start

    logger.info("Saved %d accounts with %d workers in %.3fs", len(saved), args.workers, elapsed)
    print(json.dumps(repository.summary(), indent=2))

    if args.dump:
        records = sorted(repository.find_all(), key=lambda a: a.account_id)
        print(json.dumps([to_dict(a) for a in records], indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
