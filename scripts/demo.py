#!/usr/bin/env python3
"""
Walk through the mobile registry operations and print each result.

Usage:
  python scripts/demo.py [--backend memory|sql]
"""
from __future__ import annotations

import argparse
import sys

from mobile_storage.core.config import STORAGE_BACKENDS, get_settings
from mobile_storage.core.logging_config import setup_logging
from mobile_storage.domain.mobiles import Mobile
from mobile_storage.services.mobile_service import MobileError, MobileService, build_repository


def main() -> None:
    ap = argparse.ArgumentParser(description="Demonstrate the mobile registry")
    ap.add_argument("--backend", choices=STORAGE_BACKENDS, help="Storage backend (default: MOBILE_STORAGE_BACKEND)")
    args = ap.parse_args()

    settings = get_settings()
    setup_logging(settings.log_level)
    service = MobileService(build_repository(args.backend))

    mobile_one = Mobile(imei="someImei1", model="iPhone5")
    mobile_two = Mobile(imei="someImei2", model="iPhone6")
    mobile_three = Mobile(imei="someImei3", model="iPhone 7")

    try:
        service.save(mobile_one)
        saved_two = service.save(mobile_two)
        service.save(mobile_three)
        print(f"save: {saved_two}")
    except MobileError as exc:
        print(f"save failed: {exc}")

    print(f"exists {mobile_one.imei}: {service.exists(mobile_one)}")

    try:
        service.save(Mobile(imei=mobile_one.imei, model=mobile_one.model))
    except MobileError as exc:
        print(f"duplicate save: {exc}")

    found = service.find_by_imei(mobile_three.imei)
    if found:
        print(f"find_by_imei {mobile_three.imei}: {found}")
    else:
        print(f"find_by_imei {mobile_three.imei}: not found")

    print(f"find_by_imei 1234564: {service.find_by_imei('1234564')}")

    for mobile in sorted(service.get_all(), key=lambda m: (m.imei, m.model)):
        print(f"  {mobile.imei}  {mobile.model}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
