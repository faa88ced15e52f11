"""Pytest configuration and fixtures for DateFlow tests."""

from __future__ import annotations

import os
import sys
import time
from pathlib import Path
from typing import Callable, Iterator

import pytest

# Add the parent directory to sys.path so dateflow can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

# POSIX TZ rules, so switching zones needs no timezone database
TZ_RULES: dict[str, str] = {
    "UTC": "UTC0",
    "Europe/Rome": "CET-1CEST,M3.5.0,M10.5.0/3",
    "America/New_York": "EST5EDT,M3.2.0,M11.1.0",
    "Asia/Tokyo": "JST-9",
}


@pytest.fixture(autouse=True)
def system_timezone() -> Iterator[Callable[[str], None]]:
    """Pin the process timezone to UTC for every test.

    Yields a function that switches the process timezone (by IANA name,
    see TZ_RULES) for the rest of the test. The original TZ is restored
    afterwards.
    """
    has_tzset = hasattr(time, "tzset")
    original = os.environ.get("TZ")

    def use(name: str) -> None:
        if not has_tzset:
            pytest.skip("time.tzset() is not available on this platform")
        os.environ["TZ"] = TZ_RULES[name]
        time.tzset()

    if has_tzset:
        use("UTC")
    yield use

    if has_tzset:
        if original is None:
            os.environ.pop("TZ", None)
        else:
            os.environ["TZ"] = original
        time.tzset()
