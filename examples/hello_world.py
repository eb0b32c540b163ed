"""
omnium — Hello World

Relative-time phrases and business-day dates, driven by a clock that
the caller controls.
"""

from datetime import UTC, datetime, time, timedelta

from omnium import DelegatingClock, FixedClock, LogicalDateResolver, from_now


def main():
    start = datetime(2011, 3, 2, 2, 30, tzinfo=UTC)
    clock = DelegatingClock(FixedClock(start))

    # ──────────────────────────────────────
    #  1. Relative phrases
    # ──────────────────────────────────────
    for delta in (timedelta(0), timedelta(seconds=140), timedelta(hours=36), timedelta(days=11)):
        print(f"  {delta!s:>18}  ->  {from_now(start - delta, clock)!r}")
    print(f"  {'(future)':>18}  ->  {from_now(start + timedelta(minutes=140), clock)!r}")

    # ──────────────────────────────────────
    #  2. Business days starting at 04:00 Stockholm time
    # ──────────────────────────────────────
    resolver = LogicalDateResolver(time(4, 0), "Europe/Stockholm")
    print(f"\n  {resolver}")
    for hours in (0, 1, 24):
        clock.set_delegate(FixedClock(start + timedelta(hours=hours)))
        print(f"  {clock.now().isoformat()}  ->  logical date {resolver.today(clock)}")


if __name__ == "__main__":
    main()
