"""Basic usage examples for the live timing engine."""

import asyncio
import sys

from actiming import (
    AsyncLiveTimingClient,
    LeaderboardFilter,
    LiveTimingSession,
    SortField,
    TimingSettings,
)
from actiming.formatters import format_time


async def main(server_url: str, roster_url: str = "") -> None:
    settings = TimingSettings(server_url=server_url, participants_csv_url=roster_url)

    async with AsyncLiveTimingClient() as client:
        session = LiveTimingSession(client, settings)
        await session.reload_participants()
        await session.refresh()

    if session.data is None or session.data.error:
        print(f"Failed to load leaderboard: {session.data.error if session.data else 'no data'}")
        return

    print(f"=== {session.data.server_name} | {session.data.track} | {session.data.session_name} ===")
    print(f"Classes: {', '.join(session.classes())}")

    for row in session.view():
        entry, metrics = row.entry, row.metrics
        pct = f"{metrics.percentage:.2f}%" if metrics.percentage is not None else "-"
        mark = "*" if row.is_registered else " "
        print(
            f"{row.position:>3} {mark} {entry.driver_name:<28} {entry.car_class:<10} "
            f"{format_time(entry.best_lap):>10} {metrics.delta_text:>9} {pct:>8} "
            f"[{metrics.badge_severity.value}]"
        )

    # Registered drivers only, most laps first
    print("\n=== Registered, by laps ===")
    only_registered = LeaderboardFilter(registered_only=True, sort_by=SortField.LAPS)
    for row in session.view(only_registered):
        print(f"  {row.entry.driver_name}: {row.entry.lap_count} laps")

    # Same filter, fewest laps first
    print("\n=== Registered, fewest laps first ===")
    for row in session.view(only_registered.toggled()):
        print(f"  {row.entry.driver_name}: {row.entry.lap_count} laps")


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("usage: basic_usage.py SERVER_URL [ROSTER_CSV_URL]")
        sys.exit(1)
    asyncio.run(main(*sys.argv[1:3]))
