"""Basic usage examples for the paddock data layer."""

import asyncio

from paddock import (
    ErgastClient,
    fetch_bets,
    fetch_events,
    fetch_qualifying_results,
    fetch_race_results,
    fetch_users,
    find_next_event,
    resolve_search,
    score_bets,
)


def show_results() -> None:
    with ErgastClient() as f1:
        race_name, rows = f1.race_results()
        print(f"=== {race_name or 'Last race'} ===")
        for row in rows:
            print(f"  P{row.entry.position:<3} #{row.entry.number:<3} {row.entry.driver}  {row.race_time}")

        _, _, drivers = f1.driver_standings()
        print("\n=== Drivers' championship ===")
        for line in drivers[:5]:
            print(f"  {line.position:>2}. {line.driver} {line.points:>4} pts  {line.constructor}")


async def show_local_data() -> None:
    # Expects bets.csv, users.csv and events.csv in the working directory
    race_name, qualifying = await fetch_qualifying_results()
    print(f"\n=== {race_name} qualifying ===")
    for row in qualifying[:3]:
        print(f"  {row.entry.position}. {row.entry.driver} {row.q3 or row.q2 or row.q1}")

    bets, users, events = await asyncio.gather(fetch_bets(), fetch_users(), fetch_events())

    print("\n=== Bets ===")
    for bet in sorted(bets, reverse=True):
        print(f"  {bet.nick}: {'/'.join(bet.podium)} ({bet.points} pts)")

    results = await fetch_race_results()
    print(f"\n=== Scored bets for {results.race_name} ===")
    for bet in sorted(score_bets(bets, results), reverse=True):
        print(f"  {bet.nick}: {bet.points} pts")

    print(f"\n=== {len(users)} users ===")
    upcoming = find_next_event(events)
    for user in users:
        when = upcoming.local_date(user.timezone) if upcoming else "-"
        print(f"  {user.nick}: next event {when}")

    event = find_next_event(events, *resolve_search("race"))
    if event is None:
        print("\nNo upcoming race.")
        return
    print(f"\nNext race: {event.title} at {event.date_cest} / {event.date_est}")


if __name__ == "__main__":
    show_results()
    asyncio.run(show_local_data())
