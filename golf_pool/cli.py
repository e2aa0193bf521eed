from __future__ import annotations

import argparse
import asyncio
import logging

from .api import build_repository, run
from .config import get_settings
from .golf_api_client import GolfApiClient
from .models import LeaderboardResponse
from .repository import RefreshFailed
from .scoring import format_score_to_par


def _print_leaderboard(leaderboard: LeaderboardResponse, show_golfers: bool) -> None:
    info = leaderboard.tournament_info
    print(
        f"\n{info.status} | {info.round} | cut line {format_score_to_par(info.cut_line)} "
        f"| made cut {info.players_made_cut if info.players_made_cut is not None else '-'}"
    )
    print(f"{'Rank':<5} {'Participant':<24} {'Total':>6}")
    print("-" * 37)
    for participant in leaderboard.participants:
        print(
            f"{participant.rank or '-':<5} "
            f"{participant.name[:24]:<24} "
            f"{format_score_to_par(participant.total_score):>6}"
        )
        if not show_golfers:
            continue
        for golfer in participant.golfers:
            suffix = f" (MC {format_score_to_par(golfer.cut_score)})" if golfer.missed_cut else ""
            print(f"{'':<8}{golfer.name[:28]:<28} {format_score_to_par(golfer.score_to_par):>6}{suffix}")


async def _run_standings_command(args: argparse.Namespace) -> None:
    settings = get_settings()
    if args.pool_file:
        settings = settings.model_copy(update={"pool_file": args.pool_file})

    async with GolfApiClient(settings) as client:
        repository = build_repository(settings, client)
        if args.refresh:
            outcome = await repository.refresh()
            leaderboard = outcome.leaderboard
            if outcome.unmatched:
                print(f"Not found in leaderboard: {', '.join(outcome.unmatched)}")
        else:
            leaderboard = repository.get_leaderboard()

    _print_leaderboard(leaderboard, show_golfers=args.golfers)


def main() -> None:
    parser = argparse.ArgumentParser(description="Fantasy golf pool standings CLI.")
    sub = parser.add_subparsers(dest="command", required=True)

    standings_parser = sub.add_parser("standings", help="Print pool standings")
    standings_parser.add_argument("--refresh", action="store_true", help="Pull live scores first")
    standings_parser.add_argument("--golfers", action="store_true", help="List each participant's golfers")
    standings_parser.add_argument("--pool-file", default=None)

    serve_parser = sub.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)

    args = parser.parse_args()
    if args.command == "serve":
        run(host=args.host, port=args.port)
        return

    logging.basicConfig(
        level=get_settings().log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )
    try:
        if args.command == "standings":
            asyncio.run(_run_standings_command(args))
            return
        parser.error(f"Unsupported command: {args.command}")
    except RefreshFailed as exc:
        print(f"Refresh failed: {exc.__cause__ or exc}")


if __name__ == "__main__":
    main()
