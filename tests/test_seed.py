import json

from golf_pool.api import build_repository
from golf_pool.config import Settings
from golf_pool.golf_api_client import GolfApiClient
from golf_pool.seed import DEFAULT_POOL, SAMPLE_SCORES, load_pool


def test_default_pool_has_sample_score_for_every_golfer() -> None:
    names = [golfer for entry in DEFAULT_POOL.participants for golfer in entry.golfers]
    assert len(DEFAULT_POOL.participants) == 8
    assert len(names) == 32
    assert set(names) == set(SAMPLE_SCORES)


def test_load_pool_reads_json_file(tmp_path) -> None:
    path = tmp_path / "pool.json"
    path.write_text(
        json.dumps({"participants": [{"name": "Nick M", "golfers": ["Ludvig Åberg", "Jason Day"]}]}),
        encoding="utf-8",
    )
    pool = load_pool(path)
    assert pool.participants[0].name == "Nick M"
    assert pool.participants[0].golfers == ["Ludvig Åberg", "Jason Day"]


def test_build_repository_seeds_default_pool() -> None:
    settings = Settings(golf_api_key="unused", pool_file="", seed_sample_scores=True)
    repository = build_repository(settings, GolfApiClient(settings))
    leaderboard = repository.get_leaderboard()

    assert [p.rank for p in leaderboard.participants] == list(range(1, 9))
    mike = next(p for p in leaderboard.participants if p.name == "Mike S")
    # Rahm 0, Fleetwood +2, English -7+20, Bradley 0+20
    assert mike.total_score == 35
    assert leaderboard.participants[0].name == "Joey H"


def test_build_repository_from_pool_file_starts_unscored(tmp_path) -> None:
    path = tmp_path / "pool.json"
    path.write_text(json.dumps({"participants": [{"name": "Solo", "golfers": ["Tom Kim"]}]}), encoding="utf-8")
    settings = Settings(golf_api_key="unused", pool_file=str(path), golf_tournament_id="800")
    repository = build_repository(settings, GolfApiClient(settings))

    assert repository.tournament_id == "800"
    golfer = repository.get_golfers()[0]
    assert golfer.score_to_par is None
    assert repository.get_participant(1).total_score == 0
