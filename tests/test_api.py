from fastapi.testclient import TestClient

from golf_pool.api import create_app
from golf_pool.config import Settings
from golf_pool.golf_api_client import ProviderUnavailable
from golf_pool.models import PoolDefinition, PoolEntry
from golf_pool.provider import PlayerNotFound, PlayerScore, ProviderResult, TournamentStatus
from golf_pool.repository import PoolRepository


class _FakeScoreProvider:
    def __init__(self) -> None:
        self.fail = False

    async def fetch_scores(self, tournament_id: str, names: list[str]) -> ProviderResult:
        if self.fail:
            raise ProviderUnavailable("Leaderboard request failed (500) for /leaderboard/759")
        raw = {"Scottie Scheffler": (-5, False), "Harris English": (-7, True), "Jon Rahm": (1, False)}
        scores = {}
        for name in names:
            if name in raw:
                score, missed_cut = raw[name]
                scores[name] = PlayerScore(name=name, provider_name=name, score_to_par=score, missed_cut=missed_cut)
            else:
                scores[name] = PlayerNotFound(name=name)
        return ProviderResult(
            tournament=TournamentStatus(status="Round 2 Complete", round="Round 2", cut_line=2, players_made_cut=70),
            scores=scores,
        )


def _client() -> tuple[TestClient, _FakeScoreProvider]:
    provider = _FakeScoreProvider()
    pool = PoolDefinition(
        participants=[
            PoolEntry(name="Scott M", golfers=["Scottie Scheffler", "Tom Kim"]),
            PoolEntry(name="Mike S", golfers=["Jon Rahm", "Harris English"]),
        ]
    )
    repository = PoolRepository.from_pool(provider, pool, tournament_id="759")
    app = create_app(settings=Settings(golf_api_key="unused"), repository=repository)
    return TestClient(app), provider


def test_health() -> None:
    client, _ = _client()
    assert client.get("/health").json() == {"status": "ok"}


def test_leaderboard_uses_camel_case_fields() -> None:
    client, _ = _client()
    response = client.get("/api/leaderboard")
    assert response.status_code == 200
    body = response.json()
    assert set(body) == {"participants", "tournamentInfo"}
    participant = body["participants"][0]
    assert {"id", "name", "totalScore", "rank", "golfers"} <= set(participant)
    assert {"scoreToPar", "missedCut", "cutScore", "participantId"} <= set(participant["golfers"][0])
    assert "lastUpdated" in body["tournamentInfo"]


def test_refresh_scores_returns_updated_standings() -> None:
    client, _ = _client()
    response = client.post("/api/refresh-scores")
    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Scores updated successfully"
    assert body["unmatched"] == ["Tom Kim"]
    assert [(p["name"], p["totalScore"], p["rank"]) for p in body["participants"]] == [
        ("Scott M", -5, 1),
        ("Mike S", 14, 2),
    ]
    english = body["participants"][1]["golfers"][1]
    assert english["missedCut"] is True
    assert english["cutScore"] == -7
    assert english["scoreToPar"] == 13
    assert body["tournamentInfo"]["round"] == "Round 2"

    assert client.get("/api/leaderboard").json()["participants"] == body["participants"]


def test_refresh_failure_returns_500_and_keeps_leaderboard() -> None:
    client, provider = _client()
    client.post("/api/refresh-scores")
    before = client.get("/api/leaderboard").json()

    provider.fail = True
    response = client.post("/api/refresh-scores")
    assert response.status_code == 500
    assert response.json() == {"message": "Failed to refresh scores"}
    assert client.get("/api/leaderboard").json() == before


def test_tournament_info() -> None:
    client, _ = _client()
    client.post("/api/refresh-scores")
    response = client.get("/api/tournament-info")
    assert response.status_code == 200
    info = response.json()["tournamentInfo"]
    assert info["status"] == "Round 2 Complete"
    assert info["cutLine"] == 2
    assert info["playersMadeCut"] == 70
