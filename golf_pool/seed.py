"""Built-in pool roster and a sample score fixture for seeding a fresh repository.

The sample scores only shape the state shown before the first refresh; refresh
never consults them.
"""

from __future__ import annotations

from pathlib import Path

from .models import PoolDefinition, PoolEntry

DEFAULT_POOL = PoolDefinition(
    participants=[
        PoolEntry(name="Joey H", golfers=["Xander Schauffele", "Ben Griffin", "Corey Conners", "Tom Kim"]),
        PoolEntry(name="Scott M", golfers=["Scottie Scheffler", "Viktor Hovland", "Tyrrell Hatton", "Matt Fitzpatrick"]),
        PoolEntry(name="Mike S", golfers=["Jon Rahm", "Tommy Fleetwood", "Harris English", "Keegan Bradley"]),
        PoolEntry(name="Daniel R", golfers=["Bryson DeChambeau", "Hideki Matsuyama", "Russell Henley", "Justin Rose"]),
        PoolEntry(name="Will C", golfers=["Rory McIlroy", "Shane Lowry", "Jordan Spieth", "Tony Finau"]),
        PoolEntry(name="Ryan L", golfers=["Collin Morikawa", "Sepp Straka", "Patrick Cantlay", "Patrick Reed"]),
        PoolEntry(name="Parker S", golfers=["Joaquin Niemann", "Justin Thomas", "Maverick McNealy", "Aaron Rai"]),
        PoolEntry(name="Nick M", golfers=["Ludvig Åberg", "Brooks Koepka", "Sam Burns", "Jason Day"]),
    ]
)

# name -> (raw score to par, missed cut)
SAMPLE_SCORES: dict[str, tuple[int, bool]] = {
    "Xander Schauffele": (-4, False),
    "Ben Griffin": (-3, False),
    "Corey Conners": (-3, False),
    "Tom Kim": (-2, False),
    "Scottie Scheffler": (-5, False),
    "Viktor Hovland": (-2, False),
    "Tyrrell Hatton": (-1, False),
    "Matt Fitzpatrick": (-1, False),
    "Jon Rahm": (0, False),
    "Tommy Fleetwood": (2, False),
    "Harris English": (-7, True),
    "Keegan Bradley": (0, True),
    "Bryson DeChambeau": (-2, False),
    "Hideki Matsuyama": (-1, False),
    "Russell Henley": (-1, False),
    "Justin Rose": (0, False),
    "Rory McIlroy": (-3, False),
    "Shane Lowry": (-2, False),
    "Jordan Spieth": (-1, False),
    "Tony Finau": (-1, False),
    "Collin Morikawa": (-2, False),
    "Sepp Straka": (-2, False),
    "Patrick Cantlay": (-1, False),
    "Patrick Reed": (-1, False),
    "Joaquin Niemann": (-1, False),
    "Justin Thomas": (0, False),
    "Maverick McNealy": (3, False),
    "Aaron Rai": (-6, True),
    "Ludvig Åberg": (-2, False),
    "Brooks Koepka": (-1, False),
    "Sam Burns": (0, False),
    "Jason Day": (0, False),
}


def load_pool(path: str | Path) -> PoolDefinition:
    pool_path = Path(path).expanduser()
    return PoolDefinition.model_validate_json(pool_path.read_text(encoding="utf-8"))
