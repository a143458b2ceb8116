from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional

DATA_PATH = Path(__file__).resolve().parent / "data" / "displays.json"


@dataclass(frozen=True)
class DisplayProfile:
    display_id: str
    controller: str
    width: int
    height: int
    description: str = ""

    def fits(self, width: int, height: int) -> bool:
        return width <= self.width and height <= self.height


class DisplayRegistry:
    _cache: Dict[Path, "DisplayRegistry"] = {}

    def __init__(self, profiles: Iterable[DisplayProfile]) -> None:
        self._profiles = list(profiles)

    @classmethod
    def load(cls, path: Path = DATA_PATH) -> "DisplayRegistry":
        key = path.resolve()
        cached = cls._cache.get(key)
        if cached:
            return cached
        raw = json.loads(path.read_text(encoding="utf-8"))
        registry = cls(DisplayProfile(**item) for item in raw)
        cls._cache[key] = registry
        return registry

    @property
    def profiles(self) -> List[DisplayProfile]:
        return list(self._profiles)

    def get(self, display_id: str) -> Optional[DisplayProfile]:
        target = display_id.lower()
        for profile in self._profiles:
            if profile.display_id.lower() == target:
                return profile
        return None

    def require(self, display_id: str) -> DisplayProfile:
        profile = self.get(display_id)
        if not profile:
            raise ValueError(f"Unknown display '{display_id}' (see --list-displays)")
        return profile


def check_fits(profile: DisplayProfile, width: int, height: int) -> None:
    if not profile.fits(width, height):
        raise ValueError(
            f"Bitmap {width}x{height}px does not fit {profile.display_id} "
            f"({profile.width}x{profile.height}px)"
        )
