from __future__ import annotations

from typing import Any

from ..core.pairs import EntangledPair
from ..core.stats import RegistrySummary


def pair_to_dict(p: EntangledPair) -> dict[str, Any]:
    return {
        "id": int(p.id),
        "creator": p.creator,
        "particle1": None if p.particle1 is None else int(p.particle1),
        "particle2": None if p.particle2 is None else int(p.particle2),
        "measured": bool(p.measured),
        "state": p.state.value,
    }


def pair_from_dict(data: dict[str, Any]) -> EntangledPair:
    p1 = data.get("particle1")
    p2 = data.get("particle2")
    return EntangledPair(
        id=int(data["id"]),
        creator=str(data["creator"]),
        particle1=None if p1 is None else int(p1),
        particle2=None if p2 is None else int(p2),
        measured=bool(data.get("measured", False)),
    )


def summary_to_dict(s: RegistrySummary) -> dict[str, Any]:
    return {
        "pairs": int(s.pairs),
        "measured": int(s.measured),
        "unmeasured": int(s.unmeasured),
        "owners": int(s.owners),
        "anticorrelated": int(s.anticorrelated),
        "balance": {
            "zeros": int(s.balance.zeros),
            "ones": int(s.balance.ones),
            "fractionOnes": float(s.balance.fraction_ones),
            "zScore": float(s.balance.z_score),
        },
    }
