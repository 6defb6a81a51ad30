import re

from collections import OrderedDict
from typing import Any, Dict, Iterable, List, Optional

from tours.models import GROSS

HOLE_FIELD = re.compile(r"^h(ole)?\d+")


def extract_hole_data(record: Dict[str, Any]) -> Dict[str, Any]:
    """
    Collect the per-hole fields of an SGT scorecard (h1_Par, hole1_gross, ...)
    """
    return {key: value for key, value in record.items() if HOLE_FIELD.match(key)}


def _sum_or_none(values: Iterable[Optional[int]]) -> Optional[int]:
    present = [value for value in values if value is not None]
    if not present:
        return None
    return sum(present)


class PlayerResult:
    def __init__(self, player_id, player_name, hcp):
        self.player_id = player_id
        self.player_name = player_name
        self.hcp = hcp
        self.rounds = {}

    def add_round(self, scorecard):
        self.rounds[scorecard.round] = scorecard
        if self.hcp is None:
            self.hcp = scorecard.hcp_index

    def round_score(self, round_number, field):
        scorecard = self.rounds.get(round_number)
        return getattr(scorecard, field) if scorecard is not None else None

    def total(self, field):
        return _sum_or_none(getattr(scorecard, field) for scorecard in self.rounds.values())

    def to_dict(self, position):
        return {
            "position": position,
            "player_name": self.player_name,
            "playerId": self.player_id,
            "hcp": self.hcp,
            "r1_gross": self.round_score(1, "total_gross"),
            "r2_gross": self.round_score(2, "total_gross"),
            "r1_net": self.round_score(1, "total_net"),
            "r2_net": self.round_score(2, "total_net"),
            "total_gross": self.total("total_gross"),
            "total_net": self.total("total_net"),
            "to_par_gross": self.total("to_par_gross"),
            "to_par_net": self.total("to_par_net"),
        }


def build_tournament_results(scorecards, gross_or_net: str = GROSS) -> List[Dict[str, Any]]:
    """
    Combine the scorecards of a tournament into one leaderboard row per player.

    Players are ranked on their total (gross or net) across all rounds, lowest
    first. Tied players share a position and the next position is skipped
    (1, 2, 2, 4). Players without any total are listed last with no position.
    """
    players = OrderedDict()
    for scorecard in scorecards:
        result = players.get(scorecard.player_id)
        if result is None:
            result = PlayerResult(scorecard.player_id, scorecard.player_name, scorecard.hcp_index)
            players[scorecard.player_id] = result
        result.add_round(scorecard)

    field = "total_gross" if gross_or_net == GROSS else "total_net"
    ranked = sorted(
        players.values(),
        key=lambda r: (r.total(field) is None, r.total(field) or 0, (r.player_name or "").lower()),
    )

    results = []
    position = None
    previous_total = None
    for index, player in enumerate(ranked):
        total = player.total(field)
        if total is None:
            results.append(player.to_dict(None))
            continue
        if total != previous_total:
            position = index + 1
            previous_total = total
        results.append(player.to_dict(position))

    return results
