# utils/render.py
from datetime import datetime
from html import escape
from typing import Any, Dict, List, Optional

STYLE = """
body { font-family: sans-serif; margin: 2rem; }
table { border-collapse: collapse; width: 100%; }
th, td { border: 1px solid #ddd; padding: 8px; text-align: left; }
th { background-color: #f4f4f4; }
tr:nth-child(even) { background-color: #fafafa; }
.winner { font-weight: bold; color: #2e7d32; }
"""


def _text(value: Any) -> str:
    return escape("" if value is None else str(value))


def format_date(timestamp: Optional[str]) -> str:
    """
    "2015-01-19T16:57:17-05:00" -> "1/19/2015"

    The date is taken in the timestamp's own offset.
    """
    if not timestamp:
        return ""
    try:
        dt = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
    except ValueError:
        return timestamp
    return f"{dt.month}/{dt.day}/{dt.year}"


def capitalize(value: Optional[str]) -> str:
    if not value:
        return ""
    return value[0].upper() + value[1:]


def flatten_tournament(record: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "id": record.get("id"),
        "name": record.get("name"),
        "tournament_type": record.get("tournament_type"),
        "created_at": format_date(record.get("created_at")),
        "game_name": record.get("game_name") or "N/A",
        "full_challonge_url": record.get("full_challonge_url"),
    }


def participant_names(participants: List[Dict[str, Any]]) -> Dict[Any, str]:
    """Participant id -> display name."""
    names: Dict[Any, str] = {}
    for p in participants:
        names[p.get("id")] = p.get("name") or p.get("display_name") or p.get("username")
    return names


def flatten_match(record: Dict[str, Any], names: Dict[Any, str]) -> Dict[str, Any]:
    player1_id = record.get("player1_id")
    player2_id = record.get("player2_id")
    winner_id = record.get("winner_id")

    def player(pid: Any) -> Dict[str, Any]:
        return {
            "id": pid,
            "name": (names.get(pid) if pid is not None else None) or "TBD",
            "winner": winner_id is not None and pid == winner_id,
        }

    return {
        "round": record.get("round"),
        "player1": player(player1_id),
        "player2": player(player2_id),
        "winner_id": winner_id,
        "scores_csv": record.get("scores_csv") or "-",
        "state": capitalize(record.get("state")),
    }


def _document(title: str, body: str) -> str:
    return (
        "<!DOCTYPE html>\n"
        "<html>\n"
        "<head>\n"
        '<meta charset="utf-8">\n'
        f"<title>{_text(title)}</title>\n"
        f"<style>{STYLE}</style>\n"
        "</head>\n"
        "<body>\n"
        f"{body}"
        "</body>\n"
        "</html>\n"
    )


def render_tournaments(tournaments: List[Dict[str, Any]]) -> str:
    rows = ""
    for t in tournaments:
        rows += (
            "<tr>"
            f'<td><a href="{_text(t["full_challonge_url"])}" target="_blank" rel="noopener">{_text(t["name"])}</a></td>'
            f"<td>{_text(t['tournament_type'])}</td>"
            f"<td>{_text(t['created_at'])}</td>"
            f"<td>{_text(t['game_name'])}</td>"
            f'<td><a href="/tournaments/{_text(t["id"])}/matches">View Matches</a></td>'
            "</tr>\n"
        )

    body = (
        "<h1>Tournaments</h1>\n"
        "<table>\n"
        "<thead><tr><th>Name</th><th>Type</th><th>Created</th><th>Game</th><th>Matches</th></tr></thead>\n"
        f"<tbody>\n{rows}</tbody>\n"
        "</table>\n"
    )
    return _document("Tournaments", body)


def _player_cell(player: Dict[str, Any]) -> str:
    if player["winner"]:
        return f'<td class="winner">{_text(player["name"])}</td>'
    return f"<td>{_text(player['name'])}</td>"


def render_matches(tournament_name: str, matches: List[Dict[str, Any]]) -> str:
    rows = ""
    for m in matches:
        rows += (
            "<tr>"
            f"<td>Round {_text(m['round'])}</td>"
            f"{_player_cell(m['player1'])}"
            f"{_player_cell(m['player2'])}"
            f"<td>{_text(m['scores_csv'])}</td>"
            f"<td>{_text(m['state'])}</td>"
            "</tr>\n"
        )

    body = (
        '<a href="/tournaments">&larr; Back to Tournaments</a>\n'
        f"<h1>{_text(tournament_name)} - Matches</h1>\n"
        "<table>\n"
        "<thead><tr><th>Round</th><th>Player 1</th><th>Player 2</th><th>Score</th><th>State</th></tr></thead>\n"
        f"<tbody>\n{rows}</tbody>\n"
        "</table>\n"
    )
    return _document(f"{tournament_name} - Matches", body)
