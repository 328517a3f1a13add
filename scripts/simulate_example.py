"""
End-to-end local example: one full game, then one bulk season.
"""
import os, sys
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from franchise_sim.engine.game import simulate_full_game
from franchise_sim.sampler.rng import make_rng
from franchise_sim.season.runner import simulate_season


def _lineup(contact, power, speed):
    return [{"contact": contact, "power": power, "speed": speed, "discipline": 50} for _ in range(9)]


def main():
    rng = make_rng(123)

    home_pitchers = [{"ratings": {"stuff": 65, "control": 60, "movement": 55}}] + [{"stuff": 55, "control": 50, "movement": 50}] * 4
    away_pitchers = [{"ratings": {"stuff": 50, "control": 50, "movement": 50}}] + [{"stuff": 50, "control": 45, "movement": 50}] * 4

    game = simulate_full_game(_lineup(60, 55, 50), _lineup(50, 50, 50), home_pitchers, away_pitchers, rng=rng)
    print("LINE away:", game.away_line_score, "->", game.away_score)
    print("LINE home:", game.home_line_score, "->", game.home_score)
    print("WINNER:", game.winner, "in", game.innings)
    for p in game.home_pitcher_stats + game.away_pitcher_stats:
        if p.batters_faced:
            print(f"  {p.player_id}: {p.innings_pitched:.1f} IP {p.runs_allowed} R {p.strikeouts} K"
                  f"{' W' if p.win else ''}{' L' if p.loss else ''}{' S' if p.save else ''}{' H' if p.hold else ''}")

    players = [{"player_id": f"h{i}", "role": "HITTER", "rating": 55} for i in range(13)]
    players += [{"player_id": f"p{i}", "role": "PITCHER", "rating": 52} for i in range(13)]
    ai_teams = [{"team_id": f"ai{i}", "name": f"Club {i}", "base_strength": 40 + i} for i in range(19)]
    season = simulate_season(
        {
            "players": players,
            "tier": "LOW_A",
            "stadium_capacity": 5000,
            "ai_teams": ai_teams,
        },
        rng=rng,
    )
    print("SEASON:", f"{season.wins}-{season.losses}", "rank", season.division_rank,
          "playoffs", season.made_playoffs, season.playoffs.model_dump())
    print("GATE:", season.avg_attendance, "avg,", season.total_attendance, "total")


if __name__ == "__main__":
    main()
