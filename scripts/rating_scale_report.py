"""
Print projected season lines for flat-rated hitters across the 20-80 scale.
"""
import os, sys
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from franchise_sim.calibration.projections import validate_rating_scale
from franchise_sim.sampler.rng import make_rng


def main():
    rows = validate_rating_scale(rng=make_rng(7))
    print(f"{'rating':>6}  {'BA':>5}  {'HR':>3}  {'OPS':>5}  type")
    for r in rows:
        print(f"{r.rating:>6}  {r.expected_ba:>5}  {r.expected_hr:>3}  {r.expected_ops:>5}  {r.player_type}")


if __name__ == "__main__":
    main()
