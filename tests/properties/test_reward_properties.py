"""
Property-based tests for distance-shaped rewards.

Properties:
    - Bounded shaping: shaping term always in [min, max]
    - Monotonic: closing distance never yields negative shaping
    - Terminal bonus added exactly once, on top of shaping
"""

import math

from hypothesis import given, settings
from hypothesis import strategies as st

from seeker_sim.rewards import DistanceShapingReward
from tests.strategies import finite_floats, valid_config_strategy

distances = finite_floats(0.0, 50.0)


@given(config=valid_config_strategy(), prev=distances, nxt=distances)
@settings(deadline=None, max_examples=200)
def test_shaping_within_bounds(config, prev, nxt):
    reward_fn = DistanceShapingReward.from_config(config)
    shaping = reward_fn.compute_reward(prev, nxt).shaping
    assert config.distance_reward_min <= shaping <= config.distance_reward_max


@given(
    scale=finite_floats(0.0, 10.0),
    prev=distances,
    progress=finite_floats(0.0, 50.0),
)
@settings(deadline=None)
def test_closing_distance_never_penalized_by_shaping(scale, prev, progress):
    reward_fn = DistanceShapingReward(scale=scale)
    assert reward_fn.compute_reward(prev, prev - progress).shaping >= 0.0


@given(prev=distances, nxt=distances, bonus=finite_floats(0.0, 10.0))
@settings(deadline=None)
def test_terminal_bonus_is_additive(prev, nxt, bonus):
    reward_fn = DistanceShapingReward(terminal_bonus=bonus)
    plain = reward_fn.compute_reward(prev, nxt)
    reached = reward_fn.compute_reward(prev, nxt, reached=True)
    assert reached.shaping == plain.shaping
    assert math.isclose(reached.total - plain.total, bonus, abs_tol=1e-9)


@given(nxt=st.one_of(st.none(), distances))
def test_no_shaping_without_previous_distance(nxt):
    reward_fn = DistanceShapingReward()
    assert reward_fn.compute_reward(None, nxt).shaping == 0.0
