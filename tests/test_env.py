import numpy as np

from cookie4.game.rules import CookieMilkEnv
from cookie4.utils import WIDTH, HEIGHT, Cell


def test_reset_returns_fresh_observation(fresh_render):
    env = CookieMilkEnv(render_mode="ascii")
    observation, info = env.reset()

    assert observation.shape == (HEIGHT, WIDTH)
    assert observation.dtype == np.int8
    assert env.observation_space.contains(observation)
    assert info['valid_actions'] == [0, 1, 2, 3]
    assert info['current_team'] == "cookie"
    assert info['game_state'] == "FRESH"
    assert env.render() == fresh_render


def test_teams_alternate_and_stack():
    env = CookieMilkEnv()
    env.reset()
    env.step(0)
    observation, reward, terminated, truncated, info = env.step(0)

    assert observation[3, 1] == Cell.COOKIE.value
    assert observation[2, 1] == Cell.MILK.value
    assert reward == env.reward_step
    assert not terminated and not truncated
    assert info['current_team'] == "cookie"


def test_cookie_vertical_win_rewards_cookie():
    env = CookieMilkEnv()
    env.reset()
    # Cookie stacks column 1, milk stacks column 2
    for action in [0, 1, 0, 1, 0, 1]:
        _, _, terminated, _, _ = env.step(action)
        assert not terminated

    _, reward, terminated, truncated, info = env.step(0)
    assert terminated and not truncated
    assert reward == env.reward_win
    assert info['winner'] == "Cookie"
    assert info['valid_actions'] == []


def test_milk_win_is_a_loss_for_cookie():
    env = CookieMilkEnv()
    env.reset()
    for action in [0, 1, 0, 1, 0, 1, 2]:
        env.step(action)
    _, reward, terminated, _, info = env.step(1)
    assert terminated
    assert reward == env.reward_lose
    assert info['winner'] == "Milk"


def test_full_column_is_an_invalid_action():
    env = CookieMilkEnv()
    env.reset()
    for _ in range(4):
        env.step(3)
    _, reward, terminated, truncated, info = env.step(3)

    assert reward == env.reward_invalid_move
    assert not terminated and truncated
    assert info['invalid_move'] is True
    assert 3 not in info['valid_actions']


def test_reset_with_seed_rebuilds_board():
    env = CookieMilkEnv()
    env.reset(seed=5)
    assert env.board.seed == 5
    env.step(2)
    observation, _ = env.reset()
    assert env.board.seed == 5
    assert (observation[:-1, 1:-1] == Cell.EMPTY.value).all()
