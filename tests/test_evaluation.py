import numpy as np

from noughts import Board, Cell
from noughts.evaluation import difficulty_sweep, evaluate_policies, sound_move_rate
from noughts.policies import HeuristicPolicy, RandomPolicy


def test_evaluate_random_vs_random_small():
    policy_x = RandomPolicy(np.random.default_rng(0))
    policy_o = RandomPolicy(np.random.default_rng(1))
    result = evaluate_policies(policy_x, policy_o, episodes=5, rng=np.random.default_rng(2))

    assert result.games_played == 5
    assert result.x_wins + result.o_wins + result.draws == 5
    assert 5 <= result.average_length <= 9


def test_heuristic_beats_random_at_full_difficulty():
    policy_x = RandomPolicy(np.random.default_rng(0))
    policy_o = HeuristicPolicy(100, rng=np.random.default_rng(1))
    result = evaluate_policies(policy_x, policy_o, episodes=200, rng=np.random.default_rng(2))

    assert result.winrate_o() > result.winrate_x()
    assert result.o_wins + result.draws > 150


def test_heuristic_policy_is_one_hot_on_legal_cell():
    policy = HeuristicPolicy(0, symbol=Cell.X, rng=np.random.default_rng(4))
    board = Board.from_string("XO./.../...")
    mask = np.array([0, 0, 1, 1, 1, 1, 1, 1, 1], dtype=np.int8)
    probs = policy.act(board, mask)

    assert probs.sum() == 1.0
    assert mask[int(np.argmax(probs))] == 1


def test_random_policy_distribution():
    probs = RandomPolicy().act(Board.empty(), np.ones(9, dtype=np.int8))
    assert np.allclose(probs, 1.0 / 9)


def test_full_difficulty_always_plays_ladder():
    board = Board.from_string("X../.../...")
    assert sound_move_rate(board, 100, trials=200, rng=np.random.default_rng(0)) == 1.0


def test_sound_moves_increase_with_difficulty():
    board = Board.from_string("X../.../...")
    sweep = difficulty_sweep(board, [0, 25, 50, 75, 100], trials=2000, seed=0)
    rates = [rate for _, rate in sweep]

    assert [difficulty for difficulty, _ in sweep] == [0, 25, 50, 75, 100]
    assert all(earlier < later for earlier, later in zip(rates, rates[1:]))
    assert rates[0] < 0.3
    assert rates[-1] == 1.0
