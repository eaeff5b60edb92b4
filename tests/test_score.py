from jpegtune.score import score_jpeg


def test_within_target_returns_size():
    assert score_jpeg(0.5, 1234, 1.0) == 1234
    assert score_jpeg(1.0, 1234, 1.0) == 1234


def test_above_target_penalized():
    assert score_jpeg(1.05, 1000, 1.0) > 1000


def test_monotonic_in_distance():
    scores = [score_jpeg(1.0 + d / 100, 1000, 1.0) for d in range(0, 60)]
    assert scores == sorted(scores)


def test_far_above_target_is_huge():
    assert score_jpeg(2.0, 10, 1.0) > 1e30


def test_smaller_size_wins_at_equal_distance():
    assert score_jpeg(1.1, 500, 1.0) < score_jpeg(1.1, 600, 1.0)