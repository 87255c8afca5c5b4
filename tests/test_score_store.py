import pytest

from flappy_core.score_store import SqliteScoreStore


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "scores.db")


def test_fresh_store_reads_zero(db_path):
    store = SqliteScoreStore(db_path)
    assert store.read_best() == 0
    store.close()


def test_best_only_goes_up(db_path):
    store = SqliteScoreStore(db_path)
    store.write_best(5)
    assert store.read_best() == 5
    store.write_best(3)
    assert store.read_best() == 5
    store.write_best(5)
    store.write_best(5)
    assert store.read_best() == 5
    store.close()


def test_best_survives_reopening(db_path):
    store = SqliteScoreStore(db_path)
    store.write_best(12)
    store.close()

    reopened = SqliteScoreStore(db_path)
    assert reopened.read_best() == 12
    reopened.close()
