from datetime import datetime, timezone

from ranking.models import UserScore
from ranking.services import ORDERING


def test_sql_order_matches_python_key(store, make_user):
    same_time = datetime(2024, 5, 1, 9, 30, tzinfo=timezone.utc)
    make_user(score=100)
    make_user(score=250)
    make_user(score=100, user_id="b-user", created_at=same_time)
    make_user(score=100, user_id="a-user", created_at=same_time)
    make_user(score=0)

    rows = store.list_all()

    assert [row.id for row in rows] == [
        row.id for row in sorted(rows, key=ORDERING.sort_key)
    ]
    assert [row.score for row in rows] == [250, 100, 100, 100, 0]


def test_identical_timestamps_fall_back_to_id(store, make_user):
    same_time = datetime(2024, 5, 1, 9, 30, tzinfo=timezone.utc)
    make_user(score=10, user_id="zed", created_at=same_time)
    make_user(score=10, user_id="amy", created_at=same_time)

    rows = store.list_all()

    assert [row.id for row in rows] == ["amy", "zed"]
    assert ORDERING.precedes(rows[0], rows[1])
    assert not ORDERING.precedes(rows[1], rows[0])


def test_ranks_above_counts_strict_predecessors(store, make_user):
    make_user(score=300)
    make_user(score=300)
    make_user(score=150)
    make_user(score=300)

    rows = store.list_all()
    for index, row in enumerate(rows):
        assert store.count_ranked_above(row) == index
        expected = sum(1 for other in rows if ORDERING.precedes(other, row))
        assert expected == index


def test_naive_and_aware_timestamps_share_one_key():
    aware = UserScore(
        id="a",
        display_name="A",
        score=5,
        created_at=datetime(2024, 5, 1, 9, 30, tzinfo=timezone.utc),
    )
    naive = UserScore(
        id="b",
        display_name="B",
        score=5,
        created_at=datetime(2024, 5, 1, 9, 30),
    )

    assert ORDERING.precedes(aware, naive)
    assert not ORDERING.precedes(naive, aware)
