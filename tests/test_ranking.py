import pytest

from ranking.core import NotFound
from ranking.services import ORDERING


@pytest.fixture
def populated(make_user):
    scores = [120, 45, 300, 45, 0, 980, 45, 300, 7, 120, 64, 0]
    return [make_user(score=score) for score in scores]


def test_top_k_breaks_ties_by_creation_order(ranking, make_user):
    first = make_user(score=300)
    second = make_user(score=300)
    third = make_user(score=150)

    entries = ranking.top_k(3)

    assert [entry.user.id for entry in entries] == [first.id, second.id, third.id]
    assert [entry.position for entry in entries] == [1, 2, 3]


def test_top_k_with_fewer_users_returns_everyone(ranking, make_user):
    make_user(score=5)
    make_user(score=9)

    entries = ranking.top_k(10)

    assert [entry.user.score for entry in entries] == [9, 5]


def test_top_k_on_empty_store(ranking):
    assert ranking.top_k(5) == []


def test_top_k_is_sorted_and_prefix_of_first_page(ranking, populated):
    for k in (1, 4, len(populated), len(populated) + 3):
        entries = ranking.top_k(k)
        assert len(entries) == min(k, len(populated))
        keys = [ORDERING.sort_key(entry.user) for entry in entries]
        assert keys == sorted(keys)
        page = ranking.page(1, k)
        assert [entry.to_dict() for entry in entries] == [
            entry.to_dict() for entry in page.entries[: len(entries)]
        ]


def test_top_k_defaults_to_leaderboard_size(ranking, make_user):
    for score in range(15):
        make_user(score=score)

    assert len(ranking.top_k()) == ranking.leaderboard_size == 10


def test_rank_of_counts_users_strictly_above(ranking, store, populated):
    rows = store.list_all()
    for row in populated:
        lookup = ranking.rank_of(row.id)
        above = sum(1 for other in rows if ORDERING.precedes(other, row))
        assert lookup.position == above + 1
        assert lookup.total_users == len(populated)
        assert lookup.user.id == row.id


def test_every_user_has_a_unique_position(ranking, populated):
    positions = {ranking.rank_of(row.id).position for row in populated}

    assert positions == set(range(1, len(populated) + 1))


def test_rank_of_is_reproducible_from_pages(ranking, populated):
    listed = []
    page_number = 1
    while True:
        page = ranking.page(page_number, 5)
        if not page.entries:
            break
        listed.extend(page.entries)
        page_number += 1

    for entry in listed:
        assert ranking.rank_of(entry.user.id).position == entry.position


def test_rank_of_unknown_user(ranking, populated):
    with pytest.raises(NotFound):
        ranking.rank_of("ghost")


def test_reads_are_idempotent(ranking, populated):
    target = populated[3].id

    assert [e.to_dict() for e in ranking.top_k(5)] == [e.to_dict() for e in ranking.top_k(5)]
    assert ranking.rank_of(target).to_dict() == ranking.rank_of(target).to_dict()
    assert ranking.page(2, 4).to_dict() == ranking.page(2, 4).to_dict()


def test_pagination_boundaries(ranking, make_user):
    for index in range(45):
        make_user(score=index * 3)

    first = ranking.page(1, 20)
    assert len(first.entries) == 20
    assert first.pagination.to_dict() == {
        "currentPage": 1,
        "totalPages": 3,
        "totalUsers": 45,
        "pageSize": 20,
        "hasNextPage": True,
        "hasPrevPage": False,
    }

    third = ranking.page(3, 20)
    assert len(third.entries) == 5
    assert [entry.position for entry in third.entries] == [41, 42, 43, 44, 45]
    assert third.pagination.has_next_page is False
    assert third.pagination.has_prev_page is True

    beyond = ranking.page(4, 20)
    assert beyond.entries == []
    assert beyond.pagination.current_page == 4
    assert beyond.pagination.total_pages == 3
    assert beyond.pagination.has_next_page is False


def test_page_positions_are_global(ranking, populated):
    page = ranking.page(2, 5)

    assert [entry.position for entry in page.entries] == [6, 7, 8, 9, 10]


def test_page_parameters_are_coerced(ranking, populated):
    page = ranking.page("0", "-3")
    assert page.pagination.current_page == 1
    assert page.pagination.page_size == 1

    page = ranking.page(None, None)
    assert page.pagination.current_page == 1
    assert page.pagination.page_size == ranking.default_page_size

    page = ranking.page("2", "abc")
    assert page.pagination.page_size == ranking.default_page_size


def test_empty_population_pagination(ranking):
    page = ranking.page(1, 20)

    assert page.entries == []
    assert page.pagination.total_pages == 0
    assert page.pagination.has_next_page is False
    assert page.pagination.has_prev_page is False


def test_large_k_and_page_size_are_not_truncated(ranking, make_user):
    for index in range(150):
        make_user(score=index)

    assert len(ranking.top_k(150)) == 150
    assert len(ranking.top_k(10**30)) == 150

    page = ranking.page(1, 150)
    assert len(page.entries) == 150
    assert page.pagination.page_size == 150
    assert page.pagination.total_pages == 1
    assert page.pagination.has_next_page is False


def test_huge_page_number_is_an_empty_page(ranking, populated):
    page = ranking.page("99999999999999999999", 20)

    assert page.entries == []
    assert page.pagination.current_page == 99999999999999999999
    assert page.pagination.total_pages == 1
    assert page.pagination.total_users == len(populated)
    assert page.pagination.has_next_page is False
    assert page.pagination.has_prev_page is True
