from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from tierboard.exceptions import FetchError
from tierboard.helpers import UserRecord
from tierboard.ranks import compute_ranks, rank_in_roster


@pytest.fixture
def roster():
    return [
        UserRecord("monarch", 120000, 100, True),
        UserRecord("ranker", 110000, 100, False),  # no title, stays National Ranker
        UserRecord("s1", 40000, 60),
        UserRecord("s2", 31000, 55),
        UserRecord("c1", 5000, 20),
        UserRecord("e1", 10, 1),
    ]


@pytest.mark.asyncio
async def test_global_rank_simple():
    users = [UserRecord("A", 500), UserRecord("B", 100), UserRecord("C", 50)]
    fetcher = AsyncMock(return_value=users)
    result = await compute_ranks("B", 100, False, None, fetcher)
    assert result.global_rank == 2
    assert result.tier_rank == 2  # all three are tier E
    fetcher.assert_awaited_once()


@pytest.mark.asyncio
async def test_tier_rank_within_tier(roster):
    fetcher = AsyncMock(return_value=roster)
    result = await compute_ranks("s2", 31000, False, 55, fetcher)
    assert result.global_rank == 4
    assert result.tier_rank == 2
    assert result.tier.key == "S"
    assert result.is_ranked


@pytest.mark.asyncio
async def test_monarch_tier_rank(roster):
    fetcher = AsyncMock(return_value=roster)
    result = await compute_ranks("monarch", 120000, True, 100, fetcher)
    assert result.global_rank == 1
    assert result.tier_rank == 1
    assert result.tier.key == "Monarch"
    ranker = await compute_ranks("ranker", 110000, False, 100, fetcher)
    assert ranker.global_rank == 2
    assert ranker.tier_rank == 1
    assert ranker.tier.key == "National Ranker"


@pytest.mark.asyncio
async def test_absent_user_is_unranked(roster):
    fetcher = AsyncMock(return_value=roster)
    result = await compute_ranks("ghost", 5000, False, None, fetcher)
    assert result.global_rank == 0
    assert result.tier_rank == 0
    assert not result.is_ranked


@pytest.mark.asyncio
async def test_empty_roster():
    result = await compute_ranks("A", 0, False, None, AsyncMock(return_value=[]))
    assert (result.global_rank, result.tier_rank) == (0, 0)


@pytest.mark.asyncio
async def test_fetch_error_propagates():
    fetcher = AsyncMock(side_effect=FetchError("firestore down"))
    with pytest.raises(FetchError):
        await compute_ranks("A", 0, False, None, fetcher)


@pytest.mark.asyncio
async def test_other_fetch_failures_wrapped():
    fetcher = AsyncMock(side_effect=ConnectionError("reset"))
    with pytest.raises(FetchError) as exc_info:
        await compute_ranks("A", 0, False, None, fetcher)
    assert isinstance(exc_info.value.__cause__, ConnectionError)


@pytest.mark.asyncio
async def test_sync_fetcher_accepted(roster):
    fetcher = MagicMock(return_value=roster)
    result = await compute_ranks("c1", 5000, False, 20, fetcher)
    assert result.global_rank == 5
    assert result.tier_rank == 1
    fetcher.assert_called_once_with()


def test_target_classified_from_arguments(roster):
    # The stored record says tier S, the caller's values say tier C
    result = rank_in_roster(roster, "s1", 5000, False, None)
    assert result.tier.key == "C"
    assert result.global_rank == 3
    assert result.tier_rank == 0


@pytest.mark.asyncio
async def test_provider_fetch_error_not_logged_again():
    fetcher = AsyncMock(side_effect=FetchError("firestore down"))
    with patch("tierboard.ranks.logger") as fake_logger, pytest.raises(FetchError):
        await compute_ranks("A", 0, False, None, fetcher)
    fake_logger.exception.assert_not_called()
    fake_logger.error.assert_not_called()
