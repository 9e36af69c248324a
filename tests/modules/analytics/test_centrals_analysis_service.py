# -*- coding: utf-8 -*-
import httpx
import pytest

from app.modules.analytics.errors import UpstreamUnavailableError
from app.modules.analytics.schemas import CentralRef
from app.modules.analytics.services import CentralsAnalysisService, build_summary


class FakeRepository:
    def __init__(self, centrals, records_by_name, failing=()):
        self.centrals = centrals
        self.records_by_name = records_by_name
        self.failing = set(failing)
        self.searched = []

    async def list_centrals(self):
        return list(self.centrals)

    async def search_volume_records(self, central_name):
        self.searched.append(central_name)
        if central_name in self.failing:
            raise UpstreamUnavailableError("HTTP 503", status_code=503)
        return self.records_by_name.get(central_name, [])


class BrokenListRepository(FakeRepository):
    async def list_centrals(self):
        raise UpstreamUnavailableError("No fue posible contactar WordPress")


def _rec(date, volume):
    return {"date": date, "meta": {"volume": volume}}


@pytest.mark.anyio
async def test_results_sorted_by_total_volume_desc_with_summary():
    repo = FakeRepository(
        [CentralRef(id=1, name="A"), CentralRef(id=2, name="B"), CentralRef(id=3, name="C")],
        {
            "A": [_rec("2024-01-01", "5")],
            "B": [_rec("2024-01-01", "50"), _rec("2024-02-01", "10")],
            "C": [],
        },
    )
    analysis = await CentralsAnalysisService(repo).analyze()

    assert [c.central_name for c in analysis.centrals] == ["B", "A", "C"]
    assert repo.searched == ["A", "B", "C"]  # secuencial, en orden de WordPress
    assert analysis.summary.total_centrals == 3
    assert analysis.summary.total_volume == 65
    assert analysis.summary.total_posts == 3
    assert analysis.summary.average_volume_per_central == 21.67
    assert analysis.generated_at.endswith("+00:00")


@pytest.mark.anyio
async def test_failing_central_gets_zeroed_entry_and_batch_continues():
    repo = FakeRepository(
        [CentralRef(id=1, name="A"), CentralRef(id=2, name="B")],
        {"B": [_rec("2024-01-01", "8")]},
        failing={"A"},
    )
    analysis = await CentralsAnalysisService(repo).analyze()

    by_name = {c.central_name: c for c in analysis.centrals}
    assert by_name["A"].error == "HTTP 503"
    assert by_name["A"].total_volume == 0
    assert by_name["A"].central_id == 1
    assert by_name["B"].error is None
    assert by_name["B"].total_volume == 8
    assert analysis.summary.total_centrals == 2


@pytest.mark.anyio
async def test_central_without_name_is_reported_not_searched():
    repo = FakeRepository([CentralRef(id=9, name=None)], {})
    analysis = await CentralsAnalysisService(repo).analyze()

    assert repo.searched == []
    assert analysis.centrals[0].error == "Central sin nombre"


@pytest.mark.anyio
async def test_centrals_list_failure_propagates():
    with pytest.raises(UpstreamUnavailableError):
        await CentralsAnalysisService(BrokenListRepository([], {})).analyze()


@pytest.mark.anyio
async def test_no_centrals_gives_empty_summary():
    analysis = await CentralsAnalysisService(FakeRepository([], {})).analyze()
    assert analysis.centrals == []
    assert analysis.summary.total_centrals == 0
    assert analysis.summary.average_volume_per_central == 0


def test_build_summary_empty():
    s = build_summary([])
    assert (s.total_centrals, s.total_volume, s.total_posts, s.average_volume_per_central) == (0, 0, 0, 0)


class ExplodingRepository(FakeRepository):
    async def search_volume_records(self, central_name):
        if central_name == "A":
            raise httpx.InvalidURL("bad url")
        return await super().search_volume_records(central_name)


@pytest.mark.anyio
async def test_unexpected_error_in_one_central_does_not_abort_report():
    repo = ExplodingRepository(
        [CentralRef(id=1, name="A"), CentralRef(id=2, name="B")],
        {"B": [_rec("2024-03-01", "5")]},
    )
    analysis = await CentralsAnalysisService(repo).analyze()

    assert [c.central_name for c in analysis.centrals] == ["B", "A"]
    broken = analysis.centrals[1]
    assert broken.error == "bad url"
    assert broken.total_volume == 0
    assert broken.monthly_volumes == []
    assert analysis.centrals[0].total_volume == 5
    assert analysis.summary.total_volume == 5
