"""
Unit tests for opportunity_radar.snapshot.
"""

import asyncio

import pytest

from opportunity_radar.aggregator import OpportunityAggregator
from opportunity_radar.snapshot import OpportunitySnapshot

from conftest import make_opp


class CountingAggregator(OpportunityAggregator):
    """Aggregator double that counts calls and can be told to fail."""

    def __init__(self, delay_s=0.0):
        super().__init__([])
        self.calls = 0
        self.fail = False
        self._delay_s = delay_s

    async def aggregate(self):
        self.calls += 1
        if self._delay_s:
            await asyncio.sleep(self._delay_s)
        if self.fail:
            raise RuntimeError("join failed")
        return [make_opp(title=f"Run {self.calls}")]


class TestOpportunitySnapshot:
    @pytest.mark.asyncio
    async def test_first_get_refreshes(self):
        agg = CountingAggregator()
        snapshot = OpportunitySnapshot(agg)
        assert snapshot.refreshed_at is None
        result = await snapshot.get()
        assert [o.title for o in result] == ["Run 1"]
        assert snapshot.refreshed_at is not None

    @pytest.mark.asyncio
    async def test_get_reuses_snapshot(self):
        agg = CountingAggregator()
        snapshot = OpportunitySnapshot(agg)
        await snapshot.get()
        await snapshot.get()
        assert agg.calls == 1

    @pytest.mark.asyncio
    async def test_explicit_refresh_replaces_snapshot(self):
        agg = CountingAggregator()
        snapshot = OpportunitySnapshot(agg)
        await snapshot.get()
        await snapshot.refresh()
        assert [o.title for o in await snapshot.get()] == ["Run 2"]

    @pytest.mark.asyncio
    async def test_max_age_triggers_refresh(self):
        agg = CountingAggregator()
        snapshot = OpportunitySnapshot(agg, max_age_s=0.01)
        await snapshot.get()
        await asyncio.sleep(0.02)
        await snapshot.get()
        assert agg.calls == 2

    @pytest.mark.asyncio
    async def test_concurrent_refreshes_coalesce(self):
        agg = CountingAggregator(delay_s=0.02)
        snapshot = OpportunitySnapshot(agg)
        results = await asyncio.gather(snapshot.get(), snapshot.get(), snapshot.get())
        assert agg.calls == 1
        assert all([o.title for o in r] == ["Run 1"] for r in results)

    @pytest.mark.asyncio
    async def test_failed_refresh_keeps_previous_snapshot(self):
        agg = CountingAggregator()
        snapshot = OpportunitySnapshot(agg)
        await snapshot.refresh()
        agg.fail = True
        with pytest.raises(RuntimeError):
            await snapshot.refresh()
        assert [o.title for o in await snapshot.get()] == ["Run 1"]

    @pytest.mark.asyncio
    async def test_returned_list_is_a_copy(self):
        snapshot = OpportunitySnapshot(CountingAggregator())
        first = await snapshot.get()
        first.clear()
        assert len(await snapshot.get()) == 1


class TestRunPeriodic:
    @pytest.mark.asyncio
    async def test_refreshes_until_stopped(self):
        agg = CountingAggregator()
        snapshot = OpportunitySnapshot(agg)
        stop = asyncio.Event()
        task = asyncio.create_task(snapshot.run_periodic(interval_s=0.01, stop_event=stop))
        await asyncio.sleep(0.05)
        stop.set()
        await asyncio.wait_for(task, timeout=1)
        assert agg.calls >= 2

    @pytest.mark.asyncio
    async def test_survives_failing_refresh(self, caplog):
        agg = CountingAggregator()
        agg.fail = True
        snapshot = OpportunitySnapshot(agg)
        stop = asyncio.Event()
        task = asyncio.create_task(snapshot.run_periodic(interval_s=0.01, stop_event=stop))
        await asyncio.sleep(0.04)
        stop.set()
        await asyncio.wait_for(task, timeout=1)
        assert agg.calls >= 2
        assert "Scheduled opportunity aggregation failed" in caplog.text
