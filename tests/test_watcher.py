import asyncio
import pytest
from static_map.core.errors import RouteResolutionTimeout
from static_map.utils.watcher import ReadinessWatcher


def test_watcher_waits_for_predicate():
    async def scenario():
        state = {"ready": False, "calls": 0}

        def on_ready():
            state["calls"] += 1

        watcher = ReadinessWatcher(lambda: state["ready"], interval=0.01, on_ready=on_ready)
        waiter = asyncio.create_task(watcher.wait())
        await asyncio.sleep(0.03)
        assert not waiter.done()

        state["ready"] = True
        await waiter
        assert watcher.done()
        # a second wait does not run the continuation again
        await watcher.wait()
        assert state["calls"] == 1

    asyncio.run(scenario())


def test_watcher_ready_immediately():
    async def scenario():
        watcher = ReadinessWatcher(lambda: True, interval=10)
        await asyncio.wait_for(watcher.wait(), 1)
        assert watcher.done()

    asyncio.run(scenario())


def test_watcher_times_out():
    async def scenario():
        watcher = ReadinessWatcher(lambda: False, interval=0.01, timeout=0.05)
        with pytest.raises(RouteResolutionTimeout):
            await watcher.wait()
        assert watcher.done()

    asyncio.run(scenario())


def test_watcher_cancel_stops_polling():
    async def scenario():
        calls = []

        def predicate():
            calls.append(1)
            return False

        watcher = ReadinessWatcher(predicate, interval=0.01).start()
        await asyncio.sleep(0.03)
        watcher.cancel()
        await asyncio.sleep(0.01)
        assert watcher.done()

        polled = len(calls)
        await asyncio.sleep(0.03)
        assert len(calls) == polled

    asyncio.run(scenario())
