import asyncio

from rfcaps.CapabilityApi.DeviceCapabilities.debounce import debounce


def test_burst_fires_once_with_last_arguments():
    async def scenario():
        loop = asyncio.get_running_loop()
        start = loop.time()
        calls = []
        search = debounce(lambda term: calls.append((loop.time() - start, term)), 300)

        search("s")
        await asyncio.sleep(0.05)
        search("sm")
        await asyncio.sleep(0.05)
        search("sm-s")
        assert search.pending is True
        await asyncio.sleep(0.6)
        return calls, search.pending

    calls, pending = asyncio.run(scenario())
    assert len(calls) == 1
    fired_at, term = calls[0]
    assert term == "sm-s"
    assert 0.38 <= fired_at < 0.9
    assert pending is False


def test_debouncers_do_not_share_timers():
    async def scenario():
        calls = []
        vendor = debounce(lambda value: calls.append(("vendor", value)), 50)
        model = debounce(lambda value: calls.append(("model", value)), 50)
        vendor("Apple")
        model("A3090")
        await asyncio.sleep(0.2)
        return calls

    assert sorted(asyncio.run(scenario())) == [("model", "A3090"), ("vendor", "Apple")]


def test_steady_input_never_fires_until_quiet():
    async def scenario():
        calls = []
        search = debounce(calls.append, 100)
        for i in range(6):
            search(i)
            await asyncio.sleep(0.03)
        during = list(calls)
        await asyncio.sleep(0.3)
        return during, calls

    during, after = asyncio.run(scenario())
    assert during == []
    assert after == [5]


def test_coroutine_callback_is_awaited():
    async def scenario():
        calls = []

        async def search(term):
            await asyncio.sleep(0)
            calls.append(term)
            return term

        debounced = debounce(search, 20)
        debounced("s")
        debounced("sm")
        await asyncio.sleep(0.1)
        return calls, debounced.task

    calls, task = asyncio.run(scenario())
    assert calls == ["sm"]
    assert task.done() and task.result() == "sm"


def test_failing_coroutine_callback_is_logged(caplog):
    async def scenario():
        async def search(term):
            raise RuntimeError(f"backend down for {term}")

        debounced = debounce(search, 10)
        debounced("sm")
        await asyncio.sleep(0.1)
        return debounced.task

    with caplog.at_level("ERROR"):
        task = asyncio.run(scenario())
    assert isinstance(task.exception(), RuntimeError)
    assert "backend down for sm" in caplog.text
