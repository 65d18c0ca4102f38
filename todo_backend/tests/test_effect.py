import asyncio

from tracker.effect import Effect, Err, Ok


def run(effect):
    return asyncio.run(effect.run())


class TestConstructors:
    def test_succeed_and_fail(self):
        assert run(Effect.succeed(1)) == Ok(1)
        assert run(Effect.fail("boom")) == Err("boom")

    def test_result_flags(self):
        assert Ok(1).ok is True
        assert Err("x").ok is False

    def test_nothing_runs_until_awaited(self):
        calls = []
        effect = Effect.from_callable(lambda: calls.append("ran") or 42)
        assert calls == []
        assert run(effect) == Ok(42)
        assert calls == ["ran"]

    def test_effect_can_run_twice(self):
        counter = {"n": 0}

        def bump():
            counter["n"] += 1
            return counter["n"]

        effect = Effect.from_callable(bump)
        assert run(effect) == Ok(1)
        assert run(effect) == Ok(2)


class TestMap:
    def test_map_applies_to_success(self):
        assert run(Effect.succeed(2).map(lambda n: n * 10)) == Ok(20)

    def test_map_passes_failure_through(self):
        calls = []
        effect = Effect.fail("nope").map(lambda v: calls.append(v))
        assert run(effect) == Err("nope")
        assert calls == []

    def test_map_equals_flat_map_with_succeed(self):
        f = lambda n: n + 1  # noqa: E731
        via_map = Effect.succeed(5).map(f)
        via_flat_map = Effect.succeed(5).flat_map(lambda n: Effect.succeed(f(n)))
        assert run(via_map) == run(via_flat_map) == Ok(6)


class TestFlatMap:
    def test_left_identity(self):
        f = lambda n: Effect.succeed(n * 3)  # noqa: E731
        assert run(Effect.succeed(4).flat_map(f)) == run(f(4))

    def test_failure_short_circuits(self):
        calls = []

        def f(v):
            calls.append(v)
            return Effect.succeed(v)

        assert run(Effect.fail("e").flat_map(f)) == Err("e")
        assert calls == []

    def test_inner_failure_is_returned(self):
        effect = Effect.succeed(1).flat_map(lambda _: Effect.fail("inner"))
        assert run(effect) == Err("inner")

    def test_steps_run_in_order(self):
        steps = []

        def step(name):
            def _inner(_):
                steps.append(name)
                return Effect.succeed(name)
            return _inner

        effect = Effect.succeed(None).flat_map(step("load")).flat_map(step("save"))
        assert run(effect) == Ok("save")
        assert steps == ["load", "save"]


class TestFromAwaitable:
    def test_resolved_value_becomes_ok(self):
        async def fetch():
            await asyncio.sleep(0)
            return "data"

        effect = Effect.from_awaitable(fetch, lambda exc: f"failed: {exc}")
        assert run(effect) == Ok("data")

    def test_exception_becomes_typed_failure(self):
        async def explode():
            raise RuntimeError("disk on fire")

        effect = Effect.from_awaitable(explode, lambda exc: {"kind": type(exc).__name__, "message": str(exc)})
        assert run(effect) == Err({"kind": "RuntimeError", "message": "disk on fire"})

    def test_failure_from_adapter_short_circuits_chain(self):
        async def explode():
            raise ValueError("bad")

        calls = []
        effect = Effect.from_awaitable(explode, str).map(calls.append)
        assert run(effect) == Err("bad")
        assert calls == []
