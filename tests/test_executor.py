"""Unit tests for the runtime loop model and template input/result helpers."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock

import pytest

from flowscribe.runtime import (
    RunResult,
    RuntimeInput,
    StepRecord,
    inject_input,
    run_steps,
)


def make_step(index: int, result=None, error: Exception | None = None, **kwargs) -> StepRecord:
    execute = AsyncMock(return_value=result, side_effect=error)
    return StepRecord(name=f"step {index}", action="click", execute=execute, **kwargs)


class TestRunSteps:
    # ------------------------------------------------------------------ success

    async def test_all_steps_complete(self):
        steps = [make_step(i) for i in range(3)]
        result = await run_steps(steps)
        assert result.success is True
        assert [s.index for s in result.completed_steps] == [0, 1, 2]
        assert result.failed_step is None
        assert result.resume_from is None

    async def test_output_recorded_under_key(self):
        steps = [make_step(0, result=19.99, output="price"), make_step(1, result="ignored")]
        result = await run_steps(steps)
        assert result.output == {"price": 19.99}

    async def test_none_result_not_recorded(self):
        result = await run_steps([make_step(0, result=None, output="price")])
        assert result.output == {}

    async def test_falsy_result_still_recorded(self):
        result = await run_steps([make_step(0, result=0, output="count")])
        assert result.output == {"count": 0}

    # ------------------------------------------------------------------ failure

    async def test_failure_stops_the_loop(self):
        steps = [
            make_step(0),
            make_step(1, error=RuntimeError("Timeout 30000ms exceeded"), selector="#go", hint="Big blue button"),
            make_step(2),
        ]
        result = await run_steps(steps)

        assert result.success is False
        assert [s.index for s in result.completed_steps] == [0]
        assert result.failed_step.index == 1
        assert result.failed_step.name == "step 1"
        assert result.failed_step.selector == "#go"
        assert result.failed_step.hint == "Big blue button"
        assert result.failed_step.error == "Timeout 30000ms exceeded"
        steps[2].execute.assert_not_awaited()
        assert result.resume_from == 1

    async def test_failed_step_not_retried(self):
        steps = [make_step(0, error=ValueError("nope"))]
        await run_steps(steps)
        steps[0].execute.assert_awaited_once()

    # ------------------------------------------------------------------ resume

    async def test_start_from_step_skips_earlier_steps(self):
        steps = [make_step(i) for i in range(4)]
        result = await run_steps(steps, start_from_step=2)
        assert [s.index for s in result.completed_steps] == [2, 3]
        steps[0].execute.assert_not_awaited()
        steps[1].execute.assert_not_awaited()

    async def test_start_past_end_runs_nothing(self):
        result = await run_steps([make_step(0)], start_from_step=5)
        assert result.success is True
        assert result.completed_steps == []

    async def test_negative_start_rejected(self):
        with pytest.raises(ValueError):
            await run_steps([make_step(0)], start_from_step=-1)


class TestRunResult:
    def test_from_template_result(self):
        data = {
            "success": False,
            "completedSteps": [{"index": 0, "name": "Open", "success": True}],
            "failedStep": {"index": 1, "name": "Fill", "hint": "search box", "error": "boom"},
            "output": {"title": "Home"},
        }
        result = RunResult.from_dict(data)
        assert result.success is False
        assert result.completed_steps[0].name == "Open"
        assert result.failed_step.selector is None
        assert result.failed_step.hint == "search box"
        assert result.resume_from == 1
        assert result.output == {"title": "Home"}

    def test_round_trip_of_successful_result(self):
        data = {
            "success": True,
            "completedSteps": [{"index": 0, "name": "Open", "success": True}],
            "failedStep": None,
            "output": {},
        }
        assert RunResult.from_dict(data).to_dict() == data


class TestInjectInput:
    def test_default_input(self):
        src = inject_input("const inputData = __INPUT_DATA__;")
        payload = src[len("const inputData = "):-1]
        assert json.loads(payload) == {"extract": {}, "constants": {}, "input": {}, "startFromStep": 0}

    def test_runtime_input_object(self):
        runtime_input = RuntimeInput(input={"query": "desk"}, start_from_step=2)
        src = inject_input("x = __INPUT_DATA__", runtime_input)
        assert '"startFromStep":2' in src
        assert '"query":"desk"' in src

    def test_plain_mapping(self):
        assert inject_input("x = __INPUT_DATA__", {"input": {}}) == 'x = {"input":{}}'

    def test_missing_placeholder(self):
        with pytest.raises(ValueError):
            inject_input("no placeholder here")
