"""Tests for pagerduty_rest.hooks module."""

# ruff: noqa: ARG001, ARG002
from typing import Any

import pytest
from pagerduty_rest.hooks import Hooks, invoke_with_hooks, with_hooks


def test_hooks_order() -> None:
    """Test built-in hooks run before user hooks around the call."""
    execution_order: list[str] = []

    @with_hooks(
        hooks=Hooks(
            pre_hooks=[lambda _: execution_order.append("builtin_pre")],
            post_hooks=[lambda _: execution_order.append("builtin_post")],
        )
    )
    class TestApi:
        def __init__(self, hooks: Hooks | None = None) -> None:
            pass

        @invoke_with_hooks(lambda _: {"test": "context"})
        def do_work(self) -> str:
            execution_order.append("main")
            return "result"

    api = TestApi(
        hooks=Hooks(
            pre_hooks=[lambda _: execution_order.append("user_pre")],
            post_hooks=[lambda _: execution_order.append("user_post")],
        )
    )

    assert api.do_work() == "result"
    assert execution_order == [
        "builtin_pre",
        "user_pre",
        "main",
        "builtin_post",
        "user_post",
    ]


def test_hooks_receive_context() -> None:
    contexts: list[Any] = []

    @with_hooks(hooks=Hooks(pre_hooks=[contexts.append]))
    class TestApi:
        name = "api-1"

        def __init__(self, hooks: Hooks | None = None) -> None:
            pass

        @invoke_with_hooks(lambda self: {"name": self.name})
        def do_work(self, value: int) -> int:
            return value * 2

    assert TestApi().do_work(21) == 42
    assert contexts == [{"name": "api-1"}]


def test_error_hooks() -> None:
    execution_order: list[str] = []

    @with_hooks(
        hooks=Hooks(
            error_hooks=[lambda _: execution_order.append("error")],
            post_hooks=[lambda _: execution_order.append("post")],
        )
    )
    class TestApi:
        def __init__(self, hooks: Hooks | None = None) -> None:
            pass

        @invoke_with_hooks(lambda _: None)
        def do_work(self) -> None:
            execution_order.append("main")
            raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        TestApi().do_work()

    assert execution_order == ["main", "error", "post"]


def test_with_hooks_positional_hooks_argument() -> None:
    execution_order: list[str] = []

    @with_hooks(hooks=Hooks())
    class TestApi:
        def __init__(self, url: str, hooks: Hooks | None = None) -> None:
            self.url = url

        @invoke_with_hooks(lambda _: None)
        def do_work(self) -> None:
            execution_order.append("main")

    api = TestApi(
        "https://example.com",
        Hooks(pre_hooks=[lambda _: execution_order.append("user")]),
    )
    api.do_work()

    assert api.url == "https://example.com"
    assert execution_order == ["user", "main"]


def test_no_hooks_param_raises_error() -> None:
    @with_hooks(hooks=Hooks())
    class BadApi:
        def __init__(self) -> None:
            pass

    with pytest.raises(ValueError, match="must have a 'hooks' parameter in __init__"):
        BadApi()


def test_invoke_without_hooks_attribute() -> None:
    class PlainApi:
        @invoke_with_hooks(lambda _: None)
        def do_work(self) -> str:
            return "ok"

    assert PlainApi().do_work() == "ok"


def test_merge_none() -> None:
    hooks = Hooks(pre_hooks=[print])
    assert hooks.merge(None) is hooks
