from __future__ import annotations

import typing

import pytest
from kungfu import Error, Ok, Result


def expect_ok[T](result: Result[T, typing.Any]) -> T:
    match result:
        case Ok(value):
            return value
        case Error(err):
            pytest.fail(f"expected Ok, got Error({err!r})")


def expect_error[E](result: Result[typing.Any, E]) -> E:
    match result:
        case Error(err):
            return err
        case Ok(value):
            pytest.fail(f"expected Error, got Ok({value!r})")
