from __future__ import annotations
import enum
from dataclasses import dataclass, field
from typing import Callable, Coroutine, Any

test_fn_t = Callable[..., Coroutine[Any, Any, 'TestResult']]

@dataclass
class TestError:
  """A Test that raised instead of returning a Result."""
  name: str
  error: BaseException

class TestCode(enum.Enum):
  PASS = enum.auto()
  FAIL = enum.auto()
  SKIP = enum.auto()

@dataclass(frozen=True)
class TestResult:
  code: TestCode
  """The Result of the Test."""
  msg: str | None = None
  """An Optional Descriptive Message associated w/ the Result; ex. the failed assertion."""

  def __str__(self) -> str:
    if self.msg is None: return f"Test {self.code.name}"
    return f"Test {self.code.name}: {self.msg}"

@dataclass
class TestRegistry:
  tests: dict[str, dict[str, test_fn_t]] = field(default_factory=dict)

  @property
  def groups(self) -> tuple[str, ...]:
    """The Registered Test Groups."""
    return tuple(self.tests.keys())

  def register(self, group_name: str, name: str, fn: test_fn_t) -> None:
    """Register a Test in a Group."""
    if group_name not in self.tests: self.tests[group_name] = {}
    if name in self.tests[group_name]: raise ValueError(f"Test {group_name}::{name} is already registered")
    self.tests[group_name][name] = fn

  def get_group_tests(self, group_name: str, *args, **kwargs) -> dict[str, Coroutine[Any, Any, TestResult]]:
    """Instantiate the Tests of a Group; the returned Coroutines still need to be awaited."""
    if group_name not in self.tests: raise ValueError(f"Group {group_name} does not exist")
    return { name: fn(*args, **kwargs) for name, fn in self.tests[group_name].items() }

test_registry = TestRegistry()
"""The Shared Test Registry."""
