"""Shared fixtures: src on the path, no real oracle, scripted fake oracles."""

import os
import sys
from pathlib import Path
from typing import Callable, Dict, List, Union

import pytest


def ensure_src_on_path() -> None:
    root = Path(__file__).resolve().parent.parent
    src_path = root / "src"
    if str(src_path) not in sys.path:
        sys.path.append(str(src_path))


ensure_src_on_path()

# never talk to a real provider from tests
os.environ["ORACLE_API_KEY"] = ""
os.environ.setdefault("ENABLE_ARTIST_VERIFICATION", "true")

from auction_lint.services.oracle import AIOracle, OracleRequest, OracleTask  # noqa: E402

Reply = Union[dict, Exception, Callable[[OracleRequest], dict]]


class FakeOracle(AIOracle):
    """Answers each task from a script; an Exception in the script is raised."""

    def __init__(self, replies: Dict[OracleTask, Reply]):
        self.replies = replies
        self.requests: List[OracleRequest] = []

    async def ask(self, request: OracleRequest) -> dict:
        self.requests.append(request)
        reply = self.replies.get(request.task)
        if reply is None:
            raise AssertionError(f"unexpected oracle task {request.task}")
        if isinstance(reply, Exception):
            raise reply
        if callable(reply):
            return reply(request)
        return dict(reply)

    def tasks(self) -> List[OracleTask]:
        return [r.task for r in self.requests]


@pytest.fixture
def fake_oracle() -> Callable[..., FakeOracle]:
    def _make(**replies: Reply) -> FakeOracle:
        return FakeOracle({OracleTask[name.upper()]: reply for name, reply in replies.items()})

    return _make
