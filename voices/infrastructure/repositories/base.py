"""Shared plumbing for SQLAlchemy repositories"""

from typing import Any, Callable, TypeVar

from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool

T = TypeVar("T")


class SqlAlchemyRepository:
    """Runs blocking session work in the threadpool so the event loop stays free"""

    def __init__(self, session: Session):
        self.session = session

    async def _run(self, fn: Callable[[], T]) -> T:
        return await run_in_threadpool(fn)

    def _add_and_flush(self, model: Any) -> Any:
        self.session.add(model)
        self.session.flush()
        return model
