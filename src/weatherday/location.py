# where the weather is for; resolvers only hand back a Place, they never fetch weather

from __future__ import annotations
from concurrent.futures import Executor, Future
from typing import Protocol

from .config import DEFAULT_PLACE
from .models import Place


class LocationResolver(Protocol):
    def resolve(self) -> Place:
        ...


class StaticLocationResolver:
    # fixed place from config or the command line
    def __init__(self, place: Place = DEFAULT_PLACE):
        self.place = place

    def resolve(self) -> Place:
        return self.place


def resolve_async(resolver: LocationResolver, executor: Executor) -> "Future[Place]":
    # single resolution, errors surface through fut.result()
    return executor.submit(resolver.resolve)
