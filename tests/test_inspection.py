from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Annotated, NamedTuple, Optional, Union
from unittest import mock

import pytest

from nucleus.domain import ParameterSpec, type_name
from nucleus.errors import NotConstructibleError
from nucleus.inspection import is_primitive, parameter_types, satisfied_type_names


class Store(ABC):
    @abstractmethod
    def get(self, key: str) -> str:
        pass


class FileStore(Store):
    def get(self, key: str) -> str:
        return "file"


class Clock:
    def now(self) -> float:
        return 0.0


class Scheduler:
    def __init__(self, store: Store, clock: Clock):
        self.store = store
        self.clock = clock


class NightlyScheduler(Scheduler):
    pass


class Bare:
    pass


@dataclass
class Job:
    store: Store
    name: str


class Settings(dict):
    pass


class Point(NamedTuple):
    x: int
    y: int


def test_parameters_are_listed_in_declaration_order():
    assert parameter_types(Scheduler) == [
        ParameterSpec(0, "store", Store),
        ParameterSpec(1, "clock", Clock),
    ]


def test_inherited_constructor_is_inspected():
    assert [p.declared_type for p in parameter_types(NightlyScheduler)] == [Store, Clock]


def test_untyped_and_primitive_parameters_keep_their_position():
    class Worker:
        def __init__(self, store: Store, retries: int, label, clock: Clock):
            pass

    assert [(p.position, p.name, p.declared_type) for p in parameter_types(Worker)] == [
        (0, "store", Store),
        (1, "retries", None),
        (2, "label", None),
        (3, "clock", Clock),
    ]


def test_dataclass_constructor_is_inspected():
    assert parameter_types(Job) == [
        ParameterSpec(0, "store", Store),
        ParameterSpec(1, "name", None),
    ]


def test_optional_and_annotated_types_are_unwrapped():
    class Worker:
        def __init__(
            self,
            store: Optional[Store],
            clock: Annotated[Clock, "wall"],
            other: Clock | None = None,
        ):
            pass

    assert [p.declared_type for p in parameter_types(Worker)] == [Store, Clock, Clock]


def test_annotated_inside_optional_is_unwrapped():
    class Worker:
        def __init__(
            self,
            store: Optional[Annotated[Store, "cold"]],
            clock: Annotated[Optional[Annotated[Clock, "wall"]], "outer"],
        ):
            pass

    assert [p.declared_type for p in parameter_types(Worker)] == [Store, Clock]


def test_unions_and_generics_are_untyped():
    class Worker:
        def __init__(self, either: Union[Store, Clock], stores: list[Store], anything: object):
            pass

    assert [p.declared_type for p in parameter_types(Worker)] == [None, None, None]


def test_variadic_parameters_are_skipped_and_keyword_only_flagged():
    class Worker:
        def __init__(self, store: Store, *args, clock: Clock, **kwargs):
            pass

    assert parameter_types(Worker) == [
        ParameterSpec(0, "store", Store),
        ParameterSpec(1, "clock", Clock, keyword_only=True),
    ]


def test_class_without_constructor_is_rejected():
    with pytest.raises(NotConstructibleError, match="has no constructor"):
        parameter_types(Bare)


def test_non_class_target_is_rejected():
    def make_scheduler(store: Store) -> Scheduler:
        return Scheduler(store, Clock())

    with pytest.raises(NotConstructibleError, match="is not a class"):
        parameter_types(make_scheduler)


def test_unresolvable_annotation_is_rejected():
    class Worker:
        def __init__(self, store: "MissingStore"):  # noqa: F821
            pass

    with pytest.raises(NotConstructibleError, match="Unable to resolve"):
        parameter_types(Worker)


def test_type_name_is_fully_qualified():
    assert type_name(Clock) == f"{__name__}.Clock"
    assert ParameterSpec(0, "clock", Clock).type_name == f"{__name__}.Clock"
    assert ParameterSpec(0, "label", None).type_name is None


def test_satisfied_type_names_follow_the_class_hierarchy():
    assert satisfied_type_names(FileStore()) == {
        type_name(FileStore),
        type_name(Store),
        type_name(ABC),
    }


def test_spec_mocks_satisfy_the_class_they_impersonate():
    store = mock.create_autospec(FileStore, instance=True)

    assert type_name(FileStore) in satisfied_type_names(store)
    assert type_name(Store) in satisfied_type_names(store)


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, True),
        ("Store", True),
        (["store"], True),
        ({"store": 1}, True),
        (42, True),
        (Store, True),
        (FileStore(), False),
        (mock.Mock(), False),
        (Settings(), False),
        (Point(1, 2), False),
        (mock.create_autospec(Settings, instance=True), False),
    ],
)
def test_is_primitive(value, expected):
    assert is_primitive(value) is expected
