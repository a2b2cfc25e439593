from typing import TYPE_CHECKING

import pytest

from jsonmap import JsonMap

from ._generators import ValueStyle, generate_document, generate_key, generate_object

if TYPE_CHECKING:
    from pytest_codspeed.plugin import BenchmarkFixture

# Scale and style parameters for CI (fast benchmarks)
CI_PARAMS: list[object] = [
    pytest.param("native", 100, id="native-100"),
    pytest.param("native", 1000, id="native-1k"),
    pytest.param("stringly", 100, id="stringly-100"),
    pytest.param("stringly", 1000, id="stringly-1k"),
]

# Larger scale parameters (marked slow)
SLOW_PARAMS: list[object] = [
    pytest.param("native", 10000, id="native-10k", marks=pytest.mark.slow),
    pytest.param("native", 100000, id="native-100k", marks=pytest.mark.slow),
    pytest.param("stringly", 10000, id="stringly-10k", marks=pytest.mark.slow),
    pytest.param("stringly", 100000, id="stringly-100k", marks=pytest.mark.slow),
]

# Edge case parameters for boundary testing
EDGE_PARAMS: list[object] = [
    pytest.param("native", 0, id="native-0"),
    pytest.param("native", 1, id="native-1"),
]

ALL_PARAMS: list[object] = CI_PARAMS + SLOW_PARAMS
ALL_WITH_EDGE_PARAMS: list[object] = ALL_PARAMS + EDGE_PARAMS

GETTERS = [
    "get_byte",
    "get_short",
    "get_integer",
    "get_long",
    "get_float",
    "get_double",
    "get_char",
    "get_string",
    "get_boolean",
]


class TestBenchFromJson:
    @pytest.mark.parametrize(("style", "scale"), ALL_WITH_EDGE_PARAMS)
    def test_from_json(
        self,
        benchmark: "BenchmarkFixture",
        style: ValueStyle,
        scale: int,
    ) -> None:
        document = generate_document(scale, style)

        def parse() -> None:
            _ = JsonMap.from_json(document)

        benchmark(parse)


class TestBenchToJson:
    @pytest.mark.parametrize(("style", "scale"), ALL_WITH_EDGE_PARAMS)
    def test_to_json(
        self,
        benchmark: "BenchmarkFixture",
        style: ValueStyle,
        scale: int,
    ) -> None:
        data = JsonMap.wrap(generate_object(scale, style))

        def serialize() -> None:
            _ = data.to_json()

        benchmark(serialize)


class TestBenchTypedGet:
    @pytest.mark.parametrize("getter", GETTERS)
    @pytest.mark.parametrize(("style", "scale"), CI_PARAMS)
    def test_get_every_key(
        self,
        benchmark: "BenchmarkFixture",
        style: ValueStyle,
        scale: int,
        getter: str,
    ) -> None:
        data = JsonMap.wrap(generate_object(scale, style))
        read = getattr(data, getter)
        keys = list(data)

        def read_all() -> None:
            for key in keys:
                _ = read(key)

        benchmark(read_all)

    @pytest.mark.parametrize(("style", "scale"), CI_PARAMS)
    def test_get_missing_key(
        self,
        benchmark: "BenchmarkFixture",
        style: ValueStyle,
        scale: int,
    ) -> None:
        data = JsonMap.wrap(generate_object(scale, style))
        missing_key = generate_key(scale + 1000)

        def get_missing() -> None:
            _ = data.get_integer(missing_key)

        benchmark(get_missing)


class TestBenchPut:
    @pytest.mark.parametrize(("style", "scale"), ALL_PARAMS)
    def test_put_value_chain(
        self,
        benchmark: "BenchmarkFixture",
        style: ValueStyle,
        scale: int,
    ) -> None:
        entries = list(generate_object(scale, style).items())

        def build() -> None:
            data = JsonMap[object]()
            for key, value in entries:
                data = data.put_value(key, value)

        benchmark(build)

    @pytest.mark.parametrize(("style", "scale"), CI_PARAMS)
    def test_put_all(
        self,
        benchmark: "BenchmarkFixture",
        style: ValueStyle,
        scale: int,
    ) -> None:
        source = generate_object(scale, style)

        def merge() -> None:
            JsonMap[object]().put_all(source)

        benchmark(merge)
