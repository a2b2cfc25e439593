from pathlib import Path

import pytest


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    benchmark_dir = Path(__file__).parent
    for item in items:
        if item.path.is_relative_to(benchmark_dir):
            item.add_marker(pytest.mark.benchmark)
