"""Global test configuration.

Provides diagram fixtures and tab/event builders shared by the test suites.
"""

from pathlib import Path

import pytest

from journeystats.domain.value_objects.tab import Tab, TabFile

FIXTURES_DIR = Path(__file__).parent / "tests" / "fixtures"


def read_fixture(name: str) -> str:
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


def create_tab(type: str = "bar", contents: str = "") -> Tab:
    return Tab(
        id=42,
        name="foo.bar",
        type=type,
        title="foo",
        file=TabFile(name="foo.bar", contents=contents, path=None),
    )


@pytest.fixture
def make_tab():
    return create_tab


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def engine_profile_bpmn() -> str:
    return read_fixture("engine-profile.bpmn")


@pytest.fixture
def empty_bpmn() -> str:
    return read_fixture("empty.bpmn")


@pytest.fixture
def engine_platform_dmn() -> str:
    return read_fixture("engine-platform.dmn")


@pytest.fixture
def empty_dmn() -> str:
    return read_fixture("empty.dmn")


@pytest.fixture
def version_only_bpmn() -> str:
    return read_fixture("version-only.bpmn")
