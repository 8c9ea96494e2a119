"""Shared fixtures for pomgraph tests."""

import logging

import pytest
import structlog

from pomgraph.core.logging import configure_library_logging


def _pom_xml(*deps: tuple[str, str, str], extra: str = "", xmlns: bool = False) -> str:
    """Build a minimal POM declaring *deps* as (groupId, artifactId, version)."""
    ns = ' xmlns="http://maven.apache.org/POM/4.0.0"' if xmlns else ""
    body = "".join(
        "    <dependency>\n"
        f"      <groupId>{g}</groupId>\n"
        f"      <artifactId>{a}</artifactId>\n"
        f"      <version>{v}</version>\n"
        "    </dependency>\n"
        for g, a, v in deps
    )
    return (
        f"<project{ns}>\n"
        "  <groupId>com.example</groupId>\n"
        "  <artifactId>app</artifactId>\n"
        "  <version>1.0.0</version>\n"
        f"{extra}"
        "  <dependencies>\n"
        f"{body}"
        "  </dependencies>\n"
        "</project>\n"
    )


@pytest.fixture
def write_pom(tmp_path):
    """Write a POM under tmp_path and return its path."""

    def _write(content: str, name: str = "pom.xml"):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path

    return _write


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.setLevel(logging.WARNING)
    logging.getLogger("pomgraph").setLevel(logging.NOTSET)
    structlog.reset_defaults()
    configure_library_logging()


@pytest.fixture
def pom_xml():
    return _pom_xml
