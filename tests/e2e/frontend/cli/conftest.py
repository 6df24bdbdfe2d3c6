"""Fixtures for end-to-end tests of the `catdoc` command.

Provides a test-only `log-demo` command that logs at every level (used to
exercise verbosity flags and the flight recorder), a CliRunner, and an
isolated working directory so relative log paths stay inside the test.
"""

import logging

import click
import pytest
from click.testing import CliRunner

from catdoc.entrypoints.cli.main import catdoc

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Log one message per level on a project and a third-party logger."""
    logger = logging.getLogger("catdoc.demo")
    third_party = logging.getLogger("some.thirdparty")
    logger.debug("demo debug message")
    logger.info("demo info message")
    third_party.debug("third-party debug message")
    third_party.info("third-party info message")
    logger.warning("demo warning message")
    logger.error("demo error message")
    logger.critical("demo critical message")
    logger.debug("demo trailing debug message")


@pytest.fixture
def registered_log_demo():
    """Attach `log-demo` to the `catdoc` group for one test."""
    catdoc.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        catdoc.commands.pop("log-demo", None)
        for section in getattr(catdoc, "_section_set", []):
            getattr(section, "commands", {}).pop("log-demo", None)


@pytest.fixture
def runner():
    """Click test runner with the snapshot location cleared."""
    return CliRunner(env={"CATDOC_SNAPSHOT": None})


@pytest.fixture
def fs(runner):
    """Run the test inside an isolated working directory."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture
def invoke(runner, fs):
    """Invoke `catdoc` with the flight recorder writing inside the sandbox."""

    def _invoke(args, **kwargs):
        return runner.invoke(catdoc, ["--log-path", "catdoc.log", *args], **kwargs)

    return _invoke
