"""
Shared pytest fixtures for quadrature tests.
"""

import logging
from pathlib import Path

import pytest


@pytest.fixture(scope="session")
def test_output_root() -> Path:
    """
    Returns the root test_output directory. Created once per test session.
    Files here persist after tests complete for easy access.
    """
    output_dir = Path(__file__).parent.parent / "test_output"
    output_dir.mkdir(exist_ok=True)
    return output_dir


@pytest.fixture
def test_output_dir(request, test_output_root) -> Path:
    """
    Returns a directory for the current test to write output files.
    Directory structure: test_output/<module_name>/<test_name>/
    """
    module_name = request.module.__name__.split(".")[-1]
    test_name = request.node.name

    test_dir = test_output_root / module_name / test_name
    test_dir.mkdir(parents=True, exist_ok=True)
    return test_dir


@pytest.fixture
def record_calls():
    """Wrap an integrand so every abscissa it is called with is recorded.

    Example usage:
        def test_order(record_calls):
            fn, calls = record_calls(lambda x: x)
            left_rect_integral(IntegrationRequest(0.0, 1.0, 4, fn))
            assert calls == [0.0, 0.25, 0.5, 0.75, 1.0]
    """

    def wrap(fn):
        calls = []

        def recorded(*args):
            calls.append(args[0] if len(args) == 1 else args)
            return fn(*args)

        return recorded, calls

    return wrap


@pytest.fixture(autouse=True)
def reset_quadrature_logging():
    """Reset logging state before each test.

    Removes all handlers except NullHandler and resets the level to NOTSET,
    so logging configuration from one test does not leak into another.
    """
    logger = logging.getLogger("quadrature")

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        if not isinstance(handler, logging.NullHandler):
            handler.close()

    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.NOTSET)

    yield

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        if not isinstance(handler, logging.NullHandler):
            handler.close()
    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.NOTSET)
