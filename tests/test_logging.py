"""
Tests for structured logging configuration.
"""

import logging

import structlog

from gqlcache.logging import (
    OperationContextFilter,
    configure_logging,
    get_logger,
    get_operation_name,
    operation_context,
)


class TestOperationContext:
    """Tests for operation name tracking."""

    def test_no_operation_by_default(self):
        assert get_operation_name() is None

    def test_operation_context_sets_and_restores(self):
        with operation_context("GetViewer"):
            assert get_operation_name() == "GetViewer"
            with operation_context("Nested"):
                assert get_operation_name() == "Nested"
            assert get_operation_name() == "GetViewer"

        assert get_operation_name() is None

    def test_context_is_restored_on_error(self):
        try:
            with operation_context("Failing"):
                raise RuntimeError("boom")
        except RuntimeError:
            pass

        assert get_operation_name() is None


class TestOperationContextFilter:
    def test_adds_operation_name(self):
        context_filter = OperationContextFilter()

        with operation_context("GetViewer"):
            event_dict = context_filter(None, "info", {"event": "hello"})

        assert event_dict == {"event": "hello", "operation_name": "GetViewer"}

    def test_leaves_events_alone_outside_an_operation(self):
        event_dict = OperationContextFilter()(None, "info", {"event": "hello"})

        assert event_dict == {"event": "hello"}


class TestConfigureLogging:
    def teardown_method(self):
        structlog.reset_defaults()

    def test_debug_level(self):
        configure_logging(debug=True)

        assert logging.getLogger().level == logging.DEBUG

    def test_info_level_by_default(self):
        configure_logging()

        assert logging.getLogger().level == logging.INFO

    def test_explicit_level(self):
        configure_logging(log_level="warning")

        assert logging.getLogger().level == logging.WARNING

    def test_get_logger(self):
        configure_logging()

        assert get_logger(__name__) is not None
