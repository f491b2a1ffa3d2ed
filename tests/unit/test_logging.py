"""Unit tests for logging utilities."""

import io

import orjson
import pytest

from graphql_config import create_logger, parse_document


class TestCreateLogger:
    def test_text_format(self) -> None:
        stream = io.StringIO()
        logger = create_logger(file=stream)

        logger.info("test_event", key="value")

        content = stream.getvalue()
        assert "test_event" in content
        assert "key=value" in content

    def test_json_format(self) -> None:
        stream = io.StringIO()
        logger = create_logger(log_format="json", file=stream)

        logger.info("test_event", key="value")

        entry = orjson.loads(stream.getvalue().splitlines()[0])
        assert entry["event"] == "test_event"
        assert entry["key"] == "value"
        assert entry["level"] == "info"

    def test_default_level_filters_debug(self) -> None:
        stream = io.StringIO()
        logger = create_logger(file=stream)

        logger.debug("hidden")

        assert stream.getvalue() == ""

    def test_level_argument(self) -> None:
        stream = io.StringIO()
        logger = create_logger(level="warning", file=stream)

        logger.info("hidden")
        logger.warning("shown")

        assert "hidden" not in stream.getvalue()
        assert "shown" in stream.getvalue()

    def test_log_level_env_var(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GRAPHQL_CONFIG_LOG_LEVEL", "debug")
        stream = io.StringIO()
        logger = create_logger(file=stream)

        logger.debug("shown")

        assert "shown" in stream.getvalue()

    def test_debug_env_var_overrides_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GRAPHQL_CONFIG_DEBUG", "1")
        stream = io.StringIO()
        logger = create_logger(level="error", file=stream)

        logger.debug("shown")

        assert "shown" in stream.getvalue()


class TestParseLogging:
    def test_ignored_fields_are_logged_at_debug(self) -> None:
        stream = io.StringIO()
        logger = create_logger(level="debug", log_format="json", file=stream)

        _ = parse_document(
            {"unknownField": 1, "projects": {"app": {"documents": "*.graphql"}}},
            logger=logger,
        )

        entries = [orjson.loads(line) for line in stream.getvalue().splitlines()]
        ignored = [e for e in entries if e["event"] == "ignored_unknown_fields"]
        assert [(e["context"], e["fields"]) for e in ignored] == [
            ("root", ["unknownField"]),
            ("projects.app", ["documents"]),
        ]
        assert entries[-1]["event"] == "parsed_document"
        assert entries[-1]["projects"] == ["app"]
