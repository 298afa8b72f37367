"""Unit tests for the fluent EventBuilder."""

from __future__ import annotations

from capture_logger import CaptureLogger, EventBuilder, Level, Marker


def _raised() -> ValueError:
    try:
        raise ValueError("boom")
    except ValueError as exc:
        return exc


class TestEventBuilder:
    def test_builds_and_records(self, capture_logger: CaptureLogger) -> None:
        marker = Marker("audit")
        event = (
            capture_logger.at_warn()
            .add_marker(marker)
            .set_message("retry {} of {}")
            .add_argument(2)
            .add_argument(3)
            .log()
        )
        assert event is not None
        assert capture_logger.events_at_level(Level.WARN) == (event,)
        assert event.formatted_message == "retry 2 of 3"
        assert event.marker is marker
        assert event.thrown is None

    def test_error_argument_is_not_extracted(self, capture_logger: CaptureLogger) -> None:
        err = _raised()
        event = capture_logger.at_error().add_argument("a").add_argument(err).log("fail {} {}")
        assert event is not None
        assert event.message_args == ("a", err)
        assert event.thrown is None

    def test_set_cause(self, capture_logger: CaptureLogger) -> None:
        err = _raised()
        event = capture_logger.at_error().set_cause(err).log("fail")
        assert event is not None
        assert event.thrown is err
        assert event.source is not None
        assert event.message_args is None

    def test_disabled_level_is_noop(self, capture_logger: CaptureLogger) -> None:
        calls: list[int] = []
        builder = capture_logger.at_debug()
        assert isinstance(builder, EventBuilder)
        assert not builder.enabled
        assert builder.add_lazy_argument(lambda: calls.append(1)).log("hidden {}") is None
        assert calls == []
        assert capture_logger.all_events() == []

    def test_lazy_message_and_argument(self, capture_logger: CaptureLogger) -> None:
        capture_logger.set_level(Level.TRACE)
        event = capture_logger.at_trace().set_message(lambda: "n={}").add_lazy_argument(lambda: 7).log()
        assert event is not None
        assert event.message == "n={}"
        assert event.formatted_message == "n=7"

    def test_callable_argument_is_kept_as_is(self, capture_logger: CaptureLogger) -> None:
        event = capture_logger.at_info().add_argument(int).log("type {}")
        assert event is not None
        assert event.message_args == (int,)

    def test_notifies_observer(self, capture_logger: CaptureLogger) -> None:
        seen: list[str] = []
        capture_logger.set_on_event(lambda e: seen.append(e.formatted_message))
        capture_logger.at_level(Level.ERROR).log("x {}", 1)
        assert seen == ["x 1"]
