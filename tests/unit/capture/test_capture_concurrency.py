"""Concurrency tests for CaptureLogger and the logger directory."""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor

from capture_logger import CaptureLogger, Level

THREADS = 50


class TestConcurrentDirectory:
    def test_get_logger_from_many_threads_yields_one_instance(self) -> None:
        barrier = threading.Barrier(THREADS)

        def lookup(_: int) -> CaptureLogger:
            barrier.wait()
            return CaptureLogger.get_logger("concurrency.x")

        with ThreadPoolExecutor(max_workers=THREADS) as pool:
            loggers = list(pool.map(lookup, range(THREADS)))

        assert len(loggers) == THREADS
        assert all(log is loggers[0] for log in loggers)
        assert CaptureLogger.get_logger("concurrency.x") is loggers[0]


class TestConcurrentRecording:
    def test_ids_unique_and_all_events_sorted(self) -> None:
        log = CaptureLogger.get_logger("concurrency.record").set_level(Level.TRACE)
        per_thread = 200
        levels = list(Level)

        def worker(n: int) -> None:
            for i in range(per_thread):
                log.log(levels[(n + i) % len(levels)], "t{}-{}", n, i)

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        events = log.all_events()
        ids = [e.event_id for e in events]
        assert len(events) == 8 * per_thread
        assert len(set(ids)) == len(ids)
        assert ids == sorted(ids)

    def test_per_thread_order_is_preserved_within_a_level(self) -> None:
        log = CaptureLogger.get_logger("concurrency.order")

        def worker(n: int) -> None:
            for i in range(300):
                log.info("{}", (n, i))

        with ThreadPoolExecutor(max_workers=6) as pool:
            list(pool.map(worker, range(6)))

        seen: dict[int, list[int]] = {}
        for event in log.events_at_level(Level.INFO):
            n, i = event.message_args[0]
            seen.setdefault(n, []).append(i)
        assert all(indexes == list(range(300)) for indexes in seen.values())
        assert len(seen) == 6

    def test_clear_level_concurrent_with_record(self) -> None:
        log = CaptureLogger.get_logger("concurrency.clear")
        stop = threading.Event()
        recorded = []

        def writer() -> None:
            while not stop.is_set():
                recorded.append(log.record(Level.WARN, None, "w"))

        def clearer() -> None:
            for _ in range(200):
                log.clear_events_at_level(Level.WARN)

        writers = [threading.Thread(target=writer) for _ in range(4)]
        for t in writers:
            t.start()
        clearer()
        stop.set()
        for t in writers:
            t.join()

        remaining = log.events_at_level(Level.WARN)
        recorded_ids = {e.event_id for e in recorded}
        assert all(e.event_id in recorded_ids for e in remaining)
        ids = [e.event_id for e in remaining]
        assert len(set(ids)) == len(ids)
        log.record(Level.WARN, None, "after")
        assert log.events_at_level(Level.WARN)[-1].message == "after"

    def test_reset_concurrent_with_readers(self) -> None:
        log = CaptureLogger.get_logger("concurrency.reset").set_level(Level.TRACE)
        errors: list[BaseException] = []

        def writer() -> None:
            for i in range(500):
                log.log(Level.DEBUG if i % 2 else Level.ERROR, "m")

        def reader() -> None:
            try:
                for _ in range(200):
                    ids = [e.event_id for e in log.all_events()]
                    assert ids == sorted(ids)
                    log.reset()
            except BaseException as exc:  # noqa: BLE001
                errors.append(exc)

        threads = [threading.Thread(target=writer) for _ in range(3)]
        threads.append(threading.Thread(target=reader))
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert errors == []
