"""
Tests for the reader/writer lock guarding the cache mapping.
"""

import threading
import time

import pytest

from urlgen.cache.rwlock import ReadWriteLock


class TestReadWriteLock:
    """Test shared and exclusive acquisition"""

    def test_readers_share_the_lock(self):
        lock = ReadWriteLock()
        inside = threading.Barrier(3, timeout=2)

        def reader():
            with lock.read_lock():
                # All three readers must be inside at once to pass the barrier
                inside.wait()

        threads = [threading.Thread(target=reader) for _ in range(3)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(timeout=5)

        assert not any(thread.is_alive() for thread in threads)
        assert not inside.broken

    def test_writer_excludes_readers(self):
        lock = ReadWriteLock()
        events = []

        lock.acquire_write()

        def reader():
            with lock.read_lock():
                events.append("read")

        thread = threading.Thread(target=reader)
        thread.start()
        time.sleep(0.05)
        events.append("write-done")
        lock.release_write()
        thread.join(timeout=2)

        assert events == ["write-done", "read"]

    def test_waiting_writer_blocks_new_readers(self):
        lock = ReadWriteLock()
        events = []

        lock.acquire_read()

        def writer():
            with lock.write_lock():
                events.append("write")

        def late_reader():
            with lock.read_lock():
                events.append("late-read")

        writer_thread = threading.Thread(target=writer)
        writer_thread.start()
        time.sleep(0.05)

        reader_thread = threading.Thread(target=late_reader)
        reader_thread.start()
        time.sleep(0.05)

        # Neither can proceed while the first reader holds the lock
        assert events == []

        lock.release_read()
        writer_thread.join(timeout=2)
        reader_thread.join(timeout=2)

        assert events == ["write", "late-read"]

    def test_lock_released_on_exception(self):
        lock = ReadWriteLock()

        with pytest.raises(ValueError):
            with lock.write_lock():
                raise ValueError("boom")

        # Would deadlock if the write lock leaked
        with lock.read_lock():
            pass

    def test_release_without_acquire_raises(self):
        lock = ReadWriteLock()

        with pytest.raises(RuntimeError):
            lock.release_read()
        with pytest.raises(RuntimeError):
            lock.release_write()
