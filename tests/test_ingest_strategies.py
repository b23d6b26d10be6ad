#!/usr/bin/env python3
"""
Test Suite for strategies.py - Sequential and Concurrent Ingestion
===================================================================

Both strategies combine the accepted lines of many files. The concurrent
strategy reads every file in its own thread, waits for all of them and joins
the results in original file order, so both strategies return the same list.

RUNNING THE TESTS
=================
    pytest tests/test_ingest_strategies.py -v

TEST COVERAGE SUMMARY
=====================
1. TestSequentialIngestion - File order, filtering, unreadable files
2. TestConcurrentIngestion - Join order, equivalence, timeouts
3. TestIngestDispatch - Strategy selection through ingest()
"""

import io
import os
import subprocess
import sys
import tempfile
import textwrap
import threading
import time
import unittest
from pathlib import Path
from unittest.mock import patch

from text_sort_tools.ingest.strategies import (
    IngestionTimeoutError,
    Strategy,
    ingest,
    ingest_concurrent,
    ingest_sequential,
)

PROJECT_ROOT = Path(__file__).resolve().parent.parent


class IngestionTestCase(unittest.TestCase):
    """Shared fixtures: a temporary directory with helper to create files"""

    def setUp(self):
        self.test_dir = tempfile.TemporaryDirectory()
        self.test_path = Path(self.test_dir.name)

    def tearDown(self):
        self.test_dir.cleanup()

    def create_test_file(self, filename, lines):
        """Helper to create a test file with given lines"""
        file_path = self.test_path / filename
        file_path.write_text("\n".join(lines) + "\n" if lines else "", encoding="utf-8")
        return str(file_path)


class TestSequentialIngestion(IngestionTestCase):
    """Test cases for ingest_sequential"""

    def test_concatenates_in_file_order(self):
        file1 = self.create_test_file("file1.txt", ["banana", "Apple", "cherry"])
        file2 = self.create_test_file("file2.txt", ["apple", "Banana"])

        result = ingest_sequential([file1, file2])

        self.assertEqual(result, ["banana", "Apple", "cherry", "apple", "Banana"])

    def test_rejected_lines_excluded(self):
        file1 = self.create_test_file("file1.txt", ["abc123", "validline"])
        file2 = self.create_test_file("file2.txt", ["other"])

        with patch("sys.stderr", new_callable=io.StringIO) as mock_stderr:
            result = ingest_sequential([file1, file2])

        self.assertEqual(result, ["validline", "other"])
        self.assertIn("abc123", mock_stderr.getvalue())

    def test_unreadable_file_skipped(self):
        """Test that the remaining files are still read"""
        file1 = self.create_test_file("file1.txt", ["alpha"])
        missing = str(self.test_path / "missing.txt")
        file2 = self.create_test_file("file2.txt", ["beta"])

        with patch("sys.stderr", new_callable=io.StringIO) as mock_stderr:
            result = ingest_sequential([file1, missing, file2])

        self.assertEqual(result, ["alpha", "beta"])
        self.assertIn(missing, mock_stderr.getvalue())

    def test_no_files(self):
        self.assertEqual(ingest_sequential([]), [])


class TestConcurrentIngestion(IngestionTestCase):
    """Test cases for ingest_concurrent"""

    def test_matches_sequential(self):
        """Test that both strategies return the same combined list"""
        files = [
            self.create_test_file(f"file{i:02d}.txt", [f"word{chr(97 + i)}", "shared", "bad1"])
            for i in range(12)
        ]

        with patch("sys.stderr", new_callable=io.StringIO):
            sequential = ingest_sequential(files)
            concurrent = ingest_concurrent(files)

        self.assertEqual(concurrent, sequential)
        self.assertEqual(len(concurrent), 24)

    def test_join_in_file_order_not_completion_order(self):
        """Test that a slow first file still comes first in the result"""
        results = {"slow": ["first"], "medium": ["second"], "fast": ["third"]}
        delays = {"slow": 0.2, "medium": 0.1, "fast": 0.0}
        completion_order = []
        lock = threading.Lock()

        def fake_read(file_id, verbose=False):
            time.sleep(delays[file_id])
            with lock:
                completion_order.append(file_id)
            return list(results[file_id])

        with patch("text_sort_tools.ingest.strategies.read_lines", side_effect=fake_read):
            combined = ingest_concurrent(["slow", "medium", "fast"])

        self.assertEqual(combined, ["first", "second", "third"])
        self.assertEqual(completion_order, ["fast", "medium", "slow"])

    def test_one_task_per_file(self):
        """Test that every file is read exactly once, each in a worker thread"""
        seen = []
        lock = threading.Lock()
        main_thread = threading.current_thread()

        def fake_read(file_id, verbose=False):
            with lock:
                seen.append((file_id, threading.current_thread() is main_thread))
            return [file_id]

        with patch("text_sort_tools.ingest.strategies.read_lines", side_effect=fake_read):
            combined = ingest_concurrent(["a", "b", "c", "d"])

        self.assertEqual(combined, ["a", "b", "c", "d"])
        self.assertEqual(sorted(file_id for file_id, _ in seen), ["a", "b", "c", "d"])
        self.assertFalse(any(on_main for _, on_main in seen))

    def test_unreadable_file_skipped(self):
        file1 = self.create_test_file("file1.txt", ["alpha"])
        missing = str(self.test_path / "missing.txt")

        with patch("sys.stderr", new_callable=io.StringIO) as mock_stderr:
            result = ingest_concurrent([missing, file1])

        self.assertEqual(result, ["alpha"])
        self.assertIn("Unable to open file", mock_stderr.getvalue())

    def test_no_files(self):
        self.assertEqual(ingest_concurrent([]), [])

    def test_timeout_names_pending_files(self):
        """Test that an expired join timeout raises with the stuck files"""
        release = threading.Event()

        def fake_read(file_id, verbose=False):
            if file_id == "stuck":
                release.wait(5)
            return [file_id]

        try:
            with patch("text_sort_tools.ingest.strategies.read_lines", side_effect=fake_read):
                with self.assertRaises(IngestionTimeoutError) as ctx:
                    ingest_concurrent(["quick", "stuck"], timeout=0.05)
        finally:
            release.set()

        self.assertEqual(ctx.exception.pending_files, ["stuck"])
        self.assertIn("stuck", str(ctx.exception))
        self.assertIsInstance(ctx.exception, TimeoutError)

    def test_timeout_not_reached(self):
        file1 = self.create_test_file("file1.txt", ["alpha"])
        self.assertEqual(ingest_concurrent([file1], timeout=10), ["alpha"])

    def test_worker_error_raised_on_caller(self):
        def fake_read(file_id, verbose=False):
            if file_id == "broken":
                raise RuntimeError("read failed")
            return [file_id]

        with patch("text_sort_tools.ingest.strategies.read_lines", side_effect=fake_read):
            with self.assertRaises(RuntimeError):
                ingest_concurrent(["fine", "broken"])

    def test_process_exits_promptly_after_timeout(self):
        """Test that a read still stuck after a timeout does not hold up interpreter exit"""
        script = textwrap.dedent(
            """
            import time
            from unittest.mock import patch
            from text_sort_tools.ingest.strategies import IngestionTimeoutError, ingest_concurrent

            def slow_read(file_id, verbose=False):
                time.sleep(20)
                return [file_id]

            with patch("text_sort_tools.ingest.strategies.read_lines", side_effect=slow_read):
                try:
                    ingest_concurrent(["slow.txt"], timeout=0.1)
                except IngestionTimeoutError:
                    print("timed out")
            """
        )
        env = dict(os.environ)
        env["PYTHONPATH"] = os.pathsep.join(
            p for p in [str(PROJECT_ROOT), env.get("PYTHONPATH", "")] if p
        )

        started = time.monotonic()
        result = subprocess.run(
            [sys.executable, "-c", script],
            capture_output=True,
            text=True,
            timeout=15,
            env=env,
        )
        elapsed = time.monotonic() - started

        self.assertEqual(result.returncode, 0, result.stderr)
        self.assertIn("timed out", result.stdout)
        self.assertLess(elapsed, 10)


class TestIngestDispatch(IngestionTestCase):
    """Test cases for the ingest dispatcher"""

    def test_dispatches_by_strategy(self):
        file1 = self.create_test_file("file1.txt", ["alpha"])

        with patch("text_sort_tools.ingest.strategies.ingest_concurrent", return_value=["c"]) as conc:
            self.assertEqual(ingest([file1], Strategy.CONCURRENT, timeout=3), ["c"])
            conc.assert_called_once_with([file1], timeout=3, verbose=False)

        with patch("text_sort_tools.ingest.strategies.ingest_sequential", return_value=["s"]) as seq:
            self.assertEqual(ingest([file1], Strategy.SEQUENTIAL), ["s"])
            seq.assert_called_once_with([file1], verbose=False)


if __name__ == "__main__":
    unittest.main()
