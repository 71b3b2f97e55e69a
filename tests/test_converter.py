from __future__ import annotations

import io
import shutil
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from udstrace.config import DEFAULT_BATCH_LINES, ConverterSettings, load_settings
from udstrace.converter import ConversionSummary, convert_stream, convert_trace
from udstrace.csv_row import CSV_HEADER
from udstrace.errors import TraceInputError, TraceOutputError
from udstrace.paths import default_output_path
from tests.trace_fixtures import asc_line, sample_trace


class ConvertTraceTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp_dir = Path(tempfile.mkdtemp(prefix="udstrace_convert_"))

    def tearDown(self) -> None:
        shutil.rmtree(self._tmp_dir, ignore_errors=True)

    def _write_trace(self, lines, name: str = "capture.asc") -> Path:
        path = self._tmp_dir / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    def test_converts_sample_trace(self) -> None:
        src = self._write_trace(sample_trace())
        summary = convert_trace(src, settings=ConverterSettings(batch_lines=2))

        self.assertEqual(self._tmp_dir / "capture.csv", summary.output_path)
        self.assertEqual(len(sample_trace()), summary.lines_read)
        self.assertEqual(7, summary.records_written)
        self.assertEqual(summary.lines_read - 7, summary.lines_skipped)

        rows = summary.output_path.read_text(encoding="utf-8").splitlines(keepends=True)
        self.assertEqual(CSV_HEADER, rows[0])
        self.assertEqual(8, len(rows))
        self.assertEqual("0.010000,7DF,0,Req,7DF,SF,01,02,01,00,00,00,00,00,00\n", rows[1])
        self.assertEqual("0.012345,7E0,-1,Req,7E0,SF,10,02,10,01,00,00,00,00,00\n", rows[2])
        self.assertEqual("0.050000,18DA00F1,1,Req,00,SF,22,03,22,F1,90,00,00,00,00\n", rows[4])
        self.assertEqual("0.060000,18DAF100,1,Res,00,FF,62,10,14,62,F1,90,57,56,57\n", rows[5])

    def test_explicit_output_path(self) -> None:
        src = self._write_trace(sample_trace())
        dst = self._tmp_dir / "out" / "decoded.csv"
        dst.parent.mkdir()
        summary = convert_trace(src, dst, settings=ConverterSettings())
        self.assertEqual(dst, summary.output_path)
        self.assertTrue(dst.exists())
        self.assertFalse((self._tmp_dir / "capture.csv").exists())

    def test_batch_size_does_not_change_output(self) -> None:
        lines = [asc_line(i / 1000, "7E8", ["03", "7F", "10", "78"]) for i in range(95)]
        src = self._write_trace(lines)
        one = convert_trace(src, self._tmp_dir / "one.csv", settings=ConverterSettings(batch_lines=1))
        many = convert_trace(src, self._tmp_dir / "many.csv", settings=ConverterSettings(batch_lines=30))
        self.assertEqual(95, many.records_written)
        self.assertEqual(one.output_path.read_bytes(), many.output_path.read_bytes())

    def test_empty_input_writes_header_only(self) -> None:
        src = self._write_trace([])
        summary = convert_trace(src, settings=ConverterSettings())
        self.assertEqual(0, summary.records_written)
        self.assertEqual(CSV_HEADER, summary.output_path.read_text(encoding="utf-8"))

    def test_crlf_input(self) -> None:
        src = self._tmp_dir / "crlf.asc"
        src.write_bytes(b"   0.100000 1  7E0             Rx   d 8 02 10 01 00 00 00 00 00\r\n")
        summary = convert_trace(src, settings=ConverterSettings())
        rows = summary.output_path.read_text(encoding="utf-8").splitlines()
        self.assertEqual("0.100000,7E0,-1,Req,7E0,SF,10,02,10,01,00,00,00,00,00", rows[1])

    def test_missing_input(self) -> None:
        with self.assertRaises(TraceInputError) as ctx:
            convert_trace(self._tmp_dir / "missing.asc", settings=ConverterSettings())
        self.assertIn("missing.asc", str(ctx.exception))

    def test_unwritable_output(self) -> None:
        src = self._write_trace(sample_trace())
        with self.assertRaises(TraceOutputError) as ctx:
            convert_trace(src, self._tmp_dir / "no_such_dir" / "out.csv", settings=ConverterSettings())
        self.assertTrue(ctx.exception.path.endswith("out.csv"))

    def test_allocation_failure_drops_buffered_rows(self) -> None:
        src = self._write_trace(sample_trace())
        dst = self._tmp_dir / "decoded.csv"
        calls = {"n": 0}

        def _failing_format_row(record):
            calls["n"] += 1
            if calls["n"] == 3:
                raise MemoryError()
            return "buffered,row\n"

        with mock.patch("udstrace.converter.format_row", _failing_format_row):
            with self.assertRaises(TraceOutputError) as ctx:
                convert_trace(src, dst, settings=ConverterSettings(batch_lines=30))

        self.assertIn("Memory allocation failed", str(ctx.exception))
        self.assertEqual(str(dst), ctx.exception.path)
        self.assertEqual(CSV_HEADER, dst.read_text(encoding="utf-8"))

    def test_read_failure_reports_input_path(self) -> None:
        class FailingReader(io.StringIO):
            def readline(self, *args):
                if self.tell() > 0:
                    raise OSError("device not ready")
                return super().readline(*args)

        src = self._tmp_dir / "capture.asc"
        reader = FailingReader(sample_trace()[0] + "\n" + sample_trace()[1] + "\n")
        summary = ConversionSummary(input_path=src, output_path=self._tmp_dir / "capture.csv")
        with self.assertRaises(TraceInputError) as ctx:
            convert_stream(reader, io.StringIO(), summary, 30)
        self.assertEqual(str(src), ctx.exception.path)
        self.assertIn("Could not read input file", str(ctx.exception))
        self.assertEqual(1, summary.lines_read)


class OutputPathTests(unittest.TestCase):
    def test_extension_replaced(self) -> None:
        self.assertEqual(Path("trace.csv"), default_output_path("trace.asc"))
        self.assertEqual(Path("logs/run.1.csv"), default_output_path("logs/run.1.asc"))

    def test_no_extension(self) -> None:
        self.assertEqual(Path("capture.csv"), default_output_path("capture"))
        self.assertEqual(Path("logs.d/capture.csv"), default_output_path("logs.d/capture"))


class SettingsTests(unittest.TestCase):
    def test_defaults(self) -> None:
        settings = load_settings({})
        self.assertEqual(DEFAULT_BATCH_LINES, settings.batch_lines)
        self.assertEqual("utf-8", settings.encoding)
        self.assertFalse(settings.trace)

    def test_overrides(self) -> None:
        settings = load_settings(
            {"UDSTRACE_BATCH_LINES": "100", "UDSTRACE_ENCODING": "latin-1", "UDSTRACE_CLI_TRACE": "1"}
        )
        self.assertEqual(100, settings.batch_lines)
        self.assertEqual("latin-1", settings.encoding)
        self.assertTrue(settings.trace)

    def test_invalid_batch_falls_back(self) -> None:
        self.assertEqual(DEFAULT_BATCH_LINES, load_settings({"UDSTRACE_BATCH_LINES": "abc"}).batch_lines)
        self.assertEqual(DEFAULT_BATCH_LINES, load_settings({"UDSTRACE_BATCH_LINES": "-5"}).batch_lines)


if __name__ == "__main__":
    unittest.main()
