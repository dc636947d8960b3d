import io
import json
import unittest
from contextlib import redirect_stderr

from optionpy import Some, NONE, ConsoleLogger, instrument


class TestConsoleLogger(unittest.TestCase):
    def test_text_output_with_bound_fields(self):
        log = ConsoleLogger("users", level="DEBUG").bind(request_id="r-1")
        buf = io.StringIO()
        with redirect_stderr(buf):
            log.debug("lookup", user=Some(42))
        line = buf.getvalue().strip()
        self.assertIn("users DEBUG: lookup", line)
        self.assertTrue(line.endswith("request_id=r-1 user=Some(42)"))

    def test_level_filtering(self):
        log = ConsoleLogger(level="WARN")
        buf = io.StringIO()
        with redirect_stderr(buf):
            log.info("hidden")
            log.error("shown")
        lines = buf.getvalue().strip().splitlines()
        self.assertEqual(len(lines), 1)
        self.assertIn("ERROR: shown", lines[0])

    def test_set_level_and_unknown_names(self):
        log = ConsoleLogger(level="nope")
        self.assertEqual(log.level_name, "INFO")
        log.set_level("debug")
        self.assertEqual(log.level_name, "DEBUG")
        log.set_level("nope")
        self.assertEqual(log.level_name, "DEBUG")
        self.assertEqual(log.bind(a=1).level_name, "DEBUG")

    def test_json_output_serializes_options(self):
        log = ConsoleLogger("svc", json_output=True)
        buf = io.StringIO()
        with redirect_stderr(buf):
            log.info("hello", a=Some(1), b=NONE)
            log.info("bare")
        first, second = [json.loads(s) for s in buf.getvalue().strip().splitlines()]
        self.assertEqual(first["name"], "svc")
        self.assertEqual(first["level"], "INFO")
        self.assertEqual(first["fields"], {"a": 1, "b": None})
        self.assertNotIn("fields", second)


class TestInstrument(unittest.TestCase):
    def test_reports_both_states_and_returns_input(self):
        log = ConsoleLogger(level="DEBUG")
        buf = io.StringIO()
        opt = Some(7)
        with redirect_stderr(buf):
            self.assertIs(instrument("user.lookup", opt, log, tags={"uid": "7"}), opt)
            self.assertIs(instrument("user.lookup", NONE, log), NONE)
        lines = buf.getvalue().strip().splitlines()
        self.assertEqual(len(lines), 2)
        self.assertTrue(lines[0].endswith("user.lookup some uid=7 value=7"))
        self.assertTrue(lines[1].endswith("user.lookup none"))

    def test_without_logger_is_silent(self):
        buf = io.StringIO()
        with redirect_stderr(buf):
            self.assertIs(instrument("x", NONE), NONE)
        self.assertEqual(buf.getvalue(), "")

    def test_respects_level(self):
        log = ConsoleLogger(level="INFO")
        buf = io.StringIO()
        with redirect_stderr(buf):
            instrument("quiet", Some(1), log)
            instrument("loud", Some(1), log, level="WARN")
        lines = buf.getvalue().strip().splitlines()
        self.assertEqual(len(lines), 1)
        self.assertIn("WARN: loud some", lines[0])

    def test_lowercase_level_names(self):
        log = ConsoleLogger(level="debug")
        buf = io.StringIO()
        with redirect_stderr(buf):
            self.assertIs(instrument("x", NONE, log, level="debug"), NONE)
            log.log("warn", "careful")
        lines = buf.getvalue().strip().splitlines()
        self.assertIn("DEBUG: x none", lines[0])
        self.assertIn("WARN: careful", lines[1])

    def test_unknown_level_is_rejected(self):
        log = ConsoleLogger(level="DEBUG")
        with self.assertRaises(ValueError):
            log.log("verbose", "x")
        with self.assertRaises(ValueError):
            instrument("x", Some(1), log, level="verbose")

    def test_tags_may_shadow_argument_names(self):
        log = ConsoleLogger(level="DEBUG")
        buf = io.StringIO()
        with redirect_stderr(buf):
            instrument("x", Some(1), log, tags={"level": "hi", "msg": "m", "name": "n"})
            log.info("direct", msg="field", level="field")
        lines = buf.getvalue().strip().splitlines()
        self.assertTrue(lines[0].endswith("x some level=hi msg=m name=n value=1"))
        self.assertTrue(lines[1].endswith("INFO: direct level=field msg=field"))


if __name__ == "__main__":
    unittest.main()
