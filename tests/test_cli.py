import io
import unittest
from unittest.mock import MagicMock, patch

from cal2 import cli
from cal2.calendar_view import ViewMode
from cal2.config import ColorAssignment
from cal2.dates import CalendarDate, WeekStart
from cal2.events import EventIndex

TODAY = CalendarDate(2025, 6, 15)


@patch("cal2.cli.CalendarDate.today", return_value=TODAY)
@patch("cal2.cli.just_fix_windows_console")
@patch("cal2.cli.setup_logging", return_value=MagicMock())
@patch(
    "cal2.cli.load_config",
    return_value=(ColorAssignment.default(bright=False), EventIndex()),
)
class TestCLI(unittest.TestCase):
    @patch("cal2.calendar_view.run")
    def test_default_is_single_month(self, mock_run, *mocks):
        cli.main([])

        mock_run.assert_called_once()
        mode, year, month, context = mock_run.call_args.args
        self.assertEqual(mode, ViewMode.MONTH)
        self.assertEqual((year, month), (2025, 6))
        self.assertEqual(context.today, TODAY)
        self.assertEqual(context.week_start, WeekStart.SUNDAY)

    @patch("cal2.calendar_view.run")
    def test_three_flag(self, mock_run, *mocks):
        cli.main(["-3"])
        self.assertEqual(mock_run.call_args.args[0], ViewMode.THREE)

    @patch("cal2.calendar_view.run")
    def test_twelve_beats_year_and_three(self, mock_run, *mocks):
        cli.main(["--three", "-y", "-Y"])
        self.assertEqual(mock_run.call_args.args[0], ViewMode.TWELVE)

    @patch("cal2.calendar_view.run")
    def test_monday_flag(self, mock_run, *mocks):
        cli.main(["-m", "--year"])
        mode, _, _, context = mock_run.call_args.args
        self.assertEqual(mode, ViewMode.YEAR)
        self.assertEqual(context.week_start, WeekStart.MONDAY)

    @patch("cal2.calendar_view.run")
    def test_month_and_year_arguments(self, mock_run, *mocks):
        cli.main(["3", "2024", "-3"])
        self.assertEqual(mock_run.call_args.args[1:3], (2024, 3))

    @patch("cal2.calendar_view.run")
    def test_day_month_year_arguments(self, mock_run, *mocks):
        cli.main(["25", "12", "2023"])
        self.assertEqual(mock_run.call_args.args[1:3], (2023, 12))

    @patch("cal2.calendar_view.run")
    def test_config_flag(self, mock_run, mock_load, *mocks):
        cli.main(["--config", "/tmp/custom.ini"])
        self.assertEqual(mock_load.call_args.args[0], "/tmp/custom.ini")

    @patch("cal2.calendar_view.run")
    def test_unknown_flags_are_ignored(self, mock_run, *mocks):
        self.assertEqual(cli.main(["-x", "--bogus", "-5", "-3"]), 0)

        mock_run.assert_called_once()
        self.assertEqual(mock_run.call_args.args[0], ViewMode.THREE)

    @patch("sys.stdout", new_callable=io.StringIO)
    def test_help_exits_cleanly(self, mock_stdout, *mocks):
        with self.assertRaises(SystemExit) as raised:
            cli.main(["--help"])
        self.assertEqual(raised.exception.code, 0)
        self.assertIn("M/D Description", mock_stdout.getvalue())

    @patch("cal2.cli.console")
    @patch("cal2.calendar_view.run", side_effect=RuntimeError("boom"))
    def test_render_errors_are_not_fatal(self, mock_run, mock_console, *mocks):
        self.assertEqual(cli.main([]), 0)
        mock_console.print.assert_called_once()


class TestResolveReference(unittest.TestCase):
    def test_single_value(self):
        self.assertEqual(cli.resolve_reference(["7"], TODAY), (2025, 7))
        self.assertEqual(cli.resolve_reference(["2030"], TODAY), (2030, 6))
        self.assertEqual(cli.resolve_reference(["feb"], TODAY), (2025, 2))

    def test_single_value_out_of_range_is_ignored(self):
        self.assertEqual(cli.resolve_reference(["13"], TODAY), (2025, 6))
        self.assertEqual(cli.resolve_reference(["1800"], TODAY), (2025, 6))
        self.assertEqual(cli.resolve_reference(["soon"], TODAY), (2025, 6))

    def test_month_name_and_year(self):
        self.assertEqual(
            cli.resolve_reference(["September", "1999"], TODAY), (1999, 9)
        )

    def test_unparseable_pair_keeps_today(self):
        self.assertEqual(cli.resolve_reference(["x", "y"], TODAY), (2025, 6))
        self.assertEqual(cli.resolve_reference(["x", "2020"], TODAY), (2020, 6))

    def test_no_values(self):
        self.assertEqual(cli.resolve_reference([], TODAY), (2025, 6))


if __name__ == "__main__":
    unittest.main()
