from click.testing import CliRunner

from sunphase.cli import table, times, watch

LONDON = ["--latitude", "51.5", "--longitude", "-0.13"]


def test_times_for_a_date():
  r = CliRunner().invoke(times.main, LONDON + ["--utc-offset", "1", "--date", "2025-06-21"])
  assert r.exit_code == 0, r.output
  assert "Sunrise: 04:" in r.output
  assert "Sunset: 21:" in r.output


def test_times_reports_missing_location():
  r = CliRunner().invoke(times.main, ["--longitude", "10", "--utc-offset", "0"])
  assert r.exit_code != 0
  assert "latitude" in r.output


def test_table_marks_polar_days():
  r = CliRunner().invoke(table.main, ["--latitude", "80", "--longitude", "15", "--utc-offset", "1",
                                      "--year", "2025", "--every", "30"])
  assert r.exit_code == 0, r.output
  assert "2025-01-01" in r.output
  assert "night" in r.output
  assert "day" in r.output


def test_watch_reports_first_phase():
  r = CliRunner().invoke(watch.main, LONDON + ["--utc-offset", "0", "--start-time", "2025-06-21T02:00",
                                              "--interval", "0.01", "--ticks", "2"])
  assert r.exit_code == 0, r.output
  assert r.output.count("-> night") == 1
  assert "Theme: dark" in r.output
