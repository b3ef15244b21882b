import io

from pingreport.classifier import classify
from pingreport.console import RESET, Console
from pingreport.models import Color, ProbeResult
from pingreport.report import ReportAggregator

GREEN, YELLOW, RED = '\033[92m', '\033[93m', '\033[91m'


def _run(tmp_path, fixed_clock, *results):
    stream = io.StringIO()
    console = Console(stream=stream, use_color=True)
    with ReportAggregator(tmp_path / "s.txt", tmp_path / "d.txt", width=5, console=console, clock=fixed_clock) as report:
        for result in results:
            report.record(result, classify(result, 4))
        report.finish()
    return stream.getvalue().splitlines()


def test_print_line_wraps_in_ansi_codes():
    stream = io.StringIO()
    Console(stream=stream, use_color=True).print_line("esx01", Color.STRONG_NEGATIVE)
    assert stream.getvalue() == f"{RED}esx01{RESET}\n"


def test_neutral_and_plain_lines_are_uncolored():
    stream = io.StringIO()
    Console(stream=stream, use_color=True).print_line("header")
    Console(stream=stream, use_color=False).print_line("esx01", Color.WARNING)
    assert stream.getvalue() == "header\nesx01\n"


def test_no_color_environment_disables_color(monkeypatch):
    class Terminal(io.StringIO):
        def isatty(self):
            return True

    monkeypatch.delenv('NO_COLOR', raising=False)
    assert Console(stream=Terminal()).use_color is True
    monkeypatch.setenv('NO_COLOR', '1')
    assert Console(stream=Terminal()).use_color is False


def test_final_line_green_when_every_host_responded(tmp_path, fixed_clock):
    lines = _run(tmp_path, fixed_clock, ProbeResult("esx01", 4, 0))
    assert f"{GREEN}esx01 : 100% (4/4) pings received.{RESET}" in lines
    assert lines[-1] == f"{GREEN}1/1 hosts responded successfully.{RESET}"


def test_final_line_red_when_a_host_did_not_respond(tmp_path, fixed_clock):
    lines = _run(tmp_path, fixed_clock, ProbeResult("esx01", 0, 4))
    assert f"{RED}esx01 : host not found{RESET}" in lines
    assert lines[-1] == f"{RED}0/1 hosts responded successfully.{RESET}"


def test_partial_host_line_is_yellow(tmp_path, fixed_clock):
    lines = _run(tmp_path, fixed_clock, ProbeResult("esx02", 2, 2))
    assert f"{YELLOW}esx02 : 50% (2/4) pings received.{RESET}" in lines
    assert lines[-1] == f"{GREEN}1/1 hosts responded successfully.{RESET}"
