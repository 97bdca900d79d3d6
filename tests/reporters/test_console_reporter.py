# tests/reporters/test_console_reporter.py
"""
Unit tests for the ConsoleReporter class.
"""

from unittest.mock import MagicMock, call

from decisionmaker.models.intents import LabelSelector, SchedulingIntent
from decisionmaker.models.pods import PodInfo, PodProcess
from decisionmaker.reporters.console_reporter import ConsoleReporter


def _mock_rich(mocker):
    mock_console = MagicMock()
    mock_table = MagicMock()
    mocker.patch("decisionmaker.reporters.console_reporter.Console", return_value=mock_console)
    mock_table_class = mocker.patch("decisionmaker.reporters.console_reporter.Table", return_value=mock_table)
    return mock_console, mock_table_class, mock_table


def test_report_pods_builds_one_row_per_process(mocker):
    mock_console, mock_table_class, mock_table = _mock_rich(mocker)
    pods = {
        "pod-b": PodInfo(pod_uid="pod-b", processes=[PodProcess(pid=9, ppid=1, command="redis")]),
        "pod-a": PodInfo(
            pod_uid="pod-a",
            processes=[
                PodProcess(pid=5, ppid=4, command="nginx", container_id="0123456789abcdef0123"),
                PodProcess(pid=4, ppid=1, command="pause"),
            ],
        ),
    }

    ConsoleReporter().report_pods(pods)

    assert mock_table_class.call_args.kwargs["title"] == "Pod Processes"
    assert mock_table.add_row.call_args_list == [
        call("pod-a", "4", "1", "pause", ""),
        call("pod-a", "5", "4", "nginx", "0123456789ab"),
        call("pod-b", "9", "1", "redis", ""),
    ]
    mock_console.print.assert_called_once_with(mock_table)


def test_report_pods_without_data(mocker):
    mock_console, mock_table_class, _ = _mock_rich(mocker)

    ConsoleReporter().report_pods({})

    mock_table_class.assert_not_called()
    mock_console.print.assert_called_once_with("No pod processes found.", style="yellow")


def test_report_intents_formats_selectors(mocker):
    _, _, mock_table = _mock_rich(mocker)
    intents = [
        SchedulingIntent(
            pid=7,
            priority=True,
            execution_time=20000000,
            command_regex="ping",
            selectors=[LabelSelector(key="app", value="gnb")],
        )
    ]

    ConsoleReporter().report_intents(intents)

    mock_table.add_row.assert_called_once_with("7", "yes", "20000000", "ping", "app=gnb")
