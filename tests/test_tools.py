import pytest

from gridslamlog.tools import (
    convert_scanstudio,
    load_log,
    log_plot_main,
    log_test_main,
    plot_frames,
    pose_lines,
    rdk2carmen_main,
    rdk_lines,
    scanstudio2carmen_main,
)

SCAN = "FLASER 5 1 2 3 4 5 10 20 0.1 1.5 2.5 0.25 7 8 9 100.5 host 200.5"
NEAR_SCAN = "FLASER 5 1 1 1 1 1 0 0 0 0 0 0 0 0 0 1 host 2"


def _write_log(tmp_path, lines):
    path = tmp_path / "robot.log"
    path.write_text("\n".join(["PARAM robot_use_sonar off", *lines]) + "\n")
    return path


def test_load_log_reads_scans(tmp_path):
    log = load_log(_write_log(tmp_path, [SCAN, "ODOM 1 2 3 0 0 0 1 h 1"]))
    assert len(log) == 2
    assert log[0].ranges == [1.0, 2.0, 3.0, 4.0, 5.0]


def test_pose_lines(tmp_path):
    log = load_log(_write_log(tmp_path, [SCAN]))
    assert list(pose_lines(log)) == ["1.5 2.5 0.25 200.5"]


def test_rdk_lines_scale(tmp_path):
    log = load_log(_write_log(tmp_path, [SCAN]))
    assert list(rdk_lines(log)) == [
        "FLASER 5 0.001 0.002 0.003 0.004 0.005 0.0015 0.0025 0.25"
    ]


def test_plot_frames_every_third_scan(tmp_path):
    log = load_log(_write_log(tmp_path, [NEAR_SCAN] * 3))
    lines = list(plot_frames(log, 2.0))
    assert lines[0] == "set terminal gif"
    assert lines[1] == 'set output "frame-00000.gif"'
    assert lines[-1] == "e"
    assert "0 1" in lines
    assert len(lines) == 4 + 5 + 1


def test_plot_frames_skips_far_points(tmp_path):
    log = load_log(_write_log(tmp_path, [NEAR_SCAN] * 3))
    assert list(plot_frames(log, 0.5)) == []


def test_convert_scanstudio():
    lines = ["RobotPos: 1000 2000 0.5", "NumPoints: 2", "DATA", "0 1000", "1 2000"]
    assert list(convert_scanstudio(lines)) == ["FLASER 2 1 2 1 2 0.5 0 0 0 0 pippo 0"]


def test_convert_scanstudio_too_many_points():
    with pytest.raises(ValueError):
        list(convert_scanstudio(["NumPoints: 20000"]))


def test_log_test_main_prints_poses(tmp_path, capsys):
    assert log_test_main([str(_write_log(tmp_path, [SCAN]))]) == 0
    assert capsys.readouterr().out == "1.5 2.5 0.25 200.5\n"


def test_log_test_main_usage_and_missing(tmp_path):
    assert log_test_main([]) == 1
    assert log_test_main([str(tmp_path / "missing.log")]) == 1


def test_rdk2carmen_main_writes_file(tmp_path):
    out = tmp_path / "out.txt"
    assert rdk2carmen_main([str(_write_log(tmp_path, [SCAN])), str(out)]) == 0
    assert out.read_text().startswith("FLASER 5 0.001")
    assert rdk2carmen_main([]) == 1


def test_scanstudio2carmen_main(tmp_path):
    src = tmp_path / "scan.txt"
    src.write_text("RobotPos: 0 0 0\nNumPoints: 1\nDATA\n0 3000\n")
    dst = tmp_path / "carmen.log"
    assert scanstudio2carmen_main([str(src), str(dst)]) == 0
    assert dst.read_text() == "FLASER 1 3 0 0 0 0 0 0 0 pippo 0\n"
    assert scanstudio2carmen_main([str(src)]) == 1


def test_log_plot_main(tmp_path, capsys):
    assert log_plot_main([str(_write_log(tmp_path, [NEAR_SCAN] * 3))]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "set terminal gif"
    assert log_plot_main([]) == 1