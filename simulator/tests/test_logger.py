from simulator.utils import consts
from simulator.utils.logger import log_debug, log_error, log_info, log_warn


def test_messages_below_level_are_dropped(monkeypatch, capsys):
    monkeypatch.setattr(consts, "LOG_LEVEL", "WARN")
    log_debug("hidden")
    log_info("hidden too")
    log_warn("careful")
    log_error("broken")
    assert capsys.readouterr().out == "[WARN] careful\n[ERROR] broken\n"


def test_unknown_level_falls_back_to_info(monkeypatch, capsys):
    monkeypatch.setattr(consts, "LOG_LEVEL", "CHATTY")
    log_debug("hidden")
    log_info("shown")
    assert capsys.readouterr().out == "[INFO] shown\n"
