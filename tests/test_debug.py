from connectn.debug import DebugLevel, DebugManager, debug


def read(path):
    with open(path) as f:
        return f.read()


def test_file_logging_respects_level(tmp_path):
    log_file = tmp_path / "connectn.log"
    manager = DebugManager()
    manager.configure(level=DebugLevel.INFO, log_file=str(log_file))

    manager.info("game started", "game")
    manager.debug("too detailed", "game")
    manager.configure(log_file="")

    content = read(log_file)
    assert "[game] game started" in content
    assert "too detailed" not in content


def test_trace_level_logs_everything(tmp_path):
    log_file = tmp_path / "trace.log"
    manager = DebugManager()
    manager.configure(level=DebugLevel.TRACE, log_file=str(log_file))

    manager.debug("debug message")
    manager.trace("trace message")
    manager.configure(log_file="")

    content = read(log_file)
    assert "DEBUG - debug message" in content
    assert "TRACE - trace message" in content


def test_component_filter(tmp_path):
    log_file = tmp_path / "components.log"
    manager = DebugManager()
    manager.configure(level=DebugLevel.INFO, log_file=str(log_file), components=["board"])

    manager.info("from board", "board")
    manager.info("from cli", "cli")
    manager.configure(log_file="")

    content = read(log_file)
    assert "from board" in content
    assert "from cli" not in content


def test_disabled_manager_logs_nothing(tmp_path):
    log_file = tmp_path / "disabled.log"
    manager = DebugManager()
    manager.configure(level=DebugLevel.TRACE, enabled=False, log_file=str(log_file))
    manager.error("should not appear")
    manager.configure(log_file="")
    assert read(log_file) == ""


def test_timers():
    manager = DebugManager()
    manager.start_timer("work")
    elapsed = manager.end_timer("work")
    assert elapsed is not None and elapsed >= 0
    assert manager.end_timer("work") is None


def test_set_from_string():
    assert debug.set_from_string("debug")
    assert debug.level == DebugLevel.DEBUG
    assert not debug.set_from_string("loud")
    assert debug.level == DebugLevel.DEBUG
