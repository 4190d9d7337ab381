from unittest.mock import patch

from use_cases import bootstrap


@patch("use_cases.bootstrap.config.get_secret", return_value=None)
@patch("use_cases.bootstrap.session_manager.init_session_state")
def test_run_startup_logs_once_per_session(mock_init, _mock_get_secret) -> None:
    bootstrap.session_manager.st.session_state.clear()
    bootstrap.session_manager.st.session_state.startup_logged = False

    first = bootstrap.run_startup()
    second = bootstrap.run_startup()

    assert first.status == "CONTINUE"
    assert first.planned_steps == ("init_session_state", "log_startup")
    assert second.planned_steps == ("init_session_state",)
    assert mock_init.call_count == 2


@patch("use_cases.bootstrap.config.get_secret", return_value=None)
def test_run_startup_init_happens_before_logging(_mock_get_secret) -> None:
    order = []
    bootstrap.session_manager.st.session_state.clear()

    def fake_init():
        order.append("init_session_state")
        bootstrap.session_manager.st.session_state.startup_logged = False

    with patch("use_cases.bootstrap.session_manager.init_session_state", side_effect=fake_init), patch(
        "use_cases.bootstrap.log.info", side_effect=lambda _msg: order.append("log_startup")
    ):
        result = bootstrap.run_startup()

    assert result.status == "CONTINUE"
    assert order == ["init_session_state", "log_startup"]
