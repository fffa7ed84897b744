"""Tests for ApplicationState - run state and stop bookkeeping."""
import pytest
from unittest.mock import Mock

from autoshow.ApplicationState import ApplicationState, RunState


class TestApplicationState:

    def test_new_run_is_starting(self):
        state = ApplicationState()

        assert state.state is RunState.STARTING
        assert state.stop_reason is None

    def test_tracking_then_stopped(self):
        state = ApplicationState()

        state.begin_tracking()
        assert state.is_tracking is True

        assert state.stop("signal 15") is True
        assert state.state is RunState.STOPPED
        assert state.stop_reason == "signal 15"

    def test_failed_startup_stops_without_tracking(self):
        state = ApplicationState()

        state.stop("startup failed: no helper")

        assert state.state is RunState.STOPPED
        assert state.is_tracking is False

    def test_only_first_stop_counts(self):
        state = ApplicationState()
        state.begin_tracking()

        assert state.stop("signal 2") is True
        assert state.stop("main loop exited") is False
        assert state.stop_reason == "signal 2"

    def test_cannot_resume_tracking_after_stop(self):
        state = ApplicationState()
        state.stop("startup failed")

        with pytest.raises(ValueError):
            state.begin_tracking()

    def test_cannot_begin_tracking_twice(self):
        state = ApplicationState()
        state.begin_tracking()

        with pytest.raises(ValueError):
            state.begin_tracking()

    def test_observers_see_each_transition_once(self):
        state = ApplicationState()
        observer = Mock()
        state.on_change(observer)

        state.begin_tracking()
        state.stop("requested")
        state.stop("requested again")

        assert [c.args for c in observer.call_args_list] == [
            (RunState.STARTING, RunState.TRACKING),
            (RunState.TRACKING, RunState.STOPPED),
        ]

    def test_observer_sees_new_state_and_reason(self):
        state = ApplicationState()
        seen = []
        state.on_change(lambda old, new: seen.append((state.state, state.stop_reason)))

        state.stop("signal 15")

        assert seen == [(RunState.STOPPED, "signal 15")]
