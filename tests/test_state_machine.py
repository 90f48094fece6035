from hollowzero.state_machine import StateMachine, StateNode


class RecordingState(StateNode):
    def __init__(self, name, log):
        self.name = name
        self.log = log

    def on_enter(self):
        self.log.append((self.name, "enter"))

    def on_update(self, delta_time):
        self.log.append((self.name, "update", delta_time))

    def on_exit(self):
        self.log.append((self.name, "exit"))


def _machine():
    log = []
    machine = StateMachine()
    idle = RecordingState("idle", log)
    run = RecordingState("run", log)
    machine.register_state("idle", idle)
    machine.register_state("run", run)
    return machine, idle, run, log


def test_update_without_state_does_nothing():
    machine, _, _, log = _machine()
    machine.on_update(0.5)
    assert log == []
    assert machine.current_state is None


def test_entry_state_entered_on_first_update_only():
    machine, idle, _, log = _machine()
    machine.set_entry("idle")
    assert machine.current_state is idle
    machine.on_update(0.5)
    machine.on_update(0.25)
    assert log == [("idle", "enter"), ("idle", "update", 0.5), ("idle", "update", 0.25)]


def test_switch_exits_then_enters():
    machine, _, run, log = _machine()
    machine.set_entry("idle")
    machine.on_update(0.5)
    log.clear()
    machine.switch_to("run")
    machine.on_update(0.5)
    assert machine.current_state is run
    assert log == [("idle", "exit"), ("run", "enter"), ("run", "update", 0.5)]


def test_switch_to_unknown_state_clears_current():
    machine, _, _, log = _machine()
    machine.set_entry("idle")
    machine.switch_to("missing")
    assert machine.current_state is None
    assert log == [("idle", "exit")]
    log.clear()
    machine.on_update(0.5)
    assert log == []


def test_set_entry_unknown_state():
    machine, _, _, _ = _machine()
    machine.set_entry("missing")
    assert machine.current_state is None


def test_register_replaces_existing_id():
    machine, _, run, _ = _machine()
    machine.register_state("idle", run)
    machine.set_entry("idle")
    assert machine.current_state is run