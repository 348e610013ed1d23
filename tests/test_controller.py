import json

from toggler.core.controller import CONFIG_COMMAND, TOGGLE_COMMAND, TogglerController
from toggler.core.ports import CommandRegistry, Disposable, Editor, TextSelection, UIFeedback, Workspace
from toggler.core.store import CONFIG_FILENAME, ConfigurationStore


class _Disposable(Disposable):
    def __init__(self):
        self.disposed = False

    def dispose(self) -> None:
        self.disposed = True


class _Selection(TextSelection):
    def __init__(self, text="", word_under_cursor=""):
        self.text = text
        self.word_under_cursor = word_under_cursor
        self.inserted = []

    def get_text(self) -> str:
        return self.text

    def select_word(self) -> None:
        self.text = self.word_under_cursor

    def insert_text(self, text: str, select: bool) -> None:
        self.inserted.append((text, select))
        self.text = text if select else ""


class _Editor(Editor):
    def __init__(self, selections):
        self.selections = selections

    def get_selections(self):
        return self.selections


class _Workspace(Workspace):
    def __init__(self, editor=None):
        self.editor = editor
        self.opened = []

    def get_active_editor(self):
        return self.editor

    def open(self, path, on_save):
        subscription = _Disposable()
        self.opened.append((path, on_save, subscription))
        return subscription


class _UI(UIFeedback):
    def __init__(self):
        self.warnings = []
        self.errors = []

    def warning(self, title: str, message: str) -> None:
        self.warnings.append(message)

    def error(self, title: str, message: str, detail=None) -> None:
        self.errors.append((message, detail))


class _Commands(CommandRegistry):
    def __init__(self):
        self.commands = {}
        self.subscriptions = []

    def add(self, name, callback):
        self.commands[name] = callback
        subscription = _Disposable()
        self.subscriptions.append(subscription)
        return subscription


def _controller(tmp_path, groups=None, editor=None, **kwargs):
    path = tmp_path / CONFIG_FILENAME
    if groups is not None:
        path.write_text(json.dumps(groups), encoding="utf-8")
    workspace = _Workspace(editor)
    ui = _UI()
    commands = _Commands()
    controller = TogglerController(ConfigurationStore(path), workspace, ui, commands, **kwargs)
    return controller, workspace, ui, commands


def test_activate_registers_commands_and_loads(tmp_path):
    controller, workspace, ui, commands = _controller(tmp_path, groups=[["true", "false"]])

    controller.activate()

    assert set(commands.commands) == {TOGGLE_COMMAND, CONFIG_COMMAND}
    assert workspace.opened == []
    assert ui.errors == []


def test_activate_without_file_bootstraps_and_opens(tmp_path):
    controller, workspace, ui, commands = _controller(tmp_path)

    controller.activate()

    path = tmp_path / CONFIG_FILENAME
    assert path.exists()
    assert workspace.opened[0][0] == path
    assert ui.errors == []


def test_deactivate_disposes_everything(tmp_path):
    controller, workspace, ui, commands = _controller(tmp_path)
    controller.activate()

    controller.deactivate()

    assert all(s.disposed for s in commands.subscriptions)
    assert workspace.opened[0][2].disposed is True


def test_toggle_replaces_selection_and_reselects(tmp_path):
    selection = _Selection(text="True")
    controller, workspace, ui, commands = _controller(
        tmp_path, groups=[["true", "false"]], editor=_Editor([selection])
    )
    controller.activate()

    commands.commands[TOGGLE_COMMAND]()

    assert selection.inserted == [("False", True)]
    assert ui.warnings == []


def test_toggle_uses_word_under_cursor_without_reselecting(tmp_path):
    selection = _Selection(text="", word_under_cursor="GET")
    controller, workspace, ui, commands = _controller(
        tmp_path, groups=[["get", "set"]], editor=_Editor([selection])
    )
    controller.activate()

    controller.toggle()

    assert selection.inserted == [("SET", False)]


def test_toggle_handles_every_selection(tmp_path):
    first = _Selection(text="get")
    second = _Selection(text="false")
    controller, workspace, ui, commands = _controller(
        tmp_path, groups=[["true", "false"], ["get", "set"]], editor=_Editor([first, second])
    )
    controller.activate()

    controller.toggle()

    assert first.inserted == [("set", True)]
    assert second.inserted == [("true", True)]


def test_toggle_select_after_toggle_disabled(tmp_path):
    selection = _Selection(text="true")
    controller, workspace, ui, commands = _controller(
        tmp_path, groups=[["true", "false"]], editor=_Editor([selection]), select_after_toggle=False
    )
    controller.activate()

    controller.toggle()

    assert selection.inserted == [("false", False)]


def test_toggle_unknown_word_warns(tmp_path):
    selection = _Selection(text="maybe")
    controller, workspace, ui, commands = _controller(
        tmp_path, groups=[["true", "false"]], editor=_Editor([selection])
    )
    controller.activate()

    controller.toggle()

    assert selection.inserted == []
    assert len(ui.warnings) == 1
    assert "'maybe'" in ui.warnings[0]
    assert CONFIG_COMMAND in ui.warnings[0]


def test_toggle_skips_empty_word(tmp_path):
    selection = _Selection(text="", word_under_cursor="")
    controller, workspace, ui, commands = _controller(
        tmp_path, groups=[["true", "false"]], editor=_Editor([selection])
    )
    controller.activate()

    controller.toggle()

    assert selection.inserted == []
    assert ui.warnings == []


def test_toggle_without_editor_or_configuration_is_noop(tmp_path):
    selection = _Selection(text="true")
    controller, workspace, ui, commands = _controller(tmp_path, editor=_Editor([selection]))

    controller.toggle()

    assert selection.inserted == []
    assert ui.warnings == []

    controller, workspace, ui, commands = _controller(tmp_path, groups=[["true", "false"]])
    controller.activate()
    controller.toggle()
    assert ui.warnings == []


def test_unreadable_configuration_reports_error(tmp_path):
    (tmp_path / CONFIG_FILENAME).write_text("not json", encoding="utf-8")
    controller, workspace, ui, commands = _controller(tmp_path)

    controller.activate()

    assert len(ui.errors) == 1
    message, detail = ui.errors[0]
    assert CONFIG_COMMAND in message
    assert detail


def test_save_triggers_reload_and_keeps_old_config_on_error(tmp_path):
    path = tmp_path / CONFIG_FILENAME
    selection = _Selection(text="true")
    controller, workspace, ui, commands = _controller(
        tmp_path, groups=[["true", "false"]], editor=_Editor([selection])
    )
    controller.activate()
    controller.configure()
    on_save = workspace.opened[-1][1]

    path.write_text(json.dumps([["true", "yes"]]), encoding="utf-8")
    on_save()
    controller.toggle()
    assert selection.inserted[-1] == ("yes", True)

    path.write_text("[[", encoding="utf-8")
    on_save()
    assert len(ui.errors) == 1

    selection.text = "true"
    controller.toggle()
    assert selection.inserted[-1] == ("yes", True)


def test_configure_replaces_previous_save_subscription(tmp_path):
    controller, workspace, ui, commands = _controller(tmp_path, groups=[["a", "b"]])
    controller.activate()

    controller.configure()
    controller.configure()

    assert workspace.opened[0][2].disposed is True
    assert workspace.opened[1][2].disposed is False


def test_activate_reports_undecodable_configuration(tmp_path):
    (tmp_path / CONFIG_FILENAME).write_bytes(b'[["\xff\xfe"]]')
    controller, workspace, ui, commands = _controller(tmp_path)

    controller.activate()

    assert len(ui.errors) == 1


def test_reload_reports_deeply_nested_configuration(tmp_path):
    controller, workspace, ui, commands = _controller(tmp_path, groups=[["a", "b"]])
    controller.activate()
    (tmp_path / CONFIG_FILENAME).write_text("[" * 100000 + "]" * 100000, encoding="utf-8")

    assert controller.reload() is False
    assert len(ui.errors) == 1
    assert controller._store.configuration == (("a", "b"),)


def test_configure_reports_unwritable_config_dir(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    store = ConfigurationStore(blocker / CONFIG_FILENAME)
    workspace = _Workspace()
    ui = _UI()
    controller = TogglerController(store, workspace, ui, _Commands())

    controller.activate()

    assert workspace.opened == []
    assert len(ui.errors) == 1
    assert ui.errors[0][1]


def test_configure_disposes_previous_subscription_outside_lock(tmp_path):
    controller, workspace, ui, commands = _controller(tmp_path, groups=[["a", "b"]])
    controller.activate()
    lock_free = []

    class _LockProbingDisposable(_Disposable):
        def dispose(self) -> None:
            acquired = controller._lock.acquire(blocking=False)
            if acquired:
                controller._lock.release()
            lock_free.append(acquired)

    controller._save_subscription = _LockProbingDisposable()
    controller.configure()

    assert lock_free == [True]
