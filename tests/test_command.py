from designpatterns.behavioral.command import (
    TV,
    Command,
    DeviceOffCommand,
    DeviceOnCommand,
    RemoteControl,
)


def test_remote_switches_device_on_and_off(capsys):
    device = TV()
    remote = RemoteControl()

    remote.command = DeviceOnCommand(device)
    remote.execute_command()
    assert device.is_running is True

    remote.command = DeviceOffCommand(device)
    remote.execute_command()
    assert device.is_running is False

    assert capsys.readouterr().out == "Device включен.\nDevice выключен.\n"


def test_remote_without_command_reports_it(capsys):
    RemoteControl().execute_command()
    assert capsys.readouterr().out == "Команда не установлена.\n"


def test_custom_command_is_executed():
    class Record(Command):
        def __init__(self):
            self.calls = []

        def execute(self):
            self.calls.append("executed")

    remote = RemoteControl(Record())
    remote.execute_command()
    remote.execute_command()
    assert remote.command.calls == ["executed", "executed"]


def test_tv_starts_off():
    assert TV().is_running is False