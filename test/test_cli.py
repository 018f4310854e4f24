"""
Tests for the interactive menu. Caller input is scripted through input();
running out of script behaves like end of input.
"""

from pathlib import Path

import pytest

from dispatcher import cli
from dispatcher.store import EmergencyDispatcher


@pytest.fixture
def script(monkeypatch):
    """Return a function that queues answers for input()."""
    answers = []

    def fake_input(prompt=""):
        if not answers:
            raise EOFError
        return answers.pop(0)

    monkeypatch.setattr("builtins.input", fake_input)
    return answers.extend


def test_add_medical_then_exit(script, data_file, frozen_time, capsys):
    script(["1", "1", "123 Main St", "chest pain", "1", "Jane Doe", "cardiac", "y", "4"])
    dispatcher = EmergencyDispatcher(data_file)
    cli.run(dispatcher)

    out = capsys.readouterr().out
    assert "Emergency added successfully!" in out
    assert out.rstrip().endswith("Exiting Emergency Dispatcher Simulator. Goodbye!")
    assert Path(data_file).read_text(encoding="utf-8") == (
        "Medical,E1234,123 Main St,chest pain,1,Pending,Jane Doe,cardiac,1\n"
    )


def test_add_fire_and_police(script, data_file, frozen_time):
    script([
        "1", "2", "Warehouse", "smoke", "2", "Industrial", "4", "n",
        "1", "3", "5th Ave", "robbery", "1", "Armed robbery", "Y", "3",
        "4",
    ])
    dispatcher = EmergencyDispatcher(data_file)
    cli.run(dispatcher)

    assert [e.to_file_string() for e in dispatcher] == [
        "Fire,E1234,Warehouse,smoke,2,Pending,Industrial,4,0",
        "Police,E1234,5th Ave,robbery,1,Pending,Armed robbery,1,3",
    ]


def test_invalid_type_creates_nothing(script, data_file, capsys):
    script(["1", "7", "4"])
    dispatcher = EmergencyDispatcher(data_file)
    cli.run(dispatcher)

    assert "Invalid emergency type!" in capsys.readouterr().out
    assert len(dispatcher) == 0
    assert not Path(data_file).exists()


def test_invalid_number_aborts_add(script, data_file, capsys):
    script(["1", "2", "Depot", "flames", "high", "4"])
    dispatcher = EmergencyDispatcher(data_file)
    cli.run(dispatcher)

    assert "Invalid number!" in capsys.readouterr().out
    assert len(dispatcher) == 0


def test_add_when_full_reports_failure(script, data_file, capsys):
    script(["1", "3", "5th Ave", "theft", "3", "Shoplifting", "n", "1", "4"])
    dispatcher = EmergencyDispatcher(data_file, max_emergencies=0)
    cli.run(dispatcher)

    assert "Failed to add emergency." in capsys.readouterr().out


def test_update_status_messages(script, data_file, frozen_time, capsys):
    script([
        "1", "1", "Main St", "fall", "3", "Bob", "fracture", "n",
        "2", "E1234", "Dispatched",
        "2", "E0000", "Resolved",
        "4",
    ])
    dispatcher = EmergencyDispatcher(data_file)
    cli.run(dispatcher)

    out = capsys.readouterr().out
    assert "Status updated successfully!" in out
    assert "Failed to update status. Emergency not found." in out
    assert dispatcher.emergencies[0].status == "Dispatched"


def test_display_empty(script, data_file, capsys):
    script(["3", "4"])
    cli.run(EmergencyDispatcher(data_file))

    out = capsys.readouterr().out
    assert "===== Current Emergencies =====\nNo emergencies recorded.\n" in out


def test_invalid_option_keeps_looping(script, data_file, capsys):
    script(["9", "abc", "4"])
    cli.run(EmergencyDispatcher(data_file))

    out = capsys.readouterr().out
    assert out.count("Invalid option. Please try again.") == 2
    assert out.count("===== Emergency Dispatcher Simulator =====") == 3


def test_end_of_input_exits_cleanly(script, data_file, capsys):
    script(["1", "1", "Main St"])
    dispatcher = EmergencyDispatcher(data_file)
    cli.run(dispatcher)

    assert "Goodbye!" in capsys.readouterr().out
    assert len(dispatcher) == 0


def test_yes_no_uses_first_character(script, data_file):
    script([
        "1", "1", "Main St", "fall", "2", "Bob", "fracture", "Yes",
        "1", "2", "Depot", "flames", "1", "Garage", "3", "yes please",
        "1", "3", "5th Ave", "theft", "3", "Shoplifting", "no", "1",
        "4",
    ])
    dispatcher = EmergencyDispatcher(data_file)
    cli.run(dispatcher)

    medical, fire, police = dispatcher.emergencies
    assert medical.is_urgent is True
    assert fire.hazardous_materials is True
    assert police.suspect_armed is False


def test_update_prompt_lists_conventional_statuses(monkeypatch, data_file):
    prompts = []

    def fake_input(prompt=""):
        prompts.append(prompt)
        return "E1"

    monkeypatch.setattr("builtins.input", fake_input)
    cli.update_status(EmergencyDispatcher(data_file))
    assert prompts[1] == "Enter new status (Pending/Dispatched/Resolved): "
