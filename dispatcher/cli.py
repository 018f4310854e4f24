"""
Interactive menu for the emergency dispatcher.
Run:  python -m dispatcher   (or the `emergency-dispatcher` script)

Records are kept in DISPATCH_DATA_FILE (default emergencies.txt) and the file
is rewritten after every add or status update. Ctrl-C or end of input exits
the same way as option 4.
"""

from dispatcher.config import DATA_FILE, MAX_EMERGENCIES
from dispatcher.models import STATUSES, FireEmergency, MedicalEmergency, PoliceEmergency
from dispatcher.store import EmergencyDispatcher


def _ask(prompt: str) -> str:
    return input(prompt).strip()


def _ask_int(prompt: str) -> int:
    """Raises ValueError on non-integer input; callers abort the action."""
    return int(_ask(prompt))


def _ask_yes_no(prompt: str) -> bool:
    """Only the first character counts: "Yes" and "y" are both true."""
    return _ask(prompt)[:1] in ("Y", "y")


# =============================================================================
# Variant-specific prompts: each returns a constructed record
# =============================================================================

def _build_medical(location: str, description: str, priority: int) -> MedicalEmergency:
    patient = _ask("Enter patient name: ")
    condition = _ask("Enter condition: ")
    urgent = _ask_yes_no("Is it urgent? (Y/N): ")
    return MedicalEmergency(location, description, priority, patient, condition, urgent)


def _build_fire(location: str, description: str, priority: int) -> FireEmergency:
    building = _ask("Enter building type: ")
    severity = _ask_int("Enter severity (1-5): ")
    hazmat = _ask_yes_no("Hazardous materials present? (Y/N): ")
    return FireEmergency(location, description, priority, building, severity, hazmat)


def _build_police(location: str, description: str, priority: int) -> PoliceEmergency:
    crime = _ask("Enter crime type: ")
    armed = _ask_yes_no("Is suspect armed? (Y/N): ")
    officers = _ask_int("Number of officers needed: ")
    return PoliceEmergency(location, description, priority, crime, armed, officers)


BUILDERS = {
    "1": _build_medical,
    "2": _build_fire,
    "3": _build_police,
}


# =============================================================================
# Menu actions
# =============================================================================

def add_emergency(dispatcher: EmergencyDispatcher):
    print("\nEmergency Type:")
    print("1. Medical Emergency")
    print("2. Fire Emergency")
    print("3. Police Emergency")
    build = BUILDERS.get(_ask("Enter type: "))
    if build is None:
        print("Invalid emergency type!")
        return

    try:
        location = _ask("Enter location: ")
        description = _ask("Enter description: ")
        priority = _ask_int("Enter priority (1-5, where 1 is highest): ")
        emergency = build(location, description, priority)
    except ValueError:
        print("Invalid number!")
        return

    if dispatcher.add_emergency(emergency):
        print("Emergency added successfully!")
    else:
        print("Failed to add emergency.")


def update_status(dispatcher: EmergencyDispatcher):
    emergency_id = _ask("Enter emergency ID: ")
    new_status = _ask(f"Enter new status ({'/'.join(STATUSES)}): ")
    if dispatcher.update_emergency_status(emergency_id, new_status):
        print("Status updated successfully!")
    else:
        print("Failed to update status. Emergency not found.")


def display_all(dispatcher: EmergencyDispatcher):
    print("\n===== Current Emergencies =====")
    dispatcher.display_all_emergencies()


def print_menu():
    print("\n===== Emergency Dispatcher Simulator =====")
    print("1. Add New Emergency")
    print("2. Update Emergency Status")
    print("3. Display All Emergencies")
    print("4. Exit")


ACTIONS = {
    "1": add_emergency,
    "2": update_status,
    "3": display_all,
}


def run(dispatcher: EmergencyDispatcher):
    """Menu loop; returns when the user exits or input runs out."""
    while True:
        print_menu()
        try:
            choice = _ask("Enter your choice: ")
            if choice == "4":
                print("Exiting Emergency Dispatcher Simulator. Goodbye!")
                break
            action = ACTIONS.get(choice)
            if action is None:
                print("Invalid option. Please try again.")
                continue
            action(dispatcher)
        except (KeyboardInterrupt, EOFError):
            print("\nExiting Emergency Dispatcher Simulator. Goodbye!")
            break


def main():
    run(EmergencyDispatcher(DATA_FILE, MAX_EMERGENCIES))


if __name__ == "__main__":
    main()
