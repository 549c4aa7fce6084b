#!/usr/bin/env python3
"""
Quick verification that the task board works end-to-end.
"""
from taskboard import BoardConfig, BoardSession, ValidationError
from taskboard.board import board_summary, task_summary
from taskboard.config import setup_logging


def main():
    print("=" * 60)
    print("Task Board Verification")
    print("=" * 60)

    config = BoardConfig.load()
    config.sequential_ids = True
    setup_logging(config.log_level)

    # Create session
    print("\n[1/7] Loading catalog and sample tasks...")
    session = BoardSession.from_config(config)
    print(f"✅ {len(session.catalog.columns)} columns, {len(session.store)} tasks")

    # Reject incomplete form
    print("\n[2/7] Submitting a task without a title...")
    try:
        session.add_task(title="  ", due_date="2024-09-30")
        print("❌ Empty title was accepted")
        return
    except ValidationError as e:
        print(f"✅ Rejected: {e}")

    # Create task
    print("\n[3/7] Creating a task...")
    task = session.add_task(
        title="Flux capacitor inspection",
        description="Check the housing before the bid review",
        status="To-Do List",
        priority="High",
        due_date="2024-09-30",
        assignee="user2",
    )
    print(f"✅ Task created: {task.id} in '{task.status}'")

    # Drag it across the board
    print("\n[4/7] Dragging the task to 'In Progress'...")
    session.begin_drag(task.id)
    session.hover_column("In Progress")
    outcome = session.drop("In Progress")
    print(f"✅ Outcome: {outcome.value}, status now '{task.status}'")

    # Comment thread
    print("\n[5/7] Opening the task and commenting...")
    session.select_task(task.id)
    session.add_comment(task.id, "Housing looks fine.")
    print(task_summary(session.selected_task))

    # Search
    print("\n[6/7] Searching for 'FLUX'...")
    session.set_query("FLUX")
    print(board_summary(session.visible_tasks(), session.catalog))
    session.set_query("")

    # Delete
    print("\n[7/7] Deleting the selected task...")
    session.delete_task(task.id)
    assert session.selected_task is None
    print(f"✅ Deleted; selection cleared, {len(session.store)} tasks left")

    print("\n" + "=" * 60)
    print("✅ ALL CHECKS PASSED")
    print("=" * 60)


if __name__ == "__main__":
    main()
