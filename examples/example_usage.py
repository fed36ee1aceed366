"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; everything below is what they call.
"""

from datetime import date

from attendance_tracker.container import build_container


def main():
    container = build_container(storage_backend="file", data_dir="data-example")
    store = container.store

    math = store.add_subject("Mathematics", "#8B5CF6")
    for slot_id in ("1", "2"):
        store.assign_subject_to_slot("Monday", slot_id, math.id)

    today = date.today()
    container.attendance_service.mark_all_day_attendance(today, "Monday", "present")
    container.commit()

    print(container.statistics_service.overall().to_dict())
    print(container.projection_service.monthly_projection().to_dict())


if __name__ == "__main__":
    main()
