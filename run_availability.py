"""
Main Execution Script for the clinic agenda availability engine.

Loads professionals (with their free-text hours) and existing appointments
from a JSON data file, prints the day agenda of every professional and
exports the resolved slots for the dashboard.
"""

import os
import json
import logging
from datetime import date, datetime
from typing import Dict, List, Optional, Tuple

from availability import AvailabilityEngine, DayReport
from models import Appointment, VOCABULARIES

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler()]
)
logger = logging.getLogger("Main")

# --- CONFIGURATION ---
DATA_FILENAME = os.environ.get("AGENDA_DATA_FILE", "sample_data.json")
EXPORT_FILENAME = os.environ.get("AGENDA_EXPORT_FILE", "agenda_slots.json")
TARGET_DATE = os.environ.get("AGENDA_DATE")  # ISO date, defaults to today
LOCALE = os.environ.get("AGENDA_LOCALE", "pt-BR")
# ---------------------


def load_agenda_data(filename: str) -> Tuple[Optional[List[Dict]], List[Appointment]]:
    """
    Load professionals and appointments from JSON.
    Invalid appointment records are logged and skipped; a missing or broken
    file yields (None, []).
    """
    try:
        with open(filename, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (FileNotFoundError, json.JSONDecodeError) as e:
        logger.warning(f"Data file {filename} not found or invalid: {e}")
        return None, []

    professionals = data.get('professionals', [])

    appointments = []
    for record in data.get('appointments', []):
        try:
            appointments.append(Appointment.from_record(record))
        except ValueError as e:
            logger.warning(f"Skipping appointment record: {e}")

    logger.info(f"Loaded {len(professionals)} professionals, {len(appointments)} appointments from {filename}")
    return professionals, appointments


def export_agenda_data(reports: List[DayReport], filename: str) -> None:
    """Serializes the day reports into a JSON format for the frontend."""
    logger.info(f"Exporting agenda data to {filename}...")

    data = {
        "generated_at": datetime.now().isoformat(timespec='seconds'),
        "agendas": [report.to_dict() for report in reports]
    }

    with open(filename, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
    logger.info("Agenda data exported.")


def print_report(name: str, report: DayReport) -> None:
    stats = report.statistics
    print("\n" + "=" * 50)
    print(f"{name} - {report.weekday} {report.date.isoformat()}")
    print("=" * 50)

    if not report.slots:
        print("No slots for this day.")
        return

    for period, slots in report.periods.items():
        if not slots:
            continue
        print(f"[{period}]")
        for slot in slots:
            suffix = f" ({slot.occupant_label})" if slot.occupant_label else ""
            print(f"  {slot.time}  {slot.status.value}{suffix}")

    print(f"Available: {stats['available']}/{stats['total_slots']}  "
          f"Occupancy: {stats['occupancy_rate']}%")


def main(
    data_file: str = DATA_FILENAME,
    export_file: Optional[str] = EXPORT_FILENAME,
    target_date: Optional[date] = None,
    locale: str = LOCALE
) -> List[DayReport]:
    vocabulary = VOCABULARIES.get(locale)
    if vocabulary is None:
        logger.error(f"Unknown locale '{locale}'. Known: {', '.join(VOCABULARIES)}")
        return []

    if target_date is None:
        try:
            target_date = date.fromisoformat(TARGET_DATE) if TARGET_DATE else date.today()
        except ValueError:
            logger.error(f"Invalid AGENDA_DATE '{TARGET_DATE}', expected YYYY-MM-DD")
            return []

    professionals, appointments = load_agenda_data(data_file)
    if not professionals:
        logger.error("No professionals available. Exiting.")
        return []

    engine = AvailabilityEngine(vocabulary=vocabulary)
    reports = []

    for professional in professionals:
        if 'id' not in professional:
            logger.warning(f"Skipping professional without id: {professional.get('name', '?')}")
            continue

        report = engine.day_report(
            professional.get('schedule'),
            professional['id'],
            appointments,
            target_date
        )
        reports.append(report)
        print_report(professional.get('name', str(professional['id'])), report)

    if export_file:
        export_agenda_data(reports, export_file)

    return reports


if __name__ == "__main__":
    main()
