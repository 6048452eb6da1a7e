"""Hochschul-Datensätze: Haupt-CLI.

Verwendung:
  python main.py                              Demo-Ablauf (wie 'demo')
  python main.py demo                         Demo: anlegen, einschreiben, speichern, laden
  python main.py students                     Studierende aus der Datei anzeigen
  python main.py courses                      Kurse aus der Datei anzeigen
  python main.py find <id> [--course]         Datensatz per ID suchen
  python main.py add-student <id> <name>      Studierende/n aufnehmen
  python main.py add-course <id> <titel>      Kurs anlegen
  python main.py enroll <student> <kurs>      Einschreiben (mit Kapazitätsprüfung)
  python main.py config show                  Konfiguration anzeigen
  python main.py config init                  Default-Konfiguration anlegen
"""

import logging
import sys
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table
from rich import box

console = Console()


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(show_time=False, show_path=False)],
        force=True,
    )


def _load_config_or_abort():
    """Lädt die Konfiguration (oder Defaults) und richtet das Logging ein."""
    from config.manager import ConfigManager
    mgr = ConfigManager()
    try:
        config = mgr.load_or_default()
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)
    _setup_logging(config.logging.level)
    return config


def _load_campus(config):
    """Lädt Kurse und Studierende aus den Satzdateien in einen Campus."""
    from data.record_store import RecordStore
    from models.campus import Campus
    from models.errors import StorageUnavailableError

    store = RecordStore.from_config(config.storage)
    campus = Campus(config.enrollment)
    try:
        reports = [
            store.load_courses(campus.courses),
            store.load_students(campus.students, campus.roll_counter),
        ]
    except StorageUnavailableError as e:
        console.print(f"[red bold]Laden fehlgeschlagen:[/red bold] {escape(str(e))}")
        sys.exit(1)
    for report in reports:
        if report.diagnostics:
            report.print_rich()
    return campus, store


def _save_campus_or_abort(campus, store) -> None:
    from models.errors import StorageUnavailableError
    try:
        store.save_courses(campus.courses)
        store.save_students(campus.students)
    except StorageUnavailableError as e:
        console.print(f"[red bold]Speichern fehlgeschlagen:[/red bold] {escape(str(e))}")
        sys.exit(1)


# ─── DEMO ─────────────────────────────────────────────────────────────────────

@click.command("demo")
def cmd_demo():
    """Fester Demo-Ablauf: Kurse, Personen, Einschreibung, Speichern, Laden."""
    config = _load_config_or_abort()
    from data.demo_data import build_demo_campus, fill_course
    from data.record_store import RecordStore
    from models.enrollment import EnrollmentResult
    from models.errors import StorageUnavailableError
    from models.record_list import RecordList
    from models.roll_counter import RollCounter

    console.print(Panel(
        "[bold]Hochschul-Datensätze[/bold]\n"
        "Kurse, Studierende, Lehrende und Dateiablage im Überblick.",
        border_style="cyan",
    ))

    campus = build_demo_campus(config)
    math_c = campus.course(101)
    cs_c = campus.course(201)

    # ── Kurse & Kapazität ────────────────────────────────────────────────────
    console.print(Rule("Kurse & Kapazität"))
    console.print(escape(str(cs_c)))
    console.print(f"Angelegte Kurse: {campus.total_courses}")

    results = fill_course(cs_c)
    console.print(f"Aktuelle Belegung Kurs {cs_c.id}: {cs_c.enrolled}")
    if results[-1] is EnrollmentResult.COURSE_FULL:
        console.print(f"[red]Kurs {cs_c.id} ist voll – Einschreibung abgelehnt.[/red]")

    # ── Personen ─────────────────────────────────────────────────────────────
    console.print(Rule("Personen"))
    console.print(f"Aufgenommene Studierende: {campus.total_students}")
    for person in [campus.student(5001), campus.faculty_member(7001)]:
        person.display_details(console)

    # ── Einschreibung ────────────────────────────────────────────────────────
    console.print(Rule("Einschreibung"))
    alice = campus.student(5001)
    bob = campus.student(5002)
    alice.enroll(math_c.id)
    bob.enroll_in(math_c)
    result = bob.enroll_in(cs_c)
    if result is EnrollmentResult.COURSE_FULL:
        console.print(f"[yellow]{escape(bob.name)}: Kurs {cs_c.id} voll, nicht eingeschrieben.[/yellow]")
    campus.assign_course(7001, math_c.id)
    chen = campus.faculty_member(7001)
    taught = ", ".join(c.title for c in chen.courses_taught(campus.courses))
    console.print(f"{escape(chen.name)} unterrichtet: {escape(taught)}")

    # ── Speichern ────────────────────────────────────────────────────────────
    console.print(Rule("Dateiablage"))
    store = RecordStore.from_config(config.storage)
    try:
        store.save_students(campus.students)
        store.save_courses(campus.courses)
        console.print(f"[green]✓[/green] Gespeichert: {store.student_path}, {store.course_path}")
    except StorageUnavailableError as e:
        console.print(f"[red bold]Dateifehler:[/red bold] {escape(str(e))}")

    # ── Laden in neue Liste ──────────────────────────────────────────────────
    console.print(Rule("Laden (neue Liste)"))
    loaded: RecordList = RecordList()
    report = store.load_students(loaded, RollCounter(config.enrollment.first_roll_number))
    report.print_rich()
    loaded.display_all(console)

    found = loaded.find(5001)
    if found is not None:
        console.print(f"Gefunden für ID 5001: [bold]{escape(found.name)}[/bold]")

    console.print(f"\n[dim]{campus.summary()}[/dim]")


# ─── ANZEIGEN ─────────────────────────────────────────────────────────────────

@click.command("students")
def cmd_students():
    """Zeigt alle Studierenden aus der Studierenden-Datei."""
    config = _load_config_or_abort()
    campus, _ = _load_campus(config)
    campus.students.display_all(console)
    console.print(f"[dim]{campus.total_students} Studierende[/dim]")


@click.command("courses")
def cmd_courses():
    """Zeigt alle Kurse aus der Kurs-Datei."""
    config = _load_config_or_abort()
    campus, _ = _load_campus(config)

    if not campus.courses.count():
        console.print("[dim]Keine Kurse vorhanden.[/dim]")
        return
    table = Table(title="Kurse", box=box.ROUNDED)
    table.add_column("Code", style="bold")
    table.add_column("Titel")
    table.add_column("Belegung", justify="right")
    table.add_column("Frei", justify="right")
    for c in campus.courses:
        free = "[red]voll[/red]" if c.is_full else str(c.free_seats)
        table.add_row(str(c.id), escape(c.title), f"{c.enrolled}/{c.capacity}", free)
    console.print(table)


@click.command("find")
@click.argument("record_id", type=int)
@click.option("--course", "is_course", is_flag=True, default=False,
              help="In den Kursen statt bei den Studierenden suchen.")
def cmd_find(record_id: int, is_course: bool):
    """Sucht einen Datensatz per ID (lineare Suche)."""
    config = _load_config_or_abort()
    campus, _ = _load_campus(config)
    records = campus.courses if is_course else campus.students
    found = records.find(record_id)
    if found is None:
        console.print(f"[yellow]Kein Datensatz mit ID {record_id}.[/yellow]")
        sys.exit(1)
    found.display_details(console)


# ─── ANLEGEN ──────────────────────────────────────────────────────────────────

@click.command("add-student")
@click.argument("student_id", type=int)
@click.argument("name")
@click.option("--roll", type=int, default=None,
              help="Roll-Nummer explizit setzen (sonst automatisch).")
def cmd_add_student(student_id: int, name: str, roll: Optional[int]):
    """Nimmt eine/n Studierende/n auf und speichert die Datei."""
    config = _load_config_or_abort()
    campus, store = _load_campus(config)
    if campus.students.find(student_id) is not None:
        console.print(f"[red]Student mit ID {student_id} existiert bereits.[/red]")
        sys.exit(1)
    student = campus.admit_student(name, student_id, roll)
    _save_campus_or_abort(campus, store)
    console.print(
        f"[green]✓[/green] {escape(student.name)} aufgenommen (Roll-Nr. {student.roll_number})."
    )


@click.command("add-course")
@click.argument("course_id", type=int)
@click.argument("title")
@click.option("--capacity", type=click.IntRange(min=0), default=None,
              help="Platzzahl (Default aus der Konfiguration).")
def cmd_add_course(course_id: int, title: str, capacity: Optional[int]):
    """Legt einen Kurs an und speichert die Datei."""
    config = _load_config_or_abort()
    campus, store = _load_campus(config)
    if campus.courses.find(course_id) is not None:
        console.print(f"[red]Kurs mit ID {course_id} existiert bereits.[/red]")
        sys.exit(1)
    course = campus.add_course(course_id, title, capacity)
    _save_campus_or_abort(campus, store)
    console.print(f"[green]✓[/green] {escape(str(course))}")


# ─── EINSCHREIBEN ─────────────────────────────────────────────────────────────

@click.command("enroll")
@click.argument("student_id", type=int)
@click.argument("course_id", type=int)
def cmd_enroll(student_id: int, course_id: int):
    """Schreibt eine/n Studierende/n in einen Kurs ein (mit Kapazitätsprüfung)."""
    config = _load_config_or_abort()
    from models.enrollment import EnrollmentResult
    from models.errors import RecordNotFoundError

    campus, store = _load_campus(config)
    try:
        result = campus.enroll(student_id, course_id)
    except RecordNotFoundError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)

    if not result.ok:
        console.print(f"[red bold]Kurs {course_id} ist voll.[/red bold] Keine Einschreibung.")
        sys.exit(1)
    if result is EnrollmentResult.ALREADY_ENROLLED:
        console.print(f"[yellow]Bereits in Kurs {course_id} eingeschrieben.[/yellow]")
        return
    _save_campus_or_abort(campus, store)
    console.print(f"[green]✓[/green] {escape(campus.student(student_id).name)} → {escape(str(campus.course(course_id)))}")


# ─── CONFIG ───────────────────────────────────────────────────────────────────

@click.group("config")
def cmd_config():
    """Konfiguration anzeigen oder anlegen."""


@cmd_config.command("show")
def config_show():
    """Zeigt die aktive Konfiguration an (Datei oder Defaults)."""
    from config.manager import ConfigManager
    config = _load_config_or_abort()
    source = "Defaults" if ConfigManager().first_run_check() else str(ConfigManager.DEFAULT_CONFIG)

    table = Table(title=f"Konfiguration ({source})", box=box.ROUNDED)
    table.add_column("Abschnitt", style="bold")
    table.add_column("Parameter")
    table.add_column("Wert")
    for section, values in config.model_dump().items():
        for key, value in values.items():
            table.add_row(section, key, str(value))
    console.print(table)


@cmd_config.command("init")
@click.option("--force", is_flag=True, default=False,
              help="Bestehende Konfiguration überschreiben.")
def config_init(force: bool):
    """Legt die Default-Konfiguration als YAML an."""
    from config.manager import ConfigManager
    from config.defaults import default_records_config

    mgr = ConfigManager()
    if not mgr.first_run_check() and not force:
        console.print(
            "[yellow]Eine Konfiguration existiert bereits.[/yellow]\n"
            "Mit [bold]--force[/bold] überschreiben."
        )
        return
    mgr.save(default_records_config())


# ─── HAUPT-CLI ────────────────────────────────────────────────────────────────

@click.group()
def cli():
    """Hochschul-Datensätze: Studierende, Kurse und Einschreibungen.

    Ohne Befehl läuft der Demo-Ablauf.
    """


def main():
    """Einstiegspunkt. Ohne Argumente startet der Demo-Ablauf."""
    if len(sys.argv) == 1:
        sys.argv.append("demo")
    cli()


# Befehle registrieren
cli.add_command(cmd_demo)
cli.add_command(cmd_students)
cli.add_command(cmd_courses)
cli.add_command(cmd_find)
cli.add_command(cmd_add_student)
cli.add_command(cmd_add_course)
cli.add_command(cmd_enroll)
cli.add_command(cmd_config)


if __name__ == "__main__":
    main()
