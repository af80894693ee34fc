"""Interactive menu shell.

Reads one numbered choice per iteration and dispatches to the matching
operation until the exit choice (or end of input). Operations never print;
everything the operator sees is rendered here.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable

import structlog
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from registrar.core.courses import CourseInput, get_course, list_courses, register_course
from registrar.core.enrollments import enroll, student_enrollments
from registrar.core.errors import DuplicateEnrollmentError, NotFoundError, RegistrarError
from registrar.core.exporter import export_report
from registrar.core.grades import record_grade, student_gpa
from registrar.core.statistics import class_statistics, system_statistics
from registrar.core.students import (
    StudentInput,
    get_student,
    list_students,
    register_student,
    search_students,
)
from registrar.db.record_store import RecordStore
from registrar.db.records import Student
from registrar.utils.text_utils import format_timestamp, truncate

logger = structlog.get_logger(__name__)

EXIT_CHOICE = 16
DIFFICULTY_BOUNDS = (1.0, 5.0)

LEVEL_STYLES = {
    "info": "blue",
    "warning": "yellow",
    "error": "red",
    "success": "green",
}


@dataclass
class ShellSession:
    """What every menu handler needs."""

    store: RecordStore
    console: Console
    export_path: Path


# =============================================================================
# INPUT HELPERS
# =============================================================================


def _prompt_text(label: str, required: bool = False) -> str:
    """Read one line of free text."""
    if required:
        return typer.prompt(label).strip()
    return typer.prompt(label, default="", show_default=False).strip()


def _prompt_int(label: str, console: Console, minimum: int | None = None) -> int:
    """Ask until the line parses as an integer. Bad lines are discarded."""
    while True:
        raw = typer.prompt(label)
        try:
            value = int(raw.strip())
        except ValueError:
            console.print("[yellow]⚠ Please enter a whole number[/yellow]")
            continue
        if minimum is not None and value < minimum:
            console.print(f"[yellow]⚠ Please enter a value of at least {minimum}[/yellow]")
            continue
        return value


def _prompt_float(
    label: str,
    console: Console,
    bounds: tuple[float, float] | None = None,
) -> float:
    """Ask until the line parses as a number (within `bounds`, inclusive, if given)."""
    while True:
        raw = typer.prompt(label)
        try:
            value = float(raw.strip())
        except ValueError:
            console.print("[yellow]⚠ Please enter a number[/yellow]")
            continue
        if bounds is not None and not bounds[0] <= value <= bounds[1]:
            low, high = bounds
            console.print(f"[yellow]⚠ Please enter a value between {low} and {high}[/yellow]")
            continue
        return value


def _header(console: Console, title: str, width: int = 60) -> None:
    console.print("\n" + "=" * width)
    console.print(f"[bold]{title.center(width).rstrip()}[/bold]")
    console.print("=" * width)


def _report_error(console: Console, error: RegistrarError) -> None:
    """Show a failed operation to the operator."""
    if isinstance(error, (NotFoundError, DuplicateEnrollmentError)):
        console.print(f"[yellow]⚠ {escape(str(error))}[/yellow]")
    else:
        console.print(f"[red]✗ {escape(str(error))}[/red]")


def _student_table(students: list[Student]) -> Table:
    table = Table(show_header=True, header_style="bold")
    table.add_column("ID")
    table.add_column("Name")
    table.add_column("Email")
    table.add_column("Phone")
    table.add_column("Major")
    for s in students:
        table.add_row(
            str(s.student_id),
            escape(s.name),
            escape(s.email),
            escape(s.phone),
            escape(s.major),
        )
    return table


# =============================================================================
# STUDENT HANDLERS
# =============================================================================


def _add_student(session: ShellSession) -> None:
    console = session.console
    _header(console, "ADD NEW STUDENT")

    data = StudentInput(
        name=_prompt_text("Enter student name", required=True),
        email=_prompt_text("Enter email address"),
        phone=_prompt_text("Enter phone number"),
        address=_prompt_text("Enter address"),
        admission_year=_prompt_int("Enter admission year", console),
        major=_prompt_text("Enter major"),
    )

    result = register_student(session.store, data)
    for warning in result.warnings:
        console.print(f"[yellow]⚠ {warning}[/yellow]")
    console.print(
        f"\n[green]✓ Student added successfully with ID: {result.student.student_id}[/green]"
    )


def _display_all_students(session: ShellSession) -> None:
    console = session.console
    students = list_students(session.store)
    if not students:
        console.print("[yellow]No students in the system.[/yellow]")
        return

    console.print(_student_table(students))
    console.print(f"Total Active Students: {len(students)}\n")


def _search_students(session: ShellSession) -> None:
    console = session.console
    fragment = _prompt_text("Enter student name to search")
    matches = search_students(session.store, fragment)

    if not matches:
        console.print(f"[yellow]No students found matching '{escape(fragment)}'[/yellow]")
        return

    console.print(_student_table(matches))
    console.print(f"Found {len(matches)} student(s)\n")


def _student_details(session: ShellSession) -> None:
    console = session.console
    student_id = _prompt_int("Enter student ID", console)
    student = get_student(session.store, student_id)

    _header(console, "STUDENT DETAILS")
    console.print(f"[dim]Student ID:[/dim]      {student.student_id}")
    console.print(f"[dim]Name:[/dim]            {escape(student.name)}")
    console.print(f"[dim]Email:[/dim]           {escape(student.email)}")
    console.print(f"[dim]Phone:[/dim]           {escape(student.phone)}")
    console.print(f"[dim]Address:[/dim]         {escape(student.address)}")
    console.print(f"[dim]Admission Year:[/dim]  {student.admission_year}")
    console.print(f"[dim]Major:[/dim]           {escape(student.major)}")
    console.print(f"[dim]Status:[/dim]          {'Active' if student.is_active else 'Inactive'}")
    console.print(f"[dim]Registration:[/dim]    {format_timestamp(student.registered_at)}")
    console.print("=" * 60 + "\n")


# =============================================================================
# COURSE HANDLERS
# =============================================================================


def _add_course(session: ShellSession) -> None:
    console = session.console
    _header(console, "ADD NEW COURSE")

    data = CourseInput(
        code=_prompt_text("Enter course code (e.g., CS101)", required=True),
        name=_prompt_text("Enter course name", required=True),
        description=_prompt_text("Enter course description"),
        credits=_prompt_int("Enter course credits", console, minimum=0),
        max_capacity=_prompt_int("Enter maximum capacity", console, minimum=0),
        difficulty=_prompt_float(
            "Enter difficulty level (1.0 - 5.0)", console, bounds=DIFFICULTY_BOUNDS
        ),
    )

    course = register_course(session.store, data)
    console.print(f"\n[green]✓ Course added successfully with ID: {course.course_id}[/green]")


def _display_all_courses(session: ShellSession) -> None:
    console = session.console
    courses = list_courses(session.store)
    if not courses:
        console.print("[yellow]No courses in the system.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold")
    for column in ("ID", "Code", "Name", "Credits", "Capacity", "Enrolled", "Difficulty"):
        table.add_column(column)
    for c in courses:
        table.add_row(
            str(c.course_id),
            escape(c.code),
            escape(truncate(c.name, 25)),
            str(c.credits),
            str(c.max_capacity),
            str(c.current_enrollment),
            f"{c.difficulty:.1f}",
        )
    console.print(table)
    console.print(f"Total Courses: {len(courses)}\n")


def _course_details(session: ShellSession) -> None:
    console = session.console
    course_id = _prompt_int("Enter course ID", console)
    course = get_course(session.store, course_id)

    rate = course.enrollment_rate
    rate_text = f"{rate * 100:.1f}%" if rate is not None else "N/A"

    _header(console, "COURSE DETAILS", width=70)
    console.print(f"[dim]Course ID:[/dim]           {course.course_id}")
    console.print(f"[dim]Course Code:[/dim]         {escape(course.code)}")
    console.print(f"[dim]Course Name:[/dim]         {escape(course.name)}")
    console.print(f"[dim]Description:[/dim]         {escape(course.description)}")
    console.print(f"[dim]Credits:[/dim]             {course.credits}")
    console.print(f"[dim]Maximum Capacity:[/dim]    {course.max_capacity}")
    console.print(f"[dim]Current Enrollment:[/dim]  {course.current_enrollment}")
    console.print(f"[dim]Enrollment Rate:[/dim]     {rate_text}")
    console.print(f"[dim]Difficulty Level:[/dim]    {course.difficulty:.1f}/5.0")
    console.print(f"[dim]Available Seats:[/dim]     {course.available_seats}")
    console.print("=" * 70 + "\n")


# =============================================================================
# ENROLLMENT AND GRADE HANDLERS
# =============================================================================


def _enroll_student(session: ShellSession) -> None:
    console = session.console
    _header(console, "ENROLL STUDENT")
    student_id = _prompt_int("Enter student ID", console)
    course_id = _prompt_int("Enter course ID", console)

    enrollment = enroll(session.store, student_id, course_id)
    console.print("\n[green]✓ Student successfully enrolled in course![/green]")
    console.print(f"  [dim]Enrollment ID:[/dim] {enrollment.enrollment_id}")


def _view_enrollments(session: ShellSession) -> None:
    console = session.console
    student_id = _prompt_int("Enter student ID", console)
    views = student_enrollments(session.store, student_id)

    if not views:
        console.print("[yellow]Student has no enrollments.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold")
    for column in ("Enr.ID", "Course Name", "Course Code", "Credits", "Grade", "Status"):
        table.add_column(column)
    for view in views:
        course = view.course
        table.add_row(
            str(view.enrollment.enrollment_id),
            escape(course.name) if course else "Unknown",
            escape(course.code) if course else "Unknown",
            str(course.credits) if course else "0",
            f"{view.enrollment.grade:.1f}",
            view.enrollment.status.value.capitalize(),
        )
    console.print(table)
    console.print(f"Total Enrollments: {len(views)}\n")


def _record_grade(session: ShellSession) -> None:
    console = session.console
    _header(console, "RECORD GRADE")
    enrollment_id = _prompt_int("Enter enrollment ID", console)
    score = _prompt_float("Enter grade (0-100)", console)

    enrollment = record_grade(session.store, enrollment_id, score)
    console.print("\n[green]✓ Grade recorded successfully![/green]")
    console.print(f"  [dim]Enrollment ID:[/dim] {enrollment.enrollment_id}")
    console.print(f"  [dim]Grade:[/dim] {enrollment.grade:.2f} ({enrollment.letter_grade})")
    console.print(f"  [dim]GPA Points:[/dim] {enrollment.grade_points:.2f}")


def _student_gpa(session: ShellSession) -> None:
    console = session.console
    student_id = _prompt_int("Enter student ID", console)
    report = student_gpa(session.store, student_id)

    _header(console, "STUDENT GPA")
    console.print(f"Student: {escape(report.student.name)}")
    console.print(f"Student ID: {report.student.student_id}")
    console.print(f"Completed Courses: {report.completed_courses}")
    if report.gpa is not None:
        console.print(f"GPA: {report.gpa:.2f}")
    else:
        console.print("GPA: N/A (No completed courses)")
    console.print("=" * 60 + "\n")


# =============================================================================
# STATISTICS, LOG AND EXPORT HANDLERS
# =============================================================================


def _system_statistics(session: ShellSession) -> None:
    console = session.console
    stats = system_statistics(session.store)

    _header(console, "SYSTEM STATISTICS", width=80)
    console.print(f"Total Students (Active):    {stats.total_students}")
    console.print(f"Total Courses:              {stats.total_courses}")
    console.print(f"Total Enrollments:          {stats.total_enrollments}")
    console.print(f"Total Log Entries:          {stats.total_log_entries}")
    if stats.average_gpa is not None:
        console.print(f"Average GPA (System):       {stats.average_gpa:.2f}")
    if stats.average_enrollment_rate is not None:
        console.print(
            f"Average Enrollment Rate:    {stats.average_enrollment_rate * 100:.1f}%"
        )
    console.print("=" * 80 + "\n")


def _class_statistics(session: ShellSession) -> None:
    console = session.console
    course_id = _prompt_int("Enter course ID", console)
    stats = class_statistics(session.store, course_id)
    course = stats.course

    _header(console, "CLASS STATISTICS", width=70)
    console.print(f"Course: {escape(course.name)} ({escape(course.code)})")
    console.print(f"Course ID: {course.course_id}")
    console.print(f"Total Enrollment: {course.current_enrollment}")
    console.print(f"Students Graded: {stats.graded_count}")
    if stats.has_grades:
        console.print(f"Average Grade: {stats.average:.2f}")
        console.print(f"Highest Grade: {stats.highest:.2f}")
        console.print(f"Lowest Grade: {stats.lowest:.2f}")
        console.print(f"Grade Range: {stats.grade_range:.2f}")
    else:
        console.print("No grades recorded for this course.")
    console.print("=" * 70 + "\n")


def _display_log(session: ShellSession) -> None:
    console = session.console
    entries = session.store.log.entries
    if not entries:
        console.print("[yellow]No log entries.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold")
    for column in ("ID", "Level", "Timestamp", "Operation", "Details"):
        table.add_column(column)
    for entry in entries:
        style = LEVEL_STYLES.get(entry.level.value, "white")
        table.add_row(
            str(entry.log_id),
            f"[{style}]{entry.level.value.upper()}[/{style}]",
            format_timestamp(entry.timestamp),
            escape(entry.operation),
            escape(entry.details),
        )
    console.print(table)
    console.print(f"Total Log Entries: {len(entries)}\n")
    session.store.log.info("Display Log", f"Displayed {len(entries)} entries")


def _export_data(session: ShellSession) -> None:
    result = export_report(session.store, session.export_path)
    session.console.print(
        f"[green]✓ Data exported successfully to '{escape(str(result.path))}'[/green]"
    )


# =============================================================================
# MENU LOOP
# =============================================================================

MENU: dict[int, tuple[str, Callable[[ShellSession], None]]] = {
    1: ("Add Student", _add_student),
    2: ("Display All Students", _display_all_students),
    3: ("Search Student by Name", _search_students),
    4: ("View Student Details", _student_details),
    5: ("Add Course", _add_course),
    6: ("Display All Courses", _display_all_courses),
    7: ("View Course Details", _course_details),
    8: ("Enroll Student in Course", _enroll_student),
    9: ("View Student Enrollments", _view_enrollments),
    10: ("Record Grade", _record_grade),
    11: ("Calculate Student GPA", _student_gpa),
    12: ("Display System Statistics", _system_statistics),
    13: ("Generate Class Statistics", _class_statistics),
    14: ("Display System Log", _display_log),
    15: ("Export Data to File", _export_data),
}


def _print_menu(console: Console) -> None:
    console.print("\n" + "=" * 70)
    console.print("[bold cyan]       STUDENT MANAGEMENT AND ANALYTICS SYSTEM v2.0[/bold cyan]")
    console.print("=" * 70)
    console.print("\n[bold]========== MAIN MENU ==========[/bold]")
    for number, (label, _) in MENU.items():
        console.print(f"{f'{number}.':<4}{label}")
    console.print(f"{f'{EXIT_CHOICE}.':<4}Exit System")
    console.print("===============================")


def _read_choice(session: ShellSession) -> int | None:
    """Read a menu choice. None means invalid input (already reported)."""
    raw = typer.prompt(f"Enter your choice (1-{EXIT_CHOICE})")
    try:
        choice = int(raw.strip())
    except ValueError:
        session.console.print("[yellow]⚠ Invalid input. Please enter a number.[/yellow]")
        session.store.log.warning("Menu", "Invalid input received")
        return None

    if choice != EXIT_CHOICE and choice not in MENU:
        session.console.print(
            f"[yellow]⚠ Invalid choice! Please select a valid option (1-{EXIT_CHOICE}).[/yellow]"
        )
        session.store.log.warning("Menu", "Invalid choice selected")
        return None

    return choice


def _shutdown(session: ShellSession) -> None:
    console = session.console
    console.print("\n" + "=" * 70)
    console.print("Thank you for using Student Management System!")
    console.print("System shutting down...")
    session.store.log.info("System Shutdown", "System exited normally")
    console.print("=" * 70 + "\n")


def run_shell(store: RecordStore, console: Console, export_path: Path) -> None:
    """Run the menu loop until the exit choice or end of input."""
    session = ShellSession(store=store, console=console, export_path=export_path)

    console.print("\n**** INITIALIZING STUDENT MANAGEMENT SYSTEM ****")
    store.log.info("System Init", "System started successfully")
    console.print("**** READY ****")
    logger.debug("shell.started", export_path=str(export_path))

    while True:
        _print_menu(console)
        try:
            choice = _read_choice(session)
            if choice is None:
                continue
            if choice == EXIT_CHOICE:
                break

            _, handler = MENU[choice]
            try:
                handler(session)
            except RegistrarError as e:
                _report_error(console, e)
        except typer.Abort:
            # End of input
            logger.debug("shell.input_closed")
            break

    _shutdown(session)
