from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.classifier import AttendanceClassifier
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_LATE_THRESHOLD_MINUTES
from .database.connection import DBConfig, DatabaseConnection
from .payroll.aggregator import TimekeepingAggregator
from .payroll.service import PayrollReportService
from .sessions.registry import SessionRegistry


@dataclass(frozen=True)
class Container:
    attendance_repo: AttendanceRepository

    classifier: AttendanceClassifier
    aggregator: TimekeepingAggregator

    attendance_service: AttendanceService
    payroll_report_service: PayrollReportService
    session_registry: SessionRegistry


def build_container(
    *,
    db_config: Optional[dict] = None,
    late_threshold_minutes: int = DEFAULT_LATE_THRESHOLD_MINUTES,
    attendance_repo: Optional[AttendanceRepository] = None,
) -> Container:
    """Wire repositories and services.

    Pass `attendance_repo` to run against another store (tests use in-memory fakes);
    otherwise `db_config` is required for the MySQL repository.
    """
    if attendance_repo is None:
        if db_config is None:
            raise ValueError("db_config is required when no attendance_repo is given")
        conn = DatabaseConnection(DBConfig.from_mapping(db_config))
        attendance_repo = MySQLAttendanceRepository(conn)

    classifier = AttendanceClassifier(late_threshold_minutes=int(late_threshold_minutes))
    aggregator = TimekeepingAggregator(classifier=classifier)

    return Container(
        attendance_repo=attendance_repo,
        classifier=classifier,
        aggregator=aggregator,
        attendance_service=AttendanceService(attendance_repo, classifier=classifier),
        payroll_report_service=PayrollReportService(attendance_repo, aggregator=aggregator),
        session_registry=SessionRegistry(),
    )
